"""
Command-line interface for dartpkg-info.
"""

import logging
import sys
from typing import Iterable, Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .client import PackageClient, fetch_package
from .config import Settings
from .display import print_details, write_line
from .models import FetchFailure

# Reports go to stdout, logs to stderr
console = Console()
err_console = Console(stderr=True)


class RichConsoleHandler(logging.Handler):
    def emit(self, record):
        try:
            msg = escape(self.format(record))
            level = record.levelname

            if level == 'DEBUG':
                err_console.print(f"[dim]{msg}[/dim]")
            elif level == 'INFO':
                err_console.print(msg)
            elif level == 'WARNING':
                err_console.print(f"[yellow]{msg}[/yellow]")
            elif level == 'ERROR':
                err_console.print(f"[red]{msg}[/red]")
            elif level == 'CRITICAL':
                err_console.print(f"[red bold]{msg}[/red bold]")
        except Exception:
            self.handleError(record)


# Configure root logger
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichConsoleHandler()]
)

logger = logging.getLogger("dartpkg_info")


def run(
    package_names: Iterable[str],
    client: Optional[PackageClient] = None,
    output_console: Optional[Console] = None,
) -> None:
    """
    Fetch and print each package in turn.

    A failed retrieval prints its message and moves on to the next
    package. Decode and transport errors are left to the caller.

    Args:
        package_names: Packages to report, in order
        client: Client used for every fetch
        output_console: Console receiving the report text
    """
    client = client or PackageClient()
    output_console = output_console or console

    reported = False
    for package_name in package_names:
        result = fetch_package(package_name, client)

        # Separator only once there is a next report to print
        if reported:
            write_line(output_console)
        reported = True

        if isinstance(result, FetchFailure):
            write_line(output_console, str(result.error))
        else:
            print_details(result.info, output_console)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--package",
    "packages",
    multiple=True,
    help="Package to report (can be specified multiple times, defaults to the configured list)",
)
@click.option(
    "--host",
    default=None,
    help="Host serving package metadata (can also be set via DARTPKG_INFO_API__HOST env var)",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Request timeout in seconds",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug mode for more verbose output",
)
def cli(packages, host, timeout, debug):
    """dartpkg-info - Print published metadata for Dart packages."""
    settings = Settings()

    log_level = logging.DEBUG if debug or settings.debug else logging.INFO
    logger.setLevel(log_level)

    overrides = {}
    if host:
        overrides["host"] = host
    if timeout is not None:
        overrides["timeout"] = timeout
    api_config = settings.api.model_copy(update=overrides)

    package_names = list(packages) or settings.packages
    logger.debug(f"Reporting packages: {', '.join(package_names)}")

    run(package_names, client=PackageClient(api_config), output_console=console)


def main():
    """Entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        logger.exception("Unhandled exception")
        err_console.print(f"[red]Unhandled error: {escape(str(e))}[/red]")
        sys.exit(1)
