"""
Console output for package reports.
"""

from typing import List, Optional

from rich.console import Console

from .models import PackageInfo


def write_line(console: Console, text: str = "") -> None:
    """Write text verbatim, without markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def format_details(info: PackageInfo) -> List[str]:
    """Return the report lines for a package."""
    lines = [
        f"Information about the {info.name} package:",
        f"Latest version: {info.latest_version}",
        f"Description: {info.description}",
        f"Publisher: {info.publisher}",
    ]
    if info.repository is not None:
        lines.append(f"Repository: {info.repository}")
    return lines


def print_details(info: PackageInfo, console: Optional[Console] = None) -> None:
    output_console = console or Console()
    for line in format_details(info):
        write_line(output_console, line)
