"""
Client for the dart.dev package metadata endpoint.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .config import APIConfig
from .errors import PackageDecodeError, RetrievalError
from .models import FetchFailure, FetchResult, FetchSuccess, PackageInfo

logger = logging.getLogger("dartpkg_info")


class PackageClient:
    """Client for fetching package documents from dart.dev."""

    def __init__(self, config: Optional[APIConfig] = None):
        """Initialize the client with a plain session (no retries)."""
        self.config = config or APIConfig()
        self.session = requests.Session()

    def package_url(self, package_name: str) -> str:
        """Build the document URL for a package, substituting the name verbatim."""
        path = self.config.path_template.format(package_name=package_name)
        return f"{self.config.scheme}://{self.config.host}{path}"

    def get_package(self, package_name: str) -> PackageInfo:
        """
        Fetch and decode metadata for a single package.

        Args:
            package_name: Name of the package to look up

        Returns:
            PackageInfo built from the response body

        Raises:
            RetrievalError: The endpoint answered with a status other than 200
            PackageDecodeError: The body was not a valid package document
        """
        url = self.package_url(package_name)
        logger.debug(f"Fetching package metadata from: {url}")

        response = self.session.get(url, timeout=self.config.timeout)
        logger.debug(f"Response status for {package_name}: {response.status_code}")

        if response.status_code != 200:
            raise RetrievalError(package_name, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise PackageDecodeError(package_name, f"response is not JSON ({e})") from e

        if not isinstance(data, dict):
            raise PackageDecodeError(package_name, "response is not a JSON object")

        try:
            return PackageInfo.from_json(data)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise PackageDecodeError(package_name, f"invalid or missing fields: {fields}") from e


def fetch_package(package_name: str, client: Optional[PackageClient] = None) -> FetchResult:
    """
    Fetch a package and report the outcome as a result value.

    A non-200 status becomes a FetchFailure. PackageDecodeError and
    transport errors are raised to the caller.
    """
    client = client or PackageClient()
    try:
        return FetchSuccess(client.get_package(package_name))
    except RetrievalError as e:
        logger.debug(f"Retrieval failed: {e}")
        return FetchFailure(e)
