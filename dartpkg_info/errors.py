"""
Errors raised while retrieving package metadata.
"""

from typing import Optional


class RetrievalError(Exception):
    """A package could not be retrieved from the metadata endpoint."""

    def __init__(self, package_name: str, status_code: Optional[int] = None):
        self.package_name = package_name
        self.status_code = status_code
        super().__init__(package_name, status_code)

    def __str__(self) -> str:
        message = f"Failed to retrieve package:{self.package_name} information"
        if self.status_code is not None:
            message += f" with a status code of {self.status_code}"
        return f"{message}!"


class PackageDecodeError(Exception):
    """A 200 response did not contain a usable package document."""

    def __init__(self, package_name: str, reason: str):
        self.package_name = package_name
        self.reason = reason
        super().__init__(package_name, reason)

    def __str__(self) -> str:
        return f"Could not decode metadata for package:{self.package_name}: {self.reason}"
