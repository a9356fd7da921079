"""
Model for a Dart package's published metadata.
"""

import re
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, StrictStr, field_validator


def is_uri_reference(value: str) -> bool:
    """Return True if value parses as an absolute or relative URI reference."""
    try:
        parts = urlsplit(value)
        parts.port
    except ValueError:
        return False

    # A relative reference cannot have a colon in its first path segment
    if not parts.scheme and ":" in re.split(r"[/?#]", value, maxsplit=1)[0]:
        return False
    return True


class PackageInfo(BaseModel):
    """
    Snapshot of one package's metadata as served by dart.dev.

    The endpoint uses camelCase keys, so ``latest_version`` is read from
    ``latestVersion``. Instances are immutable once built.
    """
    name: StrictStr
    latest_version: StrictStr = Field(..., alias="latestVersion")
    description: StrictStr
    publisher: StrictStr
    repository: Optional[str] = None

    model_config = {
        "extra": "ignore",
        "frozen": True,
        "validate_by_name": True,
        "validate_by_alias": True
    }

    @field_validator("repository", mode="before")
    @classmethod
    def drop_unparseable_repository(cls, value: Any) -> Optional[str]:
        """Keep the repository as received, or drop it if it is not a URI."""
        if isinstance(value, str) and is_uri_reference(value):
            return value
        return None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PackageInfo":
        """Build a PackageInfo from a decoded JSON object, by its camelCase keys."""
        return cls.model_validate(data, by_alias=True, by_name=False)
