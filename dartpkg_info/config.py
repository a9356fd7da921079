"""
Configuration management for dartpkg-info.
"""

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    """Package metadata endpoint configuration."""
    scheme: str = Field(
        "https",
        description="URL scheme used for the metadata endpoint"
    )
    host: str = Field(
        "dart.dev",
        description="Host serving package metadata"
    )
    path_template: str = Field(
        "/f/packages/{package_name}.json",
        description="Path of a package document, formatted with package_name"
    )
    timeout: Optional[float] = Field(
        None,
        description="Request timeout in seconds (None leaves the transport default)"
    )


class Settings(BaseSettings):
    """Main configuration settings."""
    api: APIConfig = APIConfig()
    packages: List[str] = Field(
        default=["http", "path"],
        description="Packages reported when none are given on the command line"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    model_config = SettingsConfigDict(
        env_prefix="DARTPKG_INFO_",
        env_nested_delimiter="__"
    )
