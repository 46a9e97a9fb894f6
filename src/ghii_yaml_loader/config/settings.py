"""Loader settings.

Settings only drive the ambient logging stack. The load policy itself
(``throw_on_error`` and the logger callback) is always passed explicitly to
the factory.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ghii_yaml_loader.config.validators import (
    resolve_optional_path,
    validate_log_format,
    validate_log_level,
)


class LoaderSettings(BaseSettings):
    """Environment-driven settings for ghii-yaml-loader.

    Values come from ``YAML_LOADER_*`` environment variables, then a local
    ``.env`` file, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="YAML_LOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(default="console", description="Log format (json or console)")
    log_file: Path | None = Field(
        default=None, description="Optional JSON-lines log file (rotated at 10 MB)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        return validate_log_level(v)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        return validate_log_format(v)

    @field_validator("log_file", mode="before")
    @classmethod
    def resolve_log_file(cls, v: Path | str | None) -> Path | None:
        """Resolve the log file path to absolute."""
        return resolve_optional_path(v)


@lru_cache(maxsize=1)
def get_settings() -> LoaderSettings:
    """Get the cached settings instance.

    Returns:
        LoaderSettings loaded from the environment.

    Example:
        >>> from ghii_yaml_loader.config import get_settings
        >>> get_settings().log_level
        'INFO'
    """
    return LoaderSettings()
