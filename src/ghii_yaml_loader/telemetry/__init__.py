"""Telemetry module: structured logging and semantic event names."""

from ghii_yaml_loader.telemetry.events import (
    YAML_SOURCE_EMPTY,
    YAML_SOURCE_FAILED,
    YAML_SOURCE_LOADED,
    YAML_SOURCE_LOADING,
)
from ghii_yaml_loader.telemetry.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    # Event constants
    "YAML_SOURCE_LOADING",
    "YAML_SOURCE_LOADED",
    "YAML_SOURCE_EMPTY",
    "YAML_SOURCE_FAILED",
]
