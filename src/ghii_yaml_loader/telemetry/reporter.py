"""Default error reporter used when a loader is built without a logger."""

from typing import Any

from ghii_yaml_loader.telemetry.events import YAML_SOURCE_FAILED
from ghii_yaml_loader.telemetry.logger import get_logger

log = get_logger(__name__)


def default_logger(error: Any, message: str) -> None:
    """Write a load failure to stderr through the structured logger.

    Never raises for any ``error`` value.

    Args:
        error: The error value handed over by the loader (an exception or any object).
        message: Human-readable message; always contains the source path.
    """
    log.warning(
        YAML_SOURCE_FAILED,
        message=message,
        error=str(error),
        error_type=type(error).__name__,
    )
