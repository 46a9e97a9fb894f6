"""Custom Pydantic validators for loader settings."""

from pathlib import Path


def validate_log_level(value: str) -> str:
    """Validate log level is one of the standard levels.

    Args:
        value: Log level string.

    Returns:
        Validated, uppercased log level.

    Raises:
        ValueError: If log level is not valid.
    """
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if value.upper() not in valid_levels:
        raise ValueError(f"log_level must be one of {valid_levels}, got {value}")
    return value.upper()


def validate_log_format(value: str) -> str:
    """Validate log format is 'json' or 'console'.

    Args:
        value: Log format string.

    Returns:
        Validated, lowercased log format.

    Raises:
        ValueError: If log format is not valid.
    """
    valid_formats = {"json", "console"}
    if value.lower() not in valid_formats:
        raise ValueError(f"log_format must be one of {valid_formats}, got {value}")
    return value.lower()


def resolve_optional_path(value: Path | str | None) -> Path | None:
    """Resolve a path setting to an absolute path.

    Empty strings are treated as unset so that ``YAML_LOADER_LOG_FILE=``
    disables file logging.

    Args:
        value: Path value (string, Path, or None).

    Returns:
        Resolved Path, or None when unset.
    """
    if value is None or value == "":
        return None
    path = Path(value).expanduser()
    return path.resolve()
