"""Structured logging configuration using structlog.

This module sets up package-scoped structured logging:
- Pretty-printed (or JSON) console output on stderr
- Optional rotating JSON-lines file output
- UTC timestamps
- Component tracking derived from the logger name

Loggers returned by ``get_logger`` carry their own processor chain, so the
global structlog configuration of the host application is never touched.
Handlers live on the ``ghii_yaml_loader`` stdlib logger only and are attached
on the first emitted event (or by an explicit ``configure_logging()``).
"""

import logging
import logging.handlers
import pathlib
import sys
from datetime import datetime, timezone
from typing import Any

import structlog
from pydantic import ValidationError

PACKAGE_LOGGER_NAME = "ghii_yaml_loader"

_configured = False


def _load_settings() -> tuple[Any, ValidationError | None]:
    """Load settings, falling back to defaults when the environment is invalid.

    Returns:
        Tuple of (settings, validation error or None).
    """
    from ghii_yaml_loader.config import LoaderSettings, get_settings  # noqa: PLC0415

    try:
        return get_settings(), None
    except ValidationError as e:
        return LoaderSettings.model_construct(), e


def _add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add UTC timestamp to log event.

    Args:
        logger: The logger instance.
        method_name: The log method name (info, error, etc.).
        event_dict: The event dictionary.

    Returns:
        Event dictionary with timestamp added.
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_component_from_event_dict(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add component name to log event from the logger name.

    Runs after ``add_logger_name``, so the dotted logger name is already in
    ``event_dict["logger"]``.

    Args:
        logger: The structlog logger instance.
        method_name: The log method name (info, error, etc.).
        event_dict: The event dictionary.

    Returns:
        Event dictionary with component added.
    """
    logger_name = event_dict.get("logger", "")

    # "ghii_yaml_loader.loader" -> "loader"
    if "." in logger_name:
        component = logger_name.split(".")[-1]
    else:
        component = logger_name or "unknown"

    event_dict["component"] = component
    return event_dict


def _ensure_configured(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Attach the package handlers before the first event is filtered."""
    if not _configured:
        configure_logging()
    return event_dict


def _foreign_pre_chain() -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        _add_component_from_event_dict,
    ]


def _processors() -> list[Any]:
    return [
        _ensure_configured,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        _add_component_from_event_dict,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _configure_file_handler(log_file: pathlib.Path) -> logging.handlers.RotatingFileHandler:
    """Configure rotating file handler for JSON logs.

    Args:
        log_file: Target file. Parent directories are created.

    Returns:
        Configured RotatingFileHandler.
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=str(log_file),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=_foreign_pre_chain(),
        )
    )
    return handler


def _configure_console_handler(log_format: str) -> logging.StreamHandler[Any]:
    """Configure stderr handler.

    Args:
        log_format: "console" for pretty output, "json" for one JSON object per line.

    Returns:
        Configured StreamHandler.
    """
    handler = logging.StreamHandler(sys.stderr)

    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=_foreign_pre_chain(),
        )
    )
    return handler


def configure_logging() -> None:
    """Attach handlers to the package logger.

    Safe to call more than once; existing package handlers are replaced.
    Invalid ``YAML_LOADER_*`` settings fall back to the defaults with a
    warning instead of raising.
    """
    global _configured
    _configured = True

    settings, settings_error = _load_settings()

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    package_logger.propagate = False

    package_logger.addHandler(_configure_console_handler(settings.log_format))
    if settings.log_file is not None:
        package_logger.addHandler(_configure_file_handler(settings.log_file))

    if settings_error is not None:
        package_logger.warning(
            "invalid_logging_settings: %s; using defaults",
            "; ".join(str(error["msg"]) for error in settings_error.errors()),
        )


def get_logger(name: str) -> Any:  # Returns structlog.stdlib.BoundLogger
    """Get a structured logger instance.

    No configuration happens here; handlers are attached on first emission.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        structlog logger bound to the stdlib logger ``name``.

    Example:
        >>> from ghii_yaml_loader.telemetry import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("yaml_source_loaded", source_path="config/app.yaml")
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
