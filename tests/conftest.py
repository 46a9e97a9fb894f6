"""Shared fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

import ghii_yaml_loader.telemetry.logger as logger_module
from ghii_yaml_loader.config import get_settings
from ghii_yaml_loader.telemetry.logger import PACKAGE_LOGGER_NAME

FIXTURE_YAML = Path(__file__).parent / "test_loader" / "test.yaml"


class RecordingLogger:
    """Logger callback that records every (error, message) call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, str]] = []

    def __call__(self, error: Any, message: str) -> None:
        self.calls.append((error, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.calls]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    """Copy of the foo/ciao fixture in a private directory."""
    target = tmp_path / "test.yaml"
    target.write_text(FIXTURE_YAML.read_text(encoding="utf-8"), encoding="utf-8")
    return target


class EventCollector(logging.Handler):
    """stdlib handler keeping the structlog event dicts it receives."""

    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.events: list[dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:
        if isinstance(record.msg, dict):
            self.events.append(dict(record.msg))

    def named(self, event: str) -> list[dict[str, Any]]:
        return [entry for entry in self.events if entry.get("event") == event]


def _drop_package_logging() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    logger_module._configured = False
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Start from unconfigured package logging and restore that state afterwards."""
    _drop_package_logging()
    yield
    _drop_package_logging()


@pytest.fixture
def log_events(reset_logging: None) -> EventCollector:
    """Collect every event emitted by package loggers."""
    logger_module.configure_logging()
    collector = EventCollector()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(collector)
    return collector
