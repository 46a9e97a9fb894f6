"""YAML file loader factory.

``yaml_loader`` builds an async, zero-argument loader bound to one YAML file.
Each call re-reads the file and returns its parsed contents, so the result
always reflects what is currently on disk.

Example:
    >>> from ghii_yaml_loader import yaml_loader
    >>> load = yaml_loader({"throw_on_error": True}, "config", "app.yaml")
    >>> document = await load()
"""

import asyncio
import os
import stat
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ghii_yaml_loader.errors import (
    SourceNotAFileError,
    SourceNotFoundError,
    SourceReadError,
)
from ghii_yaml_loader.models import ErrorReporter, LoaderConfig, LoadOutcome, ParsedDocument
from ghii_yaml_loader.telemetry import (
    YAML_SOURCE_EMPTY,
    YAML_SOURCE_LOADED,
    YAML_SOURCE_LOADING,
    get_logger,
)

log = get_logger(__name__)


def join_source_path(*path_segments: str) -> str:
    """Join path segments with the platform rule and normalize the result.

    Segments are not validated. With no segments (or only empty ones) the
    result is ``"."``.

    Args:
        *path_segments: Path segments in order.

    Returns:
        The normalized joined path.
    """
    return os.path.normpath(os.path.join("", *path_segments))


async def read_source(source_path: str) -> LoadOutcome:
    """Read and parse ``source_path`` once.

    Never raises for filesystem or YAML errors; they are returned as failed
    outcomes so the caller can apply its own policy.

    Args:
        source_path: Path to the YAML file.

    Returns:
        LoadOutcome with the parsed document or the error.
    """
    if not os.path.exists(source_path):
        message = f"{source_path} 404"
        return LoadOutcome.failure(SourceNotFoundError(message, source_path))

    try:
        fstat = await asyncio.to_thread(os.stat, source_path)
        if not stat.S_ISREG(fstat.st_mode):
            message = f"Source {source_path} is not a file"
            return LoadOutcome.failure(SourceNotAFileError(message, source_path))

        content = await asyncio.to_thread(Path(source_path).read_text, encoding="utf-8")
        document = yaml.safe_load(content)
    except Exception as e:
        message = f"FILE DELETED OR A DIRECTORY-> {source_path} 404: {e}"
        return LoadOutcome.failure(SourceReadError(message, source_path), reported=e)

    if document is None:
        log.debug(YAML_SOURCE_EMPTY, source_path=source_path)
        document = {}
    return LoadOutcome.success(document)


def apply_policy(outcome: LoadOutcome, throw_on_error: bool, report: ErrorReporter) -> Any:
    """Turn an outcome into a return value according to the error policy.

    Failures are reported exactly once, then raised or replaced by ``{}``.

    Args:
        outcome: Result of ``read_source``.
        throw_on_error: Raise the outcome's error instead of returning ``{}``.
        report: Callback receiving ``(error, message)`` for the failure.

    Returns:
        The parsed document, or ``{}`` for a suppressed failure.

    Raises:
        YamlLoaderError: If the outcome failed and ``throw_on_error`` is set.
    """
    if outcome.error is None:
        return outcome.document

    report(outcome.reported, outcome.error.message)
    if throw_on_error:
        raise outcome.error from None
    return {}


class YamlFileLoader:
    """Zero-argument async loader bound to one YAML file.

    Holds only its source path and configuration; every call performs a new
    read. Instances are produced by ``yaml_loader``.
    """

    def __init__(self, source_path: str, config: LoaderConfig) -> None:
        self._source_path = source_path
        self._config = config

    @property
    def source_path(self) -> str:
        """The joined path this loader reads."""
        return self._source_path

    @property
    def config(self) -> LoaderConfig:
        """The error policy this loader applies."""
        return self._config

    async def __call__(self) -> ParsedDocument:
        """Read and parse the file.

        Returns:
            The parsed document, or ``{}`` when loading fails and
            ``throw_on_error`` is off.

        Raises:
            SourceNotFoundError: Path missing and ``throw_on_error`` is on.
            SourceNotAFileError: Path is not a regular file and ``throw_on_error`` is on.
            SourceReadError: Stat, read or parse failed and ``throw_on_error`` is on.
        """
        log.debug(YAML_SOURCE_LOADING, source_path=self._source_path)
        outcome = await read_source(self._source_path)
        document = apply_policy(outcome, self._config.throw_on_error, self._config.logger)
        if outcome.ok:
            log.info(
                YAML_SOURCE_LOADED,
                source_path=self._source_path,
                root_type=type(document).__name__,
            )
        return document  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        return (
            f"YamlFileLoader(source_path={self._source_path!r}, "
            f"throw_on_error={self._config.throw_on_error})"
        )


def yaml_loader(
    config: LoaderConfig | Mapping[str, Any] | None, *path_segments: str
) -> YamlFileLoader:
    """Create a loader for the YAML file at the joined path.

    Does not touch the filesystem; all checks happen when the loader is awaited.

    Args:
        config: Error policy. A mapping is validated into ``LoaderConfig``;
            None uses the defaults (suppress errors, log to stderr).
        *path_segments: Path segments joined in order into the source path.

    Returns:
        A reusable async loader.

    Example:
        >>> load = yaml_loader(LoaderConfig(throw_on_error=False), "/etc/app", "config.yaml")
        >>> load.source_path
        '/etc/app/config.yaml'
    """
    if config is None:
        config = LoaderConfig()
    elif not isinstance(config, LoaderConfig):
        config = LoaderConfig.model_validate(config)

    return YamlFileLoader(join_source_path(*path_segments), config)
