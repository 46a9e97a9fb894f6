"""Types shared by the loader factory and its callers.

- ``LoaderConfig``: the construction-time error policy
- ``LoadOutcome``: the policy-agnostic result of one read attempt
- ``ParsedDocument`` / ``Loader``: aliases describing the loader contract
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from ghii_yaml_loader.errors import YamlLoaderError
from ghii_yaml_loader.telemetry.reporter import default_logger

ParsedDocument = dict[str, Any]
Loader = Callable[[], Awaitable[ParsedDocument]]


class ErrorReporter(Protocol):
    """Callback invoked once for every failed load."""

    def __call__(self, error: Any, message: str) -> None: ...


class LoaderConfig(BaseModel):
    """Error policy for a YAML loader.

    Immutable once created. Accepts the camelCase ``throwOnError`` alias as
    well as the field name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    throw_on_error: bool = Field(
        default=False,
        alias="throwOnError",
        description="Raise on failure instead of returning an empty mapping",
    )
    logger: Callable[[Any, str], None] = Field(
        default=default_logger,
        description="Called as logger(error, message) for every failure",
    )


@dataclass(frozen=True)
class LoadOutcome:
    """Result of a single read attempt, before the error policy is applied.

    Exactly one of ``document`` / ``error`` is meaningful: ``error`` is None on
    success. ``reported`` is the value handed to the logger callback.
    """

    document: Any = None
    error: YamlLoaderError | None = None
    reported: Any = None

    @property
    def ok(self) -> bool:
        """Whether the read succeeded."""
        return self.error is None

    @classmethod
    def success(cls, document: Any) -> "LoadOutcome":
        return cls(document=document)

    @classmethod
    def failure(cls, error: YamlLoaderError, reported: Any = None) -> "LoadOutcome":
        return cls(error=error, reported=error if reported is None else reported)
