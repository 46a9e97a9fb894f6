"""Async YAML file loader for configuration aggregation.

``yaml_loader(config, *path_segments)`` returns a zero-argument coroutine
function that reads and parses one YAML file every time it is awaited.
"""

from ghii_yaml_loader.errors import (
    SourceNotAFileError,
    SourceNotFoundError,
    SourceReadError,
    YamlLoaderError,
)
from ghii_yaml_loader.loader import YamlFileLoader, join_source_path, yaml_loader
from ghii_yaml_loader.models import ErrorReporter, Loader, LoaderConfig, ParsedDocument

__version__ = "0.1.0"

__all__ = [
    # Factory
    "yaml_loader",
    "YamlFileLoader",
    "join_source_path",
    # Types
    "LoaderConfig",
    "Loader",
    "ParsedDocument",
    "ErrorReporter",
    # Exception classes
    "YamlLoaderError",
    "SourceNotFoundError",
    "SourceNotAFileError",
    "SourceReadError",
]
