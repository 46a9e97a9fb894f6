"""Exceptions raised by YAML loaders when ``throw_on_error`` is enabled."""


class YamlLoaderError(Exception):
    """Base exception for YAML source loading errors.

    Attributes:
        source_path: The joined path the loader was built for.
    """

    def __init__(self, message: str, source_path: str) -> None:
        super().__init__(message)
        self.message = message
        self.source_path = source_path


class SourceNotFoundError(YamlLoaderError):
    """Raised when the source path does not exist."""

    pass


class SourceNotAFileError(YamlLoaderError):
    """Raised when the source path is a directory or another non-regular entry."""

    pass


class SourceReadError(YamlLoaderError):
    """Raised when stat, read, decode or YAML parsing fails after the existence check."""

    pass
