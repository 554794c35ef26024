"""Errors raised by the generic file path type."""


class GenericFileError(Exception):
    """Base class for generic file errors."""


class InvalidPathError(GenericFileError, ValueError):
    """Path string whose root segment is neither a separator nor a scheme."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid path: {path!r}")
        self.path = path


class InvalidArgumentError(GenericFileError, ValueError):
    """Argument rejected by a path derivation, such as an empty child segment."""
