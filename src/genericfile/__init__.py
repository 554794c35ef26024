"""Provider-agnostic generic file paths.

Addresses files and folders of the repository (rooted at "/") and of
scheme-based providers (e.g. "s3://", "vfs://") with a single path type.
"""

from genericfile.core.exceptions import (
    GenericFileError,
    InvalidArgumentError,
    InvalidPathError,
)
from genericfile.core.info import PathInfo, describe_relation
from genericfile.core.path import NULL_PATH, PATH_SEPARATOR, GenericFilePath

__all__ = [
    "NULL_PATH",
    "PATH_SEPARATOR",
    "GenericFileError",
    "GenericFilePath",
    "InvalidArgumentError",
    "InvalidPathError",
    "PathInfo",
    "describe_relation",
]
