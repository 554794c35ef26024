"""Generic file path value type.

A generic file path addresses a file or folder of any storage provider
through one uniform representation: a root segment identifying the
provider followed by plain path segments.

    /                     repository provider root
    /public/reports       repository path
    s3://                 root of the "s3" provider
    s3://bucket/key.csv   path of the "s3" provider

The path with no segments is the null path. It is the parent of every
provider root and is shared as the ``NULL_PATH`` singleton.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar

from genericfile.core.exceptions import InvalidArgumentError, InvalidPathError
from genericfile.core.types import SerializedPath

PATH_SEPARATOR = "/"

SCHEME_SUFFIX = "://"

_PATH_WITH_SCHEME_PATTERN = re.compile(r"(\w+://)(.*)", re.ASCII)

_PATH_SEPARATOR_SPLIT_PATTERN = re.compile(
    r"\s*" + re.escape(PATH_SEPARATOR) + r"\s*", re.ASCII
)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class GenericFilePath:
    """Immutable, normalized generic file path.

    Instances are obtained from :meth:`parse` or derived from an existing
    path with :attr:`parent` and :meth:`child`. Two paths are equal when
    their normalized string forms are equal.
    """

    NULL: ClassVar[GenericFilePath]

    segments: tuple[str, ...]
    _path: SerializedPath = field(init=False, repr=False)

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        object.__setattr__(self, "segments", segments)

        # Rebuilt from the segments so the string form is always normalized
        root = segments[0] if segments else ""
        path = root + PATH_SEPARATOR.join(segments[1:])
        object.__setattr__(self, "_path", SerializedPath(path))

    @classmethod
    def parse(cls, path: str | None) -> GenericFilePath:
        """Parse a path string.

        A ``None`` or blank string parses to the null path. Otherwise the
        root segment is identified and the remaining segments are
        whitespace-trimmed, with empty ones removed. A single trailing
        separator is ignored.

        Segments equal to ``.`` or ``..`` are kept as they are; they are
        neither validated nor resolved.

        Args:
            path: Path string, possibly None or empty

        Returns:
            The parsed path

        Raises:
            InvalidPathError: If the root segment is neither the path
                separator nor a scheme followed by "://"
        """
        if path is None:
            return NULL_PATH

        rest_path = path.strip()
        if not rest_path:
            return NULL_PATH

        if rest_path.startswith(PATH_SEPARATOR):
            root = PATH_SEPARATOR
            rest_path = rest_path[len(PATH_SEPARATOR) :]
        else:
            match = _PATH_WITH_SCHEME_PATTERN.fullmatch(rest_path)
            if match is None:
                raise InvalidPathError(path)

            root = match.group(1)
            rest_path = match.group(2)

        if rest_path.endswith(PATH_SEPARATOR):
            rest_path = rest_path[: -len(PATH_SEPARATOR)]

        return cls((root, *_split_path(rest_path)))

    @property
    def is_null(self) -> bool:
        """Whether this is the null path."""
        return not self.segments

    @property
    def root_segment(self) -> str:
        """Segment identifying the path's provider.

        Empty for the null path. The repository provider's root segment is
        the path separator; other providers have a scheme followed by "://".
        """
        return self.segments[0] if self.segments else ""

    @property
    def non_root_segments(self) -> tuple[str, ...]:
        """Segments following the root segment, possibly empty."""
        return self.segments[1:]

    @property
    def has_scheme(self) -> bool:
        """Whether the root segment carries a scheme."""
        return self.root_segment not in ("", PATH_SEPARATOR)

    @property
    def scheme(self) -> str | None:
        """Scheme of the path's provider, or None for the repository and null paths."""
        if not self.has_scheme:
            return None
        return self.root_segment[: -len(SCHEME_SUFFIX)]

    @property
    def parent(self) -> GenericFilePath | None:
        """Parent path.

        Provider root paths have the null path as parent. The null path
        has no parent.
        """
        if self.is_null:
            return None

        if len(self.segments) == 1:
            return NULL_PATH

        return GenericFilePath(self.segments[:-1])

    def child(self, segment: str) -> GenericFilePath:
        """Build a child path of this one.

        Args:
            segment: Child segment, whitespace-trimmed before use

        Returns:
            The child path

        Raises:
            InvalidArgumentError: If the segment is empty after trimming
        """
        normalized_segment = segment.strip()
        if not normalized_segment:
            raise InvalidArgumentError("Path is empty.")

        return GenericFilePath((*self.segments, normalized_segment))

    def relative_segments(self, base: GenericFilePath) -> tuple[str, ...] | None:
        """Get the segments of this path beyond a base path.

        Args:
            base: Base path

        Returns:
            Possibly empty tuple of segments if this path equals or is
            contained in base, None otherwise
        """
        if base.is_null:
            return self.segments

        base_count = len(base.segments)
        if base_count > len(self.segments):
            return None

        if self.segments[:base_count] != base.segments:
            return None

        return self.segments[base_count:]

    def contains(self, other: GenericFilePath) -> bool:
        """Check whether this path equals, or is an ancestor of, another one."""
        # An empty tuple still means contained
        return other.relative_segments(self) is not None

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"GenericFilePath({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, GenericFilePath):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)


def _split_path(path: str) -> list[str]:
    """Split a path without root segment into trimmed, non-empty segments."""
    if not path:
        return []
    segments = (s.strip() for s in _PATH_SEPARATOR_SPLIT_PATTERN.split(path))
    return [segment for segment in segments if segment]


NULL_PATH = GenericFilePath(())
GenericFilePath.NULL = NULL_PATH
