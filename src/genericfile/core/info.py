"""Path descriptions for presentation.

Turns GenericFilePath values into plain dictionaries for JSON output
from the command line and the HTTP API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict

from genericfile.core.path import GenericFilePath
from genericfile.core.types import SerializedPath


class PathInfoDict(TypedDict):
    """Dictionary representation of a path description."""

    path: str
    is_null: bool
    root_segment: str
    scheme: str | None
    has_scheme: bool
    segments: list[str]
    non_root_segments: list[str]
    parent: str | None


class RelationDict(TypedDict):
    """Dictionary representation of a path relative to a base path."""

    path: str
    base: str
    contains: bool
    relative_segments: list[str] | None


@dataclass(frozen=True)
class PathInfo:
    """Description of a parsed path."""

    path: SerializedPath
    is_null: bool
    root_segment: str
    scheme: str | None
    has_scheme: bool
    segments: tuple[str, ...]
    non_root_segments: tuple[str, ...]
    parent: SerializedPath | None

    @classmethod
    def from_path(cls, path: GenericFilePath) -> PathInfo:
        """Describe a path.

        Args:
            path: Path to describe

        Returns:
            PathInfo with the path's components and serialized parent
        """
        parent = path.parent
        return cls(
            path=SerializedPath(str(path)),
            is_null=path.is_null,
            root_segment=path.root_segment,
            scheme=path.scheme,
            has_scheme=path.has_scheme,
            segments=path.segments,
            non_root_segments=path.non_root_segments,
            parent=SerializedPath(str(parent)) if parent is not None else None,
        )

    def to_dict(self) -> PathInfoDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "is_null": self.is_null,
            "root_segment": self.root_segment,
            "scheme": self.scheme,
            "has_scheme": self.has_scheme,
            "segments": list(self.segments),
            "non_root_segments": list(self.non_root_segments),
            "parent": self.parent,
        }


def describe_relation(path: GenericFilePath, base: GenericFilePath) -> RelationDict:
    """Describe how a path relates to a base path.

    Args:
        path: Path to locate
        base: Candidate ancestor of path

    Returns:
        RelationDict with containment flag and relative segments (None
        when path is not under base)
    """
    relative = path.relative_segments(base)
    return {
        "path": str(path),
        "base": str(base),
        "contains": base.contains(path),
        "relative_segments": list(relative) if relative is not None else None,
    }
