"""Tests for path descriptions."""

from genericfile.core.info import PathInfo, describe_relation
from genericfile.core.path import NULL_PATH, GenericFilePath


class TestPathInfo:
    """Tests for PathInfo."""

    def test__repository_path__describes_components(self) -> None:
        """Describe a repository path."""
        info = PathInfo.from_path(GenericFilePath.parse("/public/reports/"))

        assert info.to_dict() == {
            "path": "/public/reports",
            "is_null": False,
            "root_segment": "/",
            "scheme": None,
            "has_scheme": False,
            "segments": ["/", "public", "reports"],
            "non_root_segments": ["public", "reports"],
            "parent": "/public",
        }

    def test__scheme_path__describes_scheme(self) -> None:
        """Describe a scheme path."""
        info = PathInfo.from_path(GenericFilePath.parse("s3://bucket/key.csv"))

        assert info.scheme == "s3"
        assert info.has_scheme is True
        assert info.root_segment == "s3://"
        assert info.parent == "s3://bucket"

    def test__provider_root__parent_is_null_string(self) -> None:
        """Serialize the null parent of a provider root as an empty string."""
        info = PathInfo.from_path(GenericFilePath.parse("/"))

        assert info.parent == ""

    def test__null_path__has_no_parent(self) -> None:
        """Describe the null path."""
        data = PathInfo.from_path(NULL_PATH).to_dict()

        assert data["path"] == ""
        assert data["is_null"] is True
        assert data["segments"] == []
        assert data["has_scheme"] is False
        assert data["parent"] is None


class TestDescribeRelation:
    """Tests for describe_relation()."""

    def test__descendant__returns_relative_segments(self) -> None:
        """Describe a path under its base."""
        relation = describe_relation(
            GenericFilePath.parse("/a/b/c"),
            GenericFilePath.parse("/a"),
        )

        assert relation == {
            "path": "/a/b/c",
            "base": "/a",
            "contains": True,
            "relative_segments": ["b", "c"],
        }

    def test__unrelated__returns_none(self) -> None:
        """Describe a path outside its base."""
        relation = describe_relation(
            GenericFilePath.parse("/x"),
            GenericFilePath.parse("/a"),
        )

        assert relation["contains"] is False
        assert relation["relative_segments"] is None

    def test__null_base__contains_all(self) -> None:
        """Describe a path relative to the null path."""
        relation = describe_relation(GenericFilePath.parse("vfs://x"), NULL_PATH)

        assert relation["contains"] is True
        assert relation["relative_segments"] == ["vfs://", "x"]
