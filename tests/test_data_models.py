"""
Tests for shell-bookmarks data models.
"""

import dataclasses
from pathlib import Path

import pytest

from shell_bookmarks.core.data_models import (
    BlankLine,
    Bookmark,
    CommentLine,
    GenerationResults,
    LineKind,
    MalformedLine,
    OutputTarget,
    ParsedLine,
)


class TestBookmark:
    """Tests for the Bookmark model."""

    def test_fields(self):
        bookmark = Bookmark("proj", "/home/user/project")
        assert bookmark.alias == "proj"
        assert bookmark.path == "/home/user/project"

    def test_immutable(self):
        """Bookmarks cannot be modified after parsing."""
        bookmark = Bookmark("proj", "/home/user/project")
        with pytest.raises(dataclasses.FrozenInstanceError):
            bookmark.path = "/elsewhere"

    def test_equality_and_hash(self):
        assert Bookmark("a", "/1") == Bookmark("a", "/1")
        assert len({Bookmark("a", "/1"), Bookmark("a", "/1")}) == 1

    @pytest.mark.parametrize("alias", ["", "two words", "tab\there"])
    def test_invalid_alias(self, alias):
        with pytest.raises(ValueError):
            Bookmark(alias, "/path")

    def test_empty_path(self):
        with pytest.raises(ValueError):
            Bookmark("alias", "")

    def test_str(self):
        bookmark = Bookmark("proj", "/p")
        assert str(bookmark) == "proj -> /p"


class TestLineClassification:
    """Each line variant carries its own kind."""

    def test_kinds(self):
        assert CommentLine("# c").kind is LineKind.COMMENT
        assert BlankLine("").kind is LineKind.BLANK
        assert MalformedLine("x", "missing path").kind is LineKind.MALFORMED
        assert ParsedLine("a /1", Bookmark("a", "/1")).kind is LineKind.PARSED

    def test_kind_is_not_a_field(self):
        assert [f.name for f in dataclasses.fields(ParsedLine)] == ["text", "bookmark"]


class TestOutputTarget:
    def test_str(self):
        assert str(OutputTarget("zsh", Path("/tmp/out"))) == "zsh -> /tmp/out"


class TestGenerationResults:
    def test_counts(self, sample_bookmarks):
        results = GenerationResults(bookmarks=sample_bookmarks, comment_lines=1)
        assert results.bookmark_count == 2
        assert results.written_files == []
        assert "bookmarks=2" in str(results)
