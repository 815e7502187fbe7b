"""
Data models for shell-bookmarks.

This module defines the structures passed between the line parser, the
exporters and the generator: the parsed Bookmark, the four-way line
classification and the output target records.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, List, Optional, Union


@dataclass(frozen=True)
class Bookmark:
    """
    An alias mapped to a directory path, extracted from one input line.

    The alias never contains whitespace. The path contains whitespace or
    ``#`` only when it was quoted in the source file.
    """

    alias: str
    path: str

    def __post_init__(self):
        if not self.alias or any(ch.isspace() for ch in self.alias):
            raise ValueError(f"Invalid bookmark alias: {self.alias!r}")
        if not self.path:
            raise ValueError(f"Bookmark '{self.alias}' has an empty path")

    def __str__(self) -> str:
        return f"{self.alias} -> {self.path}"


class LineKind(Enum):
    """Classification of a single line of the bookmarks file."""

    COMMENT = "comment"
    BLANK = "blank"
    MALFORMED = "malformed"
    PARSED = "parsed"


@dataclass(frozen=True)
class CommentLine:
    """A line whose first non-whitespace character is ``#``."""

    text: str
    kind: ClassVar[LineKind] = LineKind.COMMENT


@dataclass(frozen=True)
class BlankLine:
    """An empty or whitespace-only line."""

    text: str
    kind: ClassVar[LineKind] = LineKind.BLANK


@dataclass(frozen=True)
class MalformedLine:
    """A line that is neither a comment nor a valid bookmark declaration."""

    text: str
    reason: str
    kind: ClassVar[LineKind] = LineKind.MALFORMED


@dataclass(frozen=True)
class ParsedLine:
    """A line that declared a bookmark."""

    text: str
    bookmark: Bookmark
    kind: ClassVar[LineKind] = LineKind.PARSED


LineResult = Union[CommentLine, BlankLine, MalformedLine, ParsedLine]


@dataclass(frozen=True)
class OutputTarget:
    """
    One requested output: the exporter format name and where to write it.

    Attributes:
        format_name: Registry key of the exporter (lf, zsh, cd-alias)
        path: Destination file
    """

    format_name: str
    path: Path

    def __str__(self) -> str:
        return f"{self.format_name} -> {self.path}"


@dataclass
class GenerationResults:
    """Summary of a generator run."""

    input_path: Optional[Path] = None
    bookmarks: List[Bookmark] = field(default_factory=list)
    comment_lines: int = 0
    blank_lines: int = 0
    exports: List[Any] = field(default_factory=list)
    dry_run: bool = False
    processing_time: float = 0.0

    @property
    def bookmark_count(self) -> int:
        return len(self.bookmarks)

    @property
    def written_files(self) -> List[Path]:
        return [export.path for export in self.exports]

    def __str__(self) -> str:
        return (
            f"GenerationResults("
            f"bookmarks={self.bookmark_count}, "
            f"comments={self.comment_lines}, "
            f"blanks={self.blank_lines}, "
            f"outputs={len(self.exports)}, "
            f"dry_run={self.dry_run})"
        )
