"""
Bookmarks file parser.

Each line of a bookmarks file is either a comment, a blank line, or a
declaration of the form::

    alias /unquoted/path      # trailing text is ignored
    alias "/quoted path/with #hash"

``parse_line`` classifies a single line without touching the filesystem.
``BookmarkFileParser`` applies it to a whole file and stops at the first
line that cannot be parsed.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .data_models import (
    BlankLine,
    Bookmark,
    CommentLine,
    LineResult,
    MalformedLine,
    ParsedLine,
)

COMMENT_CHAR = "#"
QUOTE_CHAR = '"'
BLANK_LINE_POLICIES = ("skip", "error")

# Alias token and the whitespace run that separates it from the path
ALIAS_PATTERN = re.compile(r"(?P<alias>\S+)\s+")
UNQUOTED_PATH_PATTERN = re.compile(r"[^\s#]+")


class BookmarkFileError(Exception):
    """Raised when a bookmarks file cannot be read."""

    def __init__(self, message: str, source: Optional[Union[str, Path]] = None):
        self.message = message
        self.source = source
        super().__init__(message)


class BookmarkParseError(BookmarkFileError):
    """Raised for the first line that is neither a comment nor a bookmark."""

    def __init__(
        self,
        line_number: int,
        line: str,
        reason: str,
        source: Optional[Union[str, Path]] = None,
    ):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        location = f"{source}:{line_number}" if source else f"line {line_number}"
        super().__init__(f"{location}: {reason}: {line!r}", source)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_line(line: str) -> LineResult:
    """
    Classify one line of a bookmarks file.

    Args:
        line: Line text, with or without its trailing newline

    Returns:
        CommentLine, BlankLine, MalformedLine or ParsedLine
    """
    text = _strip_line_ending(line)
    stripped = text.lstrip()

    if stripped.startswith(COMMENT_CHAR):
        return CommentLine(text)
    if not stripped:
        return BlankLine(text)

    match = ALIAS_PATTERN.match(text)
    if match is None:
        if text[0].isspace():
            return MalformedLine(text, "line starts with whitespace instead of an alias")
        return MalformedLine(text, "missing path after alias")

    alias = match.group("alias")
    rest = text[match.end():]

    if rest.startswith(QUOTE_CHAR):
        # No fallback to the unquoted form once a quote opens the path
        closing = rest.find(QUOTE_CHAR, 1)
        if closing == -1:
            return MalformedLine(text, "unterminated quoted path")
        path = rest[1:closing]
        if not path:
            return MalformedLine(text, "empty quoted path")
        return ParsedLine(text, Bookmark(alias, path))

    path_match = UNQUOTED_PATH_PATTERN.match(rest)
    if path_match is None:
        return MalformedLine(text, "missing path after alias")
    return ParsedLine(text, Bookmark(alias, path_match.group()))


class BookmarkFileParser:
    """
    Parser for whole bookmarks files.

    Comments are always skipped. Blank lines are skipped or rejected
    according to ``blank_lines``. The first malformed line aborts parsing
    with a BookmarkParseError; no partial result is returned.
    """

    def __init__(self, blank_lines: str = "skip", encoding: str = "utf-8"):
        """
        Initialize the parser.

        Args:
            blank_lines: "skip" to ignore blank lines, "error" to reject them
            encoding: Text encoding used by parse_file
        """
        if blank_lines not in BLANK_LINE_POLICIES:
            raise ValueError(
                f"Invalid blank line policy: {blank_lines}. "
                f"Use one of: {', '.join(BLANK_LINE_POLICIES)}"
            )
        self.blank_lines = blank_lines
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)
        self.comment_count = 0
        self.blank_count = 0

    def iter_lines(self, lines: Iterable[str]) -> Iterator[Tuple[int, LineResult]]:
        """Yield (line_number, classification) pairs, numbered from 1."""
        for line_number, line in enumerate(lines, start=1):
            yield line_number, parse_line(line)

    def parse_lines(
        self,
        lines: Iterable[str],
        source: Optional[Union[str, Path]] = None,
    ) -> List[Bookmark]:
        """
        Parse lines into bookmarks, preserving their order.

        Args:
            lines: Lines of a bookmarks file
            source: Name used in error messages

        Returns:
            List of bookmarks in file order

        Raises:
            BookmarkParseError: On the first malformed line
        """
        self.comment_count = 0
        self.blank_count = 0
        bookmarks = []

        for line_number, result in self.iter_lines(lines):
            if isinstance(result, CommentLine):
                self.comment_count += 1
            elif isinstance(result, BlankLine):
                if self.blank_lines == "error":
                    raise BookmarkParseError(
                        line_number, result.text, "blank line", source
                    )
                self.blank_count += 1
            elif isinstance(result, MalformedLine):
                raise BookmarkParseError(
                    line_number, result.text, result.reason, source
                )
            elif isinstance(result, ParsedLine):
                self.logger.debug(
                    f"Line {line_number}: parsed bookmark {result.bookmark}"
                )
                bookmarks.append(result.bookmark)
            else:
                raise TypeError(f"Unexpected line classification: {result!r}")

        return bookmarks

    def parse_text(
        self, text: str, source: Optional[Union[str, Path]] = None
    ) -> List[Bookmark]:
        """Parse the full contents of a bookmarks file."""
        # Editors on some platforms prefix UTF-8 files with a byte order mark
        if text.startswith("\ufeff"):
            text = text[1:]
        lines = text.split("\n")
        # A final newline does not start another line
        if lines and lines[-1] == "":
            lines.pop()
        return self.parse_lines(lines, source)

    def parse_file(self, file_path: Union[str, Path]) -> List[Bookmark]:
        """
        Read and parse a bookmarks file.

        Args:
            file_path: Path to the bookmarks file

        Returns:
            List of bookmarks in file order

        Raises:
            BookmarkFileError: If the file cannot be read or decoded
            BookmarkParseError: On the first malformed line
        """
        file_path = Path(file_path)

        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except FileNotFoundError as e:
            raise BookmarkFileError(
                f"Bookmarks file not found: {file_path}", file_path
            ) from e
        except UnicodeDecodeError as e:
            raise BookmarkFileError(
                f"Bookmarks file is not valid {self.encoding}: {file_path}: {e}",
                file_path,
            ) from e
        except OSError as e:
            raise BookmarkFileError(
                f"Cannot read bookmarks file {file_path}: {e}", file_path
            ) from e

        bookmarks = self.parse_text(content, source=file_path)

        self.logger.info(
            f"Parsed {len(bookmarks)} bookmarks from {file_path} "
            f"({self.comment_count} comments, {self.blank_count} blank lines)"
        )
        return bookmarks
