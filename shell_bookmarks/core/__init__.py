"""
Core shell-bookmarks modules.

This package contains the bookmarks file parser, the data models and the
exporters for each shell integration format.
"""

from .data_models import (
    BlankLine,
    Bookmark,
    CommentLine,
    LineKind,
    LineResult,
    MalformedLine,
    OutputTarget,
    ParsedLine,
)
from .line_parser import (
    BookmarkFileError,
    BookmarkFileParser,
    BookmarkParseError,
    parse_line,
)

__all__ = [
    'BlankLine',
    'Bookmark',
    'CommentLine',
    'LineKind',
    'LineResult',
    'MalformedLine',
    'OutputTarget',
    'ParsedLine',
    'BookmarkFileError',
    'BookmarkFileParser',
    'BookmarkParseError',
    'parse_line',
]
