"""
zsh named-directory exporter.

Writes one ``hash -d <alias>=<path>`` line per bookmark so that
``~alias`` expands to the bookmarked directory.
"""

from .base import BookmarkExporter
from ..data_models import Bookmark


class ZshHashExporter(BookmarkExporter):
    """Export bookmarks as zsh named directories."""

    TEMPLATE = "hash -d {alias}={path}"

    @property
    def format_name(self) -> str:
        return "zsh"

    @property
    def description(self) -> str:
        return "zsh named-directory hash table"

    def render_bookmark(self, bookmark: Bookmark) -> str:
        return self.TEMPLATE.format(alias=bookmark.alias, path=bookmark.path)
