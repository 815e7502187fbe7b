"""
cd alias exporter.

Writes one ``alias cd<alias>="<path>"`` line per bookmark.
"""

from .base import BookmarkExporter
from ..data_models import Bookmark


class CdAliasExporter(BookmarkExporter):
    """Export bookmarks as shell aliases named ``cd<alias>``."""

    TEMPLATE = 'alias cd{alias}="{path}"'

    @property
    def format_name(self) -> str:
        return "cd-alias"

    @property
    def description(self) -> str:
        return "shell cd aliases"

    def render_bookmark(self, bookmark: Bookmark) -> str:
        return self.TEMPLATE.format(alias=bookmark.alias, path=bookmark.path)
