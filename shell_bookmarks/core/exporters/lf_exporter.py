"""
lf jump-map exporter.

Writes one ``map g<alias> cd <path>`` line per bookmark, to be sourced
from an lf configuration file.
"""

from .base import BookmarkExporter
from ..data_models import Bookmark


class LfExporter(BookmarkExporter):
    """
    Export bookmarks as lf key mappings.

    Example:
        >>> LfExporter().render_bookmark(Bookmark("proj", "/home/user/project"))
        'map gproj cd /home/user/project'
    """

    TEMPLATE = "map g{alias} cd {path}"

    @property
    def format_name(self) -> str:
        return "lf"

    @property
    def description(self) -> str:
        return "lf jump-map script"

    def render_bookmark(self, bookmark: Bookmark) -> str:
        return self.TEMPLATE.format(alias=bookmark.alias, path=bookmark.path)
