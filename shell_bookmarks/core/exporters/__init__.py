"""
Shell bookmark exporters.

This module provides exporters for the supported shell integration
formats: lf jump maps, zsh named directories and cd aliases.
"""

from .base import BookmarkExporter, ExportResult, ExportError, StagedExport
from .lf_exporter import LfExporter
from .zsh_exporter import ZshHashExporter
from .cd_alias_exporter import CdAliasExporter

__all__ = [
    "BookmarkExporter",
    "ExportResult",
    "ExportError",
    "StagedExport",
    "LfExporter",
    "ZshHashExporter",
    "CdAliasExporter",
    "EXPORTERS",
    "get_exporter",
]


# Format registry, in the order outputs are written
EXPORTERS = {
    "lf": LfExporter,
    "zsh": ZshHashExporter,
    "cd-alias": CdAliasExporter,
}


def get_exporter(format_name: str) -> type:
    """
    Get an exporter class by format name.

    Args:
        format_name: Name of the format (lf, zsh, cd-alias)

    Returns:
        Exporter class for the specified format

    Raises:
        ValueError: If format is not supported
    """
    format_lower = format_name.lower()
    if format_lower not in EXPORTERS:
        supported = ", ".join(EXPORTERS.keys())
        raise ValueError(
            f"Unsupported export format: {format_name}. "
            f"Supported formats: {supported}"
        )
    return EXPORTERS[format_lower]
