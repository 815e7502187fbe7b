"""
Base classes for shell bookmark exporters.

This module provides the abstract base class shared by every output
format, together with staged writing: an export is first written to a
temporary file beside its destination and only moved into place when
committed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging
import os
import shutil
import tempfile

from ..data_models import Bookmark

# mkstemp creates files readable by the owner only
DEFAULT_FILE_MODE = 0o644


@dataclass
class ExportResult:
    """
    Result of an export operation.

    Attributes:
        path: Path to the exported file
        count: Number of bookmarks exported
        format_name: Name of the export format used
        exported_at: Timestamp of the export
        additional_info: Any format-specific additional information
    """

    path: Path
    count: int
    format_name: str
    exported_at: datetime = field(default_factory=datetime.now)
    additional_info: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"ExportResult(format={self.format_name}, "
            f"count={self.count}, path={self.path})"
        )


class ExportError(Exception):
    """
    Exception raised when export fails.

    Attributes:
        message: Error description
        format_name: Name of the export format
        path: Target path if available
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.format_name = format_name
        self.path = path
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.format_name:
            parts.append(f"[{self.format_name}]")
        parts.append(self.message)
        if self.path:
            parts.append(f"(path: {self.path})")
        if self.original_error:
            parts.append(f"Caused by: {type(self.original_error).__name__}: {self.original_error}")
        return " ".join(parts)


class StagedExport:
    """
    An export written to a temporary file, waiting to be committed.

    commit() moves the temporary file onto the destination; discard()
    removes it. Both are safe to call once the other has run.
    """

    def __init__(self, exporter: "BookmarkExporter", temp_path: Path, path: Path, count: int):
        self.exporter = exporter
        self.temp_path = temp_path
        self.path = path
        self.count = count
        self.committed = False

    def commit(self) -> ExportResult:
        """Move the staged file into place and return the export result."""
        try:
            os.replace(self.temp_path, self.path)
        except OSError as e:
            self.discard()
            raise ExportError(
                "Failed to move staged output into place",
                format_name=self.exporter.format_name,
                path=self.path,
                original_error=e
            ) from e

        self.committed = True
        self.exporter.logger.info(f"Exported {self.count} bookmarks to {self.path}")

        return ExportResult(
            path=self.path,
            count=self.count,
            format_name=self.exporter.format_name,
            additional_info={"file_size": self.path.stat().st_size},
        )

    def discard(self) -> None:
        """Remove the staged file if it has not been committed."""
        if not self.committed:
            self.temp_path.unlink(missing_ok=True)

    def __repr__(self) -> str:
        return f"StagedExport(format={self.exporter.format_name}, path={self.path})"


class BookmarkExporter(ABC):
    """
    Abstract base class for shell bookmark exporters.

    Subclasses define format_name and render_bookmark(); rendering the
    whole file, validation and writing are shared.

    Example:
        >>> exporter = ZshHashExporter()
        >>> result = exporter.export(bookmarks, Path("zsh_named_dirs"))
        >>> print(f"Exported {result.count} bookmarks to {result.path}")
    """

    encoding = "utf-8"

    def __init__(self):
        """Initialize the exporter."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """
        Registry name of the export format.

        Returns:
            Format name string (e.g., "lf", "zsh")
        """
        pass

    @property
    def description(self) -> str:
        """Human-readable description of the output."""
        return self.format_name

    @abstractmethod
    def render_bookmark(self, bookmark: Bookmark) -> str:
        """
        Render one bookmark as a single line without its newline.

        Args:
            bookmark: Bookmark to render

        Returns:
            Rendered line
        """
        pass

    def render(self, bookmarks: List[Bookmark]) -> str:
        """Render all bookmarks, one newline-terminated line each."""
        return "".join(f"{self.render_bookmark(b)}\n" for b in bookmarks)

    def validate_bookmarks(self, bookmarks: List[Bookmark]) -> List[str]:
        """
        Validate bookmarks before export.

        Args:
            bookmarks: List of bookmarks to validate

        Returns:
            List of warning messages for any issues found
        """
        warnings = []

        if not bookmarks:
            warnings.append("No bookmarks provided for export")
            return warnings

        seen = set()
        duplicates = []
        for bookmark in bookmarks:
            if bookmark.alias in seen and bookmark.alias not in duplicates:
                duplicates.append(bookmark.alias)
            seen.add(bookmark.alias)
        if duplicates:
            warnings.append(
                f"{len(duplicates)} alias(es) defined more than once: "
                f"{', '.join(duplicates)}"
            )

        return warnings

    def prepare_output_path(self, output_path: Union[str, Path]) -> Path:
        """
        Prepare and validate the output path.

        Args:
            output_path: Target path for export

        Returns:
            Validated Path object

        Raises:
            ExportError: If the parent directory cannot be created
        """
        path = Path(output_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise ExportError(
                f"Permission denied creating path: {path.parent}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except OSError as e:
            raise ExportError(
                f"Failed to prepare output path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        if path.is_dir():
            raise ExportError(
                "Output path is a directory",
                format_name=self.format_name,
                path=path
            )

        return path

    def stage(self, bookmarks: List[Bookmark], output_path: Union[str, Path]) -> StagedExport:
        """
        Write the rendered bookmarks to a temporary file beside output_path.

        Args:
            bookmarks: Bookmarks to export
            output_path: Final destination

        Returns:
            StagedExport to commit or discard

        Raises:
            ExportError: If the temporary file cannot be written
        """
        for warning in self.validate_bookmarks(bookmarks):
            self.logger.warning(warning)

        path = self.prepare_output_path(output_path)
        content = self.render(bookmarks)

        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
        except OSError as e:
            raise ExportError(
                "Cannot create temporary output file",
                format_name=self.format_name,
                path=path,
                original_error=e
            ) from e

        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="\n") as f:
                f.write(content)
            if path.exists():
                shutil.copymode(path, temp_path)
            else:
                os.chmod(temp_path, DEFAULT_FILE_MODE)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise ExportError(
                "Failed to write output",
                format_name=self.format_name,
                path=path,
                original_error=e
            ) from e

        self.logger.debug(f"Staged {len(bookmarks)} bookmarks in {temp_path}")
        return StagedExport(self, temp_path, path, len(bookmarks))

    def export(self, bookmarks: List[Bookmark], output_path: Union[str, Path]) -> ExportResult:
        """
        Export bookmarks to the specified path.

        Args:
            bookmarks: List of bookmarks to export
            output_path: Target path for the export

        Returns:
            ExportResult with details about the export

        Raises:
            ExportError: If export fails
        """
        return self.stage(bookmarks, output_path).commit()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"
