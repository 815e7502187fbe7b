"""
Main application controller for shell-bookmarks.

This module provides the ShellBookmarkGenerator class that reads the
bookmarks file, renders every requested output and writes them only once
the whole file has parsed.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from shell_bookmarks.config.configuration import Configuration

from .data_models import Bookmark, GenerationResults, OutputTarget
from .exporters import ExportError, get_exporter
from .line_parser import BookmarkFileError, BookmarkFileParser, BookmarkParseError


class ShellBookmarkGenerator:
    """Turns a bookmarks file into shell integration files."""

    def __init__(self, config: Configuration):
        """
        Initialize the generator.

        Args:
            config: Configuration object
        """
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.parser = BookmarkFileParser(
            blank_lines=config.get_blank_line_policy(),
            encoding=config.get_encoding(),
        )

    def read_bookmarks(self, input_path: Path) -> List[Bookmark]:
        """
        Parse the bookmarks file.

        Raises:
            BookmarkFileError: If the file cannot be read
            BookmarkParseError: On the first malformed line
        """
        return self.parser.parse_file(input_path)

    def write_outputs(
        self, bookmarks: List[Bookmark], targets: List[OutputTarget]
    ) -> List[Any]:
        """
        Write every target, all or nothing.

        Each output is staged in a temporary file first. Destination files
        are replaced only after every output has been staged.

        Returns:
            List of ExportResult, in target order

        Raises:
            ExportError: If any output cannot be staged or moved into place
            ValueError: If a target names an unknown format
        """
        exporters = [
            (get_exporter(target.format_name)(), target.path) for target in targets
        ]

        staged = []
        try:
            for exporter, path in exporters:
                staged.append(exporter.stage(bookmarks, path))
        except ExportError:
            for staged_export in staged:
                staged_export.discard()
            raise

        results = []
        try:
            for staged_export in staged:
                results.append(staged_export.commit())
        finally:
            for staged_export in staged:
                staged_export.discard()

        return results

    def generate(
        self,
        input_path: Optional[Path] = None,
        targets: Optional[List[OutputTarget]] = None,
        dry_run: bool = False,
    ) -> GenerationResults:
        """
        Parse the bookmarks file and write the requested outputs.

        Args:
            input_path: Bookmarks file (defaults to the configured one)
            targets: Outputs to write (defaults to the configured ones)
            dry_run: Parse and render but write nothing

        Returns:
            GenerationResults for the run

        Raises:
            BookmarkFileError: If the input cannot be read
            BookmarkParseError: On the first malformed line
            ExportError: If an output cannot be written
        """
        start_time = time.time()
        input_path = Path(input_path or self.config.get_input_path())
        if targets is None:
            targets = self.config.get_output_targets()

        self.logger.info(f"Reading bookmarks from {input_path}")
        bookmarks = self.read_bookmarks(input_path)

        results = GenerationResults(
            input_path=input_path,
            bookmarks=bookmarks,
            comment_lines=self.parser.comment_count,
            blank_lines=self.parser.blank_count,
            dry_run=dry_run,
        )

        if dry_run:
            for target in targets:
                self.logger.info(f"Dry run: would write {target}")
        else:
            results.exports = self.write_outputs(bookmarks, targets)

        results.processing_time = time.time() - start_time
        self.logger.info(f"Generation finished: {results}")
        return results

    def preview(self, bookmarks: List[Bookmark], targets: List[OutputTarget]) -> str:
        """Render every target as it would be written, with a header per file."""
        sections = []
        for target in targets:
            exporter = get_exporter(target.format_name)()
            sections.append(f"==> {target.path} ({exporter.description}) <==")
            sections.append(exporter.render(bookmarks))
        return "\n".join(sections)

    def run_cli(self, validated_args: Dict[str, Any]) -> int:
        """
        Run the generator with validated CLI arguments.

        Args:
            validated_args: Dictionary of validated CLI arguments

        Returns:
            Exit code (0 for success, 1 for error)
        """
        dry_run = validated_args.get("dry_run", False)
        verbose = validated_args.get("verbose", False)
        targets = self.config.get_output_targets()

        try:
            results = self.generate(targets=targets, dry_run=dry_run)
        except BookmarkParseError as e:
            print(f"Parse Error: {e}", file=sys.stderr)
            self.logger.error(f"Aborted on malformed line {e.line_number}: {e.reason}")
            return 1
        except BookmarkFileError as e:
            print(f"Input Error: {e}", file=sys.stderr)
            return 1
        except ExportError as e:
            print(f"Output Error: {e}", file=sys.stderr)
            return 1

        if dry_run:
            print(self.preview(results.bookmarks, targets), end="")
            print(
                f"\n✓ Dry run: {results.bookmark_count} bookmarks parsed, "
                f"no files written"
            )
            return 0

        if verbose:
            print("\n✓ Shell bookmarks generated successfully!")
            print(f"  Input file: {results.input_path}")
            print(f"  Bookmarks: {results.bookmark_count}")
            print(f"  Comment lines: {results.comment_lines}")
            print(f"  Blank lines skipped: {results.blank_lines}")
            for export in results.exports:
                print(f"  {export.format_name}: {export.path}")
            print(f"  Processing time: {results.processing_time:.3f}s")

        return 0
