"""
Input validation utilities for shell-bookmarks.

This module provides validation functions for command-line arguments and
for the merged configuration before any file is read or written.
"""

import os
from pathlib import Path
from typing import List, Union

from shell_bookmarks.config.configuration import Configuration
from shell_bookmarks.core.data_models import OutputTarget


class ValidationError(Exception):
    """Custom exception for validation errors."""

    pass


def validate_input_file(file_path: Union[str, Path, None]) -> Union[Path, None]:
    """
    Validate that the bookmarks file exists and is readable.

    Args:
        file_path: Path to the bookmarks file, or None if not given

    Returns:
        Validated absolute Path, or None when no path was given

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path).expanduser()

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    return path.absolute()


def validate_output_file(file_path: Union[str, Path]) -> Path:
    """
    Validate that output file path is writable.

    Args:
        file_path: Path to the output file

    Returns:
        Validated absolute Path

    Missing parent directories are not created here; the exporter creates
    them when the output is staged.

    Raises:
        ValidationError: If path isn't writable or parent can't be created
    """
    path = Path(file_path).expanduser().absolute()

    if path.is_dir():
        raise ValidationError(f"Output path is a directory: {file_path}")

    parent = path.parent
    ancestor = parent
    while not ancestor.exists():
        ancestor = ancestor.parent

    if not ancestor.is_dir():
        raise ValidationError(
            f"Cannot create output directory: {parent}: {ancestor} is not a directory"
        )

    if not os.access(ancestor, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {ancestor}")

    if path.exists() and not os.access(path, os.W_OK):
        raise ValidationError(f"Output file exists and is not writable: {file_path}")

    return path.absolute()


def validate_config_file(file_path: Union[str, Path, None]) -> Union[Path, None]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to the config file or None

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If file doesn't exist, isn't readable or has an
            unsupported extension
    """
    if file_path is None:
        return None

    path = Path(file_path).expanduser()

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in [".toml", ".json"]:
        raise ValidationError(
            f"Configuration file must be .toml or .json, got: {path.suffix}"
        )

    return path.absolute()


def validate_output_targets(targets: List[OutputTarget]) -> List[OutputTarget]:
    """
    Validate that at least one output is selected and every one is writable.

    Args:
        targets: Selected outputs

    Returns:
        Targets with absolute, validated paths

    Raises:
        ValidationError: If no output is selected or a path is unusable
    """
    if not targets:
        raise ValidationError(
            "At least one output file is required "
            "(use --lf/-l, --zsh/-z or --cd-alias/-c)"
        )

    validated = []
    seen = {}
    for target in targets:
        path = validate_output_file(target.path)
        if path in seen:
            raise ValidationError(
                f"Outputs '{seen[path]}' and '{target.format_name}' "
                f"both write to {path}"
            )
        seen[path] = target.format_name
        validated.append(OutputTarget(target.format_name, path))

    return validated


def validate_configuration(config: Configuration) -> None:
    """
    Validate the merged configuration before generation starts.

    Args:
        config: Configuration with command-line arguments applied

    Raises:
        ValidationError: If the input file is missing or no output is usable
    """
    input_path = config.get_input_path()
    if input_path is None:
        raise ValidationError(
            "Input file is required (use --input/-i or set input.file "
            "in the configuration file)"
        )
    validate_input_file(input_path)
    validate_output_targets(config.get_output_targets())
