"""
Pytest configuration and shared fixtures for shell-bookmarks tests.

This module provides bookmark files, output paths and configuration files
shared across test modules.
"""

from pathlib import Path
from typing import Callable, List

import pytest
import toml

from shell_bookmarks.config.pydantic_config import INPUT_ENV_VAR
from shell_bookmarks.core.data_models import Bookmark

EXAMPLE_BOOKMARKS = """\
# my bookmarks
proj /home/user/project
docs "/home/user/My Documents"
"""


# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path: Path) -> Path:
    """Keep default config lookups and environment overrides out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(INPUT_ENV_VAR, raising=False)
    monkeypatch.chdir(workdir)
    return workdir


# ============================================================================
# Bookmark Fixtures
# ============================================================================


@pytest.fixture
def sample_bookmarks() -> List[Bookmark]:
    """Bookmarks as parsed from EXAMPLE_BOOKMARKS."""
    return [
        Bookmark("proj", "/home/user/project"),
        Bookmark("docs", "/home/user/My Documents"),
    ]


@pytest.fixture
def write_bookmarks_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing bookmarks file content to a temporary file."""

    def _write(content: str, name: str = "bookmarks") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_bookmarks_file(write_bookmarks_file) -> Path:
    """The documented example bookmarks file."""
    return write_bookmarks_file(EXAMPLE_BOOKMARKS)


@pytest.fixture
def malformed_bookmarks_file(write_bookmarks_file) -> Path:
    """A bookmarks file whose third line has no path."""
    return write_bookmarks_file(
        "# my bookmarks\nproj /home/user/project\nonlyoneword\n",
        name="malformed_bookmarks",
    )


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory for generated files."""
    path = tmp_path / "out"
    path.mkdir()
    return path


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def write_config_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a TOML configuration file."""

    def _write(data: dict, name: str = "shell_bookmarks.toml") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            toml.dump(data, f)
        return path

    return _write
