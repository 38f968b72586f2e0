"""Shared test fixtures."""

from __future__ import annotations

import io
import os
import stat
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console


def make_stat(mode: int) -> os.stat_result:
    """Build a stat_result carrying only st_mode."""
    return os.stat_result((mode, 0, 0, 0, 0, 0, 0, 0, 0, 0))


# ============================================================================
# Filesystem Tree Fixtures
# ============================================================================


@pytest.fixture
def hello_file(tmp_path: Path) -> Path:
    """Create file.txt containing the greeting."""
    file_path = tmp_path / "file.txt"
    file_path.write_text("Hello, World!", encoding="utf-8")
    return file_path


@pytest.fixture
def hello_link(hello_file: Path) -> Path:
    """Create link.txt pointing at file.txt."""
    link_path = hello_file.parent / "link.txt"
    try:
        os.symlink(hello_file, link_path)
    except (OSError, NotImplementedError) as e:
        pytest.skip(f"cannot create symbolic links: {e}")
    return link_path


@pytest.fixture
def populated_dir(tmp_path: Path) -> Path:
    """Create a directory with one file and one subdirectory."""
    root = tmp_path / "tree"
    root.mkdir()
    (root / "notes.md").write_text("# Notes\n", encoding="utf-8")
    (root / "nested").mkdir()
    return root


# ============================================================================
# Mock FileSystem Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem reporting a regular file.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.stat.return_value = make_stat(stat.S_IFREG | 0o644)
    fs.lstat.return_value = make_stat(stat.S_IFREG | 0o644)
    fs.read_text.return_value = ""
    fs.list_directory.return_value = []
    return fs


@pytest.fixture
def denied_filesystem() -> MagicMock:
    """Create a mock FileSystem on which every call is refused."""
    fs = MagicMock()
    denied = PermissionError(13, "Permission denied")
    fs.stat.side_effect = denied
    fs.lstat.side_effect = denied
    fs.read_text.side_effect = denied
    fs.list_directory.side_effect = denied
    return fs


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def recording_console() -> Console:
    """Console that records output instead of writing to a terminal."""
    return Console(file=io.StringIO(), record=True, width=300, color_system=None)


@pytest.fixture
def stat_factory() -> Callable[[int], os.stat_result]:
    """Expose make_stat to tests that script their own mock results."""
    return make_stat
