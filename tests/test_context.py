"""Tests for context module."""

from __future__ import annotations
from unittest.mock import MagicMock

from rich.console import Console

from pathwrap.context import AppContext, create_context
from pathwrap.filesystem import RealFileSystem


class TestAppContext:
    """Tests for AppContext dataclass."""

    def test_create_with_all_dependencies(self) -> None:
        """Test creating context with all dependencies."""
        filesystem = MagicMock()
        console = MagicMock()
        ctx = AppContext(filesystem=filesystem, console=console)
        assert ctx.filesystem is filesystem
        assert ctx.console is console

    def test_default_filesystem(self) -> None:
        """Test context creates default filesystem if not provided."""
        ctx = AppContext()
        assert isinstance(ctx.filesystem, RealFileSystem)
        assert isinstance(ctx.console, Console)

    def test_defaults_not_shared(self) -> None:
        """Test each context gets its own default instances."""
        assert AppContext().filesystem is not AppContext().filesystem


class TestCreateContext:
    """Tests for create_context factory function."""

    def test_creates_real_dependencies(self) -> None:
        """Test factory wires production implementations."""
        ctx = create_context()
        assert isinstance(ctx, AppContext)
        assert isinstance(ctx.filesystem, RealFileSystem)
        assert isinstance(ctx.console, Console)
