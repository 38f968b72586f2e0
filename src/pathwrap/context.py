"""Application context for dependency injection.

This module separates object creation from object use so CLI commands can
be exercised with a fake filesystem and a recording console.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from pathwrap.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from pathwrap.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for CLI dependencies.

    The filesystem is typed with the FileSystem protocol, so test doubles
    can be injected without inheritance.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    console: Console = field(default_factory=Console)


def create_context() -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Returns:
        Configured AppContext with all dependencies.
    """
    from pathwrap.filesystem import RealFileSystem

    return AppContext(filesystem=RealFileSystem(), console=Console())
