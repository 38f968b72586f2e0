"""Immutable filesystem path wrapper with non-raising status queries."""

__version__ = "0.1.0"

from pathwrap.path import Path, UnsupportedEntryError
from pathwrap.protocols import FileSystem
from pathwrap.types import DirectoryEntry, EntryType

__all__ = [
    "__version__",
    "DirectoryEntry",
    "EntryType",
    "FileSystem",
    "Path",
    "UnsupportedEntryError",
]
