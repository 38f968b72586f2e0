"""Shared data types for pathwrap."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

__all__ = ["DirectoryEntry", "EntryType"]


class EntryType(str, Enum):
    """Kind of filesystem entry, as seen without following links."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str]) -> EntryType:
        """Classify an ``os.scandir`` entry without following symlinks."""
        if entry.is_symlink():
            return cls.SYMBOLIC_LINK
        if entry.is_dir(follow_symlinks=False):
            return cls.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True)
class DirectoryEntry:
    """One item of a directory listing.

    Attributes:
        name: Entry name relative to the listed directory.
        type: What the entry itself is. Symlinks are not resolved.
    """

    name: str
    type: EntryType

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name:
            raise ValueError("name cannot be empty")

    def is_file(self) -> bool:
        return self.type is EntryType.FILE

    def is_directory(self) -> bool:
        return self.type is EntryType.DIRECTORY

    def is_symbolic_link(self) -> bool:
        return self.type is EntryType.SYMBOLIC_LINK
