"""Filesystem implementation backed by the ``os`` module.

The RealFileSystem implementation wraps standard library calls and
satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import os

from pathwrap.types import DirectoryEntry, EntryType


class RealFileSystem:
    """Production filesystem implementation.

    Wraps ``os.stat``, ``os.lstat``, ``os.scandir`` and text reads.
    """

    def stat(self, path: str) -> os.stat_result:
        """Return status of the resolved target."""
        return os.stat(path)

    def lstat(self, path: str) -> os.stat_result:
        """Return status of the entry itself."""
        return os.lstat(path)

    def read_text(self, path: str) -> str:
        """Read text content from a file."""
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()

    def list_directory(self, path: str) -> list[DirectoryEntry]:
        """List directory entries in the order the OS yields them."""
        with os.scandir(path) as entries:
            return [
                DirectoryEntry(name=entry.name, type=EntryType.from_dir_entry(entry))
                for entry in entries
            ]
