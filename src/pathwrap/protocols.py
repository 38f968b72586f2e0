"""Protocol definitions for the filesystem seam.

``Path`` never calls ``os`` directly. Every status query and read goes
through an object satisfying :class:`FileSystem`, so tests can substitute
a double that raises ``PermissionError`` or other I/O failures on demand.

All concrete implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathwrap.types import DirectoryEntry


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Implementations propagate ``OSError`` rather than translating it;
    callers decide whether a failure is reported or swallowed.
    """

    def stat(self, path: str) -> os.stat_result:
        """Return status of a path, following symbolic links.

        Args:
            path: Path to query.

        Returns:
            The ``stat_result`` of the resolved target.

        Raises:
            OSError: If the path cannot be resolved.
        """
        ...

    def lstat(self, path: str) -> os.stat_result:
        """Return status of a path without following symbolic links.

        Args:
            path: Path to query.

        Returns:
            The ``stat_result`` of the entry itself.

        Raises:
            OSError: If the entry does not exist.
        """
        ...

    def read_text(self, path: str) -> str:
        """Read a file as UTF-8 text.

        Args:
            path: Path to the file.

        Returns:
            File content as string.

        Raises:
            FileNotFoundError: If file does not exist.
            UnicodeDecodeError: If the content is not valid UTF-8.
        """
        ...

    def list_directory(self, path: str) -> list[DirectoryEntry]:
        """List the entries of a directory in enumeration order.

        Args:
            path: Path to the directory.

        Returns:
            One DirectoryEntry per child, unsorted.

        Raises:
            NotADirectoryError: If path is not a directory.
        """
        ...
