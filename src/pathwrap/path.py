"""Immutable filesystem path value object.

A Path joins its segments once, at construction, and answers every later
query from that normalized string. String-derived values (directory name,
extension, parent) never touch the disk. Status predicates never raise;
``contents()`` always does on failure.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from typing import Union

from pathwrap.filesystem import RealFileSystem
from pathwrap.protocols import FileSystem
from pathwrap.types import DirectoryEntry

logger = logging.getLogger(__name__)

__all__ = ["Path", "Segment", "UnsupportedEntryError"]

Segment = Union[str, "os.PathLike[str]"]

_DEFAULT_FILESYSTEM: FileSystem = RealFileSystem()


class UnsupportedEntryError(OSError):
    """Path exists but is neither a regular file nor a directory."""


def _join(segments: tuple[Segment, ...]) -> str:
    """Join and normalize segments without touching the filesystem.

    Args:
        segments: Strings or path-like objects, joined left to right.

    Returns:
        The normalized path, ``"."`` when nothing remains.

    Raises:
        TypeError: If a segment is not a text path.
    """
    parts = []
    for segment in segments:
        part = os.fspath(segment)
        if not isinstance(part, str):
            raise TypeError(f"path segment must be str, not {type(part).__name__}")
        parts.append(part)
    if not parts:
        return os.curdir
    return os.path.normpath(os.path.join(*parts))


class Path:
    """A filesystem location, which need not exist.

    Example:
        >>> Path("/usr", "local", "..", "bin").directory_name
        '/usr'
    """

    __slots__ = ("_value", "_filesystem")

    def __init__(self, *segments: Segment, filesystem: FileSystem | None = None) -> None:
        object.__setattr__(self, "_value", _join(segments))
        object.__setattr__(
            self, "_filesystem", filesystem if filesystem is not None else _DEFAULT_FILESYSTEM
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Path is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable; cannot delete {name!r}")

    def __fspath__(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Path({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    # ------------------------------------------------------------------
    # String-derived components
    # ------------------------------------------------------------------

    @property
    def directory_name(self) -> str:
        """Path with the final component stripped; ``"."`` for a bare name."""
        return os.path.dirname(self._value) or os.curdir

    @property
    def name(self) -> str:
        return os.path.basename(self._value)

    @property
    def extension(self) -> str:
        """Suffix of the final component including its dot, or ``""``.

        Leading dots of hidden files are not treated as a suffix, so
        ``.gitignore`` has none while ``.eslintrc.js`` has ``.js``.
        """
        return os.path.splitext(self._value)[1]

    @property
    def parent(self) -> Path:
        """Path of the containing directory.

        Ascending stops at the root or at ``"."``; those are their own parent.
        """
        return Path(self.directory_name, filesystem=self._filesystem)

    # ------------------------------------------------------------------
    # Status predicates
    # ------------------------------------------------------------------

    def _probe(self, call: Callable[[str], os.stat_result]) -> os.stat_result | None:
        """Run a status call, returning None instead of raising."""
        try:
            return call(self._value)
        except (OSError, ValueError) as e:
            logger.debug("Status query failed for %s: %s", self._value, e)
            return None

    @property
    def exists(self) -> bool:
        """True if the path resolves; broken symlinks do not."""
        return self._probe(self._filesystem.stat) is not None

    def is_directory(self) -> bool:
        result = self._probe(self._filesystem.stat)
        return result is not None and stat.S_ISDIR(result.st_mode)

    def is_file(self) -> bool:
        result = self._probe(self._filesystem.stat)
        return result is not None and stat.S_ISREG(result.st_mode)

    def is_symbolic_link(self) -> bool:
        """True if the path itself is a link, whatever its target."""
        result = self._probe(self._filesystem.lstat)
        return result is not None and stat.S_ISLNK(result.st_mode)

    # ------------------------------------------------------------------
    # Content retrieval
    # ------------------------------------------------------------------

    def contents(self) -> str | list[DirectoryEntry]:
        """Read the file or list the directory this path resolves to.

        Returns:
            The file's text decoded as UTF-8, or the directory's entries in
            enumeration order.

        Raises:
            FileNotFoundError: If the path does not resolve.
            PermissionError: If the path cannot be read.
            UnicodeDecodeError: If file content is not valid UTF-8.
            UnsupportedEntryError: If the path is a FIFO, socket or device.
        """
        mode = self._filesystem.stat(self._value).st_mode
        if stat.S_ISREG(mode):
            logger.debug("Reading file %s", self._value)
            return self._filesystem.read_text(self._value)
        if stat.S_ISDIR(mode):
            logger.debug("Listing directory %s", self._value)
            return self._filesystem.list_directory(self._value)
        raise UnsupportedEntryError(f"Not a regular file or directory: {self._value}")
