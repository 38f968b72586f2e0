"""Serializable snapshots of Path queries for display and JSON output."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathwrap.path import Path
from pathwrap.types import DirectoryEntry, EntryType


class PathReport(BaseModel):
    """Every query a Path answers, captured at one point in time."""

    path: str
    name: str
    directory_name: str
    extension: str
    exists: bool
    is_file: bool
    is_directory: bool
    is_symbolic_link: bool

    @classmethod
    def from_path(cls, path: Path) -> PathReport:
        """Run each query against path and record the answers.

        Args:
            path: Path to inspect.

        Returns:
            Populated PathReport. Never raises for filesystem errors.
        """
        return cls(
            path=str(path),
            name=path.name,
            directory_name=path.directory_name,
            extension=path.extension,
            exists=path.exists,
            is_file=path.is_file(),
            is_directory=path.is_directory(),
            is_symbolic_link=path.is_symbolic_link(),
        )


class EntryReport(BaseModel):
    """A directory entry as emitted by ``pathwrap contents --json``."""

    name: str
    type: EntryType

    @classmethod
    def from_entry(cls, entry: DirectoryEntry) -> EntryReport:
        return cls(name=entry.name, type=entry.type)


class ListingReport(BaseModel):
    """Directory listing of a path."""

    path: str
    entries: list[EntryReport] = Field(default_factory=list)
