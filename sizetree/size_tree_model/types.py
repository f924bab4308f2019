"""Domain datatypes for resolved size-tree entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from ..errors import TreeInvariantError


class EntryKind(IntEnum):
    """Entry kind; higher values sort first among siblings."""

    FILE = 0
    DIRECTORY = 1


@dataclass(frozen=True)
class FileEntry:
    """Resolved file with its metadata length (0 when unreadable)."""

    path: Path
    size: int = 0

    @property
    def kind(self) -> EntryKind:
        return EntryKind.FILE


@dataclass(frozen=True)
class DirectoryEntry:
    """Resolved directory owning its sorted children.

    ``size`` must equal the sum of the children's sizes; constructing an
    inconsistent entry raises ``TreeInvariantError``.
    """

    path: Path
    size: int = 0
    children: tuple["SizeTreeEntry", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            raise TreeInvariantError(self.path, "Directory children must be a tuple")
        total = sum(child.size for child in self.children)
        if total != self.size:
            raise TreeInvariantError(
                self.path,
                f"Directory size {self.size} does not match children total {total}",
            )

    @property
    def kind(self) -> EntryKind:
        return EntryKind.DIRECTORY


SizeTreeEntry = DirectoryEntry | FileEntry


__all__ = [
    "EntryKind",
    "FileEntry",
    "DirectoryEntry",
    "SizeTreeEntry",
]
