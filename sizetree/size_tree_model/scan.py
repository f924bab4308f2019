"""Filesystem scanning for one directory level.

The scanner never raises for filesystem problems. Failures are returned as
values on the listing so the aggregator can log them and keep going.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..errors import EntryFailure, MetadataFailure, ScanFailure


@dataclass(frozen=True)
class DirectoryChild:
    """One immediate child of a scanned directory."""

    name: str
    path: Path
    is_dir: bool
    file_size: int = 0


@dataclass(frozen=True)
class DirectoryListing:
    """Result of listing one directory.

    ``scan_error`` is set when the directory itself could not be opened; in
    that case ``children`` is empty. ``entry_failures`` collects per-entry
    problems that did not stop the rest of the listing.
    """

    directory: Path
    children: tuple[DirectoryChild, ...] = ()
    scan_error: ScanFailure | None = None
    entry_failures: tuple[EntryFailure | MetadataFailure, ...] = ()


def safe_file_size(path: Path, follow_symlinks: bool = False) -> tuple[int, MetadataFailure | None]:
    """Return ``(size, failure)`` for ``path``; size is 0 on stat failure.

    Links are sized by their own ``lstat`` unless ``follow_symlinks`` is set.
    """
    try:
        stat = path.stat() if follow_symlinks else path.lstat()
        return int(stat.st_size), None
    except OSError as exc:
        return 0, MetadataFailure(path, exc)


def list_directory_children(directory: Path) -> DirectoryListing:
    """List immediate children of ``directory`` with file sizes.

    Symlinks are not followed: a link is reported as a non-directory child
    sized by its own ``lstat``. Children are returned sorted by name.
    """
    children: list[DirectoryChild] = []
    entry_failures: list[EntryFailure | MetadataFailure] = []

    try:
        with os.scandir(directory) as entries:
            iterator = iter(entries)
            while True:
                try:
                    child = next(iterator)
                except StopIteration:
                    break
                except OSError as exc:
                    # scandir iterators cannot resume after an error.
                    entry_failures.append(EntryFailure(directory, exc))
                    break

                child_path = directory / child.name
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError as exc:
                    entry_failures.append(EntryFailure(child_path, exc))
                    continue

                file_size = 0
                if not is_dir:
                    try:
                        file_size = int(child.stat(follow_symlinks=False).st_size)
                    except OSError as exc:
                        entry_failures.append(MetadataFailure(child_path, exc))

                children.append(
                    DirectoryChild(
                        name=child.name,
                        path=child_path,
                        is_dir=is_dir,
                        file_size=file_size,
                    )
                )
    except OSError as exc:
        return DirectoryListing(
            directory=directory,
            scan_error=ScanFailure(directory, exc),
            entry_failures=tuple(entry_failures),
        )

    children.sort(key=lambda item: item.name)
    return DirectoryListing(
        directory=directory,
        children=tuple(children),
        entry_failures=tuple(entry_failures),
    )


__all__ = [
    "DirectoryChild",
    "DirectoryListing",
    "safe_file_size",
    "list_directory_children",
]
