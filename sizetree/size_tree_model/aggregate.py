"""Concurrent bottom-up size aggregation.

Every subdirectory gets its own scan on a bounded thread pool. Workers only
list one directory and hand back an owned ``DirectoryListing``; they never
wait on other scans, so a small pool cannot deadlock on deep trees. The
calling thread coordinates: it keeps at most ``max_workers`` scans in flight,
parks further subdirectories in a backlog, and finalizes each directory once
all of its subdirectories are finalized.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import RootScanError, ScanFailure, SizeTreeError, TreeInvariantError
from .ordering import sort_entries
from .scan import DirectoryListing, list_directory_children, safe_file_size
from .types import DirectoryEntry, FileEntry, SizeTreeEntry

logger = logging.getLogger(__name__)


def default_max_workers() -> int:
    """Return the default pool size, matching ``ThreadPoolExecutor``."""
    return min(32, (os.cpu_count() or 1) + 4)


@dataclass(frozen=True)
class SizeTreeScan:
    """Resolved tree plus every failure absorbed while building it."""

    root: SizeTreeEntry
    failures: tuple[SizeTreeError, ...] = ()


@dataclass(eq=False)
class _PendingDirectory:
    """Coordinator-side state for a directory still waiting on children."""

    path: Path
    parent: "_PendingDirectory | None" = None
    resolved: list[SizeTreeEntry] = field(default_factory=list)
    outstanding: int = 0


class SizeAggregator:
    """Resolve filesystem paths into sorted, size-annotated trees."""

    def __init__(
        self,
        max_workers: int | None = None,
        *,
        strict_root: bool = False,
        list_children: Callable[[Path], DirectoryListing] = list_directory_children,
    ) -> None:
        if max_workers is None:
            max_workers = default_max_workers()
        if max_workers <= 0:
            raise ValueError("max_workers must be >= 1")
        self.max_workers = max_workers
        self.strict_root = strict_root
        self._list_children = list_children

    def resolve(self, path: Path) -> SizeTreeEntry:
        """Return the fully resolved entry for ``path``."""
        return self.scan(path).root

    def scan(self, path: Path) -> SizeTreeScan:
        """Resolve ``path`` and report the failures absorbed on the way."""
        path = Path(path)
        failures: list[SizeTreeError] = []

        try:
            is_dir = path.is_dir()
        except OSError as exc:
            if self.strict_root:
                raise RootScanError(path, exc) from exc
            self._record(ScanFailure(path, exc), failures)
            return SizeTreeScan(root=DirectoryEntry(path=path), failures=tuple(failures))

        if not is_dir:
            size, failure = safe_file_size(path, follow_symlinks=True)
            if failure is not None:
                if self.strict_root:
                    raise RootScanError(path, failure.cause)
                self._record(failure, failures)
            return SizeTreeScan(root=FileEntry(path=path, size=size), failures=tuple(failures))

        root = self._resolve_directory(path, failures)
        return SizeTreeScan(root=root, failures=tuple(failures))

    def _record(self, failure: SizeTreeError, failures: list[SizeTreeError]) -> None:
        logger.warning("%s", failure)
        failures.append(failure)

    def _resolve_directory(self, root_path: Path, failures: list[SizeTreeError]) -> DirectoryEntry:
        root_pending = _PendingDirectory(path=root_path)
        backlog: list[_PendingDirectory] = [root_pending]
        in_flight: dict[Future[DirectoryListing], _PendingDirectory] = {}
        result: DirectoryEntry | None = None

        def finalize(pending: _PendingDirectory) -> None:
            nonlocal result
            node: _PendingDirectory | None = pending
            while node is not None:
                children = sort_entries(node.resolved)
                entry = DirectoryEntry(
                    path=node.path,
                    size=sum(child.size for child in children),
                    children=children,
                )
                parent = node.parent
                if parent is None:
                    result = entry
                    return
                parent.resolved.append(entry)
                parent.outstanding -= 1
                if parent.outstanding > 0:
                    return
                node = parent

        with ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="sizetree-scan",
        ) as executor:
            while backlog or in_flight:
                while backlog and len(in_flight) < self.max_workers:
                    pending = backlog.pop()
                    in_flight[executor.submit(self._list_children, pending.path)] = pending

                done, _not_done = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    pending = in_flight.pop(future)
                    listing = future.result()

                    if listing.scan_error is not None:
                        if pending is root_pending and self.strict_root:
                            raise RootScanError(root_path, listing.scan_error.cause)
                        self._record(listing.scan_error, failures)
                    for failure in listing.entry_failures:
                        self._record(failure, failures)

                    for child in listing.children:
                        if child.is_dir:
                            pending.outstanding += 1
                            backlog.append(_PendingDirectory(path=child.path, parent=pending))
                        else:
                            pending.resolved.append(FileEntry(path=child.path, size=child.file_size))

                    if pending.outstanding == 0:
                        finalize(pending)

        if result is None:
            raise TreeInvariantError(root_path, "Scan finished without resolving the root directory")
        return result


def resolve_size_tree(
    path: Path,
    *,
    max_workers: int | None = None,
    strict_root: bool = False,
) -> SizeTreeScan:
    """Scan ``path`` with a fresh ``SizeAggregator``."""
    aggregator = SizeAggregator(max_workers=max_workers, strict_root=strict_root)
    return aggregator.scan(path)


__all__ = [
    "SizeTreeScan",
    "SizeAggregator",
    "default_max_workers",
    "resolve_size_tree",
]
