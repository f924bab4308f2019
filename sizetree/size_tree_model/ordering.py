"""Sibling ordering for resolved entries.

Directories come before files, larger entries before smaller ones, and equal
sizes fall back to ascending path text so output is deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import SizeTreeEntry


def entry_sort_key(entry: SizeTreeEntry) -> tuple[int, int, str]:
    """Return the ascending sort key for one sibling entry."""
    return (-int(entry.kind), -entry.size, str(entry.path))


def sort_entries(entries: Iterable[SizeTreeEntry]) -> tuple[SizeTreeEntry, ...]:
    """Return ``entries`` as a tuple in sibling display order."""
    return tuple(sorted(entries, key=entry_sort_key))


__all__ = [
    "entry_sort_key",
    "sort_entries",
]
