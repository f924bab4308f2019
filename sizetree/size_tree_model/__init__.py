"""Domain model for size-annotated filesystem trees.

This package contains the non-presentation parts of sizetree:
- file/directory entry datatypes with owned, sorted children
- single-directory scanning with per-entry failure isolation
- sibling ordering
- concurrent bottom-up aggregation
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryKind, FileEntry, SizeTreeEntry
from .scan import DirectoryChild, DirectoryListing, list_directory_children, safe_file_size
from .ordering import entry_sort_key, sort_entries
from .aggregate import SizeAggregator, SizeTreeScan, default_max_workers, resolve_size_tree

__all__ = [
    "EntryKind",
    "DirectoryEntry",
    "FileEntry",
    "SizeTreeEntry",
    "DirectoryChild",
    "DirectoryListing",
    "list_directory_children",
    "safe_file_size",
    "entry_sort_key",
    "sort_entries",
    "SizeAggregator",
    "SizeTreeScan",
    "default_max_workers",
    "resolve_size_tree",
]
