"""Plain-text report for resolved size trees.

Rows are emitted depth-first in pre-order: a directory's line is followed by
all of its descendants before the next sibling. Each line reads
``<KIND> <SIZE> [<PERCENT>%] <INDENT><PATH>`` where the percentage is relative
to the entry's direct parent.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .size_tree_model import DirectoryEntry, EntryKind, SizeTreeEntry

DEFAULT_MAX_PATH_CHARS = 50
PATH_EDGE_CHARS = 20
MIN_PATH_CHARS = 2 * PATH_EDGE_CHARS + 3
INDENT_UNIT = "->"
KIND_LABELS = {
    EntryKind.DIRECTORY: "FOLDER",
    EntryKind.FILE: "FILE  ",
}
_SIZE_UNITS = ("KB", "MB", "GB", "TB")


@dataclass(frozen=True)
class ReportRow:
    """One report line before text formatting."""

    entry: SizeTreeEntry
    depth: int
    percent: float


def format_size(size: int) -> str:
    """Format a byte count using binary KB/MB/GB/TB with two decimals."""
    if size < 1024:
        return f"{size} Bytes"
    value = float(size)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        value /= 1024.0
        if value < 1024.0:
            break
    return f"{value:.2f} {unit}"


def format_path(path: Path, max_chars: int = DEFAULT_MAX_PATH_CHARS) -> str:
    """Shorten long paths to ``<first 20>...<last 20>`` characters.

    ``max_chars`` below ``MIN_PATH_CHARS`` is raised to it, the length of a
    shortened path.
    """
    text = str(path)
    if len(text) <= max(max_chars, MIN_PATH_CHARS):
        return text
    return f"{text[:PATH_EDGE_CHARS]}...{text[-PATH_EDGE_CHARS:]}"


def percent_of_parent(size: int, parent_size: int) -> float:
    """Return ``size`` as a percentage of ``parent_size`` (0 for empty parents)."""
    if parent_size <= 0:
        return 0.0
    return max(0.0, min(100.0, size * 100.0 / parent_size))


def iter_report_rows(tree: SizeTreeEntry) -> Iterator[ReportRow]:
    """Yield rows for ``tree`` in depth-first pre-order.

    The root row is measured against itself, so it shows 100% unless empty.
    """
    stack: list[tuple[SizeTreeEntry, int, int]] = [(tree, 0, tree.size)]
    while stack:
        entry, depth, parent_size = stack.pop()
        yield ReportRow(entry=entry, depth=depth, percent=percent_of_parent(entry.size, parent_size))
        if isinstance(entry, DirectoryEntry):
            for child in reversed(entry.children):
                stack.append((child, depth + 1, entry.size))


def format_report_line(row: ReportRow, max_path_chars: int = DEFAULT_MAX_PATH_CHARS) -> str:
    """Render one report row as text without a trailing newline."""
    label = KIND_LABELS[row.entry.kind]
    indent = INDENT_UNIT * row.depth
    return (
        f"{label} {format_size(row.entry.size)} [{row.percent:.2f}%] "
        f"{indent}{format_path(row.entry.path, max_path_chars)}"
    )


def render_report(tree: SizeTreeEntry, max_path_chars: int = DEFAULT_MAX_PATH_CHARS) -> list[str]:
    """Return all report lines for ``tree``."""
    return [format_report_line(row, max_path_chars) for row in iter_report_rows(tree)]


def write_report(tree: SizeTreeEntry, stream: TextIO, max_path_chars: int = DEFAULT_MAX_PATH_CHARS) -> None:
    """Write the report for ``tree`` to ``stream``, one line per entry."""
    for row in iter_report_rows(tree):
        stream.write(format_report_line(row, max_path_chars))
        stream.write("\n")


__all__ = [
    "DEFAULT_MAX_PATH_CHARS",
    "MIN_PATH_CHARS",
    "ReportRow",
    "format_size",
    "format_path",
    "percent_of_parent",
    "iter_report_rows",
    "format_report_line",
    "render_report",
    "write_report",
]
