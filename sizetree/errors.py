"""Failure taxonomy for size-tree scans.

``ScanFailure``, ``EntryFailure`` and ``MetadataFailure`` are recorded as
values on listings and scan results, then logged; they never escape the node
they occurred on. ``RootScanError`` is only raised in strict-root mode and
``TreeInvariantError`` marks a programming defect.
"""

from __future__ import annotations

from pathlib import Path


class SizeTreeError(Exception):
    """Base error carrying the offending path and underlying cause."""

    def __init__(self, path: Path, message: str, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        detail = f"{message}: {path}"
        if cause is not None:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class ScanFailure(SizeTreeError):
    """A directory could not be opened or listed."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        super().__init__(path, "Cannot list directory", cause)


class EntryFailure(SizeTreeError):
    """A directory entry's type or presence could not be determined."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        super().__init__(path, "Cannot read directory entry", cause)


class MetadataFailure(SizeTreeError):
    """A file's size could not be read."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        super().__init__(path, "Cannot read entry metadata", cause)


class RootScanError(SizeTreeError):
    """The scan root itself could not be listed (strict-root mode)."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        super().__init__(path, "Cannot scan root directory", cause)


class TreeInvariantError(SizeTreeError):
    """Internal tree invariant was violated."""


__all__ = [
    "SizeTreeError",
    "ScanFailure",
    "EntryFailure",
    "MetadataFailure",
    "RootScanError",
    "TreeInvariantError",
]
