"""Command-line front door for sizetree.

Resolves the root path, scans it, and prints the size report to stdout.
Scan warnings are logged to stderr and never change the exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_scan_settings
from .errors import RootScanError
from .report import write_report
from .size_tree_model import SizeAggregator

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging() -> None:
    """Send warnings to stderr unless the host already configured logging."""
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr, format=LOG_FORMAT)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the size report for one path.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Show the disk usage of a directory tree, largest entries first."
    )
    parser.add_argument("path", nargs="?", default=None, help="Path to scan. Defaults to current directory.")
    args = parser.parse_args()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    try:
        missing = not path.exists()
    except OSError:
        # Unreadable roots are reported by the aggregator per strict_root.
        missing = False
    if missing:
        raise SystemExit(f"Path not found: {path}")

    configure_logging()
    settings = load_scan_settings()
    aggregator = SizeAggregator(max_workers=settings.max_workers, strict_root=settings.strict_root)
    try:
        tree = aggregator.resolve(path)
    except RootScanError as exc:
        raise SystemExit(f"Cannot scan {path}: {exc.cause}") from exc

    write_report(tree, sys.stdout, settings.max_path_chars)


if __name__ == "__main__":
    main()
