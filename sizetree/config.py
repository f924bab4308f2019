"""Persistent JSON config helpers.

Stores scan settings: worker pool size, strict-root handling, and the path
display width. All access is defensive: malformed or missing config falls
back to defaults. The file is edited by hand; sizetree only reads it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .report import DEFAULT_MAX_PATH_CHARS, MIN_PATH_CHARS
from .size_tree_model import default_max_workers

APP_NAME = "sizetree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ScanSettings:
    """Effective settings for one CLI run."""

    max_workers: int
    strict_root: bool = False
    max_path_chars: int = DEFAULT_MAX_PATH_CHARS


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_int(data: dict[str, object], key: str, minimum: int) -> int | None:
    """Read an integer setting no smaller than ``minimum``.

    Booleans are rejected even though they are ``int`` subclasses.
    """
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < minimum:
        return None
    return value


def load_scan_settings() -> ScanSettings:
    """Load every scan setting from a single config read."""
    data = load_config()
    max_workers = _load_int(data, "max_workers", 1)
    max_path_chars = _load_int(data, "max_path_chars", MIN_PATH_CHARS)
    strict_root = data.get("strict_root")
    return ScanSettings(
        max_workers=max_workers if max_workers is not None else default_max_workers(),
        strict_root=strict_root if isinstance(strict_root, bool) else False,
        max_path_chars=max_path_chars if max_path_chars is not None else DEFAULT_MAX_PATH_CHARS,
    )
