"""
config_manager.py
-----------------
JSON config loading for Viral Dash.

Files live under the package's config/ directory (and config/ui/ for
layouts). They are found by basename through an index built on first
use, so callers write load_config("game.json") rather than a path.

Values read from a file are merged over the caller's defaults, so a
config file only needs the keys it changes. Keys named "_notes" are
comments and never reach the game.
"""

import copy
import json
from pathlib import Path

from viral_dash.core.debug.debug_logger import DebugLogger


CONFIG_ROOT = Path(__file__).resolve().parents[2] / "config"
CONFIG_DIRS = (CONFIG_ROOT, CONFIG_ROOT / "ui")
INDEXED_SUFFIXES = {".json", ".yaml", ".yml"}
NOTES_KEY = "_notes"

_index = None


# ===========================================================
# Loading
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Read a JSON config file and merge it over default_dict.

    Args:
        filename: Basename ("game.json", "levels") or an absolute path
        default_dict: Values for keys the file leaves out
        strict: Raise FileNotFoundError instead of falling back to defaults

    Returns:
        dict: Merged configuration (a list or scalar file is returned as-is)
    """
    defaults = default_dict or {}
    path = Path(filename)
    if not (path.is_absolute() and path.exists()):
        path = Path(resolve_path(filename))

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Could not read {path.name}: {e} - using defaults", category="loading")
        return copy.deepcopy(defaults)

    DebugLogger.system(f"Loaded {path.name}", category="loading")
    if not isinstance(data, dict):
        return data
    return merge_dicts(defaults, data)


def merge_dicts(base, override):
    """Return base updated by override, recursing into nested dicts. Neither input is modified."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = merge_dicts(current, value)
        else:
            merged[key] = value
    return merged


# ===========================================================
# File Index
# ===========================================================

def build_file_index():
    """Map every config basename to its path. First directory wins on duplicates."""
    global _index
    _index = {}
    for directory in CONFIG_DIRS:
        if not directory.is_dir():
            continue
        for path in sorted(directory.rglob("*")):
            if path.suffix in INDEXED_SUFFIXES:
                _index.setdefault(path.name, str(path))
    DebugLogger.init(f"Config index: {len(_index)} files", category="loading")


def resolve_path(filename):
    """
    Indexed path for filename, trying a .json suffix when none matches.
    Unknown names come back unchanged so the caller's open() reports them.
    """
    if _index is None:
        build_file_index()

    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    for candidate in (name, f"{name}.json"):
        if candidate in _index:
            return _index[candidate]
    return filename
