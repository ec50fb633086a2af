"""
layout_loader.py
----------------
Loads YAML layout files for the HUD and overlays.

Files are looked up through the config index, parsed with
yaml.safe_load and cached by filename. A missing or broken file logs a
warning and yields an empty layout so the HUD falls back to defaults.
"""

import os

import yaml

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.services.config_manager import merge_dicts, resolve_path


class LayoutLoader:
    """YAML layout reader with a per-file cache."""

    def __init__(self):
        self.cache = {}

    def load(self, filename, defaults=None) -> dict:
        """
        Load a layout file merged over defaults.

        Args:
            filename: Layout file name, e.g. "hud.yaml"
            defaults: Values used for keys the file does not set
        """
        defaults = defaults or {}

        if filename not in self.cache:
            self.cache[filename] = self._read(filename)

        return merge_dicts(defaults, self.cache[filename])

    def _read(self, filename) -> dict:
        path = resolve_path(filename)
        if not os.path.exists(path):
            DebugLogger.warn(f"Layout not found: {filename} - using defaults", category="ui")
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            DebugLogger.warn(f"Bad layout {filename}: {e} - using defaults", category="ui")
            return {}

        if not isinstance(config, dict):
            DebugLogger.warn(f"Layout {filename} is not a mapping - using defaults", category="ui")
            return {}

        DebugLogger.system(f"Loaded layout {filename}", category="ui")
        return config
