"""
asset_loader.py
---------------
Loads and caches sprite images.

A missing or unreadable file never stops the game: the loader records an
AssetLoadResult with the error, logs a warning, and callers draw a
colored shape instead.
"""

import os

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.results import AssetLoadResult


ASSET_ROOT = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets", "images")


class AssetLoader:
    """Image cache keyed by (filename, size)."""

    def __init__(self, root=ASSET_ROOT):
        self.root = root
        self._cache = {}
        self.results = []

    def load_image(self, filename, size=None) -> AssetLoadResult:
        """
        Load an image, scaled to size if given.

        Returns:
            AssetLoadResult with surface set on success, error text otherwise
        """
        key = (filename, tuple(size) if size else None)
        if key in self._cache:
            return self._cache[key]

        path = os.path.join(self.root, filename) if filename else None
        result = self._load(filename, path, size)

        self._cache[key] = result
        self.results.append(result)
        return result

    def get_surface(self, filename, size=None):
        """Convenience accessor: surface or None."""
        return self.load_image(filename, size).surface

    @property
    def failures(self):
        return [r for r in self.results if not r.loaded]

    def _load(self, filename, path, size):
        if path is None or not os.path.exists(path):
            DebugLogger.warn(f"Image not found: {filename} - using shape fallback", category="loading")
            return AssetLoadResult(str(filename), path, None, "not found")

        try:
            img = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
            if size:
                img = pygame.transform.smoothscale(img, (int(size[0]), int(size[1])))
        except pygame.error as e:
            DebugLogger.warn(f"Failed loading {path}: {e} - using shape fallback", category="loading")
            return AssetLoadResult(filename, path, None, str(e))

        DebugLogger.action(f"Loaded image {filename}", category="loading")
        return AssetLoadResult(filename, path, img)
