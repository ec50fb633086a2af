"""
background_manager.py
---------------------
Static decorative backdrop: a 50 px grid plus a few faint panels.

The backdrop is baked into one surface per canvas size and blitted
each frame.
"""

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Display


class BackgroundManager:
    """Grid backdrop rebuilt on resize."""

    GRID_SPACING = 50
    GRID_COLOR = (40, 40, 70)

    # (x, y, w, h) as canvas fractions, RGBA
    PANELS = (
        ((0.05, 0.10, 0.20, 0.25), (80, 60, 160, 40)),
        ((0.60, 0.55, 0.30, 0.30), (0, 160, 200, 30)),
        ((0.35, 0.70, 0.15, 0.20), (200, 60, 120, 30)),
    )

    def __init__(self, screen_size):
        self.color = Display.BACKGROUND_COLOR
        self._surface = None
        self.resize(screen_size)
        DebugLogger.init_sub("Background grid ready")

    def resize(self, screen_size):
        """Rebake the backdrop for a new canvas size."""
        width, height = int(screen_size[0]), int(screen_size[1])
        self.width, self.height = width, height

        surface = pygame.Surface((width, height))
        surface.fill(self.color)

        for x in range(0, width, self.GRID_SPACING):
            pygame.draw.line(surface, self.GRID_COLOR, (x, 0), (x, height))
        for y in range(0, height, self.GRID_SPACING):
            pygame.draw.line(surface, self.GRID_COLOR, (0, y), (width, y))

        for (fx, fy, fw, fh), color in self.PANELS:
            rect = pygame.Rect(int(fx * width), int(fy * height), int(fw * width), int(fh * height))
            panel = pygame.Surface(rect.size, pygame.SRCALPHA)
            panel.fill(color)
            surface.blit(panel, rect.topleft)

        self._surface = surface

    def render(self, target_surface):
        if target_surface.get_size() != (self.width, self.height):
            self.resize(target_surface.get_size())
        target_surface.blit(self._surface, (0, 0))
