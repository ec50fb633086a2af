"""
draw_manager.py
---------------
Layered draw queue. Scene code queues sprites and primitive shapes
during draw(); render() paints them lowest layer first, shapes before
sprites within a layer, then the debug hitboxes on top.

The queue is rebuilt every frame: the whole canvas is redrawn, there is
no dirty-rectangle tracking.
"""

from collections import defaultdict

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Display


SHAPE_TYPES = ("rect", "circle", "ellipse", "line")


class DrawManager:
    """Collects one frame of draw calls and renders them in layer order."""

    def __init__(self):
        self.sprites = defaultdict(list)   # layer -> [(surface, rect)]
        self.shapes = defaultdict(list)    # layer -> [(type, rect, color, kwargs)]
        self.debug_hitboxes = []
        self.bg_manager = None
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queueing
    # ===========================================================

    def clear(self):
        """Drop last frame's queue. Layer lists are kept and reused."""
        for items in self.sprites.values():
            items.clear()
        for items in self.shapes.values():
            items.clear()
        self.debug_hitboxes.clear()

    def queue_draw(self, surface, rect, layer=0):
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped empty sprite at layer {layer}", category="drawing")
            return
        self.sprites[layer].append((surface, rect))

    def draw_entity(self, entity, layer=0):
        """Queue an entity's sprite at its rect."""
        self.queue_draw(entity.image, entity.rect, layer)

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """
        Queue a primitive.

        Args:
            shape_type: One of SHAPE_TYPES
            rect: Bounding rect (lines use start_pos/end_pos instead)
            color: RGB, or RGBA to alpha-blend
            layer: Render layer
            **kwargs: width, start_pos, end_pos
        """
        if shape_type not in SHAPE_TYPES:
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="drawing")
            return
        self.shapes[layer].append((shape_type, rect, tuple(color), kwargs))

    def queue_hitbox(self, rect, color=(255, 255, 0), width=1):
        self.debug_hitboxes.append((rect, color, width))

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target, debug=False):
        """Paint background, every queued layer, then hitboxes."""
        if self.bg_manager is not None:
            self.bg_manager.render(target)
        else:
            target.fill(Display.BACKGROUND_COLOR)

        for layer in sorted(set(self.sprites) | set(self.shapes)):
            for shape_type, rect, color, kwargs in self.shapes.get(layer, ()):
                self._paint_shape(target, shape_type, rect, color, kwargs)
            sprites = self.sprites.get(layer)
            if sprites:
                target.blits(sprites)

        for rect, color, width in self.debug_hitboxes:
            pygame.draw.rect(target, color, rect, width)

        if debug:
            DebugLogger.trace(
                f"Frame: {sum(map(len, self.sprites.values()))} sprites, "
                f"{sum(map(len, self.shapes.values()))} shapes",
                category="drawing",
            )

    def _paint_shape(self, target, shape_type, rect, color, kwargs):
        # pygame.draw ignores alpha on the display surface; blend through a scratch surface
        if len(color) == 4 and shape_type != "line" and rect.width > 0 and rect.height > 0:
            scratch = pygame.Surface(rect.size, pygame.SRCALPHA)
            _primitive(scratch, shape_type, scratch.get_rect(), color, kwargs)
            target.blit(scratch, rect.topleft)
        else:
            _primitive(target, shape_type, rect, color, kwargs)


def _primitive(surface, shape_type, rect, color, kwargs):
    width = kwargs.get("width", 0)
    if shape_type == "rect":
        pygame.draw.rect(surface, color, rect, width)
    elif shape_type == "circle":
        pygame.draw.circle(surface, color, rect.center, rect.width // 2, width)
    elif shape_type == "ellipse":
        pygame.draw.ellipse(surface, color, rect, width)
    else:
        start, end = kwargs.get("start_pos"), kwargs.get("end_pos")
        if start and end:
            pygame.draw.line(surface, color[:3], start, end, max(width, 1))
