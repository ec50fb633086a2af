"""
target_zone.py
--------------
Level exit. Dim until the level's objectives are cleared, then open for
the rest of the level.
"""

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Layers
from viral_dash.entities.base_entity import BaseEntity
from viral_dash.entities.entity_types import CollisionTags, EntityCategory


class TargetZone(BaseEntity):
    """Circular exit zone placed by viewport ratio."""

    def __init__(self, x, y, radius=40,
                 inactive_color=(90, 90, 120), active_color=(0, 255, 120)):
        super().__init__(x, y, size=(radius * 2, radius * 2),
                         shape_data={"type": "circle", "color": tuple(inactive_color)})
        self.radius = radius
        self.active = False
        self.inactive_color = tuple(inactive_color)
        self.active_color = tuple(active_color)
        self.layer = Layers.ZONES
        self.collision_tag = CollisionTags.ZONE
        self.category = EntityCategory.ZONE

    def activate(self) -> bool:
        """Open the zone. Returns True only on the first call; never closes again."""
        if self.active:
            return False
        self.active = True
        DebugLogger.state("Target zone -> ACTIVE", category="level")
        return True

    def draw(self, draw_manager):
        rect = pygame.Rect(0, 0, int(self.radius * 2), int(self.radius * 2))
        rect.center = (int(self.pos.x), int(self.pos.y))
        if self.active:
            draw_manager.queue_shape("circle", rect, (*self.active_color, 90), self.layer)
            draw_manager.queue_shape("circle", rect, self.active_color, self.layer, width=3)
        else:
            draw_manager.queue_shape("circle", rect, self.inactive_color, self.layer, width=2)
