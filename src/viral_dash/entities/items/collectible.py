"""
collectible.py
--------------
Static data packet the player picks up by touching it.
"""

from viral_dash.core.runtime.game_settings import Layers
from viral_dash.entities.base_entity import BaseEntity
from viral_dash.entities.entity_types import CollisionTags, EntityCategory


class Collectible(BaseEntity):
    """Pickup with a circular catch radius."""

    def __init__(self, x, y, radius=10, size=(15, 10), color=(0, 255, 160)):
        super().__init__(x, y, size=size, shape_data={"type": "ellipse", "color": tuple(color)})
        self.radius = radius
        self.collected = False
        self.layer = Layers.PICKUPS
        self.collision_tag = CollisionTags.PICKUP
        self.category = EntityCategory.PICKUP

    def collect(self) -> bool:
        """Mark as collected. Returns False if it already was."""
        if self.collected:
            return False
        self.collected = True
        self.mark_dead()
        return True
