"""
base_entity.py
--------------
Shared base for Player, Rival, Collectible and TargetZone.

Positions are centers. self.pos is the float position used by movement
and every distance check; self.rect is its integer copy for drawing,
resynced with sync_rect() after each move.

Rendering Modes
---------------
1. Image mode:
   Entity(x, y, size, image=sprite)

2. Shape fallback (sprite missing):
   Entity(x, y, size, shape_data={"type": "rect", "color": (255, 0, 0)})
"""

from typing import Optional

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Layers, Debug
from viral_dash.entities.entity_state import LifecycleState
from viral_dash.entities.entity_types import EntityCategory, CollisionTags


class BaseEntity:
    """Positioned, drawable thing on the canvas."""

    __slots__ = (
        'pos', 'size', 'rect', 'image', 'shape_data',
        'death_state', 'layer', 'category', 'collision_tag', 'visible',
    )

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(
        self,
        x: float,
        y: float,
        size=(32, 32),
        image: Optional[pygame.Surface] = None,
        shape_data: Optional[dict] = None,
    ):
        """
        Args:
            x: Center X position
            y: Center Y position
            size: (width, height) used for collision and fallback drawing
            image: Pre-loaded sprite surface
            shape_data: Dict with 'type' and 'color' used when image is None
        """
        self.pos = pygame.Vector2(x, y)
        self.size = (int(size[0]), int(size[1]))
        self.rect = pygame.Rect(0, 0, self.size[0], self.size[1])
        self.rect.center = (int(x), int(y))

        self.image = image
        self.shape_data = shape_data or {"type": "rect", "color": (255, 0, 255)}

        self.death_state = LifecycleState.ALIVE
        self.layer = Layers.ENEMIES
        self.category = EntityCategory.NONE
        self.collision_tag = CollisionTags.NEUTRAL
        self.visible = True

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def half_width(self) -> float:
        return self.size[0] / 2

    @property
    def half_height(self) -> float:
        return self.size[1] / 2

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, dt: float):
        """Advance by dt seconds. Entities without behavior keep this no-op."""

    def sync_rect(self):
        """Copy the float position into the draw rect."""
        self.rect.centerx = int(self.pos.x)
        self.rect.centery = int(self.pos.y)

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def mark_dead(self):
        """Transition entity to DEAD. There is no way back."""
        if self.death_state == LifecycleState.DEAD:
            return

        self.death_state = LifecycleState.DEAD
        DebugLogger.state(f"[{type(self).__name__}] -> DEAD", category="entity")

    # ===================================================================
    # Rendering
    # ===================================================================

    def draw(self, draw_manager):
        """Queue entity sprite, or its fallback shape, for rendering."""
        if not self.visible or not self.alive:
            return

        if self.image is not None:
            draw_manager.draw_entity(self, self.layer)
        else:
            draw_manager.queue_shape(
                self.shape_data.get("type", "rect"),
                self.rect.copy(),
                self.shape_data.get("color", (255, 0, 255)),
                self.layer,
            )

        if Debug.HITBOX_VISIBLE:
            draw_manager.queue_hitbox(self.rect.copy(), width=Debug.HITBOX_LINE_WIDTH)

    # ===================================================================
    # Utilities
    # ===================================================================

    def distance_to(self, other: "BaseEntity") -> float:
        """Center-to-center distance."""
        return self.pos.distance_to(other.pos)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"{self.category}/{self.collision_tag}>"
        )
