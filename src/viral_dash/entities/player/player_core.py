"""
player_core.py
--------------
Defines the Player entity core used to coordinate movement, abilities
and invulnerability.

Timing is driven by the scene's simulation clock: `now` is passed into
every call that checks a cooldown, and every ability end-state is a
countdown field decremented by `dt`.
"""

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Layers, Display
from viral_dash.core.services.config_manager import load_config
from viral_dash.entities.base_entity import BaseEntity
from viral_dash.entities.entity_types import CollisionTags, EntityCategory
from viral_dash.graphics.particles.particle_manager import ParticleSystem

from .player_movement import update_movement
from . import player_ability
from . import player_logic


DEFAULT_PLAYER_CONFIG = {
    "width": 56,
    "height": 56,
    "speed": 180,
    "color": [0, 200, 255],
    "dash_cooldown": 1.5,
    "dash_duration": 0.4,
    "dash_speed_multiplier": 2.5,
    "dash_trail_interval": 0.02,
    "laser_cooldown": 2.0,
    "laser_duration": 0.15,
    "laser_range": 300,
    "laser_width": 5,
    "laser_color": [255, 60, 60],
    "invulnerability_duration": 1.0,
    "blink_interval": 0.1,
}


class Player(BaseEntity):
    """Represents the controllable player entity."""

    def __init__(self, x, y, image=None, bounds=None, cfg=None):
        """
        Initialize the player entity.

        Args:
            x, y: Spawn center
            image: Sprite surface, or None for the shape fallback
            bounds: (width, height) of the canvas the player is clamped to
            cfg: Override for the "player" section of game.json
        """
        if cfg is None:
            cfg = load_config("game.json", {"player": DEFAULT_PLAYER_CONFIG})["player"]
        cfg = {**DEFAULT_PLAYER_CONFIG, **cfg}
        self.cfg = cfg

        super().__init__(
            x, y,
            size=(cfg["width"], cfg["height"]),
            image=image,
            shape_data={"type": "rect", "color": tuple(cfg["color"])},
        )

        self.layer = Layers.PLAYER
        self.collision_tag = CollisionTags.PLAYER
        self.category = EntityCategory.PLAYER
        self.bounds = tuple(bounds) if bounds else (Display.WIDTH, Display.HEIGHT)

        # Movement
        self.speed = cfg["speed"]
        self.velocity = pygame.Vector2(0, 0)
        self.last_dir = pygame.Vector2(1, 0)

        # Dash
        self.dashing = False
        self.dash_timer = 0.0
        self.last_dash_time = None
        self.dash_cooldown = cfg["dash_cooldown"]
        self.dash_duration = cfg["dash_duration"]
        self.dash_multiplier = cfg["dash_speed_multiplier"]
        self.trail_interval = cfg["dash_trail_interval"]
        self.trail_timer = 0.0
        self.dash_particles = ParticleSystem(limit=200, layer=Layers.EFFECTS)

        # Laser
        self.laser_active = False
        self.laser_timer = 0.0
        self.last_laser_time = None
        self.laser_cooldown = cfg["laser_cooldown"]
        self.laser_duration = cfg["laser_duration"]
        self.laser_range = cfg["laser_range"]
        self.laser_width = cfg["laser_width"]
        self.laser_color = tuple(cfg["laser_color"])
        self.laser_dir = pygame.Vector2(1, 0)
        self.laser_start = pygame.Vector2(x, y)
        self.laser_end = pygame.Vector2(x, y)

        # Invulnerability
        self.invulnerable = False
        self.invuln_timer = 0.0
        self.last_hit_time = None
        self.invuln_duration = cfg["invulnerability_duration"]
        self.blink_interval = cfg["blink_interval"]

        DebugLogger.init_sub(f"Player spawned at ({x:.0f}, {y:.0f})")

    # ===========================================================
    # Abilities
    # ===========================================================

    def try_dash(self, now):
        return player_ability.try_dash(self, now)

    def try_fire_laser(self, now):
        return player_ability.try_fire_laser(self, now)

    def take_hit(self, now) -> bool:
        return player_logic.take_hit(self, now)

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, dt, now=0.0, move_vec=(0, 0)):
        """
        Advance the player one simulation step.

        Args:
            dt: Step length in seconds
            now: Simulation clock after this step
            move_vec: Input direction, magnitude <= 1
        """
        update_movement(self, move_vec, dt)
        player_ability.update_dash(self, dt)
        player_ability.update_laser(self, dt)
        player_logic.update_invulnerability(self, now, dt)
        self.dash_particles.update(dt)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        self.dash_particles.draw(draw_manager)

        if self.laser_active:
            draw_manager.queue_shape(
                "line", self.rect.copy(), self.laser_color, Layers.EFFECTS,
                start_pos=(int(self.laser_start.x), int(self.laser_start.y)),
                end_pos=(int(self.laser_end.x), int(self.laser_end.y)),
                width=int(self.laser_width),
            )

        self.visible = player_logic.blink_visible(self)
        super().draw(draw_manager)
