"""
rival.py
--------
Rival entity: horizontal patrol plus a telegraphed hazard attack.

Hazard Cycle
------------
IDLE     -> waits out a randomized cooldown
WARNING  -> target marked near where the player is heading
ACTIVE   -> circle damages the player on overlap
IDLE     -> new cooldown, per-cycle feedback flags cleared

Every phase is a countdown on `hazard_timer`; nothing is scheduled on
the wall clock.
"""

import random

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Layers
from viral_dash.core.services.config_manager import load_config
from viral_dash.entities.base_entity import BaseEntity
from viral_dash.entities.entity_state import HazardPhase, check_hazard_transition
from viral_dash.entities.entity_types import CollisionTags, EntityCategory


DEFAULT_RIVAL_CONFIG = {
    "width": 38,
    "height": 38,
    "base_speed": 60,
    "speed_jitter": [0.8, 1.2],
    "patrol_range_base": 70,
    "patrol_range_jitter": 60,
    "hazard_radius": 50,
    "hazard_warning_duration": 0.8,
    "hazard_active_duration": 1.0,
    "hazard_jitter": 1.5,
    "first_attack_grace": 2.0,
    "prediction_distance": 50,
    "target_jitter": 40,
    "colors": [[255, 120, 0]],
    "warning_color": [255, 200, 0],
    "active_color": [255, 40, 40],
}


class Rival(BaseEntity):
    """Patrolling rival that periodically drops a hazard on the player."""

    def __init__(self, x, y, speed_multiplier=1.0, hazard_cooldown=3.5,
                 image=None, cfg=None, rng=None):
        """
        Args:
            x, y: Spawn center, also the patrol anchor
            speed_multiplier: Level speed multiplier
            hazard_cooldown: Level base wait between hazard cycles (seconds)
            image: Sprite surface, or None for the shape fallback
            cfg: Override for the "rival" section of game.json
            rng: Random source (module `random` by default)
        """
        if cfg is None:
            cfg = load_config("game.json", {"rival": DEFAULT_RIVAL_CONFIG})["rival"]
        cfg = {**DEFAULT_RIVAL_CONFIG, **cfg}
        self.cfg = cfg
        self.rng = rng or random

        color = tuple(self.rng.choice(cfg["colors"]))
        super().__init__(
            x, y,
            size=(cfg["width"], cfg["height"]),
            image=image,
            shape_data={"type": "rect", "color": color},
        )

        self.layer = Layers.ENEMIES
        self.collision_tag = CollisionTags.RIVAL
        self.category = EntityCategory.RIVAL

        # Patrol
        lo, hi = cfg["speed_jitter"]
        self.speed = cfg["base_speed"] * speed_multiplier * self.rng.uniform(lo, hi)
        self.direction = 1 if self.rng.random() < 0.5 else -1
        self.patrol_range = cfg["patrol_range_base"] + self.rng.uniform(0, cfg["patrol_range_jitter"])
        self.spawn = pygame.Vector2(x, y)

        # Hazard
        self.hazard_radius = cfg["hazard_radius"]
        self.warning_duration = cfg["hazard_warning_duration"]
        self.active_duration = cfg["hazard_active_duration"]
        self.hazard_cooldown = hazard_cooldown
        self.hazard_phase = HazardPhase.IDLE
        self.hazard_target = pygame.Vector2(x, y)
        self.dodge_given = False
        self.hazard_hit_given = False

        # First attack is held back past the regular cooldown
        self.hazard_timer = (
            hazard_cooldown
            + self.rng.uniform(0, cfg["hazard_jitter"])
            + 2 * cfg["first_attack_grace"]
            - self.rng.uniform(0, hazard_cooldown)
        )

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def destroyed(self) -> bool:
        return not self.alive

    @property
    def hazard_active(self) -> bool:
        return self.hazard_phase == HazardPhase.ACTIVE

    @property
    def hazard_warning(self) -> bool:
        return self.hazard_phase == HazardPhase.WARNING

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, dt, bounds=(0, 0), player=None) -> bool:
        """
        Advance patrol and hazard cycle.

        Returns:
            bool: True if a hazard warning started this step
        """
        if self.destroyed:
            return False

        self._update_patrol(dt, bounds)
        return self._update_hazard(dt, bounds, player)

    def _update_patrol(self, dt, bounds):
        width, height = bounds
        half_w, half_h = self.half_width, self.half_height

        left = max(half_w, self.spawn.x - self.patrol_range)
        right = min(width - half_w, self.spawn.x + self.patrol_range)

        intended_x = self.pos.x + self.speed * dt * self.direction
        if (self.direction == 1 and intended_x >= right) or \
                (self.direction == -1 and intended_x <= left):
            self.direction *= -1

        self.pos.x = max(left, min(right, intended_x))
        self.pos.y = max(half_h, min(height - half_h, self.pos.y))
        self.sync_rect()

    def _update_hazard(self, dt, bounds, player) -> bool:
        self.hazard_timer -= dt
        if self.hazard_timer > 0:
            return False

        if self.hazard_phase == HazardPhase.IDLE:
            if player is None:
                return False
            self._set_phase(HazardPhase.WARNING)
            self.hazard_timer = self.warning_duration
            self._pick_target(player, bounds)
            return True

        if self.hazard_phase == HazardPhase.WARNING:
            self._set_phase(HazardPhase.ACTIVE)
            self.hazard_timer = self.active_duration
        else:
            self._set_phase(HazardPhase.IDLE)
            self.hazard_timer = self.hazard_cooldown + self.rng.uniform(0, self.cfg["hazard_jitter"])
            self.dodge_given = False
            self.hazard_hit_given = False
        return False

    def _pick_target(self, player, bounds):
        """Aim ahead of the player along its last direction, with jitter, kept on-canvas."""
        width, height = bounds
        lead = self.cfg["prediction_distance"]
        half_jitter = self.cfg["target_jitter"] / 2
        r = self.hazard_radius

        tx = player.pos.x + player.last_dir.x * lead + self.rng.uniform(-half_jitter, half_jitter)
        ty = player.pos.y + player.last_dir.y * lead + self.rng.uniform(-half_jitter, half_jitter)

        self.hazard_target.update(
            max(r, min(width - r, tx)),
            max(r, min(height - r, ty)),
        )

    def _set_phase(self, phase):
        check_hazard_transition(self.hazard_phase, phase)
        DebugLogger.state(f"Hazard {self.hazard_phase.name} -> {phase.name}", category="hazard")
        self.hazard_phase = phase

    # ===========================================================
    # Destruction
    # ===========================================================

    def destroy(self):
        """Lasered: permanently out of play, hazard hidden."""
        if self.destroyed:
            return
        if self.hazard_phase != HazardPhase.IDLE:
            self._set_phase(HazardPhase.IDLE)
        self.mark_dead()

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        if self.destroyed:
            return

        if self.hazard_phase != HazardPhase.IDLE:
            r = int(self.hazard_radius)
            rect = pygame.Rect(0, 0, r * 2, r * 2)
            rect.center = (int(self.hazard_target.x), int(self.hazard_target.y))
            if self.hazard_phase == HazardPhase.WARNING:
                draw_manager.queue_shape("circle", rect, (*self.cfg["warning_color"], 200),
                                         Layers.HAZARDS, width=3)
            else:
                draw_manager.queue_shape("circle", rect, (*self.cfg["active_color"], 140),
                                         Layers.HAZARDS)

        super().draw(draw_manager)
