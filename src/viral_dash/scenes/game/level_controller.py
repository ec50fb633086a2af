"""
level_controller.py
-------------------
Handles level setup, objective checks and the timed level transition.
"""

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.services.event_manager import (
    LevelLoadedEvent,
    SoundRequestEvent,
    TargetZoneActivatedEvent,
)
from viral_dash.core.runtime.scene_controller import SceneController
from viral_dash.entities.environments.target_zone import TargetZone
from viral_dash.entities.player.player_core import Player
from viral_dash.entities.rivals.rival import Rival
from viral_dash.scenes.scene_state import GamePhase
from viral_dash.systems.level.item_placement import generate_collectibles
from viral_dash.systems.level.level_registry import LevelRegistry


class LevelController(SceneController):
    """Builds levels and decides when one is finished."""

    def __init__(self, scene):
        super().__init__(scene)
        self.level = None
        self.halfway_reached = False

    # ===========================================================
    # Counters
    # ===========================================================

    @property
    def collected(self) -> int:
        return sum(1 for c in self.scene.collectibles if c.collected)

    @property
    def total_collectibles(self) -> int:
        return len(self.scene.collectibles)

    @property
    def destroyed(self) -> int:
        return sum(1 for r in self.scene.rivals if r.destroyed)

    @property
    def objectives_met(self) -> bool:
        return (self.collected >= self.total_collectibles and
                all(r.destroyed for r in self.scene.rivals))

    # ===========================================================
    # Setup
    # ===========================================================

    def setup_level(self, number):
        """
        Rebuild every entity for level `number` at the current canvas size.

        Nothing from the previous level survives, including its entity timers.
        A running transition countdown is left alone so a rebuild mid-transition
        does not shorten it.
        """
        scene = self.scene
        level = LevelRegistry.get(number)
        if level is None:
            raise ValueError(f"No level {number}")
        self.level = level

        width, height = scene.size
        cfg = scene.cfg
        DebugLogger.state(f"Setting up level {number} at {width}x{height}", category="level")

        player_sprite = self._sprite(cfg.get("player", {}).get("sprite"), cfg.get("player", {}), (56, 56))
        scene.player = Player(width / 4, height / 2, image=player_sprite, bounds=(width, height),
                              cfg=cfg.get("player"))

        zone_cfg = cfg.get("target_zone", {})
        tx, ty = level.target_position(width, height)
        scene.zone = TargetZone(
            tx, ty,
            radius=zone_cfg.get("radius", 40),
            inactive_color=zone_cfg.get("inactive_color", (90, 90, 120)),
            active_color=zone_cfg.get("active_color", (0, 255, 120)),
        )

        scene.rivals = [self._spawn_rival(level, width, height) for _ in range(level.rivals)]

        report = generate_collectibles(
            level.collectibles, (width, height),
            player_spawn=scene.player.pos,
            player_half_width=scene.player.half_width,
            rivals=scene.rivals,
            zone=scene.zone,
            item_cfg=cfg.get("collectible"),
            cfg=cfg.get("placement"),
            rng=scene.rng,
        )
        if report.shortfall:
            DebugLogger.warn(
                f"Level {number}: placed {report.placed}/{report.requested} collectibles",
                category="placement",
            )
        scene.collectibles = report.collectibles

        self.halfway_reached = False
        scene.particles.clear()

        scene.events.dispatch(LevelLoadedEvent(
            level=number,
            rivals=len(scene.rivals),
            collectibles=len(scene.collectibles),
            objective_text=level.objective,
        ))

    def _spawn_rival(self, level, width, height):
        scene = self.scene
        rng = scene.rng
        rival_cfg = scene.cfg.get("rival") or {}
        x_ratio = rival_cfg.get("spawn_x_ratio", (0.5, 0.8))
        y_ratio = rival_cfg.get("spawn_y_ratio", (0.15, 0.85))

        x = width * rng.uniform(*x_ratio)
        y = height * rng.uniform(*y_ratio)

        sprite = None
        sprites = rival_cfg.get("sprites") or []
        if sprites:
            sprite = self._sprite(rng.choice(sprites), rival_cfg, (38, 38))

        return Rival(x, y, speed_multiplier=level.speed_multiplier,
                     hazard_cooldown=level.hazard_cooldown,
                     image=sprite, cfg=rival_cfg, rng=rng)

    def _sprite(self, filename, section, default_size):
        if self.scene.assets is None or not filename:
            return None
        size = (section.get("width", default_size[0]), section.get("height", default_size[1]))
        return self.scene.assets.get_surface(filename, size)

    # ===========================================================
    # Objective Checks (called while PLAYING)
    # ===========================================================

    def check_halfway(self):
        """Fire 'halfway' the first time the player crosses the canvas midpoint."""
        if self.halfway_reached:
            return
        if self.scene.player.pos.x > self.scene.width / 2:
            self.halfway_reached = True
            self.scene.trigger_feedback("halfway")

    def check_win(self):
        """Open the zone when objectives are met; leave the level on arrival."""
        scene = self.scene
        if self.objectives_met and scene.zone.activate():
            scene.events.dispatch(TargetZoneActivatedEvent(
                level=scene.level_number,
                position=(scene.zone.pos.x, scene.zone.pos.y),
            ))

        if scene.collision_manager.reached_zone(scene.zone, scene.player):
            if LevelRegistry.has_next(scene.level_number):
                self.begin_transition()
            else:
                scene.trigger_win()

    # ===========================================================
    # Level Transition
    # ===========================================================

    def begin_transition(self):
        scene = self.scene
        scene.set_phase(GamePhase.LEVEL_TRANSITION)
        self.transition_timer = scene.session_cfg["level_transition_delay"]
        scene.events.dispatch(SoundRequestEvent("win", "C5"))

    def update(self, dt: float):
        """Count down the transition, then load the next level."""
        if self.phase != GamePhase.LEVEL_TRANSITION:
            return

        self.transition_timer -= dt
        if self.transition_timer > 0:
            return

        scene = self.scene
        scene.level_number += 1
        DebugLogger.system(f"Advancing to level {scene.level_number}", category="level")
        self.setup_level(scene.level_number)
        scene.set_phase(GamePhase.PLAYING)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        scene = self.scene
        if scene.zone is not None:
            scene.zone.draw(draw_manager)
        for item in scene.collectibles:
            item.draw(draw_manager)
