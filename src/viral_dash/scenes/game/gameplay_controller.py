"""
gameplay_controller.py
----------------------
Runs one simulation step while the session is PLAYING.

Step order: player, abilities, rivals with their collisions,
collectibles, particles, then halfway and win checks. Any step that
changes the phase (game over, level exit) ends the step early.
"""

from viral_dash.core.runtime.scene_controller import SceneController
from viral_dash.core.services.event_manager import (
    CollectibleGatheredEvent,
    RivalDestroyedEvent,
    SoundRequestEvent,
)
from viral_dash.scenes.scene_state import GamePhase


class GameplayController(SceneController):
    """Coordinates player, rivals and collisions for one step."""

    def __init__(self, scene):
        super().__init__(scene)
        self.dash_latched = False

    def hold_dash_until_release(self, held: bool):
        """Ignore a dash key that is still down from the start/restart press."""
        self.dash_latched = held

    def update(self, dt: float):
        scene = self.scene
        player = scene.player
        now = scene.clock
        collisions = scene.collision_manager

        player.update(dt, now, scene.input.get_normalized_move())

        dash_held = scene.input.action_held("dash")
        if self.dash_latched and not dash_held:
            self.dash_latched = False
        if dash_held and not self.dash_latched and player.try_dash(now):
            scene.trigger_feedback("dash")
            if self._interrupted():
                return

        if scene.input.action_held("laser") and player.try_fire_laser(now):
            scene.events.dispatch(SoundRequestEvent("laserFire"))
            self._resolve_laser()
            if self._interrupted():
                return

        for rival in scene.rivals:
            if rival.update(dt, scene.size, player):
                scene.events.dispatch(SoundRequestEvent("hazardWarn"))

            if collisions.hazard_hits(rival, player) and player.take_hit(now):
                rival.hazard_hit_given = True
                scene.trigger_feedback("hazard_hit")

            if collisions.body_hits(rival, player) and player.take_hit(now):
                scene.trigger_feedback("rival_collision")

            if collisions.dodged(rival, player):
                rival.dodge_given = True
                scene.trigger_feedback("dodge")

            if self._interrupted():
                return

        for _item in collisions.gathered(scene.collectibles, player):
            scene.trigger_feedback("collect")
            scene.events.dispatch(CollectibleGatheredEvent(
                collected=scene.level_ctrl.collected,
                total=scene.level_ctrl.total_collectibles,
            ))
            if self._interrupted():
                return

        scene.particles.update(dt)

        scene.level_ctrl.check_halfway()
        if self._interrupted():
            return
        scene.level_ctrl.check_win()

    def _interrupted(self) -> bool:
        return self.phase != GamePhase.PLAYING

    def _resolve_laser(self):
        """Single pass over rivals; at most one is destroyed per shot."""
        scene = self.scene
        rival = scene.collision_manager.laser_scan(scene.player, scene.rivals)
        if rival is None:
            return

        rival.destroy()
        scene.particles.burst("explosion_gold", rival.pos)
        scene.particles.burst("explosion_ember", rival.pos)
        scene.trigger_feedback("destroy_rival")
        scene.events.dispatch(RivalDestroyedEvent(
            position=(rival.pos.x, rival.pos.y),
            destroyed=scene.level_ctrl.destroyed,
            total=len(scene.rivals),
        ))

    def draw(self, draw_manager):
        scene = self.scene
        for rival in scene.rivals:
            rival.draw(draw_manager)
        if scene.player is not None:
            scene.player.draw(draw_manager)
        scene.particles.draw(draw_manager)
