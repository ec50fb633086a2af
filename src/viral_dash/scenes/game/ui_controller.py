"""
ui_controller.py
----------------
Turns gameplay events into HUD updates, overlays and sound cues, and
reads the start/restart input on overlay screens.
"""

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Layers
from viral_dash.core.runtime.scene_controller import SceneController
from viral_dash.core.services.event_manager import (
    CollectibleGatheredEvent,
    FeedbackEvent,
    GamePhaseChangedEvent,
    LevelLoadedEvent,
    RivalDestroyedEvent,
    SoundRequestEvent,
    TargetZoneActivatedEvent,
)
from viral_dash.scenes.scene_state import GamePhase


class UIController(SceneController):
    """Event subscriber for the HUD and sound collaborators."""

    def __init__(self, scene):
        super().__init__(scene)
        self.objective_text = ""
        self._subscriptions = (
            (FeedbackEvent, self._on_feedback),
            (RivalDestroyedEvent, self._on_rival_destroyed),
            (CollectibleGatheredEvent, self._on_collectible),
            (TargetZoneActivatedEvent, self._on_zone_activated),
            (LevelLoadedEvent, self._on_level_loaded),
            (GamePhaseChangedEvent, self._on_phase_changed),
            (SoundRequestEvent, self._on_sound_request),
        )
        for event_type, callback in self._subscriptions:
            scene.events.subscribe(event_type, callback)

    def on_exit(self):
        for event_type, callback in self._subscriptions:
            self.scene.events.unsubscribe(event_type, callback)

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def _on_feedback(self, event: FeedbackEvent):
        hud = self.scene.hud
        hud.add_feedback(event.text, event.negative)
        hud.set_approval(event.approval, self.scene.feedback.max_approval)
        self._play(event.sound, event.note)

    def _on_rival_destroyed(self, event: RivalDestroyedEvent):
        self.scene.hud.set_rivals(event.destroyed, event.total)

    def _on_collectible(self, event: CollectibleGatheredEvent):
        if not self.scene.zone.active:
            self._set_collect_objective(event.collected, event.total)

    def _on_zone_activated(self, event: TargetZoneActivatedEvent):
        self.scene.hud.set_objective(self.objective_text)

    def _on_level_loaded(self, event: LevelLoadedEvent):
        hud = self.scene.hud
        self.objective_text = event.objective_text
        hud.set_level(event.level)
        hud.set_rivals(0, event.rivals)
        hud.set_approval(self.scene.feedback.approval, self.scene.feedback.max_approval)
        self._set_collect_objective(0, event.collectibles)

    def _on_phase_changed(self, event: GamePhaseChangedEvent):
        self.on_phase(event.current)

    def _on_sound_request(self, event: SoundRequestEvent):
        self._play(event.sound, event.note)

    def on_phase(self, phase):
        """Show the overlay belonging to `phase` and update the live indicator."""
        scene = self.scene
        hud = scene.hud
        hud.set_live(phase == GamePhase.PLAYING)

        if phase == GamePhase.PLAYING:
            hud.hide_overlay()
        elif phase == GamePhase.INTRO:
            hud.show_overlay("intro")
        elif phase == GamePhase.LEVEL_TRANSITION:
            hud.show_overlay("level_transition", level=scene.level_number,
                             next_level=scene.level_number + 1)
        elif phase == GamePhase.WIN:
            hud.show_overlay("win", approval=scene.feedback.approval)
        elif phase == GamePhase.GAME_OVER:
            self._play("gameOver")
            hud.show_overlay("game_over", level=scene.level_number)

    def _set_collect_objective(self, collected, total):
        self.scene.hud.set_objective(f"Collect Data! ({collected}/{total})")

    def _play(self, sound_id, note=None):
        if sound_id and self.scene.sound is not None:
            self.scene.sound.play(sound_id, note)

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, dt: float):
        scene = self.scene
        scene.hud.update(dt)

        inp = scene.input
        tapped = inp.consume_tap()

        if scene.phase == GamePhase.INTRO:
            if inp.action_pressed("confirm") or tapped:
                DebugLogger.action("Start requested", category="game_state")
                scene.start()
        elif scene.phase in (GamePhase.WIN, GamePhase.GAME_OVER):
            if inp.action_pressed("restart") or inp.action_pressed("confirm") or tapped:
                scene.restart()

    def draw(self, draw_manager):
        scene = self.scene
        if scene.phase == GamePhase.PLAYING:
            scene.input.joystick.draw(draw_manager, Layers.UI)
        scene.hud.draw(draw_manager, scene.size)
