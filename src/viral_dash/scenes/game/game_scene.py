"""
game_scene.py
-------------
Thin orchestrator that owns the session state and delegates to
specialized controllers.

- LevelController: level setup, halfway/win checks, transition countdown
- GameplayController: per-step simulation while PLAYING
- UIController: HUD, sounds, overlays and start/restart input
"""

import random

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.services.config_manager import load_config
from viral_dash.core.services.event_manager import get_events, GamePhaseChangedEvent
from viral_dash.graphics.particles.particle_manager import ParticleSystem
from viral_dash.scenes.scene_state import GamePhase, check_transition
from viral_dash.systems.collision.collision_manager import CollisionManager
from viral_dash.systems.feedback.feedback_system import FeedbackSystem

from viral_dash.scenes.game.gameplay_controller import GameplayController
from viral_dash.scenes.game.level_controller import LevelController
from viral_dash.scenes.game.ui_controller import UIController


DEFAULT_GAME_CONFIG = {
    "collectible": {"radius": 10, "width": 15, "height": 10, "color": [0, 255, 160]},
    "target_zone": {"radius": 40, "inactive_color": [90, 90, 120], "active_color": [0, 255, 120]},
    "placement": {},
    "session": {
        "starting_approval": 10,
        "max_approval": 100,
        "level_transition_delay": 2.5,
        "feedback_lifetime": 2.0,
        "feedback_cap": 5,
    },
}


class GameScene:
    """Single play session: one level at a time, phases per scene_state."""

    def __init__(self, canvas_size, input_manager, hud, sound=None,
                 assets=None, rng=None, cfg=None):
        """
        Args:
            canvas_size: (width, height) of the play area
            input_manager: Source of movement and action queries
            hud: HUDManager (or any object with the same setters)
            sound: Object with play(sound_id, note=None), or None for silence
            assets: AssetLoader for sprites, or None for shape fallbacks
            rng: Random source shared by level setup and entities
            cfg: Parsed game.json override
        """
        DebugLogger.section("Initializing Scene: GameScene")

        self.cfg = cfg or load_config("game.json", DEFAULT_GAME_CONFIG)
        session = {**DEFAULT_GAME_CONFIG["session"], **self.cfg.get("session", {})}
        self.session_cfg = session

        self.width, self.height = int(canvas_size[0]), int(canvas_size[1])
        self.input = input_manager
        self.hud = hud
        self.sound = sound
        self.assets = assets
        self.rng = rng or random
        self.events = get_events()

        # Session state
        self.phase = GamePhase.INTRO
        self.clock = 0.0
        self.level_number = 1
        DebugLogger.bind_clock(lambda: self.clock)

        # Level contents (rebuilt by LevelController)
        self.player = None
        self.rivals = []
        self.collectibles = []
        self.zone = None

        # Systems
        self.feedback = FeedbackSystem(
            starting_approval=session["starting_approval"],
            max_approval=session["max_approval"],
            events=self.events,
        )
        self.collision_manager = CollisionManager()
        self.particles = ParticleSystem(rng=self.rng)

        # Controllers
        self.ui_ctrl = UIController(self)
        self.level_ctrl = LevelController(self)
        self.gameplay_ctrl = GameplayController(self)

        # Intro shows level 1 behind the overlay
        self.level_ctrl.setup_level(self.level_number)
        self.ui_ctrl.on_phase(GamePhase.INTRO)

        DebugLogger.section("- Finished Initialization", only_title=True)

    @property
    def size(self):
        return self.width, self.height

    # ===========================================================
    # Phase Control
    # ===========================================================

    def set_phase(self, phase: GamePhase):
        """Move to a new phase. Illegal transitions raise ValueError."""
        check_transition(self.phase, phase)
        previous = self.phase
        self.phase = phase
        DebugLogger.state(f"{previous.value} -> {phase.value}", category="game_state")
        self.events.dispatch(GamePhaseChangedEvent(previous, phase))

    def start(self):
        """Begin a fresh session at level 1."""
        self._reset_session()
        self.set_phase(GamePhase.PLAYING)

    def restart(self):
        """Throw away the current session and start again at level 1."""
        DebugLogger.system("Restart requested", category="game_state")
        self._reset_session()
        self.set_phase(GamePhase.PLAYING)

    def _reset_session(self):
        self.clock = 0.0
        self.level_number = 1
        self.feedback.reset()
        self.particles.clear()
        self.hud.clear_feedback()
        self.hud.set_approval(self.feedback.approval, self.feedback.max_approval)
        self.level_ctrl.setup_level(self.level_number)
        self.gameplay_ctrl.hold_dash_until_release(self.input.action_held("dash"))

    def trigger_feedback(self, trigger):
        """Apply a feedback entry; depleting approval while playing ends the game."""
        self.feedback.trigger(trigger)
        if self.feedback.depleted and self.phase == GamePhase.PLAYING:
            self.trigger_game_over()

    def trigger_game_over(self):
        """Enter GAME_OVER once; repeated calls are ignored."""
        if self.phase == GamePhase.GAME_OVER:
            return
        self.set_phase(GamePhase.GAME_OVER)

    def trigger_win(self):
        """Award the win bonus, then show the win screen."""
        self.trigger_feedback("win")
        self.set_phase(GamePhase.WIN)

    # ===========================================================
    # Delegation to Controllers
    # ===========================================================

    def update(self, dt: float):
        """Advance the session by one fixed step."""
        phase = self.phase
        self.ui_ctrl.update(dt)
        if self.phase != phase:
            # A start or restart consumed this step
            return

        if self.phase == GamePhase.PLAYING:
            self.clock += dt
            self.gameplay_ctrl.update(dt)
        elif self.phase == GamePhase.LEVEL_TRANSITION:
            self.level_ctrl.update(dt)

    def draw(self, draw_manager):
        """Draw the level every frame, whatever the phase."""
        self.level_ctrl.draw(draw_manager)
        self.gameplay_ctrl.draw(draw_manager)
        self.ui_ctrl.draw(draw_manager)

    def handle_event(self, event):
        self.ui_ctrl.handle_event(event)

    def handle_resize(self, width, height):
        """Adopt a new canvas size; live levels are rebuilt to fit it."""
        self.width, self.height = int(width), int(height)
        DebugLogger.state(f"Canvas resized to {self.width}x{self.height}", category="display")
        self.input.layout(self.width, self.height)
        if self.phase in (GamePhase.INTRO, GamePhase.PLAYING, GamePhase.LEVEL_TRANSITION):
            self.level_ctrl.setup_level(self.level_number)

    def on_exit(self):
        self.ui_ctrl.on_exit()
        DebugLogger.bind_clock(None)
        DebugLogger.state("on_exit()", category="scene")
