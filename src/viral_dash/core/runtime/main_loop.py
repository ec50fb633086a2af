"""
main_loop.py
------------
Window, clock and frame loop for Viral Dash.

Simulation advances in fixed steps (Physics.FIXED_DT) drained from an
accumulator; rendering happens once per displayed frame whatever the
game phase, so overlays keep drawing while the simulation is paused.
"""

import pygame

from viral_dash.audio.sound_manager import SoundManager
from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Display, Physics, Debug
from viral_dash.core.services.config_manager import load_config
from viral_dash.core.services.input_manager import InputManager
from viral_dash.graphics.asset_loader import AssetLoader
from viral_dash.graphics.background_manager import BackgroundManager
from viral_dash.graphics.draw_manager import DrawManager
from viral_dash.scenes.game.game_scene import GameScene
from viral_dash.systems.level.level_registry import LevelRegistry
from viral_dash.ui.hud_manager import HUDManager


class MainLoop:
    """Owns the pygame window and drives the GameScene until quit."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT, sound=True, volume=100):
        DebugLogger.section("Starting Viral Dash")

        self._init_pygame(width, height)
        self._init_core_systems(sound, volume)
        self._init_scene()

    def _init_pygame(self, width, height):
        """Initialize pygame subsystems and a resizable window."""
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {width}x{height} (resizable)")

    def _init_core_systems(self, sound, volume):
        """Initialize input, drawing, audio and asset systems."""
        size = self.screen.get_size()

        self.input_manager = InputManager()
        self.input_manager.layout(*size)

        self.draw_manager = DrawManager()
        self.draw_manager.bg_manager = BackgroundManager(size)

        self.sound_manager = SoundManager(enabled=sound)
        self.sound_manager.set_master_volume(volume)
        self.assets = AssetLoader()
        LevelRegistry.load_config()

        DebugLogger.init_sub("Bound [InputManager, DrawManager, SoundManager] dependencies", level=1)

    def _init_scene(self):
        """Create the HUD and the game scene."""
        session = load_config("game.json").get("session", {})
        self.hud = HUDManager(
            feedback_lifetime=session.get("feedback_lifetime", 2.0),
            feedback_cap=session.get("feedback_cap", 5),
        )
        self.scene = GameScene(
            self.screen.get_size(),
            self.input_manager,
            self.hud,
            sound=self.sound_manager,
            assets=self.assets,
        )

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("GameScene")
        DebugLogger.init_sub(f"Clock capped at {Display.FPS} FPS", level=1)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Step and draw until the window closes or quit is pressed."""
        DebugLogger.section("Running")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            # At most MAX_FRAME_TIME of simulation per displayed frame
            accumulator += min(self.clock.tick(Display.FPS) / 1000.0, Physics.MAX_FRAME_TIME)

            self._handle_events()

            while accumulator >= fixed_dt:
                self.input_manager.update()
                if self.input_manager.action_pressed("quit"):
                    self.running = False
                    break
                self.scene.update(fixed_dt)
                accumulator -= fixed_dt

            self._draw()

        self.scene.on_exit()
        pygame.quit()
        DebugLogger.system("Shut down")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Route quit, resize and pointer events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Window closed")
                break

            if event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w, event.h)
                continue

            self.input_manager.handle_event(event)
            self.scene.handle_event(event)

    def _on_resize(self, width, height):
        width = max(width, Display.MIN_WIDTH)
        height = max(height, Display.MIN_HEIGHT)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.draw_manager.bg_manager.resize((width, height))
        self.scene.handle_resize(width, height)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        """Queue the scene and present the frame."""
        self.draw_manager.clear()
        self.scene.draw(self.draw_manager)
        self.draw_manager.render(self.screen, debug=Debug.HITBOX_VISIBLE)
        pygame.display.flip()
