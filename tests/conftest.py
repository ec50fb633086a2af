"""
conftest.py
-----------
Shared pytest configuration and fixtures for Viral Dash tests.

Contains:
- Headless SDL setup so pygame runs without a window or audio device
- Mock collaborators (HUD, sound, input) for scene-level tests
- Singleton resets between tests
"""

import os
import random
import sys
from unittest.mock import MagicMock

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Add src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pygame  # noqa: E402
import pytest  # noqa: E402

from viral_dash.core.debug.debug_logger import LoggerConfig  # noqa: E402
from viral_dash.core.services.event_manager import reset_events  # noqa: E402
from viral_dash.systems.level.level_registry import LevelRegistry  # noqa: E402

LoggerConfig.ENABLE_LOGGING = False


# ===========================================================
# Autouse Resets
# ===========================================================

@pytest.fixture(autouse=True)
def fresh_singletons():
    """Every test gets its own event bus and a freshly loaded level list."""
    reset_events()
    LevelRegistry.reset()
    yield
    reset_events()
    LevelRegistry.reset()


# ===========================================================
# Mock Collaborators
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with common methods."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    draw_manager.queue_shape = MagicMock()
    return draw_manager


@pytest.fixture
def mock_input_manager():
    """Mock for InputManager with no keys held and no movement."""
    input_manager = MagicMock()
    input_manager.action_pressed.return_value = False
    input_manager.action_released.return_value = False
    input_manager.action_held.return_value = False
    input_manager.consume_tap.return_value = False
    input_manager.get_normalized_move.return_value = pygame.Vector2(0, 0)
    return input_manager


@pytest.fixture
def mock_hud():
    """Mock for HUDManager; records every setter call."""
    return MagicMock()


@pytest.fixture
def mock_sound():
    """Mock for SoundManager."""
    return MagicMock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game_scene(mock_input_manager, mock_hud, mock_sound, rng):
    """A GameScene on a 1280x720 canvas, still in the intro phase."""
    from viral_dash.scenes.game.game_scene import GameScene
    scene = GameScene((1280, 720), mock_input_manager, mock_hud, sound=mock_sound, rng=rng)
    yield scene
    scene.on_exit()


# ===========================================================
# Entity Factories
# ===========================================================

@pytest.fixture
def make_player():
    """Factory for a Player built from defaults (no config file read)."""
    from viral_dash.entities.player.player_core import Player

    def _make(x=100, y=100, bounds=(800, 600), **cfg):
        return Player(x, y, bounds=bounds, cfg=cfg)
    return _make


@pytest.fixture
def make_rival():
    """Factory for a Rival built from defaults with a seeded random source."""
    from viral_dash.entities.rivals.rival import Rival

    def _make(x=400, y=300, seed=0, **cfg):
        return Rival(x, y, cfg=cfg, rng=random.Random(seed))
    return _make


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: multi-system scenario tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag scenario tests as integration, everything else as unit."""
    for item in items:
        if "scenes" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
