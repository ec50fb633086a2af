"""
game_settings.py
----------------
Centralized constants for all game systems.

Gameplay tuning (speeds, cooldowns, radii) lives in config/game.json;
this module only holds engine-level constants.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window and canvas configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    MIN_WIDTH: int = 360
    MIN_HEIGHT: int = 480
    FPS: int = 60
    CAPTION: str = "Viral Dash"
    BACKGROUND_COLOR = (26, 26, 46)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Physics and update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Input Configuration
# ===========================================================

class Input:
    """Controller, joystick and touch configuration."""
    DEAD_ZONE_RATIO: float = 0.15
    CONTROLLER_MAX_TRAVEL: float = 1.0
    JOYSTICK_RADIUS: int = 60
    JOYSTICK_KNOB_RADIUS: int = 25


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    ZONES: int = 50
    PICKUPS: int = 100
    HAZARDS: int = 150
    PLAYER: int = 400
    ENEMIES: int = 450
    EFFECTS: int = 500
    PARTICLES: int = 550
    UI: int = 600
    OVERLAY: int = 700


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_LINE_WIDTH: int = 1
