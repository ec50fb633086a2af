"""Engine constants and the frame loop's building blocks."""

from viral_dash.core.runtime.game_settings import (
    Display,
    Layers,
    Debug,
    Physics,
    Input,
)

__all__ = ["Display", "Layers", "Debug", "Physics", "Input"]
