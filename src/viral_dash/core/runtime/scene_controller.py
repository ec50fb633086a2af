"""
scene_controller.py
-------------------
Base class for the controllers a scene delegates to (level flow,
gameplay, UI). Every hook is optional; the scene calls them in a fixed
order each frame.
"""

from abc import ABC


class SceneController(ABC):
    """One slice of a scene's per-frame work, holding a back-reference to the scene."""

    def __init__(self, scene):
        self.scene = scene

    @property
    def phase(self):
        """Current phase of the owning scene."""
        return self.scene.phase

    def update(self, dt: float):
        """Advance by dt seconds."""

    def draw(self, draw_manager):
        """Queue this controller's visuals."""

    def handle_event(self, event):
        """React to a raw pygame event."""

    def on_exit(self):
        """Release subscriptions before the scene goes away."""
