"""
hud_manager.py
--------------
Heads-up display: objective, level, approval, rival count, transient
feedback messages, live status and full-screen overlays.

State and drawing are kept apart. Setters only record values, so the
game can drive the HUD in tests without a display; draw() turns the
current state into queued surfaces.
"""

from dataclasses import dataclass

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Layers
from viral_dash.ui.layout_loader import LayoutLoader


DEFAULT_LAYOUT = {
    "font": {"name": None, "small": 20, "medium": 28, "large": 56},
    "colors": {
        "text": [235, 235, 255],
        "accent": [0, 255, 200],
        "positive": [120, 255, 140],
        "negative": [255, 90, 90],
        "overlay": [10, 10, 25, 200],
        "bar_back": [60, 60, 90],
        "bar_fill": [0, 220, 140],
        "live": [255, 50, 80],
        "offline": [110, 110, 130],
    },
    "objective": {"anchor": "topleft", "offset": [12, 10], "size": "medium"},
    "level": {"anchor": "topright", "offset": [-12, 10], "size": "medium"},
    "approval": {"anchor": "topright", "offset": [-12, 44], "size": "small",
                 "bar_width": 160, "bar_height": 12},
    "rivals": {"anchor": "topleft", "offset": [12, 44], "size": "small"},
    "status": {"anchor": "topright", "offset": [-12, 78], "size": "small"},
    "feedback": {"anchor": "midtop", "offset": [0, 90], "spacing": 28, "size": "medium"},
    "overlays": {},
}

OVERLAY_NAMES = ("intro", "level_transition", "win", "game_over")


class _SafeContext(dict):
    """Leave unknown {placeholders} in place instead of raising."""

    def __missing__(self, key):
        return "{" + key + "}"


@dataclass
class FeedbackMessage:
    text: str
    negative: bool = False
    age: float = 0.0


class HUDManager:
    """Owns HUD state and renders it on top of the scene."""

    def __init__(self, feedback_lifetime=2.0, feedback_cap=5, layout=None):
        self.layout = layout or LayoutLoader().load("hud.yaml", DEFAULT_LAYOUT)
        self.feedback_lifetime = feedback_lifetime
        self.feedback_cap = feedback_cap

        self.objective = ""
        self.level = 1
        self.approval = 0
        self.max_approval = 100
        self.rivals_text = ""
        self.live = False
        self.feedback = []
        self.overlay = None
        self.overlay_context = {}

        self._fonts = {}
        self._text_cache = {}

        DebugLogger.init_entry("HUDManager")

    # ===========================================================
    # State Updates
    # ===========================================================

    def set_objective(self, text):
        self.objective = text

    def set_level(self, level):
        self.level = level

    def set_approval(self, value, max_value=None):
        if max_value is not None:
            self.max_approval = max_value
        self.approval = max(0, min(self.max_approval, value))

    def set_rivals(self, destroyed, total):
        self.rivals_text = f"Rivals Destroyed: {destroyed}/{total}"

    def set_live(self, live):
        self.live = bool(live)

    def add_feedback(self, text, negative=False):
        """Queue a transient message; the oldest is dropped past the cap."""
        self.feedback.append(FeedbackMessage(text, negative))
        if len(self.feedback) > self.feedback_cap:
            del self.feedback[:len(self.feedback) - self.feedback_cap]

    def clear_feedback(self):
        self.feedback.clear()

    def show_overlay(self, name, **context):
        if name not in OVERLAY_NAMES:
            raise ValueError(f"Unknown overlay '{name}'")
        self.overlay = name
        self.overlay_context = context
        DebugLogger.state(f"Overlay -> {name}", category="ui")

    def hide_overlay(self):
        self.overlay = None
        self.overlay_context = {}

    def update(self, dt):
        """Age feedback messages and drop expired ones."""
        for msg in self.feedback:
            msg.age += dt
        self.feedback = [m for m in self.feedback if m.age < self.feedback_lifetime]

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager, canvas_size):
        canvas = pygame.Rect(0, 0, canvas_size[0], canvas_size[1])
        colors = self.layout["colors"]

        self._draw_text(draw_manager, canvas, "objective", self.objective, colors["accent"])
        self._draw_text(draw_manager, canvas, "level", f"Level {self.level}", colors["text"])
        self._draw_text(draw_manager, canvas, "rivals", self.rivals_text, colors["text"])
        self._draw_approval(draw_manager, canvas)
        self._draw_status(draw_manager, canvas)
        self._draw_feedback(draw_manager, canvas)

        if self.overlay:
            self._draw_overlay(draw_manager, canvas)

    def _font(self, size_key):
        size = self.layout["font"].get(size_key, 24)
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(self.layout["font"].get("name"), size)
        return self._fonts[size]

    def _render(self, text, size_key, color):
        key = (text, size_key, tuple(color))
        surf = self._text_cache.get(key)
        if surf is None:
            if len(self._text_cache) > 256:
                self._text_cache.clear()
            surf = self._font(size_key).render(text, True, color)
            self._text_cache[key] = surf
        return surf

    def _place(self, surf, canvas, anchor, offset):
        rect = surf.get_rect()
        setattr(rect, anchor, getattr(canvas, anchor))
        return rect.move(offset)

    def _draw_text(self, draw_manager, canvas, key, text, color):
        if not text:
            return
        spec = self.layout[key]
        surf = self._render(text, spec.get("size", "small"), color)
        rect = self._place(surf, canvas, spec.get("anchor", "topleft"), spec.get("offset", (0, 0)))
        draw_manager.queue_draw(surf, rect, Layers.UI)

    def _draw_approval(self, draw_manager, canvas):
        spec = self.layout["approval"]
        colors = self.layout["colors"]
        surf = self._render(f"Approval: {self.approval}", spec.get("size", "small"), colors["text"])
        rect = self._place(surf, canvas, spec["anchor"], spec["offset"])
        draw_manager.queue_draw(surf, rect, Layers.UI)

        bar = pygame.Rect(0, 0, spec["bar_width"], spec["bar_height"])
        bar.topright = (rect.left - 8, rect.centery - spec["bar_height"] // 2)
        draw_manager.queue_shape("rect", bar, colors["bar_back"], Layers.UI)

        ratio = self.approval / self.max_approval if self.max_approval else 0
        fill = pygame.Rect(bar.left, bar.top, int(bar.width * ratio), bar.height)
        if fill.width > 0:
            draw_manager.queue_shape("rect", fill, colors["bar_fill"], Layers.UI)

    def _draw_status(self, draw_manager, canvas):
        colors = self.layout["colors"]
        label = "LIVE" if self.live else "OFFLINE"
        self._draw_text(draw_manager, canvas, "status", label,
                        colors["live"] if self.live else colors["offline"])

    def _draw_feedback(self, draw_manager, canvas):
        spec = self.layout["feedback"]
        colors = self.layout["colors"]
        x_off, y_off = spec["offset"]
        for i, msg in enumerate(self.feedback):
            color = colors["negative"] if msg.negative else colors["positive"]
            surf = self._render(msg.text, spec.get("size", "medium"), color)
            rect = self._place(surf, canvas, spec["anchor"], (x_off, y_off + i * spec["spacing"]))
            draw_manager.queue_draw(surf, rect, Layers.UI)

    def _draw_overlay(self, draw_manager, canvas):
        colors = self.layout["colors"]
        texts = self.layout["overlays"].get(self.overlay, {})

        draw_manager.queue_shape("rect", canvas.copy(), tuple(colors["overlay"]), Layers.OVERLAY)

        lines = (
            (texts.get("title", self.overlay.upper()), "large", colors["accent"], -60),
            (texts.get("subtitle", ""), "medium", colors["text"], 0),
            (texts.get("prompt", ""), "small", colors["text"], 50),
        )
        for template, size_key, color, dy in lines:
            text = template.format_map(_SafeContext(self.overlay_context)) if template else ""
            if not text:
                continue
            surf = self._render(text, size_key, color)
            rect = surf.get_rect(center=(canvas.centerx, canvas.centery + dy))
            draw_manager.queue_draw(surf, rect, Layers.OVERLAY + 1)
