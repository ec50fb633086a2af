"""
test_hud_manager.py
-------------------
HUD state: feedback cap and expiry, approval clamp, overlays.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from viral_dash.ui.hud_manager import DEFAULT_LAYOUT, HUDManager
from viral_dash.ui.layout_loader import LayoutLoader


@pytest.fixture
def hud():
    return HUDManager(feedback_lifetime=2.0, feedback_cap=5, layout=DEFAULT_LAYOUT)


def test_feedback_capped_at_five_dropping_oldest(hud):
    for i in range(7):
        hud.add_feedback(f"msg {i}")
    assert [m.text for m in hud.feedback] == [f"msg {i}" for i in range(2, 7)]


def test_feedback_expires_after_lifetime(hud):
    hud.add_feedback("old")
    hud.update(1.5)
    hud.add_feedback("new")
    hud.update(0.5)
    assert [m.text for m in hud.feedback] == ["new"]


def test_approval_is_clamped(hud):
    hud.set_approval(140, 100)
    assert hud.approval == 100
    hud.set_approval(-5)
    assert hud.approval == 0


def test_rival_counter_text(hud):
    hud.set_rivals(2, 3)
    assert hud.rivals_text == "Rivals Destroyed: 2/3"


def test_unknown_overlay_rejected(hud):
    with pytest.raises(ValueError):
        hud.show_overlay("pause")


def test_overlay_show_and_hide(hud):
    hud.show_overlay("game_over", level=2)
    assert hud.overlay == "game_over"
    assert hud.overlay_context == {"level": 2}
    hud.hide_overlay()
    assert hud.overlay is None


def test_draw_queues_overlay_on_top(hud):
    pygame.font.init()
    draw_manager = MagicMock()
    hud.set_objective("Collect Data! (0/5)")
    hud.show_overlay("intro")
    hud.draw(draw_manager, (800, 600))

    layers = [c.args[2] for c in draw_manager.queue_draw.call_args_list]
    assert max(layers) > min(layers)
    assert draw_manager.queue_shape.called


def test_shipped_layout_has_overlay_texts():
    layout = LayoutLoader().load("hud.yaml", DEFAULT_LAYOUT)
    assert set(layout["overlays"]) == {"intro", "level_transition", "win", "game_over"}
    assert "{level}" in layout["overlays"]["game_over"]["subtitle"]
