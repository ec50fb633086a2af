"""
test_input_manager.py
---------------------
Dead zone rule, the on-screen joystick and action edge detection.
"""

from collections import defaultdict

import pygame
import pytest

from viral_dash.core.services.input_manager import InputManager, VirtualJoystick, apply_dead_zone


# ===========================================================
# Dead Zone
# ===========================================================

class TestDeadZone:
    """max_travel 35 with a 15% ratio puts the dead zone at 5.25 px."""

    def test_inside_dead_zone_is_no_input(self):
        assert apply_dead_zone(0, 0, 35) == (0.0, 0.0)
        assert apply_dead_zone(5, 0, 35) == (0.0, 0.0)

    def test_outside_dead_zone_is_unit_vector(self):
        x, y = apply_dead_zone(10, 0, 35)
        assert (x, y) == pytest.approx((1.0, 0.0))
        x, y = apply_dead_zone(3, 4, 10)
        assert (x, y) == pytest.approx((0.6, 0.8))

    def test_offsets_past_max_travel_still_unit(self):
        x, y = apply_dead_zone(0, -500, 35)
        assert (x, y) == pytest.approx((0.0, -1.0))

    def test_zero_travel_is_no_input(self):
        assert apply_dead_zone(10, 10, 0) == (0.0, 0.0)


# ===========================================================
# Virtual Joystick
# ===========================================================

@pytest.fixture
def joystick():
    return VirtualJoystick(center=(100, 100), radius=60, knob_radius=25)


class TestVirtualJoystick:

    def test_press_outside_area_is_ignored(self, joystick):
        assert not joystick.press((200, 100))
        assert not joystick.active

    def test_drag_sets_direction_and_clamps_knob(self, joystick):
        assert joystick.press((130, 100))
        assert tuple(joystick.knob_offset) == pytest.approx((30, 0))
        assert tuple(joystick.direction) == pytest.approx((1, 0))

        joystick.move((100, 300))
        assert tuple(joystick.knob_offset) == pytest.approx((0, 35))
        assert tuple(joystick.direction) == pytest.approx((0, 1))

    def test_small_drag_stays_in_dead_zone(self, joystick):
        joystick.press((104, 100))
        assert joystick.active
        assert tuple(joystick.direction) == (0, 0)

    def test_release_recenters(self, joystick):
        joystick.press((130, 100))
        joystick.release()
        assert not joystick.active
        assert tuple(joystick.knob_offset) == (0, 0)
        assert tuple(joystick.direction) == (0, 0)

    def test_other_pointer_is_ignored(self, joystick):
        joystick.press((130, 100), pointer_id=1)
        joystick.move((70, 100), pointer_id=2)
        assert tuple(joystick.direction) == pytest.approx((1, 0))

    def test_layout_places_stick_bottom_left(self, joystick):
        joystick.layout(800, 600)
        assert tuple(joystick.center) == (80, 520)


# ===========================================================
# Input Manager
# ===========================================================

@pytest.fixture
def held_keys(monkeypatch):
    """Set of currently held keys fed to pygame.key.get_pressed."""
    held = set()
    monkeypatch.setattr(pygame.key, "get_pressed",
                        lambda: defaultdict(bool, {k: True for k in held}))
    return held


@pytest.fixture
def input_manager(monkeypatch):
    monkeypatch.setattr(pygame.joystick, "get_count", lambda: 0)
    return InputManager()


class TestInputManager:

    def test_pressed_then_held_then_released(self, input_manager, held_keys):
        held_keys.add(pygame.K_SPACE)
        input_manager.update()
        assert input_manager.action_pressed("dash")
        assert input_manager.action_held("dash")

        input_manager.update()
        assert not input_manager.action_pressed("dash")
        assert input_manager.action_held("dash")

        held_keys.clear()
        input_manager.update()
        assert input_manager.action_released("dash")
        assert not input_manager.action_held("dash")

    def test_unknown_action_is_never_active(self, input_manager, held_keys):
        input_manager.update()
        assert not input_manager.action_held("jump")
        assert not input_manager.action_pressed("jump")

    def test_diagonal_keyboard_move_is_normalized(self, input_manager, held_keys):
        held_keys.update({pygame.K_d, pygame.K_s})
        input_manager.update()
        move = input_manager.get_normalized_move()
        assert move.length() == pytest.approx(1.0)
        assert move.x > 0 and move.y > 0

    def test_joystick_overrides_keyboard(self, input_manager, held_keys):
        held_keys.add(pygame.K_a)
        input_manager.layout(800, 600)
        center = input_manager.joystick.center
        input_manager.handle_event(pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, button=1, pos=(center.x, center.y + 30)))
        input_manager.update()
        assert tuple(input_manager.get_normalized_move()) == pytest.approx((0, 1))

    def test_tap_outside_joystick_is_consumed_once(self, input_manager):
        input_manager.handle_event(pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, button=1, pos=(700, 100)))
        assert input_manager.consume_tap()
        assert not input_manager.consume_tap()
