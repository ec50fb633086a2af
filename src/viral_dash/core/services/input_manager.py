"""
input_manager.py
----------------
Unified input system with edge-detected action queries.

Provides:
- Keyboard, game controller and on-screen (touch/mouse) joystick input
- Edge detection (pressed, held, released)
- Normalized movement vectors with a shared dead zone rule
"""

import math

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.runtime.game_settings import Input


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "move_left": [pygame.K_LEFT, pygame.K_a],
        "move_right": [pygame.K_RIGHT, pygame.K_d],
        "move_up": [pygame.K_UP, pygame.K_w],
        "move_down": [pygame.K_DOWN, pygame.K_s],
        "dash": [pygame.K_SPACE],
        "laser": [pygame.K_e],
    },
    "ui": {
        "confirm": [pygame.K_RETURN, pygame.K_SPACE],
        "restart": [pygame.K_r],
        "quit": [pygame.K_ESCAPE],
    },
}

# Controller buttons (Xbox layout)
CONTROLLER_BUTTONS = {
    "dash": 0,   # A
    "laser": 2,  # X
}


# ===========================================================
# Dead Zone
# ===========================================================

def apply_dead_zone(dx, dy, max_travel, ratio=Input.DEAD_ZONE_RATIO):
    """
    Convert a raw stick/knob offset into a movement direction.

    Offsets longer than max_travel are clamped; anything inside
    ratio * max_travel reads as no input. Outside the dead zone the
    result is a unit vector.

    Returns:
        (x, y) tuple, either (0.0, 0.0) or unit length
    """
    if max_travel <= 0:
        return 0.0, 0.0

    dist = math.hypot(dx, dy)
    clamped = min(dist, max_travel)
    if clamped <= max_travel * ratio:
        return 0.0, 0.0

    return dx / dist, dy / dist


# ===========================================================
# Virtual Joystick
# ===========================================================

class VirtualJoystick:
    """
    On-screen analog stick driven by touch or mouse drag.

    Activates when a press lands inside the joystick area (lower-left
    corner of the canvas), tracks the knob offset from the area center
    and reports a dead-zoned unit direction.
    """

    __slots__ = ('center', 'radius', 'knob_radius', 'max_travel',
                 'active', 'knob_offset', 'direction', '_pointer_id')

    def __init__(self, center=(0, 0), radius=Input.JOYSTICK_RADIUS,
                 knob_radius=Input.JOYSTICK_KNOB_RADIUS):
        self.center = pygame.Vector2(center)
        self.radius = radius
        self.knob_radius = knob_radius
        self.max_travel = radius - knob_radius
        self.active = False
        self.knob_offset = pygame.Vector2(0, 0)
        self.direction = pygame.Vector2(0, 0)
        self._pointer_id = None

    def layout(self, canvas_width, canvas_height):
        """Place the stick in the lower-left corner of the canvas."""
        margin = self.radius + 20
        self.center.update(margin, canvas_height - margin)

    def contains(self, pos) -> bool:
        return self.center.distance_to(pos) <= self.radius * 1.5

    def press(self, pos, pointer_id=0) -> bool:
        """Start tracking if the press lands on the stick."""
        if self.active or not self.contains(pos):
            return False
        self.active = True
        self._pointer_id = pointer_id
        self.move(pos, pointer_id)
        return True

    def move(self, pos, pointer_id=0):
        """Update knob offset and direction for the tracked pointer."""
        if not self.active or pointer_id != self._pointer_id:
            return

        dx = pos[0] - self.center.x
        dy = pos[1] - self.center.y
        dist = math.hypot(dx, dy)

        if dist > self.max_travel and dist > 0:
            scale = self.max_travel / dist
            self.knob_offset.update(dx * scale, dy * scale)
        else:
            self.knob_offset.update(dx, dy)

        self.direction.update(*apply_dead_zone(dx, dy, self.max_travel))

    def release(self, pointer_id=0):
        """Stop tracking and recenter the knob."""
        if not self.active or pointer_id != self._pointer_id:
            return
        self.active = False
        self._pointer_id = None
        self.knob_offset.update(0, 0)
        self.direction.update(0, 0)

    def draw(self, draw_manager, layer):
        """Queue base ring and knob."""
        base = pygame.Rect(0, 0, self.radius * 2, self.radius * 2)
        base.center = (int(self.center.x), int(self.center.y))
        draw_manager.queue_shape("circle", base, (120, 120, 200), layer, width=2)

        knob = pygame.Rect(0, 0, self.knob_radius * 2, self.knob_radius * 2)
        knob.center = (int(self.center.x + self.knob_offset.x),
                       int(self.center.y + self.knob_offset.y))
        draw_manager.queue_shape("circle", knob, (180, 180, 255), layer)


# ===========================================================
# Action State
# ===========================================================

class ActionState:
    """Held flag of one action this step and last step."""

    __slots__ = ("held", "was_held")

    def __init__(self):
        self.held = False
        self.was_held = False

    def advance(self, down: bool):
        self.was_held = self.held
        self.held = down

    @property
    def pressed(self) -> bool:
        return self.held and not self.was_held

    @property
    def released(self) -> bool:
        return self.was_held and not self.held


# ===========================================================
# Input Manager
# ===========================================================

class InputManager:
    """
    Polls keyboard, controller and the on-screen joystick once per step
    and answers action queries against that snapshot.

    Usage:
        direction = input_manager.get_normalized_move()
        if input_manager.action_held("dash"):
            ...
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {group: {action: [keys]}}; DEFAULT_KEY_BINDINGS when None
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._bound_keys = {
            action: tuple(keys)
            for group in self.key_bindings.values()
            for action, keys in group.items()
        }
        self._states = {action: ActionState() for action in self._bound_keys}

        self.move = pygame.Vector2(0, 0)
        self.joystick = VirtualJoystick()
        self._tap_pending = False

        pygame.joystick.init()
        self.controller = None
        if pygame.joystick.get_count():
            self.controller = pygame.joystick.Joystick(0)
            self.controller.init()
            DebugLogger.init_sub(f"Controller: {self.controller.get_name()}")

    # ===========================================================
    # Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        """True on the step the action went down."""
        state = self._states.get(action)
        return bool(state and state.pressed)

    def action_held(self, action: str) -> bool:
        state = self._states.get(action)
        return bool(state and state.held)

    def action_released(self, action: str) -> bool:
        """True on the step the action came up."""
        state = self._states.get(action)
        return bool(state and state.released)

    def get_normalized_move(self) -> pygame.Vector2:
        """
        Movement direction with magnitude <= 1.

        The on-screen joystick wins while it is deflected, then the
        controller stick, then the keyboard.
        """
        return self.move

    def consume_tap(self) -> bool:
        """True once per click or tap outside the joystick."""
        tapped, self._tap_pending = self._tap_pending, False
        return tapped

    # ===========================================================
    # Polling
    # ===========================================================

    def update(self):
        """Snapshot every input source. Call once per fixed step."""
        keys = pygame.key.get_pressed()
        for action, state in self._states.items():
            state.advance(self._down(action, keys))
        self.move.update(self._resolve_move(keys))

    def handle_event(self, event):
        """Feed pointer events to the on-screen joystick."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not self.joystick.press(event.pos):
                self._tap_pending = True
        elif event.type == pygame.MOUSEMOTION:
            self.joystick.move(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.joystick.release()

    def layout(self, canvas_width, canvas_height):
        self.joystick.layout(canvas_width, canvas_height)

    def _down(self, action, keys) -> bool:
        if any(keys[key] for key in self._bound_keys.get(action, ())):
            return True
        button = CONTROLLER_BUTTONS.get(action)
        return bool(self.controller and button is not None and self.controller.get_button(button))

    def _resolve_move(self, keys):
        if self.joystick.active and self.joystick.direction.length_squared() > 0:
            return self.joystick.direction

        if self.controller:
            stick = apply_dead_zone(self.controller.get_axis(0), self.controller.get_axis(1),
                                    Input.CONTROLLER_MAX_TRAVEL)
            if stick != (0.0, 0.0):
                return stick

        held = {a: any(keys[k] for k in self._bound_keys.get(a, ()))
                for a in ("move_left", "move_right", "move_up", "move_down")}
        direction = pygame.Vector2(held["move_right"] - held["move_left"],
                                   held["move_down"] - held["move_up"])
        if direction.length_squared() > 0:
            direction.normalize_ip()
        return direction
