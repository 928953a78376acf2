"""Keyboard and mouse handling that turns raw events into an input state."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

MOUSE_SENSITIVITY = 3.0 / 10000.0
KB_LOOK_SENSITIVITY = 2.5
UP_DOWN_ANGLE_CLAMP = 45.0 / 180.0 * math.pi


class Key(enum.Enum):
    """Keys the game reacts to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    SPACE = "space"
    LSHIFT = "lshift"
    RSHIFT = "rshift"
    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class MouseButton(enum.Enum):
    """Mouse buttons."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass
class InputState:
    """What the player is currently asking their character to do."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False
    look_angle: float = 0.0


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


class InputHandler:
    """Tracks the input state and whether it changed since it was last taken."""

    def __init__(self) -> None:
        self.dirty = False
        self._state = InputState()
        self.up_down_angle = 0.0
        self.mouse_locked = False
        self.slow_look = False

    def take_state(self) -> InputState | None:
        """Return a copy of the state if it changed, and mark it clean."""
        state = replace(self._state) if self.dirty else None
        self.dirty = False
        return state

    def peek_state(self) -> InputState:
        """Return a copy of the current state regardless of whether it changed."""
        return replace(self._state)

    def tick(self, dt: float, pressed_keys: Iterable[Key]) -> None:
        """Advance by ``dt`` seconds, applying keyboard look from the held keys."""
        pressed = set(pressed_keys)
        self.up_down_angle = _lerp(self.up_down_angle, 0.0, 5.0 * dt)

        look_x = 0.0
        look_y = 0.0
        if Key.RIGHT in pressed:
            look_x -= 1.0
        if Key.LEFT in pressed:
            look_x += 1.0
        if Key.UP in pressed:
            look_y += 1.0
        if Key.DOWN in pressed:
            look_y -= 1.0

        if look_x == 0.0 and look_y == 0.0:
            return

        if self.slow_look:
            look_x /= 3.0
            look_y /= 3.0

        factor = dt * KB_LOOK_SENSITIVITY
        self._apply_look_delta(look_x * factor, look_y * factor)
        self.dirty = True

    def handle_key(self, key: Key, pressed: bool) -> bool:
        """Apply a key press or release; return whether the state changed."""
        match key:
            case Key.W:
                self._state.forward = pressed
            case Key.A:
                self._state.left = pressed
            case Key.S:
                self._state.backward = pressed
            case Key.D:
                self._state.right = pressed
            case Key.SPACE:
                self._state.shoot = pressed
            case Key.LSHIFT | Key.RSHIFT:
                self.slow_look = pressed
                return False
            case Key.ESCAPE:
                self.mouse_locked = False
                return False
            case _:
                return False
        self.dirty = True
        return True

    def handle_click(self, button: MouseButton, pressed: bool) -> bool:
        """Apply a mouse button press or release; return whether the state changed."""
        if button is not MouseButton.LEFT:
            return False
        self.mouse_locked = True
        self._state.shoot = pressed
        self.dirty = True
        return True

    def apply_mouse_delta(self, dx: int, dy: int) -> bool:
        """Turn the view by a mouse movement while the mouse is locked."""
        if not self.mouse_locked or (dx == 0 and dy == 0):
            return False
        self._apply_look_delta(dx * MOUSE_SENSITIVITY, dy * MOUSE_SENSITIVITY)
        self.dirty = True
        return True

    def _apply_look_delta(self, dx: float, dy: float) -> None:
        self._state.look_angle = (self._state.look_angle - dx) % (2.0 * math.pi)
        self.up_down_angle = min(
            max(self.up_down_angle + dy, -UP_DOWN_ANGLE_CLAMP), UP_DOWN_ANGLE_CLAMP
        )