"""Sprite-sheet animations with per-angle frames."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class _AnimationMap:
    frames: list[list[int]]
    frame_time: float


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class AnimatedTexture:
    """A sprite sheet with named animations.

    Each animation is a list of frames, and each frame lists sprite indices
    for the directions the sprite can be seen from.
    """

    def __init__(self, sprite_sheet: Sequence[Any]) -> None:
        self.sprite_sheet = sprite_sheet
        self._states: dict[str, _AnimationMap] = {}

    def register_state(self, name: str, frame_time: float, states: list[list[int]]) -> AnimatedTexture:
        """Add an animation and return the texture for chaining."""
        self._states[name] = _AnimationMap([list(frame) for frame in states], frame_time)
        return self

    def _animation(self, name: str) -> _AnimationMap:
        try:
            return self._states[name]
        except KeyError:
            raise KeyError(f"no animation state named {name!r}") from None

    def get_state(self, initial_state: str) -> AnimatedTextureState:
        """Start playing this texture from the named animation."""
        return AnimatedTextureState(self, initial_state, self._animation(initial_state))


@dataclass
class AnimatedTextureState:
    """Playback position within an :class:`AnimatedTexture`."""

    texture: AnimatedTexture
    state_name: str
    _animation: _AnimationMap = field(repr=False)
    frame: int = 0
    frame_time_mult: float = 1.0
    accumulator: float = 0.0

    def set_state(self, name: str, speed_mult: float) -> None:
        """Switch animation; switching to the current one changes nothing."""
        if self.state_name == name:
            return
        self._animation = self.texture._animation(name)
        self.state_name = name
        self.frame = 0
        self.accumulator = 0.0
        self.frame_time_mult = 1.0 / speed_mult

    def get_sprite(self, look_angle: float, cur_time: float) -> Any:
        """Advance by ``cur_time`` seconds and return the sprite for ``look_angle``."""
        self._advance(cur_time)
        return self.texture.sprite_sheet[self._angled_frame(look_angle)]

    def _advance(self, dt: float) -> None:
        self.accumulator += dt
        frame_time = self._animation.frame_time * self.frame_time_mult
        if self.accumulator >= frame_time:
            self.accumulator -= frame_time
            self.frame = (self.frame + 1) % len(self._animation.frames)

    def _angled_frame(self, look_angle: float) -> int:
        directions = self._animation.frames[self.frame]
        count = len(directions)
        index = _round_half_away(look_angle / (2.0 * math.pi) * count)
        return directions[index % count]