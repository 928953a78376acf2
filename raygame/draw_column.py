"""Projecting textures and flat colours onto a single screen column."""

from __future__ import annotations

import math
from collections.abc import Callable, MutableSequence, Sequence

from raygame.perspective import Perspective
from raygame.sampler import TextureSampler

Color = tuple[int, int, int, int]
DrawFn = Callable[[Color, Color], Color]


def _fdiv(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _round_index(value: float, limit: int) -> int:
    """Round half away from zero, saturate at 0, and clamp to ``limit``."""
    if math.isnan(value) or value < 0.5:
        return 0
    if math.isinf(value):
        return limit
    return min(math.floor(value + 0.5), limit)


def calculate_perspective(
    column_length: int, column_height: float, perspective: Perspective
) -> tuple[int, int, float, float]:
    """Work out which rows a projected column covers.

    Returns ``(start, end, v_start, v_end)``: the row range on screen and the
    part of the texture, in 0..1, that is visible within it.
    """
    middle = column_length / 2.0
    horizon = perspective.horizon_height

    start = middle - column_height * (1.0 - horizon) + perspective.y_offset
    end = middle + column_height * horizon + perspective.y_offset

    span = end - start
    v_start = _fmax(_fdiv(0.0 - start, span), 0.0)
    v_end = _fmin(_fdiv(column_length - start, span), 1.0)

    return (
        _round_index(start, column_length),
        _round_index(end, column_length),
        v_start,
        v_end,
    )


def draw_texture_column(
    texture: TextureSampler,
    column: MutableSequence[Color],
    tex_x: float,
    column_height: float,
    perspective: Perspective,
    draw: DrawFn,
) -> None:
    """Draw the texture column at ``tex_x`` onto ``column``.

    ``draw(current, new)`` returns the colour to store for each covered pixel.
    """
    start, end, v_start, v_end = calculate_perspective(len(column), column_height, perspective)
    if end <= start:
        return
    samples = texture.sample_column(tex_x, v_start, v_end, end - start)
    for y, new in zip(range(start, end), samples):
        column[y] = draw(column[y], new)


def draw_color_column(
    color: Sequence[int],
    column: MutableSequence[Color],
    column_height: float,
    perspective: Perspective,
    draw: DrawFn,
) -> None:
    """Draw a column of a single colour onto ``column``."""
    rgba: Color = tuple(color)  # type: ignore[assignment]
    start, end, _, _ = calculate_perspective(len(column), column_height, perspective)
    for y in range(start, end):
        column[y] = draw(column[y], rgba)