"""Precomputed ray directions for every screen column."""

from __future__ import annotations

import math
from collections.abc import Iterator

Vec2 = tuple[float, float]


def rotate(v: Vec2, by: Vec2) -> Vec2:
    """Rotate ``v`` by the unit rotation vector ``by`` (complex multiplication)."""
    vx, vy = v
    bx, by_ = by
    return (vx * bx - vy * by_, vy * bx + vx * by_)


def _normalize(v: Vec2) -> Vec2:
    length = math.hypot(*v)
    if length == 0:
        return (math.nan, math.nan)
    return (v[0] / length, v[1] / length)


class RayGenerator:
    """Caches one ray direction per screen column, relative to a camera facing (1, 0)."""

    def __init__(self, proj_dist: float, width: int) -> None:
        half_width = width // 2
        self.angles: list[Vec2] = [
            _normalize((proj_dist, float(y))) for y in range(-half_width, width - half_width)
        ]

    @classmethod
    def from_fov(cls, fov: float, width: int) -> RayGenerator:
        """Spread rays evenly by angle across ``fov`` degrees."""
        generator = cls.__new__(cls)
        if width <= 0:
            generator.angles = []
            return generator
        step = fov / width
        half_fov = fov / 2.0
        generator.angles = [
            rotate((math.cos(a), math.sin(a)), (1.0, 0.0))
            for a in (math.radians(-half_fov + step * i) for i in range(width))
        ]
        return generator

    def directions(self, direction: Vec2) -> Iterator[Vec2]:
        """Yield each column's ray rotated to face ``direction``."""
        for angle in self.angles:
            yield rotate(angle, direction)

    def __len__(self) -> int:
        return len(self.angles)