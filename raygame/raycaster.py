"""Grid ray casting for walls and billboard sprites."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import dropwhile
from typing import Any, Protocol, TypeVar

from raygame.draw_column import draw_color_column, draw_texture_column
from raygame.perspective import Perspective
from raygame.pixels import Pixels, blend_color_u8
from raygame.ray_gen import RayGenerator, rotate
from raygame.sampler import TextureSampler

MAX_VIEW_DISTANCE = 20.0

Vec2 = tuple[float, float]
Color = tuple[int, int, int, int]

_DARKEN = int(0.8 * 256.0)

T = TypeVar("T")


class _Grid(Protocol):
    """A map of cells; ``cell`` returns None for empty space, a colour or a texture for walls."""

    width: int
    height: int

    def cell(self, x: int, y: int) -> Any: ...


def _fdiv(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _normalize(v: Vec2) -> Vec2:
    length = math.hypot(*v)
    if length == 0 or math.isnan(length):
        return (math.nan, math.nan)
    return (v[0] / length, v[1] / length)


def _partition_point(items: Sequence[T], pred: Callable[[T], bool]) -> int:
    """Index of the first item for which ``pred`` is false, assuming a true prefix."""
    lo, hi = 0, len(items)
    while lo < hi:
        mid = (lo + hi) // 2
        if pred(items[mid]):
            lo = mid + 1
        else:
            hi = mid
    return lo


def _replace(_current: Color, new: Color) -> Color:
    return tuple(new)  # type: ignore[return-value]


def _replace_darkened(_current: Color, new: Color) -> Color:
    return (
        new[0] * _DARKEN // 256,
        new[1] * _DARKEN // 256,
        new[2] * _DARKEN // 256,
        new[3],
    )


class HitSide(enum.Enum):
    """Which face of a grid cell a ray struck."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Hit:
    """Where and how a ray struck a wall."""

    t: float
    pos: Vec2
    cell: Any
    side: HitSide


class Sprite:
    """A billboard to be drawn facing the camera."""

    def __init__(
        self,
        texture: TextureSampler,
        position: Vec2,
        scale: Vec2 = (1.0, 1.0),
        height_offset: float = 0.0,
    ) -> None:
        self.texture = texture
        self.position = position
        self.scale = scale
        self.height_offset = height_offset * scale[1]
        self.distance_2 = math.nan

    @classmethod
    def simple(cls, texture: TextureSampler, position: Vec2) -> Sprite:
        """A sprite of unit scale resting on the floor."""
        return cls(texture, position)

    def __repr__(self) -> str:
        return f"Sprite(position={self.position!r}, scale={self.scale!r})"


def cast_ray(ray_start: Vec2, ray_dir: Vec2, grid: _Grid) -> Hit | None:
    """Step through grid cells along a ray and return the first wall within view."""
    sx, sy = ray_start
    dx, dy = ray_dir

    ratio_yx = _fdiv(dy, dx)
    ratio_xy = _fdiv(dx, dy)
    unit_x = math.sqrt(1.0 + ratio_yx * ratio_yx)
    unit_y = math.sqrt(1.0 + ratio_xy * ratio_xy)

    map_x = math.floor(sx)
    map_y = math.floor(sy)

    if dx < 0.0:
        step_x = -1
        length_x = (sx - map_x) * unit_x
    else:
        step_x = 1
        length_x = (map_x + 1 - sx) * unit_x

    if dy < 0.0:
        step_y = -1
        length_y = (sy - map_y) * unit_y
    else:
        step_y = 1
        length_y = (map_y + 1 - sy) * unit_y

    distance = 0.0
    while distance <= MAX_VIEW_DISTANCE:
        vertical = length_x < length_y
        if vertical:
            map_x += step_x
            distance = length_x
            length_x += unit_x
        else:
            map_y += step_y
            distance = length_y
            length_y += unit_y

        if not (0 <= map_x < grid.width and 0 <= map_y < grid.height):
            continue

        cell = grid.cell(map_x, map_y)
        if cell is None:
            continue

        if vertical:
            side = HitSide.LEFT if dx > 0.0 else HitSide.RIGHT
        else:
            side = HitSide.BOTTOM if dy < 0.0 else HitSide.TOP

        return Hit(distance, (sx + dx * distance, sy + dy * distance), cell, side)

    return None


class RayCaster:
    """Renders walls and sprites into a :class:`Pixels` buffer."""

    def __init__(self, screen_width: int, screen_height: int, fov: float) -> None:
        self.proj_dist = (screen_height / 2.0) / math.tan(math.radians(fov) / 2.0)
        self.ray_gen = RayGenerator(self.proj_dist, screen_width)
        self.minimap_rays: list[Vec2] = []
        self.depth_map: list[float] = []

    @property
    def projection_distance(self) -> float:
        return self.proj_dist

    def perspective(self, angle: float, camera_height: float, subject_height: float) -> Perspective:
        """Perspective for looking up or down by ``angle`` radians."""
        return Perspective.from_angle(angle, camera_height, subject_height, self.proj_dist)

    def draw_walls(
        self,
        pixels: Pixels,
        camera_pos: Vec2,
        camera_dir: Vec2,
        perspective: Perspective,
        grid: _Grid,
    ) -> None:
        """Cast one ray per column, draw the walls hit and record depths."""
        self.minimap_rays.clear()
        self.depth_map.clear()
        cx, cy = camera_pos
        cdx, cdy = camera_dir

        for ray_dir, column in zip(self.ray_gen.directions(camera_dir), pixels.columns()):
            hit = cast_ray(camera_pos, ray_dir, grid)
            if hit is None:
                self.minimap_rays.append(
                    (cx + ray_dir[0] * MAX_VIEW_DISTANCE, cy + ray_dir[1] * MAX_VIEW_DISTANCE)
                )
                self.depth_map.append(MAX_VIEW_DISTANCE)
                continue

            self.minimap_rays.append(hit.pos)
            self.depth_map.append(hit.t)

            facing = ray_dir[0] * cdx + ray_dir[1] * cdy
            wall_height = _fdiv(self.proj_dist, hit.t * facing)
            put = (
                _replace_darkened if hit.side in (HitSide.LEFT, HitSide.RIGHT) else _replace
            )

            wall = hit.cell
            if isinstance(wall, TextureSampler):
                hx, hy = hit.pos
                wall_x = {
                    HitSide.TOP: lambda: 1.0 - math.modf(hx)[0],
                    HitSide.BOTTOM: lambda: math.modf(hx)[0],
                    HitSide.LEFT: lambda: math.modf(hy)[0],
                    HitSide.RIGHT: lambda: 1.0 - math.modf(hy)[0],
                }[hit.side]()
                draw_texture_column(wall, column, wall_x, wall_height, perspective, put)
            else:
                draw_color_column(wall, column, wall_height, perspective, put)

    def draw_sprites(
        self,
        pixels: Pixels,
        camera_pos: Vec2,
        camera_dir: Vec2,
        perspective: Perspective,
        sprites: list[Sprite],
    ) -> None:
        """Draw sprites far to near, hidden behind walls recorded by :meth:`draw_walls`.

        ``sprites`` is sorted in place from furthest to nearest.
        """
        if not self.depth_map:
            raise RuntimeError(
                "depth map not initialized; run draw_walls before draw_sprites"
            )
        cx, cy = camera_pos

        for sprite in sprites:
            px, py = sprite.position
            sprite.distance_2 = (px - cx) ** 2 + (py - cy) ** 2
        sprites.sort(key=lambda s: s.distance_2, reverse=True)

        max_depth_2 = max(self.depth_map) ** 2
        inverse_camera = (camera_dir[0], -camera_dir[1])
        angles = self.ray_gen.angles

        for sprite in dropwhile(lambda s: s.distance_2 > max_depth_2, sprites):
            distance = math.sqrt(sprite.distance_2)
            if distance == 0:
                continue
            to_x, to_y = rotate(
                (sprite.position[0] - cx, sprite.position[1] - cy), inverse_camera
            )
            dir_x, dir_y = to_x / distance, to_y / distance

            half_width = sprite.scale[0] * 0.5
            off_x, off_y = -dir_y * half_width, dir_x * half_width
            right_most = (to_x + off_x, to_y + off_y)
            left_most = (to_x - off_x, to_y - off_y)

            if left_most[0] < 0.0 and right_most[0] < 0.0:
                continue

            left_dir = _normalize(left_most)
            right_dir = _normalize(right_most)

            if left_dir[0] < 0.0:
                left_i = 0
            else:
                left_i = _partition_point(angles, lambda a: a[1] < left_dir[1])
            if right_dir[0] < 0.0:
                right_i = len(angles)
            else:
                right_i = _partition_point(angles, lambda a: a[1] <= right_dir[1])

            inverse_to_sprite = (dir_x, -dir_y)
            axis_x, _ = rotate((to_x, to_y), inverse_to_sprite)
            sprite_perspective = perspective.offset_subject(sprite.height_offset, sprite.scale[1])

            for screen_x in range(left_i, right_i):
                angle = angles[screen_x]
                rot_x, rot_y = rotate(angle, inverse_to_sprite)
                ray_length = _fdiv(axis_x, rot_x)

                if ray_length > self.depth_map[screen_x]:
                    continue

                column_height = _fdiv(sprite.scale[1] * self.proj_dist, ray_length * angle[0])
                hit_y = rot_y * ray_length
                tex_x = _fdiv(hit_y, sprite.scale[0]) + 0.5

                draw_texture_column(
                    sprite.texture,
                    pixels.column(screen_x),
                    tex_x,
                    column_height,
                    sprite_perspective,
                    blend_color_u8,
                )