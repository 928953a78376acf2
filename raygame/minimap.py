"""Top-down map overlay: a pixel image of the grid plus vision and entity markers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Any

from raygame.gameui import Rect
from raygame.pixels import Pixels
from raygame.sampler import TextureSampler

Vec2 = tuple[float, float]
Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
GRAY: Color = (128, 128, 128, 255)
RED: Color = (255, 0, 0, 255)

_SLOPE_THRESHOLD = 0.001


class Minimap:
    """Renders a grid map where each cell becomes a ``map_ratio``-sized square."""

    def __init__(self, grid: Any) -> None:
        self.grid = grid
        self.border_size = 3
        self.border_color: Color = GRAY
        self.map_ratio = 8
        self.floor_color: Color = BLACK
        self.entity_color: Color = RED
        self.minimap_scale: Vec2 = (2.0, 2.0)
        self.minimap_pos: Vec2 = (10.0, 10.0)
        self.pixels = Pixels(self.pixel_width, self.pixel_height)

    @property
    def pixel_width(self) -> int:
        return self.grid.width * self.map_ratio

    @property
    def pixel_height(self) -> int:
        return self.grid.height * self.map_ratio

    def _cell_color(self, cell: Any) -> Color | None:
        if cell is None:
            return None
        if isinstance(cell, TextureSampler):
            return cell.dominant
        return tuple(cell)  # type: ignore[return-value]

    def render_map(self) -> Pixels:
        """Redraw the map image; walls get a black outline."""
        if self.pixels.dimensions() != (self.pixel_width, self.pixel_height):
            self.pixels = Pixels(self.pixel_width, self.pixel_height)
        self.pixels.clear(self.floor_color)
        ratio = self.map_ratio
        for x in range(self.pixel_width):
            for y in range(self.pixel_height):
                color = self._cell_color(self.grid.cell(x // ratio, y // ratio))
                if color is None:
                    continue
                if x % ratio in (0, ratio - 1) or y % ratio in (0, ratio - 1):
                    color = BLACK
                self.pixels.set_color(x, y, color)
        return self.pixels

    def _translate(self, width: int) -> Vec2:
        return (
            (width - self.pixel_width * self.minimap_scale[0])
            - self.minimap_pos[0]
            - self.border_size,
            self.minimap_pos[1] + self.border_size,
        )

    def draw(self, width: int) -> tuple[Rect, Vec2]:
        """Return the border rectangle and where the scaled map image goes."""
        tx, ty = self._translate(width)
        border = self.border_size
        rect = Rect(
            (tx - border, ty - border),
            (
                self.minimap_scale[0] * self.pixel_width + border * 2,
                self.minimap_scale[1] * self.pixel_height + border * 2,
            ),
            self.border_color,
            corner_radius=2.0,
        )
        return rect, (tx, ty)

    def _to_screen(self, width: int, point: Vec2) -> Vec2:
        tx, ty = self._translate(width)
        cx, cy = self.convert_ray(point)
        return (tx + cx, ty + cy)

    def vision_polygon(
        self,
        width: int,
        origin: Vec2,
        rays: Sequence[Vec2],
        depths: Sequence[float],
    ) -> list[Vec2]:
        """Screen points of the visible area, keeping only rays where the depth slope changes."""
        if len(rays) <= 1:
            return []

        points = [self._to_screen(width, origin), self._to_screen(width, rays[0])]
        prev_slope = 0.0
        only_this = True
        for (prev_ray, prev_depth), (ray, depth) in pairwise(zip(rays, depths)):
            slope = depth - prev_depth
            if abs(slope - prev_slope) > _SLOPE_THRESHOLD:
                prev_slope = slope
                if not only_this:
                    points.append(self._to_screen(width, prev_ray))
                points.append(self._to_screen(width, ray))
                only_this = True
            else:
                only_this = False

        if not only_this:
            points.append(self._to_screen(width, rays[-1]))
        return points

    def entity_rect(self, width: int, position: Vec2) -> Rect:
        """A small square centred on an entity's map position."""
        size = (2.0 * self.minimap_scale[0], 2.0 * self.minimap_scale[1])
        cx, cy = self._to_screen(width, position)
        return Rect((cx - size[0] / 2.0, cy - size[1] / 2.0), size, self.entity_color)

    def convert_ray(self, ray: Vec2) -> Vec2:
        """Scale a map-space point to minimap pixels."""
        return (
            ray[0] * self.map_ratio * self.minimap_scale[0],
            ray[1] * self.map_ratio * self.minimap_scale[1],
        )