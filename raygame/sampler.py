"""Textures stored column-major for fast vertical sampling."""

from __future__ import annotations

import io
import math

from PIL import Image

from raygame.helpers import as_arrays

Color = tuple[int, int, int, int]

_U64_MAX = 2**64 - 1


def _trunc_i32(value: float) -> int:
    """Truncate like a saturating float-to-i32 cast."""
    if math.isnan(value):
        return 0
    if value >= 2**31 - 1:
        return 2**31 - 1
    if value <= -(2**31):
        return -(2**31)
    return int(value)


def _saturating_index(value: float) -> int:
    """Truncate like a saturating float-to-usize cast."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _U64_MAX
    return int(value)


def _dominant_color(pixels: list[Color]) -> Color:
    candidates = [
        p for p in pixels
        if p[3] >= 125 and not (p[0] > 250 and p[1] > 250 and p[2] > 250)
    ] or pixels
    rgb = bytes(channel for p in candidates for channel in p[:3])
    image = Image.frombytes("RGB", (len(candidates), 1), rgb)
    quantized = image.quantize(colors=5, method=Image.Quantize.MEDIANCUT)
    palette = quantized.getpalette()
    _, index = max(quantized.getcolors())
    r, g, b = palette[index * 3:index * 3 + 3]
    return (r, g, b, 255)


class TextureSampler:
    """An RGBA texture that can be sampled by pixel, by uv, or by column."""

    def __init__(self, image: Image.Image) -> None:
        if image.width == 0 or image.height == 0:
            raise ValueError("texture must have non-zero width and height")
        image = image.convert("RGBA")
        self.width: int = image.width
        self.height: int = image.height
        pixels: list[Color] = as_arrays(image.tobytes(), 4)  # type: ignore[assignment]
        rows = as_arrays(pixels, self.width)
        self._columns: list[tuple[Color, ...]] = list(zip(*rows))
        self.dominant: Color = _dominant_color(pixels)

    @classmethod
    def from_bytes(cls, data: bytes) -> TextureSampler:
        """Decode an encoded image (PNG and the like) into a texture."""
        with Image.open(io.BytesIO(data)) as image:
            return cls(image.convert("RGBA"))

    @classmethod
    def from_tiles(cls, tiles_x: int, tiles_y: int, gap: int, data: bytes) -> list[TextureSampler]:
        """Cut an encoded atlas into tiles, row by row."""
        if tiles_x <= 0 or tiles_y <= 0:
            raise ValueError("tiles_x or tiles_y can't be 0")
        with Image.open(io.BytesIO(data)) as opened:
            big = opened.convert("RGBA")

        gap_x = (tiles_x - 1) * gap
        gap_y = (tiles_y - 1) * gap
        if big.width < gap_x or (big.width - gap_x) % tiles_x != 0:
            raise ValueError(
                f"image width {big.width} is not an exact multiple of tiles_x {tiles_x}"
            )
        if big.height < gap_y or (big.height - gap_y) % tiles_y != 0:
            raise ValueError(
                f"image height {big.height} is not an exact multiple of tiles_y {tiles_y}"
            )

        tile_width = big.width // tiles_x
        tile_height = big.height // tiles_y
        if tile_width == 0 or tile_height == 0:
            raise ValueError("image is too small for the requested tiles")

        tiles = []
        for tile_y in range(big.height // tile_height):
            for tile_x in range(big.width // tile_width):
                x = tile_x * (tile_width + gap)
                y = tile_y * (tile_height + gap)
                box = (
                    min(x, big.width),
                    min(y, big.height),
                    min(x + tile_width, big.width),
                    min(y + tile_height, big.height),
                )
                tiles.append(cls(big.crop(box)))
        return tiles

    def set_dominant(self, color: tuple[int, int, int, int]) -> TextureSampler:
        """Override the dominant colour and return the texture."""
        self.dominant = tuple(color)  # type: ignore[assignment]
        return self

    def original_image(self) -> Image.Image:
        """Rebuild the texture as a row-major RGBA image."""
        rows = zip(*self._columns)
        data = bytes(channel for row in rows for pixel in row for channel in pixel)
        return Image.frombytes("RGBA", (self.width, self.height), data)

    def sample(self, u: float, v: float) -> Color:
        """Sample by uv coordinates; values outside 0..1 wrap."""
        return self.sample_exact(_trunc_i32(u * self.width), _trunc_i32(v * self.height))

    def sample_exact(self, x: int, y: int) -> Color:
        """Sample by pixel coordinates, wrapping around the edges."""
        return self._columns[x % self.width][y % self.height]

    def sample_column(self, u: float, v_start: float, v_end: float, height: int) -> list[Color]:
        """Sample ``height`` colours from column ``u`` across ``v_start..v_end``."""
        x = _trunc_i32(u * self.width)
        return self._sample_column(x, v_start * self.height, v_end * self.height, height)

    def sample_column_exact(self, x: int, y_start: int, y_end: int, height: int) -> list[Color]:
        """Like :meth:`sample_column`, in pixel coordinates."""
        return self._sample_column(x, float(y_start), float(y_end), height)

    def _sample_column(self, x: int, y_start: float, y_end: float, height: int) -> list[Color]:
        if height <= 0:
            return []
        column = self._columns[(x % 2**32) % self.width]
        tex_height = self.height

        y_offset = math.floor(y_start / tex_height)
        y_start = y_start + y_offset * tex_height
        y_end = y_end + y_offset * tex_height

        step = (y_end - y_start) / height
        samples = []
        y_tex = y_start
        for _ in range(height):
            samples.append(column[_saturating_index(y_tex) % tex_height])
            y_tex += step
        return samples