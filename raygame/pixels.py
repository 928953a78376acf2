"""A CPU-side RGBA pixel buffer stored column by column."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)


def blend_color_u8(back: Sequence[int], front: Sequence[int]) -> Color:
    """Draw ``front`` over ``back``: fully transparent pixels leave ``back`` alone."""
    if front[3] == 0:
        return tuple(back)  # type: ignore[return-value]
    return tuple(front)  # type: ignore[return-value]


class Pixels:
    """A width x height grid of RGBA colours, laid out column-major."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid dimensions {width}x{height}")
        self.width = width
        self.height = height
        self._columns: list[list[Color]] = [[BLACK] * height for _ in range(width)]

    def _check(self, x: int, y: int) -> None:
        if not 0 <= x < self.width:
            raise IndexError(f"x: {x}, width: {self.width}")
        if not 0 <= y < self.height:
            raise IndexError(f"y: {y}, height: {self.height}")

    def set_color(self, x: int, y: int, color: Sequence[int]) -> None:
        """Set the colour of a single pixel."""
        self._check(x, y)
        self._columns[x][y] = tuple(color)  # type: ignore[assignment]

    def blend_color(self, x: int, y: int, color: Sequence[int]) -> None:
        """Blend a colour onto a single pixel."""
        self._check(x, y)
        column = self._columns[x]
        column[y] = blend_color_u8(column[y], color)

    def get_color(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self._columns[x][y]

    def clear(self, color: Sequence[int]) -> None:
        """Fill every pixel with one colour."""
        rgba = tuple(color)
        self.clear_with(lambda _x, _y: rgba)

    def clear_with(self, f: Callable[[int, int], Sequence[int]]) -> None:
        """Fill every pixel with ``f(x, y)``."""
        for x, column in enumerate(self._columns):
            column[:] = [tuple(f(x, y)) for y in range(self.height)]

    def clear_with_column(self, f: Callable[[int], Sequence[int]]) -> None:
        """Compute one column with ``f(y)`` and copy it to every column."""
        template = [tuple(f(y)) for y in range(self.height)]
        for column in self._columns:
            column[:] = template

    def column(self, x: int) -> list[Color]:
        """Return the mutable list of colours making up column ``x``."""
        if not 0 <= x < self.width:
            raise IndexError(f"x: {x}, width: {self.width}")
        return self._columns[x]

    def columns(self) -> Iterator[list[Color]]:
        """Iterate over the mutable columns from left to right."""
        yield from self._columns

    def dimensions(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height

    def to_bytes(self) -> bytes:
        """Return the buffer as RGBA bytes in column-major order."""
        return bytes(
            channel for column in self._columns for pixel in column for channel in pixel
        )