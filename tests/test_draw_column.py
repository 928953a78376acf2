import math

from PIL import Image

from raygame.draw_column import calculate_perspective, draw_color_column, draw_texture_column
from raygame.perspective import Perspective
from raygame.pixels import blend_color_u8
from raygame.sampler import TextureSampler

A = (255, 0, 0, 255)
B = (0, 255, 0, 255)
C = (0, 0, 255, 255)
D = (255, 255, 0, 255)
BLACK = (0, 0, 0, 255)
CENTERED = Perspective(0.0, 0.5)


def _replace(_current, new):
    return new


def _abcd_texture():
    data = bytes(channel for px in (A, B, C, D) for channel in px)
    return TextureSampler(Image.frombytes("RGBA", (1, 4), data))


def test_column_exactly_screen_height_fills_everything():
    start, end, v_start, v_end = calculate_perspective(10, 10.0, CENTERED)
    assert (start, end) == (0, 10)
    assert v_start == 0.0
    assert v_end == 1.0


def test_short_column_is_centered():
    start, end, v_start, v_end = calculate_perspective(10, 4.0, CENTERED)
    assert end - start == 4
    assert start + end == 10
    assert (v_start, v_end) == (0.0, 1.0)


def test_tall_column_is_cropped_to_visible_texture():
    start, end, v_start, v_end = calculate_perspective(10, 40.0, CENTERED)
    assert (start, end) == (0, 10)
    assert 0.0 < v_start < v_end < 1.0


def test_y_offset_shifts_both_ends():
    base = calculate_perspective(20, 6.0, CENTERED)
    shifted = calculate_perspective(20, 6.0, Perspective(3.0, 0.5))
    assert shifted[0] - base[0] == 3
    assert shifted[1] - base[1] == 3


def test_zero_height_column_is_empty():
    start, end, _, _ = calculate_perspective(10, 0.0, CENTERED)
    assert start == end


def test_infinite_height_column_covers_screen():
    start, end, v_start, v_end = calculate_perspective(10, math.inf, CENTERED)
    assert (start, end) == (0, 10)
    assert 0.0 <= v_start <= v_end <= 1.0


def test_color_column_paints_only_covered_rows():
    column = [BLACK] * 12
    start, end, _, _ = calculate_perspective(12, 4.0, CENTERED)
    draw_color_column(A, column, 4.0, CENTERED, _replace)
    assert column[start:end] == [A] * (end - start)
    assert column[:start] == [BLACK] * start
    assert column[end:] == [BLACK] * (12 - end)


def test_callback_sees_current_pixel():
    seen = []

    def record(current, new):
        seen.append(current)
        return new

    column = [B] * 6
    draw_color_column(A, column, 6.0, CENTERED, record)
    assert seen == [B] * 6
    assert column == [A] * 6


def test_texture_column_samples_each_texel():
    column = [BLACK] * 4
    draw_texture_column(_abcd_texture(), column, 0.0, 4.0, CENTERED, _replace)
    assert column == [A, B, C, D]


def test_texture_column_stretches():
    column = [BLACK] * 8
    draw_texture_column(_abcd_texture(), column, 0.0, 8.0, CENTERED, _replace)
    assert column == [A, A, B, B, C, C, D, D]


def test_transparent_texture_leaves_column_untouched():
    clear = Image.new("RGBA", (2, 2), (10, 20, 30, 0))
    column = [B] * 5
    draw_texture_column(TextureSampler(clear), column, 0.5, 5.0, CENTERED, blend_color_u8)
    assert column == [B] * 5