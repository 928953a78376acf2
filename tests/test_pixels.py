import pytest

from raygame.pixels import BLACK, Pixels, blend_color_u8

RED = (255, 0, 0, 255)
CLEAR = (10, 20, 30, 0)


def test_new_buffer_is_black():
    pixels = Pixels(3, 2)
    assert all(pixels.get_color(x, y) == BLACK for x in range(3) for y in range(2))
    assert BLACK == (0, 0, 0, 255)


def test_set_and_get_round_trip():
    pixels = Pixels(4, 4)
    pixels.set_color(2, 3, RED)
    assert pixels.get_color(2, 3) == RED
    assert pixels.get_color(3, 2) == BLACK


def test_out_of_bounds_raises():
    pixels = Pixels(2, 2)
    with pytest.raises(IndexError):
        pixels.set_color(2, 0, RED)
    with pytest.raises(IndexError):
        pixels.get_color(0, -1)


def test_blend_skips_transparent_front():
    assert blend_color_u8(RED, CLEAR) == RED
    assert blend_color_u8(BLACK, RED) == RED


def test_blend_color_on_buffer():
    pixels = Pixels(1, 1)
    pixels.blend_color(0, 0, CLEAR)
    assert pixels.get_color(0, 0) == BLACK
    pixels.blend_color(0, 0, (1, 2, 3, 4))
    assert pixels.get_color(0, 0) == (1, 2, 3, 4)


def test_clear_with_uses_coordinates():
    pixels = Pixels(3, 4)
    pixels.clear_with(lambda x, y: (x, y, 0, 255))
    assert all(pixels.get_color(x, y) == (x, y, 0, 255) for x in range(3) for y in range(4))


def test_clear_with_column_copies_column():
    pixels = Pixels(3, 4)
    pixels.clear_with_column(lambda y: (y, y, y, 255))
    assert [pixels.column(x) for x in range(3)] == [[(y, y, y, 255) for y in range(4)]] * 3


def test_columns_are_independent_after_clear_with_column():
    pixels = Pixels(2, 2)
    pixels.clear_with_column(lambda y: BLACK)
    pixels.set_color(0, 0, RED)
    assert pixels.get_color(1, 0) == BLACK


def test_column_is_live_view():
    pixels = Pixels(2, 3)
    pixels.column(1)[2] = RED
    assert pixels.get_color(1, 2) == RED
    assert list(pixels.columns())[1][2] == RED


def test_clear_fills_everything():
    pixels = Pixels(2, 2)
    pixels.clear(RED)
    assert set(pixel for column in pixels.columns() for pixel in column) == {RED}


def test_dimensions_and_bytes_layout():
    pixels = Pixels(3, 2)
    assert pixels.dimensions() == (3, 2)
    pixels.set_color(2, 1, RED)
    data = pixels.to_bytes()
    assert len(data) == 3 * 2 * 4
    offset = (2 * 2 + 1) * 4
    assert tuple(data[offset:offset + 4]) == RED