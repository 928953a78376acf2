import io

import pytest
from PIL import Image

from raygame.sampler import TextureSampler

A = (255, 0, 0, 255)
B = (0, 255, 0, 255)
C = (0, 0, 255, 255)
D = (255, 255, 0, 255)


def make_image(rows):
    image = Image.new("RGBA", (len(rows[0]), len(rows)))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.putpixel((x, y), color)
    return image


def png_bytes(image):
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def abcd():
    return TextureSampler(make_image([[A], [B], [C], [D]]))


def test_dimensions_are_original():
    tex = TextureSampler(make_image([[A, B, C], [D, A, B]]))
    assert (tex.width, tex.height) == (3, 2)


def test_sample_exact_and_wrapping():
    tex = TextureSampler(make_image([[A, B], [C, D]]))
    assert tex.sample_exact(1, 0) == B
    assert tex.sample_exact(0, 1) == C
    assert tex.sample_exact(-1, -1) == D
    assert tex.sample_exact(2, 3) == C


def test_sample_uv():
    tex = TextureSampler(make_image([[A, B], [C, D]]))
    assert tex.sample(0.75, 0.25) == B
    assert tex.sample(0.25, 0.75) == C


@pytest.mark.parametrize(
    "v_start, v_end, height, expected",
    [
        (0.0, 1.0, 4, [A, B, C, D]),
        (0.0, 0.5, 4, [A, A, B, B]),
        (0.5, 1.0, 4, [C, C, D, D]),
        (0.0, 1.0, 8, [A, A, B, B, C, C, D, D]),
        (0.0, 1.0, 2, [A, C]),
    ],
)
def test_sample_column_documented_examples(abcd, v_start, v_end, height, expected):
    assert abcd.sample_column(0, v_start, v_end, height) == expected


def test_sample_column_exact(abcd):
    assert abcd.sample_column_exact(0, 0, 4, 4) == [A, B, C, D]
    assert abcd.sample_column_exact(0, 0, 4, 0) == []


def test_sample_column_length_matches_request(abcd):
    assert len(abcd.sample_column(0.3, 0.1, 0.9, 17)) == 17


def test_dominant_of_solid_texture():
    tex = TextureSampler(make_image([[C, C], [C, C]]))
    assert tex.dominant == C


def test_set_dominant_returns_texture():
    tex = TextureSampler(make_image([[A]]))
    assert tex.set_dominant((1, 2, 3, 255)) is tex
    assert tex.dominant == (1, 2, 3, 255)


def test_original_image_round_trip():
    image = make_image([[A, B, C], [D, A, B]])
    tex = TextureSampler(image)
    assert tex.original_image().tobytes() == image.tobytes()


def test_from_bytes_decodes_png():
    image = make_image([[A, B], [C, D]])
    tex = TextureSampler.from_bytes(png_bytes(image))
    assert tex.original_image().tobytes() == image.tobytes()


def test_from_tiles_without_gap():
    image = make_image([[A, A, C, C], [A, A, C, C]])
    tiles = TextureSampler.from_tiles(2, 1, 0, png_bytes(image))
    assert len(tiles) == 2
    assert [t.sample_exact(0, 0) for t in tiles] == [A, C]
    assert all((t.width, t.height) == (2, 2) for t in tiles)


def test_from_tiles_with_gap_skips_gap_column():
    image = make_image([[A, A, B, C, C]])
    tiles = TextureSampler.from_tiles(2, 1, 1, png_bytes(image))
    assert [t.sample_column_exact(x, 0, 1, 1)[0] for t in tiles for x in range(2)] == [A, A, C, C]


def test_from_tiles_rejects_mismatched_size():
    image = make_image([[A, A, A]])
    with pytest.raises(ValueError):
        TextureSampler.from_tiles(2, 1, 0, png_bytes(image))


def test_from_tiles_rejects_zero_tiles():
    image = make_image([[A]])
    with pytest.raises(ValueError):
        TextureSampler.from_tiles(0, 1, 0, png_bytes(image))


def test_empty_image_rejected():
    with pytest.raises(ValueError):
        TextureSampler(Image.new("RGBA", (0, 3)))