import pytest

from raygame.helpers import as_arrays, flat_arrays


def test_as_arrays_groups_items_in_order():
    assert as_arrays([1, 2, 3, 4, 5, 6], 2) == [(1, 2), (3, 4), (5, 6)]


def test_as_arrays_drops_incomplete_tail():
    groups = as_arrays(list(range(7)), 3)
    assert groups == [(0, 1, 2), (3, 4, 5)]


def test_as_arrays_works_on_bytes():
    assert as_arrays(b"\x01\x02\x03\x04", 4) == [(1, 2, 3, 4)]


def test_round_trip_when_divisible():
    data = list(range(24))
    assert flat_arrays(as_arrays(data, 4)) == data


def test_flat_arrays_of_empty_is_empty():
    assert flat_arrays([]) == []


def test_as_arrays_rejects_non_positive_length():
    with pytest.raises(ValueError):
        as_arrays([1, 2, 3], 0)