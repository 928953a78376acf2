"""Helpers for viewing flat sequences as fixed-size groups and back."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def as_arrays(data: Sequence[T], length: int) -> list[tuple[T, ...]]:
    """Split ``data`` into consecutive tuples of ``length`` items.

    Trailing items that do not fill a whole tuple are dropped.
    """
    if length <= 0:
        raise ValueError(f"group length must be positive, got {length}")
    whole = len(data) // length * length
    return [tuple(data[start:start + length]) for start in range(0, whole, length)]


def flat_arrays(arrays: Iterable[Iterable[T]]) -> list[T]:
    """Flatten a sequence of groups into a single list."""
    return [item for group in arrays for item in group]