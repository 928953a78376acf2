"""A list of closable error messages, each with its own id."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

_MAX_ID = 0xFFFF


@dataclass
class ErrorWindow:
    """One error message and whether it is still shown."""

    error: str
    id: int
    is_open: bool = True


@dataclass
class ErrorWindows:
    """Error windows in the order they were added."""

    windows: list[ErrorWindow] = field(default_factory=list)

    def add_error(self, error: str) -> ErrorWindow:
        """Open a window for ``error`` with an id one past the last window's."""
        new_id = self.windows[-1].id + 1 if self.windows else 0
        if new_id > _MAX_ID:
            raise OverflowError("error window id out of range")
        window = ErrorWindow(error, new_id)
        self.windows.append(window)
        return window

    def remove_closed(self) -> None:
        """Drop windows that have been closed."""
        self.windows = [window for window in self.windows if window.is_open]

    def __iter__(self) -> Iterator[ErrorWindow]:
        return iter(self.windows)

    def __len__(self) -> int:
        return len(self.windows)