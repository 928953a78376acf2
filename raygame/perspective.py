"""Camera perspective parameters used when projecting wall and sprite columns."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


def _fdiv(a: float, b: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class Perspective:
    """Vertical screen offset and the height of the horizon on a projected column.

    ``horizon_height`` is the fraction of a column that lies below the horizon.
    """

    y_offset: float
    horizon_height: float

    @classmethod
    def from_angle(
        cls, angle: float, camera_height: float, subject_height: float, proj_dist: float
    ) -> Perspective:
        """Build a perspective from a look-up/down angle in radians."""
        return cls(math.tan(angle) * proj_dist, camera_height - subject_height)

    def offset_camera(self, by: float) -> Perspective:
        """Return the perspective seen from a camera raised by ``by``."""
        return replace(self, horizon_height=self.horizon_height + by)

    def offset_subject(self, by: float, scale: float) -> Perspective:
        """Return the perspective for a subject raised by ``by`` and scaled by ``scale``."""
        lowered = self.horizon_height - _fdiv(by, scale)
        return replace(self, horizon_height=_fdiv(lowered, scale))