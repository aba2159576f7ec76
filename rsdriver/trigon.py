"""Lookup tables of sine and cosine for angles in hundredths of a degree."""

from __future__ import annotations

import math
from array import array


class Trigon:
    """Single-precision sin/cos tables over [MIN, MAX) centi-degrees."""

    MIN = -9000
    MAX = 45000

    def __init__(self) -> None:
        rads = [math.radians(i * 0.01) for i in range(self.MIN, self.MAX)]
        self._sins = array("f", (math.sin(r) for r in rads))
        self._coss = array("f", (math.cos(r) for r in rads))

    def _index(self, angle: int) -> int:
        if angle < self.MIN or angle >= self.MAX:
            angle = 0
        return angle - self.MIN

    def sin(self, angle: int) -> float:
        """Sine of ``angle`` centi-degrees; out-of-range angles count as 0."""
        return self._sins[self._index(angle)]

    def cos(self, angle: int) -> float:
        """Cosine of ``angle`` centi-degrees; out-of-range angles count as 0."""
        return self._coss[self._index(angle)]

    def table(self, start: int = -10, stop: int = 10) -> list[tuple[int, float, float]]:
        """Return ``(angle, sin, cos)`` rows for angles in ``range(start, stop)``."""
        return [(angle, self.sin(angle), self.cos(angle)) for angle in range(start, stop)]