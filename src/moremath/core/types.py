from __future__ import annotations

import math
from typing import NamedTuple, Sequence

Point = tuple[float, float]
Polygon = Sequence[Point]


class Segment(NamedTuple):
    ax: float
    ay: float
    bx: float
    by: float

    @property
    def a(self) -> Point:
        return (self.ax, self.ay)

    @property
    def b(self) -> Point:
        return (self.bx, self.by)


class TraceHit(NamedTuple):
    """Result of casting a ray at a segment.

    ``distance`` and ``along`` are NaN when the ray misses; ``direction`` is
    the segment's horizontal direction sign and is set on a miss too.
    """

    distance: float
    along: float
    direction: int

    @property
    def hit(self) -> bool:
        return not math.isnan(self.distance)
