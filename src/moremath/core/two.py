"""Planar rotation, ray tracing and point-in-polygon tests.

Rays default to pointing straight up (+y). Arbitrary ray directions are
handled by rotating the segment about the ray origin until the ray is
vertical, so every trace reduces to the axis-aligned case.

Axis-aligned edges are detected with exact float equality. Edges that are
only nearly vertical or horizontal take the sloped path; keep that in mind
when feeding in rotated geometry.

Polygons need at least 2 points. Nothing here raises on degenerate input;
NaN coordinates produce misses and ``False``.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from moremath.core.common import (
    add_vectors,
    divide,
    get_direction,
    get_fade,
    get_magnitude,
    is_between,
    is_number,
    make_lines_from_poly,
)
from moremath.core.types import Point, Polygon, Segment, TraceHit

_UPWARD = math.pi / 2


def rotate(point: Sequence[float], radians: float, center: Optional[Sequence[float]] = None) -> Point:
    """Rotate ``point`` counter-clockwise by ``radians`` about ``center`` (origin by default)."""
    x, y = point[0], point[1]
    cx, cy = (0.0, 0.0) if center is None else (center[0], center[1])
    dx = x - cx
    dy = y - cy
    c = math.cos(radians)
    s = math.sin(radians)
    return (dx * c - dy * s + cx, dy * c + dx * s + cy)


def rotate_poly(poly: Polygon, radians: float, center: Optional[Sequence[float]] = None) -> list[Point]:
    return [rotate(point, radians, center) for point in poly]


def rotate_line(line: Sequence[float], radians: float, center: Optional[Sequence[float]] = None) -> Segment:
    ax, ay, bx, by = line
    a = rotate((ax, ay), radians, center)
    b = rotate((bx, by), radians, center)
    return Segment(a[0], a[1], b[0], b[1])


def angle_from_vector(point: Sequence[float], origin: Optional[Sequence[float]] = None) -> float:
    """Angle of the vector from ``origin`` to ``point``, in ``[0, 2*pi)``."""
    x, y = point[0], point[1]
    if origin is not None:
        x -= origin[0]
        y -= origin[1]

    if y == 0:
        return math.pi if x < 0 else 0.0

    # Vertical vectors give atan(+-inf), which folds onto pi/2; NaN stays NaN.
    rad = (math.atan(divide(y, x)) + math.pi) % math.pi
    if y < 0:
        return rad + math.pi
    return rad


def _miss(direction: int) -> TraceHit:
    return TraceHit(math.nan, math.nan, direction)


def _trace_upward(line: Sequence[float], point: Sequence[float]) -> TraceHit:
    ax, ay, bx, by = line
    x, y = point[0], point[1]

    along = get_fade(x, ax, bx)
    direction = get_direction(ax, bx)

    if not is_between(x, ax, bx):
        return _miss(direction)

    if ax == bx:
        if is_between(y, ay, by):
            return TraceHit(0.0, get_fade(y, ay, by), 0)
        if y > ay:
            return _miss(direction)
        if ay <= by:
            return TraceHit(ay - y, 0.0, 0)
        return TraceHit(by - y, 1.0, 0)

    if ay == by:
        if ay < y:
            return _miss(direction)
        return TraceHit(ay - y, along, direction)

    m = (by - ay) / (bx - ax)
    b = ay - ax * m
    sy = x * m + b
    if sy < y:
        return _miss(direction)
    return TraceHit(sy - y, along, direction)


def ray_trace_line(
    line: Sequence[float], point: Sequence[float], vector: Optional[Sequence[float]] = None
) -> TraceHit:
    """Cast a ray from ``point`` along ``vector`` (straight up by default) at ``line``.

    With a ``vector`` the distance is measured in multiples of its length, so
    ``point + vector * distance`` is the hit point.
    """
    if vector is None:
        return _trace_upward(line, point)

    angle = angle_from_vector(vector) - _UPWARD
    upright = rotate_line(line, -angle, point)
    distance, along, direction = _trace_upward(upright, point)
    return TraceHit(divide(distance, get_magnitude(vector)), along, direction)


def ray_trace_poly(
    poly: Polygon, point: Sequence[float], vector: Optional[Sequence[float]] = None
) -> list[TraceHit]:
    return [ray_trace_line(line, point, vector) for line in make_lines_from_poly(poly)]


def ray_trace_poly_closest(poly: Polygon, point: Sequence[float], vector: Sequence[float]) -> Optional[Point]:
    """Point where the ray from ``point`` along ``vector`` first meets ``poly``.

    Returns None when no edge is hit.
    """
    distances = [hit.distance for hit in ray_trace_poly(poly, point, vector) if is_number(hit.distance)]
    if not distances:
        return None
    nearest = min(distances)
    travel = (vector[0] * nearest, vector[1] * nearest)
    x, y = add_vectors(point, travel)
    return (x, y)


def is_inside_poly(poly: Polygon, point: Sequence[float], no_checker_board: bool = False) -> bool:
    """Test whether ``point`` lies inside ``poly``; boundary points count as inside.

    Crossings of an upward ray are counted, skipping an edge that continues
    in the same horizontal direction as the edge before it, so a ray through
    a shared vertex is counted once. By default the point is inside when the
    count is odd. With ``no_checker_board`` it is inside when leftward and
    rightward crossings differ in number, which fills overlapping loops of a
    self-intersecting polygon instead of alternating them.
    """
    traces = ray_trace_poly(poly, point)

    if any(hit.distance == 0 for hit in traces):
        return True

    traces = [hit for hit in traces if hit.direction != 0]

    crossings = [
        hit
        for i, hit in enumerate(traces)
        if not math.isnan(hit.distance) and hit.direction != traces[i - 1].direction
    ]

    if no_checker_board:
        left = sum(1 for hit in crossings if hit.direction < 0)
        right = sum(1 for hit in crossings if hit.direction > 0)
        return left != right
    return len(crossings) % 2 == 1
