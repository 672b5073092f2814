"""Primitive scalar and vector helpers.

Vectors are plain sequences of numbers of any length; helpers that build a
vector return a tuple. Nothing here raises on degenerate numbers: division by
zero and NaN inputs come back out as NaN or infinity.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

Vector = Sequence[float]
Easing = Callable[[float], float]


def _identity(value: Any) -> Any:
    return value


def is_number(value: Any) -> bool:
    """True for finite real numbers; bools, strings and containers are not numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def divide(a: float, b: float) -> float:
    """IEEE division: ``x / 0`` is a signed infinity and ``0 / 0`` is NaN."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def apply_all(value: Any, fn: Callable[[float], Any] = _identity) -> Any:
    """Apply ``fn`` to every number nested in lists, tuples and dicts.

    Anything that is neither a number nor a container becomes NaN.
    """
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return fn(value)
    if isinstance(value, (list, tuple)):
        items = [apply_all(v, fn) for v in value]
        return items if isinstance(value, list) else tuple(items)
    if isinstance(value, Mapping):
        return {k: apply_all(v, fn) for k, v in value.items()}
    return math.nan


def limit(val: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(val, low), high)


def limit_wrap(val: float, low: float = 0.0, high: float = 1.0, inclusive_high: bool = False) -> float:
    """Wrap ``val`` into ``[low, high)``, or ``[low, high]`` with ``inclusive_high``."""
    span = high - low
    if span == 0 or math.isinf(val):
        return math.nan
    temp = low + math.fmod(val - low, span)
    if inclusive_high and val >= high and temp == low:
        return high
    return temp + span if temp < low else temp


def round_to(val: float, exp: int = 0) -> float:
    """Round half up to a multiple of ``10 ** exp``."""
    if not math.isfinite(val):
        return val
    try:
        step = math.pow(10, exp)
    except OverflowError:
        return math.nan
    scaled = divide(val, step)
    if not math.isfinite(scaled):
        # Step underflowed to zero or the quotient overflowed.
        return scaled * step
    rounded = math.floor(scaled + 0.5) * step
    if rounded == 0:
        return 0
    return rounded


def round_all(value: Any, exp: int = 0) -> Any:
    return apply_all(value, lambda v: round_to(v, exp))


def add_vectors(a: Vector, b: Vector) -> tuple[float, ...]:
    return tuple(v + b[i] for i, v in enumerate(a))


def subtract_vectors(a: Vector, b: Vector) -> tuple[float, ...]:
    # Components missing from b have no value to subtract.
    return tuple(v - b[i] if i < len(b) else math.nan for i, v in enumerate(a))


def get_vector_distance(a: Vector, b: Optional[Vector] = None) -> float:
    if b is not None:
        a = subtract_vectors(a, b)
    return get_magnitude(a)


def get_vector_distance_lazy(a: Vector, b: Optional[Vector] = None) -> float:
    """Largest absolute component of ``a - b``; a cheap stand-in for distance."""
    if b is not None:
        a = subtract_vectors(a, b)
    return max((abs(v) for v in a), default=0.0)


def get_direction(a: float, b: float) -> int:
    if a < b:
        return 1
    if b < a:
        return -1
    return 0


def fade(a: float, b: float, t: float, easing: Easing = _identity) -> float:
    return easing(t) * (b - a) + a


def fade_vector(a: Vector, b: Vector, t: float, easing: Easing = _identity) -> tuple[float, ...]:
    return tuple(fade(v, b[i], t, easing) for i, v in enumerate(a))


def _fade_vector_by_span(a: Vector, b: Vector, distance: float, span: float, easing: Easing) -> tuple[float, ...]:
    t = divide(distance, span)
    if t <= 0:
        return tuple(a)
    if t >= 1:
        return tuple(b)
    return fade_vector(a, b, t, easing)


def fade_vector_by_distance(a: Vector, b: Vector, distance: float, easing: Easing = _identity) -> tuple[float, ...]:
    """Move ``distance`` units from ``a`` towards ``b``, stopping at either end."""
    return _fade_vector_by_span(a, b, distance, get_vector_distance(b, a), easing)


def fade_vector_by_distance_lazy(
    a: Vector, b: Vector, distance: float, easing: Easing = _identity
) -> tuple[float, ...]:
    return _fade_vector_by_span(a, b, distance, get_vector_distance_lazy(b, a), easing)


def get_fade(val: float, a: float, b: float) -> float:
    """Fraction of the way ``val`` sits from ``a`` to ``b``.

    0 at ``a`` and 1 at ``b``; NaN when ``a == b`` and ``val`` is elsewhere.
    """
    if val == a:
        return 0.0
    if val == b:
        return 1.0
    if a == b:
        return math.nan
    return (val - a) / (b - a)


def is_between(val: float, a: float, b: float) -> bool:
    progress = get_fade(val, a, b)
    return 0 <= progress <= 1


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def get_magnitude(vector: Vector, origin: Optional[Vector] = None) -> float:
    if origin is not None:
        vector = [origin[i] - v for i, v in enumerate(vector)]
    return math.sqrt(sum(v * v for v in vector))


def fix_vector_magnitude(vector: Vector, magnitude: float = 1.0) -> tuple[float, ...]:
    scale = divide(magnitude, get_magnitude(vector))
    return tuple(v * scale for v in vector)


def contain_box(
    box: Vector, container: Vector, reducer: Callable[[float, float], float] = min
) -> tuple[float, ...]:
    """Scale ``box`` uniformly to fit ``container`` (or cover it with ``max``)."""
    if len(container) < 2:
        return tuple(container)
    scales = [divide(v, box[i]) for i, v in enumerate(container)]
    scale = scales[0]
    for s in scales[1:]:
        scale = reducer(scale, s)
    return tuple(v * scale for v in box)


def make_lines_from_poly(poly: Sequence[Vector]) -> list[tuple[float, ...]]:
    """Join each vertex with its successor, wrapping the last back to the first."""
    n = len(poly)
    return [tuple(poly[i]) + tuple(poly[(i + 1) % n]) for i in range(n)]


def average_with_weight(
    items: Iterable[Any], fn: Callable[[Any], Sequence[float]] = _identity
) -> tuple[float, float]:
    """Weighted mean of ``(value, weight)`` pairs.

    Returns ``(mean, weighted_total)`` where ``weighted_total`` is the sum of
    ``value * weight``.
    """
    total = 0.0
    weights = 0.0
    for item in items:
        value, weight = fn(item)
        total += value * weight
        weights += weight
    return (divide(total, weights), total)


def group_neighbors(
    values: Sequence[float], distance: float = 1.0, fn: Callable[[float], float] = _identity
) -> list[list[float]]:
    """Split ``values`` into runs whose consecutive mapped values are within ``distance``."""
    groups: list[list[float]] = []
    prev: Optional[float] = None
    for value in values:
        mapped = fn(value)
        if prev is None or abs(mapped - prev) > distance:
            groups.append([value])
        else:
            groups[-1].append(value)
        prev = mapped
    return groups
