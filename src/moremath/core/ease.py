"""
Easing function generators.

An easing maps progress ``t`` in ``[0, 1]`` onto eased progress, with
``f(0) == 0`` and ``f(1) == 1``.  They plug into the ``easing`` argument of
``fade``, ``fade_vector`` and ``fade_color``.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

Easing = Callable[[float], float]


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

def make_in(exp: float) -> Easing:
    """Power ease-in: slow start, ``t ** exp``."""
    def ease(t: float) -> float:
        return math.pow(t, exp)

    return ease


def make_out(exp: float) -> Easing:
    """Power ease-out: slow finish, mirror image of :func:`make_in`."""
    def ease(t: float) -> float:
        return 1 - math.pow(abs(t - 1), exp)

    return ease


def make_both(exp: float) -> Easing:
    """Ease in over the first half and out over the second."""
    ease_in = make_in(exp)
    ease_out = make_out(exp)

    def ease(t: float) -> float:
        if t < 0.5:
            return ease_in(t * 2) / 2
        return ease_out(t * 2 - 1) / 2 + 0.5

    return ease


def linear(t: float) -> float:
    return t


quad = make_both(2)
quad_in = make_in(2)
quad_out = make_out(2)
cubic = make_both(3)
cubic_in = make_in(3)
cubic_out = make_out(3)


# ---------------------------------------------------------------------------
# Easing look-up
# ---------------------------------------------------------------------------

_EASINGS: Dict[str, Easing] = {
    "linear": linear,
    "quad": quad,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "cubic": cubic,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
}


def get_easing(name: str) -> Easing:
    """Return an easing function by its short name.

    Recognised names: ``linear``, ``quad``, ``quad_in``, ``quad_out``,
    ``cubic``, ``cubic_in``, ``cubic_out``.

    Raises ``ValueError`` for unknown names.
    """
    try:
        return _EASINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown easing '{name}'. "
            f"Available easings: {', '.join(sorted(_EASINGS))}"
        ) from None
