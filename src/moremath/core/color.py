"""Colour parsing, RGB/HSL conversion and HSL-space fading.

RGB colours are tuples of byte ints, optionally with a fourth alpha byte.
HSL colours are ``(h, s, l)`` floats in ``[0, 1]``.
"""

from __future__ import annotations

import math
import re
from typing import Sequence, Union

from moremath.core.common import Easing, fade, is_number, round_to

Color = Union[str, Sequence[float]]

_RGB_RE = re.compile(r"^rgb\((\d+),\s*(\d+),\s*(\d+)\)$")
_RGBA_RE = re.compile(r"^rgba\((\d+),\s*(\d+),\s*(\d+),\s*(\d+)\)$")
_SHORT_HEX_RE = re.compile(r"^#[0-9a-f]{3,4}$", re.IGNORECASE)
_HEX_RE = re.compile(r"^#[0-9a-f]{6,8}$", re.IGNORECASE)

_BLACK = (0, 0, 0)


def _to_byte(value: float) -> int:
    rounded = round_to(value * 255)
    return int(rounded) if is_number(rounded) else rounded


def parse_color(color: str) -> tuple[int, ...]:
    """Parse ``rgb()``, ``rgba()`` or ``#hex`` notation into RGB(A) bytes.

    Anything unrecognised falls back to black.
    """
    match = _RGB_RE.match(color) or _RGBA_RE.match(color)
    if match:
        return tuple(int(v) for v in match.groups())

    if _SHORT_HEX_RE.match(color):
        return parse_color("#" + "".join(h * 2 for h in color[1:]))

    if _HEX_RE.match(color):
        digits = color[1:]
        pairs = [digits[i:i + 2] for i in range(0, len(digits), 2)]
        # An odd trailing digit has no pair to make a byte from.
        return tuple(int(p, 16) if len(p) == 2 else math.nan for p in pairs)

    return _BLACK


def _as_rgb(color: Color) -> tuple[int, ...]:
    if isinstance(color, str):
        return parse_color(color)
    return tuple(color)


def rgb_to_hsl(rgb: Color) -> tuple[float, float, float]:
    r, g, b = (v / 255 for v in _as_rgb(rgb)[:3])
    lo = min(r, g, b)
    hi = max(r, g, b)
    l = (hi + lo) / 2

    if lo == hi:
        return (0.0, 0.0, l)

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)

    if hi == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return (h / 6, s, l)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    # Hue wraps around; whole turns land on the matching edge of [0, 1].
    if t < 0:
        t = (math.fmod(t, 1) or -1) + 1
    if t > 1:
        t = math.fmod(t, 1) or 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: Sequence[float]) -> tuple[int, int, int]:
    h, s, l = hsl[0], hsl[1], hsl[2]

    if s <= 0:
        grey = _to_byte(l)
        return (grey, grey, grey)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    r, g, b = (_to_byte(_hue_to_channel(p, q, h + offset)) for offset in (1 / 3, 0, -1 / 3))
    return (r, g, b)


def rgb_to_hex(rgb: Color) -> str:
    """Lowercase ``#rrggbb`` (or ``#rrggbbaa``); unreadable bytes are written as ``00``."""
    return "#" + "".join(f"{int(v):02x}" if is_number(v) else "00" for v in _as_rgb(rgb))


def fade_color(color_a: Color, color_b: Color, t: float, easing: Easing = lambda v: v) -> tuple[int, ...]:
    """Fade between two colours through HSL space.

    A nearly grey end borrows the other end's hue, and the hue travels the
    shorter way round the colour wheel.
    """
    if t <= 0:
        return _as_rgb(color_a)
    if t >= 1:
        return _as_rgb(color_b)

    hsl_a = list(rgb_to_hsl(color_a))
    hsl_b = list(rgb_to_hsl(color_b))

    if hsl_a[1] < 0.1:
        hsl_a[0] = hsl_b[0]
    if hsl_b[1] < 0.1:
        hsl_b[0] = hsl_a[0]

    offset_hue = abs(hsl_a[0] - hsl_b[0]) > 0.5
    if offset_hue:
        hsl_a[0] = (hsl_a[0] + 0.5) % 1
        hsl_b[0] = (hsl_b[0] + 0.5) % 1

    hsl = [fade(hsl_a[i], hsl_b[i], t, easing) for i in range(3)]

    if offset_hue:
        hsl[0] = (hsl[0] + 0.5) % 1

    return hsl_to_rgb(hsl)
