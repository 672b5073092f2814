from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import numpy as np

from moremath.core.two import is_inside_poly, ray_trace_poly
from moremath.core.types import Polygon


def trace_array(
    poly: Polygon,
    point: Sequence[float],
    vector: Optional[Sequence[float]] = None,
    dtype: Any = np.float64,
) -> np.ndarray:
    """Per-edge trace results as an ``(n_edges, 3)`` array of distance, along, direction."""
    hits = ray_trace_poly(poly, point, vector)
    if not hits:
        return np.zeros((0, 3), dtype=dtype)
    return np.asarray(hits, dtype=dtype)


class ContainmentAdapter:
    """Point-in-polygon tests for one polygon over single points or batches."""

    def __init__(self, poly: Polygon, no_checker_board: bool = False) -> None:
        if len(poly) < 2:
            raise ValueError("poly must contain at least 2 points")
        self.poly = [(float(x), float(y)) for x, y in poly]
        self.no_checker_board = no_checker_board

    def contains(self, point: Sequence[float]) -> bool:
        return is_inside_poly(self.poly, point, self.no_checker_board)

    def contains_batch(self, points: Iterable[Sequence[float]]) -> np.ndarray:
        rows = [self.contains(p) for p in np.asarray(list(points), dtype=np.float64).reshape(-1, 2)]
        if not rows:
            return np.zeros((0,), dtype=bool)
        return np.asarray(rows, dtype=bool)
