from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from moremath.core.common import get_vector_distance
from moremath.core.two import ray_trace_poly_closest
from moremath.core.types import Point, Polygon


@dataclass
class RayFanConfig:
    num_rays: int = 15
    fov_deg: float = 180.0
    max_ray_distance: float = 20.0


class RayFan:
    """Casts a fan of rays from a point and reports the nearest polygon edge along each."""

    def __init__(self, poly: Polygon, config: RayFanConfig) -> None:
        if config.num_rays < 2:
            raise ValueError("num_rays must be >= 2")
        if len(poly) < 2:
            raise ValueError("poly must contain at least 2 points")
        self.poly = [(float(x), float(y)) for x, y in poly]
        self.config = config

        fov = math.radians(config.fov_deg)
        step = fov / (config.num_rays - 1)
        start = -0.5 * fov
        self._ray_angles = [start + i * step for i in range(config.num_rays)]

    @property
    def ray_angles(self) -> List[float]:
        return list(self._ray_angles)

    def observe(self, point: Sequence[float], heading: float = math.pi / 2) -> Dict[str, object]:
        origin = (float(point[0]), float(point[1]))
        ray_distances: List[float] = []
        ray_distances_norm: List[float] = []
        hit_points: List[Optional[Point]] = []

        for rel_angle in self._ray_angles:
            ray_angle = heading + rel_angle
            direction = (math.cos(ray_angle), math.sin(ray_angle))
            d, hit = self._cast_ray(origin, direction)
            ray_distances.append(d)
            ray_distances_norm.append(d / self.config.max_ray_distance)
            hit_points.append(hit)

        return {
            "ray_distances": ray_distances,
            "ray_distances_norm": ray_distances_norm,
            "hit_points": hit_points,
        }

    def _cast_ray(self, origin: Point, direction: Point) -> tuple[float, Optional[Point]]:
        best = self.config.max_ray_distance
        hit = ray_trace_poly_closest(self.poly, origin, direction)
        if hit is None:
            return best, None
        d = get_vector_distance(hit, origin)
        if d > best:
            return best, None
        return d, hit
