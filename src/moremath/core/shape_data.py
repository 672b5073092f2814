from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence, Union

from moremath.core.types import Point

logger = logging.getLogger(__name__)


@dataclass
class PolygonShape:
    name: str
    points: list[Point]
    probes: list[Point] = field(default_factory=list)


def _read_point(values: Sequence[float]) -> Point:
    return (float(values[0]), float(values[1]))


def parse_shape(data: dict) -> PolygonShape:
    points = [_read_point(p) for p in data["points"]]
    if len(points) < 2:
        raise ValueError(f"shape '{data.get('name', '')}' needs at least 2 points, got {len(points)}")
    return PolygonShape(
        name=str(data["name"]),
        points=points,
        probes=[_read_point(p) for p in data.get("probes", [])],
    )


def load_shape(path: Union[str, Path]) -> PolygonShape:
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)

    shape = parse_shape(data)
    logger.debug("loaded shape %s: %d points, %d probes", shape.name, len(shape.points), len(shape.probes))
    return shape
