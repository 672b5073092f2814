from __future__ import annotations

import argparse
import logging
from typing import Sequence

from moremath.core.ray_fan import RayFan, RayFanConfig
from moremath.core.shape_data import PolygonShape, load_shape
from moremath.shapes.registry import list_shapes, load_bundled_shape


DEFAULT_NUM_RAYS = 15
DEFAULT_FOV_DEG = 180.0
DEFAULT_MAX_RAY_DISTANCE = 20.0

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--shape", default="convex_quad", choices=list_shapes(), help="bundled shape name")
    parser.add_argument("--shape-file", default="", help="path to a shape JSON file (overrides --shape)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, datefmt="%H:%M:%S")


def resolve_shape(args: argparse.Namespace) -> PolygonShape:
    if args.shape_file:
        return load_shape(args.shape_file)
    return load_bundled_shape(args.shape)


def parse_pair(text: str) -> tuple[float, float]:
    """Parse ``"x,y"`` into a point; used as an argparse ``type``."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected 'x,y', got '{text}'")
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected two numbers in '{text}'") from None


def create_ray_fan(
    points: Sequence[tuple[float, float]],
    num_rays: int = DEFAULT_NUM_RAYS,
    fov_deg: float = DEFAULT_FOV_DEG,
    max_ray_distance: float = DEFAULT_MAX_RAY_DISTANCE,
) -> RayFan:
    return RayFan(
        poly=points,
        config=RayFanConfig(num_rays=num_rays, fov_deg=fov_deg, max_ray_distance=max_ray_distance),
    )
