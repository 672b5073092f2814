from __future__ import annotations

import argparse
import logging
import math

from moremath.apps.common import (
    DEFAULT_FOV_DEG,
    DEFAULT_MAX_RAY_DISTANCE,
    DEFAULT_NUM_RAYS,
    add_common_arguments,
    configure_logging,
    create_ray_fan,
    parse_pair,
    resolve_shape,
)

logger = logging.getLogger(__name__)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Cast a fan of rays from a point and report edge distances")
    add_common_arguments(parser)
    parser.add_argument("--origin", type=parse_pair, required=True, help="fan origin 'x,y'")
    parser.add_argument("--heading-deg", type=float, default=90.0, help="centre ray heading, degrees from +x")
    parser.add_argument("--num-rays", type=int, default=DEFAULT_NUM_RAYS)
    parser.add_argument("--fov-deg", type=float, default=DEFAULT_FOV_DEG)
    parser.add_argument("--max-ray-distance", type=float, default=DEFAULT_MAX_RAY_DISTANCE)
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        shape = resolve_shape(args)
        fan = create_ray_fan(
            shape.points,
            num_rays=args.num_rays,
            fov_deg=args.fov_deg,
            max_ray_distance=args.max_ray_distance,
        )
    except (OSError, ValueError, KeyError) as exc:
        parser.error(str(exc))

    obs = fan.observe(args.origin, math.radians(args.heading_deg))
    logger.info("cast %d rays at %s", args.num_rays, shape.name)

    print(f"shape={shape.name} origin=({args.origin[0]:.3f}, {args.origin[1]:.3f}) heading_deg={args.heading_deg:.1f}")
    for i, rel_angle in enumerate(fan.ray_angles):
        hit = obs["hit_points"][i]
        hit_text = "none" if hit is None else f"({hit[0]:.3f}, {hit[1]:.3f})"
        print(
            f"ray={i:02d} angle_deg={math.degrees(rel_angle):+.1f} "
            f"distance={obs['ray_distances'][i]:.3f} norm={obs['ray_distances_norm'][i]:.3f} hit={hit_text}"
        )
    distances = obs["ray_distances"]
    print(f"summary min_distance={min(distances):.3f} hits={sum(h is not None for h in obs['hit_points'])}")


if __name__ == "__main__":
    main()
