from __future__ import annotations

import argparse
import logging
import math

from moremath.apps.common import add_common_arguments, configure_logging, parse_pair, resolve_shape
from moremath.core.features import ContainmentAdapter
from moremath.core.two import ray_trace_poly, ray_trace_poly_closest

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    return "nan" if math.isnan(value) else f"{value:.4f}"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Check probe points against a polygon in both fill modes")
    add_common_arguments(parser)
    parser.add_argument("--point", action="append", type=parse_pair, default=[], help="extra probe 'x,y'")
    parser.add_argument("--vector", type=parse_pair, default=None, help="trace probes along 'dx,dy'")
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        shape = resolve_shape(args)
    except (OSError, ValueError, KeyError) as exc:
        parser.error(f"cannot load shape: {exc}")

    probes = list(shape.probes) + list(args.point)
    if not probes:
        parser.error("no probe points: the shape has none and no --point was given")

    parity = ContainmentAdapter(shape.points)
    nonzero = ContainmentAdapter(shape.points, no_checker_board=True)
    inside_parity = parity.contains_batch(probes)
    inside_nonzero = nonzero.contains_batch(probes)
    logger.info("checked %d probes against %s", len(probes), shape.name)

    print(f"shape={shape.name} points={len(shape.points)} probes={len(probes)}")
    for i, (x, y) in enumerate(probes):
        print(
            f"probe={i} x={x:.3f} y={y:.3f} "
            f"inside={bool(inside_parity[i])} inside_no_checker_board={bool(inside_nonzero[i])}"
        )
        if args.vector is None:
            continue
        for edge, (distance, along, direction) in enumerate(ray_trace_poly(shape.points, (x, y), args.vector)):
            print(f"  edge={edge} distance={_fmt(distance)} along={_fmt(along)} direction={direction}")
        closest = ray_trace_poly_closest(shape.points, (x, y), args.vector)
        if closest is None:
            print("  closest=none")
        else:
            print(f"  closest=({closest[0]:.4f}, {closest[1]:.4f})")


if __name__ == "__main__":
    main()
