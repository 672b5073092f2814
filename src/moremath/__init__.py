from moremath.core import color, ease, two
from moremath.core.common import (
    add_vectors,
    apply_all,
    average_with_weight,
    contain_box,
    divide,
    fade,
    fade_vector,
    fade_vector_by_distance,
    fade_vector_by_distance_lazy,
    fix_vector_magnitude,
    get_direction,
    get_fade,
    get_magnitude,
    get_vector_distance,
    get_vector_distance_lazy,
    group_neighbors,
    is_between,
    is_number,
    limit,
    limit_wrap,
    make_lines_from_poly,
    round_all,
    round_to,
    subtract_vectors,
    to_degrees,
    to_radians,
)
from moremath.core.types import Segment, TraceHit

__all__ = [
    "Segment",
    "TraceHit",
    "add_vectors",
    "apply_all",
    "average_with_weight",
    "color",
    "contain_box",
    "divide",
    "ease",
    "fade",
    "fade_vector",
    "fade_vector_by_distance",
    "fade_vector_by_distance_lazy",
    "fix_vector_magnitude",
    "get_direction",
    "get_fade",
    "get_magnitude",
    "get_vector_distance",
    "get_vector_distance_lazy",
    "group_neighbors",
    "is_between",
    "is_number",
    "limit",
    "limit_wrap",
    "make_lines_from_poly",
    "round_all",
    "round_to",
    "subtract_vectors",
    "to_degrees",
    "to_radians",
    "two",
]
