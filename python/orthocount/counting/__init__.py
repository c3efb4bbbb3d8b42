from .direction import (
    ZERO_DIRECTION, canonicalize, perpendicular_left,
    canonicalize_many, perpendicular_left_many
)
from .corner import count_right_triangles, direction_histogram

__all__ = [
    "ZERO_DIRECTION", "canonicalize", "perpendicular_left",
    "canonicalize_many", "perpendicular_left_many",
    "count_right_triangles", "direction_histogram"
]
