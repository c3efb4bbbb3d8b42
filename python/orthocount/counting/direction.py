"""
Direction Canonicalization:
    A nonzero displacement (dx, dy) stands for every point on the ray from the
    corner through (dx, dy). Dividing by gcd(|dx|, |dy|) gives one representative
    per ray:
        (2, 4), (3, 6) -> (1, 2)
        (-2, -4)       -> (-1, -2)    opposite rays stay distinct
    (0, 0) is the sentinel for "same point" and is returned unchanged.

Perpendicular-left rotates by +90 degrees: (dx, dy) -> (-dy, dx).
Applied twice it negates the direction, so for two perpendicular directions
d1, d2 exactly one of d2 == left(d1), d1 == left(d2) holds. Looking up only
the left perpendicular of every direction therefore visits each perpendicular
pair exactly once.
"""
from math import gcd
from typing import Tuple

import numpy as np

__all__ = [
    "ZERO_DIRECTION", "canonicalize", "perpendicular_left",
    "canonicalize_many", "perpendicular_left_many"
]

ZERO_DIRECTION = (0, 0)


def canonicalize(dx: int, dy: int) -> Tuple[int, int]:
    if dx == 0 and dy == 0:
        return ZERO_DIRECTION
    divisor = gcd(abs(dx), abs(dy))
    return dx // divisor, dy // divisor


def perpendicular_left(dx: int, dy: int) -> Tuple[int, int]:
    return -dy, dx


def canonicalize_many(dx: np.ndarray, dy: np.ndarray) -> np.ndarray:
    """
    Vectorised canonicalize().
    :param dx: int64 array
    :param dy: int64 array, same shape as dx
    :return: int64 array of shape (len(dx), 2); zero displacements stay (0, 0).
    """
    dx = np.asarray(dx, dtype=np.int64)
    dy = np.asarray(dy, dtype=np.int64)
    divisor = np.gcd(dx, dy)
    divisor[divisor == 0] = 1
    # Both components are multiples of the divisor, so floor division is exact.
    return np.column_stack((dx // divisor, dy // divisor))


def perpendicular_left_many(directions: np.ndarray) -> np.ndarray:
    return np.column_stack((-directions[:, 1], directions[:, 0]))
