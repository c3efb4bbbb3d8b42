"""
Point file helpers: random point sets and writers for both file formats.
"""
from typing import Iterable, Tuple

import numpy as np

from orthocount.store.base import INT32_MIN, INT32_MAX
from orthocount.store.binary import RECORD_DTYPE

__all__ = ["generate_points", "write_text_points", "write_binary_points"]


def generate_points(num_points: int, low: int = -10, high: int = 10, random_state=None) -> np.ndarray:
    """
    :param num_points: int
    :param low: smallest coordinate (inclusive)
    :param high: largest coordinate (inclusive)
    :param random_state: None or int, seed of numpy.random.RandomState
    :return: int32 array of shape (num_points, 2)
    """
    if low < INT32_MIN or high > INT32_MAX or low > high:
        raise ValueError("Coordinate range [{0}, {1}] is not a valid int32 range".format(low, high))
    rng = np.random.RandomState(random_state)
    return rng.randint(low, high + 1, size=(num_points, 2), dtype=np.int64).astype(np.int32)


def _as_array(points: Iterable[Tuple[int, int]]) -> np.ndarray:
    arr = np.asarray([tuple(p) for p in points], dtype=object).reshape(-1, 2)
    for value in arr.flat:
        if not INT32_MIN <= int(value) <= INT32_MAX:
            raise ValueError("Coordinate {0} is outside the signed 32-bit range".format(value))
    return arr.astype(np.int64)


def write_text_points(path: str, points: Iterable[Tuple[int, int]]):
    arr = _as_array(points)
    with open(path, "w", encoding="utf-8") as file:
        file.write("{0}\n".format(len(arr)))
        for x, y in arr:
            file.write("{0} {1}\n".format(x, y))


def write_binary_points(path: str, points: Iterable[Tuple[int, int]]):
    _as_array(points).astype(RECORD_DTYPE).tofile(path)
