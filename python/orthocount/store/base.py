"""
Point Store:
    An immutable, zero-indexed, fixed-length sequence of integer points.
    -> count() is the number of points n.
    -> x(i), y(i) return the coordinates of point i for 0 <= i < n.
    -> close() releases the backing resource. It is safe to call more than once.

Implementations are never mutated after construction, so one store may be
read by any number of threads at the same time.
"""
from abc import ABC, abstractmethod
from collections import namedtuple
from typing import Tuple

import numpy as np

__all__ = ["Point", "PointStore", "INT32_MIN", "INT32_MAX"]

INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1

Point = namedtuple("Point", ["x", "y"])


class PointStore(ABC):
    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def _xs(self) -> np.ndarray:
        """
        Backing array of x coordinates, length count().
        """

    @abstractmethod
    def _ys(self) -> np.ndarray:
        pass

    @abstractmethod
    def close(self):
        pass

    def x(self, idx: int) -> int:
        self._check_index(idx)
        return int(self._xs()[idx])

    def y(self, idx: int) -> int:
        self._check_index(idx)
        return int(self._ys()[idx])

    def point(self, idx: int) -> Point:
        return Point(self.x(idx), self.y(idx))

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Copy all coordinates out of the store.
        :return: (xs, ys), two int64 arrays of length count().
        """
        if self.count() == 0:
            return np.empty(0, dtype=np.int64), np.empty(0, dtype=np.int64)
        return self._xs().astype(np.int64), self._ys().astype(np.int64)

    def _check_index(self, idx: int):
        n = self.count()
        if not 0 <= idx < n:
            raise IndexError("Index {0} out of bounds for {1} points".format(idx, n))

    def __len__(self):
        return self.count()

    def __iter__(self):
        for idx in range(self.count()):
            yield self.point(idx)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
