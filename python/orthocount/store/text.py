"""
Text-encoded points:
    -> Line 1 is the decimal point count n.
    -> Every following non-blank line is "x y", two whitespace-separated decimal integers.
    -> Blank lines are skipped and do not count toward n.
    -> Reading stops after the n-th point; anything after it is ignored.

All points are parsed up front into two int32 arrays.
"""
import re
from typing import Iterable

import numpy as np

from orthocount.exceptions import MalformedInputError
from orthocount.store.base import PointStore, INT32_MIN, INT32_MAX

__all__ = ["TextPointStore"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


class TextPointStore(PointStore):
    def __init__(self, filename: str):
        """
        :param filename: path to a text-encoded point file.
        """
        self.filename = filename
        # Undecodable bytes survive as surrogates and fail the integer check,
        # so they only matter within the first n points.
        with open(filename, "r", encoding="utf-8", errors="surrogateescape") as file:
            self._x_coords, self._y_coords = self._parse(file)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TextPointStore":
        store = cls.__new__(cls)
        store.filename = None
        store._x_coords, store._y_coords = cls._parse(lines)
        return store

    @staticmethod
    def _parse(lines: Iterable[str]) -> (np.ndarray, np.ndarray):
        lines = iter(lines)
        first = next(lines, None)
        if first is None:
            raise MalformedInputError("Empty file")
        first = first.strip()
        if not _INTEGER.fullmatch(first):
            raise MalformedInputError("First line must be an integer")
        expected = int(first)
        if expected < 0:
            raise MalformedInputError("Point count must not be negative, got {0}".format(expected))

        xs, ys = list(), list()
        found = 0
        while found < expected:
            line = next(lines, None)
            if line is None:
                break
            parts = line.split()
            if not parts:
                continue
            if len(parts) != 2:
                raise MalformedInputError("Invalid point format: expected 'x y', got {0!r}".format(line.strip()))
            xs.append(_parse_coordinate(parts[0]))
            ys.append(_parse_coordinate(parts[1]))
            found += 1

        if found < expected:
            raise MalformedInputError("Expected {0} points but found only {1}".format(expected, found))
        return np.array(xs, dtype=np.int32), np.array(ys, dtype=np.int32)

    def count(self) -> int:
        return len(self._x_coords)

    def _xs(self) -> np.ndarray:
        return self._x_coords

    def _ys(self) -> np.ndarray:
        return self._y_coords

    def close(self):
        # The file is closed once parsing is done.
        pass

    def __repr__(self):
        return "TextPointStore({0!r}, n={1})".format(self.filename, self.count())


def _parse_coordinate(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise MalformedInputError("Invalid coordinate value {0!r}".format(token))
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedInputError("Coordinate {0} is outside the signed 32-bit range".format(value))
    return value
