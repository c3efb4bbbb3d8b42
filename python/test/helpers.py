"""
Shared helpers for the test cases.
"""
import itertools
import os

from orthocount.store import TextPointStore
from orthocount.utils import write_text_points, write_binary_points


def brute_force_count(points):
    """
    O(n^3) reference: for every unordered triple, count the vertices
    where the two edges are nonzero and have a zero dot product.
    """
    total = 0
    for a, b, c in itertools.combinations([tuple(p) for p in points], 3):
        for (px, py), (qx, qy), (rx, ry) in ((a, b, c), (b, a, c), (c, a, b)):
            ux, uy, vx, vy = qx - px, qy - py, rx - px, ry - py
            if (ux, uy) != (0, 0) and (vx, vy) != (0, 0) and ux * vx + uy * vy == 0:
                total += 1
    return total


def store_of(points):
    points = [tuple(p) for p in points]
    return TextPointStore.from_lines(
        [str(len(points))] + ["{0} {1}".format(x, y) for x, y in points]
    )


def write_both(directory, points, name="points"):
    """
    :return: (text path, binary path) holding the same points.
    """
    text_path = os.path.join(directory, name + ".txt")
    binary_path = os.path.join(directory, name + ".dat")
    write_text_points(text_path, points)
    write_binary_points(binary_path, points)
    return text_path, binary_path
