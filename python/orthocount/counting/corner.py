"""
Right Triangle Counting:
    For every corner i in [start, end):
        -> Canonicalize the displacement from i to every other point j.
        -> Count the points on each ray (the direction histogram of i).
        -> For every ray d with c points, look up the left perpendicular of d.
           If it holds c' points, i is the right-angle apex of c * c' triangles.
    The sum over all corners is the number of right triangles.

    -> Each right triangle has exactly one right angle, so it is counted at
       exactly one corner.
    -> The inner scan always covers all n points. A range only chooses which
       points act as apex, so the counts of disjoint corner ranges simply add up.

Time: O((end - start) * n), memory: O(n) per corner.
"""
from typing import Dict, Tuple

import numpy as np

from orthocount.counting.direction import canonicalize_many, perpendicular_left_many
from orthocount.store import PointStore

__all__ = ["count_right_triangles", "direction_histogram"]


def count_right_triangles(store: PointStore, start: int = 0, end: int = None) -> int:
    """
    :param store: the full point set.
    :param start: first corner index (inclusive), clamped to [0, n].
    :param end: last corner index (exclusive), clamped to [0, n]; None means n.
    :return: number of right triangles whose right angle sits on a corner in [start, end).
    """
    n = store.count()
    if end is None:
        end = n
    start = min(max(start, 0), n)
    end = min(max(end, 0), n)
    if n < 3 or start >= end:
        return 0

    xs, ys = store.coordinates()
    total = 0
    for corner in range(start, end):
        directions, counts = _corner_histogram(xs, ys, corner)
        total += _count_perpendicular_pairs(directions, counts)
    return total


def direction_histogram(store: PointStore, corner: int) -> Dict[Tuple[int, int], int]:
    """
    The direction histogram of one corner, as {(dx, dy): number of points}.
    """
    store.x(corner)  # IndexError for a corner outside the store
    xs, ys = store.coordinates()
    directions, counts = _corner_histogram(xs, ys, corner)
    return {
        (int(dx), int(dy)): int(c) for (dx, dy), c in zip(directions, counts)
    }


def _corner_histogram(xs: np.ndarray, ys: np.ndarray, corner: int) -> (np.ndarray, np.ndarray):
    directions = canonicalize_many(xs - xs[corner], ys - ys[corner])
    # drops the corner itself and every duplicate of it
    directions = directions[np.any(directions != 0, axis=1)]
    if len(directions) == 0:
        return np.empty((0, 2), dtype=np.int64), np.empty(0, dtype=np.int64)
    return np.unique(directions, axis=0, return_counts=True)


def _count_perpendicular_pairs(directions: np.ndarray, counts: np.ndarray) -> int:
    n_directions = len(directions)
    if n_directions < 2:
        return 0
    perpendiculars = perpendicular_left_many(directions)
    _, labels = np.unique(
        np.concatenate((directions, perpendiculars)), axis=0, return_inverse=True
    )
    labels = labels.reshape(-1)
    count_by_label = np.zeros(labels.max() + 1, dtype=np.int64)
    count_by_label[labels[:n_directions]] = counts
    return int(np.dot(counts.astype(np.int64), count_by_label[labels[n_directions:]]))
