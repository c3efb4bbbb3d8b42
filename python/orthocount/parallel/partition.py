"""
Range Partition:
    Split the corner indices [0, n) into at most w contiguous, disjoint ranges.
    -> effective_w = min(w, n)
    -> n < 3 or effective_w <= 1: one serial range [0, n).
    -> otherwise chunk = ceil(n / effective_w) and worker k gets
       [k * chunk, min((k + 1) * chunk, n)); empty tail ranges are dropped.

The union of the ranges is exactly [0, n), so partial counts combine by summation.
"""
from collections import namedtuple
from typing import Iterable, List

__all__ = ["WorkRange", "partition", "aggregate"]


class WorkRange(namedtuple("WorkRange", ["start", "end"])):
    """
    Half-open interval [start, end) of corner indices.
    """
    __slots__ = ()

    @property
    def size(self) -> int:
        return max(self.end - self.start, 0)


def partition(n: int, workers: int) -> List[WorkRange]:
    if n < 0:
        raise ValueError("Number of points must not be negative, got {0}".format(n))
    effective_workers = min(workers, n)
    if n < 3 or effective_workers <= 1:
        return [WorkRange(0, n)]

    chunk = -(-n // effective_workers)
    ranges = list()
    for k in range(effective_workers):
        start = k * chunk
        if start >= n:
            break
        ranges.append(WorkRange(start, min(start + chunk, n)))
    return ranges


def aggregate(partial_counts: Iterable[int]) -> int:
    return sum(int(c) for c in partial_counts)
