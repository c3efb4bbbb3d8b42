"""
Counting right triangles among integer points.

    -> store:     PointStore over text or memory-mapped binary point files.
    -> counting:  direction canonicalization and the per-corner counter.
    -> parallel:  range partitioning and the thread / process / spark pools.
"""
from .exceptions import (
    OrthoCountError, UsageError, ConfigError, MalformedInputError, WorkerFailure
)
from .config import OrthoConfig
from .store import Point, PointStore, TextPointStore, BinPointStore, open_point_store
from .counting import canonicalize, perpendicular_left, count_right_triangles
from .parallel import WorkRange, partition, aggregate, ThreadPool, ProcessPool
from .runner import TriangleCounter

__version__ = "1.0.0"

__all__ = [
    "OrthoCountError", "UsageError", "ConfigError", "MalformedInputError", "WorkerFailure",
    "OrthoConfig",
    "Point", "PointStore", "TextPointStore", "BinPointStore", "open_point_store",
    "canonicalize", "perpendicular_left", "count_right_triangles",
    "WorkRange", "partition", "aggregate", "ThreadPool", "ProcessPool",
    "TriangleCounter"
]
