from .partition import WorkRange, partition, aggregate
from .threads import ThreadPool
from .processes import ProcessPool

__all__ = [
    "WorkRange", "partition", "aggregate",
    "ThreadPool", "ProcessPool"
]
