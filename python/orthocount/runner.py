"""
Triangle Counter:
    -> Open the point store named by the source.
    -> Split the corner indices into one range per worker.
    -> Count every range on the chosen backend.
    -> Sum the partial counts.

Backends:
    serial   one range, counted in the calling thread.
    thread   one thread per range, all sharing the opened store.
    process  one child process per range, each opening the source itself.
    spark    one Spark task per range, each opening the source itself.

The result does not depend on the backend or on the number of workers.

>> TriangleCounter(n_workers=4, backend="process").count("points.dat")
"""
import logging

from orthocount.config import OrthoConfig, BACKENDS
from orthocount.counting import count_right_triangles
from orthocount.exceptions import UsageError
from orthocount.parallel import ThreadPool, ProcessPool, partition
from orthocount.store import open_point_store

__all__ = ["TriangleCounter"]

logger = logging.getLogger(__name__)


class TriangleCounter(object):
    def __init__(self, n_workers: int = 1, backend: str = "thread", config: OrthoConfig = None,
                 spark_context=None):
        """
        :param n_workers: number of workers, at least 1 and at most config.max_workers.
        :param backend: one of "serial", "thread", "process", "spark".
        :param config: OrthoConfig, loaded from the environment if None.
        :param spark_context: SparkContext for the spark backend, created on demand if None.
        """
        self._config = config or OrthoConfig.load()
        if backend not in BACKENDS:
            raise UsageError("Unknown backend {0!r}, expected one of {1}".format(backend, ", ".join(BACKENDS)))
        if isinstance(n_workers, bool) or not isinstance(n_workers, int) or n_workers < 1:
            raise UsageError("Number of workers must be a positive integer")
        if n_workers > self._config.max_workers:
            raise UsageError("Number of workers cannot exceed {0}".format(self._config.max_workers))
        self._n_workers = n_workers
        self._backend = backend
        self._spark_context = spark_context

    def count(self, source: str) -> int:
        store = open_point_store(source, binary_suffix=self._config.binary_suffix)
        try:
            n = store.count()
            ranges = partition(n, 1 if self._backend == "serial" else self._n_workers)
            logger.debug("%d points, ranges %s", n, [tuple(r) for r in ranges])

            if len(ranges) == 1:
                logger.info("counting %s serially", source)
                total = count_right_triangles(store, ranges[0].start, ranges[0].end)
            elif self._backend == "thread":
                logger.info("counting %s with %d threads", source, len(ranges))
                total = ThreadPool().count(store, ranges)
            elif self._backend == "process":
                logger.info("counting %s with %d processes", source, len(ranges))
                total = ProcessPool(config=self._config).count(source, ranges)
            else:
                from orthocount.parallel.spark import SparkPool
                logger.info("counting %s with %d spark tasks", source, len(ranges))
                total = SparkPool(self._spark_context, config=self._config).count(source, ranges)
        finally:
            store.close()
        logger.info("%s: %d right triangles", source, total)
        return total
