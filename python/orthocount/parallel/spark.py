"""
Spark worker pool.

The same corner-range decomposition, run as Spark tasks:
    -> parallelize the WorkRanges, one partition per range.
    -> every task opens its own PointStore from the source path
       (the path must be readable from every executor).
    -> sum the partial counts.

>> from pyspark import SparkContext
>> pool = SparkPool(SparkContext.getOrCreate())
>> pool.count("points.dat", partition(n, 8))
"""
import logging
from typing import List, Sequence

from pyspark import SparkContext
from py4j.protocol import Py4JJavaError

from orthocount.config import OrthoConfig
from orthocount.counting import count_right_triangles
from orthocount.exceptions import WorkerFailure
from orthocount.parallel.partition import WorkRange
from orthocount.store import open_point_store

__all__ = ["SparkPool"]

logger = logging.getLogger(__name__)


class SparkPool(object):
    def __init__(self, spark_context: SparkContext = None, config: OrthoConfig = None):
        self._spark_context = spark_context
        self._config = config or OrthoConfig.load()

    @property
    def spark_context(self) -> SparkContext:
        if self._spark_context is None:
            self._spark_context = SparkContext.getOrCreate()
        return self._spark_context

    def count(self, source: str, ranges: Sequence[WorkRange]) -> int:
        if not ranges:
            return 0
        try:
            return int(self._partial_counts(source, ranges).sum())
        except Py4JJavaError as e:
            raise WorkerFailure("Spark job failed: {0}".format(e.java_exception)) from e

    def run(self, source: str, ranges: Sequence[WorkRange]) -> List[int]:
        if not ranges:
            return []
        try:
            return self._partial_counts(source, ranges).collect()
        except Py4JJavaError as e:
            raise WorkerFailure("Spark job failed: {0}".format(e.java_exception)) from e

    def _partial_counts(self, source, ranges):
        source = str(source)
        binary_suffix = self._config.binary_suffix
        count_range = self._count_range
        logger.debug("submitting %d ranges of %s to spark", len(ranges), source)
        return self.spark_context.parallelize(
            [tuple(r) for r in ranges], numSlices=len(ranges)
        ).map(
            lambda u: count_range(source, binary_suffix, u[0], u[1])
        )

    @staticmethod
    def _count_range(source, binary_suffix, start, end):
        store = open_point_store(source, binary_suffix=binary_suffix)
        try:
            return count_right_triangles(store, start, end)
        finally:
            store.close()
