"""
In-process worker pool.

Every worker is a thread counting one WorkRange over the shared, read-only
PointStore. Worker k writes only results[k], so the result slots need no lock.
The pool starts all workers, then joins all of them before any slot is read.
If any worker failed the run is aborted with WorkerFailure.
"""
import logging
import threading
from typing import List, Sequence

from orthocount.counting import count_right_triangles
from orthocount.exceptions import WorkerFailure
from orthocount.parallel.partition import WorkRange, aggregate
from orthocount.store import PointStore

__all__ = ["ThreadPool"]

logger = logging.getLogger(__name__)


class ThreadPool(object):
    def __init__(self, thread_name_prefix: str = "Worker"):
        self._thread_name_prefix = thread_name_prefix

    def count(self, store: PointStore, ranges: Sequence[WorkRange]) -> int:
        return aggregate(self.run(store, ranges))

    def run(self, store: PointStore, ranges: Sequence[WorkRange]) -> List[int]:
        """
        :param store: shared by every worker, never written.
        :param ranges: one WorkRange per worker.
        :return: partial counts, in the order of ranges.
        """
        results = [None] * len(ranges)
        errors = [None] * len(ranges)
        workers = [
            threading.Thread(
                target=self._work,
                args=(store, work_range, results, errors, idx),
                name="{0}-{1}".format(self._thread_name_prefix, idx),
                daemon=True
            )
            for idx, work_range in enumerate(ranges)
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        for idx, error in enumerate(errors):
            if error is not None:
                raise WorkerFailure(
                    "Worker {0} failed on range {1}: {2}".format(idx, tuple(ranges[idx]), error),
                    worker_index=idx
                ) from error
        return results

    @staticmethod
    def _work(store, work_range, results, errors, idx):
        logger.debug("worker %d counting corners [%d, %d)", idx, work_range.start, work_range.end)
        try:
            results[idx] = count_right_triangles(store, work_range.start, work_range.end)
        except Exception as e:
            errors[idx] = e
            return
        logger.debug("worker %d found %d", idx, results[idx])
