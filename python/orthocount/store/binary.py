"""
Binary-encoded points:
    -> Zero or more 8-byte records.
    -> Each record is two 4-byte big-endian signed integers, x then y.

The file is memory-mapped read-only and viewed as an (n, 2) ">i4" array.
Nothing is copied until coordinates() is called.
"""
import logging
import mmap
import os

import numpy as np

from orthocount.exceptions import MalformedInputError
from orthocount.store.base import PointStore

__all__ = ["BinPointStore", "RECORD_DTYPE", "RECORD_SIZE"]

logger = logging.getLogger(__name__)

RECORD_DTYPE = np.dtype(">i4")
RECORD_SIZE = 2 * RECORD_DTYPE.itemsize


class BinPointStore(PointStore):
    def __init__(self, filename: str):
        """
        :param filename: path to a binary-encoded point file.
        """
        self.filename = filename
        self._file = open(filename, "rb")
        self._mmap = None
        self._records = None
        self._closed = False
        try:
            file_size = os.fstat(self._file.fileno()).st_size
            if file_size % RECORD_SIZE != 0:
                raise MalformedInputError(
                    "Invalid binary file format: file size ({0} bytes) is not a multiple of {1} bytes"
                    .format(file_size, RECORD_SIZE)
                )
            self._num_points = file_size // RECORD_SIZE
            if file_size > 0:
                self._mmap = mmap.mmap(self._file.fileno(), 0, access=mmap.ACCESS_READ)
                self._records = np.frombuffer(self._mmap, dtype=RECORD_DTYPE).reshape(self._num_points, 2)
        except BaseException:
            self.close()
            raise

    def count(self) -> int:
        return self._num_points

    def _xs(self) -> np.ndarray:
        return self._mapped()[:, 0]

    def _ys(self) -> np.ndarray:
        return self._mapped()[:, 1]

    def _mapped(self) -> np.ndarray:
        if self._closed:
            raise ValueError("I/O operation on closed point store")
        if self._records is None:
            return np.empty((0, 2), dtype=RECORD_DTYPE)
        return self._records

    def close(self):
        if self._closed:
            return
        self._closed = True
        # The array view must go before the map it points into.
        self._records = None
        try:
            if self._mmap is not None:
                self._mmap.close()
        except BufferError as e:
            logger.warning("Mapped region of %s still referenced: %s", self.filename, e)
        finally:
            self._mmap = None
            self._file.close()

    def __repr__(self):
        return "BinPointStore({0!r}, n={1})".format(self.filename, self._num_points)
