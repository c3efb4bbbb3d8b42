from .base import Point, PointStore
from .text import TextPointStore
from .binary import BinPointStore

__all__ = [
    "Point", "PointStore", "TextPointStore", "BinPointStore",
    "open_point_store"
]

DEFAULT_BINARY_SUFFIX = ".dat"


def open_point_store(source: str, binary_suffix: str = DEFAULT_BINARY_SUFFIX) -> PointStore:
    """
    Pick the store implementation from the file name.
    :param source: path of the point file.
    :param binary_suffix: files ending with this suffix are read as binary, anything else as text.
    :return: PointStore, owned by the caller, who must close() it.
    """
    if binary_suffix and str(source).endswith(binary_suffix):
        return BinPointStore(source)
    return TextPointStore(source)
