"""
Child side of the process pool protocol.

Reads the data source, start and end from stdin (one per line), counts the
right triangles whose right angle lies on a corner in [start, end) and writes
the count as a single line to stdout. Exit status 0 on success, 1 otherwise.

    $ printf 'points.dat\n0\n500\n' | python -m orthocount.parallel.worker
"""
import logging
import sys

from orthocount.config import OrthoConfig
from orthocount.counting import count_right_triangles
from orthocount.exceptions import OrthoCountError, UsageError
from orthocount.store import open_point_store

__all__ = ["main", "read_assignment"]

logger = logging.getLogger(__name__)


def read_assignment(stream) -> (str, int, int):
    source = _read_line(stream, "filename")
    start = _read_index(stream, "start index")
    end = _read_index(stream, "end index")
    if start < 0 or end < start:
        raise UsageError("Invalid indices: start={0}, end={1}".format(start, end))
    return source, start, end


def _read_line(stream, what: str) -> str:
    line = stream.readline()
    if not line:
        raise UsageError("Missing {0}".format(what))
    # Only the line ending; a path may begin or end with spaces.
    return line.rstrip("\r\n")


def _read_index(stream, what: str) -> int:
    line = _read_line(stream, what)
    try:
        return int(line)
    except ValueError:
        raise UsageError("{0} must be an integer".format(what.capitalize())) from None


def main(stdin=None, stdout=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    store = None
    try:
        config = OrthoConfig.load()
        logging.basicConfig(level=config.log_level, format="%(name)s: %(message)s")
        source, start, end = read_assignment(stdin)
        store = open_point_store(source, binary_suffix=config.binary_suffix)
        count = count_right_triangles(store, start, end)
        logger.debug("counted %d triangles for %s [%d, %d)", count, source, start, end)
        stdout.write("{0}\n".format(count))
        stdout.flush()
    except (OrthoCountError, OSError) as e:
        sys.stderr.write("Error: {0}\n".format(e))
        return 1
    finally:
        if store is not None:
            store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
