"""
Command line interface.

    orthocount <input-path> [worker-count] [--backend B] [--config PATH] [--log-level LEVEL]

Prints the number of right triangles and nothing else on stdout.
Exit status:
    0  success
    1  usage error, or a worker failure
    2  input file missing or unreadable
    3  malformed input file
"""
import argparse
import logging
import os
import sys

from orthocount.config import OrthoConfig, BACKENDS, LOG_LEVELS
from orthocount.exceptions import MalformedInputError, UsageError, WorkerFailure
from orthocount.runner import TriangleCounter

__all__ = ["main", "EXIT_OK", "EXIT_USAGE", "EXIT_IO", "EXIT_MALFORMED", "EXIT_WORKER_FAILURE"]

logger = logging.getLogger(__name__)

EXIT_OK, EXIT_USAGE, EXIT_IO, EXIT_MALFORMED = 0, 1, 2, 3
EXIT_WORKER_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="orthocount",
        description="Count the right triangles formed by a set of integer points."
    )
    parser.add_argument("input_path",
                        help="point file; binary if it ends with the binary suffix (.dat), text otherwise")
    parser.add_argument("worker_count", nargs="?", default="1",
                        help="number of workers (default 1)")
    parser.add_argument("--backend", choices=BACKENDS, default=None,
                        help="how workers run (default from config: thread)")
    parser.add_argument("--config", default=None,
                        help="YAML config file (default $ORTHOCOUNT_CONFIG)")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS)
    return parser


def _parse_worker_count(text: str, max_workers: int) -> int:
    try:
        workers = int(text)
    except ValueError:
        raise UsageError("Number of workers must be an integer") from None
    if workers <= 0:
        raise UsageError("Number of workers must be positive")
    if workers > max_workers:
        raise UsageError("Number of workers cannot exceed {0}".format(max_workers))
    return workers


def _check_readable(path: str):
    if not os.path.exists(path):
        raise FileNotFoundError("No such file or directory")
    if not os.access(path, os.R_OK):
        raise PermissionError("Permission denied")


def main(argv=None) -> int:
    try:
        args = _build_parser().parse_args(argv)
        config = OrthoConfig.load(args.config)
        logging.basicConfig(level=args.log_level or config.log_level,
                            format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
        workers = _parse_worker_count(args.worker_count, config.max_workers)
        _check_readable(args.input_path)
        count = TriangleCounter(
            n_workers=workers, backend=args.backend or config.backend, config=config
        ).count(args.input_path)
    except UsageError as e:
        return _fail(e, EXIT_USAGE)
    except MalformedInputError as e:
        return _fail(e, EXIT_MALFORMED)
    except WorkerFailure as e:
        return _fail(e, EXIT_WORKER_FAILURE)
    except OSError as e:
        return _fail(e.strerror or e, EXIT_IO)

    print(count)
    return EXIT_OK


def _fail(message, exit_code: int) -> int:
    logger.debug("exit %d", exit_code, exc_info=True)
    sys.stderr.write("Error: {0}\n".format(message))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
