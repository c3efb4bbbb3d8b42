"""
Out-of-process worker pool.

Every worker is a separate process speaking a line protocol on its stdin/stdout:
    request:   <source>\n<start>\n<end>\n
    response:  <count>\n, then exit status 0

The child opens its own PointStore from <source>; point data never goes
through the pipe. The parent writes and closes every child's stdin first, so
all children count concurrently, then reads one line from each child in turn
and waits for it to exit.

    -> An unparsable or missing response line is fatal: every child is
       terminated and WorkerFailure is raised.
    -> A non-zero exit status after a valid response is logged as a warning
       and the response is still used.
"""
import logging
import os
import re
import subprocess
from typing import List, Sequence

import orthocount
from orthocount.config import OrthoConfig, CONFIG_ENV_VAR
from orthocount.exceptions import UsageError, WorkerFailure
from orthocount.parallel.partition import WorkRange, aggregate

__all__ = ["ProcessPool", "format_request", "parse_response"]

logger = logging.getLogger(__name__)

_COUNT = re.compile(r"[0-9]+")


def format_request(source: str, work_range: WorkRange) -> str:
    return "{0}\n{1}\n{2}\n".format(source, work_range.start, work_range.end)


def parse_response(line: str) -> int:
    """
    :return: the partial count, or None if the line is not a non-negative integer.
    """
    line = line.strip()
    return int(line) if _COUNT.fullmatch(line) else None


class ProcessPool(object):
    def __init__(self, config: OrthoConfig = None):
        self._config = config or OrthoConfig.load()

    def count(self, source: str, ranges: Sequence[WorkRange]) -> int:
        return aggregate(self.run(source, ranges))

    def run(self, source: str, ranges: Sequence[WorkRange]) -> List[int]:
        """
        :param source: path of the point file, opened again by every worker.
        :param ranges: one WorkRange per worker process.
        :return: partial counts, in the order of ranges.
        """
        source = str(source)
        if "\n" in source or "\r" in source:
            raise UsageError("Source path must not contain line breaks: {0!r}".format(source))

        processes = list()
        try:
            for idx, work_range in enumerate(ranges):
                processes.append(self._spawn(source, work_range, idx))
            return [
                self._collect(process, idx) for idx, process in enumerate(processes)
            ]
        except BaseException:
            self._terminate(processes)
            raise

    def _spawn(self, source, work_range, idx) -> subprocess.Popen:
        command = self._config.worker_command
        logger.debug("spawning worker %d for [%d, %d): %s",
                     idx, work_range.start, work_range.end, " ".join(command))
        try:
            process = subprocess.Popen(
                command, stdin=subprocess.PIPE, stdout=subprocess.PIPE,
                env=self._child_environment(), universal_newlines=True
            )
        except OSError as e:
            raise WorkerFailure("Failed to start worker {0}: {1}".format(idx, e), worker_index=idx) from e

        try:
            process.stdin.write(format_request(source, work_range))
            process.stdin.close()
        except OSError as e:
            process.kill()
            process.wait()
            raise WorkerFailure("Failed to send assignment to worker {0}: {1}".format(idx, e),
                                worker_index=idx) from e
        return process

    @staticmethod
    def _collect(process: subprocess.Popen, idx: int) -> int:
        line = process.stdout.readline()
        process.stdout.close()
        count = parse_response(line)
        if count is None:
            raise WorkerFailure(
                "Invalid result from worker {0}: {1!r}".format(idx, line.strip()) if line
                else "Worker {0} exited without a result".format(idx),
                worker_index=idx
            )
        exit_code = process.wait()
        if exit_code != 0:
            logger.warning("Worker %d exited with code %d", idx, exit_code)
        logger.debug("worker %d found %d", idx, count)
        return count

    @staticmethod
    def _terminate(processes: List[subprocess.Popen]):
        for process in processes:
            if process.poll() is None:
                process.kill()
        for process in processes:
            process.wait()
            for stream in (process.stdin, process.stdout):
                if stream is not None and not stream.closed:
                    stream.close()

    def _child_environment(self) -> dict:
        env = dict(os.environ)
        # Children import the same orthocount the parent runs.
        package_root = os.path.dirname(os.path.dirname(os.path.abspath(orthocount.__file__)))
        python_path = env.get("PYTHONPATH")
        env["PYTHONPATH"] = package_root + (os.pathsep + python_path if python_path else "")
        if self._config.path:
            env[CONFIG_ENV_VAR] = self._config.path
        return env
