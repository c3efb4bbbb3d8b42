"""
Errors raised by orthocount.

Everything the package raises on purpose derives from OrthoCountError, except
for I/O access problems (builtin FileNotFoundError / PermissionError) and
out-of-range store access (builtin IndexError, a contract violation).
"""

__all__ = [
    "OrthoCountError", "UsageError", "ConfigError",
    "MalformedInputError", "WorkerFailure"
]


class OrthoCountError(Exception):
    pass


class UsageError(OrthoCountError):
    """
    Bad arguments: worker count, backend name, missing operands.
    """


class ConfigError(UsageError):
    pass


class MalformedInputError(OrthoCountError, ValueError):
    """
    Structurally invalid text or binary point content,
    including size and count mismatches.
    """


class WorkerFailure(OrthoCountError):
    """
    A worker could not produce its partial count.
    The run is aborted, a partial total is never reported.
    """
    def __init__(self, message, worker_index=None):
        super().__init__(message)
        self.worker_index = worker_index
