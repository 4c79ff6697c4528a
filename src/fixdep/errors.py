import os


class FixdepError(Exception):
    """Base class for every failure that aborts fragment generation."""


class DepfileError(FixdepError):
    """An I/O step on an input file failed.

    ``operation`` is one of ``open``, ``fstat`` or ``read`` and ends up in the
    diagnostic printed by the command line.
    """

    def __init__(self, operation, path, cause=None):
        self.operation = operation
        self.path = os.fsdecode(path)
        self.cause = cause
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else cause
        super().__init__(f"{operation} error: {self.path}: {reason}")
