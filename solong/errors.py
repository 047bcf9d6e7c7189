"""Exit codes and the error raised when arguments or maps are rejected."""

from __future__ import annotations

from enum import IntEnum

INVALID_POINTER_MESSAGE = "Error: invalid pointer.\n"


class ExitCode(IntEnum):
    """Process exit status used for each kind of failure."""

    FD_FAIL = 3
    INVALID_MAP = 4
    INVALID_INPUT = 5
    MAP_ALLOC_FAIL = 6
    INVALID_POINTER = 7
    INVALID_MAP_NAME = 8


class SoLongError(Exception):
    """A fatal error carrying the exit code the program should end with."""

    def __init__(self, code, message):
        super().__init__(message)
        self.code = code
        self.message = message


def count_newlines(data):
    """Return how many newline characters ``data`` (str or bytes) holds."""
    if data is None:
        raise SoLongError(ExitCode.INVALID_POINTER, INVALID_POINTER_MESSAGE)
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    return data.count(newline)