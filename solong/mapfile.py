"""Reading a map file into rows."""

from __future__ import annotations

import os

from .errors import INVALID_POINTER_MESSAGE, ExitCode, SoLongError, count_newlines
from .gamemap import GameMap

_FD_MESSAGE = "Error: File descriptor is not valid.\n"


def count_map_rows(path):
    """Count the rows of a map file; a final line without a newline counts too."""
    if path is None:
        raise SoLongError(ExitCode.INVALID_POINTER, INVALID_POINTER_MESSAGE)
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise SoLongError(ExitCode.FD_FAIL, _FD_MESSAGE) from exc
    rows = count_newlines(data)
    last = data[-1:] if data else b"\0"
    if rows == 0 and last != b"\0":
        raise SoLongError(ExitCode.INVALID_MAP, "Error: Invalid map format.\n")
    if last != b"\n":
        rows += 1
    return rows


def read_rows(path, expected):
    """Read ``expected`` rows from the file, newline stripped from each."""
    if path is None:
        raise SoLongError(ExitCode.INVALID_POINTER, INVALID_POINTER_MESSAGE)
    rows = []
    try:
        with open(path, encoding="latin-1", newline="\n") as handle:
            for line in handle:
                if len(rows) >= expected:
                    break
                rows.append(line[:-1] if line.endswith("\n") else line)
    except OSError as exc:
        raise SoLongError(ExitCode.FD_FAIL, _FD_MESSAGE) from exc
    if len(rows) != expected:
        raise SoLongError(
            ExitCode.INVALID_MAP, "Error: Map has inconsistent row count.\n"
        )
    return rows


def load_map(path):
    """Load the map file at ``path`` into a :class:`GameMap`."""
    if path is None:
        raise SoLongError(ExitCode.INVALID_POINTER, INVALID_POINTER_MESSAGE)
    expected = count_map_rows(path)
    return GameMap(read_rows(path, expected), os.fspath(path))