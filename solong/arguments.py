"""Checks on the command-line arguments and the map file name."""

from __future__ import annotations

import os

from .errors import ExitCode, SoLongError

MAP_EXTENSION = ".ber"


def validate_map_name(map_name):
    """Reject a map name whose extension is not exactly ``.ber``."""
    if map_name is None:
        raise SoLongError(ExitCode.INVALID_MAP_NAME, "Error: Invalid map name.\n")
    name = os.fspath(map_name)
    dot = name.rfind(".")
    if dot < 0 or name[dot:] != MAP_EXTENSION:
        raise SoLongError(
            ExitCode.INVALID_MAP,
            "Error: Invalid file type: expected a .ber file.\n",
        )


def validate_arguments(argv):
    """Check that ``argv`` holds exactly one readable ``.ber`` path; return it."""
    args = list(argv)
    if not args:
        raise SoLongError(ExitCode.INVALID_INPUT, "Usage: so_long <map_file.ber>")
    if len(args) > 1:
        raise SoLongError(
            ExitCode.INVALID_INPUT, "Error: Too many arguments provided.\n"
        )
    path = args[0]
    validate_map_name(path)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise SoLongError(
            ExitCode.INVALID_INPUT, "Error: Could not open map file.\n"
        ) from exc
    return path