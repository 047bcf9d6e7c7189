"""Structural checks on a loaded map: walls, tile set and tile counts."""

from __future__ import annotations

from .errors import INVALID_POINTER_MESSAGE, ExitCode, SoLongError

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

_INVALID_MAP_MESSAGE = "Error: map is invalid.\n"


def _require(game):
    if game is None or game.rows is None:
        raise SoLongError(ExitCode.INVALID_POINTER, INVALID_POINTER_MESSAGE)


def _invalid(message=_INVALID_MAP_MESSAGE):
    return SoLongError(ExitCode.INVALID_MAP, message)


def validate_map_walls(game):
    """Require a rectangular map whose border is made of walls."""
    _require(game)
    rows = game.rows
    if not rows:
        raise _invalid()
    last = len(rows) - 1
    width = len(rows[0])
    for x, row in enumerate(rows):
        if x in (0, last):
            if row and (len(rows[last]) != width or any(t != WALL for t in row)):
                raise _invalid()
        elif not row or len(row) != width or row[0] != WALL or row[-1] != WALL:
            raise _invalid()


def check_tiles(game):
    """Count players, exits and collectibles; reject unknown tile characters."""
    _require(game)
    game.players = game.exits = game.collectibles = 0
    for x, row in enumerate(game.rows[1:], start=1):
        for y, tile in enumerate(row[1:], start=1):
            if tile == EXIT:
                game.exit_pos = (x, y)
                game.exits += 1
            elif tile == PLAYER:
                game.player_pos = (x, y)
                game.players += 1
            elif tile == COLLECTIBLE:
                game.collectibles += 1
            elif tile not in (WALL, FLOOR):
                raise _invalid("Error: map has incorrect signs.\n")


def validate_counts(game):
    """Require one exit, one starting position and at least one collectible."""
    _require(game)
    if game.exits != 1:
        raise _invalid("Error: map should has exactly 1 exit.\n")
    if game.players != 1:
        raise _invalid("Error: map should has exactly 1 starting position.\n")
    if game.collectibles < 1:
        raise _invalid("Error: map should has at least 1 collectible.\n")


def validate_map(game):
    """Run every structural check on ``game`` and return it."""
    validate_map_walls(game)
    check_tiles(game)
    validate_counts(game)
    return game