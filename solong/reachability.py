"""Checks that the exit and every collectible can be reached by the player."""

from __future__ import annotations

from .errors import INVALID_POINTER_MESSAGE, ExitCode, SoLongError
from .validation import COLLECTIBLE, EXIT, FLOOR, PLAYER

_MARKED = {PLAYER: "p", FLOOR: "o", COLLECTIBLE: "c", EXIT: "e"}
_UNMARKED = {mark: tile for tile, mark in _MARKED.items()}


def _require(game):
    if game is None or game.rows is None:
        raise SoLongError(ExitCode.INVALID_POINTER, INVALID_POINTER_MESSAGE)


def find_player(game):
    """Locate the first ``P`` tile, store it as the player position and return it."""
    _require(game)
    for x, row in enumerate(game.rows):
        for y, tile in enumerate(row):
            if tile == PLAYER:
                game.player_pos = (x, y)
                return game.player_pos
    if game.player_pos is None:
        raise SoLongError(
            ExitCode.INVALID_MAP,
            "Error: map should has exactly 1 starting position.\n",
        )
    return game.player_pos


def mark_reachable(game, x, y):
    """Mark every tile reachable from ``(x, y)`` with its lower-case form.

    The exit is marked but never walked through.
    """
    _require(game)
    height, width = game.height, game.width
    pending = [(x, y)]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < height and 0 <= y < width) or y >= len(game.rows[x]):
            continue
        tile = game.rows[x][y]
        if tile not in _MARKED:
            continue
        game.set_tile(x, y, _MARKED[tile])
        if tile == PLAYER:
            game.player_pos = (x, y)
        elif tile == EXIT:
            game.exit_pos = (x, y)
            continue
        pending.extend([(x, y - 1), (x - 1, y), (x, y + 1), (x + 1, y)])


def restore_marks(game):
    """Fail if an exit or collectible was left unmarked, else undo the marks."""
    _require(game)
    for row in game.rows:
        if EXIT in row or COLLECTIBLE in row:
            raise SoLongError(
                ExitCode.INVALID_MAP, "Error: E or some C are not reachable.\n"
            )
    for row in game.rows:
        row[:] = [_UNMARKED.get(tile, tile) for tile in row]


def check_reachability(game):
    """Verify that the player can reach the exit and every collectible."""
    x, y = find_player(game)
    mark_reachable(game, x, y)
    restore_marks(game)
    return game