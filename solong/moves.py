"""Player movement driven by key codes."""

from __future__ import annotations

from enum import Enum

from .errors import INVALID_POINTER_MESSAGE, ExitCode, SoLongError
from .validation import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL

KEY_ESCAPE = 65307
_KEY_DELTAS = {
    65363: (1, 0),
    100: (1, 0),
    65361: (-1, 0),
    97: (-1, 0),
    65364: (0, 1),
    115: (0, 1),
    65362: (0, -1),
    119: (0, -1),
}


class MoveOutcome(Enum):
    """What happened after a key press."""

    MOVED = "moved"
    COLLECTED = "collected"
    BLOCKED = "blocked"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


def _player(game):
    if game is None or game.player_pos is None:
        raise SoLongError(ExitCode.INVALID_POINTER, INVALID_POINTER_MESSAGE)
    return game.player_pos


def _report(game):
    print(f"\nMoves: {game.steps}")


def target_for_key(game, key):
    """Return the tile a key would move the player to, or None for other keys."""
    x, y = _player(game)
    delta = _KEY_DELTAS.get(key)
    if delta is None:
        return None
    return (x + delta[0], y + delta[1])


def move(game, next_x, next_y):
    """Try to move the player onto ``(next_x, next_y)``."""
    current = _player(game)
    try:
        target = game.tile(next_x, next_y)
    except IndexError:
        return MoveOutcome.BLOCKED
    if target == WALL or (target == EXIT and game.collectibles != 0):
        return MoveOutcome.BLOCKED
    if target == EXIT:
        game.steps += 1
        _report(game)
        return MoveOutcome.WON
    outcome = MoveOutcome.MOVED
    if target == COLLECTIBLE:
        game.collectibles -= 1
        outcome = MoveOutcome.COLLECTED
    if target in (FLOOR, COLLECTIBLE):
        game.set_tile(next_x, next_y, PLAYER)
    game.set_tile(*current, FLOOR)
    game.player_pos = (next_x, next_y)
    game.steps += 1
    _report(game)
    return outcome


def handle_key(game, key):
    """Act on one key code and return what happened."""
    if key == KEY_ESCAPE:
        return MoveOutcome.QUIT
    target = target_for_key(game, key)
    if target is None:
        return MoveOutcome.IGNORED
    return move(game, *target)