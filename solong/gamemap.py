"""The in-memory game map and the state that goes with it."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class GameMap:
    """A grid of tiles addressed as ``(x, y)``: x is the row, y the column."""

    rows: list
    name: str
    players: int = field(default=0, init=False)
    exits: int = field(default=0, init=False)
    collectibles: int = field(default=0, init=False)
    player_pos: tuple | None = field(default=None, init=False)
    exit_pos: tuple | None = field(default=None, init=False)
    steps: int = field(default=0, init=False)

    def __post_init__(self):
        self.rows = [list(row) for row in self.rows]
        self.name = os.fspath(self.name) if self.name is not None else ""

    @property
    def height(self):
        """Number of rows."""
        return len(self.rows)

    @property
    def width(self):
        """Length of the first row."""
        return len(self.rows[0]) if self.rows else 0

    def _in_bounds(self, x, y):
        return 0 <= x < len(self.rows) and 0 <= y < len(self.rows[x])

    def tile(self, x, y):
        """Return the tile character at row ``x``, column ``y``."""
        if not self._in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.rows[x][y]

    def set_tile(self, x, y, value):
        """Replace the tile at row ``x``, column ``y`` with one character."""
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError("a tile is exactly one character")
        if not self._in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        self.rows[x][y] = value

    def render(self):
        """Return the map as text, one line per row."""
        return "\n".join("".join(row) for row in self.rows)