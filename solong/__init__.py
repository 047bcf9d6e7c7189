"""Map loading, validation and move logic for a tile-based collect-and-exit puzzle, with XPM and colour helpers."""

__version__ = "0.1.0"
__all__ = [
    "arguments",
    "cli",
    "colors",
    "errors",
    "gamemap",
    "mapfile",
    "moves",
    "reachability",
    "validation",
    "xpm",
]