"""Command-line entry point: load a map and check that it is playable."""

from __future__ import annotations

import sys

from .arguments import validate_arguments
from .errors import SoLongError
from .mapfile import load_map
from .reachability import check_reachability
from .validation import validate_map


def run(argv):
    """Validate the arguments, load the map and check it; return the map."""
    path = validate_arguments(argv)
    game = load_map(path)
    validate_map(game)
    check_reachability(game)
    return game


def main(argv=None):
    """Run the checks and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        run(argv)
    except SoLongError as exc:
        print(exc.message.rstrip("\n"), file=sys.stderr)
        return int(exc.code)
    return 0


if __name__ == "__main__":
    sys.exit(main())