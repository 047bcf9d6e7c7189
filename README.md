# solong

`solong` loads and checks maps for a small tile-based puzzle. The player walks
around a walled grid, picks up every collectible and then steps onto the exit.
A map file ends in `.ber` and is built from these characters:

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | empty floor       |
| `P`  | player start      |
| `C`  | collectible       |
| `E`  | exit              |

A map is valid when all of these hold:

- every row has the width of the first row, and the border is all walls;
- it has exactly one `P` and exactly one `E`;
- it has at least one `C`;
- no characters other than the five above appear;
- the exit and every collectible can be reached from the start (the exit
  itself is never walked through).

## Installation

```
pip install .
```

## Command line

```
solong maps/level1.ber
```

The command takes exactly one argument, the path to a `.ber` file. It checks
the name, loads the map and runs the shape, tile and reachability checks. If
the map is valid it exits with status 0. Otherwise it prints the error message
to standard error and exits with the matching code from
`solong.errors.ExitCode`:

| Code | Name               | When                                          |
|------|--------------------|-----------------------------------------------|
| 3    | `FD_FAIL`          | the map file cannot be read                   |
| 4    | `INVALID_MAP`      | bad extension, bad layout, unreachable tiles  |
| 5    | `INVALID_INPUT`    | wrong number of arguments, file cannot open   |
| 7    | `INVALID_POINTER`  | a missing map or path was passed              |
| 8    | `INVALID_MAP_NAME` | no map name was given                         |

## Library use

```python
from solong.mapfile import load_map
from solong.validation import validate_map
from solong.reachability import check_reachability
from solong.moves import handle_key, MoveOutcome

game = load_map("maps/level1.ber")   # a solong.gamemap.GameMap
validate_map(game)         # raises SoLongError on a bad layout
check_reachability(game)   # raises SoLongError if E or a C is out of reach

outcome = handle_key(game, ord("d"))
print(outcome, game.steps)
print(game.render())
```

`GameMap` addresses tiles as `(x, y)`, where `x` is the row and `y` the
column. It offers `tile`, `set_tile`, `render`, `height` and `width`, and keeps
the counts (`players`, `exits`, `collectibles`), the positions (`player_pos`,
`exit_pos`) and the number of `steps` taken.

`solong.cli.run(argv)` runs the whole check on a list of arguments and returns
the loaded map; `solong.cli.main(argv=None)` wraps it and returns the exit
status.

### Moves

`handle_key(game, key)` takes a key code and returns a `MoveOutcome`:

| Key code            | Effect        |
|---------------------|---------------|
| `100` (`d`), `65363` | `x + 1`      |
| `97` (`a`), `65361`  | `x - 1`      |
| `115` (`s`), `65364` | `y + 1`      |
| `119` (`w`), `65362` | `y - 1`      |
| `65307` (Escape)     | `QUIT`       |
| anything else        | `IGNORED`    |

Moving onto a wall, outside the map, or onto the exit while collectibles
remain gives `BLOCKED`. Moving onto a collectible gives `COLLECTED` and lowers
`game.collectibles`. Moving onto the exit once every collectible is taken gives
`WON`. Any other step gives `MOVED`. Each move that is taken (including the
winning one) adds one to `game.steps` and prints `Moves: N` to standard output.
`target_for_key` and `move` expose the two halves of this separately.

### Errors

Every failure in map loading and checking raises `solong.errors.SoLongError`.
Its `code` holds the `ExitCode` and its `message` says what went wrong.

## Images and colours

`solong.xpm` reads XPM images into plain pixel data. `parse_xpm(text)` and
`load_xpm(path)` return an `XpmImage` with `width`, `height` and
`pixels[y][x]` holding 0xRRGGBB values; the colour `None` becomes
`solong.xpm.TRANSPARENT`. `XpmImage.pixel(x, y)` reads one pixel and
`XpmImage.to_bytes(bytes_per_pixel, big_endian)` packs the whole image.
Malformed data raises `XpmError`. The helpers `strip_comments`,
`quoted_strings`, `split_words` and `parse_xpm_lines` are usable on their own.

`solong.colors` resolves X11 colour names (`lookup_color`, case-insensitive,
`KeyError` when unknown) and XPM colour specs (`text_to_rgb`, which also reads
`#RRGGBB`). `mask_shifts` and `convert_color` convert a 0xRRGGBB colour into
a pixel value for a visual of fewer than 24 bits per pixel.

## What it does not do

The package has no window, graphics or game loop. The `solong` command only
checks a map; it does not let you play it. Playing happens through the
library: feed key codes to `handle_key` and show the result with
`GameMap.render()` or your own drawing code.

## Running the tests

```
pip install .[test]
pytest
```