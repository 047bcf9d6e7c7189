import pytest

from solong.errors import ExitCode, SoLongError
from solong.gamemap import GameMap
from solong.validation import (
    check_tiles,
    validate_counts,
    validate_map,
    validate_map_walls,
)

VALID = [
    "1111111",
    "1P0C001",
    "10001C1",
    "1000E01",
    "1111111",
]


def make(rows):
    return GameMap(rows, "maps/test.ber")


def test_valid_map_counts_tiles():
    game = validate_map(make(VALID))
    text = "".join(VALID)
    assert game.players == text.count("P")
    assert game.exits == text.count("E")
    assert game.collectibles == text.count("C")


def test_valid_map_records_positions():
    game = validate_map(make(VALID))
    assert game.tile(*game.player_pos) == "P"
    assert game.tile(*game.exit_pos) == "E"


def test_validation_leaves_map_unchanged():
    game = make(VALID)
    validate_map(game)
    assert game.render() == "\n".join(VALID)


def test_missing_top_wall_is_rejected():
    rows = list(VALID)
    rows[0] = "1110111"
    with pytest.raises(SoLongError) as info:
        validate_map_walls(make(rows))
    assert info.value.code == ExitCode.INVALID_MAP


def test_missing_side_wall_is_rejected():
    rows = list(VALID)
    rows[2] = "00001C1"
    with pytest.raises(SoLongError) as info:
        validate_map_walls(make(rows))
    assert info.value.code == ExitCode.INVALID_MAP


def test_uneven_rows_are_rejected():
    rows = list(VALID)
    rows[2] = "10001C01"
    with pytest.raises(SoLongError) as info:
        validate_map_walls(make(rows))
    assert info.value.code == ExitCode.INVALID_MAP


def test_unknown_sign_is_rejected():
    rows = list(VALID)
    rows[2] = "100X1C1"
    with pytest.raises(SoLongError) as info:
        check_tiles(make(rows))
    assert info.value.code == ExitCode.INVALID_MAP
    assert "incorrect signs" in info.value.message


def test_two_exits_are_rejected():
    rows = list(VALID)
    rows[2] = "1E001C1"
    with pytest.raises(SoLongError) as info:
        validate_map(make(rows))
    assert "exactly 1 exit" in info.value.message


def test_missing_player_is_rejected():
    rows = list(VALID)
    rows[1] = "100C001"
    with pytest.raises(SoLongError) as info:
        validate_map(make(rows))
    assert "starting position" in info.value.message


def test_missing_collectible_is_rejected():
    rows = ["11111", "1P0E1", "11111"]
    game = make(rows)
    check_tiles(game)
    with pytest.raises(SoLongError) as info:
        validate_counts(game)
    assert "at least 1 collectible" in info.value.message


def test_none_game_is_invalid_pointer():
    with pytest.raises(SoLongError) as info:
        validate_map(None)
    assert info.value.code == ExitCode.INVALID_POINTER


def test_check_tiles_does_not_accumulate_between_runs():
    game = make(VALID)
    check_tiles(game)
    check_tiles(game)
    assert game.players == "".join(VALID).count("P")