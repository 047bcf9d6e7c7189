import pytest

from solong.errors import ExitCode, SoLongError
from solong.mapfile import count_map_rows, load_map, read_rows

LINES = ["1111111", "1P0C0E1", "1111111"]


def write(tmp_path, data, name="level.ber"):
    path = tmp_path / name
    path.write_bytes(data)
    return str(path)


def test_count_rows_with_trailing_newline(tmp_path):
    path = write(tmp_path, ("\n".join(LINES) + "\n").encode())
    assert count_map_rows(path) == len(LINES)


def test_count_rows_without_trailing_newline(tmp_path):
    path = write(tmp_path, "\n".join(LINES).encode())
    assert count_map_rows(path) == len(LINES)


def test_single_line_without_newline_is_invalid(tmp_path):
    path = write(tmp_path, b"11111")
    with pytest.raises(SoLongError) as info:
        count_map_rows(path)
    assert info.value.code == ExitCode.INVALID_MAP


def test_empty_file_counts_one_row(tmp_path):
    path = write(tmp_path, b"")
    assert count_map_rows(path) == 1


def test_count_large_file_spanning_chunks(tmp_path):
    lines = ["1" * 50] * 200
    path = write(tmp_path, "\n".join(lines).encode())
    assert count_map_rows(path) == len(lines)


def test_count_missing_file(tmp_path):
    with pytest.raises(SoLongError) as info:
        count_map_rows(str(tmp_path / "absent.ber"))
    assert info.value.code == ExitCode.FD_FAIL


def test_count_none_path():
    with pytest.raises(SoLongError) as info:
        count_map_rows(None)
    assert info.value.code == ExitCode.INVALID_POINTER


def test_read_rows_strips_newlines(tmp_path):
    path = write(tmp_path, ("\n".join(LINES) + "\n").encode())
    assert read_rows(path, len(LINES)) == LINES


def test_read_rows_keeps_carriage_returns(tmp_path):
    path = write(tmp_path, b"111\r\n1P1\r\n")
    assert read_rows(path, 2) == ["111\r", "1P1\r"]


def test_read_rows_stops_at_expected(tmp_path):
    path = write(tmp_path, "\n".join(LINES).encode())
    assert read_rows(path, 2) == LINES[:2]


def test_read_rows_too_few(tmp_path):
    path = write(tmp_path, "\n".join(LINES).encode())
    with pytest.raises(SoLongError) as info:
        read_rows(path, len(LINES) + 1)
    assert info.value.code == ExitCode.INVALID_MAP


def test_read_rows_blank_line_is_empty_row(tmp_path):
    path = write(tmp_path, b"111\n\n111\n")
    assert read_rows(path, 3) == ["111", "", "111"]


def test_load_map_round_trip(tmp_path):
    path = write(tmp_path, ("\n".join(LINES) + "\n").encode())
    game = load_map(path)
    assert game.render() == "\n".join(LINES)
    assert game.name == path
    assert game.height == len(LINES)
    assert game.width == len(LINES[0])


def test_load_map_accepts_path_objects(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes("\n".join(LINES).encode())
    game = load_map(path)
    assert game.name == str(path)
    assert game.tile(1, 1) == "P"


def test_load_empty_file_is_invalid(tmp_path):
    path = write(tmp_path, b"")
    with pytest.raises(SoLongError) as info:
        load_map(path)
    assert info.value.code == ExitCode.INVALID_MAP


def test_load_missing_file(tmp_path):
    with pytest.raises(SoLongError) as info:
        load_map(str(tmp_path / "absent.ber"))
    assert info.value.code == ExitCode.FD_FAIL


def test_load_none():
    with pytest.raises(SoLongError) as info:
        load_map(None)
    assert info.value.code == ExitCode.INVALID_POINTER