import pytest

from treasure.gamemap import GameMap, MapError, read_lines

VALID = "11111\n1P0C1\n100E1\n11111\n"


def _write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_bytes(text.encode("latin-1"))
    return path


def test_read_lines_keeps_line_ends(tmp_path):
    path = _write(tmp_path, "11\n22")
    assert read_lines(path) == ["11\n", "22"]


def test_read_lines_trailing_newline(tmp_path):
    path = _write(tmp_path, VALID)
    lines = read_lines(path)
    assert "".join(lines) == VALID
    assert all(line.endswith("\n") for line in lines)


def test_read_lines_empty_file(tmp_path):
    assert read_lines(_write(tmp_path, "")) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_lines(tmp_path / "absent.ber")


def test_load_round_trip(tmp_path):
    path = _write(tmp_path, VALID)
    game_map = GameMap.load(path)
    game_map.validate()
    assert str(game_map) == VALID.rstrip("\n")
    assert game_map.path == str(path)


def test_load_without_final_newline(tmp_path):
    game_map = GameMap.load(_write(tmp_path, VALID.rstrip("\n")))
    game_map.validate()
    assert game_map.height == len(VALID.splitlines())


@pytest.mark.parametrize(
    "text",
    [
        "",
        "11111\n1PXC1\n100E1\n11111\n",
        "11111\n1P001\n100E1\n11111\n",
        "11111\n1P0C1\n10001\n11111\n",
        "11111\n100C1\n100E1\n11111\n",
        "11111\n1PPC1\n100E1\n11111\n",
        "11111\n1P0C1\n100E11\n11111\n",
        "10111\n1P0C1\n100E1\n11111\n",
        "11111\n1P0C1\n100E1\n11011\n",
        "11111\n0P0C1\n100E1\n11111\n",
        "11111\n1P0C0\n100E1\n11111\n",
    ],
)
def test_validate_rejects_bad_maps(text):
    with pytest.raises(MapError):
        GameMap.from_lines(text.splitlines(keepends=True)).validate()


def test_validate_allows_several_exits():
    game_map = GameMap.from_lines("111111\n1PEC01\n1000E1\n111111\n".splitlines())
    game_map.validate()
    assert game_map.count("E") == 2


def test_find_player():
    game_map = GameMap.from_lines(VALID.splitlines())
    assert game_map.find_player() == (1, 1)
    assert game_map[game_map.find_player()] == "P"


def test_find_player_last_wins():
    game_map = GameMap.from_lines(["1P1", "1P1"])
    assert game_map.find_player() == (1, 1)


def test_find_player_missing():
    with pytest.raises(MapError):
        GameMap.from_lines(["111"]).find_player()


def test_count_tiles():
    game_map = GameMap.from_lines(VALID.splitlines())
    assert game_map.count("C") == 1
    total = sum(game_map.count(tile) for tile in "01CEP")
    assert total == game_map.width * game_map.height


def test_window_size():
    game_map = GameMap.from_lines(VALID.splitlines())
    assert game_map.window_size(1) == (game_map.width, game_map.height)
    assert game_map.window_size() == game_map.window_size(48)
    assert game_map.window_size() == (240, 192)


def test_setitem_and_bounds():
    game_map = GameMap.from_lines(VALID.splitlines())
    game_map[1, 2] = "C"
    assert game_map.count("C") == 2
    with pytest.raises(IndexError):
        game_map[-1, 0]
    with pytest.raises(IndexError):
        game_map[0, 5]