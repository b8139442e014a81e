import io

import pytest

from treasure.game import ESCAPE_KEY, Direction, Game
from treasure.gamemap import GameMap

WIN_MAP = ["11111", "1P0C1", "100E1", "11111"]
BLOCKED_MAP = ["111111", "1PEC01", "111111"]


def _game(rows, stream=None):
    return Game(GameMap.from_lines(rows), stream or io.StringIO())


def test_move_onto_floor():
    game = _game(WIN_MAP)
    assert game.move(Direction.RIGHT) is True
    assert game.player == (1, 2)
    assert game.steps == 1
    assert game.map[1, 1] == "0"
    assert game.map[1, 2] == "P"


def test_wall_blocks_move():
    game = _game(WIN_MAP)
    assert game.move("w") is False
    assert game.player == (1, 1)
    assert game.steps == 0
    assert game.map[1, 1] == "P"


def test_move_prints_counter():
    stream = io.StringIO()
    game = _game(WIN_MAP, stream)
    game.move("d")
    game.move("s")
    assert stream.getvalue() == "Moves counter : 1\nMoves counter : 2\n"


def test_blocked_move_prints_nothing():
    stream = io.StringIO()
    game = _game(WIN_MAP, stream)
    game.move("a")
    assert stream.getvalue() == ""


def test_exit_locked_until_coins_collected():
    game = _game(BLOCKED_MAP)
    assert game.next_tile("d") == "E"
    assert game.move("d") is False
    assert game.can_exit is False
    assert game.player == (1, 1)


def test_collect_and_win():
    game = _game(WIN_MAP)
    game.move("d")
    assert game.next_tile("d") == "C"
    game.move("d")
    assert game.collected == game.coins
    assert game.can_exit is True
    assert game.is_open is True
    game.move("s")
    assert game.won is True
    assert game.is_open is False
    assert game.steps == 3
    assert game.map[1, 3] == "0"
    assert game.map[2, 3] == "P"
    assert game.map.count("C") == 0


def test_handle_key_moves():
    game = _game(WIN_MAP)
    assert game.handle_key(ord("d")) is True
    assert game.handle_key("s") is True
    assert game.player == (2, 2)


def test_handle_key_ignores_other_keys():
    game = _game(WIN_MAP)
    assert game.handle_key("x") is False
    assert game.handle_key(-5) is False
    assert game.steps == 0


def test_escape_closes():
    game = _game(WIN_MAP)
    assert game.handle_key(ESCAPE_KEY) is False
    assert game.is_open is False
    assert game.won is False
    assert game.handle_key("d") is False
    assert game.player == (1, 1)


def test_close():
    game = _game(WIN_MAP)
    game.close()
    assert game.is_open is False


def test_invalid_direction():
    game = _game(WIN_MAP)
    with pytest.raises(ValueError):
        game.move("q")


def test_direction_deltas_are_opposites():
    assert Direction.UP.delta == tuple(-v for v in Direction.DOWN.delta)
    assert Direction.LEFT.delta == tuple(-v for v in Direction.RIGHT.delta)
    assert Direction("w") is Direction.UP