"""Game state: moving the player, collecting coins and reaching the exit."""

from __future__ import annotations

from enum import Enum
from typing import TextIO

from .gamemap import COIN, EXIT, FLOOR, PLAYER, WALL, GameMap

ESCAPE_KEY = 0xFF1B


class Direction(Enum):
    """A move, named by the key that makes it."""

    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        """The (row, column) change this move makes."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
}


class Game:
    """A running game on a map, counting moves and collected coins."""

    def __init__(self, game_map: GameMap, stream: TextIO | None = None) -> None:
        self.map = game_map
        self.player = game_map.find_player()
        self.coins = game_map.count(COIN)
        self.collected = 0
        self.steps = 0
        self.can_exit = False
        self.is_open = True
        self.won = False
        self._stream = stream

    def _target(self, direction: Direction) -> tuple[int, int]:
        row, col = self.player
        d_row, d_col = direction.delta
        return row + d_row, col + d_col

    def next_tile(self, direction: Direction | str) -> str:
        """Return the tile next to the player in ``direction``."""
        return self.map[self._target(Direction(direction))]

    def move(self, direction: Direction | str) -> bool:
        """Move the player one tile; return whether the move was made.

        Walls block every move; the exit blocks until every coin is taken.
        Stepping onto the exit once it is open wins and closes the game.
        """
        direction = Direction(direction)
        tile = self.next_tile(direction)
        if tile == WALL or (not self.can_exit and tile == EXIT):
            return False
        self.steps += 1
        if tile == COIN:
            self.collected += 1
        if self.collected == self.coins:
            self.can_exit = True
        self.map[self.player] = FLOOR
        self.player = self._target(direction)
        print(f"Moves counter : {self.steps}", file=self._stream)
        if self.can_exit and self.map[self.player] == EXIT:
            self.won = True
            self.close()
        self.map[self.player] = PLAYER
        return True

    def handle_key(self, key: int | str) -> bool:
        """React to a key: Escape closes, w/a/s/d move. Return whether a move was made."""
        if not self.is_open:
            return False
        if key == ESCAPE_KEY:
            self.close()
            return False
        try:
            char = chr(key) if isinstance(key, int) else key
            direction = Direction(char)
        except (ValueError, OverflowError):
            return False
        return self.move(direction)

    def close(self) -> None:
        """Close the game window."""
        self.is_open = False