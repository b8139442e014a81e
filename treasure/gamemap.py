"""Loading, validating and querying tile maps."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
TILES = frozenset((WALL, FLOOR, COIN, EXIT, PLAYER))
TILE_SIZE = 48


class MapError(ValueError):
    """Raised when a map cannot be read or breaks the map rules."""


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline.

    A final line without a newline is kept as it is; an empty file gives
    no lines.
    """
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as error:
        raise MapError(f"cannot open {path}: {error.strerror}") from error
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


@dataclass
class GameMap:
    """A grid of tiles, stored as rows of single-character tiles."""

    rows: list[list[str]]
    path: str | None = None

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Build a map from text lines, dropping their trailing newlines."""
        return cls([list(line.removesuffix("\n")) for line in lines])

    @classmethod
    def load(cls, path: str | PathLike[str]) -> GameMap:
        """Read a map file. The map is not validated."""
        game_map = cls.from_lines(read_lines(path))
        game_map.path = os.fspath(path)
        return game_map

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def _check_position(self, position: tuple[int, int]) -> tuple[int, int]:
        row, col = position
        if not (0 <= row < len(self.rows) and 0 <= col < len(self.rows[row])):
            raise IndexError(f"position {position} lies outside the map")
        return row, col

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = self._check_position(position)
        return self.rows[row][col]

    def __setitem__(self, position: tuple[int, int], tile: str) -> None:
        row, col = self._check_position(position)
        self.rows[row][col] = tile

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)

    def validate(self) -> None:
        """Check the map rules, raising MapError at the first one broken.

        Only the tiles 0, 1, C, E and P may appear; there must be at least
        one collectible and one exit and exactly one start position; all
        rows must be the same length; and walls must enclose the map.
        """
        if not self.rows:
            raise MapError("map is empty")
        for r, row in enumerate(self.rows):
            for c, tile in enumerate(row):
                if tile not in TILES:
                    raise MapError(f"unknown tile {tile!r} at row {r}, column {c}")
        for tile, name in ((COIN, "collectible"), (EXIT, "exit"), (PLAYER, "start position")):
            if not self.count(tile):
                raise MapError(f"map has no {name}")
        if self.count(PLAYER) > 1:
            raise MapError("map has more than one start position")
        width = len(self.rows[0])
        if any(len(row) != width for row in self.rows):
            raise MapError("map is not rectangular")
        if any(tile != WALL for tile in self.rows[0]) or any(
            tile != WALL for tile in self.rows[-1]
        ):
            raise MapError("map is not enclosed by walls")
        for row in self.rows[1:-1]:
            if row[0] != WALL or row[-1] != WALL:
                raise MapError("map is not enclosed by walls")

    def find_player(self) -> tuple[int, int]:
        """Return (row, column) of the start position; the last one wins."""
        found = None
        for r, row in enumerate(self.rows):
            for c, tile in enumerate(row):
                if tile == PLAYER:
                    found = (r, c)
        if found is None:
            raise MapError("map has no start position")
        return found

    def count(self, tile: str) -> int:
        """Return how many times ``tile`` appears in the map."""
        return sum(row.count(tile) for row in self.rows)

    def window_size(self, tile_size: int = TILE_SIZE) -> tuple[int, int]:
        """Return (width, height) in pixels of a window showing the whole map."""
        return self.width * tile_size, self.height * tile_size