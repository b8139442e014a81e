"""Reading XPM images into pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from .chars import atoi
from .colors import lookup_color

_TRANSPARENT = -1
_TRANSPARENT_PIXEL = 0xFF000000
_BLANKS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: rows of 0xRRGGBB pixel values.

    Transparent pixels hold 0xFF000000.
    """

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the value of the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside {self.width}x{self.height}")
        return self.pixels[y][x]

    def to_bytes(self, bytes_per_pixel: int = 4, big_endian: bool = False) -> bytes:
        """Pack the pixels row by row, ``bytes_per_pixel`` bytes each."""
        if bytes_per_pixel < 1:
            raise ValueError("bytes_per_pixel must be at least 1")
        mask = (1 << (8 * bytes_per_pixel)) - 1
        order = "big" if big_endian else "little"
        return b"".join(
            (value & mask).to_bytes(bytes_per_pixel, order)
            for row in self.pixels
            for value in row
        )


def find_outside_quotes(text: str, needle: str) -> int | None:
    """Return the first index of ``needle`` not inside double quotes, or ``None``."""
    if not needle:
        raise ValueError("needle must not be empty")
    limit = len(text) - len(needle) + 1
    inside = False
    for position, char in enumerate(text[:max(limit, 0)]):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(needle, position):
            return position
    return None


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    Block comments are blanked through their closing ``*/``; line comments
    through their newline. The text keeps its length.
    """
    while (begin := find_outside_quotes(text, "/*")) is not None:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end < 0 else end + 2)
    while (begin := find_outside_quotes(text, "//")) is not None:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end < 0 else end + 1)
    return text


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return [word for word in _BLANKS.split(text) if word]


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text`` in turn."""
    position = 0
    while True:
        start = text.find('"', position)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        position = end + 1


def _color_entry(line: str, chars_per_pixel: int) -> tuple[str, int]:
    words = split_words(line[chars_per_pixel:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour definition without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour definition without a colour: {line!r}")
    qualifier = words[index + 1] if index + 1 < len(words) else None
    return line[:chars_per_pixel], lookup_color(words[index], qualifier)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM strings: the header, the colour table, then the pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header must give width, height, colours and characters per pixel")
    width, height, color_count, chars_per_pixel = (atoi(word) for word in header[:4])
    if min(width, height, color_count, chars_per_pixel) <= 0:
        raise XpmError("header values must be positive")

    # Short keys are looked up in a direct table where later definitions win;
    # longer keys are searched in definition order, so the first one wins.
    later_wins = chars_per_pixel <= 2
    palette: dict[str, int] = {}
    for _ in range(color_count):
        key, value = _color_entry(next_line("colour definition"), chars_per_pixel)
        if later_wins or key not in palette:
            palette[key] = value

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * chars_per_pixel:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            key = line[x * chars_per_pixel:(x + 1) * chars_per_pixel]
            value = palette.get(key, 0)
            row.append(_TRANSPARENT_PIXEL if value == _TRANSPARENT else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def read_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as error:
        raise XpmError(f"cannot read {path}: {error}") from error
    return parse_xpm(quoted_strings(strip_comments(text)))