# treasure

The rules and data handling of a small tile-based puzzle game. A player
walks around a rectangular map, picks up every coin, and then leaves
through the exit. Each step is counted and printed.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## Map files

A map is a plain text file, one row per line, made only of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `C`  | coin         |
| `E`  | exit         |
| `P`  | player start |

`GameMap.validate()` raises `MapError` when the map:

- is empty or holds any other character,
- has no coin, no exit or no player, or more than one player,
- is not rectangular,
- is not closed in by walls on every edge.

Example:

```
1111111
1P0C0E1
1111111
```

## Playing a game from code

```python
from treasure.gamemap import GameMap
from treasure.game import Game, Direction

game_map = GameMap.load("level.ber")
game_map.validate()
game = Game(game_map)
game.move(Direction.RIGHT)      # or game.move("d")
print(game.steps, game.collected, game.can_exit, game.won)
```

- `Game.move(direction)` returns whether the move was made. Walls always
  block; the exit blocks until every coin has been collected. Each move
  made prints `Moves counter : N` (to standard output, or to the stream
  given to `Game`). Stepping onto the open exit sets `won` and closes the
  game.
- `Game.handle_key(key)` takes a key code or character: `w`, `a`, `s`, `d`
  move up, left, down and right, and Escape (`0xFF1B`) closes the game.
- `Game.next_tile(direction)` returns the tile beside the player.
- `GameMap` also offers `find_player()`, `count(tile)`, indexing by
  `(row, column)` and `window_size(tile_size=48)`, the pixel size of a
  window that would show the whole map.

## Other modules

- `treasure.xpm`: `read_xpm(path)` and `parse_xpm(lines)` decode XPM images
  into an `XpmImage` (`pixel(x, y)`, `to_bytes(bytes_per_pixel, big_endian)`);
  helpers `strip_comments`, `quoted_strings`, `split_words` and
  `find_outside_quotes`. Errors raise `XpmError`.
- `treasure.colors`: `lookup_color(name, qualifier)` resolves `#RRGGBB` and
  X11 colour names (`"none"` is -1, unknown names 0);
  `to_visual_color(color, depth, shifts)` converts a colour to a pixel value
  for a TrueColor visual.
- `treasure.chars`: character tests (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), `to_lower`, `to_upper`, C-style `atoi`, `itoa`.
- `treasure.strings`: `find_char`, `rfind_char`, `strncmp`, `strnstr`,
  `strjoin`, `substr`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`,
  `strlcat`.
- `treasure.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on byte buffers.
- `treasure.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` writing
  to a text stream.
- `treasure.linkedlist`: `LinkedList` of `Node`s with `push_front`,
  `append`, `last`, `clear`, `for_each`, `map`, iteration and `len`.

## What it does not do

The package has no game window and no command to start a game: nothing
draws the map or the tile images on screen or reads the keyboard. It
provides the map, the rules and the image decoding for a program that
does.

## Running the tests

```
pip install .[test]
pytest
```