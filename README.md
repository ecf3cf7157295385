# kirbymaze

A small tile-based maze game. You walk a character through a walled map,
pick up every star, and once the last one is collected the exit opens.
Reach it to win. The number of moves is printed as you go.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
kirbymaze path/to/level.ber
```

The command takes exactly one argument, a map file whose name ends in
`.ber`. It opens a window titled `KIRBY`, 64 pixels per map cell, and
prints `== Start Game ==` when play begins.

Controls:

| Key     | Action      |
|---------|-------------|
| W       | move up     |
| S       | move down   |
| A       | move left   |
| D       | move right  |
| Esc     | quit        |

Closing the window also quits, printing `END`. Each step that is not
blocked by a wall prints `Moves: N`. The exit is drawn as floor until the
last star has been picked up; stepping onto it after that prints
`🎉 You win in N moves!` followed by `END`, and the game ends.

On any error the command writes `Error` and a message to standard error
and exits with status 1.

### Tile images

Tiles are loaded with pygame from an `assets` directory in the current
working directory. Each must be 64×64 pixels:

- `wall.xpm` – walls
- `ground.xpm` – floor
- `exit.xpm` – the exit
- `star0.xpm` – stars
- `rkirby0.xpm` – the player

The package does not ship these images; you supply them. A missing image,
or one of the wrong size, stops the game with an error.

## Map format

A map is a plain text file, one row per line, built from these characters:

| Char | Meaning             |
|------|---------------------|
| `1`  | wall                |
| `0`  | empty floor         |
| `C`  | collectible (star)  |
| `E`  | exit                |
| `P`  | player start        |

Example:

```
1111111
1P0C0E1
1000001
1111111
```

A map is rejected when:

- the file name does not end in `.ber`, or the file cannot be opened;
- the file is empty;
- it contains any character other than the five above;
- its rows are not all the same length as the first;
- it is not enclosed: the first and last rows must be all `1`, and every
  other row must start and end with `1`;
- it has no player or more than one, no star, or not exactly one exit;
- any star, the exit or any floor cell cannot be reached from the
  player's start by steps up, down, left or right.

## Using it as a library

The map loading, validation and game rules work without a window:

```python
import io

from kirbymaze.game import Key, load_game

out = io.StringIO()
game = load_game("level.ber", out)
game.move(1, 0)              # one step right; False if a wall blocks it
game.handle_key(Key.DOWN)    # the same through a command
game.tick()                  # shows the exit once every star is collected
print(game.moves, game.coins, game.won, game.running)
print(out.getvalue())
```

- `kirbymaze.mapfile`: `read_lines`, `parse_map` and the checks
  `validate_extension`, `validate_characters`, `validate_length`,
  `validate_wall`; the `GameMap` and `Point` types. Map problems are
  raised as `MapError`.
- `kirbymaze.pathing`: `flood_fill` (the set of cells reachable from a
  start) and `validate_reachability`.
- `kirbymaze.game`: `Game`, `Key` and `load_game`.
- `kirbymaze.render`: `Renderer`, which loads the tile images and draws a
  game onto a pygame surface.
- `kirbymaze.printf`: `render_format` and `print_format`, a small
  formatter understanding `%c %s %d %i %u %x %X %p %%`, and `itoa_base`.
- `kirbymaze.libft`: character helpers (`chars`), string helpers
  (`strings`), stream output helpers (`output`) and a singly linked list
  (`linked_list`).

## What it does not do

There are no sprite animations, no enemies, no on-screen move counter and
no saving of progress; moves are reported only on standard output.