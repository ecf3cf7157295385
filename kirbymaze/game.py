"""Game state and rules: moving the player, collecting coins and reaching the exit."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Optional, TextIO, Union

from kirbymaze.mapfile import (
    COIN,
    EXIT,
    FLOOR,
    WALL,
    GameMap,
    MapError,
    Point,
    parse_map,
    read_lines,
    validate_extension,
)
from kirbymaze.pathing import validate_reachability
from kirbymaze.printf import print_format


class Key(Enum):
    """Player commands."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"
    ESCAPE = "escape"


_STEPS = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


class Game:
    """A running game on a validated map.

    The exit stays hidden (shown as floor) until every coin is collected
    and :meth:`tick` reveals it.
    """

    def __init__(self, game_map: GameMap, out: Optional[TextIO] = None) -> None:
        self.map = game_map
        self.out = sys.stdout if out is None else out
        self.player = game_map.player
        self.exit = self._hide_exit()
        self.coins = game_map.count(COIN)
        self.moves = 0
        self.running = True
        self.won = False

    def _hide_exit(self) -> Point:
        found: Optional[Point] = None
        for y, row in enumerate(self.map.rows):
            for x, ch in enumerate(row):
                if ch == EXIT:
                    found = Point(x, y)
                    row[x] = FLOOR
        if found is None:
            raise MapError("ComponentError : no exit on map")
        return found

    def _close(self) -> None:
        if not self.running:
            return
        print_format("END\n", stream=self.out)
        self.running = False

    def move(self, dx: int, dy: int) -> bool:
        """Step the player by (dx, dy); return False if a wall blocks or the game is over."""
        if not self.running:
            return False
        target = Point(self.player.x + dx, self.player.y + dy)
        if self.map.tile(target) == WALL:
            return False
        self.player = target
        self.moves += 1
        print_format("Moves: %d\n", self.moves, stream=self.out)
        if self.map.tile(target) == COIN:
            self.map.rows[target.y][target.x] = FLOOR
            self.coins -= 1
        if self.map.tile(target) == EXIT and self.coins == 0:
            self.won = True
            print_format("🎉 You win in %d moves!\n", self.moves, stream=self.out)
            self._close()
        return True

    def handle_key(self, key: Key) -> None:
        """Apply a command: ESCAPE ends the game, the others move the player."""
        if key is Key.ESCAPE:
            self._close()
            return
        step = _STEPS.get(key)
        if step is not None:
            self.move(*step)

    def show_door(self) -> None:
        """Reveal the exit if its cell holds floor."""
        if self.map.tile(self.exit) == FLOOR:
            self.map.rows[self.exit.y][self.exit.x] = EXIT

    def tick(self) -> None:
        """Per-frame update: reveal the exit once all coins are collected."""
        if self.coins == 0:
            self.show_door()


def load_game(path: Union[str, os.PathLike], out: Optional[TextIO] = None) -> Game:
    """Read, validate and start a game from a ``.ber`` map file."""
    validate_extension(os.fspath(path))
    game_map = parse_map(read_lines(path))
    validate_reachability(game_map)
    return Game(game_map, out)