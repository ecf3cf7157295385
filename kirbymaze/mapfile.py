"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from kirbymaze.libft.strings import strncmp, strrchr

MAP_EXTENSION = ".ber"

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"

VALID_TILES = frozenset((WALL, FLOOR, COIN, EXIT, PLAYER))


class MapError(Exception):
    """Raised when a map file cannot be read or does not describe a valid map."""


@dataclass(frozen=True)
class Point:
    """A cell position: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


@dataclass
class GameMap:
    """A validated map grid with the player's starting cell.

    The player's cell holds floor; the player position is kept in ``player``.
    """

    rows: list[list[str]]
    player: Point
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.height = len(self.rows)
        self.width = len(self.rows[0]) if self.rows else 0

    def count(self, char: str) -> int:
        """Number of cells holding ``char``."""
        return sum(row.count(char) for row in self.rows)

    def tile(self, point: Point) -> str:
        """The character at ``point``; raises IndexError outside the grid."""
        if not (0 <= point.x < self.width and 0 <= point.y < self.height):
            raise IndexError(f"{point} lies outside a {self.width}x{self.height} map")
        return self.rows[point.y][point.x]


def validate_extension(filename: str) -> None:
    """Require the text after the last '.' in ``filename`` to start with '.ber'."""
    dot = strrchr(filename, ".")
    if dot is None or strncmp(filename[dot:], MAP_EXTENSION, len(MAP_EXTENSION)) != 0:
        raise MapError("ExtensionError : file must end with .ber")


def validate_characters(line: str) -> None:
    """Require every character of ``line`` to be a known tile."""
    if any(ch not in VALID_TILES for ch in line):
        raise MapError("CharacterError : invalid character in map")


def validate_length(line: str, expected: int) -> None:
    """Require ``line`` to be ``expected`` characters long."""
    if len(line) != expected:
        raise MapError("LengthError : inconsistent row width in map")


def validate_wall(rows: Sequence[Sequence[str]], row: int) -> None:
    """Check that row ``row`` of ``rows`` is closed by walls.

    The first and last rows must be walls throughout; the others must
    start and end with a wall.
    """
    width = len(rows[0])
    line = rows[row]
    if row == 0 or row == len(rows) - 1:
        if any(ch != WALL for ch in line[:width]):
            raise MapError("WallError : top/bottom wall must be closed")
    elif width == 0 or line[0] != WALL or line[width - 1] != WALL:
        raise MapError("WallError : sides must be closed by walls")


def read_lines(path: Union[str, os.PathLike]) -> list[str]:
    """Read the lines of a map file without their line terminators.

    A final newline does not start another line; blank lines elsewhere are kept.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("FileError : failed to open map") from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_map(lines: Iterable[str]) -> GameMap:
    """Validate map lines and build a :class:`GameMap`.

    The first line fixes the width. Every later line must hold only tile
    characters and match that width. The grid must be walled in and hold
    exactly one player, at least one coin and exactly one exit.
    """
    lines = list(lines)
    if not lines:
        raise MapError("MapError : map file is empty")
    width = len(lines[0])
    for line in lines[1:]:
        validate_characters(line)
        validate_length(line, width)

    rows = [list(line) for line in lines]
    player: Optional[Point] = None
    coins = 0
    exits = 0
    for y, row in enumerate(rows):
        validate_wall(rows, y)
        for x, ch in enumerate(row):
            if ch == PLAYER:
                if player is not None:
                    raise MapError("ComponentError : more than one player")
                player = Point(x, y)
                row[x] = FLOOR
            elif ch == COIN:
                coins += 1
            elif ch == EXIT:
                exits += 1

    if player is None:
        raise MapError("ComponentError : player not found")
    if coins < 1:
        raise MapError("ComponentError : no coins on map")
    if exits < 1:
        raise MapError("ComponentError : no exit on map")
    if exits > 1:
        raise MapError("ComponentError : more than one exit")
    return GameMap(rows, player)