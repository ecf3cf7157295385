"""Reachability checks for map grids."""

from __future__ import annotations

from collections.abc import Sequence

from kirbymaze.mapfile import COIN, EXIT, FLOOR, WALL, GameMap, MapError, Point

_UNREACHABLE = {
    COIN: "PathError: unreachable coin found",
    EXIT: "PathError: unreachable exit found",
    FLOOR: "PathError: unreachable tile found",
}


def flood_fill(rows: Sequence[Sequence[str]], start: Point) -> set[Point]:
    """Cells reachable from ``start`` through four-way steps that avoid walls.

    The grid width is taken from the first row.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    reached: set[Point] = set()
    pending = [start]
    while pending:
        point = pending.pop()
        if not (0 <= point.x < width and 0 <= point.y < height):
            continue
        if point in reached or rows[point.y][point.x] == WALL:
            continue
        reached.add(point)
        pending.extend(
            (
                Point(point.x + 1, point.y),
                Point(point.x - 1, point.y),
                Point(point.x, point.y + 1),
                Point(point.x, point.y - 1),
            )
        )
    return reached


def validate_reachability(game_map: GameMap) -> None:
    """Require every coin, exit and floor cell to be reachable from the player.

    Cells are checked row by row; the first unreachable one is reported.
    """
    reached = flood_fill(game_map.rows, game_map.player)
    for y, row in enumerate(game_map.rows):
        for x, ch in enumerate(row[: game_map.width]):
            message = _UNREACHABLE.get(ch)
            if message is not None and Point(x, y) not in reached:
                raise MapError(message)