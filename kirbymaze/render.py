"""Drawing a game onto a pygame surface from tile images."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from kirbymaze.game import Game  # noqa: E402
from kirbymaze.mapfile import COIN, EXIT, WALL  # noqa: E402

TILE_FILES = {
    "wall": "wall.xpm",
    "floor": "ground.xpm",
    "exit": "exit.xpm",
    "coin": "star0.xpm",
    "player": "rkirby0.xpm",
}


class Renderer:
    """Draws walls, floor, coins, the exit and the player as square tiles."""

    def __init__(
        self,
        game: Game,
        asset_dir: Union[str, os.PathLike] = "assets",
        tile_size: int = 64,
    ) -> None:
        self.game = game
        self.asset_dir = Path(asset_dir)
        self.tile_size = tile_size
        self.images: dict[str, pygame.Surface] = {}

    def load_images(self) -> dict[str, pygame.Surface]:
        """Load every tile image; each must be exactly ``tile_size`` square.

        Raises OSError when a file cannot be loaded and ValueError on a wrong size.
        """
        images = {}
        for role, name in TILE_FILES.items():
            path = self.asset_dir / name
            try:
                image = pygame.image.load(os.fspath(path))
            except (pygame.error, OSError) as exc:
                raise OSError(f"XPM Error : check asset directory or file name: {name}") from exc
            if image.get_size() != (self.tile_size, self.tile_size):
                raise ValueError(f"TILE SIZE Error : incorrect tile size: {name}")
            images[role] = image
        self.images = images
        return images

    def _put(self, surface: pygame.Surface, role: str, x: int, y: int) -> None:
        surface.blit(self.images[role], (x * self.tile_size, y * self.tile_size))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the whole map: tiles, then coins, then the exit, then the player."""
        if not self.images:
            self.load_images()
        rows = self.game.map.rows
        width = self.game.map.width
        for y, row in enumerate(rows):
            for x, ch in enumerate(row[:width]):
                self._put(surface, "wall" if ch == WALL else "floor", x, y)
        for overlay, role in ((COIN, "coin"), (EXIT, "exit")):
            for y, row in enumerate(rows):
                for x, ch in enumerate(row[:width]):
                    if ch == overlay:
                        self._put(surface, role, x, y)
        self._put(surface, "player", self.game.player.x, self.game.player.y)