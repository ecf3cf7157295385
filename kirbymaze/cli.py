"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from kirbymaze.game import Game, Key, load_game
from kirbymaze.mapfile import MapError
from kirbymaze.printf import print_format

ASSET_DIR = Path("assets")
TILE_SIZE = 64
WINDOW_TITLE = "KIRBY"
FRAME_RATE = 60


def _fail(message: str) -> int:
    sys.stderr.write("\033[31mError\n\033[0m")
    sys.stderr.write(message + "\n")
    return 1


def _run(game: Game) -> int:
    from kirbymaze.render import Renderer, pygame

    keys = {
        pygame.K_w: Key.UP,
        pygame.K_s: Key.DOWN,
        pygame.K_a: Key.LEFT,
        pygame.K_d: Key.RIGHT,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        renderer = Renderer(game, ASSET_DIR, TILE_SIZE)
        screen = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            renderer.load_images()
        except (OSError, ValueError) as exc:
            return _fail(str(exc))
        renderer.draw(screen)
        pygame.display.flip()
        print_format("\033[1;33m== Start Game ==\033[0m\n", stream=game.out)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.handle_key(Key.ESCAPE)
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    game.handle_key(keys[event.key])
            game.tick()
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail("UsageError : kirbymaze map.ber")
    try:
        game = load_game(args[0], sys.stdout)
    except MapError as exc:
        return _fail(str(exc))
    return _run(game)


if __name__ == "__main__":
    sys.exit(main())