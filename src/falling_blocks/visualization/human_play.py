from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, Optional

import pygame

from falling_blocks.game import FallingBlocksGame, GameConfig
from .renderer import Renderer
from .scheduler import GravityScheduler


logger = logging.getLogger(__name__)

Command = Callable[[FallingBlocksGame], None]

MOVE_KEYS: Dict[int, Command] = {
    pygame.K_LEFT: FallingBlocksGame.move_left,
    pygame.K_RIGHT: FallingBlocksGame.move_right,
    pygame.K_DOWN: FallingBlocksGame.soft_drop,
    pygame.K_UP: FallingBlocksGame.rotate,
    pygame.K_SPACE: FallingBlocksGame.rotate,
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_n)


def handle_key(game: FallingBlocksGame, key: int) -> None:
    if key in START_KEYS:
        game.start()
    elif key == pygame.K_p:
        game.toggle_pause()
    elif key in MOVE_KEYS:
        # Movement is only forwarded while the game reports running.
        if game.get_state().running:
            MOVE_KEYS[key](game)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="INFO")
    return p


def run(seed: Optional[int] = None, cell_size: int = 28, fps: int = 60) -> None:
    pygame.init()
    game = FallingBlocksGame(GameConfig(random_seed=seed))
    scheduler = GravityScheduler(game)
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=cell_size)
        rows, cols = game.grid.height, game.grid.width
        screen = pygame.display.set_mode(renderer.window_size(rows, cols))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        handle_key(game, event.key)
                else:
                    scheduler.handle(event)

            renderer.draw(screen, game.get_display_board(), game.get_state(), game.next_piece_shape())
            clock.tick(fps)
    finally:
        scheduler.close()
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[FALLING_BLOCKS] %(asctime)s - %(message)s")
    run(seed=args.seed, cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
