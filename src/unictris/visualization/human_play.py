from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from unictris.game import GameConfig, GameEngine, Intent
from .renderer import Renderer


KEY_TO_INTENT: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_UP: Intent.ROTATE,
    pygame.K_RETURN: Intent.HARD_DROP,
    pygame.K_SPACE: Intent.PAUSE,
    pygame.K_p: Intent.PAUSE,
}

QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


def run(seed: Optional[int] = None, ticks_per_second: int = 100) -> GameEngine:
    """Play until game over or quit; returns the finished engine."""
    game = GameEngine(GameConfig(random_seed=seed))
    renderer = Renderer()

    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size(game.board.width, game.board.height))
        pygame.display.set_caption("Unictris")
        clock = pygame.time.Clock()

        running = True
        while running and game.tick():
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in QUIT_KEYS:
                        running = False
                    else:
                        intent = KEY_TO_INTENT.get(event.key)
                        if intent is not None:
                            game.apply(intent)

            renderer.draw(screen, game)
            clock.tick(ticks_per_second)
    finally:
        pygame.quit()
    return game


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Unictris")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tps", type=int, default=100, help="Engine ticks per second")
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    game = run(seed=args.seed, ticks_per_second=args.tps)
    print(f"Score: {game.score}; Level: {game.level}")


if __name__ == "__main__":  # pragma: no cover
    main()
