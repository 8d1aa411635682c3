from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from . import config
from .game import Game, Key
from .render import draw_game, to_coord_int

logger = logging.getLogger(__name__)

KEY_MAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def translate_key(pg_key: int) -> Key:
    return KEY_MAP.get(pg_key, Key.OTHER)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snakegrid", description="Grid snake game.")
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Arena width in cells, walls included.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Arena height in cells, walls included.")
    parser.add_argument("--block-size", type=int, default=config.BLOCK_SIZE, help="Pixels per cell.")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Frame rate cap.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Initial snake spans x=2..4 and food sits at (6, 4); both need to be inside the walls.
    if args.width < 8 or args.height < 6:
        parser.error("arena must be at least 8x6 cells")
    if args.block_size < 1 or args.fps < 1:
        parser.error("--block-size and --fps must be positive")
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode(
        (to_coord_int(args.width, args.block_size), to_coord_int(args.height, args.block_size))
    )
    pygame.display.set_caption(config.TITLE)
    clock = pygame.time.Clock()

    game = Game(args.width, args.height, rng=random.Random(args.seed))
    logger.info("starting %dx%d arena (seed=%s)", args.width, args.height, args.seed)

    while True:
        dt = clock.tick(args.fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN:
                game.handle_key(translate_key(event.key))

        screen.fill(config.BACK_COLOR)
        draw_game(screen, game, args.block_size)
        pygame.display.flip()

        game.tick(dt)


if __name__ == "__main__":
    main()
