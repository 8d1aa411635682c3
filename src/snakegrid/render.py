from __future__ import annotations

import pygame

from . import config
from .game import Game


def to_coord(game_coord: int, block: int = config.BLOCK_SIZE) -> float:
    return float(game_coord * block)


def to_coord_int(game_coord: int, block: int = config.BLOCK_SIZE) -> int:
    return int(to_coord(game_coord, block))


def draw_rectangle(
    surface: pygame.Surface,
    color,
    x: int,
    y: int,
    width: int,
    height: int,
    block: int = config.BLOCK_SIZE,
) -> None:
    rect = pygame.Rect(to_coord_int(x, block), to_coord_int(y, block), width * block, height * block)
    if len(color) == 4 and color[3] < 255:
        # pygame.draw ignores alpha on plain surfaces, so blend through an overlay.
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(color)
        surface.blit(overlay, rect.topleft)
    else:
        pygame.draw.rect(surface, color, rect)


def draw_block(surface: pygame.Surface, color, x: int, y: int, block: int = config.BLOCK_SIZE) -> None:
    draw_rectangle(surface, color, x, y, 1, 1, block)


def draw_game(surface: pygame.Surface, game: Game, block: int = config.BLOCK_SIZE) -> None:
    for x, y in game.snake_cells():
        draw_block(surface, config.SNAKE_COLOR, x, y, block)

    if game.food_exists:
        fx, fy = game.food
        draw_block(surface, config.FOOD_COLOR, fx, fy, block)

    w, h = game.width, game.height
    draw_rectangle(surface, config.BORDER_COLOR, 0, 0, w, 1, block)
    draw_rectangle(surface, config.BORDER_COLOR, 0, h - 1, w, 1, block)
    draw_rectangle(surface, config.BORDER_COLOR, 0, 0, 1, h, block)
    draw_rectangle(surface, config.BORDER_COLOR, w - 1, 0, 1, h, block)

    if game.game_over:
        draw_rectangle(surface, config.GAMEOVER_COLOR, 0, 0, w, h, block)
