"""Shared pygame drawing helpers (text, overlays, colors)."""
from functools import lru_cache
from typing import Tuple

import pygame

Color = Tuple[int, int, int]

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (156, 163, 175)
DARK = (31, 41, 55)
YELLOW = (250, 204, 21)
RED = (239, 68, 68)
GREEN = (34, 197, 94)
BLUE = (59, 130, 246)


@lru_cache(maxsize=16)
def get_font(size: int) -> pygame.font.Font:
    """Default font at a size (cached; pygame.font must be initialized)."""
    return pygame.font.Font(None, size)


def draw_text(
    screen: pygame.Surface,
    text: str,
    pos: Tuple[float, float],
    size: int = 28,
    color: Color = WHITE,
    center: bool = False,
) -> pygame.Rect:
    """Draw a line of text; ``pos`` is the top-left, or the center if ``center``."""
    surface = get_font(size).render(text, True, color)
    rect = surface.get_rect()
    if center:
        rect.center = (int(pos[0]), int(pos[1]))
    else:
        rect.topleft = (int(pos[0]), int(pos[1]))
    screen.blit(surface, rect)
    return rect


def draw_overlay(
    screen: pygame.Surface,
    area: pygame.Rect,
    title: str,
    subtitle: str = "",
    alpha: int = 170,
) -> None:
    """Dim an area and print a centered title (pause, game over, start)."""
    shade = pygame.Surface(area.size, pygame.SRCALPHA)
    shade.fill((0, 0, 0, alpha))
    screen.blit(shade, area.topleft)
    draw_text(screen, title, (area.centerx, area.centery - 20), 56, WHITE, center=True)
    if subtitle:
        draw_text(screen, subtitle, (area.centerx, area.centery + 25), 26, GRAY, center=True)
