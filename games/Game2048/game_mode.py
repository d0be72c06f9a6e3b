"""
Game2048 Game Mode

Slide the tiles with the arrow keys (or WASD); equal tiles merge. Reaching
2048 wins, but play continues until no move is left.
"""
from typing import List

import numpy as np
import pygame

from cabinet.games import BaseGame, GameState
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import draw_overlay, draw_text
from cabinet.logging import get_logger
from games.Game2048 import board, config

log = get_logger('game2048')


class Game2048(BaseGame):
    """2048 sliding tile puzzle."""

    NAME = "2048"
    DESCRIPTION = "Merge matching tiles to reach 2048."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.best_score = int(self._load_best(config.BEST_SCORE_KEY) or 0)
        self._new_session()

    def _new_session(self) -> None:
        self.grid = board.new_grid(config.GRID_SIZE, self.rng, config.START_TILES, config.FOUR_PROBABILITY)
        self.score = 0
        self.won = False
        self.over = False

    def _get_internal_state(self) -> GameState:
        if self.over:
            return GameState.WON if self.won else GameState.GAME_OVER
        return GameState.PLAYING

    def get_score(self) -> int:
        return self.score

    def move(self, direction: str) -> bool:
        """Slide toward ``direction`` ('left', 'up', 'right', 'down').

        A move that changes the grid scores its merges and adds a tile.

        Returns:
            True if the grid changed
        """
        if self.over:
            return False

        grid, gained, changed = board.move(self.grid, direction)
        if not changed:
            return False

        self.grid = grid
        self.score += gained
        board.add_random_tile(self.grid, self.rng, config.FOUR_PROBABILITY)

        if not self.won and (self.grid >= config.WIN_TILE).any():
            self.won = True
            log.info("Reached %d", config.WIN_TILE)
        if not board.can_move(self.grid):
            self.over = True

        if self.score > self.best_score:
            self.best_score = self.score
            self._record_best(config.BEST_SCORE_KEY, self.score)
        return True

    def load_grid(self, rows: List[List[int]]) -> None:
        """Replace the grid (setups for tests and demos)."""
        self.grid = np.array(rows, dtype=int)
        self.won = bool((self.grid >= config.WIN_TILE).any())
        self.over = not board.can_move(self.grid)

    def handle_input(self, events: List[InputEvent]) -> None:
        for event in self.input.process(events):
            direction = self.input.action_for(event.key)
            if direction is not None:
                self.move(direction)

    def reset(self) -> None:
        super().reset()
        self._new_session()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        draw_text(screen, "2048", (20, 20), 72, config.DARK_TEXT)
        draw_text(screen, f"Score {self.score}", (screen.get_width() - 180, 30), 30, config.DARK_TEXT)
        draw_text(screen, f"Best {self.best_score}", (screen.get_width() - 180, 62), 26, config.DARK_TEXT)

        size, gap = config.TILE_SIZE, config.TILE_GAP
        n = config.GRID_SIZE
        outer = pygame.Rect(20, config.BOARD_TOP, n * size + (n + 1) * gap, n * size + (n + 1) * gap)
        pygame.draw.rect(screen, config.BOARD_COLOR, outer, border_radius=6)

        for r in range(n):
            for c in range(n):
                value = int(self.grid[r, c])
                rect = pygame.Rect(outer.x + gap + c * (size + gap), outer.y + gap + r * (size + gap), size, size)
                color = config.TILE_COLORS.get(value, config.SUPER_TILE_COLOR) if value else config.EMPTY_COLOR
                pygame.draw.rect(screen, color, rect, border_radius=4)
                if value:
                    text_color = config.DARK_TEXT if value <= 4 else config.LIGHT_TEXT
                    font_size = 56 if value < 100 else 46 if value < 1000 else 36
                    draw_text(screen, str(value), rect.center, font_size, text_color, center=True)

        if self.over:
            draw_overlay(screen, outer, "You win!" if self.won else "Game over", "R to play again")
