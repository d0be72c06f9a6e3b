"""
PuzzleMaster Game Mode

Classic 8- and 15-puzzle. Click a tile next to the gap to slide it. Press
3 or 4 to switch board size, R to reshuffle.
"""
from typing import Any, Dict, List, Optional

import pygame

from cabinet.games import BaseGame, GameState
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import draw_overlay, draw_text
from cabinet.logging import get_logger
from games.PuzzleMaster import config
from games.PuzzleMaster.puzzle import SlidingPuzzle

log = get_logger('puzzle_master')


def best_key(size: int) -> str:
    return f"{config.BEST_KEY_PREFIX}{size}"


def is_better(moves: int, seconds: float, best: Optional[Dict[str, Any]]) -> bool:
    """Fewer moves wins; equal moves compare time."""
    if best is None:
        return True
    if moves != best['moves']:
        return moves < best['moves']
    return seconds < best['time']


class PuzzleMasterGame(BaseGame):
    """Sliding tile puzzle with per-size best results."""

    NAME = "Puzzle Master"
    DESCRIPTION = "Slide the numbered tiles back into order."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    ARGUMENTS = [
        {
            'name': '--size',
            'type': int,
            'default': config.DEFAULT_SIZE,
            'choices': list(config.SIZES),
            'help': 'Board size (3 = 8-puzzle, 4 = 15-puzzle)'
        },
    ]

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, size: int = config.DEFAULT_SIZE, **kwargs):
        if size not in config.SIZES:
            raise ValueError(f"Unsupported puzzle size {size}; choose from {config.SIZES}")
        super().__init__(**kwargs)
        self.puzzle = SlidingPuzzle(size)
        self._new_session()

    def _new_session(self) -> None:
        self.puzzle.shuffle(config.SHUFFLE_MOVES[self.size], self.rng)
        self.moves = 0
        self.elapsed = 0.0
        self.solved = False
        self.best = self._load_best_result(self.size)

    @property
    def size(self) -> int:
        return self.puzzle.size

    def _load_best_result(self, size: int) -> Optional[Dict[str, Any]]:
        """Stored best as {'moves', 'time'}; anything malformed reads as None."""
        value = self.store.get(best_key(size))
        if not isinstance(value, dict):
            return None
        moves, seconds = value.get('moves'), value.get('time')
        if not isinstance(moves, int) or not isinstance(seconds, (int, float)):
            log.warning("Ignoring malformed best result for size %d: %r", size, value)
            return None
        return {'moves': moves, 'time': float(seconds)}

    def _get_internal_state(self) -> GameState:
        return GameState.WON if self.solved else GameState.PLAYING

    def get_score(self) -> int:
        return self.moves

    def set_size(self, size: int) -> bool:
        if size not in config.SIZES or size == self.size:
            return False
        self.puzzle = SlidingPuzzle(size)
        self.reset()
        return True

    def click_tile(self, index: int) -> bool:
        """Slide the tile at ``index``; counts a move and checks for the win."""
        if self.solved or not self.puzzle.slide(index):
            return False
        self.moves += 1
        if self.puzzle.is_solved():
            self.solved = True
            self._on_solved()
        return True

    def _on_solved(self) -> None:
        seconds = round(self.elapsed, 1)
        log.info("Solved %dx%d in %d moves, %.1fs", self.size, self.size, self.moves, seconds)
        if is_better(self.moves, seconds, self.best):
            self.best = {'moves': self.moves, 'time': seconds}
            self.store.set(best_key(self.size), self.best)

    def tile_at(self, x: float, y: float) -> Optional[int]:
        cell = config.BOARD_SIZE / self.size
        col = int((x - config.BOARD_LEFT) // cell)
        row = int((y - config.BOARD_TOP) // cell)
        if x < config.BOARD_LEFT or y < config.BOARD_TOP or not (0 <= col < self.size and 0 <= row < self.size):
            return None
        return row * self.size + col

    def handle_input(self, events: List[InputEvent]) -> None:
        for event in self.input.process(events):
            if event.is_click:
                index = self.tile_at(event.position.x, event.position.y)
                if index is not None:
                    self.click_tile(index)
            elif event.key in ('3', '4'):
                self.set_size(int(event.key))

    def _update(self, dt: float) -> None:
        if not self.solved:
            self.elapsed += dt

    def reset(self) -> None:
        super().reset()
        self._new_session()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        draw_text(screen, f"Moves: {self.moves}", (config.BOARD_LEFT, 40), 32, config.TEXT_COLOR)
        draw_text(screen, f"Time: {int(self.elapsed)}s", (config.BOARD_LEFT + 200, 40), 32, config.TEXT_COLOR)
        if self.best:
            draw_text(screen, f"Best: {self.best['moves']} moves, {self.best['time']:.1f}s",
                      (config.BOARD_LEFT, 80), 24, config.TEXT_COLOR)

        cell = config.BOARD_SIZE / self.size
        tile_color = config.TILE_SOLVED_COLOR if self.solved else config.TILE_COLOR
        for index, value in enumerate(self.puzzle.tiles):
            row, col = divmod(index, self.size)
            rect = pygame.Rect(
                int(config.BOARD_LEFT + col * cell + config.TILE_GAP / 2),
                int(config.BOARD_TOP + row * cell + config.TILE_GAP / 2),
                int(cell - config.TILE_GAP),
                int(cell - config.TILE_GAP),
            )
            if value is None:
                pygame.draw.rect(screen, config.EMPTY_COLOR, rect, border_radius=6)
                continue
            pygame.draw.rect(screen, tile_color, rect, border_radius=6)
            draw_text(screen, str(value), rect.center, int(cell * 0.45), config.TEXT_COLOR, center=True)

        if self.solved:
            area = pygame.Rect(config.BOARD_LEFT, config.BOARD_TOP, config.BOARD_SIZE, config.BOARD_SIZE)
            draw_overlay(screen, area, "Solved!", f"{self.moves} moves  -  R to shuffle")
