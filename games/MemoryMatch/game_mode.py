"""
MemoryMatch Game Mode

Flip two cards at a time to find the eight pairs. A mismatched pair stays
face up for a moment, then turns back over.
"""
from dataclasses import dataclass
from typing import List, Optional

import pygame

from cabinet.games import BaseGame, GameState
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import WHITE, draw_overlay, draw_text
from cabinet.logging import get_logger
from cabinet.timers import ScheduledTask
from games.MemoryMatch import config

log = get_logger('memory_match')


@dataclass
class Card:
    symbol: str
    face_up: bool = False
    matched: bool = False


class MemoryMatchGame(BaseGame):
    """Memory Match - pairs concentration game."""

    NAME = "Memory Match"
    DESCRIPTION = "Find all matching pairs in as few moves as possible."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._new_session()

    def _new_session(self) -> None:
        symbols = list(config.SYMBOLS) * 2
        self.rng.shuffle(symbols)
        self.cards = [Card(s) for s in symbols]
        self.flipped: List[int] = []
        self.moves = 0
        self._hide_task: Optional[ScheduledTask] = None

    @property
    def locked(self) -> bool:
        """True while a mismatched pair is waiting to be hidden."""
        return self._hide_task is not None and self._hide_task.pending

    @property
    def matched_pairs(self) -> int:
        return sum(1 for c in self.cards if c.matched) // 2

    @property
    def won(self) -> bool:
        return all(c.matched for c in self.cards)

    def _get_internal_state(self) -> GameState:
        return GameState.WON if self.won else GameState.PLAYING

    def get_score(self) -> int:
        return self.matched_pairs

    def flip(self, index: int) -> bool:
        """Turn a card face up.

        Returns:
            False if the card cannot be flipped now
        """
        if self.locked or not 0 <= index < len(self.cards):
            return False
        card = self.cards[index]
        if card.face_up or card.matched:
            return False

        card.face_up = True
        self.flipped.append(index)
        if len(self.flipped) == 2:
            self._check_pair()
        return True

    def _check_pair(self) -> None:
        self.moves += 1
        a, b = (self.cards[i] for i in self.flipped)
        if a.symbol == b.symbol:
            a.matched = b.matched = True
            self.flipped = []
            if self.won:
                log.info("All pairs found in %d moves", self.moves)
        else:
            self._hide_task = self.timers.schedule(config.MISMATCH_DELAY, self._hide_flipped, 'hide mismatch')

    def _hide_flipped(self) -> None:
        for i in self.flipped:
            self.cards[i].face_up = False
        self.flipped = []

    def card_at(self, x: float, y: float) -> Optional[int]:
        pitch = config.CARD_SIZE + config.CARD_GAP
        col = int((x - config.CARD_GAP) // pitch)
        row = int((y - config.BOARD_TOP - config.CARD_GAP) // pitch)
        rows = len(self.cards) // config.COLUMNS
        if not (0 <= col < config.COLUMNS and 0 <= row < rows):
            return None
        # Gaps between cards are not part of any card
        if (x - config.CARD_GAP) % pitch > config.CARD_SIZE or (y - config.BOARD_TOP - config.CARD_GAP) % pitch > config.CARD_SIZE:
            return None
        return row * config.COLUMNS + col

    def handle_input(self, events: List[InputEvent]) -> None:
        for event in self.input.process(events):
            if event.is_click:
                index = self.card_at(event.position.x, event.position.y)
                if index is not None:
                    self.flip(index)

    def reset(self) -> None:
        super().reset()
        self._new_session()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        draw_text(screen, f"Moves: {self.moves}", (config.CARD_GAP, 30), 32, WHITE)
        draw_text(screen, f"Pairs: {self.matched_pairs}/{len(config.SYMBOLS)}",
                  (screen.get_width() - 150, 30), 32, WHITE)

        pitch = config.CARD_SIZE + config.CARD_GAP
        for i, card in enumerate(self.cards):
            row, col = divmod(i, config.COLUMNS)
            rect = pygame.Rect(
                config.CARD_GAP + col * pitch,
                config.BOARD_TOP + config.CARD_GAP + row * pitch,
                config.CARD_SIZE,
                config.CARD_SIZE,
            )
            if card.matched:
                pygame.draw.rect(screen, config.MATCHED_COLOR, rect, border_radius=8)
            elif card.face_up:
                pygame.draw.rect(screen, config.CARD_FACE_COLOR, rect, border_radius=8)
            else:
                pygame.draw.rect(screen, config.CARD_BACK_COLOR, rect, border_radius=8)
                continue
            draw_text(screen, card.symbol, rect.center, 64, config.SYMBOL_COLOR, center=True)

        if self.won:
            draw_overlay(screen, screen.get_rect(), "All pairs found!", f"{self.moves} moves  -  R to play again")
