"""
SimonSays Game Mode

Watch the pads light up, then repeat the sequence. Each round adds one
step; the playback gets faster every five points.

Controls: SPACE starts, click a pad or press 1-4.
"""
from enum import Enum
from typing import List, Optional

import pygame

from cabinet.games import BaseGame, GameState
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import GRAY, WHITE, draw_text
from cabinet.logging import get_logger
from cabinet.timers import ScheduledTask
from games.SimonSays import config

log = get_logger('simon_says')

START_KEYS = ('space', 'return')


class Phase(Enum):
    IDLE = "idle"
    SHOWING = "showing"
    INPUT = "input"
    OVER = "over"


class SimonSaysGame(BaseGame):
    """Simon Says - sequence memory."""

    NAME = "Simon Says"
    DESCRIPTION = "Repeat the growing sequence of lights."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.best_score = int(self._load_best(config.BEST_SCORE_KEY) or 0)
        self._new_session()

    def _new_session(self) -> None:
        self.phase = Phase.IDLE
        self.sequence: List[int] = []
        self.input_index = 0
        self.score = 0
        self.speed = config.START_SPEED
        self.lit: Optional[int] = None
        self._lit_task: Optional[ScheduledTask] = None

    def _get_internal_state(self) -> GameState:
        if self.phase is Phase.IDLE:
            return GameState.IDLE
        if self.phase is Phase.OVER:
            return GameState.GAME_OVER
        return GameState.PLAYING

    def get_score(self) -> int:
        return self.score

    # =========================================================================
    # Round flow
    # =========================================================================

    def start(self) -> bool:
        if self.phase not in (Phase.IDLE, Phase.OVER):
            return False
        if self.phase is Phase.OVER:
            self.reset()
        self._next_round()
        return True

    def _next_round(self) -> None:
        self.sequence.append(self.rng.randrange(config.PAD_COUNT))
        self.input_index = 0
        self.phase = Phase.SHOWING
        self.timers.schedule(config.PRE_PLAYBACK_DELAY / 1000, self._play_sequence, 'playback')

    def _play_sequence(self) -> None:
        """Schedule every flash of the sequence, then hand over to the player."""
        step = (self.speed + config.FLASH_GAP) / 1000
        for i, pad in enumerate(self.sequence):
            self.timers.schedule(i * step, lambda pad=pad: self._light(pad), f'flash {pad}')
            self.timers.schedule(i * step + self.speed / 1000, self._unlight, 'unflash')
        self.timers.schedule(len(self.sequence) * step, self._await_input, 'await input')

    def _light(self, pad: int) -> None:
        self.lit = pad

    def _unlight(self) -> None:
        self.lit = None

    def _await_input(self) -> None:
        self.phase = Phase.INPUT
        self.input_index = 0

    def press(self, pad: int) -> bool:
        """Player presses a pad.

        Returns:
            True if the press was taken (correct or not)
        """
        if self.phase is not Phase.INPUT or not 0 <= pad < config.PAD_COUNT:
            return False

        if self._lit_task is not None:
            self._lit_task.cancel()
        self.lit = pad
        self._lit_task = self.timers.schedule(config.PRESS_FLASH / 1000, self._unlight, 'press flash')

        if pad != self.sequence[self.input_index]:
            self._game_over()
            return True

        self.input_index += 1
        if self.input_index == len(self.sequence):
            self.score += 1
            if self.score % config.SPEEDUP_EVERY == 0 and self.speed > config.MIN_SPEED:
                self.speed -= config.SPEED_STEP
            self.phase = Phase.SHOWING
            self.timers.schedule(config.NEXT_ROUND_DELAY / 1000, self._next_round, 'next round')
        return True

    def _game_over(self) -> None:
        self.phase = Phase.OVER
        log.info("Game over at %d", self.score)
        if self._record_best(config.BEST_SCORE_KEY, self.score):
            self.best_score = self.score

    # =========================================================================
    # Input
    # =========================================================================

    def pad_rect(self, pad: int) -> pygame.Rect:
        col, row = pad % 2, pad // 2
        left = (config.SCREEN_WIDTH - 2 * config.PAD_SIZE - config.PAD_GAP) // 2
        return pygame.Rect(
            left + col * (config.PAD_SIZE + config.PAD_GAP),
            config.BOARD_TOP + row * (config.PAD_SIZE + config.PAD_GAP),
            config.PAD_SIZE,
            config.PAD_SIZE,
        )

    def pad_at(self, x: float, y: float) -> Optional[int]:
        for pad in range(config.PAD_COUNT):
            if self.pad_rect(pad).collidepoint(int(x), int(y)):
                return pad
        return None

    def handle_input(self, events: List[InputEvent]) -> None:
        for event in self.input.process(events):
            if event.is_click:
                pad = self.pad_at(event.position.x, event.position.y)
                if pad is not None:
                    self.press(pad)
            elif event.key in START_KEYS:
                self.start()
            elif event.key.isdigit() and 1 <= int(event.key) <= config.PAD_COUNT:
                self.press(int(event.key) - 1)

    def reset(self) -> None:
        super().reset()
        self._new_session()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        draw_text(screen, f"Score: {self.score}", (30, 30), 34, WHITE)
        draw_text(screen, f"Best: {self.best_score}", (config.SCREEN_WIDTH - 150, 30), 34, GRAY)

        for pad in range(config.PAD_COUNT):
            dim, bright = config.PAD_COLORS[pad]
            pygame.draw.rect(screen, bright if pad == self.lit else dim, self.pad_rect(pad), border_radius=16)

        messages = {
            Phase.IDLE: "Press SPACE to start",
            Phase.SHOWING: "Watch...",
            Phase.INPUT: "Your turn",
            Phase.OVER: f"Game over - score {self.score}. SPACE to play again",
        }
        draw_text(screen, messages[self.phase], (config.SCREEN_WIDTH / 2, 85), 28, WHITE, center=True)
