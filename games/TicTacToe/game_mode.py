"""
TicTacToe Game Mode

Human (X) against the computer (O). Click a cell or press 1-9; the
computer answers after a short thinking pause. R starts a new board
(scores are kept), C clears the scores.
"""
from typing import List, Optional

import pygame

from cabinet.ai import MoveSelector
from cabinet.games import BaseGame, GameState
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import GRAY, WHITE, draw_text
from cabinet.timers import ScheduledTask
from games.TicTacToe import config
from games.TicTacToe.match import Match, Phase


class TicTacToeGame(BaseGame):
    """Tic-Tac-Toe against a minimax opponent."""

    NAME = "Tic-Tac-Toe"
    DESCRIPTION = "Classic three-in-a-row against a computer that rarely slips."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    ARGUMENTS = [
        {
            'name': '--random-move-chance',
            'type': float,
            'default': config.RANDOM_MOVE_CHANCE,
            'help': 'Chance the computer plays a random safe move (0 = perfect play)'
        },
    ]

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, random_move_chance: float = config.RANDOM_MOVE_CHANCE, **kwargs):
        super().__init__(**kwargs)
        self.match = Match()
        self.selector = MoveSelector(
            player=config.COMPUTER_MARK,
            opponent=config.HUMAN_MARK,
            random_move_chance=random_move_chance,
            rng=self.rng,
        )
        self._thinking: Optional[ScheduledTask] = None

    def _get_internal_state(self) -> GameState:
        phase = self.match.phase
        if phase is Phase.WON:
            return GameState.WON if self.match.winner == config.HUMAN_MARK else GameState.GAME_OVER
        if phase is Phase.DRAWN:
            return GameState.GAME_OVER
        return GameState.PLAYING

    def get_score(self) -> int:
        return self.match.scores['user']

    @property
    def thinking(self) -> bool:
        return self._thinking is not None and self._thinking.pending

    def play(self, index: int) -> bool:
        """Human move; schedules the computer's reply.

        Returns:
            True if the move was accepted
        """
        if not self.match.play(index, config.HUMAN_MARK):
            return False
        if self.match.phase is Phase.O_TURN:
            self._thinking = self.timers.schedule(config.THINK_DELAY, self._computer_move, 'computer move')
        return True

    def _computer_move(self) -> None:
        move = self.selector.best_move(self.match.board)
        if move is not None:
            self.match.play(move, config.COMPUTER_MARK)

    def cell_at(self, x: float, y: float) -> Optional[int]:
        left = (config.SCREEN_WIDTH - 3 * config.CELL_SIZE) / 2
        col = int((x - left) // config.CELL_SIZE)
        row = int((y - config.BOARD_TOP) // config.CELL_SIZE)
        if x < left or y < config.BOARD_TOP or not (0 <= col < 3 and 0 <= row < 3):
            return None
        return row * 3 + col

    def handle_input(self, events: List[InputEvent]) -> None:
        for event in self.input.process(events):
            if event.is_click:
                cell = self.cell_at(event.position.x, event.position.y)
                if cell is not None:
                    self.play(cell)
            elif event.key.isdigit() and event.key != '0':
                self.play(int(event.key) - 1)
            elif event.key == 'c':
                self.reset_scores()

    def reset(self) -> None:
        """New board, scores kept."""
        super().reset()
        self.match.reset_board()

    def reset_scores(self) -> None:
        super().reset()
        self.match.reset_scores()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        size = config.CELL_SIZE
        left = (config.SCREEN_WIDTH - 3 * size) // 2
        top = config.BOARD_TOP

        scores = self.match.scores
        draw_text(screen, f"You {scores['user']}   Draws {scores['draws']}   Computer {scores['pc']}",
                  (config.SCREEN_WIDTH / 2, 40), 30, WHITE, center=True)
        draw_text(screen, self._status(), (config.SCREEN_WIDTH / 2, 90), 28, GRAY, center=True)

        line = self.match.winning_line or ()
        for i, mark in enumerate(self.match.board):
            rect = pygame.Rect(left + (i % 3) * size, top + (i // 3) * size, size, size)
            pygame.draw.rect(screen, config.GRID_COLOR, rect, 3)
            if mark is None:
                continue
            color = config.WIN_COLOR if i in line else (config.X_COLOR if mark == 'X' else config.O_COLOR)
            draw_text(screen, mark, rect.center, 96, color, center=True)

        draw_text(screen, "R new board   C clear scores", (config.SCREEN_WIDTH / 2, top + 3 * size + 40),
                  22, GRAY, center=True)

    def _status(self) -> str:
        phase = self.match.phase
        if phase is Phase.WON:
            return "You win!" if self.match.winner == config.HUMAN_MARK else "Computer wins"
        if phase is Phase.DRAWN:
            return "Draw"
        if phase is Phase.O_TURN:
            return "Computer is thinking..."
        return "Your turn"
