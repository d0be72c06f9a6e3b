"""
TicTacToe - Board and running score.

A Match holds one board at a time plus the tally across boards. The human
always plays X and moves first; the computer's reply is chosen by a
MoveSelector and applied by the game after its thinking delay.
"""
from enum import Enum
from typing import Dict, List, Optional, Tuple

from cabinet.ai import is_full, winner, winning_line
from cabinet.logging import get_logger
from games.TicTacToe import config

log = get_logger('tictactoe')


class Phase(Enum):
    X_TURN = "x_turn"
    O_TURN = "o_turn"
    WON = "won"
    DRAWN = "drawn"

    @property
    def finished(self) -> bool:
        return self in (Phase.WON, Phase.DRAWN)


class Match:
    """Board state machine: X_TURN -> O_TURN -> ... -> WON | DRAWN."""

    def __init__(self):
        self.scores: Dict[str, int] = {'user': 0, 'pc': 0, 'draws': 0}
        self.reset_board()

    def reset_board(self) -> None:
        """Clear the board; the tally is kept."""
        self.board: List[Optional[str]] = [None] * 9
        self.phase = Phase.X_TURN
        self.winner: Optional[str] = None

    def reset_scores(self) -> None:
        """Clear the board and the tally."""
        self.scores = {'user': 0, 'pc': 0, 'draws': 0}
        self.reset_board()

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return winning_line(self.board)

    def play(self, index: int, mark: str) -> bool:
        """Place ``mark`` on cell ``index`` if it is that mark's turn.

        Returns:
            True if the move was applied
        """
        expected = Phase.X_TURN if mark == config.HUMAN_MARK else Phase.O_TURN
        if self.phase is not expected:
            return False
        if not 0 <= index < 9 or self.board[index] is not None:
            return False

        self.board[index] = mark
        self._settle(mark)
        return True

    def _settle(self, mark: str) -> None:
        won_by = winner(self.board)
        if won_by is not None:
            self.phase = Phase.WON
            self.winner = won_by
            self.scores['user' if won_by == config.HUMAN_MARK else 'pc'] += 1
            log.debug("%s wins %s", won_by, self.winning_line)
        elif is_full(self.board):
            self.phase = Phase.DRAWN
            self.scores['draws'] += 1
        else:
            self.phase = Phase.O_TURN if mark == config.HUMAN_MARK else Phase.X_TURN
