"""
Tic-tac-toe move selection: minimax with alpha-beta pruning.

Boards are lists of 9 cells, row-major, each 'X', 'O' or None. Terminal
utility is depth-scored from the selector's point of view:

    selector wins   ->  10 - depth
    opponent wins   ->  depth - 10
    draw            ->  0

so faster wins and slower losses are preferred.
"""
import math
import random
from typing import List, Optional, Sequence, Tuple

from cabinet.logging import get_logger

log = get_logger('minimax')

Board = List[Optional[str]]

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def winning_line(board: Sequence[Optional[str]]) -> Optional[Tuple[int, int, int]]:
    """The first completed line, or None."""
    for a, b, c in WIN_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def winner(board: Sequence[Optional[str]]) -> Optional[str]:
    """The mark owning a completed line, or None."""
    line = winning_line(board)
    return board[line[0]] if line else None


def empty_cells(board: Sequence[Optional[str]]) -> List[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def is_full(board: Sequence[Optional[str]]) -> bool:
    return all(cell is not None for cell in board)


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    me: str,
    opponent: str,
) -> float:
    """Score a position by exhaustive search with alpha-beta cutoffs.

    ``board`` is mutated during the search and restored before returning.
    """
    mark = winner(board)
    if mark is not None:
        return 10 - depth if mark == me else depth - 10
    if is_full(board):
        return 0

    if maximizing:
        best = -math.inf
        for i in empty_cells(board):
            board[i] = me
            score = minimax(board, depth + 1, False, alpha, beta, me, opponent)
            board[i] = None
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best

    best = math.inf
    for i in empty_cells(board):
        board[i] = opponent
        score = minimax(board, depth + 1, True, alpha, beta, me, opponent)
        board[i] = None
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            break
    return best


def find_winning_move(board: Sequence[Optional[str]], mark: str) -> Optional[int]:
    """First empty cell that completes a line for ``mark``."""
    trial = list(board)
    for i in empty_cells(trial):
        trial[i] = mark
        if winner(trial) == mark:
            return i
        trial[i] = None
    return None


class MoveSelector:
    """Picks the computer's move.

    Policy, in order:
        1. With probability ``random_move_chance`` (and more than two empty
           cells) play a random move that does not give the opponent an
           immediate win
        2. Complete an own line
        3. Block the opponent's line
        4. Full minimax; ties go to the lowest cell index

    Args:
        player: Mark played by the selector (maximizing)
        opponent: Mark played by the other side (minimizing)
        random_move_chance: Chance of step 1; 0 plays optimally
        rng: Random generator
    """

    def __init__(
        self,
        player: str = 'O',
        opponent: str = 'X',
        random_move_chance: float = 0.2,
        rng: Optional[random.Random] = None,
    ):
        if player == opponent:
            raise ValueError("player and opponent must use different marks")
        if not 0.0 <= random_move_chance <= 1.0:
            raise ValueError(f"random_move_chance must be in [0, 1], got {random_move_chance}")
        self.player = player
        self.opponent = opponent
        self.random_move_chance = random_move_chance
        self.rng = rng or random.Random()

    def _gives_opponent_win(self, board: Sequence[Optional[str]], move: int) -> bool:
        trial = list(board)
        trial[move] = self.player
        return find_winning_move(trial, self.opponent) is not None

    def _random_safe_move(self, board: Sequence[Optional[str]], empty: List[int]) -> Optional[int]:
        safe = [i for i in empty if not self._gives_opponent_win(board, i)]
        if not safe:
            return None
        return self.rng.choice(safe)

    def best_move(self, board: Sequence[Optional[str]]) -> Optional[int]:
        """Choose a cell index for ``player``, or None on a full board.

        The board passed in is not modified.
        """
        empty = empty_cells(board)
        if not empty:
            return None

        if self.random_move_chance > 0 and len(empty) > 2:
            if self.rng.random() < self.random_move_chance:
                move = self._random_safe_move(board, empty)
                if move is not None:
                    log.debug("Playing random move %d", move)
                    return move

        move = find_winning_move(board, self.player)
        if move is not None:
            return move

        move = find_winning_move(board, self.opponent)
        if move is not None:
            return move

        trial = list(board)
        best_score = -math.inf
        best = empty[0]
        for i in empty:
            trial[i] = self.player
            score = minimax(trial, 0, False, -math.inf, math.inf, self.player, self.opponent)
            trial[i] = None
            if score > best_score:
                best_score = score
                best = i
        log.trace("Minimax chose %d (score %s)", best, best_score)
        return best
