"""Adversarial move selection for board games."""

from cabinet.ai.minimax import (
    WIN_LINES,
    MoveSelector,
    empty_cells,
    find_winning_move,
    is_full,
    minimax,
    winner,
    winning_line,
)

__all__ = [
    'WIN_LINES',
    'MoveSelector',
    'empty_cells',
    'find_winning_move',
    'is_full',
    'minimax',
    'winner',
    'winning_line',
]
