"""
Game2048 - Grid operations.

The grid is a square numpy int array, 0 for empty cells. Every move is
computed as a slide to the left on a rotated copy of the grid:

    left 0, up 1, right 2, down 3   (quarter turns counter-clockwise)
"""
import random
from typing import List, Sequence, Tuple

import numpy as np

ROTATIONS = {'left': 0, 'up': 1, 'right': 2, 'down': 3}


def slide_row(row: Sequence[int]) -> Tuple[List[int], int]:
    """Slide one row to the left, merging each equal pair once.

    Examples:
        >>> slide_row([2, 2, 4, 0])
        ([4, 4, 0, 0], 4)
        >>> slide_row([4, 0, 4, 0])
        ([8, 0, 0, 0], 8)

    Returns:
        (new row, points gained from merges)
    """
    tiles = [int(v) for v in row if v]
    merged: List[int] = []
    gained = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            value = tiles[i] * 2
            merged.append(value)
            gained += value
            i += 2
        else:
            merged.append(tiles[i])
            i += 1
    return merged + [0] * (len(row) - len(merged)), gained


def move(grid: np.ndarray, direction: str) -> Tuple[np.ndarray, int, bool]:
    """Apply a move without touching ``grid``.

    Returns:
        (new grid, points gained, whether anything changed)
    """
    k = ROTATIONS[direction]
    rotated = np.rot90(grid, k)
    gained = 0
    rows = []
    for row in rotated:
        new_row, points = slide_row(row)
        rows.append(new_row)
        gained += points
    result = np.rot90(np.array(rows, dtype=grid.dtype), -k)
    return result, gained, not np.array_equal(result, grid)


def empty_cells(grid: np.ndarray) -> List[Tuple[int, int]]:
    return [(int(r), int(c)) for r, c in zip(*np.nonzero(grid == 0))]


def add_random_tile(grid: np.ndarray, rng: random.Random, four_probability: float = 0.1) -> bool:
    """Put a 2 (or, with ``four_probability``, a 4) on a random empty cell.

    Returns:
        False if the grid is full
    """
    cells = empty_cells(grid)
    if not cells:
        return False
    r, c = rng.choice(cells)
    grid[r, c] = 4 if rng.random() < four_probability else 2
    return True


def can_move(grid: np.ndarray) -> bool:
    """True if any cell is empty or two neighbours are equal."""
    if (grid == 0).any():
        return True
    if (grid[:, 1:] == grid[:, :-1]).any():
        return True
    return bool((grid[1:, :] == grid[:-1, :]).any())


def new_grid(size: int, rng: random.Random, start_tiles: int = 2, four_probability: float = 0.1) -> np.ndarray:
    grid = np.zeros((size, size), dtype=int)
    for _ in range(start_tiles):
        add_random_tile(grid, rng, four_probability)
    return grid
