"""
PuzzleMaster - Sliding tile board.

Tiles are stored row-major; ``None`` marks the empty cell. The solved board
is 1 .. n*n-1 followed by the empty cell.
"""
import random
from typing import List, Optional


def solved_tiles(size: int) -> List[Optional[int]]:
    """Row-major solved arrangement for a size x size board."""
    return list(range(1, size * size)) + [None]


class SlidingPuzzle:
    """n x n sliding puzzle.

    Args:
        size: Board edge length (3 or more)
    """

    def __init__(self, size: int = 3):
        if size < 2:
            raise ValueError(f"Puzzle size must be at least 2, got {size}")
        self.size = size
        self.tiles: List[Optional[int]] = solved_tiles(size)

    @property
    def empty_index(self) -> int:
        return self.tiles.index(None)

    def neighbors(self, index: int) -> List[int]:
        """Indices orthogonally adjacent to ``index``."""
        row, col = divmod(index, self.size)
        result = []
        if row > 0:
            result.append(index - self.size)
        if row < self.size - 1:
            result.append(index + self.size)
        if col > 0:
            result.append(index - 1)
        if col < self.size - 1:
            result.append(index + 1)
        return result

    def can_slide(self, index: int) -> bool:
        return 0 <= index < len(self.tiles) and index in self.neighbors(self.empty_index)

    def slide(self, index: int) -> bool:
        """Slide the tile at ``index`` into the empty cell if they are adjacent."""
        if not self.can_slide(index):
            return False
        empty = self.empty_index
        self.tiles[empty], self.tiles[index] = self.tiles[index], None
        return True

    def shuffle(self, moves: int, rng: random.Random) -> None:
        """Scramble with ``moves`` random valid slides from the solved board.

        Every state reached this way is solvable.
        """
        self.tiles = solved_tiles(self.size)
        while True:
            for _ in range(moves):
                self.slide(rng.choice(self.neighbors(self.empty_index)))
            if not self.is_solved() or moves == 0:
                return

    def is_solved(self) -> bool:
        return self.tiles == solved_tiles(self.size)
