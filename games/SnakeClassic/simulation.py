"""
SnakeClassic - Grid snake on a fixed move interval.

Frames arrive at the launcher's rate; the snake moves one cell whenever the
accumulated frame time reaches the current interval. Edges wrap around.
"""
import random
from typing import List, Optional, Tuple

from cabinet.logging import get_logger
from cabinet.simulation import Bounds, SessionContext, Simulation, wrap
from games.SnakeClassic import config

log = get_logger('snake')

Cell = Tuple[int, int]

DIRECTIONS = {
    'up': (0, -1),
    'down': (0, 1),
    'left': (-1, 0),
    'right': (1, 0),
}


def move_interval(score: float) -> int:
    """Milliseconds between moves at a given score."""
    return max(
        config.MIN_INTERVAL,
        config.START_INTERVAL - int(score // config.SPEEDUP_EVERY) * config.SPEEDUP_STEP,
    )


class SnakeSimulation(Simulation):
    """Snake session.

    Args:
        rng: Random generator used for food placement
        grid_size: Cells per side
    """

    def __init__(self, rng: random.Random, grid_size: int = config.GRID_SIZE):
        self.grid_size = grid_size
        self.context = SessionContext(bounds=Bounds.of_size(grid_size, grid_size), rng=rng)
        self._reset_snake()
        self.spawn()

    def _reset_snake(self) -> None:
        self.snake: List[Cell] = [config.START_CELL]
        self.direction: Cell = config.START_DIRECTION
        self._next_direction: Cell = config.START_DIRECTION
        self.food: Optional[Cell] = None
        self._elapsed_ms = 0.0

    @property
    def state(self):
        return self.context.state

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def interval(self) -> int:
        return move_interval(self.state.score)

    def turn(self, name: str) -> bool:
        """Queue a direction change; reversing onto the body is ignored.

        Checked against the last applied direction, so two quick presses
        within one interval cannot fold the snake back on itself.
        """
        new = DIRECTIONS.get(name)
        if new is None:
            return False
        if (new[0] + self.direction[0], new[1] + self.direction[1]) == (0, 0):
            return False
        self._next_direction = new
        return True

    def advance(self) -> None:
        """Move one cell: eat, grow or die."""
        self.direction = self._next_direction
        hx, hy = self.head
        head = (
            int(wrap(hx + self.direction[0], 0, self.grid_size)),
            int(wrap(hy + self.direction[1], 0, self.grid_size)),
        )

        if head in self.snake:
            self.state.over = True
            log.debug("Snake hit itself at %s", head)
            return

        self.snake.insert(0, head)
        if head == self.food:
            self.state.score += config.FOOD_SCORE
            self.food = None
        else:
            self.snake.pop()

    def step(self, dt: float) -> None:
        self._elapsed_ms += dt * 1000.0
        while self._elapsed_ms >= self.interval and not self.state.over:
            self._elapsed_ms -= self.interval
            self.advance()
            self.context.tick_count += 1

    def resolve(self) -> None:
        pass

    def spawn(self) -> None:
        """Drop food on a random free cell if there is none."""
        if self.food is not None:
            return
        free = [
            (x, y)
            for x in range(self.grid_size)
            for y in range(self.grid_size)
            if (x, y) not in self.snake
        ]
        if free:
            self.food = self.context.rng.choice(free)

    def is_over(self) -> bool:
        return self.state.over

    def reset(self) -> None:
        self.context.reset()
        self._reset_snake()
        self.spawn()
