"""
SnakeClassic Game Mode

Steer with the arrow keys (or WASD), eat the food, don't bite yourself.
The snake speeds up as the score grows. SPACE pauses.
"""
import pygame

from cabinet.games import SimulationGame
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import GRAY, WHITE, draw_overlay, draw_text
from cabinet.simulation import ClockState, Simulation
from games.SnakeClassic import config
from games.SnakeClassic.simulation import SnakeSimulation


class SnakeClassicGame(SimulationGame):
    """Snake Classic - wraparound grid snake."""

    NAME = "Snake Classic"
    DESCRIPTION = "The timeless snake game: eat, grow and avoid your own tail."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.best_score = self._load_best(config.BEST_SCORE_KEY) or 0

    def _create_simulation(self) -> Simulation:
        return SnakeSimulation(self.rng)

    def get_score(self) -> int:
        return int(self.simulation.state.score)

    def _handle_press(self, event: InputEvent) -> None:
        direction = self.input.action_for(event.key)
        if direction is None:
            return
        self.simulation.turn(direction)
        if self.clock.state is ClockState.IDLE:
            self.clock.start()

    def _on_session_over(self) -> None:
        score = self.get_score()
        if self._record_best(config.BEST_SCORE_KEY, score):
            self.best_score = score

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        sim = self.simulation
        cell = config.CELL_SIZE
        top = config.HUD_HEIGHT
        screen.fill(config.BACKGROUND_COLOR)

        draw_text(screen, f"Score: {self.get_score()}", (10, 14), 30, WHITE)
        draw_text(screen, f"Best: {int(self.best_score)}", (screen.get_width() - 140, 14), 30, GRAY)

        field = pygame.Rect(0, top, sim.grid_size * cell, sim.grid_size * cell)
        for i in range(sim.grid_size + 1):
            pygame.draw.line(screen, config.GRID_COLOR, (i * cell, top), (i * cell, field.bottom))
            pygame.draw.line(screen, config.GRID_COLOR, (0, top + i * cell), (field.right, top + i * cell))

        if sim.food is not None:
            fx, fy = sim.food
            pygame.draw.circle(
                screen, config.FOOD_COLOR,
                (fx * cell + cell // 2, top + fy * cell + cell // 2), cell // 2 - 2,
            )

        for i, (x, y) in enumerate(sim.snake):
            color = config.HEAD_COLOR if i == 0 else config.BODY_COLOR
            pygame.draw.rect(screen, color, (x * cell + 1, top + y * cell + 1, cell - 2, cell - 2))

        state = self.clock.state
        if state is ClockState.IDLE:
            draw_overlay(screen, field, self.NAME, "Arrow keys or SPACE to start")
        elif state is ClockState.PAUSED:
            draw_overlay(screen, field, "Paused", "Press SPACE to resume")
        elif state is ClockState.OVER:
            draw_overlay(screen, field, "Game Over", f"Score {self.get_score()}  -  R to restart")
