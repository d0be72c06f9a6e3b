"""
SpaceAdventure Game Mode

Vertical space shooter without the shooting: steer the ship with the arrow
keys, dodge asteroids and enemy ships, collect fuel and power-ups.
"""
import pygame

from cabinet.games import SimulationGame
from cabinet.games.render import GRAY, WHITE, draw_overlay, draw_text
from cabinet.simulation import ClockState, Simulation
from games.SpaceAdventure import config
from games.SpaceAdventure.simulation import SpaceSimulation


class SpaceAdventureGame(SimulationGame):
    """Space Adventure - survive as long as the fuel lasts."""

    NAME = "Space Adventure"
    DESCRIPTION = "Pilot your ship through an asteroid field, collecting fuel and power-ups."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.best_score = self._load_best(config.BEST_SCORE_KEY) or 0

    def _create_simulation(self) -> Simulation:
        return SpaceSimulation(lambda: self.input.actions, self.rng)

    def _on_session_over(self) -> None:
        score = self.get_score()
        if self._record_best(config.BEST_SCORE_KEY, score):
            self.best_score = score

    @property
    def session(self):
        return self.simulation.state

    def get_score(self) -> int:
        return int(self.session.score)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        self._render_background(screen)

        ctx = self.simulation.context
        for entity in ctx.entities:
            pygame.draw.rect(screen, config.OBJECT_COLORS.get(entity.kind, WHITE), entity.rect)

        ship = ctx.subject
        x, y, w, h = ship.x, ship.y, ship.width, ship.height
        pygame.draw.polygon(
            screen,
            config.PLAYER_COLOR,
            [(x + w / 2, y), (x, y + h), (x + w, y + h)],
        )

        self._render_hud(screen)

        area = screen.get_rect()
        if self.clock.state is ClockState.IDLE:
            draw_overlay(screen, area, self.NAME, "Press SPACE to launch")
        elif self.clock.state is ClockState.PAUSED:
            draw_overlay(screen, area, "Paused", "Press SPACE to resume")
        elif self.clock.state is ClockState.OVER:
            draw_overlay(screen, area, "Game Over", f"Score {self.get_score()}  -  R to restart")

    def _render_background(self, screen: pygame.Surface) -> None:
        """Vertical gradient between the two background colors."""
        height = screen.get_height()
        top, bottom = config.BACKGROUND_TOP, config.BACKGROUND_BOTTOM
        for row in range(0, height, 4):
            t = row / height
            color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
            pygame.draw.rect(screen, color, (0, row, screen.get_width(), 4))

    def _render_hud(self, screen: pygame.Surface) -> None:
        session = self.session
        draw_text(screen, f"Score: {self.get_score()}", (10, 10))
        draw_text(screen, f"Level: {session.level}", (10, 36))
        draw_text(screen, f"Best: {int(self.best_score)}", (10, 62), 22, GRAY)

        for i, (name, color) in enumerate((('health', (239, 68, 68)), ('fuel', (34, 197, 94)))):
            top = 10 + i * 26
            left = screen.get_width() - 210
            maximum = config.MAX_HEALTH if name == 'health' else config.MAX_FUEL
            fraction = max(0.0, min(1.0, session.meter(name) / maximum))
            pygame.draw.rect(screen, (55, 65, 81), (left, top, 200, 18))
            pygame.draw.rect(screen, color, (left, top, int(200 * fraction), 18))
            draw_text(screen, name.title(), (left - 60, top), 22, WHITE)
