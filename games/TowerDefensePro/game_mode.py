"""
TowerDefensePro Game Mode

Build towers beside the road and hold back six waves of enemies.

Controls:
    click       build the selected tower type / select a built tower
    1-4         choose tower type
    u           upgrade the selected tower
    x           sell the selected tower
    n / w       send the next wave
"""
from typing import Optional

import pygame

from cabinet.games import LevelLoader, SimulationGame
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import GRAY, RED, WHITE, YELLOW, draw_overlay, draw_text
from cabinet.simulation import ClockState, Simulation
from games.TowerDefensePro import config
from games.TowerDefensePro.simulation import PlaceResult, TowerDefenseSimulation
from models.tower_defense import TowerDefenseMap

WAVE_KEYS = ('n', 'w')


def get_level_loader() -> LevelLoader:
    return LevelLoader(config.LEVELS_DIR, TowerDefenseMap)


class TowerDefenseProGame(SimulationGame):
    """Tower Defense Pro - stop the enemies before they reach the exit."""

    NAME = "Tower Defense Pro"
    DESCRIPTION = "Strategic tower defense with upgrades and six escalating waves."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    ARGUMENTS = [
        {
            'name': '--level',
            'type': str,
            'default': config.DEFAULT_LEVEL,
            'help': 'Map file in levels/ (without .yaml)'
        },
    ]

    def __init__(self, level: str = config.DEFAULT_LEVEL, level_map: Optional[TowerDefenseMap] = None, **kwargs):
        """Initialize the game.

        Args:
            level: Map slug in levels/
            level_map: Already loaded map (overrides level)
        """
        self.level_map = level_map or get_level_loader().load_level(level)
        super().__init__(**kwargs)
        self.last_action: Optional[PlaceResult] = None
        self.best_score = self._load_best(config.BEST_SCORE_KEY) or 0

    def _create_simulation(self) -> Simulation:
        return TowerDefenseSimulation(self.level_map)

    @property
    def won(self) -> bool:
        return self.simulation.state.won

    def get_score(self) -> int:
        return int(self.simulation.state.score)

    def _on_session_over(self) -> None:
        score = self.get_score()
        if self._record_best(config.BEST_SCORE_KEY, score):
            self.best_score = score

    def _handle_press(self, event: InputEvent) -> None:
        sim = self.simulation
        if self.clock.state is ClockState.OVER:
            return
        if event.is_click:
            self.last_action = sim.click(event.position.x, event.position.y)
            return

        key = event.key
        type_names = list(self.level_map.tower_types)
        if key.isdigit() and 1 <= int(key) <= len(type_names):
            sim.select_type(type_names[int(key) - 1])
        elif key == 'u':
            sim.upgrade_selected()
        elif key == 'x':
            sim.sell_selected()
        elif key in WAVE_KEYS and self.clock.state is ClockState.RUNNING:
            sim.start_wave()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        sim = self.simulation
        grid = self.level_map.grid_size
        screen.fill(config.BACKGROUND_COLOR)

        for x in range(0, self.level_map.width, grid):
            pygame.draw.line(screen, config.GRID_COLOR, (x, 0), (x, self.level_map.height))
        for y in range(0, self.level_map.height, grid):
            pygame.draw.line(screen, config.GRID_COLOR, (0, y), (self.level_map.width, y))

        points = [p.as_tuple for p in self.level_map.path]
        pygame.draw.lines(screen, config.PATH_COLOR, False, points, grid)

        for tower in sim.towers.values():
            center = (int(tower.x), int(tower.y))
            pygame.draw.circle(screen, tower.color, center, grid // 2 - 4)
            draw_text(screen, str(tower.level), center, 20, WHITE, center=True)
            if tower is sim.selected_tower:
                pygame.draw.circle(screen, config.SELECTION_COLOR, center, int(tower.range), 1)

        for enemy in sim.enemies:
            pygame.draw.rect(screen, enemy.data['color'], enemy.rect)
            fraction = max(0.0, enemy.health / enemy.data['max_health'])
            bar = pygame.Rect(int(enemy.x), int(enemy.y) - 6, int(enemy.width), 4)
            pygame.draw.rect(screen, config.HEALTH_BAR_BG, bar)
            pygame.draw.rect(screen, config.HEALTH_BAR_FG, (bar.x, bar.y, int(bar.width * fraction), bar.height))

        for projectile in sim.projectiles:
            pygame.draw.circle(screen, projectile.color, (int(projectile.x), int(projectile.y)), 4)

        self._render_hud(screen)

        area = screen.get_rect()
        state = self.clock.state
        if state is ClockState.IDLE:
            draw_overlay(screen, area, self.NAME, "SPACE to start  -  N sends a wave")
        elif state is ClockState.PAUSED:
            draw_overlay(screen, area, "Paused", "Press SPACE to resume")
        elif state is ClockState.OVER:
            title = "Victory!" if self.won else "Defeat"
            draw_overlay(screen, area, title, f"Score {self.get_score()}  -  R to play again")

    def _render_hud(self, screen: pygame.Surface) -> None:
        sim = self.simulation
        draw_text(screen, f"Money: {sim.money}", (10, 10), 26, YELLOW)
        draw_text(screen, f"Health: {int(sim.health)}", (10, 34), 26, RED)
        wave = min(sim.wave, sim.total_waves)
        status = "in progress" if sim.wave_active else "ready"
        draw_text(screen, f"Wave {wave}/{sim.total_waves} ({status})", (10, 58), 24)
        draw_text(screen, f"Score: {self.get_score()}  Best: {int(self.best_score)}", (10, 82), 22, GRAY)

        for i, (name, kind) in enumerate(self.level_map.tower_types.items()):
            x = 200 + i * 150
            selected = name == sim.selected_type
            color = WHITE if selected else GRAY
            pygame.draw.circle(screen, kind.rgb, (x, 20), 8)
            draw_text(screen, f"{i + 1} {name} ${kind.cost}", (x + 14, 12), 22, color)

        tower = sim.selected_tower
        if tower is not None:
            draw_text(
                screen,
                f"{tower.type_name} L{tower.level}  dmg {tower.damage}  rng {int(tower.range)}"
                f"  U upgrade ${tower.upgrade_cost}  X sell ${tower.sell_value}",
                (200, 40), 22, WHITE,
            )
