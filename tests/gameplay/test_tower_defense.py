"""Tests for the Tower Defense Pro simulation and game mode."""
import math

import pytest

from cabinet.games.game_state import GameState
from cabinet.games.input import InputEvent
from games.TowerDefensePro import config
from games.TowerDefensePro.game_mode import TowerDefenseProGame, get_level_loader
from games.TowerDefensePro.simulation import (
    PlaceResult,
    Projectile,
    TowerDefenseSimulation,
    point_segment_distance,
)
from models.tower_defense import TowerDefenseMap

DT = 1 / 60


@pytest.fixture
def level_map():
    """Straight road along y=100 with two short waves."""
    return TowerDefenseMap.model_validate({
        'name': 'Test Road',
        'path': [{'x': 0, 'y': 100}, {'x': 400, 'y': 100}],
        'tower_types': {
            'basic': {'damage': 50, 'range': 150, 'fire_rate_ms': 500, 'cost': 50, 'color': '#00ff00'},
            'sniper': {'damage': 100, 'range': 300, 'fire_rate_ms': 2000, 'cost': 150, 'color': '#0000ff'},
        },
        'enemy_types': {
            'normal': {'health': 50, 'speed': 0.5, 'reward': 5, 'color': '#ff0000'},
        },
        'waves': [
            {'enemies': [{'type': 'normal', 'count': 2, 'delay_ms': 500}], 'reward': 20},
            {'enemies': [{'type': 'normal', 'count': 1, 'delay_ms': 0}], 'reward': 30},
        ],
    })


@pytest.fixture
def sim(level_map):
    return TowerDefenseSimulation(level_map)


def tick(sim, count=1):
    for _ in range(count):
        sim.step(DT)
        sim.resolve()
        sim.spawn()


def run_wave(sim, limit=5000):
    """Tick until the running wave is over."""
    for _ in range(limit):
        if not sim.wave_active or sim.is_over():
            return
        tick(sim)
    raise AssertionError("wave did not finish")


class TestGeometry:
    """Path corridor checks."""

    def test_point_segment_distance(self):
        assert point_segment_distance(5, 3, (0, 0), (10, 0)) == 3
        assert point_segment_distance(-3, 4, (0, 0), (10, 0)) == 5
        assert point_segment_distance(1, 1, (0, 0), (0, 0)) == pytest.approx(math.sqrt(2))

    def test_projectile_arrives_without_overshoot(self):
        shot = Projectile(0, 0, 20, 0, damage=1, color=(0, 0, 0))
        shot.advance(8)
        shot.advance(8)
        assert (shot.x, shot.arrived) == (16, False)
        shot.advance(8)
        assert (shot.x, shot.y, shot.arrived) == (20, 0, True)


class TestPlacement:
    """Building, upgrading and selling towers."""

    def test_place_tower(self, sim):
        assert sim.click(200, 300) is PlaceResult.PLACED
        tower = sim.towers[(5, 7)]
        assert (tower.x, tower.y) == (220, 300)
        assert sim.money == 150

    def test_cannot_build_on_path(self, sim):
        assert sim.click(200, 100) is PlaceResult.ON_PATH
        assert sim.money == 200

    def test_cell_beside_path_is_buildable(self, sim):
        """A cell whose center is exactly one grid away from the road is allowed."""
        assert sim.click(200, 130) is PlaceResult.PLACED

    def test_off_field(self, sim):
        assert sim.click(-1, 50) is PlaceResult.OFF_FIELD
        assert sim.click(800, 50) is PlaceResult.OFF_FIELD

    def test_not_enough_money(self, sim):
        sim.select_type('sniper')
        assert sim.click(40, 300) is PlaceResult.PLACED
        assert sim.click(120, 300) is PlaceResult.NO_MONEY
        assert sim.money == 50

    def test_unknown_type_not_selectable(self, sim):
        assert not sim.select_type('laser')
        assert sim.selected_type == 'basic'

    def test_click_existing_selects(self, sim):
        sim.click(200, 300)
        assert sim.click(210, 310) is PlaceResult.SELECTED
        assert sim.selected_tower is sim.towers[(5, 7)]
        assert sim.money == 150

    def test_upgrade(self, sim):
        sim.click(200, 300)
        sim.click(200, 300)
        assert sim.upgrade_selected()
        tower = sim.selected_tower
        assert (tower.level, tower.damage, tower.range, tower.upgrade_cost) == (2, 75, 165, 112)
        assert sim.money == 75
        assert not sim.upgrade_selected()

    def test_sell_refunds(self, sim):
        sim.click(200, 300)
        sim.click(200, 300)
        assert sim.sell_selected()
        assert sim.towers == {}
        assert sim.money == 150 + 35
        assert not sim.sell_selected()


class TestWaves:
    """Wave scheduling, leaks, kills and victory."""

    def test_spawn_schedule(self, sim):
        assert sim.start_wave()
        assert not sim.start_wave()
        tick(sim)
        assert len(sim.enemies) == 1
        tick(sim, 28)
        assert len(sim.enemies) == 1
        tick(sim, 2)
        assert len(sim.enemies) == 2

    def test_enemy_enters_at_path_start(self, sim):
        sim.start_wave()
        sim.spawn()
        enemy = sim.enemies[0]
        assert enemy.center == (0, 100)
        assert enemy.health == 50

    def test_leaks_cost_health(self, sim):
        sim.start_wave()
        run_wave(sim)
        assert sim.health == 100 - 2 * config.LEAK_DAMAGE
        assert sim.wave == 2
        assert sim.money == 200 + 20
        assert not sim.is_over()

    def test_towers_kill_enemies(self, sim):
        sim.click(200, 130)
        sim.start_wave()
        run_wave(sim)
        assert sim.health == 100
        assert sim.state.score == 2 * 5 * config.KILL_SCORE_MULTIPLIER
        assert sim.money == 200 - 50 + 2 * 5 + 20

    def test_last_wave_wins(self, sim):
        for _ in range(2):
            sim.start_wave()
            run_wave(sim)
        assert sim.state.won
        assert sim.is_over()
        assert not sim.start_wave()

    def test_health_depleted_loses(self, sim):
        sim.state.meters['health'] = 10
        sim.start_wave()
        run_wave(sim)
        assert sim.is_over()
        assert not sim.state.won

    def test_reset_clears_board(self, sim):
        sim.click(200, 300)
        sim.start_wave()
        tick(sim, 5)
        sim.reset()
        assert sim.towers == {}
        assert sim.enemies == []
        assert (sim.wave, sim.money, sim.time_ms) == (1, 200, 0.0)


class TestTowerDefenseProGame:
    """Controls through the game mode."""

    @pytest.fixture
    def game(self, level_map, memory_store):
        return TowerDefenseProGame(level_map=level_map, store=memory_store)

    def test_bundled_level_loads(self, memory_store):
        assert 'default' in get_level_loader().list_levels()
        game = TowerDefenseProGame(store=memory_store)
        assert game.simulation.total_waves == len(game.level_map.waves)

    def test_wave_key_needs_running_clock(self, game):
        game.handle_input([InputEvent.key_down('n')])
        assert not game.simulation.wave_active
        game.handle_input([InputEvent.key_down('space'), InputEvent.key_up('n'), InputEvent.key_down('n')])
        assert game.simulation.wave_active

    def test_digit_selects_tower_type(self, game):
        game.handle_input([InputEvent.key_down('2')])
        assert game.simulation.selected_type == 'sniper'
        game.handle_input([InputEvent.key_down('9')])
        assert game.simulation.selected_type == 'sniper'

    def test_click_builds_and_keys_manage(self, game):
        game.handle_input([InputEvent.click(200, 300)])
        assert game.last_action is PlaceResult.PLACED
        game.handle_input([InputEvent.click(200, 300), InputEvent.key_down('x')])
        assert game.last_action is PlaceResult.SELECTED
        assert game.simulation.towers == {}

    def test_victory_records_best(self, game, memory_store):
        game.start()
        game.simulation.click(200, 130)
        for _ in range(2):
            game.simulation.start_wave()
            for _ in range(5000):
                if not game.simulation.wave_active:
                    break
                game.update(DT)
        assert game.state is GameState.WON
        assert memory_store.get(config.BEST_SCORE_KEY) == game.get_score()
        assert game.get_score() > 0

    def test_defeat_freezes_the_board(self, game):
        """After the base falls, keys and clicks no longer change money or towers."""
        game.handle_input([InputEvent.click(200, 300), InputEvent.click(200, 300)])
        assert game.simulation.selected_tower is not None
        game.start()
        game.simulation.state.meters['health'] = 0
        game.update(DT)
        assert game.state is GameState.GAME_OVER

        game.handle_input([
            InputEvent.key_down('x'),
            InputEvent.key_down('u'),
            InputEvent.click(280, 300),
        ])
        assert game.simulation.money == 150
        assert len(game.simulation.towers) == 1
