"""Tests for the Space Adventure simulation and game mode."""
import pytest

from cabinet.games.game_state import GameState
from cabinet.games.input import InputEvent
from cabinet.simulation import ClockState
from games.SpaceAdventure import config
from games.SpaceAdventure.game_mode import SpaceAdventureGame
from games.SpaceAdventure.simulation import SpaceSimulation, make_object


@pytest.fixture
def held():
    return set()


@pytest.fixture
def sim(held, rng):
    simulation = SpaceSimulation(lambda: held, rng)
    simulation.spawner.base_probability = 0.0
    return simulation


def drop_on_ship(sim, kind, rng):
    """Place an object of ``kind`` right on top of the ship."""
    entity = make_object(kind, 1, rng)
    entity.vy = 0
    entity.move_center_to(*sim.context.subject.center)
    sim.context.add_entity(entity)
    return entity


class TestSpaceSimulation:
    """Collisions, meters and progression."""

    def test_initial_session(self, sim):
        ship = sim.context.subject
        assert (ship.x, ship.y) == (375, 520)
        assert sim.state.meter('health') == 100
        assert sim.state.meter('fuel') == 100
        assert sim.state.level == 1

    def test_asteroid_damages_and_stays(self, sim, rng):
        rock = drop_on_ship(sim, 'asteroid', rng)
        sim.resolve()
        assert sim.state.meter('health') == 80
        assert rock in sim.context.entities

    def test_enemy_damage(self, sim, rng):
        drop_on_ship(sim, 'enemy', rng)
        sim.resolve()
        assert sim.state.meter('health') == 70

    def test_fuel_is_collected(self, sim, rng):
        sim.state.meters['fuel'] = 50
        fuel = drop_on_ship(sim, 'fuel', rng)
        sim.resolve()
        assert sim.state.meter('fuel') == pytest.approx(75 - config.FUEL_BURN)
        assert sim.state.score == config.FUEL_SCORE + 1
        assert fuel not in sim.context.entities

    def test_fuel_capped(self, sim, rng):
        drop_on_ship(sim, 'fuel', rng)
        sim.resolve()
        assert sim.state.meter('fuel') == pytest.approx(100 - config.FUEL_BURN)

    def test_powerup_heals(self, sim, rng):
        sim.state.meters['health'] = 50
        drop_on_ship(sim, 'powerup', rng)
        sim.resolve()
        assert sim.state.meter('health') == 70
        assert sim.state.score == config.POWERUP_SCORE + 1

    def test_destroyed_hull_ends_session(self, sim, rng):
        sim.state.meters['health'] = 30
        drop_on_ship(sim, 'enemy', rng)
        sim.resolve()
        assert sim.state.meter('health') == 0
        assert sim.is_over()

    def test_level_follows_score(self, sim):
        sim.state.score = 999
        sim.resolve()
        assert sim.state.score == 1000
        assert sim.state.level == 2

    def test_objects_fall_and_get_culled(self, sim, rng):
        rock = make_object('asteroid', 1, rng)
        rock.x = 0
        sim.context.add_entity(rock)
        for _ in range(500):
            sim.step(1 / 60)
        assert rock not in sim.context.entities

    def test_fall_speed_grows_with_level(self, rng):
        for _ in range(50):
            slow = make_object('asteroid', 1, rng)
            fast = make_object('asteroid', 9, rng)
            assert 2 <= slow.vy < 4
            assert 5 <= fast.vy < 7

    def test_pickups_are_smaller(self, rng):
        assert make_object('fuel', 1, rng).width == config.SMALL_OBJECT_SIZE
        assert make_object('enemy', 1, rng).width == config.LARGE_OBJECT_SIZE

    def test_ship_follows_held_keys(self, sim, held):
        held.add('left')
        sim.step(1 / 60)
        assert sim.context.subject.x == 370


class TestSpaceAdventureGame:
    """Clock control and best score through the game mode."""

    @pytest.fixture
    def game(self, memory_store, rng):
        game = SpaceAdventureGame(store=memory_store, rng=rng)
        game.simulation.spawner.base_probability = 0.0
        return game

    def test_waits_for_start(self, game):
        assert game.state is GameState.IDLE
        game.update(1 / 60)
        assert game.get_score() == 0

    def test_space_starts_and_pauses(self, game):
        game.handle_input([InputEvent.key_down('space')])
        assert game.state is GameState.PLAYING
        game.update(1 / 60)
        assert game.get_score() == 1

        game.handle_input([InputEvent.key_up('space'), InputEvent.key_down('space')])
        assert game.state is GameState.PAUSED
        game.update(1 / 60)
        assert game.get_score() == 1

    def test_held_arrow_moves_ship(self, game):
        game.handle_input([InputEvent.key_down('space'), InputEvent.key_down('right')])
        game.update(1 / 60)
        assert game.simulation.context.subject.x == 380

    def test_fuel_runs_out(self, game, memory_store):
        """With nothing spawning, the tank empties after about 1000 ticks."""
        game.start()
        for _ in range(1100):
            game.update(1 / 60)
        assert game.clock.state is ClockState.OVER
        assert game.state is GameState.GAME_OVER
        assert 999 <= game.get_score() <= 1001
        assert memory_store.get(config.BEST_SCORE_KEY) == game.get_score()
        assert game.best_score == game.get_score()

    def test_lower_score_keeps_best(self, memory_store, rng):
        memory_store.set(config.BEST_SCORE_KEY, 5000)
        game = SpaceAdventureGame(store=memory_store, rng=rng)
        game.simulation.spawner.base_probability = 0.0
        game.start()
        for _ in range(1100):
            game.update(1 / 60)
        assert memory_store.get(config.BEST_SCORE_KEY) == 5000

    def test_reset_restores_session(self, game):
        game.start()
        for _ in range(10):
            game.update(1 / 60)
        game.reset()
        assert game.state is GameState.IDLE
        assert game.get_score() == 0
        assert game.session.meter('fuel') == 100
