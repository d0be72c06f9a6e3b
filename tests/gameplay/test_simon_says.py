"""Tests for the Simon Says game mode."""
import pytest

from cabinet.games.game_state import GameState
from cabinet.games.input import InputEvent
from games.SimonSays import config
from games.SimonSays.game_mode import Phase, SimonSaysGame

FRAME = 0.05


def run(game, seconds):
    """Advance in small frames so chained timers keep their spacing."""
    for _ in range(int(round(seconds / FRAME))):
        game.update(FRAME)


def wait_for_input(game, limit=60.0):
    elapsed = 0.0
    while game.phase is not Phase.INPUT:
        assert elapsed < limit, "playback never finished"
        game.update(FRAME)
        elapsed += FRAME


def repeat_sequence(game):
    for pad in list(game.sequence):
        assert game.press(pad)


@pytest.fixture
def game(memory_store, rng):
    return SimonSaysGame(store=memory_store, rng=rng)


class TestRoundFlow:
    """Playback, input and scoring."""

    def test_idle_until_started(self, game):
        assert game.state is GameState.IDLE
        assert not game.press(0)

    def test_start_shows_first_step(self, game):
        assert game.start()
        assert game.phase is Phase.SHOWING
        assert len(game.sequence) == 1
        assert 0 <= game.sequence[0] < config.PAD_COUNT
        assert not game.start()

    def test_playback_lights_pads(self, game):
        game.start()
        run(game, 0.3)
        assert game.lit is None
        run(game, 0.3)
        assert game.lit == game.sequence[0]
        run(game, 0.6)
        assert game.lit is None

    def test_presses_ignored_during_playback(self, game):
        game.start()
        assert not game.press(game.sequence[0])

    def test_correct_round_scores_and_extends(self, game):
        game.start()
        wait_for_input(game)
        repeat_sequence(game)
        assert game.score == 1
        assert game.phase is Phase.SHOWING
        run(game, 1.05)
        assert len(game.sequence) == 2

    def test_several_rounds(self, game):
        game.start()
        for round_number in range(1, 4):
            wait_for_input(game)
            repeat_sequence(game)
            assert game.score == round_number
        assert game.state is GameState.PLAYING

    def test_wrong_pad_ends_game(self, game, memory_store):
        game.start()
        wait_for_input(game)
        repeat_sequence(game)
        wait_for_input(game)
        wrong = (game.sequence[0] + 1) % config.PAD_COUNT
        assert game.press(wrong)
        assert game.phase is Phase.OVER
        assert game.state is GameState.GAME_OVER
        assert memory_store.get(config.BEST_SCORE_KEY) == 1
        assert game.best_score == 1

    def test_restart_after_game_over(self, game):
        game.start()
        wait_for_input(game)
        game.press((game.sequence[0] + 1) % config.PAD_COUNT)
        assert game.start()
        assert game.score == 0
        assert len(game.sequence) == 1


class TestSpeed:
    """Playback speed-up."""

    def setup_round(self, game, score, speed):
        game.phase = Phase.INPUT
        game.sequence = [0]
        game.input_index = 0
        game.score = score
        game.speed = speed

    def test_speeds_up_every_five_points(self, game):
        self.setup_round(game, 4, config.START_SPEED)
        game.press(0)
        assert game.score == 5
        assert game.speed == config.START_SPEED - config.SPEED_STEP

    def test_no_speedup_between_steps(self, game):
        self.setup_round(game, 5, config.START_SPEED)
        game.press(0)
        assert game.speed == config.START_SPEED

    def test_speed_floor(self, game):
        self.setup_round(game, 9, config.MIN_SPEED)
        game.press(0)
        assert game.speed == config.MIN_SPEED


class TestSimonInput:
    """Keys and pad clicks."""

    def test_space_starts(self, game):
        game.handle_input([InputEvent.key_down('space')])
        assert game.phase is Phase.SHOWING

    def test_number_keys_press_pads(self, game):
        game.start()
        wait_for_input(game)
        key = str(game.sequence[0] + 1)
        game.handle_input([InputEvent.key_down(key)])
        assert game.score == 1

    def test_pad_at(self, game):
        for pad in range(config.PAD_COUNT):
            rect = game.pad_rect(pad)
            assert game.pad_at(*rect.center) == pad
        assert game.pad_at(0, 0) is None

    def test_reset_cancels_playback(self, game):
        game.start()
        game.reset()
        run(game, 3.0)
        assert game.phase is Phase.IDLE
        assert game.lit is None
