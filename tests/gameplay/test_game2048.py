"""Tests for the 2048 grid operations and game mode."""
import random

import numpy as np
import pytest

from cabinet.games.game_state import GameState
from cabinet.games.input import InputEvent
from games.Game2048 import board, config
from games.Game2048.game_mode import Game2048


class TestSlideRow:
    """Single-row slide and merge rules."""

    @pytest.mark.parametrize('row,expected,gained', [
        ([2, 2, 4, 0], [4, 4, 0, 0], 4),
        ([4, 0, 4, 0], [8, 0, 0, 0], 8),
        ([2, 2, 2, 2], [4, 4, 0, 0], 8),
        ([2, 2, 2, 0], [4, 2, 0, 0], 4),
        ([4, 4, 8, 0], [8, 8, 0, 0], 8),
        ([2, 4, 8, 16], [2, 4, 8, 16], 0),
        ([0, 0, 0, 0], [0, 0, 0, 0], 0),
    ])
    def test_slide_row(self, row, expected, gained):
        assert board.slide_row(row) == (expected, gained)

    def test_each_tile_merges_once(self):
        """A merged tile does not merge again in the same move."""
        assert board.slide_row([4, 2, 2, 0]) == ([4, 4, 0, 0], 4)


class TestMove:
    """Whole-grid moves in all four directions."""

    GRID = np.array([
        [2, 0, 0, 2],
        [0, 4, 0, 4],
        [0, 0, 0, 0],
        [2, 0, 0, 0],
    ])

    def test_left(self):
        result, gained, changed = board.move(self.GRID, 'left')
        assert result[0].tolist() == [4, 0, 0, 0]
        assert result[1].tolist() == [8, 0, 0, 0]
        assert gained == 12
        assert changed

    def test_right(self):
        result, _, _ = board.move(self.GRID, 'right')
        assert result[0].tolist() == [0, 0, 0, 4]
        assert result[3].tolist() == [0, 0, 0, 2]

    def test_up(self):
        result, gained, _ = board.move(self.GRID, 'up')
        assert result[:, 0].tolist() == [4, 0, 0, 0]
        assert result[:, 3].tolist() == [2, 4, 0, 0]
        assert gained == 4

    def test_down(self):
        result, _, _ = board.move(self.GRID, 'down')
        assert result[:, 0].tolist() == [0, 0, 0, 4]
        assert result[:, 1].tolist() == [0, 0, 0, 4]

    def test_input_grid_untouched(self):
        before = self.GRID.copy()
        board.move(self.GRID, 'left')
        assert np.array_equal(self.GRID, before)

    def test_blocked_move_reports_unchanged(self):
        grid = np.array([[2, 4], [8, 16]])
        _, gained, changed = board.move(grid, 'left')
        assert not changed and gained == 0

    def test_moves_preserve_tile_sum(self):
        """Merging never creates or destroys value."""
        rng = random.Random(8)
        for _ in range(200):
            grid = np.array([[rng.choice([0, 2, 4, 8]) for _ in range(4)] for _ in range(4)])
            for direction in board.ROTATIONS:
                result, _, _ = board.move(grid, direction)
                assert result.sum() == grid.sum()

    def test_can_move(self):
        assert not board.can_move(np.array([[2, 4], [4, 2]]))
        assert board.can_move(np.array([[2, 2], [4, 8]]))
        assert board.can_move(np.array([[2, 4], [2, 8]]))
        assert board.can_move(np.array([[2, 0], [4, 8]]))

    def test_new_grid_has_start_tiles(self, rng):
        grid = board.new_grid(4, rng, start_tiles=2)
        assert np.count_nonzero(grid) == 2
        assert set(grid[grid > 0].tolist()) <= {2, 4}

    def test_add_tile_to_full_grid(self, rng):
        assert not board.add_random_tile(np.full((2, 2), 2), rng)


class TestGame2048:
    """Scoring, win and loss through the game mode."""

    @pytest.fixture
    def game(self, memory_store, rng):
        return Game2048(store=memory_store, rng=rng)

    def test_starts_with_two_tiles(self, game):
        assert np.count_nonzero(game.grid) == config.START_TILES
        assert game.state is GameState.PLAYING

    def test_merge_scores_and_adds_tile(self, game):
        game.load_grid([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        assert game.move('left')
        assert game.score == 4
        assert np.count_nonzero(game.grid) == 2

    def test_unchanged_move_adds_nothing(self, game):
        game.load_grid([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        assert not game.move('left')
        assert np.count_nonzero(game.grid) == 1

    def test_reaching_win_tile(self, game):
        game.load_grid([[1024, 1024, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        game.move('left')
        assert game.won
        assert game.state is GameState.PLAYING

    def test_no_moves_left_is_game_over(self, game):
        game.load_grid([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        assert game.over
        assert game.state is GameState.GAME_OVER
        assert not game.move('left')

    def test_stuck_grid_with_win_tile_is_won(self, game):
        game.load_grid([[2048, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        assert game.won
        assert game.state is GameState.WON

    def test_best_score_recorded(self, game, memory_store):
        game.load_grid([[4, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        game.move('left')
        assert memory_store.get(config.BEST_SCORE_KEY) == 8
        assert game.best_score == 8

    def test_best_score_loaded(self, memory_store, rng):
        memory_store.set(config.BEST_SCORE_KEY, '512')
        assert Game2048(store=memory_store, rng=rng).best_score == 512

    def test_arrow_keys_move(self, game):
        game.load_grid([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        game.handle_input([InputEvent.key_down('left')])
        assert game.grid[0, 0] == 2

    def test_reset_starts_over(self, game):
        game.load_grid([[4, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        game.move('left')
        game.reset()
        assert game.score == 0
        assert np.count_nonzero(game.grid) == config.START_TILES
