"""Tests for the Tic-Tac-Toe match and game mode."""
import pytest

from cabinet.games.game_state import GameState
from cabinet.games.input import InputEvent
from games.TicTacToe import config
from games.TicTacToe.game_mode import TicTacToeGame
from games.TicTacToe.match import Match, Phase


class TestMatch:
    """Turn order, results and the tally."""

    def test_x_moves_first(self):
        match = Match()
        assert not match.play(0, 'O')
        assert match.play(0, 'X')
        assert match.phase is Phase.O_TURN

    def test_occupied_cell_rejected(self):
        match = Match()
        match.play(4, 'X')
        assert not match.play(4, 'O')
        assert match.phase is Phase.O_TURN

    def test_out_of_range_rejected(self):
        assert not Match().play(9, 'X')

    def test_win_is_tallied(self):
        match = Match()
        for index, mark in [(0, 'X'), (3, 'O'), (1, 'X'), (4, 'O'), (2, 'X')]:
            assert match.play(index, mark)
        assert match.phase is Phase.WON
        assert match.winner == 'X'
        assert match.winning_line == (0, 1, 2)
        assert match.scores == {'user': 1, 'pc': 0, 'draws': 0}
        assert not match.play(5, 'O')

    def test_draw_is_tallied(self):
        match = Match()
        moves = [(0, 'X'), (1, 'O'), (2, 'X'), (4, 'O'), (3, 'X'), (5, 'O'), (7, 'X'), (6, 'O'), (8, 'X')]
        for index, mark in moves:
            assert match.play(index, mark)
        assert match.phase is Phase.DRAWN
        assert match.phase.finished
        assert match.scores['draws'] == 1

    def test_reset_board_keeps_scores(self):
        match = Match()
        match.scores['user'] = 3
        match.play(0, 'X')
        match.reset_board()
        assert match.board == [None] * 9
        assert match.phase is Phase.X_TURN
        assert match.scores['user'] == 3

    def test_reset_scores(self):
        match = Match()
        match.scores['pc'] = 2
        match.reset_scores()
        assert match.scores == {'user': 0, 'pc': 0, 'draws': 0}


class TestTicTacToeGame:
    """Computer replies, input and state mapping."""

    @pytest.fixture
    def game(self, memory_store, rng):
        return TicTacToeGame(random_move_chance=0.0, store=memory_store, rng=rng)

    def test_computer_replies_after_delay(self, game):
        assert game.play(0)
        assert game.thinking
        game.update(config.THINK_DELAY / 2)
        assert game.match.board.count('O') == 0
        game.update(config.THINK_DELAY)
        assert game.match.board.count('O') == 1
        assert game.match.phase is Phase.X_TURN
        assert not game.thinking

    def test_no_moves_while_thinking(self, game):
        game.play(0)
        assert not game.play(1)

    def test_computer_takes_center_against_corner(self, game):
        game.play(0)
        game.update(1.0)
        assert game.match.board[4] == 'O'

    def test_perfect_computer_never_loses(self, game):
        """Whatever the human plays, the computer draws or wins."""
        for opening in range(9):
            game.reset()
            game.play(opening)
            while not game.match.phase.finished:
                game.update(1.0)
                if game.match.phase.finished:
                    break
                game.play(game.match.board.index(None))
            assert game.match.winner != 'X'
        assert game.get_score() == 0

    def test_state_mapping(self, game):
        assert game.state is GameState.PLAYING
        game.match.board = ['X', 'X', None, 'O', 'O', None, None, None, None]
        game.match.play(2, 'X')
        assert game.state is GameState.WON
        game.reset()
        game.match.board = ['O', 'O', None, 'X', 'X', None, 'X', None, None]
        game.match.phase = Phase.O_TURN
        game.match.play(2, 'O')
        assert game.state is GameState.GAME_OVER

    def test_reset_cancels_pending_reply(self, game):
        game.play(0)
        game.reset()
        game.update(1.0)
        assert game.match.board == [None] * 9

    def test_digit_keys_play(self, game):
        game.handle_input([InputEvent.key_down('5')])
        assert game.match.board[4] == 'X'

    def test_zero_key_ignored(self, game):
        game.handle_input([InputEvent.key_down('0')])
        assert game.match.board == [None] * 9

    def test_click_maps_to_cell(self, game):
        left = (config.SCREEN_WIDTH - 3 * config.CELL_SIZE) / 2
        assert game.cell_at(left + 1, config.BOARD_TOP + 1) == 0
        assert game.cell_at(left + 2.5 * config.CELL_SIZE, config.BOARD_TOP + 2.5 * config.CELL_SIZE) == 8
        assert game.cell_at(left - 1, config.BOARD_TOP) is None
        game.handle_input([InputEvent.click(left + 1.5 * config.CELL_SIZE, config.BOARD_TOP + 10)])
        assert game.match.board[1] == 'X'

    def test_c_clears_scores(self, game):
        game.match.scores['pc'] = 4
        game.handle_input([InputEvent.key_down('c')])
        assert game.match.scores['pc'] == 0

    def test_random_move_chance_validated(self, memory_store):
        with pytest.raises(ValueError):
            TicTacToeGame(random_move_chance=2.0, store=memory_store)
