"""Common GameState enum for all cabinet games.

All games must use this standard GameState enum for compatibility with
dev_game.py and the game registry.

Games can have additional internal states, but must map them to these
standard states via ``_get_internal_state()``.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states reported through ``BaseGame.state``.

    States:
        IDLE: Session set up, waiting for the player to start
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused
        GAME_OVER: Session ended in loss (or, for scored games, just ended)
        WON: Session ended in success

    For games with internal states:
        def _get_internal_state(self) -> GameState:
            if self._phase in ('crashed', 'out_of_fuel'):
                return GameState.GAME_OVER
            if self._phase == 'finished':
                return GameState.WON
            return GameState.PLAYING
    """
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.GAME_OVER, GameState.WON)
