"""
Cabinet Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- simulation_game: SimulationGame, BaseGame driven by a FrameClock
- game_state: Standard GameState enum for platform compatibility
- levels: YAML level loading with Pydantic validation
- input: Input events, held-key state and sources
- render: Shared pygame drawing helpers
"""

from cabinet.games.game_state import GameState
from cabinet.games.base_game import BaseGame
from cabinet.games.simulation_game import SimulationGame
from cabinet.games.levels import LevelLoader, LevelValidationError, load_yaml_model

__all__ = [
    'GameState',
    'BaseGame',
    'SimulationGame',
    'LevelLoader',
    'LevelValidationError',
    'load_yaml_model',
]
