"""
PuzzleMaster - Configuration loader.

Values can be overridden from games/PuzzleMaster/.env or the environment.
"""
from cabinet.config import get_int, load_game_env

load_game_env(__file__)

SIZES = (3, 4)
DEFAULT_SIZE = get_int('PUZZLE_DEFAULT_SIZE', 3)
SHUFFLE_MOVES = {
    3: get_int('PUZZLE_SHUFFLE_MOVES_3', 100),
    4: get_int('PUZZLE_SHUFFLE_MOVES_4', 200),
}

# Display
SCREEN_WIDTH = 560
SCREEN_HEIGHT = 660
BOARD_SIZE = 480  # pixels, split evenly between tiles
BOARD_LEFT = 40
BOARD_TOP = 140
TILE_GAP = 6

BEST_KEY_PREFIX = 'puzzleMasterBest_'

# Colors
BACKGROUND_COLOR = (30, 41, 59)
TILE_COLOR = (99, 102, 241)
TILE_SOLVED_COLOR = (34, 197, 94)
EMPTY_COLOR = (51, 65, 85)
TEXT_COLOR = (255, 255, 255)
