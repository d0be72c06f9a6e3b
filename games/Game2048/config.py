"""
Game2048 - Configuration loader.

Values can be overridden from games/Game2048/.env or the environment.
"""
from cabinet.config import get_float, get_int, load_game_env

load_game_env(__file__)

# Board
GRID_SIZE = get_int('G2048_GRID_SIZE', 4)
START_TILES = 2
WIN_TILE = get_int('G2048_WIN_TILE', 2048)
FOUR_PROBABILITY = get_float('G2048_FOUR_PROBABILITY', 0.1)

# Display
TILE_SIZE = 100
TILE_GAP = 12
BOARD_TOP = 120
SCREEN_WIDTH = GRID_SIZE * TILE_SIZE + (GRID_SIZE + 1) * TILE_GAP + 40
SCREEN_HEIGHT = BOARD_TOP + GRID_SIZE * TILE_SIZE + (GRID_SIZE + 1) * TILE_GAP + 40

BEST_SCORE_KEY = '2048-best'

# Colors
BACKGROUND_COLOR = (250, 248, 239)
BOARD_COLOR = (187, 173, 160)
EMPTY_COLOR = (205, 193, 180)
DARK_TEXT = (119, 110, 101)
LIGHT_TEXT = (249, 246, 242)
TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}
SUPER_TILE_COLOR = (60, 58, 50)
