"""
TicTacToe - Configuration loader.

Values can be overridden from games/TicTacToe/.env or the environment.
"""
from cabinet.config import get_float, get_int, load_game_env

load_game_env(__file__)

# Display
SCREEN_WIDTH = get_int('TTT_SCREEN_WIDTH', 480)
SCREEN_HEIGHT = get_int('TTT_SCREEN_HEIGHT', 600)
CELL_SIZE = get_int('TTT_CELL_SIZE', 120)
BOARD_TOP = 140

# Computer player
HUMAN_MARK = 'X'
COMPUTER_MARK = 'O'
THINK_DELAY = get_float('TTT_THINK_DELAY', 0.5)  # seconds
RANDOM_MOVE_CHANCE = get_float('TTT_RANDOM_MOVE_CHANCE', 0.2)

# Colors
BACKGROUND_COLOR = (17, 24, 39)
GRID_COLOR = (75, 85, 99)
X_COLOR = (59, 130, 246)
O_COLOR = (239, 68, 68)
WIN_COLOR = (250, 204, 21)
