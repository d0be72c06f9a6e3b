"""
SnakeClassic - Configuration loader.

Values can be overridden from games/SnakeClassic/.env or the environment.
"""
from cabinet.config import get_int, load_game_env

load_game_env(__file__)

# Grid
GRID_SIZE = get_int('SNAKE_GRID_SIZE', 20)  # cells per side
CELL_SIZE = get_int('SNAKE_CELL_SIZE', 25)  # pixels
START_CELL = (10, 10)
START_DIRECTION = (1, 0)

# Speed (milliseconds per move)
START_INTERVAL = get_int('SNAKE_START_INTERVAL', 200)
MIN_INTERVAL = get_int('SNAKE_MIN_INTERVAL', 50)
SPEEDUP_EVERY = 30  # points
SPEEDUP_STEP = 15  # ms

FOOD_SCORE = get_int('SNAKE_FOOD_SCORE', 10)

HUD_HEIGHT = 50
SCREEN_WIDTH = GRID_SIZE * CELL_SIZE
SCREEN_HEIGHT = GRID_SIZE * CELL_SIZE + HUD_HEIGHT

BEST_SCORE_KEY = 'snakeClassicBest'

# Colors
BACKGROUND_COLOR = (17, 24, 39)
GRID_COLOR = (31, 41, 55)
HEAD_COLOR = (74, 222, 128)
BODY_COLOR = (34, 197, 94)
FOOD_COLOR = (239, 68, 68)
