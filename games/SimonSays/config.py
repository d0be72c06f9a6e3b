"""
SimonSays - Configuration loader.

Values can be overridden from games/SimonSays/.env or the environment.
All durations are in milliseconds unless noted.
"""
from cabinet.config import get_int, load_game_env

load_game_env(__file__)

PAD_COUNT = 4

# Playback timing
START_SPEED = get_int('SIMON_START_SPEED', 600)  # flash length
MIN_SPEED = get_int('SIMON_MIN_SPEED', 200)
SPEED_STEP = get_int('SIMON_SPEED_STEP', 50)
SPEEDUP_EVERY = 5  # points
FLASH_GAP = get_int('SIMON_FLASH_GAP', 100)
PRE_PLAYBACK_DELAY = get_int('SIMON_PRE_PLAYBACK_DELAY', 500)
PRESS_FLASH = get_int('SIMON_PRESS_FLASH', 300)
NEXT_ROUND_DELAY = get_int('SIMON_NEXT_ROUND_DELAY', 1000)

# Display
SCREEN_WIDTH = 560
SCREEN_HEIGHT = 640
PAD_SIZE = 220
PAD_GAP = 20
BOARD_TOP = 120

BEST_SCORE_KEY = 'simonSaysBest'

# Colors (dim, lit)
PAD_COLORS = (
    ((21, 128, 61), (74, 222, 128)),    # green
    ((185, 28, 28), (248, 113, 113)),   # red
    ((161, 98, 7), (253, 224, 71)),     # yellow
    ((29, 78, 216), (96, 165, 250)),    # blue
)
BACKGROUND_COLOR = (15, 23, 42)
