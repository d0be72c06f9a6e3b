"""
MemoryMatch - Configuration loader.

Values can be overridden from games/MemoryMatch/.env or the environment.
"""
from cabinet.config import get_float, load_game_env

load_game_env(__file__)

SYMBOLS = ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'H')
COLUMNS = 4
MISMATCH_DELAY = get_float('MEMORY_MISMATCH_DELAY', 0.8)  # seconds

# Display
CARD_SIZE = 100
CARD_GAP = 14
BOARD_TOP = 90
SCREEN_WIDTH = COLUMNS * CARD_SIZE + (COLUMNS + 1) * CARD_GAP
SCREEN_HEIGHT = BOARD_TOP + (len(SYMBOLS) * 2 // COLUMNS) * (CARD_SIZE + CARD_GAP) + CARD_GAP

# Colors
BACKGROUND_COLOR = (30, 27, 75)
CARD_BACK_COLOR = (79, 70, 229)
CARD_FACE_COLOR = (238, 242, 255)
MATCHED_COLOR = (134, 239, 172)
SYMBOL_COLOR = (30, 27, 75)
