"""
RacingThunder - Configuration loader.

Values can be overridden from games/RacingThunder/.env or the environment.
"""
from pathlib import Path

from cabinet.config import get_float, get_int, load_game_env

load_game_env(__file__)

# Display
SCREEN_WIDTH = get_int('RACING_SCREEN_WIDTH', 800)
SCREEN_HEIGHT = get_int('RACING_SCREEN_HEIGHT', 600)

# Car physics (pixels/tick, radians/tick)
CAR_SIZE = get_int('RACING_CAR_SIZE', 20)
ACCELERATION = get_float('RACING_ACCELERATION', 0.3)
MAX_SPEED = get_float('RACING_MAX_SPEED', 8.0)
REVERSE_SPEED = get_float('RACING_REVERSE_SPEED', 4.0)
FRICTION = get_float('RACING_FRICTION', 0.95)
STOP_EPSILON = get_float('RACING_STOP_EPSILON', 0.1)
TURN_RATE = get_float('RACING_TURN_RATE', 0.05)  # scaled by |speed|
MIN_TURN_SPEED = get_float('RACING_MIN_TURN_SPEED', 0.5)

# Track
CHECKPOINT_RADIUS = get_float('RACING_CHECKPOINT_RADIUS', 40.0)
TRACK_WIDTH = 60
TRACKS_FILE = Path(__file__).parent / 'tracks' / 'tracks.yaml'

SPEED_DISPLAY_FACTOR = 10  # HUD shows |speed| * 10

BEST_TIME_KEY_PREFIX = 'racingThunderBest_'

# Colors
BACKGROUND_COLOR = (34, 85, 34)
CAR_COLOR = (255, 0, 0)
CHECKPOINT_COLOR = (255, 255, 255)
NEXT_CHECKPOINT_COLOR = (255, 215, 0)
