"""
SpaceAdventure - Configuration loader.

Values can be overridden from games/SpaceAdventure/.env or the environment.
"""
from cabinet.config import get_float, get_int, load_game_env

load_game_env(__file__)

# Display
SCREEN_WIDTH = get_int('SPACE_SCREEN_WIDTH', 800)
SCREEN_HEIGHT = get_int('SPACE_SCREEN_HEIGHT', 600)

# Ship
PLAYER_SIZE = get_int('SPACE_PLAYER_SIZE', 50)
PLAYER_SPEED = get_float('SPACE_PLAYER_SPEED', 5.0)  # pixels/tick
PLAYER_BOTTOM_GAP = get_int('SPACE_PLAYER_BOTTOM_GAP', 80)

# Meters
MAX_HEALTH = get_float('SPACE_MAX_HEALTH', 100.0)
MAX_FUEL = get_float('SPACE_MAX_FUEL', 100.0)
FUEL_BURN = get_float('SPACE_FUEL_BURN', 0.1)  # per tick

# Spawning
SPAWN_RATE = get_float('SPACE_SPAWN_RATE', 0.02)  # chance per tick
SPAWN_WEIGHTS = {
    'asteroid': 0.5,
    'fuel': 0.25,
    'enemy': 0.15,
    'powerup': 0.1,
}
LARGE_OBJECT_SIZE = 40
SMALL_OBJECT_SIZE = 30  # fuel and powerups
BASE_FALL_SPEED = get_float('SPACE_BASE_FALL_SPEED', 2.0)
FALL_SPEED_JITTER = get_float('SPACE_FALL_SPEED_JITTER', 2.0)
CULL_MARGIN = 50  # objects fall this far past the bottom edge before removal

# Effects
ASTEROID_DAMAGE = get_float('SPACE_ASTEROID_DAMAGE', 20.0)
ENEMY_DAMAGE = get_float('SPACE_ENEMY_DAMAGE', 30.0)
FUEL_AMOUNT = get_float('SPACE_FUEL_AMOUNT', 25.0)
FUEL_SCORE = get_int('SPACE_FUEL_SCORE', 50)
POWERUP_HEAL = get_float('SPACE_POWERUP_HEAL', 20.0)
POWERUP_SCORE = get_int('SPACE_POWERUP_SCORE', 100)

# Progression
SCORE_PER_TICK = 1
POINTS_PER_LEVEL = get_int('SPACE_POINTS_PER_LEVEL', 1000)

BEST_SCORE_KEY = 'spaceAdventureBest'

# Colors
BACKGROUND_TOP = (0, 0, 17)
BACKGROUND_BOTTOM = (0, 0, 51)
PLAYER_COLOR = (0, 255, 255)
OBJECT_COLORS = {
    'asteroid': (139, 69, 19),
    'fuel': (0, 255, 0),
    'enemy': (255, 0, 0),
    'powerup': (255, 215, 0),
}
