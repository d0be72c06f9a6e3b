"""
TowerDefensePro - Configuration loader.

Map data (path, towers, enemies, waves) lives in levels/*.yaml; the values
here are the rules applied on top of any map. Override them from
games/TowerDefensePro/.env or the environment.
"""
from pathlib import Path

from cabinet.config import get_float, get_int, load_game_env

load_game_env(__file__)

LEVELS_DIR = Path(__file__).parent / 'levels'
DEFAULT_LEVEL = 'default'

# Enemies
ENEMY_SIZE = get_int('TD_ENEMY_SIZE', 24)
PATH_EPSILON = get_float('TD_PATH_EPSILON', 5.0)  # waypoint snap distance
LEAK_DAMAGE = get_float('TD_LEAK_DAMAGE', 10.0)  # health lost per enemy reaching the end

# Projectiles
PROJECTILE_SPEED = get_float('TD_PROJECTILE_SPEED', 8.0)  # pixels/tick
HIT_RADIUS = get_float('TD_HIT_RADIUS', 20.0)

# Economy
KILL_SCORE_MULTIPLIER = get_int('TD_KILL_SCORE_MULTIPLIER', 10)
UPGRADE_DAMAGE_FACTOR = 1.5
UPGRADE_RANGE_FACTOR = 1.1
UPGRADE_COST_FACTOR = 1.5
SELL_REFUND_FACTOR = get_float('TD_SELL_REFUND', 0.7)

BEST_SCORE_KEY = 'towerDefenseProBest'

# Colors
BACKGROUND_COLOR = (22, 101, 52)
PATH_COLOR = (120, 90, 60)
GRID_COLOR = (30, 115, 62)
SELECTION_COLOR = (255, 255, 255)
PROJECTILE_COLOR = (250, 204, 21)
HEALTH_BAR_BG = (127, 29, 29)
HEALTH_BAR_FG = (34, 197, 94)
