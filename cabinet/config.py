"""
Shared configuration helpers.

Games keep their tunables in a ``config.py`` beside the game. Each one loads
an optional ``.env`` from its own directory and reads typed values through
these helpers, so any constant can be overridden without touching code:

    from cabinet.config import load_game_env, get_int

    load_game_env(__file__)
    SCREEN_WIDTH = get_int('SCREEN_WIDTH', 800)
"""
import os
import sys
from pathlib import Path
from typing import Union

from dotenv import load_dotenv


def load_game_env(module_file: Union[str, Path]) -> bool:
    """Load the ``.env`` file that sits beside a game's config module.

    Existing environment variables win over values in the file.

    Returns:
        True if a .env file was found and loaded
    """
    env_path = Path(module_file).parent / '.env'
    return load_dotenv(env_path)


def get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def get_data_dir() -> Path:
    """Get the directory used for persisted player data (best scores).

    Priority:
    1. CABINET_DATA_DIR environment variable
    2. Platform-specific user data directory:
       - macOS: ~/Library/Application Support/Cabinet
       - Windows: %APPDATA%/Cabinet
       - Linux: $XDG_DATA_HOME/cabinet (default ~/.local/share/cabinet)
    """
    env_dir = os.environ.get('CABINET_DATA_DIR')
    if env_dir:
        return Path(env_dir).expanduser()

    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'Cabinet'
    if sys.platform == 'win32':
        return Path(os.environ.get('APPDATA', str(Path.home()))) / 'Cabinet'

    xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return Path(xdg_data) / 'cabinet'
