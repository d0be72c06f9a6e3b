"""
Game Registry - Auto-discovery and management of cabinet games.

Games are automatically discovered by scanning the games/ directory for
subdirectories containing a game_mode.py with a class inheriting from BaseGame.

Game metadata and CLI arguments are retrieved from the game class itself
(via BaseGame class attributes). Directories with only a game_info.py are
catalog entries: listed with their metadata, playable only if they define
get_game_mode().

Usage:
    from games.registry import get_registry

    registry = get_registry()
    available = registry.list_games()  # ['game2048', 'memorymatch', ...]

    # Get game info including CLI arguments
    info = registry.get_game_info('racingthunder')
    args = registry.get_game_arguments('racingthunder')

    # Create game instance
    game = registry.create_game('snakeclassic', seed=42)
"""

import importlib
import inspect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TYPE_CHECKING

from cabinet.logging import get_logger

if TYPE_CHECKING:
    from cabinet.games.base_game import BaseGame

log = get_logger('registry')

GAMES_DIR = Path(__file__).parent


@dataclass
class GameInfo:
    """Information about a registered game."""
    name: str
    slug: str  # lowercase identifier (directory name)
    description: str
    version: str
    author: str
    module_path: str  # e.g., 'games.SnakeClassic'

    # CLI arguments (from game class or module)
    arguments: List[Dict[str, Any]] = field(default_factory=list)

    playable: bool = True
    field_size: Optional[tuple] = None


class GameRegistry:
    """
    Registry for auto-discovering and managing cabinet games.

    Discovery works by:
    1. Looking for game_mode.py in each game directory
    2. Finding classes that inherit from BaseGame
    3. Reading metadata from class attributes (NAME, DESCRIPTION, etc.)
    4. Falling back to game_info.py module variables if no BaseGame found
    """

    def __init__(self, games_dir: Optional[Path] = None, package: str = 'games'):
        """
        Initialize the game registry.

        Args:
            games_dir: Directory to scan (default: this package)
            package: Import package matching games_dir
        """
        self._games_dir = Path(games_dir) if games_dir else GAMES_DIR
        self._package = package
        self._games: Dict[str, GameInfo] = {}
        self._game_classes: Dict[str, Type['BaseGame']] = {}
        self._discover_games()

    def _discover_games(self) -> None:
        """Register every game directory under the games package."""
        skip_dirs = {'__pycache__'}

        if not self._games_dir.exists():
            log.warning("Games directory not found: %s", self._games_dir)
            return

        for game_dir in sorted(self._games_dir.iterdir()):
            if not game_dir.is_dir():
                continue
            if game_dir.name.startswith('_') or game_dir.name.startswith('.'):
                continue
            if game_dir.name.lower() in skip_dirs:
                continue

            has_game_mode = (game_dir / 'game_mode.py').exists()
            has_game_info = (game_dir / 'game_info.py').exists()

            if has_game_mode or has_game_info:
                self._register_game(game_dir)

        log.debug("Discovered %d games", len(self._games))

    def _register_game(self, game_dir: Path) -> None:
        """
        Register a game from its directory.

        Attempts to find a BaseGame subclass in game_mode.py first,
        falling back to game_info.py module variables.

        Args:
            game_dir: Path to game directory
        """
        slug = game_dir.name.lower()
        module_path = f"{self._package}.{game_dir.name}"

        try:
            game_class = self._find_game_class(game_dir, module_path)
            if game_class is not None:
                source = game_class
                arguments = game_class.get_arguments()
                playable = True
                self._game_classes[slug] = game_class
            else:
                source = self._load_game_info(module_path)
                if source is None:
                    return
                arguments = getattr(source, 'ARGUMENTS', [])
                playable = (
                    not getattr(source, 'COMING_SOON', False)
                    and hasattr(source, 'get_game_mode')
                )

            self._games[slug] = GameInfo(
                name=getattr(source, 'NAME', game_dir.name),
                slug=slug,
                description=getattr(source, 'DESCRIPTION', ''),
                version=getattr(source, 'VERSION', '1.0.0'),
                author=getattr(source, 'AUTHOR', 'Unknown'),
                module_path=module_path,
                arguments=arguments,
                playable=playable,
                field_size=getattr(source, 'FIELD_SIZE', None),
            )

        except Exception as e:
            # Skip games that fail to load
            log.warning("Failed to load game from %s: %s", game_dir, e)

    def _find_game_class(self, game_dir: Path, module_path: str) -> Optional[Type['BaseGame']]:
        """
        Find a BaseGame subclass in the game's game_mode.py.

        Args:
            game_dir: Path to game directory
            module_path: Module path (e.g., 'games.SnakeClassic')

        Returns:
            The game class, or None if the directory has no game_mode.py

        Raises:
            ImportError: If game_mode.py exists but fails to import
        """
        if not (game_dir / 'game_mode.py').exists():
            return None

        from cabinet.games.base_game import BaseGame

        module = importlib.import_module(f"{module_path}.game_mode")

        for name, obj in inspect.getmembers(module, inspect.isclass):
            # Only classes defined in this module
            if obj.__module__ != module.__name__:
                continue
            if issubclass(obj, BaseGame) and obj is not BaseGame and not inspect.isabstract(obj):
                return obj

        return None

    def _load_game_info(self, module_path: str):
        """
        Load the game_info.py module for a game.

        Args:
            module_path: Module path

        Returns:
            The module, or None if it cannot be imported
        """
        try:
            return importlib.import_module(f"{module_path}.game_info")
        except ImportError as e:
            log.warning("Failed to import %s.game_info: %s", module_path, e)
            return None

    def list_games(self, playable_only: bool = False) -> List[str]:
        """
        Get list of available game slugs.

        Args:
            playable_only: Skip catalog-only entries

        Returns:
            List of game slug identifiers
        """
        return sorted(
            slug for slug, info in self._games.items()
            if info.playable or not playable_only
        )

    def get_game_info(self, slug: str) -> Optional[GameInfo]:
        """
        Get information about a specific game.

        Args:
            slug: Game identifier

        Returns:
            GameInfo or None if not found
        """
        return self._games.get(slug.lower())

    def get_game_arguments(self, slug: str) -> List[Dict[str, Any]]:
        """
        Get CLI arguments for a specific game.

        Args:
            slug: Game identifier

        Returns:
            List of argument definitions for argparse
        """
        info = self._games.get(slug.lower())
        if info is None:
            return []
        return info.arguments

    def create_game(self, slug: str, **kwargs) -> Any:
        """
        Create a game instance.

        Uses the cached game class if available, otherwise falls back
        to game_info.py's get_game_mode() function.

        Args:
            slug: Game identifier
            **kwargs: Game-specific arguments

        Returns:
            Game instance

        Raises:
            ValueError: If the game is unknown or not playable yet
        """
        info = self._games.get(slug.lower())
        if info is None:
            available = ', '.join(self.list_games())
            raise ValueError(f"Unknown game: {slug}. Available: {available}")

        if not info.playable:
            raise ValueError(f"{info.name} is not playable yet (coming soon)")

        game_class = self._game_classes.get(slug.lower())
        if game_class is not None:
            log.info("Creating %s", info.name)
            return game_class(**kwargs)

        game_info_module = importlib.import_module(f"{info.module_path}.game_info")
        return game_info_module.get_game_mode(**kwargs)


# Singleton instance for convenience
_registry: Optional[GameRegistry] = None


def get_registry() -> GameRegistry:
    """Get the global game registry instance (created on first call)."""
    global _registry
    if _registry is None:
        _registry = GameRegistry()
    return _registry
