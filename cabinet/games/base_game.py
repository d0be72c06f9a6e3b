"""Base class for all cabinet games.

All games should inherit from BaseGame to ensure a consistent interface
with dev_game.py and the game registry.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, making them part of the plugin architecture.

Every game also gets:
- a session random generator (``self.rng``, seeded by ``--seed``)
- a TaskScheduler (``self.timers``) advanced by ``update(dt)`` and cancelled
  by ``reset()``
- an InputState (``self.input``) holding the currently pressed keys
- best-score persistence through a ScoreStore
"""
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import pygame

from cabinet.games.game_state import GameState
from cabinet.games.input.input_state import InputState
from cabinet.logging import get_logger
from cabinet.storage import JsonFileStore, MemoryStore, ScoreStore
from cabinet.timers import TaskScheduler

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for all cabinet games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse
        FIELD_SIZE: (width, height) of the play area in pixels

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(events): Process input events
        - render(screen): Draw the game

    Optional overrides:
        - _update(dt): Per-frame logic after timers have advanced
        - reset(): Reset game to initial state (call super().reset())

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"
            DESCRIPTION = "A fun game"

            ARGUMENTS = [
                {'name': '--size', 'type': int, 'default': 3,
                 'choices': [3, 4], 'help': 'Board size'},
            ]

            def __init__(self, size=3, **kwargs):
                super().__init__(**kwargs)
                self._size = size
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Cabinet Team"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    FIELD_SIZE: Tuple[int, int] = (800, 600)

    # =========================================================================
    # Standard Arguments (automatically available to all games)
    # =========================================================================

    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for a reproducible session'
        },
        {
            'name': '--no-save',
            'action': 'store_true',
            'default': False,
            'help': 'Do not read or write best scores on disk'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first. Duplicates by name are removed
        (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in list(cls.ARGUMENTS) + cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Initialization
    # =========================================================================

    def __init__(
        self,
        store: Optional[ScoreStore] = None,
        seed: Optional[int] = None,
        no_save: bool = False,
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """Initialize base game.

        Args:
            store: Best-score store (default: JSON file in the data directory)
            seed: Seed for the session random generator
            no_save: Keep best scores in memory only
            rng: Explicit random generator (overrides seed)
        """
        if store is None:
            store = MemoryStore() if no_save else JsonFileStore()
        self._store = store
        self.rng = rng or random.Random(seed)
        self.timers = TaskScheduler()
        self.input = InputState()

        if kwargs:
            log.debug("%s ignoring options: %s", type(self).__name__, sorted(kwargs))

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState.

        Returns:
            GameState.PLAYING, GameState.GAME_OVER, GameState.WON, etc.
        """
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score.

        Returns:
            Integer score value
        """
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    def update(self, dt: float) -> None:
        """Update game logic.

        Advances scheduled tasks, then runs the game's own ``_update``.

        Args:
            dt: Delta time in seconds since last frame
        """
        self.timers.advance(dt)
        self._update(dt)

    def _update(self, dt: float) -> None:
        """Per-frame game logic (override as needed)."""
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    def reset(self) -> None:
        """Reset game to initial state.

        Cancels every pending scheduled task so no callback from the old
        session can fire into the new one.
        """
        self.timers.cancel_all()
        self.input.clear()

    # =========================================================================
    # Best Score Support
    # =========================================================================

    @property
    def store(self) -> ScoreStore:
        return self._store

    def _load_best(self, key: str) -> Optional[float]:
        """Read a best value; malformed or missing data reads as None."""
        return self._store.get_number(key)

    def _record_best(self, key: str, value: float, lower_is_better: bool = False) -> bool:
        """Store ``value`` if it beats the stored best.

        Returns:
            True if a new best was written
        """
        current = self._load_best(key)
        if current is not None:
            if lower_is_better and value >= current:
                return False
            if not lower_is_better and value <= current:
                return False
        self._store.set(key, value)
        log.info("New best for %s: %s", key, value)
        return True
