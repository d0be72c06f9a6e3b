"""
Best-score storage.

Each game keeps at most a handful of "best" values (highest score, fastest
lap, fewest moves) that survive between sessions. Stores are simple
key-value maps; the JSON file store keeps everything in one file under the
player data directory.

Reads never fail: a missing file, an unreadable file or a value that does
not parse is reported as absent so a session always starts.

Usage:
    from cabinet.storage import JsonFileStore

    store = JsonFileStore()
    best = store.get_number('spaceAdventureBest') or 0
    store.set('spaceAdventureBest', 1200)
"""
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cabinet.config import get_data_dir
from cabinet.logging import get_logger

log = get_logger('storage')

BEST_SCORES_FILE = 'best_scores.json'


class ScoreStore(ABC):
    """Abstract key-value store for persisted best values."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get a stored value, or None if absent or unreadable."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value."""
        pass

    def get_number(self, key: str) -> Optional[float]:
        """Get a stored value as a number.

        Accepts numbers and numeric strings (values written by older clients
        were plain strings). Anything else is treated as absent.
        """
        value = self.get(key)
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                number = float(value)
            except ValueError:
                log.warning("Ignoring malformed value for %s: %r", key, value)
                return None
            return int(number) if number.is_integer() else number
        if value is not None:
            log.warning("Ignoring malformed value for %s: %r", key, value)
        return None


class MemoryStore(ScoreStore):
    """In-memory store (tests, or sessions that should not persist)."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def as_dict(self) -> Dict[str, Any]:
        """Copy of all stored values."""
        return dict(self._values)


class JsonFileStore(ScoreStore):
    """Store backed by a single JSON object on disk.

    Args:
        path: JSON file path (default: <data dir>/best_scores.json)
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._path = Path(path) if path else get_data_dir() / BEST_SCORES_FILE

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def _read_all(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Could not read %s, treating as empty: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Unexpected content in %s, treating as empty", self._path)
            return {}
        return data

    def get(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, 'w') as f:
                json.dump(data, f, indent=2, sort_keys=True)
        except OSError as e:
            log.warning("Could not save %s to %s: %s", key, self._path, e)
            return
        log.debug("Saved %s=%r", key, value)
