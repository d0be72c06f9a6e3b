"""
Input Manager - Collects input from various sources.

This is a shared module used by all games.
"""
from typing import List, Optional

from cabinet.games.input.input_event import InputEvent
from cabinet.games.input.sources.base import InputSource


class InputManager:
    """Manages input sources and collects events.

    The launcher wraps a pygame window source; tests wrap a scripted one.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        return self._source.poll_events()
