"""
Base Input Source - Abstract interface for input backends.

This is a shared module used by all games.
"""
from abc import ABC, abstractmethod
from typing import List

from cabinet.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass


class ScriptedInputSource(InputSource):
    """Input source fed programmatically (replays, tests)."""

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def push(self, *events: InputEvent) -> None:
        """Queue events for the next poll."""
        self._event_queue.extend(events)

    def poll_events(self) -> List[InputEvent]:
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        pass
