"""
Pygame Input Source - Mouse clicks and keyboard from the pygame event queue.

This is a shared module used by all games.
"""
import time
from typing import List, Optional, Tuple

import pygame

from cabinet.games.input.input_event import InputEvent
from cabinet.games.input.sources.base import InputSource
from models import EventType, Point2D


class PygameInputSource(InputSource):
    """Converts pygame mouse and keyboard events into InputEvent models.

    Events that are neither clicks nor key presses (window close, resize)
    are re-posted to the pygame event queue for the main loop.

    Args:
        offset: Top-left of the game field inside the window; click
            positions are reported relative to it
    """

    def __init__(self, offset: Tuple[int, int] = (0, 0)):
        """Initialize the pygame input source."""
        self._event_queue: List[InputEvent] = []
        self._offset = offset

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def _convert(self, event: pygame.event.Event) -> Optional[InputEvent]:
        now = time.monotonic()
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:  # Left mouse button only
                return None
            pos_x, pos_y = event.pos
            return InputEvent(
                event_type=EventType.CLICK,
                timestamp=now,
                position=Point2D(x=float(pos_x - self._offset[0]), y=float(pos_y - self._offset[1])),
            )
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = pygame.key.name(event.key)
            if not key:
                return None
            event_type = EventType.KEY_DOWN if event.type == pygame.KEYDOWN else EventType.KEY_UP
            return InputEvent(event_type=event_type, timestamp=now, key=key)
        return None

    def update(self, dt: float) -> None:
        """Process pygame events and collect clicks and key events."""
        deferred = []
        for event in pygame.event.get():
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN, pygame.KEYUP):
                input_event = self._convert(event)
                if input_event is not None:
                    self._event_queue.append(input_event)
            elif event.type not in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
                deferred.append(event)
        # Re-post non-input events for the main loop to handle
        for event in deferred:
            pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
