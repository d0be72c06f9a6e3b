"""
Input State - Held keys plus queued discrete presses.

Key events update a held set (``on_input_down`` / ``on_input_up``); games
read continuous input through mapped actions ('up', 'left', ...) and react
to discrete presses (clicks and fresh key presses) once per frame.
"""
from typing import Dict, List, Optional, Set

from cabinet.games.input.input_event import InputEvent
from models import EventType

UP = 'up'
DOWN = 'down'
LEFT = 'left'
RIGHT = 'right'

# Arrow keys under both browser-style and pygame-style names, plus WASD
DEFAULT_KEYMAP: Dict[str, str] = {
    'arrowup': UP, 'up': UP, 'w': UP,
    'arrowdown': DOWN, 'down': DOWN, 's': DOWN,
    'arrowleft': LEFT, 'left': LEFT, 'a': LEFT,
    'arrowright': RIGHT, 'right': RIGHT, 'd': RIGHT,
}


class InputState:
    """Held-key set and action mapping for one game session.

    Args:
        keymap: key name -> action name (default: arrows and WASD)
    """

    def __init__(self, keymap: Optional[Dict[str, str]] = None):
        self._keymap = dict(DEFAULT_KEYMAP if keymap is None else keymap)
        self._held: Set[str] = set()

    @property
    def held(self) -> Set[str]:
        """Raw key names currently held."""
        return set(self._held)

    @property
    def actions(self) -> Set[str]:
        """Actions whose keys are currently held."""
        return {self._keymap[k] for k in self._held if k in self._keymap}

    def action_for(self, key: Optional[str]) -> Optional[str]:
        """Action a key maps to, or None."""
        if not key:
            return None
        return self._keymap.get(key.lower())

    def is_held(self, action: str) -> bool:
        return action in self.actions

    def on_input_down(self, code: str) -> bool:
        """Record a key press.

        Returns:
            True if the key was not already held (a fresh press)
        """
        code = code.lower()
        fresh = code not in self._held
        self._held.add(code)
        return fresh

    def on_input_up(self, code: str) -> None:
        """Record a key release."""
        self._held.discard(code.lower())

    def process(self, events: List[InputEvent]) -> List[InputEvent]:
        """Fold key events into the held set.

        Returns:
            Discrete presses in arrival order: clicks and fresh key downs
        """
        presses: List[InputEvent] = []
        for event in events:
            if event.event_type == EventType.KEY_DOWN:
                if self.on_input_down(event.key):
                    presses.append(event)
            elif event.event_type == EventType.KEY_UP:
                self.on_input_up(event.key)
            else:
                presses.append(event)
        return presses

    def clear(self) -> None:
        """Release everything (focus loss, session reset)."""
        self._held.clear()
