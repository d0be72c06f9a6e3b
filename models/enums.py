"""
Enumerations shared by input sources and games.
"""

from enum import Enum


class EventType(str, Enum):
    """Types of input events.

    Attributes:
        CLICK: Pointer press at a screen position
        KEY_DOWN: A key was pressed
        KEY_UP: A key was released
    """
    CLICK = "click"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
