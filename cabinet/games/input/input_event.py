"""
Input Event - Represents a single input action.

This is a shared module used by all games.
Uses Pydantic for validation and immutability.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from models import EventType, Point2D


class InputEvent(BaseModel):
    """Immutable input event from any source.

    Pointer clicks carry a position; key events carry a key name
    (pygame naming: 'up', 'space', 'w', ...).

    Attributes:
        event_type: CLICK, KEY_DOWN or KEY_UP
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        position: Screen position of a click
        key: Key name of a key event (lowercase)
    """
    event_type: EventType
    timestamp: float
    position: Optional[Point2D] = None
    key: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @field_validator('key')
    @classmethod
    def normalize_key(cls, v: Optional[str]) -> Optional[str]:
        """Key names are compared lowercase."""
        return v.lower() if v else v

    @model_validator(mode='after')
    def validate_payload(self) -> 'InputEvent':
        """Clicks need a position, key events need a key."""
        if self.event_type == EventType.CLICK and self.position is None:
            raise ValueError('Click events require a position')
        if self.event_type != EventType.CLICK and not self.key:
            raise ValueError(f'{self.event_type.value} events require a key')
        return self

    @classmethod
    def click(cls, x: float, y: float, timestamp: float = 0.0) -> 'InputEvent':
        return cls(event_type=EventType.CLICK, timestamp=timestamp, position=Point2D(x=x, y=y))

    @classmethod
    def key_down(cls, key: str, timestamp: float = 0.0) -> 'InputEvent':
        return cls(event_type=EventType.KEY_DOWN, timestamp=timestamp, key=key)

    @classmethod
    def key_up(cls, key: str, timestamp: float = 0.0) -> 'InputEvent':
        return cls(event_type=EventType.KEY_UP, timestamp=timestamp, key=key)

    @property
    def is_click(self) -> bool:
        return self.event_type == EventType.CLICK

    def __str__(self) -> str:
        """String representation for debugging."""
        if self.is_click:
            return (f"InputEvent(click ({self.position.x:.2f}, {self.position.y:.2f}), "
                    f"t={self.timestamp:.3f})")
        return f"InputEvent({self.event_type.value} '{self.key}', t={self.timestamp:.3f})"
