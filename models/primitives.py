"""
Shared primitive data types.

Basic geometric and color types used by input events and level files.
"""

import re
from typing import Tuple

from pydantic import BaseModel, field_validator, ConfigDict

_HEX_COLOR = re.compile(r'^#?([0-9a-fA-F]{6})$')


class Point2D(BaseModel):
    """Immutable 2D point for positions and waypoints.

    Attributes:
        x: X coordinate (horizontal, pixels)
        y: Y coordinate (vertical, pixels, down is positive)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.as_tuple
        (100.0, 200.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    @property
    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Color(BaseModel):
    """Immutable RGB color with validation.

    All components must be in the range [0, 255] inclusive.

    Examples:
        >>> Color.from_hex('#ff6b35').as_tuple
        (255, 107, 53)
    """
    r: int
    g: int
    b: int

    @field_validator('r', 'g', 'b')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """Build a color from '#rrggbb' (leading '#' optional)."""
        match = _HEX_COLOR.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = match.group(1)
        return cls(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))

    @property
    def as_tuple(self) -> Tuple[int, int, int]:
        """Return color as an RGB tuple for pygame."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
