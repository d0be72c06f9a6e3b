"""
Unified models library for the game cabinet.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Color)
- Enums: Input event types
- Racing: Racing Thunder track files
- Tower defense: Tower Defense Pro map files

Usage:
    >>> from models import Point2D, EventType
    >>> from models.racing import TrackSet
    >>> from models.tower_defense import TowerDefenseMap
"""

from .primitives import (
    Point2D,
    Color,
)
from .enums import EventType
from .racing import TrackConfig, TrackSet
from .tower_defense import (
    TowerTypeConfig,
    EnemyTypeConfig,
    EnemyGroup,
    WaveConfig,
    TowerDefenseMap,
)

__all__ = [
    # Primitives
    "Point2D",
    "Color",
    # Enums
    "EventType",
    # Racing
    "TrackConfig",
    "TrackSet",
    # Tower defense
    "TowerTypeConfig",
    "EnemyTypeConfig",
    "EnemyGroup",
    "WaveConfig",
    "TowerDefenseMap",
]
