"""
Pydantic v2 models for Racing Thunder track files.

A track file lists one or more closed circuits. Each circuit is a loop of
checkpoints driven in order; passing checkpoint 0 again completes a lap.
"""

from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator

from models.primitives import Color, Point2D


class TrackConfig(BaseModel):
    """A single race track."""
    model_config = {"frozen": True}

    name: str = Field(
        description="Display name of the track"
    )
    color: str = Field(
        description="Track color as '#rrggbb'"
    )
    difficulty: int = Field(
        description="Difficulty rating shown in the track list",
        ge=1,
        le=3
    )
    laps: int = Field(
        description="Laps to complete the race",
        ge=1
    )
    checkpoints: List[Point2D] = Field(
        description="Checkpoint centers in driving order; the car starts on the first",
        min_length=2
    )

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Ensure the color parses as hex."""
        Color.from_hex(v)
        return v

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return Color.from_hex(self.color).as_tuple


class TrackSet(BaseModel):
    """All tracks offered by the game, in menu order."""
    model_config = {"frozen": True}

    tracks: List[TrackConfig] = Field(
        description="Available tracks",
        min_length=1
    )

    @field_validator("tracks")
    @classmethod
    def validate_unique_names(cls, v: List[TrackConfig]) -> List[TrackConfig]:
        """Track names must be unique."""
        names = [t.name for t in v]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate track names: {names}")
        return v
