"""
Pydantic v2 models for Tower Defense Pro map files.

A map file defines the enemy path, the purchasable towers, the enemy
types and the wave schedule.
"""

from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from models.primitives import Color, Point2D


def _check_color(v: str) -> str:
    Color.from_hex(v)
    return v


class TowerTypeConfig(BaseModel):
    """Stats of a purchasable tower."""
    model_config = {"frozen": True}

    damage: int = Field(description="Damage per projectile", gt=0)
    range: float = Field(description="Targeting radius in pixels", gt=0)
    fire_rate_ms: int = Field(description="Milliseconds between shots", gt=0)
    cost: int = Field(description="Purchase price", gt=0)
    color: str = Field(description="Tower and projectile color as '#rrggbb'")

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Ensure the color parses as hex."""
        return _check_color(v)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return Color.from_hex(self.color).as_tuple


class EnemyTypeConfig(BaseModel):
    """Stats of an enemy type."""
    model_config = {"frozen": True}

    health: int = Field(description="Starting hit points", gt=0)
    speed: float = Field(description="Pixels per tick along the path", gt=0)
    reward: int = Field(description="Money awarded for a kill", ge=0)
    color: str = Field(description="Enemy color as '#rrggbb'")

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Ensure the color parses as hex."""
        return _check_color(v)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return Color.from_hex(self.color).as_tuple


class EnemyGroup(BaseModel):
    """A run of identical enemies within a wave."""
    model_config = {"frozen": True}

    type: str = Field(description="Enemy type name")
    count: int = Field(description="Number of enemies", ge=1)
    delay_ms: int = Field(description="Milliseconds between consecutive spawns", ge=0)


class WaveConfig(BaseModel):
    """One wave: groups spawned back to back, plus the clear bonus."""
    model_config = {"frozen": True}

    enemies: List[EnemyGroup] = Field(description="Enemy groups in spawn order", min_length=1)
    reward: int = Field(description="Money awarded when the wave is cleared", ge=0)

    @property
    def total_enemies(self) -> int:
        return sum(group.count for group in self.enemies)


class TowerDefenseMap(BaseModel):
    """Complete Tower Defense Pro map."""
    model_config = {"frozen": True}

    name: str = Field(description="Map name")
    width: int = Field(default=800, description="Field width in pixels", gt=0)
    height: int = Field(default=600, description="Field height in pixels", gt=0)
    grid_size: int = Field(default=40, description="Tower placement grid in pixels", gt=0)
    starting_money: int = Field(default=200, ge=0)
    starting_health: int = Field(default=100, gt=0)
    path: List[Point2D] = Field(description="Enemy path waypoints, entry first", min_length=2)
    tower_types: Dict[str, TowerTypeConfig] = Field(min_length=1)
    enemy_types: Dict[str, EnemyTypeConfig] = Field(min_length=1)
    waves: List[WaveConfig] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_wave_enemy_types(self) -> 'TowerDefenseMap':
        """Every wave group must reference a defined enemy type."""
        for number, wave in enumerate(self.waves, start=1):
            for group in wave.enemies:
                if group.type not in self.enemy_types:
                    raise ValueError(
                        f"Wave {number} uses unknown enemy type '{group.type}'. "
                        f"Defined: {sorted(self.enemy_types)}"
                    )
        return self
