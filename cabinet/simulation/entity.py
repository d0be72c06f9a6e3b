"""
Entity records for the 2D simulation games.

Entities are plain mutable records owned by a session: the spawner creates
them, the stepper moves them and the collision resolver removes them. All
positions are the top-left corner of the axis-aligned bounding box (pygame
convention); ``center`` is derived.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Category(Enum):
    """Broad role of an entity in the simulation."""
    OBSTACLE = "obstacle"
    PICKUP = "pickup"
    HAZARD = "hazard"
    PROJECTILE = "projectile"
    ENEMY = "enemy"
    CHECKPOINT = "checkpoint"
    SUBJECT = "subject"


@dataclass
class Bounds:
    """Axis-aligned playfield rectangle."""
    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self):
        if self.right <= self.left or self.bottom <= self.top:
            raise ValueError(f"Bounds must have positive size, got {self}")

    @classmethod
    def of_size(cls, width: float, height: float) -> 'Bounds':
        """Bounds from the origin with the given size."""
        return cls(0.0, 0.0, float(width), float(height))

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def contains(self, entity: 'Entity') -> bool:
        """True if the entity's box lies entirely inside these bounds."""
        return (entity.left >= self.left and entity.right <= self.right and
                entity.top >= self.top and entity.bottom <= self.bottom)


@dataclass(eq=False)
class Entity:
    """A movable actor.

    Moves either in a straight line (``vx``/``vy`` per tick) or, when a
    ``path`` is set, toward ``path[path_index]`` at ``speed`` per tick.

    Attributes:
        x, y: Top-left corner
        width, height: Box size (positive)
        category: Broad role used for bookkeeping
        kind: Domain type ('asteroid', 'fuel', 'fast', ...), keys effect tables
        vx, vy: Straight-line velocity in pixels per tick
        speed: Scalar speed for path following or heading motion
        heading: Direction in radians (0 = +x)
        health: Hit points; entities at or below 0 are dropped by the stepper
        lifetime: Remaining ticks before expiry (None = unlimited)
        path: Waypoints the entity's center follows
        path_index: Index of the waypoint being approached
        data: Game-specific extras
    """
    x: float
    y: float
    width: float
    height: float
    category: Category = Category.OBSTACLE
    kind: str = ""
    vx: float = 0.0
    vy: float = 0.0
    speed: float = 0.0
    heading: float = 0.0
    health: Optional[float] = None
    lifetime: Optional[int] = None
    path: Optional[List[Tuple[float, float]]] = None
    path_index: int = 0
    data: Dict[str, Any] = field(default_factory=dict)
    removed: bool = False
    id: int = 0  # assigned by the owning SessionContext

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Entity size must be positive, got {self.width}x{self.height}")
        if not self.kind:
            self.kind = self.category.value

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        """Center point of the box."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    def move_center_to(self, cx: float, cy: float) -> None:
        """Place the box so its center is at (cx, cy)."""
        self.x = cx - self.width / 2
        self.y = cy - self.height / 2

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        """Integer (x, y, w, h) for pygame drawing."""
        return (int(self.x), int(self.y), int(self.width), int(self.height))

    @property
    def is_dead(self) -> bool:
        return self.health is not None and self.health <= 0

    def distance_to(self, x: float, y: float) -> float:
        """Distance from the entity's center to a point."""
        cx, cy = self.center
        return math.hypot(x - cx, y - cy)

    def __str__(self) -> str:
        return f"Entity#{self.id}({self.kind} @ {self.x:.1f},{self.y:.1f})"


@dataclass
class SubjectPhysics:
    """Motion parameters for the player-controlled subject.

    Two motion modes:
        'axis': held directions accelerate along x/y independently
        'heading': up/down change speed along ``heading``; left/right turn
    """
    mode: str = 'axis'
    acceleration: float = 1.0
    max_speed: float = 5.0
    reverse_speed: float = 0.0
    friction: float = 0.0
    stop_epsilon: float = 0.1
    turn_rate: float = 0.0
    min_turn_speed: float = 0.5

    def __post_init__(self):
        if self.mode not in ('axis', 'heading'):
            raise ValueError(f"Unknown motion mode: {self.mode}")
        if self.max_speed <= 0:
            raise ValueError(f"max_speed must be positive, got {self.max_speed}")


@dataclass(eq=False)
class Subject(Entity):
    """The single input-driven entity of a session."""
    category: Category = Category.SUBJECT
    physics: SubjectPhysics = field(default_factory=SubjectPhysics)
