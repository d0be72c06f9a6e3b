"""
Generic 2D simulation loop shared by the canvas games.

Provides:
- entity: Entity/Subject records, Bounds, Category
- session: SessionContext, SessionState, SessionDelta
- spawner: WeightedSpawner
- stepper: Stepper and boundary policies
- collision: overlap(), CollisionResolver, Effect
- clock: FrameClock, Simulation, tick sources
"""

from cabinet.simulation.entity import Bounds, Category, Entity, Subject, SubjectPhysics
from cabinet.simulation.session import SessionContext, SessionDelta, SessionState
from cabinet.simulation.spawner import WeightedSpawner
from cabinet.simulation.stepper import BoundaryPolicy, Stepper, apply_boundary, wrap
from cabinet.simulation.collision import CollisionResolver, Effect, overlap, within_radius
from cabinet.simulation.clock import (
    ClockState,
    FrameClock,
    ManualTickSource,
    Simulation,
    TickSource,
)

__all__ = [
    'Bounds',
    'Category',
    'Entity',
    'Subject',
    'SubjectPhysics',
    'SessionContext',
    'SessionDelta',
    'SessionState',
    'WeightedSpawner',
    'BoundaryPolicy',
    'Stepper',
    'apply_boundary',
    'wrap',
    'CollisionResolver',
    'Effect',
    'overlap',
    'within_radius',
    'ClockState',
    'FrameClock',
    'ManualTickSource',
    'Simulation',
    'TickSource',
]
