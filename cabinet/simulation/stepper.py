"""
Per-tick motion for the subject and all entities.

Velocities are in pixels per tick. After every position update the
boundary policy is applied, so once ``step`` returns every surviving entity
satisfies it:

    CLAMP: the box is pushed back inside the bounds
    WRAP:  the top-left corner is wrapped into [left, right) x [top, bottom)
    CULL:  entities whose box is not fully inside are removed
"""
import math
from enum import Enum
from typing import Collection, List, Optional

from cabinet.logging import get_logger
from cabinet.simulation.entity import Bounds, Entity, Subject

log = get_logger('stepper')

UP = 'up'
DOWN = 'down'
LEFT = 'left'
RIGHT = 'right'


class BoundaryPolicy(Enum):
    CLAMP = "clamp"
    WRAP = "wrap"
    CULL = "cull"


def wrap(value: float, low: float, span: float) -> float:
    """Wrap value into [low, low + span)."""
    r = (value - low) % span
    # a tiny negative offset rounds up to span
    return low + (r if r < span else 0.0)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def apply_boundary(entity: Entity, bounds: Bounds, policy: BoundaryPolicy) -> bool:
    """Apply a boundary policy to one entity.

    Returns:
        False if the entity must be removed (CULL only), True otherwise
    """
    if policy is BoundaryPolicy.CLAMP:
        entity.x = clamp(entity.x, bounds.left, max(bounds.left, bounds.right - entity.width))
        entity.y = clamp(entity.y, bounds.top, max(bounds.top, bounds.bottom - entity.height))
        return True
    if policy is BoundaryPolicy.WRAP:
        entity.x = wrap(entity.x, bounds.left, bounds.width)
        entity.y = wrap(entity.y, bounds.top, bounds.height)
        return True
    return bounds.contains(entity)


def _move_subject_axis(subject: Subject, held: Collection[str]) -> None:
    p = subject.physics
    for axis, negative, positive in (('vx', LEFT, RIGHT), ('vy', UP, DOWN)):
        velocity = getattr(subject, axis)
        direction = (1 if positive in held else 0) - (1 if negative in held else 0)
        if direction:
            velocity = clamp(velocity + direction * p.acceleration, -p.max_speed, p.max_speed)
        else:
            velocity *= p.friction
            if abs(velocity) < p.stop_epsilon:
                velocity = 0.0
        setattr(subject, axis, velocity)
    subject.x += subject.vx
    subject.y += subject.vy


def _move_subject_heading(subject: Subject, held: Collection[str]) -> None:
    p = subject.physics
    accelerating = False
    if UP in held:
        subject.speed = min(p.max_speed, subject.speed + p.acceleration)
        accelerating = True
    if DOWN in held:
        subject.speed = max(-p.reverse_speed, subject.speed - p.acceleration)
        accelerating = True
    if abs(subject.speed) > p.min_turn_speed:
        if LEFT in held:
            subject.heading -= p.turn_rate * abs(subject.speed)
        if RIGHT in held:
            subject.heading += p.turn_rate * abs(subject.speed)

    if not accelerating:
        subject.speed *= p.friction
        if abs(subject.speed) < p.stop_epsilon:
            subject.speed = 0.0

    subject.x += math.cos(subject.heading) * subject.speed
    subject.y += math.sin(subject.heading) * subject.speed


def follow_path(entity: Entity, epsilon: float) -> bool:
    """Move an entity's center one tick along its waypoint path.

    Within ``epsilon`` on both axes of the current waypoint the center snaps
    onto it and the index advances.

    Returns:
        True once the last waypoint has been reached
    """
    if entity.path_index >= len(entity.path):
        return True

    tx, ty = entity.path[entity.path_index]
    cx, cy = entity.center
    dx, dy = tx - cx, ty - cy

    if abs(dx) < epsilon and abs(dy) < epsilon:
        entity.move_center_to(tx, ty)
        entity.path_index += 1
        return entity.path_index >= len(entity.path)

    distance = math.hypot(dx, dy)
    step = min(entity.speed, distance)
    entity.move_center_to(cx + dx / distance * step, cy + dy / distance * step)
    return False


class Stepper:
    """Advances a session's subject and entities by one tick.

    Args:
        bounds: Playfield bounds
        policy: Boundary policy for entities
        subject_policy: Boundary policy for the subject (CULL is not allowed)
        path_epsilon: Waypoint snap distance per axis
        subject_bounds: Bounds for the subject when they differ from the
            entities' (e.g. objects culled past the visible field)
    """

    def __init__(
        self,
        bounds: Bounds,
        policy: BoundaryPolicy = BoundaryPolicy.CLAMP,
        subject_policy: BoundaryPolicy = BoundaryPolicy.CLAMP,
        path_epsilon: float = 5.0,
        subject_bounds: Optional[Bounds] = None,
    ):
        if subject_policy is BoundaryPolicy.CULL:
            raise ValueError("The subject cannot be culled")
        if path_epsilon <= 0:
            raise ValueError(f"path_epsilon must be positive, got {path_epsilon}")
        self.bounds = bounds
        self.subject_bounds = subject_bounds or bounds
        self.policy = policy
        self.subject_policy = subject_policy
        self.path_epsilon = path_epsilon

    def step_subject(self, subject: Subject, held: Collection[str]) -> None:
        """Apply input-driven motion to the subject, then its boundary policy."""
        if subject.physics.mode == 'heading':
            _move_subject_heading(subject, held)
        else:
            _move_subject_axis(subject, held)
        apply_boundary(subject, self.subject_bounds, self.subject_policy)

    def step(
        self,
        entities: List[Entity],
        subject: Optional[Subject] = None,
        held: Collection[str] = (),
    ) -> List[Entity]:
        """Advance everything one tick, mutating ``entities`` in place.

        Entities that leave the bounds (CULL), run out of lifetime, drop to
        zero health or reach the end of their path are removed from the list.

        Returns:
            Entities that completed their path this tick
        """
        if subject is not None:
            self.step_subject(subject, held)

        finished: List[Entity] = []
        survivors: List[Entity] = []

        for entity in entities:
            if entity.removed:
                continue

            if entity.path:
                if follow_path(entity, self.path_epsilon):
                    entity.removed = True
                    finished.append(entity)
                    continue
            else:
                entity.x += entity.vx
                entity.y += entity.vy

            if not apply_boundary(entity, self.bounds, self.policy):
                entity.removed = True
                log.trace("Culled %s", entity)
                continue

            if entity.lifetime is not None:
                entity.lifetime -= 1
                if entity.lifetime <= 0:
                    entity.removed = True
                    continue

            if entity.is_dead:
                entity.removed = True
                continue

            survivors.append(entity)

        entities[:] = survivors
        return finished
