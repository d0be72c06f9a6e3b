"""Collision detection and effect resolution.

Subject-vs-entity collisions use axis-aligned box overlap with strict
inequalities: boxes that only touch along an edge do not collide.
"""
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from cabinet.logging import get_logger
from cabinet.simulation.entity import Entity
from cabinet.simulation.session import SessionDelta

log = get_logger('collision')


def overlap(a: Entity, b: Entity) -> bool:
    """True if two boxes intersect on both axes (edge contact excluded)."""
    return (a.left < b.right and a.right > b.left and
            a.top < b.bottom and a.bottom > b.top)


def within_radius(ax: float, ay: float, bx: float, by: float, radius: float) -> bool:
    """True if two points are closer than ``radius``."""
    return math.hypot(ax - bx, ay - by) < radius


@dataclass(frozen=True)
class Effect:
    """What touching an entity of some kind does to the session.

    Attributes:
        score: Score change
        meters: Meter name -> change
        remove: Whether the entity is consumed
    """
    score: float = 0.0
    meters: Dict[str, float] = field(default_factory=dict)
    remove: bool = False


class CollisionResolver:
    """Applies an effect table to everything the subject overlaps.

    Args:
        effects: Effect per entity kind; kinds without an entry are inert
        key: Maps an entity to its effect-table key (default: ``kind``)
    """

    def __init__(
        self,
        effects: Dict[str, Effect],
        key: Optional[Callable[[Entity], str]] = None,
    ):
        self._effects = dict(effects)
        self._key = key or (lambda e: e.kind)

    def effect_for(self, entity: Entity) -> Optional[Effect]:
        return self._effects.get(self._key(entity))

    def resolve(self, subject: Entity, entities: List[Entity]) -> SessionDelta:
        """Evaluate every subject/entity pair once.

        Removals are applied after all pairs have been evaluated, so the
        order of ``entities`` never changes which effects apply.

        Returns:
            The accumulated SessionDelta (``removed`` lists consumed entities)
        """
        delta = SessionDelta()
        consumed: List[Entity] = []

        for entity in entities:
            if entity.removed:
                continue
            if not overlap(subject, entity):
                continue
            effect = self.effect_for(entity)
            if effect is None:
                continue

            delta.add(effect.score, effect.meters)
            if effect.remove:
                consumed.append(entity)
            log.trace("%s hit %s", subject, entity)

        if consumed:
            for entity in consumed:
                entity.removed = True
            entities[:] = [e for e in entities if not e.removed]
            delta.removed = consumed

        return delta
