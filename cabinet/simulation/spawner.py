"""
Probabilistic entity spawner.

One Bernoulli trial per tick decides whether anything spawns; on success a
kind is rolled from a weighted table and the game's factory builds the
entity for the current level. An optional validity predicate rejects
entities placed in forbidden regions; after ``max_attempts`` rejected
placements the tick's spawn is skipped.
"""
import random
from typing import Callable, Dict, Optional

from cabinet.logging import get_logger
from cabinet.simulation.entity import Entity

log = get_logger('spawner')

# kind, level, rng -> entity
EntityFactory = Callable[[str, int, random.Random], Entity]


class WeightedSpawner:
    """Spawns entities from a weighted kind table.

    Args:
        table: kind -> weight; weights must sum to 1
        factory: Builds an entity of the rolled kind for a level
        rng: Random generator shared with the session
        base_probability: Chance of a spawn per tick
        is_valid: Optional predicate a new entity must satisfy
        max_attempts: Placements tried before the tick is skipped
    """

    def __init__(
        self,
        table: Dict[str, float],
        factory: EntityFactory,
        rng: random.Random,
        base_probability: float = 0.02,
        is_valid: Optional[Callable[[Entity], bool]] = None,
        max_attempts: int = 10,
    ):
        if not table:
            raise ValueError("Spawn table must not be empty")
        if any(w < 0 for w in table.values()):
            raise ValueError(f"Spawn weights must be non-negative: {table}")
        total = sum(table.values())
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Spawn weights must sum to 1, got {total}")
        if not 0.0 <= base_probability <= 1.0:
            raise ValueError(f"base_probability must be in [0, 1], got {base_probability}")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self._table = list(table.items())
        self._factory = factory
        self.rng = rng
        self.base_probability = base_probability
        self._is_valid = is_valid
        self.max_attempts = max_attempts

    def choose_kind(self, roll: float) -> str:
        """Map a roll in [0, 1) onto the weighted table.

        Walks the table subtracting weights until the roll falls inside one;
        rounding leftovers land on the first entry.
        """
        for kind, weight in self._table:
            if roll < weight:
                return kind
            roll -= weight
        return self._table[0][0]

    def spawn(self, level: int = 1) -> Optional[Entity]:
        """Run this tick's spawn trial.

        Returns:
            The new entity, or None if nothing spawned this tick
        """
        if self.rng.random() >= self.base_probability:
            return None

        kind = self.choose_kind(self.rng.random())
        for _ in range(self.max_attempts):
            entity = self._factory(kind, level, self.rng)
            if self._is_valid is None or self._is_valid(entity):
                log.trace("Spawned %s", entity)
                return entity

        log.debug("No valid position for %s after %d attempts, skipping", kind, self.max_attempts)
        return None
