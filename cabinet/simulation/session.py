"""
Per-session simulation context.

A SessionContext bundles everything one play session mutates: the score and
resource meters, the subject, the entity list, the playfield bounds and the
session's random generator. Stepper, resolver and spawner receive it (or
parts of it) explicitly; nothing lives in module globals.
"""
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from cabinet.logging import get_logger
from cabinet.simulation.entity import Bounds, Entity, Subject

log = get_logger('session')

# meter name -> (minimum, maximum); None means unbounded on that side
MeterLimits = Dict[str, Tuple[Optional[float], Optional[float]]]


@dataclass
class SessionDelta:
    """Changes produced by one resolution pass."""
    score: float = 0.0
    meters: Dict[str, float] = field(default_factory=dict)
    removed: List[Entity] = field(default_factory=list)

    def add(self, score: float = 0.0, meters: Optional[Dict[str, float]] = None) -> None:
        """Accumulate a score and meter change."""
        self.score += score
        for name, amount in (meters or {}).items():
            self.meters[name] = self.meters.get(name, 0.0) + amount

    @property
    def is_empty(self) -> bool:
        return not self.score and not any(self.meters.values()) and not self.removed


@dataclass
class SessionState:
    """Score, meters and progress flags for one session."""
    score: float = 0
    meters: Dict[str, float] = field(default_factory=dict)
    level: int = 1
    over: bool = False
    won: bool = False
    paused: bool = False

    def meter(self, name: str) -> float:
        return self.meters.get(name, 0.0)

    def change_meter(self, name: str, amount: float, limits: Optional[MeterLimits] = None) -> float:
        """Add to a meter, clamped to its limits. Returns the new value."""
        value = self.meters.get(name, 0.0) + amount
        lo, hi = (limits or {}).get(name, (None, None))
        if lo is not None:
            value = max(lo, value)
        if hi is not None:
            value = min(hi, value)
        self.meters[name] = value
        return value

    def apply(self, delta: SessionDelta, limits: Optional[MeterLimits] = None) -> None:
        """Apply a resolution delta.

        Each meter change is clamped individually, in the order the
        effects were accumulated.
        """
        self.score += delta.score
        for name, amount in delta.meters.items():
            self.change_meter(name, amount, limits)


class SessionContext:
    """Mutable state of one play session.

    Args:
        bounds: Playfield bounds
        subject_factory: Builds a fresh subject for each (re)start (None for
            games without a player-controlled entity)
        initial_meters: Meter values at session start
        meter_limits: Per-meter (min, max) clamps
        rng: Random generator (seed it for reproducible sessions)
    """

    def __init__(
        self,
        bounds: Bounds,
        subject_factory: Optional[Callable[[], Subject]] = None,
        initial_meters: Optional[Dict[str, float]] = None,
        meter_limits: Optional[MeterLimits] = None,
        rng: Optional[random.Random] = None,
    ):
        self.bounds = bounds
        self.rng = rng or random.Random()
        self.meter_limits: MeterLimits = dict(meter_limits or {})
        self._subject_factory = subject_factory
        self._initial_meters = dict(initial_meters or {})

        self.state = self.initial_state()
        self.subject: Optional[Subject] = subject_factory() if subject_factory else None
        self.entities: List[Entity] = []
        self.tick_count = 0
        self._next_id = 1

    def initial_state(self) -> SessionState:
        """A fresh SessionState with the configured starting meters."""
        return SessionState(meters=dict(self._initial_meters))

    def reset(self) -> None:
        """Reinitialize state, subject and entity set."""
        self.state = self.initial_state()
        self.subject = self._subject_factory() if self._subject_factory else None
        self.entities.clear()
        self.tick_count = 0
        self._next_id = 1
        log.debug("Session reset")

    def apply(self, delta: SessionDelta) -> None:
        """Apply a resolver delta using this session's meter limits."""
        self.state.apply(delta, self.meter_limits)

    def add_entity(self, entity: Entity) -> None:
        """Add an entity, numbering it within this session."""
        entity.id = self._next_id
        self._next_id += 1
        self.entities.append(entity)

    def entities_of_kind(self, kind: str) -> List[Entity]:
        return [e for e in self.entities if e.kind == kind]
