"""
Frame clock for the simulation games.

The clock is the only orchestrator of a running simulation. Each tick it
calls ``step``, ``resolve`` and ``spawn`` in that order, checks the terminal
condition, triggers a render and then re-arms the next tick. Ticks come
from an injectable TickSource; stopping the loop means not re-arming.

State machine:

    IDLE --start--> RUNNING --pause--> PAUSED --resume--> RUNNING
    RUNNING --terminal condition--> OVER
    any --reset--> IDLE (session reinitialized)

Calls that do not apply to the current state (pause while IDLE, start
while RUNNING, ...) are no-ops.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

from cabinet.logging import get_logger

log = get_logger('frame_clock')

FRAME_DT = 1.0 / 60.0

TickCallback = Callable[[float], None]


class ClockState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class Simulation(ABC):
    """One game's per-tick logic, driven by a FrameClock."""

    @abstractmethod
    def step(self, dt: float) -> None:
        """Move the subject and entities one tick."""
        pass

    @abstractmethod
    def resolve(self) -> None:
        """Resolve collisions and apply their effects."""
        pass

    @abstractmethod
    def spawn(self) -> None:
        """Create this tick's new entities."""
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """True once the session reached a terminal condition."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Reinitialize session state and the entity set."""
        pass


class TickSource(ABC):
    """Delivers at most one pending tick callback at a time."""

    @abstractmethod
    def request_tick(self, callback: TickCallback) -> None:
        """Arm the next tick."""
        pass

    @abstractmethod
    def cancel(self) -> None:
        """Drop the armed tick, if any."""
        pass

    @property
    @abstractmethod
    def pending(self) -> bool:
        """True while a tick is armed."""
        pass


class ManualTickSource(TickSource):
    """Tick source fired explicitly.

    Games fire it from ``update(dt)`` once per host frame; tests fire it
    directly to run an exact number of ticks.
    """

    def __init__(self):
        self._callback: Optional[TickCallback] = None

    def request_tick(self, callback: TickCallback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def fire(self, count: int = 1, dt: float = FRAME_DT) -> int:
        """Deliver up to ``count`` ticks.

        Stops early once nothing re-arms.

        Returns:
            Number of ticks delivered
        """
        delivered = 0
        for _ in range(count):
            callback = self._callback
            if callback is None:
                break
            self._callback = None
            callback(dt)
            delivered += 1
        return delivered


class FrameClock:
    """Drives a Simulation through the IDLE/RUNNING/PAUSED/OVER machine.

    Args:
        simulation: The game logic to drive
        tick_source: Where ticks come from
        render: Optional callback invoked after every running tick
        on_over: Optional callback invoked once when the session ends
    """

    def __init__(
        self,
        simulation: Simulation,
        tick_source: TickSource,
        render: Optional[Callable[[], None]] = None,
        on_over: Optional[Callable[[], None]] = None,
    ):
        self.simulation = simulation
        self.tick_source = tick_source
        self._render = render
        self._on_over = on_over
        self._state = ClockState.IDLE
        self.ticks = 0

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ClockState.RUNNING

    def start(self) -> bool:
        """IDLE -> RUNNING. Returns True if the state changed."""
        if self._state is not ClockState.IDLE:
            return False
        self._state = ClockState.RUNNING
        log.debug("Started")
        self._arm()
        return True

    def pause(self) -> bool:
        """RUNNING -> PAUSED. Returns True if the state changed."""
        if self._state is not ClockState.RUNNING:
            return False
        self._state = ClockState.PAUSED
        self.tick_source.cancel()
        log.debug("Paused")
        return True

    def resume(self) -> bool:
        """PAUSED -> RUNNING. Returns True if the state changed."""
        if self._state is not ClockState.PAUSED:
            return False
        self._state = ClockState.RUNNING
        log.debug("Resumed")
        self._arm()
        return True

    def toggle_pause(self) -> bool:
        """Pause when running, resume when paused."""
        if self._state is ClockState.RUNNING:
            return self.pause()
        return self.resume()

    def reset(self) -> None:
        """Stop ticking, reinitialize the simulation and return to IDLE."""
        self.tick_source.cancel()
        self.simulation.reset()
        self._state = ClockState.IDLE
        self.ticks = 0
        log.debug("Reset")

    def _arm(self) -> None:
        self.tick_source.request_tick(self._on_tick)

    def _on_tick(self, dt: float) -> None:
        # A tick armed before a pause/reset can still arrive from some hosts
        if self._state is not ClockState.RUNNING:
            return

        sim = self.simulation
        sim.step(dt)
        sim.resolve()
        sim.spawn()
        self.ticks += 1

        if sim.is_over():
            self._state = ClockState.OVER
            log.info("Session over after %d ticks", self.ticks)
            if self._render:
                self._render()
            if self._on_over:
                self._on_over()
            return

        if self._render:
            self._render()
        self._arm()
