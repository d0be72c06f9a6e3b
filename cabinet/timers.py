"""
One-shot delayed tasks tied to a game session.

Games that need "do this in 800 ms" (hide mismatched cards, let the
computer think, play back a Simon sequence) schedule a task instead of
starting a free-running timer. The scheduler is advanced from the game's
``update(dt)`` and cancelled as a whole when the session resets, so a
pending callback can never act on a freshly reinitialized session.
"""
from dataclasses import dataclass, field
from typing import Callable, List

from cabinet.logging import get_logger

log = get_logger('timers')


@dataclass
class ScheduledTask:
    """A callback due at a point on the scheduler's clock."""
    due: float
    callback: Callable[[], None]
    name: str = ""
    cancelled: bool = False
    fired: bool = False
    seq: int = field(default=0, compare=False)

    @property
    def pending(self) -> bool:
        """True until the task fires or is cancelled."""
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        """Cancel the task if it has not fired yet."""
        self.cancelled = True


class TaskScheduler:
    """Runs scheduled callbacks as simulated time advances.

    Time only moves through advance(), which keeps tasks deterministic
    under test: advance(0.5) fires everything due within the next half
    second, in due order (ties in scheduling order).
    """

    def __init__(self):
        self._now = 0.0
        self._seq = 0
        self._tasks: List[ScheduledTask] = []

    @property
    def now(self) -> float:
        """Seconds of simulated time since creation."""
        return self._now

    @property
    def pending_count(self) -> int:
        """Number of tasks waiting to fire."""
        return sum(1 for t in self._tasks if t.pending)

    def schedule(self, delay: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        """Schedule callback to run once after delay seconds.

        Args:
            delay: Seconds from now (negative values are treated as 0)
            callback: Zero-argument callable
            name: Label used in debug logging

        Returns:
            The ScheduledTask, which can be cancelled individually
        """
        self._seq += 1
        task = ScheduledTask(
            due=self._now + max(0.0, delay),
            callback=callback,
            name=name,
            seq=self._seq,
        )
        self._tasks.append(task)
        log.trace("Scheduled %s at t=%.3f", name or 'task', task.due)
        return task

    def advance(self, dt: float) -> int:
        """Advance the clock and fire every task that became due.

        Tasks scheduled by a firing callback run in the same call if they
        are already due.

        Returns:
            Number of callbacks fired
        """
        self._now += max(0.0, dt)
        fired = 0

        while True:
            due = [t for t in self._tasks if t.pending and t.due <= self._now]
            if not due:
                break
            task = min(due, key=lambda t: (t.due, t.seq))
            task.fired = True
            log.trace("Firing %s", task.name or 'task')
            task.callback()
            fired += 1

        self._tasks = [t for t in self._tasks if t.pending]
        return fired

    def cancel_all(self) -> int:
        """Cancel every pending task.

        Returns:
            Number of tasks cancelled
        """
        count = 0
        for task in self._tasks:
            if task.pending:
                task.cancel()
                count += 1
        self._tasks.clear()
        if count:
            log.debug("Cancelled %d pending task(s)", count)
        return count
