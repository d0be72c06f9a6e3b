"""
RacingThunder - Per-tick race logic.

The car drives in heading mode: up/down accelerate along the heading,
left/right steer once the car is moving. Checkpoints must be reached in
order; reaching checkpoint 0 again completes a lap.
"""
from typing import Callable, Collection

from cabinet.logging import get_logger
from cabinet.simulation import (
    BoundaryPolicy,
    Bounds,
    SessionContext,
    Simulation,
    Stepper,
    Subject,
    SubjectPhysics,
)
from games.RacingThunder import config
from models.racing import TrackConfig

log = get_logger('racing')


class RaceSimulation(Simulation):
    """One race on one track.

    Args:
        track: Track to race on
        held: Returns the currently held actions

    Attributes:
        lap: Current lap (1-based; laps + 1 once finished)
        next_checkpoint: Index of the checkpoint to reach next
        race_time: Seconds spent racing
    """

    def __init__(self, track: TrackConfig, held: Callable[[], Collection[str]]):
        self._held = held
        self.track = track
        field = Bounds.of_size(config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
        self.context = SessionContext(bounds=field, subject_factory=self._make_car)
        self.stepper = Stepper(field, subject_policy=BoundaryPolicy.CLAMP)
        self._reset_race()

    def _make_car(self) -> Subject:
        start = self.track.checkpoints[0]
        half = config.CAR_SIZE / 2
        return Subject(
            x=start.x - half,
            y=start.y - half,
            width=config.CAR_SIZE,
            height=config.CAR_SIZE,
            physics=SubjectPhysics(
                mode='heading',
                acceleration=config.ACCELERATION,
                max_speed=config.MAX_SPEED,
                reverse_speed=config.REVERSE_SPEED,
                friction=config.FRICTION,
                stop_epsilon=config.STOP_EPSILON,
                turn_rate=config.TURN_RATE,
                min_turn_speed=config.MIN_TURN_SPEED,
            ),
        )

    def _reset_race(self) -> None:
        self.lap = 1
        self.next_checkpoint = 1
        self.race_time = 0.0
        self._dt = 0.0

    @property
    def car(self) -> Subject:
        return self.context.subject

    @property
    def finished(self) -> bool:
        return self.lap > self.track.laps

    @property
    def display_speed(self) -> int:
        return int(abs(self.car.speed) * config.SPEED_DISPLAY_FACTOR)

    def step(self, dt: float) -> None:
        self._dt = dt
        self.stepper.step(self.context.entities, self.car, self._held())
        self.context.tick_count += 1

    def resolve(self) -> None:
        self.race_time += self._dt

        target = self.track.checkpoints[self.next_checkpoint]
        if self.car.distance_to(target.x, target.y) >= config.CHECKPOINT_RADIUS:
            return

        if self.next_checkpoint == 0:
            self.lap += 1
            log.debug("Lap %d at %.2fs", self.lap - 1, self.race_time)
            if self.finished:
                self.context.state.won = True
                self.context.state.over = True
                return
        self.next_checkpoint = (self.next_checkpoint + 1) % len(self.track.checkpoints)

    def spawn(self) -> None:
        pass

    def is_over(self) -> bool:
        return self.context.state.over

    def reset(self) -> None:
        self.context.reset()
        self._reset_race()

    def use_track(self, track: TrackConfig) -> None:
        """Switch tracks and reset the race."""
        self.track = track
        self.reset()
