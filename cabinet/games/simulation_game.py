"""Base class for real-time canvas games driven by a FrameClock.

The game supplies a Simulation; SimulationGame wires it to a FrameClock
fed from ``update(dt)``, maps the clock state onto GameState and handles
the shared controls:

    space   start, then pause/resume
    p       pause/resume
"""
from abc import abstractmethod
from typing import List

from cabinet.games.base_game import BaseGame
from cabinet.games.game_state import GameState
from cabinet.games.input.input_event import InputEvent
from cabinet.logging import get_logger
from cabinet.simulation.clock import ClockState, FrameClock, ManualTickSource, Simulation

log = get_logger('simulation_game')

START_KEYS = ('space', 'return')
PAUSE_KEYS = ('p',)


class SimulationGame(BaseGame):
    """BaseGame whose play session is a FrameClock-driven Simulation."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.simulation = self._create_simulation()
        self.tick_source = ManualTickSource()
        self.clock = FrameClock(
            self.simulation,
            self.tick_source,
            on_over=self._on_session_over,
        )

    @abstractmethod
    def _create_simulation(self) -> Simulation:
        """Build the game's Simulation (called once)."""
        pass

    def _on_session_over(self) -> None:
        """Called once when the clock reaches OVER (save best scores here)."""
        pass

    def _handle_press(self, event: InputEvent) -> None:
        """Game-specific handling of a discrete press."""
        pass

    @property
    def won(self) -> bool:
        """Whether an ended session counts as a win."""
        return False

    def _get_internal_state(self) -> GameState:
        clock_state = self.clock.state
        if clock_state is ClockState.RUNNING:
            return GameState.PLAYING
        if clock_state is ClockState.PAUSED:
            return GameState.PAUSED
        if clock_state is ClockState.OVER:
            return GameState.WON if self.won else GameState.GAME_OVER
        return GameState.IDLE

    def start(self) -> bool:
        return self.clock.start()

    def toggle_pause(self) -> bool:
        return self.clock.toggle_pause()

    def handle_input(self, events: List[InputEvent]) -> None:
        """Fold key state and dispatch presses."""
        for event in self.input.process(events):
            if event.key in START_KEYS:
                if self.clock.state is ClockState.IDLE:
                    self.clock.start()
                else:
                    self.clock.toggle_pause()
                continue
            if event.key in PAUSE_KEYS:
                self.clock.toggle_pause()
                continue
            # an ended session only accepts reset
            if self.clock.state is ClockState.OVER:
                continue
            self._handle_press(event)

    def _update(self, dt: float) -> None:
        self.tick_source.fire(dt=dt)

    def reset(self) -> None:
        """Return to IDLE with a fresh session."""
        super().reset()
        self.clock.reset()
