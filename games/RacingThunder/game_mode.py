"""
RacingThunder Game Mode

Top-down checkpoint racer. Pick a track (1-3 before the start), then drive
through the checkpoints in order for the track's number of laps. The
fastest finish per track is kept as the best time.
"""
import math
from typing import Optional

import pygame

from cabinet.games import SimulationGame, load_yaml_model
from cabinet.games.input.input_event import InputEvent
from cabinet.games.render import GRAY, WHITE, YELLOW, draw_overlay, draw_text
from cabinet.simulation import ClockState, Simulation
from games.RacingThunder import config
from games.RacingThunder.simulation import RaceSimulation
from models.racing import TrackSet


def load_tracks() -> TrackSet:
    """Load the bundled track file."""
    return load_yaml_model(config.TRACKS_FILE, TrackSet)


def best_time_key(track_index: int) -> str:
    return f"{config.BEST_TIME_KEY_PREFIX}{track_index}"


class RacingThunderGame(SimulationGame):
    """Racing Thunder - lap the circuit as fast as you can."""

    NAME = "Racing Thunder"
    DESCRIPTION = "High-speed checkpoint racing on three thunderous tracks."
    VERSION = "1.0.0"
    AUTHOR = "Cabinet Team"

    ARGUMENTS = [
        {
            'name': '--track',
            'type': int,
            'default': 0,
            'help': 'Track index (0 = Thunder Circuit, 1 = Lightning Loop, 2 = Storm Valley)'
        },
    ]

    FIELD_SIZE = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    def __init__(self, track: int = 0, tracks: Optional[TrackSet] = None, **kwargs):
        """Initialize the race.

        Args:
            track: Index of the starting track
            tracks: Track set (default: tracks/tracks.yaml)
        """
        self.tracks = tracks or load_tracks()
        if not 0 <= track < len(self.tracks.tracks):
            raise ValueError(f"Track index {track} out of range 0-{len(self.tracks.tracks) - 1}")
        self.track_index = track
        super().__init__(**kwargs)
        self.best_time = self._load_best(best_time_key(self.track_index))

    def _create_simulation(self) -> Simulation:
        return RaceSimulation(self.tracks.tracks[self.track_index], lambda: self.input.actions)

    @property
    def track(self):
        return self.tracks.tracks[self.track_index]

    @property
    def won(self) -> bool:
        return self.simulation.finished

    def get_score(self) -> int:
        """Completed laps."""
        return min(self.simulation.lap, self.track.laps + 1) - 1

    def select_track(self, index: int) -> bool:
        """Switch tracks; only allowed before the race starts.

        Returns:
            True if the track changed
        """
        if self.clock.state is not ClockState.IDLE:
            return False
        if not 0 <= index < len(self.tracks.tracks) or index == self.track_index:
            return False
        self.track_index = index
        self.simulation.use_track(self.track)
        self.best_time = self._load_best(best_time_key(index))
        return True

    def _handle_press(self, event: InputEvent) -> None:
        if event.key and event.key.isdigit():
            self.select_track(int(event.key) - 1)

    def _on_session_over(self) -> None:
        if not self.simulation.finished:
            return
        race_time = round(self.simulation.race_time, 2)
        if self._record_best(best_time_key(self.track_index), race_time, lower_is_better=True):
            self.best_time = race_time

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        self._render_track(screen)
        self._render_car(screen)
        self._render_hud(screen)

        area = screen.get_rect()
        state = self.clock.state
        if state is ClockState.IDLE:
            draw_overlay(
                screen, area, self.track.name,
                f"Difficulty {self.track.difficulty}  -  1-3 pick track  -  SPACE to race",
            )
        elif state is ClockState.PAUSED:
            draw_overlay(screen, area, "Paused", "Press SPACE to resume")
        elif state is ClockState.OVER:
            draw_overlay(screen, area, "Finished!", f"Time {self.simulation.race_time:.2f}s  -  R to race again")

    def _render_track(self, screen: pygame.Surface) -> None:
        points = [p.as_tuple for p in self.track.checkpoints]
        pygame.draw.lines(screen, self.track.rgb, True, points, config.TRACK_WIDTH)
        for i, (x, y) in enumerate(points):
            color = config.NEXT_CHECKPOINT_COLOR if i == self.simulation.next_checkpoint else config.CHECKPOINT_COLOR
            pygame.draw.circle(screen, color, (int(x), int(y)), int(config.CHECKPOINT_RADIUS), 2)
            draw_text(screen, str(i), (x, y), 20, color, center=True)

    def _render_car(self, screen: pygame.Surface) -> None:
        car = self.simulation.car
        cx, cy = car.center
        half = car.width / 2
        corners = []
        for dx, dy in ((half, 0), (-half, -half * 0.7), (-half, half * 0.7)):
            corners.append((
                cx + dx * math.cos(car.heading) - dy * math.sin(car.heading),
                cy + dx * math.sin(car.heading) + dy * math.cos(car.heading),
            ))
        pygame.draw.polygon(screen, config.CAR_COLOR, corners)

    def _render_hud(self, screen: pygame.Surface) -> None:
        sim = self.simulation
        draw_text(screen, f"Lap: {min(sim.lap, self.track.laps)}/{self.track.laps}", (10, 10))
        draw_text(screen, f"Time: {sim.race_time:.2f}s", (10, 36))
        draw_text(screen, f"Speed: {sim.display_speed}", (10, 62), 24, YELLOW)
        best = f"{self.best_time:.2f}s" if self.best_time is not None else "--"
        draw_text(screen, f"Best: {best}", (10, 86), 22, GRAY)
        draw_text(screen, self.track.name, (screen.get_width() - 200, 10), 24, WHITE)
