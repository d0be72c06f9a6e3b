"""
TowerDefensePro - Towers, waves and projectiles.

Enemies are path-following entities stepped by the shared Stepper. Towers
sit on grid cells and fire projectiles at the nearest enemy in range; a
projectile flies to the point it was aimed at and damages the enemy found
within HIT_RADIUS of that point on arrival.

Timing uses simulation time (milliseconds accumulated from tick dt), so
pausing the clock pauses cooldowns and wave schedules too.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from cabinet.logging import get_logger
from cabinet.simulation import (
    BoundaryPolicy,
    Bounds,
    Category,
    Entity,
    SessionContext,
    Simulation,
    Stepper,
    within_radius,
)
from games.TowerDefensePro import config
from models.tower_defense import TowerDefenseMap, TowerTypeConfig

log = get_logger('tower_defense')


class PlaceResult(Enum):
    """Outcome of a click on the field."""
    PLACED = "placed"
    SELECTED = "selected"
    OFF_FIELD = "off_field"
    ON_PATH = "on_path"
    NO_MONEY = "no_money"
    NO_TYPE = "no_type"


def point_segment_distance(px: float, py: float, a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Distance from a point to the segment a-b."""
    ax, ay = a
    bx, by = b
    dx, dy = bx - ax, by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(px - ax, py - ay)
    t = max(0.0, min(1.0, ((px - ax) * dx + (py - ay) * dy) / length_sq))
    return math.hypot(px - (ax + t * dx), py - (ay + t * dy))


@dataclass
class Tower:
    """A built tower. Stats start from its type and grow with upgrades."""
    col: int
    row: int
    x: float
    y: float
    type_name: str
    damage: int
    range: float
    fire_rate_ms: int
    cost: int
    upgrade_cost: int
    color: Tuple[int, int, int]
    level: int = 1
    last_fired_ms: float = -math.inf

    @classmethod
    def build(cls, type_name: str, kind: TowerTypeConfig, col: int, row: int, grid: int) -> 'Tower':
        return cls(
            col=col,
            row=row,
            x=col * grid + grid / 2,
            y=row * grid + grid / 2,
            type_name=type_name,
            damage=kind.damage,
            range=kind.range,
            fire_rate_ms=kind.fire_rate_ms,
            cost=kind.cost,
            upgrade_cost=math.floor(kind.cost * config.UPGRADE_COST_FACTOR),
            color=kind.rgb,
        )

    def ready(self, now_ms: float) -> bool:
        return now_ms - self.last_fired_ms > self.fire_rate_ms

    def upgrade(self) -> None:
        self.damage = math.floor(self.damage * config.UPGRADE_DAMAGE_FACTOR)
        self.range = math.floor(self.range * config.UPGRADE_RANGE_FACTOR)
        self.upgrade_cost = math.floor(self.upgrade_cost * config.UPGRADE_COST_FACTOR)
        self.level += 1

    @property
    def sell_value(self) -> int:
        return math.floor(self.cost * config.SELL_REFUND_FACTOR)


@dataclass
class Projectile:
    """A shot in flight toward the point its tower aimed at."""
    x: float
    y: float
    target_x: float
    target_y: float
    damage: int
    color: Tuple[int, int, int]
    arrived: bool = False

    def advance(self, speed: float) -> None:
        dx = self.target_x - self.x
        dy = self.target_y - self.y
        distance = math.hypot(dx, dy)
        if distance < speed:
            self.x, self.y = self.target_x, self.target_y
            self.arrived = True
            return
        self.x += dx / distance * speed
        self.y += dy / distance * speed


@dataclass
class WaveRun:
    """Spawn schedule of the wave in progress: (due_ms, enemy type)."""
    index: int
    schedule: List[Tuple[float, str]] = field(default_factory=list)


class TowerDefenseSimulation(Simulation):
    """Tower defense session on one map.

    Meters: ``money`` (never negative) and ``health``.

    Args:
        level: Validated map
    """

    def __init__(self, level: TowerDefenseMap):
        self.level = level
        self.field = Bounds.of_size(level.width, level.height)
        self.context = SessionContext(
            bounds=self.field,
            initial_meters={'money': level.starting_money, 'health': level.starting_health},
            meter_limits={'money': (0, None)},
        )
        # Enemies enter centered on the field edge; leave them room to do so
        margin = config.ENEMY_SIZE
        self.stepper = Stepper(
            Bounds(-margin, -margin, level.width + margin, level.height + margin),
            policy=BoundaryPolicy.CLAMP,
            path_epsilon=config.PATH_EPSILON,
        )
        self._path = [p.as_tuple for p in level.path]
        self._reset_board()

    def _reset_board(self) -> None:
        self.towers: Dict[Tuple[int, int], Tower] = {}
        self.projectiles: List[Projectile] = []
        self.wave = 1
        self.current_wave: Optional[WaveRun] = None
        self.time_ms = 0.0
        self.selected_type: Optional[str] = next(iter(self.level.tower_types))
        self.selected_tower: Optional[Tower] = None

    # =========================================================================
    # Session properties
    # =========================================================================

    @property
    def state(self):
        return self.context.state

    @property
    def money(self) -> int:
        return int(self.state.meter('money'))

    @property
    def health(self) -> float:
        return self.state.meter('health')

    @property
    def enemies(self) -> List[Entity]:
        return self.context.entities

    @property
    def wave_active(self) -> bool:
        return self.current_wave is not None

    @property
    def total_waves(self) -> int:
        return len(self.level.waves)

    # =========================================================================
    # Player actions
    # =========================================================================

    def start_wave(self) -> bool:
        """Schedule the next wave's enemies.

        Returns:
            False if a wave is already running or the session is over
        """
        if self.wave_active or self.state.over:
            return False

        wave = self.level.waves[self.wave - 1]
        run = WaveRun(index=self.wave)
        offset = 0.0
        for group in wave.enemies:
            for _ in range(group.count):
                run.schedule.append((self.time_ms + offset, group.type))
                offset += group.delay_ms
        self.current_wave = run
        log.info("Wave %d started (%d enemies)", self.wave, wave.total_enemies)
        return True

    def cell_at(self, x: float, y: float) -> Tuple[int, int]:
        grid = self.level.grid_size
        return int(x // grid), int(y // grid)

    def on_path(self, x: float, y: float) -> bool:
        """Whether a point lies inside the path corridor (one grid cell wide each side)."""
        corridor = self.level.grid_size
        return any(
            point_segment_distance(x, y, a, b) < corridor
            for a, b in zip(self._path, self._path[1:])
        )

    def click(self, x: float, y: float) -> PlaceResult:
        """Select the tower under the pointer, or build the selected type there."""
        if not (0 <= x < self.level.width and 0 <= y < self.level.height):
            return PlaceResult.OFF_FIELD

        cell = self.cell_at(x, y)
        existing = self.towers.get(cell)
        if existing is not None:
            self.selected_tower = existing
            return PlaceResult.SELECTED

        self.selected_tower = None
        if self.selected_type is None:
            return PlaceResult.NO_TYPE

        kind = self.level.tower_types[self.selected_type]
        tower = Tower.build(self.selected_type, kind, cell[0], cell[1], self.level.grid_size)
        if self.on_path(tower.x, tower.y):
            return PlaceResult.ON_PATH
        if self.money < kind.cost:
            return PlaceResult.NO_MONEY

        self.state.change_meter('money', -kind.cost, self.context.meter_limits)
        self.towers[cell] = tower
        log.debug("Built %s at %s", tower.type_name, cell)
        return PlaceResult.PLACED

    def select_type(self, type_name: str) -> bool:
        if type_name not in self.level.tower_types:
            return False
        self.selected_type = type_name
        return True

    def upgrade_selected(self) -> bool:
        tower = self.selected_tower
        if tower is None or self.money < tower.upgrade_cost:
            return False
        self.state.change_meter('money', -tower.upgrade_cost, self.context.meter_limits)
        tower.upgrade()
        return True

    def sell_selected(self) -> bool:
        tower = self.selected_tower
        if tower is None:
            return False
        self.state.change_meter('money', tower.sell_value, self.context.meter_limits)
        del self.towers[(tower.col, tower.row)]
        self.selected_tower = None
        return True

    # =========================================================================
    # Tick
    # =========================================================================

    def _make_enemy(self, type_name: str) -> Entity:
        enemy_type = self.level.enemy_types[type_name]
        half = config.ENEMY_SIZE / 2
        start_x, start_y = self._path[0]
        return Entity(
            x=start_x - half,
            y=start_y - half,
            width=config.ENEMY_SIZE,
            height=config.ENEMY_SIZE,
            category=Category.ENEMY,
            kind=type_name,
            speed=enemy_type.speed,
            health=enemy_type.health,
            path=list(self._path),
            path_index=1,
            data={'max_health': enemy_type.health, 'reward': enemy_type.reward, 'color': enemy_type.rgb},
        )

    def _nearest_in_range(self, tower: Tower) -> Optional[Entity]:
        best, best_distance = None, math.inf
        for enemy in self.enemies:
            distance = enemy.distance_to(tower.x, tower.y)
            if distance <= tower.range and distance < best_distance:
                best, best_distance = enemy, distance
        return best

    def step(self, dt: float) -> None:
        self.time_ms += dt * 1000.0
        self.context.tick_count += 1

        leaked = self.stepper.step(self.enemies)
        for enemy in leaked:
            self.state.change_meter('health', -config.LEAK_DAMAGE)
            log.debug("%s reached the exit", enemy.kind)

        for tower in self.towers.values():
            if not tower.ready(self.time_ms):
                continue
            target = self._nearest_in_range(tower)
            if target is None:
                continue
            tx, ty = target.center
            self.projectiles.append(Projectile(tower.x, tower.y, tx, ty, tower.damage, tower.color))
            tower.last_fired_ms = self.time_ms

        for projectile in self.projectiles:
            projectile.advance(config.PROJECTILE_SPEED)

    def resolve(self) -> None:
        state = self.state
        in_flight = []
        for projectile in self.projectiles:
            if not projectile.arrived:
                in_flight.append(projectile)
                continue
            target = next(
                (e for e in self.enemies
                 if not e.removed and within_radius(*e.center, projectile.target_x, projectile.target_y, config.HIT_RADIUS)),
                None,
            )
            if target is None:
                continue
            target.health -= projectile.damage
            if target.is_dead:
                target.removed = True
                reward = target.data['reward']
                state.change_meter('money', reward, self.context.meter_limits)
                state.score += reward * config.KILL_SCORE_MULTIPLIER
        self.projectiles = in_flight
        self.enemies[:] = [e for e in self.enemies if not e.removed]

        if self.health <= 0:
            state.over = True
            return

        run = self.current_wave
        if run is not None and not run.schedule and not self.enemies:
            wave = self.level.waves[run.index - 1]
            state.change_meter('money', wave.reward, self.context.meter_limits)
            log.info("Wave %d cleared", run.index)
            self.current_wave = None
            self.wave += 1
            if self.wave > self.total_waves:
                state.won = True
                state.over = True

    def spawn(self) -> None:
        run = self.current_wave
        if run is None:
            return
        while run.schedule and run.schedule[0][0] <= self.time_ms:
            _, type_name = run.schedule.pop(0)
            self.context.add_entity(self._make_enemy(type_name))

    def is_over(self) -> bool:
        return self.state.over

    def reset(self) -> None:
        self.context.reset()
        self._reset_board()
