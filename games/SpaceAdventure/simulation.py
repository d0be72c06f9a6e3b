"""
SpaceAdventure - Per-tick game logic.

The ship dodges falling asteroids and enemy ships while collecting fuel
cells and repair power-ups. Fuel burns every tick; the run ends when the
hull or the tank is empty.
"""
import random
from typing import Callable, Collection

from cabinet.simulation import (
    BoundaryPolicy,
    Bounds,
    Category,
    CollisionResolver,
    Effect,
    Entity,
    SessionContext,
    Simulation,
    Stepper,
    Subject,
    SubjectPhysics,
    WeightedSpawner,
)
from games.SpaceAdventure import config

CATEGORIES = {
    'asteroid': Category.OBSTACLE,
    'enemy': Category.ENEMY,
    'fuel': Category.PICKUP,
    'powerup': Category.PICKUP,
}

EFFECTS = {
    'asteroid': Effect(meters={'health': -config.ASTEROID_DAMAGE}),
    'enemy': Effect(meters={'health': -config.ENEMY_DAMAGE}),
    'fuel': Effect(score=config.FUEL_SCORE, meters={'fuel': config.FUEL_AMOUNT}, remove=True),
    'powerup': Effect(score=config.POWERUP_SCORE, meters={'health': config.POWERUP_HEAL}, remove=True),
}


def make_ship() -> Subject:
    """The ship at its starting position, bottom center."""
    return Subject(
        x=config.SCREEN_WIDTH / 2 - config.PLAYER_SIZE / 2,
        y=config.SCREEN_HEIGHT - config.PLAYER_BOTTOM_GAP,
        width=config.PLAYER_SIZE,
        height=config.PLAYER_SIZE,
        physics=SubjectPhysics(
            mode='axis',
            acceleration=config.PLAYER_SPEED,
            max_speed=config.PLAYER_SPEED,
            friction=0.0,
        ),
    )


def make_object(kind: str, level: int, rng: random.Random) -> Entity:
    """A falling object entering just above the field.

    Fall speed grows by one every three levels plus a random jitter.
    """
    size = config.SMALL_OBJECT_SIZE if kind in ('fuel', 'powerup') else config.LARGE_OBJECT_SIZE
    speed = config.BASE_FALL_SPEED + level // 3 + rng.random() * config.FALL_SPEED_JITTER
    return Entity(
        x=rng.random() * (config.SCREEN_WIDTH - config.LARGE_OBJECT_SIZE),
        y=-config.LARGE_OBJECT_SIZE,
        width=size,
        height=size,
        category=CATEGORIES[kind],
        kind=kind,
        vy=speed,
    )


class SpaceSimulation(Simulation):
    """Space Adventure session: step, collide, burn fuel, spawn.

    Args:
        held: Returns the currently held actions
        rng: Session random generator
    """

    def __init__(self, held: Callable[[], Collection[str]], rng: random.Random):
        self._held = held
        field = Bounds.of_size(config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
        self.context = SessionContext(
            bounds=field,
            subject_factory=make_ship,
            initial_meters={'health': config.MAX_HEALTH, 'fuel': config.MAX_FUEL},
            meter_limits={'health': (None, config.MAX_HEALTH), 'fuel': (0.0, config.MAX_FUEL)},
            rng=rng,
        )
        # Objects spawn above the field and fall past its bottom before culling
        fall_zone = Bounds(
            0.0,
            -float(config.CULL_MARGIN),
            float(config.SCREEN_WIDTH),
            float(config.SCREEN_HEIGHT + config.CULL_MARGIN + config.LARGE_OBJECT_SIZE),
        )
        self.stepper = Stepper(
            fall_zone,
            policy=BoundaryPolicy.CULL,
            subject_policy=BoundaryPolicy.CLAMP,
            subject_bounds=field,
        )
        self.resolver = CollisionResolver(EFFECTS)
        self.spawner = WeightedSpawner(
            config.SPAWN_WEIGHTS,
            make_object,
            rng,
            base_probability=config.SPAWN_RATE,
        )

    @property
    def state(self):
        return self.context.state

    def step(self, dt: float) -> None:
        ctx = self.context
        self.stepper.step(ctx.entities, ctx.subject, self._held())
        ctx.tick_count += 1

    def resolve(self) -> None:
        ctx = self.context
        ctx.apply(self.resolver.resolve(ctx.subject, ctx.entities))

        ctx.state.change_meter('fuel', -config.FUEL_BURN, ctx.meter_limits)
        ctx.state.score += config.SCORE_PER_TICK
        ctx.state.level = int(ctx.state.score // config.POINTS_PER_LEVEL) + 1

        if ctx.state.meter('health') <= 0 or ctx.state.meter('fuel') <= 0:
            ctx.state.over = True

    def spawn(self) -> None:
        entity = self.spawner.spawn(self.context.state.level)
        if entity is not None:
            self.context.add_entity(entity)

    def is_over(self) -> bool:
        return self.context.state.over

    def reset(self) -> None:
        self.context.reset()
