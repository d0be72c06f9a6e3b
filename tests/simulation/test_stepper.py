"""Tests for entity records and the Stepper."""
import math
import random

import pytest

from cabinet.simulation import (
    BoundaryPolicy,
    Bounds,
    Category,
    Entity,
    Stepper,
    Subject,
    SubjectPhysics,
    apply_boundary,
    wrap,
)


def make_entity(x=0.0, y=0.0, size=10.0, **kwargs):
    return Entity(x=x, y=y, width=size, height=size, **kwargs)


class TestEntity:
    """Tests for Entity and Bounds records."""

    def test_size_must_be_positive(self):
        with pytest.raises(ValueError):
            make_entity(size=0)

    def test_kind_defaults_to_category(self):
        assert make_entity(category=Category.PICKUP).kind == 'pickup'

    def test_center_and_edges(self):
        e = Entity(x=10, y=20, width=30, height=40)
        assert (e.left, e.top, e.right, e.bottom) == (10, 20, 40, 60)
        assert e.center == (25, 40)

        e.move_center_to(100, 100)
        assert (e.x, e.y) == (85, 80)

    def test_bounds_validation(self):
        with pytest.raises(ValueError):
            Bounds(10, 0, 10, 5)

    def test_bounds_contains(self):
        bounds = Bounds.of_size(100, 100)
        assert bounds.contains(make_entity(90, 90))
        assert not bounds.contains(make_entity(95, 50))

    def test_physics_validation(self):
        with pytest.raises(ValueError):
            SubjectPhysics(mode='diagonal')


class TestBoundaryPolicies:
    """Tests for clamp, wrap and cull."""

    def test_wrap_helper(self):
        assert wrap(-1, 0, 20) == 19
        assert wrap(20, 0, 20) == 0
        assert wrap(5, 0, 20) == 5

    def test_clamp_pushes_box_inside(self):
        bounds = Bounds.of_size(100, 100)
        e = make_entity(95, -5)
        assert apply_boundary(e, bounds, BoundaryPolicy.CLAMP)
        assert (e.x, e.y) == (90, 0)

    def test_cull_reports_removal(self):
        bounds = Bounds.of_size(100, 100)
        assert not apply_boundary(make_entity(95, 50), bounds, BoundaryPolicy.CULL)

    def test_clamp_holds_for_random_velocities(self):
        """After every tick all clamped entities lie inside the bounds."""
        rnd = random.Random(7)
        bounds = Bounds.of_size(200, 150)
        stepper = Stepper(bounds, policy=BoundaryPolicy.CLAMP)
        entities = [
            make_entity(rnd.uniform(0, 190), rnd.uniform(0, 140),
                        vx=rnd.uniform(-30, 30), vy=rnd.uniform(-30, 30))
            for _ in range(50)
        ]
        for _ in range(100):
            stepper.step(entities)
            for e in entities:
                assert bounds.contains(e)

    def test_wrap_holds_for_random_velocities(self):
        """Wrapped entities always keep their corner inside [left, right) x [top, bottom)."""
        rnd = random.Random(11)
        bounds = Bounds(-50, 10, 150, 110)
        stepper = Stepper(bounds, policy=BoundaryPolicy.WRAP)
        entities = [
            make_entity(0, 50, vx=rnd.uniform(-500, 500), vy=rnd.uniform(-500, 500))
            for _ in range(50)
        ]
        for _ in range(100):
            stepper.step(entities)
            for e in entities:
                assert bounds.left <= e.x < bounds.right
                assert bounds.top <= e.y < bounds.bottom
        assert len(entities) == 50

        # a tiny negative step rounds the modulo up to the full span
        field = Bounds.of_size(800, 600)
        edge = make_entity(0, 0, vx=-1e-17, vy=-1e-17)
        Stepper(field, policy=BoundaryPolicy.WRAP).step([edge])
        assert 0 <= edge.x < 800
        assert 0 <= edge.y < 600
        assert wrap(-1e-17, 0, 800) == 0

    def test_cull_removes_leavers(self):
        bounds = Bounds.of_size(100, 100)
        stepper = Stepper(bounds, policy=BoundaryPolicy.CULL)
        stays = make_entity(40, 40, vy=1)
        leaves = make_entity(40, 85, vy=10)
        entities = [stays, leaves]
        stepper.step(entities)
        assert entities == [stays]
        assert leaves.removed

    def test_subject_cannot_be_culled(self):
        with pytest.raises(ValueError):
            Stepper(Bounds.of_size(10, 10), subject_policy=BoundaryPolicy.CULL)


class TestEntityLifecycle:
    """Expiry and health in the stepper."""

    def test_lifetime_expires(self):
        stepper = Stepper(Bounds.of_size(100, 100))
        e = make_entity(10, 10, lifetime=2)
        entities = [e]
        stepper.step(entities)
        assert entities == [e]
        stepper.step(entities)
        assert entities == []

    def test_dead_entities_are_dropped(self):
        stepper = Stepper(Bounds.of_size(100, 100))
        entities = [make_entity(10, 10, health=0)]
        stepper.step(entities)
        assert entities == []


class TestPathFollowing:
    """Waypoint movement."""

    def test_moves_toward_waypoint_at_speed(self):
        stepper = Stepper(Bounds(-100, -100, 1000, 1000), path_epsilon=5)
        e = make_entity(size=10, speed=2, path=[(5, 5), (105, 5)], path_index=1)
        e.move_center_to(5, 5)
        stepper.step([e])
        assert e.center == pytest.approx((7, 5))

    def test_path_epsilon_must_be_positive(self):
        with pytest.raises(ValueError, match="path_epsilon"):
            Stepper(Bounds.of_size(100, 100), path_epsilon=0)

    def test_center_on_waypoint_advances(self):
        """An entity already sitting on its waypoint moves on to the next one."""
        stepper = Stepper(Bounds(-100, -100, 1000, 1000))
        e = make_entity(size=10, speed=5, path=[(5, 5), (50, 5)])
        entities = [e]
        assert stepper.step(entities) == []
        assert e.path_index == 1
        assert e.center == pytest.approx((5, 5))

    def test_snaps_and_finishes(self):
        """Within epsilon the center snaps; the last waypoint finishes the path."""
        stepper = Stepper(Bounds(-100, -100, 1000, 1000), path_epsilon=5)
        e = make_entity(size=10, speed=3, path=[(0, 0), (10, 0)], path_index=1)
        e.move_center_to(0, 0)
        entities = [e]

        finished = []
        for _ in range(10):
            finished.extend(stepper.step(entities))
            if finished:
                break
        assert finished == [e]
        assert entities == []
        assert e.center == pytest.approx((10, 0))


class TestSubjectMotion:
    """Input-driven subject movement."""

    def test_axis_mode_moves_at_max_speed(self):
        bounds = Bounds.of_size(800, 600)
        stepper = Stepper(bounds)
        ship = Subject(x=100, y=100, width=50, height=50,
                       physics=SubjectPhysics(mode='axis', acceleration=5, max_speed=5))
        stepper.step([], ship, {'right'})
        stepper.step([], ship, {'right', 'up'})
        assert (ship.x, ship.y) == (110, 95)

        stepper.step([], ship, set())
        assert (ship.vx, ship.vy) == (0, 0)

    def test_axis_mode_clamped_to_field(self):
        stepper = Stepper(Bounds.of_size(800, 600))
        ship = Subject(x=2, y=0, width=50, height=50,
                       physics=SubjectPhysics(mode='axis', acceleration=5, max_speed=5))
        stepper.step([], ship, {'left', 'up'})
        assert (ship.x, ship.y) == (0, 0)

    def test_heading_mode_accelerates_and_coasts(self):
        physics = SubjectPhysics(mode='heading', acceleration=0.3, max_speed=8,
                                 reverse_speed=4, friction=0.95, turn_rate=0.05)
        stepper = Stepper(Bounds.of_size(800, 600))
        car = Subject(x=100, y=100, width=20, height=20, physics=physics)

        for _ in range(100):
            stepper.step([], car, {'up'})
        assert car.speed == pytest.approx(8)

        stepper.step([], car, set())
        assert car.speed == pytest.approx(8 * 0.95)

    def test_heading_mode_reverse_limit(self):
        physics = SubjectPhysics(mode='heading', acceleration=0.3, max_speed=8, reverse_speed=4)
        stepper = Stepper(Bounds.of_size(800, 600))
        car = Subject(x=400, y=300, width=20, height=20, physics=physics)
        for _ in range(100):
            stepper.step([], car, {'down'})
        assert car.speed == pytest.approx(-4)

    def test_no_turning_when_nearly_stopped(self):
        physics = SubjectPhysics(mode='heading', acceleration=0.3, turn_rate=0.05, min_turn_speed=0.5)
        stepper = Stepper(Bounds.of_size(800, 600))
        car = Subject(x=400, y=300, width=20, height=20, physics=physics)
        stepper.step([], car, {'left'})
        assert car.heading == 0

    def test_turn_scales_with_speed(self):
        physics = SubjectPhysics(mode='heading', acceleration=0.3, turn_rate=0.05, friction=0.95)
        stepper = Stepper(Bounds.of_size(800, 600))
        car = Subject(x=400, y=300, width=20, height=20, physics=physics)
        car.speed = 4
        stepper.step([], car, {'right'})
        # Turn is applied before friction
        assert car.heading == pytest.approx(0.05 * 4)
        assert car.speed == pytest.approx(4 * 0.95)
        assert car.x == pytest.approx(400 + math.cos(0.2) * car.speed)
        assert car.y == pytest.approx(300 + math.sin(0.2) * car.speed)
