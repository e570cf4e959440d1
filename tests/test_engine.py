import pygame
import pytest

from flocksim.core.agents.boid import Boid
from flocksim.core.config import FlockParameters
from flocksim.core.direction import DirectionX, DirectionY
from flocksim.core.flock import Flock
from flocksim.core.viewport import Viewport
from flocksim.simulation.engine import TickContext, snapshot_positions, update_flock


def tick(flock, viewport, frame=0):
    return update_flock(flock, TickContext(frame=frame), viewport)


def test_update_uses_positions_from_start_of_tick(params, viewport):
    flock = Flock([Boid(0, 0, 4, 3), Boid(10, 40, 4, 3)], params)

    tick(flock, viewport)

    # Boid 1 reacts to boid 0 at (0, 0), not at its moved position.
    assert flock[0].position.x == pytest.approx(3.95)
    assert flock[0].position.y == pytest.approx(2.8)
    assert flock[1].position.x == pytest.approx(14.05)
    assert flock[1].position.y == pytest.approx(43.2)


def test_update_does_not_depend_on_processing_order(params, viewport):
    forward = Flock([Boid(0, 0, 4, 3), Boid(10, 40, 4, 3)], params)
    reverse = Flock([Boid(10, 40, 4, 3), Boid(0, 0, 4, 3)], params)

    tick(forward, viewport)
    tick(reverse, viewport)

    assert forward[0].position.x == pytest.approx(reverse[1].position.x)
    assert forward[0].position.y == pytest.approx(reverse[1].position.y)
    assert forward[1].position.x == pytest.approx(reverse[0].position.x)
    assert forward[1].position.y == pytest.approx(reverse[0].position.y)


def test_lone_boid_only_moves_by_velocity(params, viewport):
    flock = Flock([Boid(12, -7, 4, 3)], params)

    tick(flock, viewport)

    assert flock[0].position == pygame.Vector2(16, -4)


def test_snapshot_is_taken_before_mutation(params):
    flock = Flock.create(3, params)
    snapshot = snapshot_positions(flock)

    tick(flock, Viewport.from_size(1024, 768))

    assert snapshot == tuple(pygame.Vector2(-100 + 10 * i, 100 + 30 * i) for i in range(3))


def test_speed_clamped_from_above_before_moving(params, viewport):
    flock = Flock([Boid(0, 0, 10, 8)], params)

    tick(flock, viewport)

    assert flock[0].velocity == pygame.Vector2(6, 6)
    assert flock[0].position == pygame.Vector2(6, 6)


def test_speed_below_minimum_is_left_alone(params, viewport):
    flock = Flock([Boid(0, 0, 1, 0.5)], params)

    for frame in range(5):
        tick(flock, viewport, frame)

    assert flock[0].velocity == pygame.Vector2(1, 0.5)
    assert flock[0].velocity.x < params.min_speed


def test_velocity_never_exceeds_max_speed(params, viewport):
    flock = Flock([Boid(i * 5, i * 5, 3 + i, 9 - i) for i in range(8)], params)

    for frame in range(50):
        tick(flock, viewport, frame)
        for boid in flock:
            assert boid.velocity.x <= params.max_speed
            assert boid.velocity.y <= params.max_speed


def test_boid_near_right_edge_turns_and_moves_left(params, viewport):
    flock = Flock([Boid(viewport.right - 5, 0, 4, 3)], params)

    tick(flock, viewport)
    assert flock[0].direction_x is DirectionX.LEFT
    after_first = flock[0].position.x
    assert after_first < viewport.right - 5

    tick(flock, viewport, 1)
    assert flock[0].position.x < after_first


def test_boid_near_bottom_edge_turns_up(params, viewport):
    flock = Flock([Boid(0, viewport.bottom + 2, 4, 3, DirectionX.RIGHT, DirectionY.BOTTOM)], params)

    flips = tick(flock, viewport)

    assert flips == (0, 1)
    assert flock[0].direction_y is DirectionY.TOP
    assert flock[0].position.y == pytest.approx(viewport.bottom + 5)


def test_default_flock_first_tick():
    flock = Flock.create(10, FlockParameters())
    initial = flock.positions()

    flips = tick(flock, Viewport.from_size(1024, 768))

    assert flips == (0, 0)
    for before, boid in zip(initial, flock):
        assert boid.position != before
        assert boid.direction_x is DirectionX.RIGHT
        assert boid.direction_y is DirectionY.TOP
    # Boid 0 is pushed only by boid 1 (10 units away on x).
    assert flock[0].position.x == pytest.approx(-100 - 0.05 + 4)
    assert flock[0].position.y == pytest.approx(100 - 0.15 + 3)


def test_default_flock_in_small_viewport_turns_top_boids():
    flock = Flock.create(10, FlockParameters())

    flips = tick(flock, Viewport.from_size(800, 600))

    assert flips == (0, 3)
    assert [b.direction_y for b in flock][:7] == [DirectionY.TOP] * 7
    assert [b.direction_y for b in flock][7:] == [DirectionY.BOTTOM] * 3


def test_unused_parameters_do_not_change_the_update(viewport):
    plain = Flock.create(10, FlockParameters())
    tuned = Flock.create(10, FlockParameters(
        turn_factor=5.0, visual_range=500.0, centering_factor=1.0,
        matching_factor=1.0, min_speed=50.0, max_bias=1.0,
        bias_increment=1.0, default_bias_val=1.0,
    ))

    for frame in range(20):
        tick(plain, viewport, frame)
        tick(tuned, viewport, frame)

    assert [b.to_dict() for b in plain] == [b.to_dict() for b in tuned]


def test_empty_flock_update(params, viewport):
    assert tick(Flock([], params), viewport) == (0, 0)
