import math

import pytest

from nightfall.movement import (
    EDGE_GRACE,
    cursor_to_world,
    edge_teleport,
    fake_magnet_step,
    friction_step,
    magnet_step,
    velocity_step,
)
from nightfall.vec import Vec2, Vec3

W, H = 800.0, 600.0


def test_cursor_at_window_centre_is_world_origin():
    assert cursor_to_world(Vec2(W / 2, H / 2), W, H) == Vec2(0.0, 0.0)


def test_cursor_y_axis_is_flipped():
    top = cursor_to_world(Vec2(W / 2, 0.0), W, H)
    bottom = cursor_to_world(Vec2(W / 2, H), W, H)
    assert top.y > 0 > bottom.y
    assert top.y == -bottom.y


def test_missing_cursor_gives_none():
    assert cursor_to_world(None, W, H) is None


def test_edge_teleport_inside_is_unchanged():
    position = Vec3(10.0, -20.0, 3.0)
    assert edge_teleport(position, W, H) == position


def test_edge_teleport_left_goes_right():
    result = edge_teleport(Vec3(-W / 2 - EDGE_GRACE - 1, 5.0, 2.0), W, H)
    assert result.x > W / 2
    assert (result.y, result.z) == (5.0, 2.0)


def test_edge_teleport_right_goes_left():
    result = edge_teleport(Vec3(W / 2 + EDGE_GRACE + 1, 5.0, 2.0), W, H)
    assert result.x < -W / 2
    assert result.y == 5.0


def test_edge_teleport_vertical():
    below = edge_teleport(Vec3(0.0, -H / 2 - EDGE_GRACE - 1), W, H)
    above = edge_teleport(Vec3(0.0, H / 2 + EDGE_GRACE + 1), W, H)
    assert below.y > H / 2
    assert above.y < -H / 2


def test_edge_teleport_horizontal_takes_priority():
    position = Vec3(-W / 2 - EDGE_GRACE - 1, -H / 2 - EDGE_GRACE - 1, 0.0)
    result = edge_teleport(position, W, H)
    assert result.y == position.y
    assert result.x > W / 2


def test_edge_teleport_does_not_bounce_back():
    once = edge_teleport(Vec3(-W / 2 - EDGE_GRACE - 1, 0.0), W, H)
    assert edge_teleport(once, W, H) == once


def test_velocity_step_keeps_z_and_zero_delta():
    position = Vec3(1.0, 2.0, 7.0)
    assert velocity_step(position, Vec2(3.0, 4.0), 0.0, 10.0) == position
    assert velocity_step(position, Vec2(3.0, 4.0), 0.5, 10.0).z == 7.0


def test_velocity_step_is_additive_over_time():
    start = Vec3(0.0, 0.0, 0.0)
    velocity = Vec2(3.0, -2.0)
    twice = velocity_step(velocity_step(start, velocity, 0.5, 2.0), velocity, 0.5, 2.0)
    whole = velocity_step(start, velocity, 1.0, 2.0)
    assert twice.x == pytest.approx(whole.x)
    assert twice.y == pytest.approx(whole.y)


def test_friction_stops_slow_velocity():
    assert friction_step(Vec2(1.0, 1.0), 100.0, 1.0) == Vec2.ZERO


def test_friction_reduces_length_keeping_direction():
    velocity = Vec2(30.0, 40.0)
    result = friction_step(velocity, 10.0, 0.5)
    assert result.length() == pytest.approx(velocity.length() - 5.0)
    assert result.normalize().x == pytest.approx(velocity.normalize().x)
    assert result.normalize().y == pytest.approx(velocity.normalize().y)


def test_magnet_accelerates_towards_target():
    result = magnet_step(Vec2.ZERO, Vec3(0.0, 0.0), Vec3(0.0, 10.0), 100.0, 1.0)
    assert result.y > 0
    assert result.x == pytest.approx(0.0, abs=1e-9)
    assert result.length() == pytest.approx(100.0 / 100.0)


def test_magnet_on_target_leaves_velocity():
    velocity = Vec2(2.0, 3.0)
    assert magnet_step(velocity, Vec3(1.0, 1.0), Vec3(1.0, 1.0), 50.0, 1.0) == velocity


def test_fake_magnet_weak_pull_does_nothing():
    position = Vec3(0.0, 0.0, 4.0)
    assert fake_magnet_step(position, Vec3(100.0, 0.0), 10.0, 1.0, False) == position


def test_fake_magnet_strong_pull_snaps_to_target_keeping_z():
    result = fake_magnet_step(Vec3(0.0, 0.0, 4.0), Vec3(3.0, 4.0, 9.0), 10_000.0, 1.0, False)
    assert (result.x, result.y, result.z) == (3.0, 4.0, 4.0)


def test_fake_magnet_medium_pull_moves_partway():
    target = Vec3(10.0, 0.0)
    result = fake_magnet_step(Vec3(0.0, 0.0), target, 500.0, 1.0, False)
    assert 0.0 < result.x < target.x
    assert result.y == pytest.approx(0.0, abs=1e-9)


def test_magnet_ability_doubles_pull():
    position = Vec3(0.0, 0.0)
    target = Vec3(10.0, 0.0)
    assert fake_magnet_step(position, target, 60.0, 1.0, False) == position
    moved = fake_magnet_step(position, target, 60.0, 1.0, True)
    assert moved.x > 0
    assert not math.isnan(moved.y)