"""Frame-step movement rules: velocity, friction, magnetism and screen wrapping."""

from __future__ import annotations

import math

from nightfall.radians import Radian
from nightfall.vec import Vec2, Vec3

EDGE_GRACE = 50.0
MINIMUM_FORCE_THRESHOLD = 0.8


def cursor_to_world(cursor: Vec2 | None, window_width: float, window_height: float) -> Vec2 | None:
    """Convert a window cursor position (origin top-left, y down) to world space.

    World space has its origin at the window centre with y pointing up.
    Returns ``None`` when there is no cursor in the window.
    """
    if cursor is None:
        return None
    return Vec2(cursor.x - window_width / 2.0, window_height / 2.0 - cursor.y)


def edge_teleport(position: Vec3, window_width: float, window_height: float) -> Vec3:
    """Wrap a position that has left the window by more than the grace margin.

    Only one axis is wrapped per call, horizontal edges taking priority.
    """
    half_w = window_width / 2.0
    half_h = window_height / 2.0
    if position.x < -half_w - EDGE_GRACE:
        return Vec3(half_w + EDGE_GRACE / 2.0, position.y, position.z)
    if position.x > half_w + EDGE_GRACE:
        return Vec3(-half_w - EDGE_GRACE / 2.0, position.y, position.z)
    if position.y < -half_h - EDGE_GRACE:
        return Vec3(position.x, half_h + EDGE_GRACE / 2.0, position.z)
    if position.y > half_h + EDGE_GRACE:
        return Vec3(position.x, -half_h - EDGE_GRACE / 2.0, position.z)
    return position


def velocity_step(position: Vec3, velocity: Vec2, delta: float, scaling: float) -> Vec3:
    """Move a position by its velocity over ``delta`` seconds; z is left alone."""
    return position + velocity.with_z(0.0) * delta * scaling


def friction_step(velocity: Vec2, force: float, delta: float) -> Vec2:
    """Slow a velocity down by ``force`` per second, stopping it once it would reverse."""
    amount = force * delta
    direction = velocity.normalize()
    if velocity.length() < amount:
        return Vec2.ZERO
    return velocity - direction * amount


def _direction_towards(origin: Vec3, target: Vec3) -> tuple[Vec2, Vec2]:
    direction = target.truncate() - origin.truncate()
    angle = Radian(math.atan2(direction.y, direction.x) - math.pi / 2.0)
    return direction, angle.unit_vector()


def magnet_step(velocity: Vec2, position: Vec3, target: Vec3, force: float, delta: float) -> Vec2:
    """Accelerate a velocity towards ``target`` with inverse-square attraction.

    A body sitting exactly on its target is not accelerated.
    """
    direction, unit = _direction_towards(position, target)
    distance_squared = direction.length_squared()
    if distance_squared == 0.0:
        return velocity
    pull = force / distance_squared
    return velocity + unit * pull * delta


def fake_magnet_step(
    position: Vec3, target: Vec3, force: float, delta: float, has_magnet: bool
) -> Vec3:
    """Drag a position straight towards ``target`` with inverse-square strength.

    The pull is doubled by the magnet ability. A pull at least as large as the
    remaining distance snaps onto the target; one below the minimum threshold
    leaves the position untouched. The z component is always kept.
    """
    distance_squared = target.distance_squared(position)
    if distance_squared == 0.0:
        return Vec3(target.x, target.y, position.z)
    pull = force * delta / distance_squared
    if has_magnet:
        pull *= 2.0
    if pull >= target.distance(position):
        return Vec3(target.x, target.y, position.z)
    if pull < MINIMUM_FORCE_THRESHOLD:
        return position
    _, unit = _direction_towards(position, target)
    return position + unit.with_z(0.0) * pull