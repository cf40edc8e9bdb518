"""Heads-up display layout: ammo and heart icons, reload dial and hit flash."""

from __future__ import annotations

from enum import Enum

from nightfall.timer import Timer, TimerMode
from nightfall.vec import Vec2

EDGE_X = 40.0
EDGE_Y = 30.0
BULLET_SPACING = 20.0
HEART_SPACING = 40.0
HEART_ICON_Z = 5.0
RELOAD_FRAMES = 9
HIT_FLASH_PERIOD = 0.25


class IconState(Enum):
    AVAILABLE = 0
    UNAVAILABLE = 1


def icon_state(index: int, current: int) -> IconState:
    """Icons below the current count are shown full, the rest empty."""
    return IconState.AVAILABLE if index < current else IconState.UNAVAILABLE


def _check_index(index: int, maximum: int) -> None:
    if not 0 <= index < maximum:
        raise ValueError(f"icon index {index} outside 0..{maximum - 1}")


def bullet_icon_position(
    index: int, max_bullets: int, window_width: float, window_height: float
) -> Vec2:
    """Where a bullet icon sits: a column at the top right, index 0 lowest."""
    _check_index(index, max_bullets)
    return Vec2(
        window_width / 2.0 - EDGE_X,
        window_height / 2.0 - EDGE_Y - BULLET_SPACING * (max_bullets - 1 - index),
    )


def heart_icon_position(
    index: int, max_health: int, window_width: float, window_height: float
) -> Vec2:
    """Where a heart icon sits: a row at the top left, index 0 rightmost."""
    _check_index(index, max_health)
    return Vec2(
        -window_width / 2.0 + EDGE_X + HEART_SPACING * (max_health - 1 - index),
        window_height / 2.0 - EDGE_Y,
    )


def reload_icon_position(max_bullets: int, window_width: float, window_height: float) -> Vec2:
    """The reload dial sits just below the column of bullet icons."""
    return Vec2(
        window_width / 2.0 - EDGE_X,
        window_height / 2.0 - EDGE_Y - BULLET_SPACING * max_bullets,
    )


def reload_frame(remaining: float, reload_time: float) -> int:
    """The reload dial's frame: it fills from 0 up to the last frame when done."""
    if remaining > 0.0:
        return max(0, int(RELOAD_FRAMES * (1.0 - remaining / reload_time)))
    return RELOAD_FRAMES


class HitFlash:
    """Blinks a hit marker over the player while they are invincible."""

    def __init__(self, period: float = HIT_FLASH_PERIOD) -> None:
        self.timer = Timer(period, TimerMode.REPEATING)
        self.visible = False

    def update(self, delta: float, invincible: bool, took_damage: bool) -> bool:
        """Advance by ``delta`` seconds and return whether the marker is shown."""
        if not invincible:
            self.visible = False
            return False
        if took_damage:
            self.timer.reset()
            self.visible = True
        self.timer.tick(delta)
        if self.timer.just_finished():
            self.visible = not self.visible
        return self.visible