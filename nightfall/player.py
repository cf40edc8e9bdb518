"""The player character: stats derived from abilities, movement and damage immunity."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from nightfall.ability import Ability
from nightfall.timer import Timer, TimerMode
from nightfall.vec import Vec2, Vec3

BASE_BULLETS = 6
BULLETS_PER_GALORE = 3
BASE_DAMAGE = 5.0
BASE_SHOOT_TIME = 0.5
BASE_RELOAD_TIME = 1.0
BASE_KNOCKBACK = 20.0
BASE_SPEED = 150.0
SPEED_PER_FASTER = 50.0
BASE_HEALTH = 3
BASE_XP_THRESHOLD = 20
BASE_PICK_DISTANCE = 10.0
INVINCIBILITY_SECONDS = 3.0
COLLIDER_SIZE = Vec2(15.0, 30.0)

GAME_OVER_TITLE = "You did not survive"
PLAY_AGAIN_LABEL = "Play Again"


class PlayerAnimationState(Enum):
    """The player's sprite animations."""

    IDLE = "idle"
    RUNNING = "running"

    def frames(self) -> int:
        return _ANIMATION_FRAMES[self][0]

    def frame_duration(self) -> float:
        """Seconds each frame is shown."""
        return _ANIMATION_FRAMES[self][1]


_ANIMATION_FRAMES = {
    PlayerAnimationState.IDLE: (2, 1.0 / 2.0),
    PlayerAnimationState.RUNNING: (4, 1.0 / 10.0),
}


def _count(abilities: Iterable[Ability], wanted: Ability) -> int:
    return sum(1 for ability in abilities if ability is wanted)


@dataclass
class Player:
    """The player's ammunition, abilities, position, health and experience."""

    curr_bullets: int = BASE_BULLETS
    max_bullets: int = BASE_BULLETS
    is_reloading: bool = False
    abilities: list[Ability] = field(default_factory=list)
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    health: int = BASE_HEALTH
    max_health: int = BASE_HEALTH
    experience: int = 0
    level: int = 0
    xp_threshold: int = BASE_XP_THRESHOLD
    pick_distance: float = BASE_PICK_DISTANCE

    def damage(self) -> int:
        """Bullet damage, truncated to a whole number."""
        value = BASE_DAMAGE
        for ability in self.abilities:
            value *= ability.damage_mult()
        return int(value)

    def shoot_time(self) -> float:
        """Seconds between shots."""
        value = BASE_SHOOT_TIME
        for ability in self.abilities:
            value /= ability.shoot_speed_mult()
        return value

    def reload_time(self) -> float:
        value = BASE_RELOAD_TIME
        for ability in self.abilities:
            value /= ability.reload_mult()
        return value

    def knockback(self) -> float:
        value = BASE_KNOCKBACK
        for ability in self.abilities:
            value *= ability.knockback_mult()
        return value

    def update_max_bullets(self) -> int:
        """Recompute the magazine size from the abilities taken and return it."""
        galore = _count(self.abilities, Ability.BULLETS_GALORE)
        self.max_bullets = BASE_BULLETS + galore * BULLETS_PER_GALORE
        return self.max_bullets

    def move_speed(self) -> float:
        return BASE_SPEED + SPEED_PER_FASTER * _count(self.abilities, Ability.FASTER)

    def movement(self, direction: Vec2 | None, delta: float) -> Vec3 | None:
        """The displacement for one frame, or ``None`` when there is no input."""
        if direction is None:
            return None
        speed = self.move_speed()
        return Vec3(direction.x * speed * delta, direction.y * speed * delta, 0.0)

    def reset(self) -> None:
        """Return to the state of a fresh run after a game over."""
        self.abilities = []
        self.position = Vec3(0.0, 0.0, self.position.z)
        self.max_health = BASE_HEALTH
        self.health = BASE_HEALTH
        self.experience = 0
        self.xp_threshold = BASE_XP_THRESHOLD


def facing_after_move(movement_x: float, facing_right: bool) -> bool:
    """Which way the sprite faces after moving horizontally by ``movement_x``."""
    if movement_x > 0.0:
        return True
    if movement_x < 0.0:
        return False
    return facing_right


class ImmunityTracker:
    """Grants a spell of invincibility each time the player takes damage."""

    def __init__(self, duration: float = INVINCIBILITY_SECONDS) -> None:
        self.timer = Timer(duration, TimerMode.ONCE)
        self.is_invincible = False

    def update(self, delta: float, took_damage: bool) -> bool:
        """Advance by ``delta`` seconds and return whether the player is invincible."""
        self.timer.tick(delta)
        if self.timer.just_finished():
            self.is_invincible = False
        if took_damage:
            self.is_invincible = True
            self.timer.reset()
        return self.is_invincible


def format_elapsed(seconds: float) -> str:
    """Format a run's length as minutes and zero-padded seconds."""
    if math.isnan(seconds) or seconds < 0:
        raise ValueError(f"elapsed time must be non-negative, got {seconds!r}")
    whole = int(seconds)
    minutes, secs = divmod(whole, 60)
    return f"{minutes}:{secs:02d}"