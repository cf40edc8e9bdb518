"""The player's gun: fire rate, reloading and the bullet patterns abilities give."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from nightfall.ability import Ability
from nightfall.player import Player
from nightfall.radians import Radian
from nightfall.timer import Timer, TimerMode
from nightfall.vec import Vec2, Vec3

BASE_BULLET_SPEED = 500.0
SNIPER_SPEED_MULT = 2.0
HEAVY_BULLET_SPEED_MULT = 0.8
MUZZLE_DISTANCE = 10.0
MUZZLE_LIFT = 5.0
SPREAD_DEGREES = 7.0
SHOTGUN_BULLETS = 5
MEGA_SHOTGUN_BULLETS = 7
SIXFOLD_BULLETS = 6
DOUBLE_BARREL_GAP = 5.0
PIERCING_HITS = 3
BULLET_RADIUS = 5.0
INITIAL_COOLDOWN = 1.0

SOUND_RELOAD = "reload"
SOUND_GUNSHOT = "gunshot"
SOUND_SHOTGUN = "gunshot2"


@dataclass(frozen=True)
class Piercing:
    """How many enemies a bullet passes through; ``None`` means every enemy."""

    hits: int | None = 0

    @classmethod
    def count(cls, hits: int) -> Piercing:
        if hits < 0:
            raise ValueError(f"piercing count must be non-negative, got {hits}")
        return cls(hits)

    @property
    def pierces_all(self) -> bool:
        return self.hits is None


Piercing.NONE = Piercing(0)
Piercing.ALL = Piercing(None)


@dataclass(frozen=True)
class BulletSpec:
    """A bullet ready to be spawned."""

    position: Vec3
    velocity: Vec2
    damage: int
    knockback: float
    piercing: Piercing
    large: bool = False


def bullet_speed(abilities: Iterable[Ability]) -> float:
    """Bullet speed for the abilities taken."""
    owned = set(abilities)
    speed = BASE_BULLET_SPEED
    if Ability.SNIPER in owned:
        speed *= SNIPER_SPEED_MULT
    if Ability.BIG_BULLETS in owned:
        speed *= HEAVY_BULLET_SPEED_MULT
    if Ability.BIGGEST_BULLETS in owned:
        speed *= HEAVY_BULLET_SPEED_MULT
    return speed


def bullet_piercing(abilities: Iterable[Ability]) -> Piercing:
    owned = set(abilities)
    if Ability.CROSSBOW in owned:
        return Piercing.ALL
    if Ability.PIERCING in owned:
        return Piercing.count(PIERCING_HITS)
    return Piercing.NONE


class _BulletFactory:
    def __init__(self, player: Player, speed: float) -> None:
        self.speed = speed
        self.damage = player.damage()
        self.knockback = player.knockback()
        self.piercing = bullet_piercing(player.abilities)
        self.large = Ability.BIG_BULLETS in player.abilities

    def make(self, position: Vec3, direction: Vec2) -> BulletSpec:
        return BulletSpec(
            position=position,
            velocity=direction * self.speed,
            damage=self.damage,
            knockback=self.knockback,
            piercing=self.piercing,
            large=self.large,
        )


def _fan(angle: Radian, count: int) -> list[Vec2]:
    offset = Radian.from_degrees(SPREAD_DEGREES)
    first = (count - 1) / -2.0
    return [
        (angle + offset * (first + step)).normalize().unit_vector() for step in range(count)
    ]


def spread_bullets(player: Player, origin: Vec3, angle: Radian, speed: float) -> list[BulletSpec]:
    """The bullets of one shot fired at ``angle`` from ``origin``."""
    factory = _BulletFactory(player, speed)
    owned = set(player.abilities)

    if Ability.MEGA_SHOTGUN in owned:
        return [
            factory.make(origin, direction)
            for direction in _fan(angle, MEGA_SHOTGUN_BULLETS)
            for _ in range(2)
        ]
    if Ability.SHOTGUN in owned:
        return [factory.make(origin, direction) for direction in _fan(angle, SHOTGUN_BULLETS)]
    if Ability.TRIPLE_BARREL in owned:
        offset = Radian.from_degrees(SPREAD_DEGREES)
        directions = (
            (angle + offset).normalize().unit_vector(),
            angle.unit_vector(),
            (angle - offset).normalize().unit_vector(),
        )
        return [factory.make(origin, direction) for direction in directions]

    direction = angle.unit_vector()
    if Ability.DOUBLE_BARREL in owned:
        side = direction.perp().with_z(0.0) * DOUBLE_BARREL_GAP
        return [
            factory.make(origin + side, direction),
            factory.make(origin - side, direction),
        ]
    return [factory.make(origin, direction)]


class Gun:
    """Fire-rate cooldown and magazine reloading for the player."""

    def __init__(self, layer: float = 0.0) -> None:
        self.layer = layer
        self.cooldown = Timer(INITIAL_COOLDOWN, TimerMode.ONCE)
        self.reload_timer = Timer(0.0, TimerMode.ONCE)
        self.sounds: list[str] = []

    def update(
        self, player: Player, delta: float, trigger_pressed: bool, target: Vec2 | None
    ) -> list[BulletSpec]:
        """Advance by ``delta`` seconds and return the bullets fired this frame.

        ``target`` is the cursor in world space, or ``None`` when there is none.
        Sounds to play this frame are left in ``sounds``.
        """
        self.sounds = []
        self.cooldown.tick(delta)
        self.reload_timer.tick(delta)

        if self.reload_timer.just_finished():
            player.curr_bullets = player.max_bullets
            player.is_reloading = False

        ready = self.cooldown.finished() and not player.is_reloading
        if not (ready and trigger_pressed) or target is None:
            return []
        if player.curr_bullets <= 0:
            raise ValueError("cannot fire with an empty magazine that is not reloading")

        self.cooldown.set_duration(player.shoot_time())
        self.cooldown.reset()

        position = player.position
        direction = target - position.truncate()
        angle = Radian(math.atan2(direction.y, direction.x) - math.pi / 2.0)
        unit = angle.unit_vector()
        origin = (
            position
            + Vec3(unit.x, unit.y, self.layer) * MUZZLE_DISTANCE
            + Vec3(0.0, 0.0, MUZZLE_LIFT)
        )
        speed = bullet_speed(player.abilities)
        bullets: list[BulletSpec] = []

        player.curr_bullets -= 1
        if player.curr_bullets == 0:
            player.is_reloading = True
            self.reload_timer.set_duration(player.reload_time())
            self.reload_timer.reset()
            self.sounds.append(SOUND_RELOAD)

            if Ability.SIXFOLD in player.abilities:
                factory = _BulletFactory(player, speed)
                bullets.extend(
                    factory.make(origin, (Radian.FULL / SIXFOLD_BULLETS * step).normalize().unit_vector())
                    for step in range(SIXFOLD_BULLETS)
                )

        self.sounds.append(SOUND_SHOTGUN if Ability.SHOTGUN in player.abilities else SOUND_GUNSHOT)
        bullets.extend(spread_bullets(player, origin, angle, speed))
        return bullets