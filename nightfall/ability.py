"""Abilities the player can pick up on level-up, and their effects."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Ability(Enum):
    """A level-up ability; the value names its texture."""

    BIG_BULLETS = "big_bullets"
    BIGGEST_BULLETS = "biggest_bullets"
    BLOODTHIRSTY_VIAL = "bloodthirsty_vial"
    BULLETS_GALORE = "bullets_galore"
    CROSSBOW = "crossbow"
    DEATHRATTLE = "deathrattle"
    DOUBLE_BARREL = "double_barrel"
    FASTER = "faster"
    FLAMING_BULLETS = "flaming_bullets"
    HOTTER_FIRE = "hotter_fire"
    MAGNET = "magnet"
    MAX_HP = "max_hp"
    MEDIUM_BULLETS = "medium_bullets"
    MEGA_SHOTGUN = "mega_shotgun"
    PIERCING = "piercing"
    RELOAD = "reload"
    SHELLS = "shells"
    SHOOTING_SPEED = "shooting_speed"
    SHOTGUN = "shotgun"
    SIXFOLD = "sixfold"
    SNIPER = "sniper"
    THORNS = "thorns"
    TRIPLE_BARREL = "triple_barrel"
    POTION = "potion"

    @classmethod
    def all(cls) -> list[Ability]:
        """Every ability, in the order offered to the player."""
        return list(_OFFER_ORDER)

    def texture_key(self) -> str:
        return self.value

    def display_name(self) -> str:
        return _NAMES[self]

    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def is_available(self, player_abilities: Iterable[Ability]) -> bool:
        """Whether this ability may be offered given what the player already has."""
        owned = set(player_abilities)
        if self not in _REPEATABLE and self in owned:
            return False
        required = _PREREQUISITES.get(self)
        return required is None or required in owned

    def damage_mult(self) -> float:
        return _DAMAGE_MULT.get(self, 1.0)

    def knockback_mult(self) -> float:
        return _KNOCKBACK_MULT.get(self, 1.0)

    def reload_mult(self) -> float:
        return _RELOAD_MULT.get(self, 1.0)

    def shoot_speed_mult(self) -> float:
        return _SHOOT_SPEED_MULT.get(self, 1.0)


_OFFER_ORDER = (
    Ability.BIG_BULLETS,
    Ability.BIGGEST_BULLETS,
    Ability.BULLETS_GALORE,
    Ability.BLOODTHIRSTY_VIAL,
    Ability.CROSSBOW,
    Ability.DEATHRATTLE,
    Ability.DOUBLE_BARREL,
    Ability.FASTER,
    Ability.FLAMING_BULLETS,
    Ability.HOTTER_FIRE,
    Ability.MAGNET,
    Ability.MEDIUM_BULLETS,
    Ability.MEGA_SHOTGUN,
    Ability.RELOAD,
    Ability.SHELLS,
    Ability.SHOOTING_SPEED,
    Ability.SHOTGUN,
    Ability.SIXFOLD,
    Ability.SNIPER,
    Ability.THORNS,
    Ability.TRIPLE_BARREL,
    Ability.MAX_HP,
    Ability.POTION,
    Ability.PIERCING,
)

_NAMES = {
    Ability.BIG_BULLETS: "Bigger Bullets",
    Ability.BIGGEST_BULLETS: "Biggest Bullets",
    Ability.BLOODTHIRSTY_VIAL: "Bloodthirsty Vial",
    Ability.BULLETS_GALORE: "Bullets Galore",
    Ability.CROSSBOW: "Crossbow",
    Ability.DEATHRATTLE: "Deathrattle",
    Ability.DOUBLE_BARREL: "Double Barrel",
    Ability.FASTER: "Faster",
    Ability.FLAMING_BULLETS: "Flaming Bullets",
    Ability.HOTTER_FIRE: "Hotter Fire",
    Ability.MAGNET: "Magnet",
    Ability.MAX_HP: "Hearty",
    Ability.MEDIUM_BULLETS: "Big Bullets",
    Ability.MEGA_SHOTGUN: "Mega Shotgun",
    Ability.RELOAD: "Reload",
    Ability.SHELLS: "Shell",
    Ability.SHOOTING_SPEED: "Quick Chamber",
    Ability.SHOTGUN: "Shotgun",
    Ability.SIXFOLD: "Sixfold",
    Ability.SNIPER: "Sniper",
    Ability.THORNS: "Thorns",
    Ability.TRIPLE_BARREL: "Triple Barrel",
    Ability.POTION: "Potion",
    Ability.PIERCING: "Piercing",
}

_BULLET_SIZE_TEXT = (
    "x2 Damage\n +50% Knockback\n -20% Shoot Speed\n -20% Reload Speed"
)

_DESCRIPTIONS = {
    Ability.BIG_BULLETS: _BULLET_SIZE_TEXT + "\n -20% Bullet Speed",
    Ability.BIGGEST_BULLETS: _BULLET_SIZE_TEXT + "\n -20% Bullet Speed",
    Ability.BLOODTHIRSTY_VIAL: "Heals after 100 kills\n Kills required double each time\n",
    Ability.BULLETS_GALORE: "+3 Max Ammo",
    Ability.CROSSBOW: "Bullets pierce all enemies",
    Ability.DEATHRATTLE: "20% chance of explosion on kill\nExplosion deals x3 damage",
    Ability.DOUBLE_BARREL: "2 Bullets\n-30% Shoot Speed",
    Ability.FASTER: "+50 Move Speed",
    Ability.FLAMING_BULLETS: "2 damage every 2 seconds",
    Ability.HOTTER_FIRE: "+2 fire damage",
    Ability.MAGNET: "Twice as attractive",
    Ability.MAX_HP: "+1 Max HP",
    Ability.MEDIUM_BULLETS: _BULLET_SIZE_TEXT,
    Ability.MEGA_SHOTGUN: "7 Bullets",
    Ability.RELOAD: "+75% Reload Speed",
    Ability.SHELLS: "+50% Dmg",
    Ability.SHOOTING_SPEED: "+40% Shoot Speed",
    Ability.SHOTGUN: "5 Bullets\n-10% Shoot Speed",
    Ability.SIXFOLD: "Shoot 6 bullets on reload",
    Ability.SNIPER: "x2 Bullet Speed",
    Ability.THORNS: "Deadly thorns surround you every 20 seconds",
    Ability.TRIPLE_BARREL: "3 Bullets\n-10% Shoot Speed",
    Ability.POTION: "Heal 2 hearts",
    Ability.PIERCING: "Bullets pierce 3 enemies",
}

# Abilities that may be taken more than once.
_REPEATABLE = frozenset(
    {
        Ability.BULLETS_GALORE,
        Ability.FASTER,
        Ability.HOTTER_FIRE,
        Ability.RELOAD,
        Ability.SHOOTING_SPEED,
        Ability.MAX_HP,
        Ability.POTION,
    }
)

_PREREQUISITES = {
    Ability.BIG_BULLETS: Ability.MEDIUM_BULLETS,
    Ability.BIGGEST_BULLETS: Ability.BIG_BULLETS,
    Ability.CROSSBOW: Ability.PIERCING,
    Ability.TRIPLE_BARREL: Ability.DOUBLE_BARREL,
    Ability.SHOTGUN: Ability.TRIPLE_BARREL,
    Ability.MEGA_SHOTGUN: Ability.SHOTGUN,
    Ability.HOTTER_FIRE: Ability.FLAMING_BULLETS,
}

_DAMAGE_MULT = {
    Ability.MEDIUM_BULLETS: 2.0,
    Ability.BIG_BULLETS: 2.0,
    Ability.BIGGEST_BULLETS: 2.0,
    Ability.SHELLS: 1.5,
}

_KNOCKBACK_MULT = {
    Ability.MEDIUM_BULLETS: 1.5,
    Ability.BIG_BULLETS: 1.5,
    Ability.BIGGEST_BULLETS: 1.5,
}

_RELOAD_MULT = {
    Ability.MEDIUM_BULLETS: 0.8,
    Ability.BIG_BULLETS: 0.8,
    Ability.BIGGEST_BULLETS: 0.8,
    Ability.RELOAD: 1.75,
}

_SHOOT_SPEED_MULT = {
    Ability.DOUBLE_BARREL: 0.7,
    Ability.TRIPLE_BARREL: 0.9,
    Ability.SHOTGUN: 0.9,
    Ability.MEDIUM_BULLETS: 0.8,
    Ability.BIG_BULLETS: 0.8,
    Ability.BIGGEST_BULLETS: 0.8,
    Ability.SHOOTING_SPEED: 1.4,
}