"""The game's colour palette and hex colour parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

DARK_HEX = "#171726"
RED_HEX = "#804055"
ORANGE_HEX = "#d99d62"
WHITE_HEX = "#fff2d9"

_HEX_DIGITS = set("0123456789abcdefABCDEF")


class HexColorError(ValueError):
    """Raised when a hex colour string cannot be parsed."""


@dataclass(frozen=True)
class Color:
    """An sRGB colour with components in the range 0 to 1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return tuple(round(c * 255.0) for c in (self.r, self.g, self.b, self.a))


def parse_hex(text: str) -> Color:
    """Parse ``RGB``, ``RGBA``, ``RRGGBB`` or ``RRGGBBAA``, with an optional ``#``."""
    digits = text[1:] if text.startswith("#") else text
    for char in digits:
        if char not in _HEX_DIGITS:
            raise HexColorError(f"invalid hex character {char!r}")
    if len(digits) in (3, 4):
        digits = "".join(char * 2 for char in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise HexColorError(f"invalid hex colour length in {text!r}")
    r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return Color.from_rgba8(r, g, b, a)


@dataclass(frozen=True)
class Palette:
    """The four colours the game draws with."""

    dark: Color = field(default_factory=lambda: parse_hex(DARK_HEX))
    red: Color = field(default_factory=lambda: parse_hex(RED_HEX))
    orange: Color = field(default_factory=lambda: parse_hex(ORANGE_HEX))
    white: Color = field(default_factory=lambda: parse_hex(WHITE_HEX))