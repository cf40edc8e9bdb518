"""Sprite-based UI widgets: buttons, click and hover tracking, and stepped bars."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ButtonState(Enum):
    NORMAL = "normal"
    HOVERED = "hovered"
    PRESSED = "pressed"


class Button:
    """A button whose sprite frame follows hover and click events."""

    def __init__(self, has_pressed_state: bool = True) -> None:
        self.state = ButtonState.NORMAL
        self.has_pressed_state = has_pressed_state

    def on_clicked(self) -> None:
        self.state = ButtonState.PRESSED

    def on_unclicked(self) -> None:
        if self.state is ButtonState.PRESSED:
            self.state = ButtonState.HOVERED

    def on_hovered(self) -> None:
        if self.state is ButtonState.NORMAL:
            self.state = ButtonState.HOVERED

    def on_unhovered(self) -> None:
        if self.state is ButtonState.HOVERED:
            self.state = ButtonState.NORMAL

    def frame(self) -> int:
        """Sprite frame: 0 normal, 1 hovered, 2 pressed (or 0 without a pressed frame)."""
        if self.state is ButtonState.HOVERED:
            return 1
        if self.state is ButtonState.PRESSED:
            return 2 if self.has_pressed_state else 0
        return 0


class Clickable:
    """Tracks whether the left mouse button is held down over a widget."""

    def __init__(self) -> None:
        self.is_clicked = False

    def update(self, inside: bool, just_pressed: bool, just_released: bool) -> bool | None:
        """Feed one frame of input.

        Returns ``True`` when a click starts, ``False`` when it ends, and
        ``None`` when nothing changed.
        """
        if inside:
            if just_pressed:
                if not self.is_clicked:
                    self.is_clicked = True
                    return True
            elif just_released and self.is_clicked:
                self.is_clicked = False
                return False
        elif self.is_clicked:
            self.is_clicked = False
            return False
        return None


class Hoverable:
    """Tracks whether the cursor is over a widget."""

    def __init__(self) -> None:
        self.is_hovered = False

    def update(self, inside: bool) -> bool | None:
        """Returns ``True`` on entering, ``False`` on leaving, ``None`` otherwise."""
        if inside == self.is_hovered:
            return None
        self.is_hovered = inside
        return inside


@dataclass(frozen=True)
class BarUpdate:
    """A bar's value change."""

    old_val: int
    new_val: int


@dataclass
class Bar:
    """A value stepped between zero and a maximum; the value is its sprite frame."""

    val: int
    max_val: int

    def __post_init__(self) -> None:
        if self.val < 0 or self.max_val < 0:
            raise ValueError("bar values must be non-negative")

    @property
    def frame(self) -> int:
        return self.val

    def decrement(self) -> BarUpdate | None:
        """Step down by one unless already at zero."""
        if self.val <= 0:
            return None
        self.val -= 1
        return BarUpdate(self.val + 1, self.val)

    def increment(self) -> BarUpdate | None:
        """Step up by one unless already at the maximum."""
        if self.val >= self.max_val:
            return None
        self.val += 1
        return BarUpdate(self.val - 1, self.val)