"""Pause state and the pause menu's volume bars."""

from __future__ import annotations

from dataclasses import dataclass

VOLUME_STEPS = 10
UNPAUSE_LABEL = "Unpause"
MUSIC_VOLUME_LABEL = "Music Volume"
FX_VOLUME_LABEL = "FX Volume"


@dataclass
class PauseController:
    """Tracks whether gameplay is paused and whether the pause menu is open.

    Gameplay can be paused without the menu, for example on game over.
    """

    is_paused: bool = False
    menu_open: bool = False

    def accepts_escape(self) -> bool:
        """Whether Escape may toggle the menu; not while paused by something else."""
        return self.menu_open or not self.is_paused

    def toggle_menu(self) -> bool:
        """Open or close the pause menu; returns whether it is now open."""
        if self.menu_open:
            self.is_paused = False
            self.menu_open = False
        else:
            self.is_paused = True
            self.menu_open = True
        return self.menu_open


def volume_from_bar(value: int) -> float:
    """Volume in the range 0 to 1 for a bar position."""
    return value / VOLUME_STEPS


def bar_from_volume(volume: float) -> int:
    """Bar position for a volume, truncated towards zero and never negative."""
    return max(0, int(round(volume * VOLUME_STEPS, 6)))