"""Game states and the main menu's button behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from nightfall.palette import Color, Palette

TITLE = "Nightfall"
TITLE_FONT_SIZE = 150.0
TEXT_FONT_SIZE = 40.0
PLAY_LABEL = "Play"
BUTTON_WIDTH = 250.0
BUTTON_HEIGHT = 50.0


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()


class Interaction(Enum):
    """The pointer's relation to a button this frame."""

    PRESSED = auto()
    HOVERED = auto()
    NONE = auto()


@dataclass(frozen=True)
class ButtonResponse:
    """What a button does in reaction to an interaction."""

    pressed: bool = False
    color: Color | None = None
    next_state: GameState | None = None


def respond_to_interaction(interaction: Interaction, palette: Palette) -> ButtonResponse:
    """Shared button feedback: hovering turns orange, leaving turns red."""
    if interaction is Interaction.PRESSED:
        return ButtonResponse(pressed=True)
    if interaction is Interaction.HOVERED:
        return ButtonResponse(color=palette.orange)
    return ButtonResponse(color=palette.red)


def play_button_response(interaction: Interaction, palette: Palette) -> ButtonResponse:
    """The menu's play button: pressing it starts the game."""
    response = respond_to_interaction(interaction, palette)
    if response.pressed:
        return ButtonResponse(pressed=True, next_state=GameState.PLAYING)
    return response