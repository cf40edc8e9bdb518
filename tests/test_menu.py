from nightfall.menu import (
    ButtonResponse,
    GameState,
    Interaction,
    play_button_response,
    respond_to_interaction,
)
from nightfall.palette import Palette


def test_hover_turns_orange():
    palette = Palette()
    assert respond_to_interaction(Interaction.HOVERED, palette).color == palette.orange


def test_leaving_turns_red():
    palette = Palette()
    response = respond_to_interaction(Interaction.NONE, palette)
    assert response.color == palette.red
    assert response.pressed is False


def test_generic_press_changes_no_state():
    response = respond_to_interaction(Interaction.PRESSED, Palette())
    assert response == ButtonResponse(pressed=True)
    assert response.next_state is None


def test_play_button_press_starts_game():
    response = play_button_response(Interaction.PRESSED, Palette())
    assert response.next_state is GameState.PLAYING
    assert response.color is None


def test_play_button_hover_keeps_menu():
    palette = Palette()
    response = play_button_response(Interaction.HOVERED, palette)
    assert response.next_state is None
    assert response.color == palette.orange