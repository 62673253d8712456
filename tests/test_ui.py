import pytest

from coopsweeper.position import Position
from coopsweeper.ui import Button, IconElement, TextElement


@pytest.fixture
def button():
    return Button("start", "Start", 200.0, 60.0)


def test_new_button_uses_primary_style(button):
    assert button.bg_color == "#4a6bdf"
    assert button.text_color == "#ffffff"
    assert button.border_radius == 8.0
    assert button.primary() == button


@pytest.mark.parametrize(
    "style, colour",
    [("secondary", "#6c757d"), ("danger", "#dc3545"), ("success", "#28a745")],
)
def test_styles_set_colours(button, style, colour):
    styled = getattr(button, style)()
    assert styled.bg_color == colour
    assert styled.text_color == "#ffffff"
    assert styled.id == button.id
    assert styled.label == button.label


def test_style_keeps_size(button):
    styled = button.danger()
    assert (styled.width, styled.height) == (button.width, button.height)


def test_hit_at_centre_and_edges(button):
    centre = Position(50.0, 50.0)
    assert button.is_hit(centre, centre)
    assert button.is_hit(Position(centre.x + button.width / 2, centre.y), centre)
    assert button.is_hit(Position(centre.x, centre.y - button.height / 2), centre)


def test_miss_outside(button):
    centre = Position(50.0, 50.0)
    assert not button.is_hit(Position(centre.x + button.width / 2 + 0.5, centre.y), centre)
    assert not button.is_hit(Position(centre.x, centre.y + button.height / 2 + 0.5), centre)


def test_text_and_icon_hold_fields():
    text = TextElement("hello", "Arial", 14.0, "#000000")
    icon = IconElement("flag", 16.0, "#FF0000")
    assert text.content == "hello"
    assert icon.name == "flag"
    assert text != TextElement("bye", "Arial", 14.0, "#000000")