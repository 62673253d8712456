"""UI element components: buttons, text labels and icons."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from coopsweeper.position import Position

_WHITE = "#ffffff"


@dataclass
class Button:
    """A rectangular button centred on its position."""

    id: str
    label: str
    width: float
    height: float
    bg_color: str = "#4a6bdf"
    text_color: str = _WHITE
    border_radius: float = 8.0

    def primary(self) -> Button:
        return replace(self, bg_color="#4a6bdf", text_color=_WHITE)

    def secondary(self) -> Button:
        return replace(self, bg_color="#6c757d", text_color=_WHITE)

    def danger(self) -> Button:
        return replace(self, bg_color="#dc3545", text_color=_WHITE)

    def success(self) -> Button:
        return replace(self, bg_color="#28a745", text_color=_WHITE)

    def is_hit(self, position: Position, button_pos: Position) -> bool:
        """Whether a point lies on the button placed at button_pos (edges included)."""
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        return (
            button_pos.x - half_w <= position.x <= button_pos.x + half_w
            and button_pos.y - half_h <= position.y <= button_pos.y + half_h
        )


@dataclass
class TextElement:
    """A text label."""

    content: str
    font: str
    size: float
    color: str


@dataclass
class IconElement:
    """A named icon."""

    name: str
    size: float
    color: str


UIElement = Union[Button, TextElement, IconElement]