"""UI elements as entities: creation, hit testing and lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from coopsweeper.entity import Entity, EntityId
from coopsweeper.entity_manager import EntityBuilder, EntityManager
from coopsweeper.position import Position
from coopsweeper.ui import Button, IconElement, TextElement, UIElement

UI_TAG = "ui"
BUTTON_TAG = "button"
TEXT_TAG = "text"
ICON_TAG = "icon"


class UIEntityKind(Enum):
    """The kind of UI element an entity holds."""

    BUTTON = "button"
    TEXT = "text"
    ICON = "icon"


@dataclass(frozen=True)
class UIEntity:
    """A handle on a UI entity: its kind and its button id, text or icon name."""

    id: EntityId
    kind: UIEntityKind
    value: str


def create_button(
    builder: EntityBuilder,
    button_id: str,
    label: str,
    x: float,
    y: float,
    width: float,
    height: float,
) -> Entity:
    """Build a button centred on (x, y), tagged with its own id."""
    return (
        builder.with_component(Position(x, y))
        .with_component(Button(button_id, label, width, height))
        .with_tag(UI_TAG)
        .with_tag(BUTTON_TAG)
        .with_tag(button_id)
        .build()
    )


def create_text(
    builder: EntityBuilder, content: str, font: str, size: float, color: str, x: float, y: float
) -> Entity:
    return (
        builder.with_component(Position(x, y))
        .with_component(TextElement(content, font, size, color))
        .with_tag(UI_TAG)
        .with_tag(TEXT_TAG)
        .build()
    )


def create_icon(
    builder: EntityBuilder, name: str, size: float, color: str, x: float, y: float
) -> Entity:
    return (
        builder.with_component(Position(x, y))
        .with_component(IconElement(name, size, color))
        .with_tag(UI_TAG)
        .with_tag(ICON_TAG)
        .build()
    )


def create_ui_entity(builder: EntityBuilder, element: UIElement, x: float, y: float) -> Entity:
    """Build the entity matching the element's kind; TypeError for anything else."""
    if isinstance(element, Button):
        return create_button(
            builder, element.id, element.label, x, y, element.width, element.height
        )
    if isinstance(element, TextElement):
        return create_text(
            builder, element.content, element.font, element.size, element.color, x, y
        )
    if isinstance(element, IconElement):
        return create_icon(builder, element.name, element.size, element.color, x, y)
    raise TypeError(f"not a UI element: {element!r}")


def is_button_hit(manager: EntityManager, entity_id: EntityId, x: float, y: float) -> bool:
    """Whether (x, y) lies on the button held by the entity."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return False
    position = entity.get_component(Position)
    button = entity.get_component(Button)
    if position is None or button is None:
        return False
    return button.is_hit(Position(x, y), position)


def update_text_content(manager: EntityManager, entity_id: EntityId, new_content: str) -> bool:
    """Replace a text element's content; False if the entity holds no text."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return False
    text = entity.get_component(TextElement)
    if text is None:
        return False
    text.content = new_content
    return True


def find_button_by_id(manager: EntityManager, button_id: str) -> EntityId | None:
    for entity_id in manager.entities_with_tag(button_id):
        entity = manager.get_entity(entity_id)
        if entity is not None and entity.has_tag(BUTTON_TAG):
            return entity_id
    return None


def find_clicked_button(
    manager: EntityManager, x: float, y: float
) -> tuple[EntityId, str] | None:
    """The first button under (x, y) as (entity id, button id), or None."""
    candidates = sorted(manager.entities_with_tag(BUTTON_TAG), key=lambda e: e.value)
    for entity_id in candidates:
        if not is_button_hit(manager, entity_id, x, y):
            continue
        entity = manager.get_entity(entity_id)
        button = entity.get_component(Button) if entity is not None else None
        if button is not None:
            return entity_id, button.id
    return None


def hide_ui_element(manager: EntityManager, entity_id: EntityId) -> None:
    """Mark a UI element for removal at the manager's next flush."""
    manager.remove_entity(entity_id)


def get_all_ui_elements_by_type(manager: EntityManager, element_tag: str) -> list[EntityId]:
    """UI entities that also carry the given tag."""
    result = []
    for entity_id in manager.entities_with_tag(UI_TAG):
        entity = manager.get_entity(entity_id)
        if entity is not None and entity.has_tag(element_tag):
            result.append(entity_id)
    return result