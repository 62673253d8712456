"""Entities: an identifier with a set of typed components and tags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class EntityId:
    """Unique identifier of an entity."""

    value: int

    def __str__(self) -> str:
        return f"Entity({self.value})"


class Entity:
    """An identifier holding at most one component per type, plus tags."""

    def __init__(self, entity_id: EntityId) -> None:
        self.id = entity_id
        self._components: dict[type, Any] = {}
        self._tags: list[str] = []

    def __repr__(self) -> str:
        names = [t.__qualname__ for t in self._components]
        return f"Entity(id={self.id!s}, components={names}, tags={self._tags})"

    def add_component(self, component: Any) -> Entity:
        """Attach a component under its own type, replacing any previous one."""
        self._components[type(component)] = component
        return self

    def add_component_as(self, component_type: type, component: Any) -> Entity:
        """Attach a component under an explicitly given type."""
        self._components[component_type] = component
        return self

    def get_component(self, component_type: type[T]) -> T | None:
        component = self._components.get(component_type)
        return component if isinstance(component, component_type) else None

    def remove_component(self, component_type: type[T]) -> T | None:
        component = self._components.pop(component_type, None)
        return component if isinstance(component, component_type) else None

    def has_component(self, component_type: type) -> bool:
        return component_type in self._components

    def add_tag(self, tag: str) -> Entity:
        if tag not in self._tags:
            self._tags.append(tag)
        return self

    def remove_tag(self, tag: str) -> None:
        self._tags = [t for t in self._tags if t != tag]

    def has_tag(self, tag: str) -> bool:
        return tag in self._tags

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._tags)

    def component_types(self) -> list[type]:
        return list(self._components)

    def component_count(self) -> int:
        return len(self._components)