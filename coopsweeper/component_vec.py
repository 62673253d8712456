"""Dense storage for components of one type, keyed by entity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from coopsweeper.entity import EntityId

T = TypeVar("T")


class ComponentVec(Generic[T]):
    """Components of a single type stored in a list with an entity-to-slot map."""

    def __init__(self) -> None:
        self._components: list[T | None] = []
        self._indices: dict[EntityId, int] = {}

    def insert(self, entity_id: EntityId, component: T) -> None:
        """Store a component, replacing the entity's existing one in place."""
        index = self._indices.get(entity_id)
        if index is not None:
            self._components[index] = component
        else:
            self._indices[entity_id] = len(self._components)
            self._components.append(component)

    def remove(self, entity_id: EntityId) -> T | None:
        """Take the entity's component out, leaving its slot empty."""
        index = self._indices.pop(entity_id, None)
        if index is None:
            return None
        component = self._components[index]
        self._components[index] = None
        return component

    def get(self, entity_id: EntityId) -> T | None:
        index = self._indices.get(entity_id)
        if index is None:
            return None
        return self._components[index]

    def items(self) -> Iterator[tuple[EntityId, T]]:
        """Yield every (entity id, component) pair."""
        for entity_id, index in self._indices.items():
            component = self._components[index]
            if component is not None:
                yield entity_id, component

    def __iter__(self) -> Iterator[tuple[EntityId, T]]:
        return self.items()

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._indices

    def __len__(self) -> int:
        return len(self._indices)

    def optimize(self) -> None:
        """Drop empty slots left behind by removals."""
        components: list[T | None] = []
        indices: dict[EntityId, int] = {}
        for entity_id, index in self._indices.items():
            component = self._components[index]
            if component is not None:
                indices[entity_id] = len(components)
                components.append(component)
        self._components = components
        self._indices = indices