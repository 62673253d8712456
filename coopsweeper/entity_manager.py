"""Creation, lookup, tagging, hierarchy and removal of entities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from coopsweeper.component import Component
from coopsweeper.component_factory import ComponentFactory
from coopsweeper.entity import Entity, EntityId
from coopsweeper.id_generator import EntityIdGenerator


class EntityBuilder:
    """Assembles an entity's components and tags before it is registered."""

    def __init__(self, entity_id: EntityId) -> None:
        self._entity = Entity(entity_id)

    @property
    def id(self) -> EntityId:
        return self._entity.id

    def with_component(self, component: Any) -> EntityBuilder:
        self._entity.add_component(component)
        return self

    def with_tag(self, tag: str) -> EntityBuilder:
        self._entity.add_tag(tag)
        return self

    def build(self) -> Entity:
        return self._entity


@dataclass
class Hierarchy:
    """Parent and children of an entity."""

    parent: EntityId | None = None
    children: list[EntityId] = field(default_factory=list)

    def add_child(self, child_id: EntityId) -> None:
        if child_id not in self.children:
            self.children.append(child_id)

    def remove_child(self, child_id: EntityId) -> None:
        self.children = [c for c in self.children if c != child_id]


class EntityManager:
    """Owns every entity in the game, with tag and component-type indices.

    Removal is deferred: entities marked for removal stay until
    flush_removals() is called.
    """

    def __init__(self) -> None:
        self._entities: dict[EntityId, Entity] = {}
        self._id_generator = EntityIdGenerator()
        self._pending_removal: set[EntityId] = set()
        self._tags_to_entities: dict[str, set[EntityId]] = {}
        self._component_indices: dict[type, set[EntityId]] = {}
        self.component_factory: ComponentFactory | None = ComponentFactory()

    def __repr__(self) -> str:
        return (
            f"EntityManager(entities={len(self._entities)}, "
            f"pending_removal={len(self._pending_removal)})"
        )

    def create_entity(self) -> EntityId:
        """Create an empty entity and return its id."""
        entity_id = self._id_generator.generate()
        self._entities[entity_id] = Entity(entity_id)
        return entity_id

    def create_entities(self, count: int) -> list[EntityId]:
        return [self.create_entity() for _ in range(count)]

    def create_builder(self) -> EntityBuilder:
        """Reserve an id and return a builder; register the built entity afterwards."""
        return EntityBuilder(self._id_generator.generate())

    def register_entity(self, entity: Entity) -> EntityId:
        """Store an entity, indexing its tags and component types."""
        entity_id = entity.id
        for tag in entity.tags:
            self._tags_to_entities.setdefault(tag, set()).add(entity_id)
        for component_type in entity.component_types():
            self._component_indices.setdefault(component_type, set()).add(entity_id)
        self._entities[entity_id] = entity
        return entity_id

    def remove_entity(self, entity_id: EntityId) -> None:
        """Mark an entity for removal at the next flush."""
        self._pending_removal.add(entity_id)

    def remove_entities(self, entity_ids: Iterable[EntityId]) -> None:
        self._pending_removal.update(entity_ids)

    def remove_entity_immediate(self, entity_id: EntityId) -> Entity | None:
        """Remove an entity now, recycling its id; None if it does not exist."""
        entity = self._entities.pop(entity_id, None)
        if entity is None:
            return None
        for tag in entity.tags:
            tagged = self._tags_to_entities.get(tag)
            if tagged is not None:
                tagged.discard(entity_id)
                if not tagged:
                    del self._tags_to_entities[tag]
        for indexed in self._component_indices.values():
            indexed.discard(entity_id)
        self._id_generator.recycle(entity_id)
        return entity

    def get_entity(self, entity_id: EntityId) -> Entity | None:
        return self._entities.get(entity_id)

    def all_entities(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def all_entity_ids(self) -> Iterator[EntityId]:
        return iter(list(self._entities))

    def entities_with_component(self, component_type: type) -> list[EntityId]:
        """Ids of entities holding a component type, using the index if one exists."""
        indexed = self._component_indices.get(component_type)
        if indexed is not None:
            return list(indexed)
        return [
            entity_id
            for entity_id, entity in self._entities.items()
            if entity.has_component(component_type)
        ]

    def build_component_index(self, component_type: type) -> set[EntityId]:
        """Rebuild the index for a component type by scanning every entity."""
        ids = {
            entity_id
            for entity_id, entity in self._entities.items()
            if entity.has_component(component_type)
        }
        self._component_indices[component_type] = ids
        return set(ids)

    def entities_with_tag(self, tag: str) -> list[EntityId]:
        return list(self._tags_to_entities.get(tag, ()))

    def query_with_component_and_tag(self, component_type: type, tag: str) -> list[EntityId]:
        """Ids of entities that carry the tag and hold the component type."""
        tagged = self._tags_to_entities.get(tag)
        if tagged is None:
            return []
        return [
            entity_id
            for entity_id, entity in self._entities.items()
            if entity_id in tagged and entity.has_component(component_type)
        ]

    @staticmethod
    def _hierarchy_of(entity: Entity) -> Hierarchy:
        hierarchy = entity.get_component(Hierarchy)
        if hierarchy is None:
            hierarchy = Hierarchy()
            entity.add_component(hierarchy)
        return hierarchy

    def set_parent(self, child: EntityId, parent: EntityId) -> None:
        """Make one entity the child of another; KeyError if either is missing."""
        child_entity = self._entities.get(child)
        parent_entity = self._entities.get(parent)
        if child_entity is None or parent_entity is None:
            raise KeyError("entity does not exist")

        child_hierarchy = self._hierarchy_of(child_entity)
        old_parent = child_hierarchy.parent
        child_hierarchy.parent = parent

        if old_parent is not None:
            old_parent_entity = self._entities.get(old_parent)
            if old_parent_entity is not None:
                old_hierarchy = old_parent_entity.get_component(Hierarchy)
                if old_hierarchy is not None:
                    old_hierarchy.remove_child(child)

        self._hierarchy_of(parent_entity).add_child(child)

    def remove_entity_recursive(self, entity_id: EntityId) -> None:
        """Mark an entity and all its descendants for removal."""
        stack = [entity_id]
        seen: set[EntityId] = set()
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            entity = self._entities.get(current)
            if entity is not None:
                hierarchy = entity.get_component(Hierarchy)
                if hierarchy is not None:
                    stack.extend(hierarchy.children)
            self.remove_entity(current)

    def flush_removals(self) -> None:
        """Remove every entity marked for removal."""
        for entity_id in list(self._pending_removal):
            self.remove_entity_immediate(entity_id)
        self._pending_removal.clear()

    def entity_count(self) -> int:
        return len(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def clear(self) -> None:
        """Drop every entity; the id generator keeps counting so ids stay unique."""
        self._entities.clear()
        self._pending_removal.clear()
        self._tags_to_entities.clear()
        self._component_indices.clear()

    def add_component(self, entity_id: EntityId, component: Any) -> None:
        """Attach a component, first creating any missing dependencies from the factory.

        Raises KeyError if the entity does not exist or a dependency is not
        registered, and RuntimeError if dependencies are missing and no
        factory is set.
        """
        entity = self._entities.get(entity_id)
        if entity is None:
            raise KeyError(f"entity does not exist: {entity_id}")

        is_component = isinstance(component, Component)
        if is_component:
            component.on_init(entity_id)
            dependencies = component.dependencies()
        else:
            dependencies = []

        missing = [dep for dep in dependencies if not entity.has_component(dep)]
        if missing:
            factory = self.component_factory
            if factory is None:
                raise RuntimeError("no component factory is set")
            for dep in missing:
                if not factory.is_registered(dep):
                    raise KeyError(f"dependency not registered with the factory: {dep!r}")
                entity.add_component_as(dep, factory.create_default(dep))

        entity.add_component(component)
        self._component_indices.setdefault(type(component), set()).add(entity_id)

        if is_component:
            component.on_added(entity_id)