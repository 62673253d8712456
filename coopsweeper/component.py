"""Base classes for components and for components that react to dependencies."""

from __future__ import annotations

import dataclasses
import json
from abc import ABC, abstractmethod
from typing import Any, TypeVar

from coopsweeper.entity import EntityId

_S = TypeVar("_S", bound="SerializableComponent")

_ENTITY_ATTR = "_component_entity_id"
_READY_ATTR = "_component_ready"
_LIFECYCLE_ATTRS = frozenset({_ENTITY_ATTR, _READY_ATTR})


class Component:
    """Base for component types; the hooks track which entity holds the component."""

    def on_init(self, entity_id: EntityId) -> None:
        """Called when the component is initialised for an entity."""
        object.__setattr__(self, _ENTITY_ATTR, entity_id)
        object.__setattr__(self, _READY_ATTR, False)

    def on_remove(self, entity_id: EntityId) -> None:
        """Called before the component is taken off an entity."""
        if getattr(self, _ENTITY_ATTR, None) == entity_id:
            object.__setattr__(self, _ENTITY_ATTR, None)
            object.__setattr__(self, _READY_ATTR, False)

    def on_added(self, entity_id: EntityId) -> None:
        """Called after the component has been attached to an entity."""
        object.__setattr__(self, _ENTITY_ATTR, entity_id)

    def on_entity_ready(self, entity_id: EntityId, entity_manager: Any) -> None:
        """Called when the component may look at the entity's other components."""
        object.__setattr__(self, _ENTITY_ATTR, entity_id)
        object.__setattr__(self, _READY_ATTR, True)

    @property
    def entity_id(self) -> EntityId | None:
        """The entity this component is attached to, if any."""
        return getattr(self, _ENTITY_ATTR, None)

    @property
    def entity_ready(self) -> bool:
        """Whether the holding entity has signalled that all components are present."""
        return getattr(self, _READY_ATTR, False)

    def type_name(self) -> str:
        """The fully qualified name of the component's type."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def is_serializable(self) -> bool:
        return False

    def dependencies(self) -> list[type]:
        """Component types that must be present on the entity alongside this one."""
        return []


class SerializableComponent(Component):
    """A component that can be written to and read from JSON."""

    def is_serializable(self) -> bool:
        return True

    def _fields(self) -> dict[str, Any]:
        if dataclasses.is_dataclass(self):
            return dataclasses.asdict(self)
        return {k: v for k, v in vars(self).items() if k not in _LIFECYCLE_ATTRS}

    def as_json(self) -> str:
        return json.dumps(self._fields())

    @classmethod
    def from_json(cls: type[_S], text: str) -> _S:
        """Build a component from JSON; raises ValueError on malformed input."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object for {cls.__qualname__}")
        try:
            return cls(**data)
        except TypeError as exc:
            raise ValueError(f"cannot build {cls.__qualname__}: {exc}") from exc


class ComponentDependencyHandler(ABC):
    """Reacts when components it depends on come and go on an entity."""

    @abstractmethod
    def on_dependency_added(self, entity_id: EntityId, dependency_type: type) -> None:
        """Called when a depended-upon component is added to the entity."""

    @abstractmethod
    def on_dependency_removed(self, entity_id: EntityId, dependency_type: type) -> None:
        """Called when a depended-upon component is about to be removed."""