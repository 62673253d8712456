"""Registry that builds default component instances by type or by name."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def _qualified_name(component_type: type) -> str:
    return f"{component_type.__module__}.{component_type.__qualname__}"


class ComponentFactory:
    """Creates default instances of registered component types."""

    def __init__(self) -> None:
        self._creators: dict[type, Callable[[], Any]] = {}
        self._type_names: dict[str, type] = {}

    def __repr__(self) -> str:
        return f"ComponentFactory(registered_types={list(self._type_names)!r})"

    def register(self, component_type: type) -> None:
        """Register a type whose no-argument constructor gives its default value."""
        self._creators[component_type] = component_type
        self._type_names[_qualified_name(component_type)] = component_type

    def create_default(self, component_type: type) -> Any:
        """Build a default instance; raises KeyError if the type is not registered."""
        try:
            creator = self._creators[component_type]
        except KeyError:
            raise KeyError(f"component type not registered: {component_type!r}") from None
        return creator()

    def create_by_name(self, name: str) -> Any:
        """Build a default instance from a qualified type name; KeyError if unknown."""
        try:
            component_type = self._type_names[name]
        except KeyError:
            raise KeyError(f"component name not registered: {name}") from None
        return self.create_default(component_type)

    def registered_type_names(self) -> list[str]:
        return list(self._type_names)

    def is_registered(self, component_type: type) -> bool:
        return component_type in self._creators

    def get_type(self, name: str) -> type | None:
        return self._type_names.get(name)