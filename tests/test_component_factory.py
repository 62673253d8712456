from dataclasses import dataclass

import pytest

from coopsweeper.component import Component
from coopsweeper.component_factory import ComponentFactory


@dataclass
class Velocity(Component):
    dx: float = 0.0
    dy: float = 0.0


@dataclass
class Tag(Component):
    label: str = "none"


def test_unregistered_type():
    factory = ComponentFactory()
    assert factory.is_registered(Velocity) is False
    assert factory.registered_type_names() == []


def test_register_and_create_default():
    factory = ComponentFactory()
    factory.register(Velocity)
    assert factory.is_registered(Velocity)
    assert factory.create_default(Velocity) == Velocity()


def test_create_default_gives_fresh_instances():
    factory = ComponentFactory()
    factory.register(Velocity)
    first = factory.create_default(Velocity)
    second = factory.create_default(Velocity)
    assert first == second
    assert first is not second


def test_create_default_unregistered_raises():
    factory = ComponentFactory()
    with pytest.raises(KeyError):
        factory.create_default(Tag)


def test_create_by_name_round_trip():
    factory = ComponentFactory()
    factory.register(Velocity)
    factory.register(Tag)
    names = factory.registered_type_names()
    assert len(names) == 2
    for name in names:
        component_type = factory.get_type(name)
        assert isinstance(factory.create_by_name(name), component_type)


def test_registered_name_matches_component_type_name():
    factory = ComponentFactory()
    factory.register(Tag)
    assert factory.registered_type_names() == [Tag().type_name()]
    assert factory.get_type(Tag().type_name()) is Tag


def test_create_by_unknown_name_raises():
    factory = ComponentFactory()
    with pytest.raises(KeyError):
        factory.create_by_name("missing.Component")


def test_get_type_unknown_is_none():
    assert ComponentFactory().get_type("missing.Component") is None


def test_repr_lists_registered_types():
    factory = ComponentFactory()
    factory.register(Tag)
    assert Tag().type_name() in repr(factory)