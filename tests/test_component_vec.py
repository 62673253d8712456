from coopsweeper.component_vec import ComponentVec
from coopsweeper.entity import EntityId


def test_empty():
    store = ComponentVec()
    assert len(store) == 0
    assert list(store.items()) == []
    assert store.get(EntityId(1)) is None


def test_insert_and_get():
    store = ComponentVec()
    store.insert(EntityId(1), "a")
    store.insert(EntityId(2), "b")
    assert store.get(EntityId(1)) == "a"
    assert store.get(EntityId(2)) == "b"
    assert len(store) == 2
    assert EntityId(1) in store


def test_insert_replaces_existing():
    store = ComponentVec()
    store.insert(EntityId(1), "a")
    store.insert(EntityId(1), "z")
    assert store.get(EntityId(1)) == "z"
    assert len(store) == 1


def test_remove_returns_component():
    store = ComponentVec()
    store.insert(EntityId(1), "a")
    assert store.remove(EntityId(1)) == "a"
    assert store.get(EntityId(1)) is None
    assert EntityId(1) not in store
    assert len(store) == 0


def test_remove_missing_is_none():
    assert ComponentVec().remove(EntityId(9)) is None


def test_items_lists_live_components():
    store = ComponentVec()
    for n in range(1, 5):
        store.insert(EntityId(n), n * 10)
    store.remove(EntityId(2))
    assert dict(store.items()) == {EntityId(1): 10, EntityId(3): 30, EntityId(4): 40}
    assert dict(store) == dict(store.items())


def test_components_are_shared_references():
    store = ComponentVec()
    values = []
    store.insert(EntityId(1), values)
    store.get(EntityId(1)).append(5)
    assert values == [5]


def test_optimize_keeps_contents():
    store = ComponentVec()
    for n in range(1, 6):
        store.insert(EntityId(n), str(n))
    store.remove(EntityId(1))
    store.remove(EntityId(3))
    before = dict(store.items())
    store.optimize()
    assert dict(store.items()) == before
    assert len(store) == 3


def test_insert_after_optimize():
    store = ComponentVec()
    store.insert(EntityId(1), "a")
    store.insert(EntityId(2), "b")
    store.remove(EntityId(1))
    store.optimize()
    store.insert(EntityId(3), "c")
    store.insert(EntityId(2), "bb")
    assert dict(store.items()) == {EntityId(2): "bb", EntityId(3): "c"}