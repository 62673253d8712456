from coopsweeper.entity import EntityId
from coopsweeper.id_generator import EntityIdGenerator


def test_entity_id_generator():
    generator = EntityIdGenerator(True)
    id1 = generator.generate()
    id2 = generator.generate()
    assert id1 != id2

    generator.recycle(id1)
    id3 = generator.generate()
    assert id1 == id3

    id4 = generator.generate()
    assert id2 != id4
    assert id3 != id4


def test_first_id_is_one():
    generator = EntityIdGenerator()
    assert generator.max_id() == 0
    assert generator.generate() == EntityId(1)
    assert generator.max_id() == 1


def test_ids_are_unique_without_recycling():
    generator = EntityIdGenerator()
    ids = [generator.generate() for _ in range(20)]
    assert len(set(ids)) == 20
    assert generator.max_id() == 20


def test_recycled_ids_are_reused_last_in_first_out():
    generator = EntityIdGenerator()
    a, b = generator.generate(), generator.generate()
    generator.recycle(a)
    generator.recycle(b)
    assert generator.recycled_count() == 2
    assert generator.generate() == b
    assert generator.generate() == a
    assert generator.recycled_count() == 0


def test_recycling_disabled_ignores_recycle():
    generator = EntityIdGenerator(False)
    first = generator.generate()
    generator.recycle(first)
    assert generator.recycled_count() == 0
    assert generator.generate() != first


def test_set_recycling_off_clears_pool():
    generator = EntityIdGenerator()
    first = generator.generate()
    generator.recycle(first)
    generator.set_recycling(False)
    assert generator.recycled_count() == 0
    assert generator.generate() != first


def test_set_recycling_on_enables_reuse():
    generator = EntityIdGenerator(False)
    generator.set_recycling(True)
    first = generator.generate()
    generator.recycle(first)
    assert generator.generate() == first