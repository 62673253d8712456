"""Allocation of unique entity identifiers, optionally reusing freed ones."""

from __future__ import annotations

from coopsweeper.entity import EntityId


class EntityIdGenerator:
    """Hands out entity ids starting at 1; 0 is reserved as invalid."""

    def __init__(self, use_recycled: bool = True) -> None:
        self._next_id = 1
        self._recycled: list[EntityId] = []
        self._use_recycled = use_recycled

    def generate(self) -> EntityId:
        """Return the most recently recycled id if reuse is on, else a fresh one."""
        if self._use_recycled and self._recycled:
            return self._recycled.pop()
        entity_id = EntityId(self._next_id)
        self._next_id += 1
        return entity_id

    def recycle(self, entity_id: EntityId) -> None:
        if self._use_recycled:
            self._recycled.append(entity_id)

    def recycled_count(self) -> int:
        return len(self._recycled)

    def max_id(self) -> int:
        """The largest id value handed out so far (0 if none)."""
        return self._next_id - 1

    def set_recycling(self, use_recycled: bool) -> None:
        """Turn id reuse on or off; turning it off forgets recycled ids."""
        self._use_recycled = use_recycled
        if not use_recycled:
            self._recycled.clear()