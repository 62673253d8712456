"""Board cells as entities, and the operations a game performs on them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from coopsweeper.cell import CellContent, CellState
from coopsweeper.entity import Entity, EntityId
from coopsweeper.entity_manager import EntityBuilder, EntityManager
from coopsweeper.position import Position

CELL_TAG = "cell"
MINE_TAG = "mine"
EMPTY_TAG = "empty"


@dataclass(frozen=True)
class CellEntity:
    """A handle on a cell entity together with what the cell holds."""

    id: EntityId
    content: CellContent

    @classmethod
    def mine(cls, entity_id: EntityId) -> CellEntity:
        return cls(entity_id, CellContent.mine())

    @classmethod
    def empty(cls, entity_id: EntityId, adjacent_mines: int) -> CellEntity:
        return cls(entity_id, CellContent.empty(adjacent_mines))

    def is_mine(self) -> bool:
        return self.content.is_mine

    def adjacent_mines(self) -> int:
        """Number of adjacent mines; 0 for a mine cell."""
        return 0 if self.content.is_mine else self.content.adjacent_mines


def _build_cell(
    builder: EntityBuilder, row: int, col: int, content: CellContent, kind_tag: str
) -> Entity:
    return (
        builder.with_component(Position.cell(row, col))
        .with_component(content)
        .with_component(CellState())
        .with_tag(CELL_TAG)
        .with_tag(kind_tag)
        .build()
    )


def create_mine_cell(builder: EntityBuilder, row: int, col: int) -> Entity:
    """Build a closed mine cell at a grid position."""
    return _build_cell(builder, row, col, CellContent.mine(), MINE_TAG)


def create_empty_cell(
    builder: EntityBuilder, row: int, col: int, adjacent_mines: int
) -> Entity:
    """Build a closed empty cell carrying its adjacent mine count."""
    return _build_cell(builder, row, col, CellContent.empty(adjacent_mines), EMPTY_TAG)


def create_cell_entity(
    builder: EntityBuilder, row: int, col: int, content: CellContent
) -> Entity:
    """Build a mine or empty cell according to its content."""
    if content.is_mine:
        return create_mine_cell(builder, row, col)
    return create_empty_cell(builder, row, col, content.adjacent_mines)


def reveal_cell(manager: EntityManager, entity_id: EntityId) -> bool:
    """Open a closed, unflagged cell; return True if it was a mine."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return False
    state = entity.get_component(CellState)
    if state is None or state.is_revealed or state.is_flagged:
        return False
    state.is_revealed = True
    content = entity.get_component(CellContent)
    return content is not None and content.is_mine


def toggle_flag(manager: EntityManager, entity_id: EntityId) -> bool:
    """Flip the flag on a closed cell; return whether anything changed."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return False
    state = entity.get_component(CellState)
    if state is None or state.is_revealed:
        return False
    state.is_flagged = not state.is_flagged
    return True


def get_cell_content(manager: EntityManager, entity_id: EntityId) -> CellContent | None:
    entity = manager.get_entity(entity_id)
    if entity is None:
        return None
    return entity.get_component(CellContent)


def get_cell_state(manager: EntityManager, entity_id: EntityId) -> CellState | None:
    """A copy of the cell's state, or None if there is none."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return None
    state = entity.get_component(CellState)
    return dataclasses.replace(state) if state is not None else None


def get_cell_position(manager: EntityManager, entity_id: EntityId) -> tuple[int, int] | None:
    """The cell's (row, col), or None if it has no position."""
    entity = manager.get_entity(entity_id)
    if entity is None:
        return None
    position = entity.get_component(Position)
    if position is None:
        return None
    return max(0, int(position.y)), max(0, int(position.x))