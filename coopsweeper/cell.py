"""Cell components: what a cell holds and whether it is open or flagged."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_COUNT = 0xFF


@dataclass(frozen=True)
class CellContent:
    """A mine, or an empty cell with the number of adjacent mines."""

    is_mine: bool = False
    adjacent_mines: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.adjacent_mines <= _MAX_COUNT:
            raise ValueError(f"adjacent mine count out of range: {self.adjacent_mines}")
        if self.is_mine and self.adjacent_mines:
            raise ValueError("a mine cell carries no adjacent count")

    @classmethod
    def mine(cls) -> CellContent:
        return cls(is_mine=True)

    @classmethod
    def empty(cls, adjacent_mines: int = 0) -> CellContent:
        return cls(adjacent_mines=adjacent_mines)


@dataclass
class CellState:
    """Whether a cell has been opened or flagged."""

    is_revealed: bool = False
    is_flagged: bool = False

    @classmethod
    def revealed_state(cls) -> CellState:
        return cls(is_revealed=True)

    @classmethod
    def flagged_state(cls) -> CellState:
        return cls(is_flagged=True)