"""Value types shared by the board and the client-side game state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MINE_WIRE_VALUE = -1
_MAX_COUNT = 0xFF


@dataclass(frozen=True)
class CellValue:
    """Content of a board cell: a mine, or the number of adjacent mines."""

    is_mine: bool = False
    count: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.count <= _MAX_COUNT:
            raise ValueError(f"adjacent mine count out of range: {self.count}")
        if self.is_mine and self.count:
            raise ValueError("a mine cell carries no adjacent count")

    @classmethod
    def mine(cls) -> CellValue:
        return cls(is_mine=True)

    @classmethod
    def empty(cls, count: int = 0) -> CellValue:
        return cls(count=count)

    @classmethod
    def from_wire(cls, value: int) -> CellValue:
        """Decode a server value: -1 is a mine, anything else a count byte."""
        if value == MINE_WIRE_VALUE:
            return cls.mine()
        return cls.empty(value & _MAX_COUNT)


class Screen(Enum):
    """Which screen the client is showing."""

    TITLE = "title"
    GAME = "game"


@dataclass
class Player:
    """A participant in a shared game, with the position of their cursor."""

    id: str
    name: str
    x: float
    y: float
    color: str
    score: int = 0
    is_local: bool = False
    is_host: bool = False
    is_alive: bool = True
    cells_revealed: int = 0