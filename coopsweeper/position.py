"""Position component for cells, players and UI elements."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Position:
    """A point; for cells x is the column and y the row."""

    x: float
    y: float

    @classmethod
    def cell(cls, row: int, col: int) -> Position:
        return cls(float(col), float(row))

    def distance(self, other: Position) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)