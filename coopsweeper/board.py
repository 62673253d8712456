"""The minesweeper board: cell contents, what is open and what is flagged."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from coopsweeper.models import CellValue

logger = logging.getLogger(__name__)

_ZERO = CellValue.empty(0)
_ADJACENT_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def _as_int(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _as_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _parse_index(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        return int(digits)
    return None


class Board:
    """A rectangular minesweeper board stored row by row."""

    def __init__(self, width: int, height: int, mine_count: int, cell_size: float) -> None:
        self.width = width
        self.height = height
        self.mine_count = mine_count
        self.cell_size = cell_size
        self.initialize()

    def initialize(self) -> None:
        """Clear every cell and reset the game flags."""
        size = self.width * self.height
        self.cells: list[CellValue] = [_ZERO] * size
        self.revealed: list[bool] = [False] * size
        self.flagged: list[bool] = [False] * size
        self.game_started = False
        self.game_over = False
        self.win = False

    @staticmethod
    def _check_index(index: int, *sequences: Sequence[Any]) -> None:
        limit = min(len(seq) for seq in sequences)
        if not 0 <= index < limit:
            raise IndexError(f"cell index {index} out of range")

    def reveal_cell(self, index: int) -> None:
        """Open a cell, flooding outwards from cells with no adjacent mines."""
        self._check_index(index, self.revealed, self.flagged, self.cells)
        if self.revealed[index] or self.flagged[index] or self.game_over:
            return

        self.revealed[index] = True

        if self.cells[index].is_mine:
            self.game_over = True
            self.win = False
            for i, cell in enumerate(self.cells):
                if cell.is_mine:
                    self.revealed[i] = True
            return

        if self.cells[index] == _ZERO:
            self._reveal_adjacent_cells(index)

        self.check_win()

    def _reveal_adjacent_cells(self, index: int) -> None:
        pending = [index]
        while pending:
            row, col = divmod(pending.pop(), self.width)
            for dr, dc in _ADJACENT_OFFSETS:
                r, c = row + dr, col + dc
                if not (0 <= r < self.height and 0 <= c < self.width):
                    continue
                neighbour = r * self.width + c
                if self.revealed[neighbour] or self.flagged[neighbour]:
                    continue
                self.revealed[neighbour] = True
                if self.cells[neighbour] == _ZERO:
                    pending.append(neighbour)

    def toggle_flag(self, index: int) -> None:
        """Flip the flag on a closed cell while the game is running."""
        self._check_index(index, self.revealed, self.flagged)
        if self.revealed[index] or self.game_over:
            return
        self.flagged[index] = not self.flagged[index]

    def check_win(self) -> None:
        """End the game as won once every non-mine cell is open."""
        non_mine_cells = self.width * self.height - self.mine_count
        if sum(self.revealed) != non_mine_cells:
            return
        self.game_over = True
        self.win = True
        for i, cell in enumerate(self.cells):
            if cell.is_mine:
                self.flagged[i] = True
        logger.info("win condition reached")

    def get_cell_index(
        self, x: float, y: float, canvas_width: float, canvas_height: float
    ) -> int | None:
        """Map a point on a canvas with the board centred on it to a cell index."""
        board_w = self.cell_size * self.width
        board_h = self.cell_size * self.height
        left = (canvas_width - board_w) / 2.0
        top = (canvas_height - board_h) / 2.0

        if x < left or x >= left + board_w or y < top or y >= top + board_h:
            return None

        cell_x = int((x - left) / self.cell_size)
        cell_y = int((y - top) / self.cell_size)
        return cell_y * self.width + cell_x

    def update_from_server(self, game_data: Mapping[str, Any]) -> None:
        """Replace the board's state with a snapshot sent by the server."""
        width = _as_int(game_data.get("boardWidth"))
        if width is not None:
            self.width = width
        height = _as_int(game_data.get("boardHeight"))
        if height is not None:
            self.height = height
        mines = _as_int(game_data.get("mineCount"))
        if mines is not None:
            self.mine_count = mines

        size = self.width * self.height
        self.cells = [_ZERO] * size

        revealed = game_data.get("revealed")
        if isinstance(revealed, list):
            self.revealed = [_as_bool(v) or False for v in revealed]
        else:
            self.revealed = [False] * size

        flagged = game_data.get("flagged")
        if isinstance(flagged, list):
            self.flagged = [_as_bool(v) or False for v in flagged]
        else:
            self.flagged = [False] * size

        started = _as_bool(game_data.get("gameStarted"))
        if started is not None:
            self.game_started = started
        over = _as_bool(game_data.get("gameOver"))
        if over is not None:
            self.game_over = over
        win = _as_bool(game_data.get("win"))
        if win is not None:
            self.win = win

        cell_values = game_data.get("cellValues")
        if not isinstance(cell_values, Mapping):
            return
        logger.debug("received %d cell values", len(cell_values))
        for key, raw in cell_values.items():
            index = _parse_index(key)
            value = _as_int(raw)
            if index is None or index >= len(self.cells) or value is None:
                continue
            self.cells[index] = CellValue.from_wire(value)
            logger.debug("cell %d set to %d", index, value)