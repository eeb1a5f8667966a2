from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .geometry import is_valid_position
from .pieces import BOARD_HEIGHT, BOARD_WIDTH, Piece


logger = logging.getLogger(__name__)

EMPTY = 0


class GameGrid:
    """The settled-cell board: 20 rows by 10 columns, row 0 at the top.

    Cells hold 0 when empty or the `TetrominoType` value of the piece that
    locked there.
    """

    def __init__(self) -> None:
        self.width = BOARD_WIDTH
        self.height = BOARD_HEIGHT
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def can_place(self, piece: Piece) -> bool:
        return is_valid_position(piece, self.grid)

    def place(self, piece: Piece) -> None:
        """Write the piece's cells into the board with its type tag.

        Cells still above the top row are dropped.
        """
        value = int(piece.kind)
        for x, y in piece.cells():
            if y < 0:
                continue
            self.grid[y, x] = value

    def full_rows(self) -> np.ndarray:
        return np.where(np.all(self.grid != EMPTY, axis=1))[0]

    def clear_lines(self) -> int:
        """Remove every completed row and pad the top with empty rows.

        Rows are compacted in place from the bottom up; the surviving rows
        keep their relative order.
        """
        write = self.height - 1
        for read in range(self.height - 1, -1, -1):
            if np.all(self.grid[read] != EMPTY):
                continue
            if write != read:
                self.grid[write] = self.grid[read]
            write -= 1
        cleared = write + 1
        if cleared:
            self.grid[:cleared] = EMPTY
            logger.debug("Cleared %d row(s)", cleared)
        return cleared

    def overlay(self, piece: Optional[Piece]) -> np.ndarray:
        """Copy of the board with `piece` drawn on top; the stored board is untouched."""
        state = self.grid.copy()
        if piece is not None:
            value = int(piece.kind)
            for x, y in piece.cells():
                if self.is_inside(x, y):
                    state[y, x] = value
        return state

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
