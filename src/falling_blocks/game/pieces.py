from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


BOARD_WIDTH = 10
BOARD_HEIGHT = 20


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.flags.writeable = False
    return arr


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
}


def base_shape(kind: TetrominoType) -> Shape:
    return BASE_SHAPES[TetrominoType(kind)]


@dataclass
class Piece:
    kind: TetrominoType
    shape: Shape = field(repr=False)
    x: int = 0
    y: int = 0

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) board coordinates of every occupied cell."""
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((self.x + dx, self.y + dy))
        return cells

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])


def spawn_x(shape: Shape) -> int:
    return BOARD_WIDTH // 2 - shape.shape[1] // 2


def spawn_piece(kind: TetrominoType) -> Piece:
    """Create a piece of `kind` at the top-center spawn position.

    No legality check happens here; callers validate placement against the
    board before committing the piece.
    """
    if kind not in BASE_SHAPES:
        raise KeyError(f"unknown piece type: {kind!r}")
    shape = BASE_SHAPES[kind]
    return Piece(kind=TetrominoType(kind), shape=shape, x=spawn_x(shape), y=0)
