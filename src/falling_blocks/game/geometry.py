from __future__ import annotations

from dataclasses import replace

import numpy as np

from .pieces import BOARD_HEIGHT, BOARD_WIDTH, Piece, Shape


def rotate_shape(shape: Shape) -> Shape:
    # Clockwise: result[i][j] == shape[rows - 1 - j][i]
    rotated = np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))
    rotated.flags.writeable = False
    return rotated


def rotate(piece: Piece) -> Piece:
    """Return a copy of `piece` turned 90 degrees clockwise about its top-left corner.

    The result is not checked against any board.
    """
    return replace(piece, shape=rotate_shape(piece.shape))


def translate(piece: Piece, dx: int, dy: int) -> Piece:
    return replace(piece, x=piece.x + dx, y=piece.y + dy)


def is_valid_position(piece: Piece, board: np.ndarray) -> bool:
    """Check `piece` against the side walls, the floor and the settled cells of `board`.

    Cells above the top row are allowed. They are still bounded by the side walls, and
    the occupancy test skips them.
    """
    for x, y in piece.cells():
        if x < 0 or x >= BOARD_WIDTH or y >= BOARD_HEIGHT:
            return False
        if y >= 0 and board[y, x] != 0:
            return False
    return True
