"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- TetrominoType, Piece, spawn_piece: shape catalog and piece factory
- rotate, is_valid_position: geometry engine
- GameGrid: board placement and line clearing
- ScoringRules: score, level and gravity cadence
- FallingBlocksGame: state machine driving a single session
"""

from .pieces import BASE_SHAPES, BOARD_HEIGHT, BOARD_WIDTH, Piece, TetrominoType, base_shape, spawn_piece
from .geometry import is_valid_position, rotate, rotate_shape, translate
from .grid import GameGrid
from .rules import ScoringRules
from .core import (
    FallingBlocksGame,
    GameConfig,
    GameSnapshot,
    GameState,
    PieceSource,
    RandomPieceSource,
)

__all__ = [
    "BASE_SHAPES",
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "Piece",
    "TetrominoType",
    "base_shape",
    "spawn_piece",
    "is_valid_position",
    "rotate",
    "rotate_shape",
    "translate",
    "GameGrid",
    "ScoringRules",
    "FallingBlocksGame",
    "GameConfig",
    "GameSnapshot",
    "GameState",
    "PieceSource",
    "RandomPieceSource",
]
