from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Protocol

import numpy as np

from .geometry import rotate as rotate_piece, translate
from .grid import GameGrid
from .pieces import Piece, Shape, TetrominoType, base_shape, spawn_piece
from .rules import ScoringRules


logger = logging.getLogger(__name__)

LevelListener = Callable[[int], None]


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class PieceSource(Protocol):
    def next_type(self) -> TetrominoType:
        ...


class RandomPieceSource:
    """Uniform, independent draws over the seven types; repeats are allowed."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def next_type(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


@dataclass(frozen=True)
class GameSnapshot:
    state: GameState
    score: int
    level: int
    lines_cleared: int
    next_piece: Optional[TetrominoType]
    gravity_interval_ms: int

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def over(self) -> bool:
        return self.state is GameState.OVER


class FallingBlocksGame:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        piece_source: Optional[PieceSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.piece_source: PieceSource = piece_source or RandomPieceSource(self.config.random_seed)
        self.grid = GameGrid()
        self.state = GameState.IDLE
        self.score = 0
        self.lines_cleared_total = 0
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[TetrominoType] = None
        self._level_listeners: List[LevelListener] = []

    # -- observables -------------------------------------------------

    @property
    def level(self) -> int:
        return self.rules.level_for_lines(self.lines_cleared_total)

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is GameState.OVER

    @property
    def gravity_interval_ms(self) -> int:
        return self.rules.gravity_interval(self.level)

    def add_level_listener(self, callback: LevelListener) -> None:
        self._level_listeners.append(callback)

    def remove_level_listener(self, callback: LevelListener) -> None:
        if callback in self._level_listeners:
            self._level_listeners.remove(callback)

    def _notify_level(self) -> None:
        level = self.level
        for callback in list(self._level_listeners):
            callback(level)

    def get_state(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.state,
            score=self.score,
            level=self.level,
            lines_cleared=self.lines_cleared_total,
            next_piece=self.next_piece,
            gravity_interval_ms=self.gravity_interval_ms,
        )

    def get_display_board(self) -> np.ndarray:
        return self.grid.overlay(self.current_piece)

    def next_piece_shape(self) -> Optional[Shape]:
        if self.next_piece is None:
            return None
        return base_shape(self.next_piece)

    # -- lifecycle ---------------------------------------------------

    def start(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.current_piece = spawn_piece(self.piece_source.next_type())
        self.next_piece = self.piece_source.next_type()
        self.state = GameState.RUNNING
        logger.info("New game started (current=%s, next=%s)", self.current_piece.kind.name, self.next_piece.name)
        self._notify_level()

    def pause(self) -> None:
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
            logger.debug("Paused")

    def resume(self) -> None:
        if self.state is GameState.PAUSED:
            self.state = GameState.RUNNING
            logger.debug("Resumed")

    def toggle_pause(self) -> None:
        if self.state is GameState.RUNNING:
            self.pause()
        elif self.state is GameState.PAUSED:
            self.resume()

    # -- movement ----------------------------------------------------

    def tick(self, dx: int, dy: int) -> None:
        """Try to shift the current piece by (dx, dy).

        A blocked downward move locks the piece; any other blocked move is
        ignored.
        """
        if self.state is not GameState.RUNNING or self.current_piece is None:
            return
        candidate = translate(self.current_piece, dx, dy)
        if self.grid.can_place(candidate):
            self.current_piece = candidate
        elif dy > 0:
            self._lock_piece()

    def move_left(self) -> None:
        self.tick(-1, 0)

    def move_right(self) -> None:
        self.tick(1, 0)

    def soft_drop(self) -> None:
        self.tick(0, 1)

    def rotate(self) -> None:
        if self.state is not GameState.RUNNING or self.current_piece is None:
            return
        rotated = rotate_piece(self.current_piece)
        if self.grid.can_place(rotated):
            self.current_piece = rotated

    # -- locking -----------------------------------------------------

    def _lock_piece(self) -> None:
        piece = self.current_piece
        assert piece is not None
        level_before = self.level
        self.grid.place(piece)
        lines = self.grid.clear_lines()
        self.score += self.rules.score_for_lines(lines, level_before)
        self.lines_cleared_total += lines
        logger.debug("Locked %s at (%d, %d)", piece.kind.name, piece.x, piece.y)
        if lines:
            logger.info("Cleared %d line(s); score=%d total=%d", lines, self.score, self.lines_cleared_total)
        if self.level != level_before:
            logger.info("Level up: %d -> %d", level_before, self.level)
            self._notify_level()
        self._spawn_next()

    def _spawn_next(self) -> None:
        if self.next_piece is None:
            return
        spawned = spawn_piece(self.next_piece)
        if not self.grid.can_place(spawned):
            self.current_piece = None
            self.state = GameState.OVER
            logger.info("Game over: score=%d lines=%d level=%d", self.score, self.lines_cleared_total, self.level)
            return
        self.current_piece = spawned
        self.next_piece = self.piece_source.next_type()
