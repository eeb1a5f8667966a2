from __future__ import annotations

import itertools
from typing import Iterable

import pytest

from falling_blocks.game import FallingBlocksGame, TetrominoType


class ScriptedSource:
    """Piece source that replays a fixed sequence forever."""

    def __init__(self, kinds: Iterable[TetrominoType]) -> None:
        self._it = itertools.cycle(list(kinds))

    def next_type(self) -> TetrominoType:
        return next(self._it)


def make_game(*kinds: TetrominoType) -> FallingBlocksGame:
    return FallingBlocksGame(piece_source=ScriptedSource(kinds))


@pytest.fixture
def o_game() -> FallingBlocksGame:
    game = make_game(TetrominoType.O)
    game.start()
    return game


@pytest.fixture
def i_game() -> FallingBlocksGame:
    game = make_game(TetrominoType.I)
    game.start()
    return game
