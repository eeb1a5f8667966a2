from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from falling_blocks.game import BOARD_HEIGHT, BOARD_WIDTH, FallingBlocksGame, RandomPieceSource, TetrominoType
from falling_blocks.game.core import PieceSource


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    SOFT_DROP = 3
    ROTATE = 4


_PALETTE = np.array(
    [
        (20, 20, 26),   # empty
        (0, 240, 240),  # I
        (240, 240, 0),  # O
        (160, 0, 240),  # T
        (0, 240, 0),    # S
        (240, 0, 0),    # Z
        (0, 0, 240),    # J
        (240, 160, 0),  # L
    ],
    dtype=np.uint8,
)


class FallingBlocksEnv(gym.Env):
    """One agent step applies an action, then a gravity tick every `gravity_every` steps."""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        gravity_every: int = 1,
        max_episode_steps: int = 10000,
        piece_source: Optional[PieceSource] = None,
    ) -> None:
        super().__init__()
        if gravity_every < 1:
            raise ValueError("gravity_every must be >= 1")
        self.render_mode = render_mode
        self.gravity_every = int(gravity_every)
        self.max_episode_steps = int(max_episode_steps)
        self.game = FallingBlocksGame(piece_source=piece_source)

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=len(TetrominoType), shape=(BOARD_HEIGHT, BOARD_WIDTH), dtype=np.int8),
                "next_piece": spaces.Discrete(len(TetrominoType) + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0
        self._last_obs: Optional[Dict[str, Any]] = None

    def _get_obs(self) -> Dict[str, Any]:
        next_piece = self.game.next_piece
        return {
            "board": self.game.get_display_board(),
            "next_piece": int(next_piece) if next_piece is not None else 0,
        }

    def _get_info(self) -> Dict[str, Any]:
        snapshot = self.game.get_state()
        return {
            "score": snapshot.score,
            "level": snapshot.level,
            "lines_cleared": snapshot.lines_cleared,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None and isinstance(self.game.piece_source, RandomPieceSource):
            self.game.piece_source.seed(seed)
        self.game.start()
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        if not self.action_space.contains(int(action)):
            raise ValueError(f"invalid action: {action!r}")
        action = Action(int(action))
        score_before = self.game.score

        if action == Action.LEFT:
            self.game.move_left()
        elif action == Action.RIGHT:
            self.game.move_right()
        elif action == Action.SOFT_DROP:
            self.game.soft_drop()
        elif action == Action.ROTATE:
            self.game.rotate()

        self._steps += 1
        if self._steps % self.gravity_every == 0:
            self.game.tick(0, 1)

        reward = float(self.game.score - score_before)
        terminated = self.game.game_over
        truncated = not terminated and self._steps >= self.max_episode_steps

        obs = self._get_obs()
        info = self._get_info()
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            board = self._last_obs["board"] if self._last_obs is not None else self.game.get_display_board()
            cell = 12
            img = _PALETTE[board.astype(np.intp)]
            return np.repeat(np.repeat(img, cell, axis=0), cell, axis=1)
        # human rendering delegated to the pygame client; noop
        return None

    def close(self) -> None:
        pass
