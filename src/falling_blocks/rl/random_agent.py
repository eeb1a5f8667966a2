from __future__ import annotations

import argparse
import logging
from typing import Optional

import gymnasium as gym

# Ensure envs are registered
import falling_blocks.env  # noqa: F401


logger = logging.getLogger(__name__)


def run_random(steps: int = 200, seed: Optional[int] = None, gravity_every: int = 1) -> float:
    env = gym.make("FallingBlocks-10x20-v0", gravity_every=gravity_every)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    episodes = 1
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            logger.info("Episode %d finished: score=%d lines=%d", episodes, info["score"], info["lines_cleared"])
            obs, info = env.reset()
            episodes += 1
    env.close()
    logger.info("Random agent total reward: %.2f over %d episode(s)", total_reward, episodes)
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity_every", type=int, default=1)
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=logging.INFO, format="[FALLING_BLOCKS] %(asctime)s - %(message)s")
    run_random(steps=args.steps, seed=args.seed, gravity_every=args.gravity_every)


if __name__ == "__main__":  # pragma: no cover
    main()
