from __future__ import annotations

import logging
from typing import Callable, Optional

import pygame

from falling_blocks.game import FallingBlocksGame


logger = logging.getLogger(__name__)

GRAVITY_EVENT = pygame.USEREVENT + 1

TimerFn = Callable[[int, int], None]


class GravityScheduler:
    """Drives `tick(0, 1)` from a pygame timer whose cadence follows the level.

    The old timer is cancelled before a new interval is installed, so a level
    change never leaves two timers posting gravity events.
    """

    def __init__(self, game: FallingBlocksGame, set_timer: Optional[TimerFn] = None, event_type: int = GRAVITY_EVENT) -> None:
        self.game = game
        self.event_type = event_type
        self._set_timer: TimerFn = set_timer or pygame.time.set_timer
        self.interval_ms: Optional[int] = None
        game.add_level_listener(self._on_level)

    def _on_level(self, level: int) -> None:
        self.install(self.game.rules.gravity_interval(level))

    def install(self, interval_ms: int) -> None:
        if self.interval_ms == interval_ms:
            return
        self.cancel()
        self._set_timer(self.event_type, interval_ms)
        self.interval_ms = interval_ms
        logger.info("Gravity interval set to %d ms", interval_ms)

    def cancel(self) -> None:
        if self.interval_ms is not None:
            self._set_timer(self.event_type, 0)
            self.interval_ms = None

    def handle(self, event: pygame.event.Event) -> bool:
        if event.type != self.event_type:
            return False
        self.game.tick(0, 1)
        return True

    def close(self) -> None:
        self.cancel()
        self.game.remove_level_listener(self._on_level)
