from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    line_clear_points: int = 100
    lines_per_level: int = 10
    base_interval_ms: int = 1000
    interval_step_ms: int = 100
    min_interval_ms: int = 100

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.line_clear_points * level

    def level_for_lines(self, lines_cleared: int) -> int:
        return lines_cleared // self.lines_per_level + 1

    def gravity_interval(self, level: int) -> int:
        """Milliseconds between gravity ticks at `level`."""
        return max(self.min_interval_ms, self.base_interval_ms - (level - 1) * self.interval_step_ms)
