import pytest

from falling_blocks.game import ScoringRules


@pytest.mark.parametrize("lines, level, points", [(0, 1, 0), (1, 1, 100), (4, 1, 400), (2, 3, 600)])
def test_score_for_lines(lines, level, points):
    assert ScoringRules().score_for_lines(lines, level) == points


@pytest.mark.parametrize("lines, level", [(0, 1), (9, 1), (10, 2), (19, 2), (95, 10)])
def test_level_for_lines(lines, level):
    assert ScoringRules().level_for_lines(lines) == level


@pytest.mark.parametrize("level, interval", [(1, 1000), (2, 900), (9, 200), (10, 100), (25, 100)])
def test_gravity_interval_is_floored(level, interval):
    assert ScoringRules().gravity_interval(level) == interval
