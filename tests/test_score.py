"""Scoring, leveling and gravity curve tests."""

import pytest

from tower_score import SCORE_TABLE, Scoring, gravity_frames


def test_tetris_at_level_zero():
    s = Scoring()
    assert s.record_clear(4) == 1200
    assert (s.score, s.lines, s.level) == (1200, 4, 0)


def test_single_at_level_two():
    s = Scoring(score=500, lines=20, level=2)
    s.record_clear(1)
    assert s.score == 620
    assert s.lines == 21


def test_zero_clear_scores_nothing():
    s = Scoring(lines=3)
    assert s.record_clear(0) == 0
    assert (s.score, s.lines, s.level) == (0, 3, 0)


def test_level_is_recomputed_from_lines():
    s = Scoring(lines=9)
    # points use the level held before the clear
    assert s.record_clear(1) == SCORE_TABLE[1]
    assert s.level == 1
    s.record_clear(4)
    s.record_clear(4)
    assert (s.lines, s.level) == (18, 1)
    s.record_clear(2)
    assert (s.lines, s.level) == (20, 2)


def test_impossible_clear_counts_rejected():
    with pytest.raises(ValueError):
        Scoring().record_clear(5)
    with pytest.raises(ValueError):
        Scoring().record_clear(-1)


@pytest.mark.parametrize("level,frames", [(0, 30), (1, 28), (13, 4), (14, 2), (40, 2)])
def test_gravity_frames(level, frames):
    assert gravity_frames(level) == frames
