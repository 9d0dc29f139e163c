"""
Tests for set-based evaluation: win-by-two, caps, set winner, match result.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from scorekeeper.catalog import SetBasedFormat
from scorekeeper.evaluation import (
    compute_match_result,
    is_set_complete,
    set_winner,
    target_and_cap,
    value_at_or_last,
)
from scorekeeper.models import Outcome, Side, UnitScore


@pytest.fixture
def best_of_5() -> SetBasedFormat:
    return SetBasedFormat(
        id="best_of_5",
        name="Best of 5 Sets",
        description="First to win 3 sets",
        sets_required_to_win=3,
        max_sets=5,
        point_targets_per_set=(25, 25, 25, 25, 15),
        win_by_two_required=True,
        caps_per_set=(30, 30, 30, 30, 20),
    )


@pytest.fixture
def best_of_3() -> SetBasedFormat:
    return SetBasedFormat(
        id="best_of_3",
        name="Best of 3 Sets",
        description="First to win 2 sets",
        sets_required_to_win=2,
        max_sets=3,
        point_targets_per_set=(25, 25, 15),
        win_by_two_required=True,
        caps_per_set=(30, 30, 20),
    )


def _sets(*pairs: tuple[int, int]) -> list[UnitScore]:
    return [UnitScore(ours=a, theirs=b) for a, b in pairs]


# ---- value_at_or_last ----
class TestValueAtOrLast:
    def test_in_range(self):
        assert value_at_or_last([25, 25, 15], 0) == 25
        assert value_at_or_last([25, 25, 15], 2) == 15

    def test_past_end_reuses_last(self):
        assert value_at_or_last([25, 25, 15], 3) == 15
        assert value_at_or_last([25, 25, 15], 10) == 15

    def test_empty_or_missing(self):
        assert value_at_or_last(None, 0) is None
        assert value_at_or_last([], 4) is None


# ---- is_set_complete ----
class TestIsSetComplete:
    def test_both_below_target_never_complete(self):
        for cap in (None, 30):
            for win_by_two in (True, False):
                assert not is_set_complete(24, 24, 25, cap, win_by_two)
                assert not is_set_complete(0, 0, 25, cap, win_by_two)
                assert not is_set_complete(24, 0, 25, cap, win_by_two)

    def test_first_to_target_without_win_by_two(self):
        assert is_set_complete(25, 24, 25, None, False)
        assert is_set_complete(24, 25, 25, None, False)

    def test_win_by_two_needs_margin(self):
        assert is_set_complete(25, 23, 25, 30, True)
        assert not is_set_complete(25, 24, 25, 30, True)
        assert not is_set_complete(26, 25, 25, 30, True)
        assert is_set_complete(27, 25, 25, 30, True)

    def test_cap_overrides_margin(self):
        assert is_set_complete(30, 29, 25, 30, True)
        assert set_winner(30, 29, 25, 30, True) == Side.US
        assert set_winner(29, 30, 25, 30, True) == Side.THEM

    def test_at_cap_level_score_not_complete(self):
        assert not is_set_complete(30, 30, 25, 30, True)

    def test_no_cap_is_endless_deuce(self):
        assert not is_set_complete(41, 40, 25, None, True)
        assert is_set_complete(42, 40, 25, None, True)

    def test_negative_scores_do_not_crash(self):
        assert not is_set_complete(-5, 3, 25, 30, True)
        assert set_winner(-5, 3, 25, 30, True) is None


# ---- set_winner ----
class TestSetWinner:
    def test_none_while_in_progress(self):
        assert set_winner(20, 18, 25, 30, True) is None

    def test_us_and_them(self):
        assert set_winner(25, 20, 25, 30, True) == Side.US
        assert set_winner(18, 25, 25, 30, True) == Side.THEM

    def test_complete_implies_winner(self):
        for ours in range(0, 33):
            for theirs in range(0, 33):
                for cap in (None, 30):
                    for win_by_two in (True, False):
                        if is_set_complete(ours, theirs, 25, cap, win_by_two):
                            assert set_winner(ours, theirs, 25, cap, win_by_two) is not None

    def test_deterministic(self):
        first = [set_winner(o, t, 15, 20, True) for o in range(22) for t in range(22)]
        second = [set_winner(o, t, 15, 20, True) for o in range(22) for t in range(22)]
        assert first == second


# ---- target_and_cap ----
class TestTargetAndCap:
    def test_fourth_set_reuses_last_target(self, best_of_3):
        assert target_and_cap(best_of_3, 2) == (15, 20)
        assert target_and_cap(best_of_3, 3) == (15, 20)

    def test_no_caps(self):
        fmt = SetBasedFormat(
            id="open",
            name="Open",
            description="",
            sets_required_to_win=2,
            max_sets=3,
            point_targets_per_set=(25,),
            win_by_two_required=True,
        )
        assert target_and_cap(fmt, 0) == (25, None)
        assert target_and_cap(fmt, 2) == (25, None)


# ---- compute_match_result ----
class TestComputeMatchResult:
    def test_best_of_5_win(self, best_of_5):
        result = compute_match_result(_sets((25, 20), (25, 18), (20, 25), (25, 22)), best_of_5)
        assert result.units_won_by_us == 3
        assert result.units_won_by_them == 1
        assert result.outcome == Outcome.WIN
        assert result.total_points_us == 95
        assert result.total_points_them == 85
        assert result.point_differential == 10

    def test_loss(self, best_of_3):
        result = compute_match_result(_sets((20, 25), (25, 27)), best_of_3)
        assert result.outcome == Outcome.LOSS
        assert result.units_won_by_them == 2

    def test_in_progress_counts_points_of_unfinished_set(self, best_of_3):
        result = compute_match_result(_sets((25, 20), (10, 12)), best_of_3)
        assert result.outcome == Outcome.IN_PROGRESS
        assert result.units_won_by_us == 1
        assert result.units_won_by_them == 0
        assert result.total_points_us == 35
        assert result.total_points_them == 32

    def test_deciding_set_uses_its_own_target(self, best_of_3):
        # 15-13 wins the third set (target 15) but would not win a 25-point set
        result = compute_match_result(_sets((25, 20), (20, 25), (15, 13)), best_of_3)
        assert result.outcome == Outcome.WIN

    def test_deciding_set_cap(self, best_of_3):
        result = compute_match_result(_sets((25, 20), (20, 25), (19, 20)), best_of_3)
        assert result.outcome == Outcome.LOSS

    def test_extra_set_past_target_list(self):
        fmt = SetBasedFormat(
            id="long",
            name="Long",
            description="",
            sets_required_to_win=3,
            max_sets=5,
            point_targets_per_set=(25, 25, 15),
            win_by_two_required=True,
            caps_per_set=(30, 30, 20),
        )
        result = compute_match_result(_sets((25, 20), (20, 25), (15, 10), (15, 13)), fmt)
        assert result.units_won_by_us == 3
        assert result.outcome == Outcome.WIN

    def test_no_winner_format(self):
        fmt = SetBasedFormat(
            id="two_sets",
            name="2 Sets (No Winner)",
            description="",
            sets_required_to_win=None,
            max_sets=2,
            point_targets_per_set=(25, 25),
            win_by_two_required=True,
            caps_per_set=(30, 30),
            suppress_match_winner=True,
        )
        result = compute_match_result(_sets((25, 20), (22, 25)), fmt)
        assert result.outcome == Outcome.NO_WINNER
        assert result.total_points_us == 47
        assert result.total_points_them == 45
        assert result.point_differential == 2
        assert result.units_won_by_us == 0
        assert result.units_won_by_them == 0

    def test_empty_match(self, best_of_5):
        result = compute_match_result([], best_of_5)
        assert result.outcome == Outcome.IN_PROGRESS
        assert result.point_differential == 0

    def test_to_dict(self, best_of_3):
        d = compute_match_result(_sets((25, 20), (25, 21)), best_of_3).to_dict()
        assert d["outcome"] == "win"
        assert d["units_won_by_us"] == 2
        assert d["point_differential"] == 9
