"""
Set-based evaluation (volleyball): set completion with win-by-two and caps,
set winner, and the aggregate match result.

Pure functions over primitive inputs. Scores are not validated here; negative
values simply never reach a target.
"""
from __future__ import annotations

from typing import Sequence, TypeVar

from scorekeeper.catalog.schemas import SetBasedFormat
from scorekeeper.models import MatchResult, Outcome, Side, UnitScore

T = TypeVar("T")


def value_at_or_last(values: Sequence[T] | None, index: int) -> T | None:
    """values[index], or the last value once index runs past the end. None for no values."""
    if not values:
        return None
    if 0 <= index < len(values):
        return values[index]
    return values[-1]


def is_set_complete(
    our_score: int,
    their_score: int,
    target_score: int,
    cap: int | None,
    win_by_two_required: bool,
) -> bool:
    """
    True when the set is over.
    At or past the cap, a one-point lead ends the set even with win-by-two.
    """
    if our_score < target_score and their_score < target_score:
        return False
    if not win_by_two_required:
        return True
    margin = abs(our_score - their_score)
    if cap and (our_score >= cap or their_score >= cap):
        return margin >= 1
    return margin >= 2


def set_winner(
    our_score: int,
    their_score: int,
    target_score: int,
    cap: int | None,
    win_by_two_required: bool,
) -> Side | None:
    """Side that won the set, or None while it is still being played."""
    if not is_set_complete(our_score, their_score, target_score, cap, win_by_two_required):
        return None
    return Side.US if our_score > their_score else Side.THEM


def target_and_cap(fmt: SetBasedFormat, set_index: int) -> tuple[int, int | None]:
    """Point target and cap for a 0-based set index (later sets reuse the last entry)."""
    target = value_at_or_last(fmt.point_targets_per_set, set_index)
    cap = value_at_or_last(fmt.caps_per_set, set_index)
    return target, cap


def _points(value: int | None) -> int:
    return value or 0


def compute_match_result(unit_scores: Sequence[UnitScore], fmt: SetBasedFormat) -> MatchResult:
    """
    Sets won per side and point totals for the recorded sets.
    Unfinished sets add points but no set win. Never returns TIE.
    """
    total_us = sum(_points(s.ours) for s in unit_scores)
    total_them = sum(_points(s.theirs) for s in unit_scores)

    if fmt.suppress_match_winner:
        return MatchResult(
            outcome=Outcome.NO_WINNER,
            units_won_by_us=0,
            units_won_by_them=0,
            total_points_us=total_us,
            total_points_them=total_them,
            point_differential=total_us - total_them,
        )

    won_us = 0
    won_them = 0
    for i, score in enumerate(unit_scores):
        target, cap = target_and_cap(fmt, i)
        winner = set_winner(_points(score.ours), _points(score.theirs), target, cap, fmt.win_by_two_required)
        if winner is Side.US:
            won_us += 1
        elif winner is Side.THEM:
            won_them += 1

    outcome = Outcome.IN_PROGRESS
    needed = fmt.sets_required_to_win
    if needed is not None:
        if won_us >= needed:
            outcome = Outcome.WIN
        elif won_them >= needed:
            outcome = Outcome.LOSS

    return MatchResult(
        outcome=outcome,
        units_won_by_us=won_us,
        units_won_by_them=won_them,
        total_points_us=total_us,
        total_points_them=total_them,
        point_differential=total_us - total_them,
    )
