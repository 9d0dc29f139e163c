"""
Period-based evaluation (basketball, soccer, baseball, ...): totals decide.
"""
from __future__ import annotations

from typing import Sequence

from scorekeeper.catalog.schemas import PeriodBasedFormat
from scorekeeper.models import Outcome, PeriodResult, UnitScore


def compute_period_result(period_scores: Sequence[UnitScore], fmt: PeriodBasedFormat) -> PeriodResult:
    """
    Sum every supplied period (overtime periods included, if the caller added them).
    Level totals are a TIE only when the format allows ties; otherwise the game
    is still IN_PROGRESS until more periods are supplied.
    """
    ours = sum(p.ours or 0 for p in period_scores)
    theirs = sum(p.theirs or 0 for p in period_scores)

    if ours > theirs:
        outcome = Outcome.WIN
    elif theirs > ours:
        outcome = Outcome.LOSS
    elif fmt.ties_allowed:
        outcome = Outcome.TIE
    else:
        outcome = Outcome.IN_PROGRESS

    return PeriodResult(
        outcome=outcome,
        total_points_us=ours,
        total_points_them=theirs,
        point_differential=ours - theirs,
    )
