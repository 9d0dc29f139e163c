"""
Single entry point over both format kinds.
"""
from __future__ import annotations

from typing import Sequence, Union

from scorekeeper.catalog.schemas import ScoringFormat
from scorekeeper.models import FormatKind, MatchResult, PeriodResult, UnitScore

from .periods import compute_period_result
from .sets import compute_match_result

GameResult = Union[MatchResult, PeriodResult]


def evaluate(unit_scores: Sequence[UnitScore], fmt: ScoringFormat) -> GameResult:
    """MatchResult for set-based formats, PeriodResult for period-based ones."""
    if fmt.kind == FormatKind.SET_BASED:
        return compute_match_result(unit_scores, fmt)
    if fmt.kind == FormatKind.PERIOD_BASED:
        return compute_period_result(unit_scores, fmt)
    raise TypeError(f"Unsupported format kind: {fmt.kind!r}")
