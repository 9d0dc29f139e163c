"""
Game completion workflow around the evaluator: picking a format, laying out
the score sheet, deciding when a game may be closed, and building the flat
record a caller persists. No persistence happens here.
"""
from __future__ import annotations

from typing import Any, Sequence

from scorekeeper.catalog import FormatCatalog, ScoringFormat, SportScoringProfile
from scorekeeper.evaluation import GameResult, evaluate
from scorekeeper.models import FormatKind, Outcome, UnitScore

# ---------- Exceptions ----------


class UnknownFormatError(LookupError):
    """Format id not offered by the resolved sport."""


class GameNotCompletableError(ValueError):
    """Game cannot be marked complete without a declared result."""


_DECLARED = (Outcome.WIN, Outcome.LOSS, Outcome.TIE)
MIN_SETS_SHOWN = 2


# ---------- Format selection ----------


def resolve_format(
    catalog: FormatCatalog,
    sport_name: str | None,
    format_id: str | None = None,
) -> tuple[SportScoringProfile, ScoringFormat]:
    """Profile for the sport (with fallback) and the named format, or its default."""
    profile = catalog.resolve_profile(sport_name)
    if not format_id:
        return profile, profile.default_format
    fmt = profile.find_format(format_id)
    if fmt is None:
        raise UnknownFormatError(f"Format '{format_id}' not available for {profile.name}")
    return profile, fmt


def select_format_for_played_sets(
    profile: SportScoringProfile,
    played_scores: Sequence[UnitScore] = (),
) -> ScoringFormat:
    """First format that can hold the sets already played; the default otherwise."""
    played = sum(1 for s in played_scores if s.played)
    for fmt in profile.formats:
        if fmt.kind != FormatKind.SET_BASED or fmt.max_sets >= played:
            return fmt
    return profile.default_format


# ---------- Score sheet layout ----------


def initial_unit_scores(fmt: ScoringFormat, played_scores: Sequence[UnitScore] = ()) -> list[UnitScore]:
    """
    One row per set (max_sets) or period (period_count).
    Set sheets keep only played sets, in order; period sheets keep positions
    and any overtime rows beyond period_count.
    """
    if fmt.kind == FormatKind.SET_BASED:
        played = [s for s in played_scores if s.played][: fmt.max_sets]
        return played + [UnitScore() for _ in range(fmt.max_sets - len(played))]
    rows = list(played_scores)
    return rows + [UnitScore() for _ in range(fmt.period_count - len(rows))]


def sets_to_show(unit_scores: Sequence[UnitScore], fmt: ScoringFormat) -> int:
    """
    Set rows worth showing: exactly the sets played once the match is decided,
    otherwise one past the last played set (at least two, at most max_sets).
    """
    if fmt.kind != FormatKind.SET_BASED:
        return 0
    result = evaluate(unit_scores, fmt)
    if result.outcome in (Outcome.WIN, Outcome.LOSS):
        return result.units_won_by_us + result.units_won_by_them
    last_played = 0
    for i, score in enumerate(unit_scores):
        if score.played:
            last_played = i + 1
    return min(max(last_played + 1, MIN_SETS_SHOWN), fmt.max_sets)


def is_deciding_set(set_index: int, fmt: ScoringFormat) -> bool:
    """True for the last set a match can need (set 3 of best-of-3, set 5 of best-of-5)."""
    if fmt.kind != FormatKind.SET_BASED or fmt.sets_required_to_win is None:
        return False
    return set_index == fmt.sets_required_to_win * 2 - 2


# ---------- Overtime ----------


def needs_overtime(result: GameResult, fmt: ScoringFormat) -> bool:
    """Level period game in a format that breaks ties with overtime or extra periods."""
    if fmt.kind != FormatKind.PERIOD_BASED:
        return False
    return (
        result.outcome == Outcome.IN_PROGRESS
        and result.point_differential == 0
        and (fmt.has_overtime or fmt.has_extra_periods)
    )


def add_overtime_period(period_scores: Sequence[UnitScore]) -> tuple[UnitScore, ...]:
    return tuple(period_scores) + (UnitScore(),)


# ---------- Completion ----------


def can_complete(result: GameResult, fmt: ScoringFormat) -> bool:
    if result.outcome in _DECLARED:
        return True
    return fmt.kind == FormatKind.SET_BASED and fmt.suppress_match_winner


def final_game_result(result: GameResult) -> Outcome:
    """WIN/LOSS/TIE for display; undecided results fall back to point totals."""
    if result.outcome in _DECLARED:
        return result.outcome
    if result.total_points_us > result.total_points_them:
        return Outcome.WIN
    if result.total_points_them > result.total_points_us:
        return Outcome.LOSS
    return Outcome.TIE


def build_completion_record(
    fmt: ScoringFormat,
    unit_scores: Sequence[UnitScore],
    mark_complete: bool = False,
) -> dict[str, Any]:
    """
    Flat record for the caller's game store.
    game_result is None for no-winner formats.
    """
    result = evaluate(unit_scores, fmt)
    record: dict[str, Any] = {
        "scoring_format": fmt.id,
        "our_score": result.total_points_us,
        "opponent_score": result.total_points_them,
        "point_differential": result.point_differential,
    }
    if fmt.kind == FormatKind.SET_BASED:
        record["set_scores"] = [s.to_dict() for s in unit_scores if s.played]
        record["our_sets_won"] = result.units_won_by_us
        record["opponent_sets_won"] = result.units_won_by_them
    else:
        record["period_scores"] = [s.to_dict() for s in unit_scores]

    if mark_complete:
        if not can_complete(result, fmt):
            raise GameNotCompletableError(
                f"Game has no result yet ({result.outcome.value}); save it as a draft instead"
            )
        record["game_result"] = result.outcome.value if result.outcome in _DECLARED else None
        record["game_status"] = "completed"
    return record
