"""
Value objects for the scoring engine.
Domain objects only; no catalog lookup, persistence or API logic.

Everything here is immutable and rebuilt from caller input on each evaluation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# ---------- Outcome of a match / game ----------
class Outcome(str, Enum):
    """Aggregate result of a match (set-based) or game (period-based)."""
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"  # period-based formats with ties allowed only
    IN_PROGRESS = "in_progress"
    NO_WINNER = "none"  # set-based formats that never declare a match winner


# ---------- Side that took a set ----------
class Side(str, Enum):
    US = "us"
    THEM = "them"


# ---------- Format discriminant ----------
class FormatKind(str, Enum):
    SET_BASED = "set_based"
    PERIOD_BASED = "period_based"


# ---------- UnitScore ----------
@dataclass(frozen=True)
class UnitScore:
    """
    Score of one set or one period, from our team's point of view.
    Non-negative values are a caller precondition (see services.score_entry).
    """
    ours: int = 0
    theirs: int = 0

    @property
    def played(self) -> bool:
        """True once either side has scored in this unit."""
        return bool(self.ours) or bool(self.theirs)

    def to_dict(self) -> dict[str, Any]:
        return {"our": self.ours, "their": self.theirs}


# ---------- MatchResult (set-based) ----------
@dataclass(frozen=True)
class MatchResult:
    """Set-based aggregate: sets won per side plus raw point totals."""
    outcome: Outcome
    units_won_by_us: int
    units_won_by_them: int
    total_points_us: int
    total_points_them: int
    point_differential: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "units_won_by_us": self.units_won_by_us,
            "units_won_by_them": self.units_won_by_them,
            "total_points_us": self.total_points_us,
            "total_points_them": self.total_points_them,
            "point_differential": self.point_differential,
        }


# ---------- PeriodResult (period-based) ----------
@dataclass(frozen=True)
class PeriodResult:
    """Period-based aggregate. No per-period winner; totals decide."""
    outcome: Outcome
    total_points_us: int
    total_points_them: int
    point_differential: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "total_points_us": self.total_points_us,
            "total_points_them": self.total_points_them,
            "point_differential": self.point_differential,
        }
