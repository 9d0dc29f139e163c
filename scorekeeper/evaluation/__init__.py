"""
Outcome Evaluator: set completion/winner and aggregate results for set-based
and period-based formats. Stateless; identical inputs give identical results.
"""
from .sets import (
    compute_match_result,
    is_set_complete,
    set_winner,
    target_and_cap,
    value_at_or_last,
)
from .periods import compute_period_result
from .outcome import GameResult, evaluate

__all__ = [
    "compute_match_result",
    "is_set_complete",
    "set_winner",
    "target_and_cap",
    "value_at_or_last",
    "compute_period_result",
    "GameResult",
    "evaluate",
]
