"""
Service layer: input parsing at the boundary and the game completion workflow.
No persistence; callers store the records these functions build.
"""
from .score_entry import (
    InvalidScoreError,
    parse_score_value,
    parse_unit_score,
    parse_unit_scores,
)
from .game_completion import (
    GameNotCompletableError,
    UnknownFormatError,
    add_overtime_period,
    build_completion_record,
    can_complete,
    final_game_result,
    initial_unit_scores,
    is_deciding_set,
    needs_overtime,
    resolve_format,
    select_format_for_played_sets,
    sets_to_show,
)

__all__ = [
    "InvalidScoreError",
    "parse_score_value",
    "parse_unit_score",
    "parse_unit_scores",
    "GameNotCompletableError",
    "UnknownFormatError",
    "add_overtime_period",
    "build_completion_record",
    "can_complete",
    "final_game_result",
    "initial_unit_scores",
    "is_deciding_set",
    "needs_overtime",
    "resolve_format",
    "select_format_for_played_sets",
    "sets_to_show",
]
