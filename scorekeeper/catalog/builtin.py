"""
Built-in sport formats, in the same mapping shape a JSON catalog file uses.
Sport order is display order; the first format of each sport is its default.
"""
from __future__ import annotations

from typing import Any

DEFAULT_SPORT = "volleyball"

BUILTIN_SPORTS: dict[str, dict[str, Any]] = {
    "volleyball": {
        "name": "Volleyball",
        "icon": "🏐",
        "is_set_based": True,
        "formats": [
            {
                "kind": "set_based",
                "id": "best_of_3",
                "name": "Best of 3 Sets",
                "description": "Youth/Recreational - First to win 2 sets",
                "sets_required_to_win": 2,
                "max_sets": 3,
                "point_targets_per_set": [25, 25, 15],
                "win_by_two_required": True,
                "caps_per_set": [30, 30, 20],
            },
            {
                "kind": "set_based",
                "id": "best_of_5",
                "name": "Best of 5 Sets",
                "description": "Competitive/High School - First to win 3 sets",
                "sets_required_to_win": 3,
                "max_sets": 5,
                "point_targets_per_set": [25, 25, 25, 25, 15],
                "win_by_two_required": True,
                "caps_per_set": [30, 30, 30, 30, 20],
            },
            {
                "kind": "set_based",
                "id": "two_sets",
                "name": "2 Sets (No Winner)",
                "description": "Recreational - Play 2 sets, no match winner",
                "sets_required_to_win": None,
                "max_sets": 2,
                "point_targets_per_set": [25, 25],
                "win_by_two_required": True,
                "caps_per_set": [30, 30],
                "suppress_match_winner": True,
            },
            {
                "kind": "set_based",
                "id": "rally_scoring",
                "name": "Rally to 21",
                "description": "Quick format - Sets to 21",
                "sets_required_to_win": 2,
                "max_sets": 3,
                "point_targets_per_set": [21, 21, 15],
                "win_by_two_required": True,
                "caps_per_set": [25, 25, 20],
            },
        ],
    },
    "basketball": {
        "name": "Basketball",
        "icon": "🏀",
        "is_set_based": False,
        "formats": [
            {
                "kind": "period_based",
                "id": "four_quarters",
                "name": "4 Quarters",
                "description": "Standard game with 4 quarters",
                "period_count": 4,
                "period_label": "Quarter",
                "period_abbreviation": "Q",
                "has_overtime": True,
                "overtime_label": "OT",
            },
            {
                "kind": "period_based",
                "id": "two_halves",
                "name": "2 Halves",
                "description": "College/simplified format",
                "period_count": 2,
                "period_label": "Half",
                "period_abbreviation": "H",
                "has_overtime": True,
                "overtime_label": "OT",
            },
        ],
    },
    "soccer": {
        "name": "Soccer",
        "icon": "⚽",
        "is_set_based": False,
        "formats": [
            {
                "kind": "period_based",
                "id": "two_halves",
                "name": "2 Halves",
                "description": "Standard soccer match",
                "period_count": 2,
                "period_label": "Half",
                "period_abbreviation": "H",
                "ties_allowed": True,
            },
            {
                "kind": "period_based",
                "id": "four_quarters",
                "name": "4 Quarters",
                "description": "Youth format with quarters",
                "period_count": 4,
                "period_label": "Quarter",
                "period_abbreviation": "Q",
                "ties_allowed": True,
            },
        ],
    },
    "baseball": {
        "name": "Baseball",
        "icon": "⚾",
        "is_set_based": False,
        "formats": [
            {
                "kind": "period_based",
                "id": "six_innings",
                "name": "6 Innings",
                "description": "Youth baseball (Little League)",
                "period_count": 6,
                "period_label": "Inning",
                "period_abbreviation": "Inn",
                "has_extra_periods": True,
                "extra_periods_label": "Extra Innings",
            },
            {
                "kind": "period_based",
                "id": "seven_innings",
                "name": "7 Innings",
                "description": "Middle/High school",
                "period_count": 7,
                "period_label": "Inning",
                "period_abbreviation": "Inn",
                "has_extra_periods": True,
                "extra_periods_label": "Extra Innings",
            },
            {
                "kind": "period_based",
                "id": "nine_innings",
                "name": "9 Innings",
                "description": "Standard baseball",
                "period_count": 9,
                "period_label": "Inning",
                "period_abbreviation": "Inn",
                "has_extra_periods": True,
                "extra_periods_label": "Extra Innings",
            },
        ],
    },
    "softball": {
        "name": "Softball",
        "icon": "🥎",
        "is_set_based": False,
        "formats": [
            {
                "kind": "period_based",
                "id": "five_innings",
                "name": "5 Innings",
                "description": "Youth softball",
                "period_count": 5,
                "period_label": "Inning",
                "period_abbreviation": "Inn",
                "has_extra_periods": True,
            },
            {
                "kind": "period_based",
                "id": "seven_innings",
                "name": "7 Innings",
                "description": "Standard softball",
                "period_count": 7,
                "period_label": "Inning",
                "period_abbreviation": "Inn",
                "has_extra_periods": True,
            },
        ],
    },
    "football": {
        "name": "Football",
        "icon": "🏈",
        "is_set_based": False,
        "formats": [
            {
                "kind": "period_based",
                "id": "four_quarters",
                "name": "4 Quarters",
                "description": "Standard game",
                "period_count": 4,
                "period_label": "Quarter",
                "period_abbreviation": "Q",
                "has_overtime": True,
                "overtime_label": "OT",
            },
        ],
    },
    "hockey": {
        "name": "Hockey",
        "icon": "🏒",
        "is_set_based": False,
        "formats": [
            {
                "kind": "period_based",
                "id": "three_periods",
                "name": "3 Periods",
                "description": "Standard hockey game",
                "period_count": 3,
                "period_label": "Period",
                "period_abbreviation": "P",
                "has_overtime": True,
                "overtime_label": "OT",
            },
        ],
    },
}
