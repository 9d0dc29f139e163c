"""
Boundary parsing: raw score input (form fields, JSON, CLI text) -> UnitScore.
The evaluator trusts its inputs; validation happens here instead.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from scorekeeper.models import UnitScore

# ---------- Exceptions ----------


class InvalidScoreError(ValueError):
    """Score value that cannot be a point count (negative, fractional, not a number)."""


# ---------- Parsing ----------

_OUR_KEYS = ("our", "ours")
_THEIR_KEYS = ("their", "theirs")


def parse_score_value(value: Any, field: str = "score") -> int:
    """
    One point count. None and blank text read as 0 (unit not played yet).
    Digit strings are accepted since form inputs arrive as text.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise InvalidScoreError(f"{field} must be a whole number, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if not (text.isascii() and text.isdigit()):
            raise InvalidScoreError(f"{field} must be a whole number, got {value!r}")
        return int(text)
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidScoreError(f"{field} must be a whole number, got {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise InvalidScoreError(f"{field} must be a whole number, got {value!r}")
    if value < 0:
        raise InvalidScoreError(f"{field} cannot be negative, got {value}")
    return value


def _pick(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def parse_unit_score(raw: Any, index: int = 0) -> UnitScore:
    """
    Accepts {"our": 25, "their": 20} (or ours/theirs), a (25, 20) pair,
    or "25-20" text. index is only used in error messages.
    """
    label = f"unit {index + 1}"
    if isinstance(raw, UnitScore):
        ours, theirs = raw.ours, raw.theirs
    elif isinstance(raw, Mapping):
        if not any(key in raw for key in _OUR_KEYS + _THEIR_KEYS):
            raise InvalidScoreError(f"{label}: expected our/their (or ours/theirs) keys, got {sorted(raw)!r}")
        ours, theirs = _pick(raw, _OUR_KEYS), _pick(raw, _THEIR_KEYS)
    elif isinstance(raw, str):
        parts = raw.split("-")
        if len(parts) != 2:
            raise InvalidScoreError(f"{label}: expected 'OURS-THEIRS', got {raw!r}")
        ours, theirs = parts
    elif isinstance(raw, (list, tuple)):
        if len(raw) != 2:
            raise InvalidScoreError(f"{label}: expected a pair of scores, got {len(raw)} values")
        ours, theirs = raw
    else:
        raise InvalidScoreError(f"{label}: unsupported score value {raw!r}")
    return UnitScore(
        ours=parse_score_value(ours, f"{label} our score"),
        theirs=parse_score_value(theirs, f"{label} their score"),
    )


def parse_unit_scores(raw_scores: Iterable[Any] | None) -> list[UnitScore]:
    if raw_scores is None:
        return []
    return [parse_unit_score(raw, i) for i, raw in enumerate(raw_scores)]
