"""
Scoring format definitions: set-based (volleyball) and period-based
(basketball, soccer, baseball, ...) formats, grouped per sport.

Formats carry an explicit ``kind`` so consumers dispatch on it instead of
probing for fields. Construction validates; lookups never do.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from scorekeeper.models import FormatKind


class CatalogError(ValueError):
    """Malformed catalog data (raised at construction, never at lookup)."""


def _require(d: Mapping[str, Any], key: str, ctx: str) -> Any:
    if key not in d:
        raise CatalogError(f"Missing required key '{key}' in {ctx}")
    return d[key]


def _as_str(x: Any, ctx: str) -> str:
    if not isinstance(x, str) or not x.strip():
        raise CatalogError(f"Expected non-empty string for {ctx}")
    return x


def _as_positive_int(x: Any, ctx: str) -> int:
    if isinstance(x, bool) or not isinstance(x, int) or x < 1:
        raise CatalogError(f"Expected positive integer for {ctx}, got {x!r}")
    return x


def _as_bool(x: Any, ctx: str) -> bool:
    if not isinstance(x, bool):
        raise CatalogError(f"Expected true/false for {ctx}, got {x!r}")
    return x


def _as_mapping(x: Any, ctx: str) -> Mapping[str, Any]:
    if not isinstance(x, Mapping):
        raise CatalogError(f"Expected mapping for {ctx}, got {type(x).__name__}")
    return x


def _as_int_tuple(x: Any, ctx: str) -> tuple[int, ...]:
    if not isinstance(x, (list, tuple)) or not x:
        raise CatalogError(f"Expected non-empty list of integers for {ctx}")
    return tuple(_as_positive_int(v, f"{ctx}[{i}]") for i, v in enumerate(x))


@dataclass(frozen=True)
class SetBasedFormat:
    """
    Match decided by winning a number of sets, each played to a target.
    Target and cap lists reuse their last entry for later sets.
    sets_required_to_win is None for formats with no declared match winner.
    """
    id: str
    name: str
    description: str
    sets_required_to_win: int | None
    max_sets: int
    point_targets_per_set: tuple[int, ...]
    win_by_two_required: bool
    caps_per_set: tuple[int, ...] | None = None
    suppress_match_winner: bool = False
    kind: FormatKind = field(default=FormatKind.SET_BASED, init=False)

    def __post_init__(self) -> None:
        ctx = f"format '{self.id}'"
        _as_str(self.id, f"{ctx}.id")
        _as_positive_int(self.max_sets, f"{ctx}.max_sets")
        targets = _as_int_tuple(self.point_targets_per_set, f"{ctx}.point_targets_per_set")
        object.__setattr__(self, "point_targets_per_set", targets)
        if self.caps_per_set is not None:
            caps = _as_int_tuple(self.caps_per_set, f"{ctx}.caps_per_set")
            object.__setattr__(self, "caps_per_set", caps)
            for i in range(max(len(targets), len(caps))):
                target = targets[min(i, len(targets) - 1)]
                cap = caps[min(i, len(caps) - 1)]
                if cap < target:
                    raise CatalogError(f"{ctx}: cap {cap} below target {target} for set {i + 1}")
        if self.sets_required_to_win is not None:
            _as_positive_int(self.sets_required_to_win, f"{ctx}.sets_required_to_win")
            if self.sets_required_to_win > self.max_sets:
                raise CatalogError(f"{ctx}: sets_required_to_win exceeds max_sets")

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "sets_required_to_win": self.sets_required_to_win,
            "max_sets": self.max_sets,
            "point_targets_per_set": list(self.point_targets_per_set),
            "win_by_two_required": self.win_by_two_required,
            "caps_per_set": list(self.caps_per_set) if self.caps_per_set is not None else None,
            "suppress_match_winner": self.suppress_match_winner,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> SetBasedFormat:
        d = _as_mapping(d, "format entry")
        ctx = f"format '{d.get('id', '?')}'"
        return cls(
            id=_as_str(_require(d, "id", ctx), f"{ctx}.id"),
            name=_as_str(_require(d, "name", ctx), f"{ctx}.name"),
            description=d.get("description", ""),
            sets_required_to_win=_require(d, "sets_required_to_win", ctx),
            max_sets=_require(d, "max_sets", ctx),
            point_targets_per_set=_require(d, "point_targets_per_set", ctx),
            win_by_two_required=_as_bool(d.get("win_by_two_required", True), f"{ctx}.win_by_two_required"),
            caps_per_set=d.get("caps_per_set"),
            suppress_match_winner=_as_bool(d.get("suppress_match_winner", False), f"{ctx}.suppress_match_winner"),
        )


@dataclass(frozen=True)
class PeriodBasedFormat:
    """Game decided on cumulative points over a fixed number of periods."""
    id: str
    name: str
    description: str
    period_count: int
    period_label: str
    period_abbreviation: str
    has_overtime: bool = False
    overtime_label: str | None = None
    has_extra_periods: bool = False
    extra_periods_label: str | None = None
    ties_allowed: bool = False
    kind: FormatKind = field(default=FormatKind.PERIOD_BASED, init=False)

    def __post_init__(self) -> None:
        ctx = f"format '{self.id}'"
        _as_str(self.id, f"{ctx}.id")
        _as_positive_int(self.period_count, f"{ctx}.period_count")
        _as_str(self.period_label, f"{ctx}.period_label")

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "period_count": self.period_count,
            "period_label": self.period_label,
            "period_abbreviation": self.period_abbreviation,
            "has_overtime": self.has_overtime,
            "overtime_label": self.overtime_label,
            "has_extra_periods": self.has_extra_periods,
            "extra_periods_label": self.extra_periods_label,
            "ties_allowed": self.ties_allowed,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> PeriodBasedFormat:
        d = _as_mapping(d, "format entry")
        ctx = f"format '{d.get('id', '?')}'"
        return cls(
            id=_as_str(_require(d, "id", ctx), f"{ctx}.id"),
            name=_as_str(_require(d, "name", ctx), f"{ctx}.name"),
            description=d.get("description", ""),
            period_count=_require(d, "period_count", ctx),
            period_label=_require(d, "period_label", ctx),
            period_abbreviation=d.get("period_abbreviation", ""),
            has_overtime=_as_bool(d.get("has_overtime", False), f"{ctx}.has_overtime"),
            overtime_label=d.get("overtime_label"),
            has_extra_periods=_as_bool(d.get("has_extra_periods", False), f"{ctx}.has_extra_periods"),
            extra_periods_label=d.get("extra_periods_label"),
            ties_allowed=_as_bool(d.get("ties_allowed", False), f"{ctx}.ties_allowed"),
        )


ScoringFormat = Union[SetBasedFormat, PeriodBasedFormat]


def format_from_dict(d: Mapping[str, Any]) -> ScoringFormat:
    """Build a format from its mapping form; ``kind`` selects the variant."""
    d = _as_mapping(d, "format entry")
    kind = _require(d, "kind", f"format '{d.get('id', '?')}'")
    if kind == FormatKind.SET_BASED:
        return SetBasedFormat.from_dict(d)
    if kind == FormatKind.PERIOD_BASED:
        return PeriodBasedFormat.from_dict(d)
    raise CatalogError(f"Unknown format kind {kind!r} for format '{d.get('id', '?')}'")


@dataclass(frozen=True)
class SportScoringProfile:
    """
    One sport's display metadata and its formats (first one is the default).
    is_set_based must agree with every format's kind.
    """
    sport_id: str
    name: str
    icon: str
    is_set_based: bool
    formats: tuple[ScoringFormat, ...]

    def __post_init__(self) -> None:
        ctx = f"sport '{self.sport_id}'"
        _as_str(self.sport_id, f"{ctx}.sport_id")
        object.__setattr__(self, "formats", tuple(self.formats))
        if not self.formats:
            raise CatalogError(f"{ctx} has no scoring formats")
        expected = FormatKind.SET_BASED if self.is_set_based else FormatKind.PERIOD_BASED
        seen: set[str] = set()
        for fmt in self.formats:
            if fmt.kind != expected:
                raise CatalogError(
                    f"{ctx}: format '{fmt.id}' is {fmt.kind.value} but is_set_based={self.is_set_based}"
                )
            if fmt.id in seen:
                raise CatalogError(f"{ctx}: duplicate format id '{fmt.id}'")
            seen.add(fmt.id)

    @property
    def default_format(self) -> ScoringFormat:
        return self.formats[0]

    def find_format(self, format_id: str | None) -> ScoringFormat | None:
        for fmt in self.formats:
            if fmt.id == format_id:
                return fmt
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sport_id": self.sport_id,
            "name": self.name,
            "icon": self.icon,
            "is_set_based": self.is_set_based,
            "formats": [f.to_dict() for f in self.formats],
        }

    @classmethod
    def from_dict(cls, sport_id: str, d: Mapping[str, Any]) -> SportScoringProfile:
        ctx = f"sport '{sport_id}'"
        _as_mapping(d, ctx)
        formats = _require(d, "formats", ctx)
        if not isinstance(formats, (list, tuple)):
            raise CatalogError(f"Expected list for {ctx}.formats")
        return cls(
            sport_id=sport_id,
            name=_as_str(_require(d, "name", ctx), f"{ctx}.name"),
            icon=d.get("icon", ""),
            is_set_based=_as_bool(_require(d, "is_set_based", ctx), f"{ctx}.is_set_based"),
            formats=tuple(format_from_dict(f) for f in formats),
        )
