"""
Score a game from the command line: resolve the sport's format, evaluate the
recorded sets or periods, and print the per-unit breakdown and the result.

    python -m scorekeeper.run_scoring volleyball --format best_of_5 25-20 25-18 20-25 25-22
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from scorekeeper.catalog import CatalogError, FormatCatalog, ScoringFormat
from scorekeeper.config import load_configured_catalog, set_catalog_path
from scorekeeper.evaluation import evaluate, set_winner, target_and_cap
from scorekeeper.models import FormatKind, UnitScore
from scorekeeper.services import (
    InvalidScoreError,
    UnknownFormatError,
    build_completion_record,
    final_game_result,
    is_deciding_set,
    needs_overtime,
    parse_unit_scores,
    resolve_format,
)


def _unit_label(fmt: ScoringFormat, index: int) -> str:
    if fmt.kind == FormatKind.SET_BASED:
        return f"Set {index + 1}"
    if index < fmt.period_count:
        return f"{fmt.period_abbreviation or fmt.period_label}{index + 1}"
    extra = fmt.overtime_label or fmt.extra_periods_label or "OT"
    return f"{extra} {index - fmt.period_count + 1}"


def _print_units(fmt: ScoringFormat, scores: list[UnitScore]) -> None:
    for i, score in enumerate(scores):
        line = f"  {_unit_label(fmt, i):<14} {score.ours:>3} - {score.theirs:<3}"
        if fmt.kind == FormatKind.SET_BASED:
            target, cap = target_and_cap(fmt, i)
            winner = set_winner(score.ours, score.theirs, target, cap, fmt.win_by_two_required)
            status = f"won by {winner.value}" if winner else "in progress"
            deciding = "  [deciding]" if is_deciding_set(i, fmt) else ""
            line += f"  (to {target}, cap {cap or '-'}) {status}{deciding}"
        print(line)


def run(
    catalog: FormatCatalog,
    sport: str,
    raw_scores: list[str],
    format_id: str | None = None,
    as_json: bool = False,
) -> int:
    try:
        profile, fmt = resolve_format(catalog, sport, format_id)
        scores = parse_unit_scores(raw_scores)
    except (UnknownFormatError, InvalidScoreError) as e:
        print(f"error: {e}")
        return 2

    result = evaluate(scores, fmt)
    if as_json:
        print(json.dumps(build_completion_record(fmt, scores), indent=2))
        return 0

    print(f"\n  {profile.icon} {profile.name} | {fmt.name} ({fmt.description})")
    print("  " + "-" * 56)
    _print_units(fmt, scores)
    print("  " + "-" * 56)
    print(f"  Outcome: {result.outcome.value}   (display: {final_game_result(result).value})")
    if fmt.kind == FormatKind.SET_BASED:
        print(f"  Sets: {result.units_won_by_us}-{result.units_won_by_them}")
    print(
        f"  Points: {result.total_points_us}-{result.total_points_them}"
        f"   Differential: {result.point_differential:+d}"
    )
    if needs_overtime(result, fmt):
        print("  Level score: add an overtime / extra period to decide the game.")
    print()
    return 0


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate set or period scores for a sport's scoring format.")
    parser.add_argument("sport", help="Sport name, e.g. volleyball, basketball (unknown names use the default sport)")
    parser.add_argument("scores", nargs="*", help="Unit scores as OURS-THEIRS, e.g. 25-20")
    parser.add_argument("--format", dest="format_id", default=None, help="Format id (default: sport's first format)")
    parser.add_argument("--catalog", type=Path, default=None, help="JSON catalog file to use instead of the built-in one")
    parser.add_argument("--json", action="store_true", help="Print the completion record as JSON")
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    if args.catalog is not None:
        set_catalog_path(args.catalog)
    try:
        catalog = load_configured_catalog()
    except CatalogError as e:
        print(f"error: {e}")
        return 2
    return run(catalog, args.sport, args.scores, format_id=args.format_id, as_json=args.json)


if __name__ == "__main__":
    raise SystemExit(main())
