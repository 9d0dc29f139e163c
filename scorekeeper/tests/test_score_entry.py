"""
Tests for boundary parsing of raw score input.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from scorekeeper.models import UnitScore
from scorekeeper.services.score_entry import (
    InvalidScoreError,
    parse_score_value,
    parse_unit_score,
    parse_unit_scores,
)


def test_parse_score_value_accepts_counts():
    assert parse_score_value(0) == 0
    assert parse_score_value(25) == 25
    assert parse_score_value("17") == 17
    assert parse_score_value(" 9 ") == 9
    assert parse_score_value(12.0) == 12


def test_parse_score_value_blank_is_zero():
    assert parse_score_value(None) == 0
    assert parse_score_value("") == 0
    assert parse_score_value("   ") == 0


@pytest.mark.parametrize("bad", [-1, "-3", 2.5, "ten", True, [1], "²"])
def test_parse_score_value_rejects(bad):
    with pytest.raises(InvalidScoreError):
        parse_score_value(bad)


def test_invalid_score_is_value_error():
    assert issubclass(InvalidScoreError, ValueError)


class TestParseUnitScore:
    def test_mapping_keys(self):
        assert parse_unit_score({"our": 25, "their": 20}) == UnitScore(25, 20)
        assert parse_unit_score({"ours": 3, "theirs": 4}) == UnitScore(3, 4)
        assert parse_unit_score({"our": 5}) == UnitScore(5, 0)

    def test_mapping_without_score_keys(self):
        with pytest.raises(InvalidScoreError, match="unit 2"):
            parse_unit_score({"us": 25, "them": 20}, index=1)

    def test_pair_and_text(self):
        assert parse_unit_score((25, 23)) == UnitScore(25, 23)
        assert parse_unit_score([0, 0]) == UnitScore(0, 0)
        assert parse_unit_score("25-20") == UnitScore(25, 20)
        assert parse_unit_score(" 15 - 13 ") == UnitScore(15, 13)

    def test_unit_score_passthrough(self):
        assert parse_unit_score(UnitScore(1, 2)) == UnitScore(1, 2)

    def test_malformed(self):
        with pytest.raises(InvalidScoreError):
            parse_unit_score("25")
        with pytest.raises(InvalidScoreError):
            parse_unit_score("25-20-3")
        with pytest.raises(InvalidScoreError):
            parse_unit_score((1, 2, 3))
        with pytest.raises(InvalidScoreError):
            parse_unit_score(42)

    def test_error_names_the_unit(self):
        with pytest.raises(InvalidScoreError, match="unit 3"):
            parse_unit_scores(["25-20", "20-25", {"our": -1, "their": 4}])


def test_parse_unit_scores_none():
    assert parse_unit_scores(None) == []
