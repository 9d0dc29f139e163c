"""
Tests for the command-line scorer.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from scorekeeper import config
from scorekeeper.catalog import builtin_catalog
from scorekeeper.run_scoring import main, run


def test_run_prints_sets_and_result(capsys):
    code = run(builtin_catalog(), "volleyball", ["25-20", "28-30", "15-13"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Best of 3 Sets" in out
    assert "Set 3" in out
    assert "[deciding]" in out
    assert "Outcome: win" in out
    assert "Sets: 2-1" in out


def test_run_period_overtime_hint(capsys):
    code = run(builtin_catalog(), "hockey", ["1-0", "0-1", "2-2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "P3" in out
    assert "Outcome: in_progress" in out
    assert "overtime" in out


def test_run_json_record(capsys):
    code = run(builtin_catalog(), "soccer", ["1-0", "0-0"], as_json=True)
    record = json.loads(capsys.readouterr().out)
    assert code == 0
    assert record["scoring_format"] == "two_halves"
    assert record["point_differential"] == 1


def test_run_rejects_bad_input(capsys):
    assert run(builtin_catalog(), "volleyball", ["25:20"]) == 2
    assert "error" in capsys.readouterr().out
    assert run(builtin_catalog(), "volleyball", ["25-20"], format_id="four_quarters") == 2


@pytest.fixture
def clean_config(monkeypatch):
    monkeypatch.delenv(config.CATALOG_PATH_ENV, raising=False)
    monkeypatch.delenv(config.DEFAULT_SPORT_ENV, raising=False)
    yield
    config.set_catalog_path(None)


def test_main_bad_catalog_file(clean_config, tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert main(["volleyball", "25-20", "--catalog", str(path)]) == 2
    assert capsys.readouterr().out.startswith("error:")


def test_main_bad_default_sport(clean_config, monkeypatch, capsys):
    monkeypatch.setenv(config.DEFAULT_SPORT_ENV, "curling")
    assert main(["volleyball", "25-20"]) == 2
    assert "error:" in capsys.readouterr().out


def test_main_log_level_choices(clean_config, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["volleyball", "--log-level", "LOUD"])
    assert exc.value.code == 2
    assert main(["volleyball", "25-20", "--log-level", "info"]) == 0
