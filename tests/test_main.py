"""Tests for the command line entry point."""

import csv
import sys
from pathlib import Path

import pytest

from shift_roster.main import main, parse_cli_shift
from shift_roster.models import CustomShift, ShiftKind

CLEAN_ROSTER = """
planning:
  year: 2025
  month: 3
  seed: 5
employees:
  - id: e1
    name: Alice
    shifts:
      2025-03-06: Morning
  - id: e2
    name: Bob
    daily_hours: 4
"""


@pytest.fixture
def config_path(tmp_path) -> Path:
    path = tmp_path / "roster.yaml"
    path.write_text(CLEAN_ROSTER)
    return path


def run_cli(monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["shift-roster", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


class TestParseCliShift:
    """Tests for shift arguments."""

    def test_time_range(self):
        """HH:mm-HH:mm becomes a custom shift."""
        assert parse_cli_shift("13:00-15:00") == CustomShift("13:00", "15:00")

    def test_name(self):
        """Anything else is a shift name."""
        assert parse_cli_shift("sick leave") is ShiftKind.SICK_LEAVE


class TestMain:
    """Tests for end-to-end CLI runs."""

    def test_clean_roster_exits_zero(self, monkeypatch, config_path, capsys):
        """No conflicts, exit code 0."""
        assert run_cli(monkeypatch, str(config_path), "--quiet") == 0
        assert "No shift conflicts" in capsys.readouterr().out

    def test_night_before_morning_exits_one(self, monkeypatch, config_path, capsys):
        """A manual Night that breaks the rest rule fails the run."""
        code = run_cli(
            monkeypatch, str(config_path), "--quiet", "--set", "e1", "2025-03-05", "Night"
        )
        out = capsys.readouterr().out

        assert code == 1
        assert "Insufficient rest after night shift on 2025-03-05" in out

    def test_overlap_warning(self, monkeypatch, config_path, capsys):
        """Overlapping edits are warned about before being applied."""
        run_cli(
            monkeypatch,
            str(config_path),
            "--quiet",
            "--set",
            "e1",
            "2025-03-06",
            "13:00-15:00",
        )
        assert "overlaps with existing Morning" in capsys.readouterr().out

    def test_auto_generate_and_export(self, monkeypatch, config_path, tmp_path):
        """Generated month exported as a matrix covers every date."""
        out_path = tmp_path / "out.csv"
        code = run_cli(
            monkeypatch,
            str(config_path),
            "--quiet",
            "--auto-generate",
            "--export-csv",
            str(out_path),
            "--matrix",
        )

        with open(out_path, newline="") as f:
            rows = list(csv.reader(f))

        assert code == 0
        assert len(rows) == 3
        assert len(rows[0]) == 1 + 31 + 1
        assert all(cell in ("Morning", "Evening", "Off") for cell in rows[2][1:-1])

    def test_missing_file(self, monkeypatch, tmp_path, capsys):
        """Missing config is reported on stderr."""
        assert run_cli(monkeypatch, str(tmp_path / "nope.yaml")) == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_shift_argument(self, monkeypatch, config_path, capsys):
        """Unknown shift names fail with a tip."""
        code = run_cli(monkeypatch, str(config_path), "--set", "e1", "2025-03-05", "Brunch")

        assert code == 1
        assert "Shift Error" in capsys.readouterr().err

    def test_unknown_employee(self, monkeypatch, config_path, capsys):
        """Editing an unknown employee is a validation error."""
        code = run_cli(monkeypatch, str(config_path), "--set", "e9", "2025-03-05", "Night")

        assert code == 1
        assert "not found" in capsys.readouterr().err
