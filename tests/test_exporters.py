"""Tests for roster export strategies."""

import csv

import pytest

from shift_roster.exporters import ExportStrategy, MatrixCSVExporter, SimpleCSVExporter
from shift_roster.models import CustomShift, Employee, ShiftKind

WEEK = ["2025-03-03", "2025-03-04", "2025-03-05"]


@pytest.fixture
def small_roster() -> list[Employee]:
    """Two employees; Bob is listed first to check name ordering."""
    return [
        Employee(
            id="e2",
            name="Bob",
            daily_hours=4,
            shifts={WEEK[0]: ShiftKind.EVENING, WEEK[1]: ShiftKind.NIGHT},
        ),
        Employee(
            id="e1",
            name="Alice",
            shifts={WEEK[0]: ShiftKind.MORNING, WEEK[2]: CustomShift("09:00", "13:30")},
        ),
    ]


def read_rows(path) -> list[list[str]]:
    with open(path, newline="") as f:
        return list(csv.reader(f))


class TestExportStrategy:
    """Tests for the abstract base class."""

    def test_cannot_instantiate_abstract_class(self, small_roster):
        """ExportStrategy cannot be instantiated directly."""
        with pytest.raises(TypeError):
            ExportStrategy(small_roster, WEEK)


class TestSimpleCSVExporter:
    """Tests for the long-format exporter."""

    def test_one_row_per_employee_per_day(self, small_roster, tmp_path):
        """Header plus employees x dates rows."""
        path = tmp_path / "roster.csv"
        SimpleCSVExporter(small_roster, WEEK).export(str(path))
        rows = read_rows(path)

        assert rows[0] == ["Date", "Day_of_Week", "Employee", "Shift"]
        assert len(rows) == 1 + len(small_roster) * len(WEEK)

    def test_rows_are_date_major_and_sorted_by_name(self, small_roster, tmp_path):
        """Dates in order; within a date, employees by name."""
        path = tmp_path / "roster.csv"
        SimpleCSVExporter(small_roster, WEEK).export(str(path))
        rows = read_rows(path)

        assert rows[1] == ["2025-03-03", "Mon", "Alice", "Morning"]
        assert rows[2] == ["2025-03-03", "Mon", "Bob", "Evening"]
        assert rows[3] == ["2025-03-04", "Tue", "Alice", "Off"]
        assert rows[5] == ["2025-03-05", "Wed", "Alice", "09:00 - 13:30"]

    def test_prints_confirmation(self, small_roster, tmp_path, capsys):
        """Export reports the output path."""
        path = tmp_path / "roster.csv"
        SimpleCSVExporter(small_roster, WEEK).export(str(path))
        assert str(path) in capsys.readouterr().out


class TestMatrixCSVExporter:
    """Tests for the employee x date matrix exporter."""

    def test_header(self, small_roster, tmp_path):
        """Employee column, one column per date, hours last."""
        path = tmp_path / "matrix.csv"
        MatrixCSVExporter(small_roster, WEEK).export(str(path))

        assert read_rows(path)[0] == [
            "Employee",
            "2025-03-03 Mon",
            "2025-03-04 Tue",
            "2025-03-05 Wed",
            "Actual_Hours",
        ]

    def test_rows(self, small_roster, tmp_path):
        """One row per employee with labels and actual hours."""
        path = tmp_path / "matrix.csv"
        MatrixCSVExporter(small_roster, WEEK).export(str(path))
        rows = read_rows(path)

        assert rows[1] == ["Alice", "Morning", "Off", "09:00 - 13:30", "12.5"]
        assert rows[2] == ["Bob", "Evening", "Night", "Off", "12"]
