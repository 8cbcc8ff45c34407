"""Tests for work-hour accounting."""

import pytest

from shift_roster.hours import (
    compute_employee_work_hours,
    compute_total_work_hours,
    count_working_days,
    round_hours,
)
from shift_roster.models import CustomShift, Employee, ShiftKind

# Monday to Friday, no holidays
WORK_WEEK = ["2026-01-12", "2026-01-13", "2026-01-14", "2026-01-15", "2026-01-16"]


class TestCountWorkingDays:
    """Tests for working-day counting."""

    def test_month_without_holidays(self, june_2026):
        """Thirty-day month starting Monday has 22 working days."""
        assert count_working_days(june_2026) == 22

    def test_weekday_holiday_is_excluded(self, march_2025):
        """3 March 2025 is a Monday holiday."""
        assert count_working_days(march_2025) == 20

    def test_explicit_holidays(self):
        """Caller-supplied holidays replace the calendar lookup."""
        assert count_working_days(WORK_WEEK, {"2026-01-14"}) == 4

    def test_empty_dates(self):
        """No dates means no working days."""
        assert count_working_days([]) == 0


class TestComputeEmployeeWorkHours:
    """Tests for expected vs. actual hours."""

    def test_expected_is_working_days_times_daily_hours(self, june_2026, full_timer):
        """Nothing scheduled: 176 expected, 0 actual, not overworked."""
        stats = compute_employee_work_hours(full_timer, june_2026)

        assert stats.expected == 176
        assert stats.actual == 0
        assert not stats.is_overworked

    def test_override_wins_verbatim(self, june_2026):
        """max_monthly_hours replaces the computed expectation."""
        emp = Employee(id="e1", name="A", daily_hours=8, max_monthly_hours=100)
        assert compute_employee_work_hours(emp, june_2026).expected == 100

    def test_zero_override_is_respected(self, june_2026):
        """An override of 0 is still an override."""
        emp = Employee(id="e1", name="A", max_monthly_hours=0)
        assert compute_employee_work_hours(emp, june_2026).expected == 0

    def test_nights_overwork_part_timer(self):
        """Night is a flat 8h, so a 4h contract is exceeded."""
        emp = Employee(
            id="e1",
            name="A",
            daily_hours=4,
            shifts={d: ShiftKind.NIGHT for d in WORK_WEEK},
        )
        stats = compute_employee_work_hours(emp, WORK_WEEK)

        assert stats.expected == 20
        assert stats.actual == 40
        assert stats.is_overworked

    def test_exactly_expected_is_not_overworked(self):
        """Overwork is strictly more than expected."""
        emp = Employee(
            id="e1", name="A", shifts={d: ShiftKind.MORNING for d in WORK_WEEK}
        )
        stats = compute_employee_work_hours(emp, WORK_WEEK)

        assert stats.actual == stats.expected == 40
        assert not stats.is_overworked

    def test_mixed_shift_kinds(self):
        """Durations follow each shift's own rule."""
        emp = Employee(
            id="e1",
            name="A",
            daily_hours=6,
            shifts={
                WORK_WEEK[0]: ShiftKind.MORNING,
                WORK_WEEK[1]: ShiftKind.VACATION,
                WORK_WEEK[2]: ShiftKind.SICK_LEAVE,
                WORK_WEEK[3]: CustomShift("09:00", "13:30"),
            },
        )
        assert compute_employee_work_hours(emp, WORK_WEEK).actual == 18.5

    def test_shifts_outside_dates_are_ignored(self):
        """Only the requested dates are counted."""
        emp = Employee(id="e1", name="A", shifts={"2026-02-02": ShiftKind.MORNING})
        assert compute_employee_work_hours(emp, WORK_WEEK).actual == 0

    def test_empty_dates(self, full_timer):
        """No dates: zero expected and actual."""
        stats = compute_employee_work_hours(full_timer, [])
        assert stats.expected == 0
        assert stats.actual == 0


class TestRounding:
    """Tests for one-decimal rounding."""

    @pytest.mark.parametrize(
        "value,expected", [(0.05, 0.1), (0.25, 0.3), (1.24, 1.2), (8.0, 8.0)]
    )
    def test_round_half_up(self, value: float, expected: float):
        """Halves round away from zero."""
        assert round_hours(value) == expected

    def test_custom_fractions_round(self):
        """A 5-minute custom shift is reported as 0.1h."""
        emp = Employee(
            id="e1", name="A", shifts={WORK_WEEK[0]: CustomShift("09:00", "09:05")}
        )
        assert compute_employee_work_hours(emp, WORK_WEEK).actual == 0.1


class TestTotalWorkHours:
    """Tests for roster-wide totals."""

    def test_sum_across_roster(self, make_roster):
        """Actual hours add up across employees."""
        roster = make_roster(3, daily_hours=6)
        for emp in roster:
            emp.shifts = {d: ShiftKind.EVENING for d in WORK_WEEK[:2]}
        assert compute_total_work_hours(roster, WORK_WEEK) == 36
