"""
Reporting and output formatting for roster schedules.
"""

from typing import List, Optional, Sequence

import pandas as pd

from .conflicts import list_conflicts
from .dates import from_iso, get_public_holidays
from .hours import compute_employee_work_hours, compute_total_work_hours
from .models import Employee, ScheduleResult
from .shifts import shift_label
from .updates import change_severity


class ScheduleReporter:
    """Formats and displays a month of shifts for a roster."""

    def __init__(
        self,
        employees: Sequence[Employee],
        dates: Sequence[str],
        result: Optional[ScheduleResult] = None,
    ):
        self.employees = list(employees)
        self.dates = list(dates)
        self.result = result

    def schedule_frame(self) -> pd.DataFrame:
        """Employees as rows, dates as columns, shift labels as cells."""
        rows = [
            [shift_label(emp.shift_on(d)) for d in self.dates] for emp in self.employees
        ]
        index = pd.Index([emp.name for emp in self.employees], name="Employee")
        return pd.DataFrame(rows, index=index, columns=self.dates)

    def hours_frame(self) -> pd.DataFrame:
        """Expected vs. actual hours per employee."""
        data = []
        for emp in self.employees:
            stats = compute_employee_work_hours(emp, self.dates)
            data.append(
                {
                    "Employee": emp.name,
                    "Daily Hours": emp.daily_hours,
                    "Expected": stats.expected,
                    "Actual": stats.actual,
                    "Balance": stats.balance,
                    "Overworked": "YES" if stats.is_overworked else "",
                    "Edits": sum(emp.changed_shifts.get(d, 0) for d in self.dates),
                }
            )

        columns = ["Employee", "Daily Hours", "Expected", "Actual", "Balance", "Overworked", "Edits"]
        return pd.DataFrame(data, columns=columns).set_index("Employee")

    def conflict_lines(self) -> List[str]:
        """One line per conflict, sorted by date."""
        return [
            f"{c.date} {c.employee_name:12s} {shift_label(c.shift):14s} {c.reason}"
            for c in list_conflicts(self.employees, self.dates)
        ]

    def print_report(self, quiet: bool = False) -> None:
        """Print complete roster report."""
        self._print_header()

        if not quiet:
            self._print_schedule()
            self._print_frequent_edits()

        self._print_hours_summary()
        self._print_conflicts()

    def _print_title(self, title: str) -> None:
        print("=" * 80)
        print(title)
        print("=" * 80)

    def _print_header(self) -> None:
        """Print report header."""
        self._print_title("MONTHLY ROSTER")

        if self.dates:
            print(f"\nPeriod: {self.dates[0]} to {self.dates[-1]}")
            holidays = get_public_holidays(from_iso(self.dates[0]).year)
            in_period = sorted(d for d in self.dates if d in holidays)
            print(f"Public holidays: {', '.join(in_period) if in_period else 'none'}")
        print(f"Employees: {len(self.employees)}")

        if self.result is not None and self.result.emergency_overrides:
            print(
                f"Emergency coverage overrides: {len(self.result.emergency_overrides)}"
            )
        print()

    def _print_schedule(self) -> None:
        """Print the employee x date grid, one block per ISO week."""
        self._print_title("SCHEDULE")

        df = self.schedule_frame()
        if df.empty:
            print("\n  No shifts to show")
            print()
            return

        # Short column headers keep a week on one screen line
        df.columns = [from_iso(d).strftime("%d %a") for d in self.dates]
        for start in range(0, len(df.columns), 7):
            print(df.iloc[:, start : start + 7].to_string())
            print()

    def _print_hours_summary(self) -> None:
        """Print work hour accounting per employee."""
        self._print_title("WORK HOURS")

        df = self.hours_frame()
        pd.options.display.float_format = "{:.1f}".format
        print(df.to_string())
        print(f"\nTotal actual hours: {compute_total_work_hours(self.employees, self.dates)}")
        print()

    def _print_frequent_edits(self) -> None:
        """Print cells edited often enough to be flagged."""
        flagged = [
            (emp.name, d, count)
            for emp in self.employees
            for d, count in sorted(emp.changed_shifts.items())
            if change_severity(count) != "low"
        ]
        if not flagged:
            return

        self._print_title("FREQUENTLY CHANGED SHIFTS")
        for name, d, count in flagged:
            print(f"  {name:12s} {d}: changed {count} times ({change_severity(count)})")
        print()

    def _print_conflicts(self) -> None:
        """Print conflict listing."""
        self._print_title("CONFLICTS")

        lines = self.conflict_lines()
        if not lines:
            print("\n✓ No shift conflicts")
            print()
            return

        print(f"\n{len(lines)} conflict(s) need attention:")
        for line in lines:
            print(f"  {line}")
        print()
