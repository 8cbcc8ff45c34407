"""
Work-hour accounting: expected contracted hours vs. actual scheduled hours.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Set

from .dates import from_iso, get_public_holidays, is_working_day
from .models import Employee, WorkHourStats
from .shifts import shift_duration


def round_hours(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def holidays_for_dates(dates: List[str]) -> Set[str]:
    """Public holidays for the year of the first date (empty when no dates)."""
    if not dates:
        return set()
    return get_public_holidays(from_iso(dates[0]).year)


def count_working_days(dates: List[str], holidays: Optional[Set[str]] = None) -> int:
    """Count dates that are neither weekend days nor public holidays."""
    if holidays is None:
        holidays = holidays_for_dates(dates)
    return sum(1 for d in dates if is_working_day(d, holidays))


def expected_hours(
    employee: Employee, dates: List[str], working_days: Optional[int] = None
) -> float:
    """
    Contracted hours for the period.

    A manual ``max_monthly_hours`` override wins verbatim; otherwise working
    days times the employee's daily hours.
    """
    if employee.max_monthly_hours is not None:
        return employee.max_monthly_hours
    if working_days is None:
        working_days = count_working_days(dates)
    return working_days * employee.daily_hours


def actual_hours(employee: Employee, dates: Iterable[str]) -> float:
    """Sum of shift durations over the dates, rounded to one decimal."""
    total = sum(
        shift_duration(employee.shifts.get(d), employee.daily_hours) for d in dates
    )
    return round_hours(total)


def compute_employee_work_hours(employee: Employee, dates: List[str]) -> WorkHourStats:
    """
    Expected vs. actual hours for one employee over a list of dates.

    Missing shift entries count as Off. The result depends only on the
    current ``employee.shifts`` snapshot and ``dates``.
    """
    expected = expected_hours(employee, dates)
    actual = actual_hours(employee, dates)
    return WorkHourStats(expected=expected, actual=actual, is_overworked=actual > expected)


def compute_total_work_hours(employees: Iterable[Employee], dates: List[str]) -> float:
    """Actual hours summed across a roster."""
    return round_hours(sum(actual_hours(emp, dates) for emp in employees))
