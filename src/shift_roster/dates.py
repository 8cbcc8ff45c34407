"""
Calendar helpers: month enumeration, ISO week grouping and public holidays.
"""

import calendar
from datetime import date, timedelta
from functools import lru_cache
from typing import Dict, List, Set, Tuple

# (month, day) pairs observed every year
FIXED_HOLIDAYS = [
    (1, 1),  # New Year's Day
    (3, 3),  # Liberation Day
    (5, 1),  # Labour Day
    (5, 6),  # St George's Day
    (5, 24),  # Day of Culture and Literacy
    (9, 6),  # Unification Day
    (9, 22),  # Independence Day
    (12, 24),  # Christmas Eve
    (12, 25),  # Christmas Day
    (12, 26),  # Second day of Christmas
]

# Offsets from Easter Sunday: Good Friday, Holy Saturday, Easter, Easter Monday
EASTER_OFFSETS = [-2, -1, 0, 1]


def to_iso(d: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return d.isoformat()


def from_iso(value: str) -> date:
    """Parse a YYYY-MM-DD string into a date."""
    return date.fromisoformat(value)


def generate_month_days(year: int, month: int) -> List[str]:
    """
    Enumerate every calendar day of a month as ISO strings.

    Args:
        year: Four-digit year
        month: Zero-based month index (0 = January, 11 = December)

    Returns:
        Ordered list of YYYY-MM-DD strings, first to last day of the month
    """
    if not 0 <= month <= 11:
        raise ValueError(f"Month index must be between 0 and 11, got {month}")

    first = date(year, month + 1, 1)
    days_in_month = calendar.monthrange(year, month + 1)[1]
    return [to_iso(first + timedelta(days=k)) for k in range(days_in_month)]


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Gregorian / Meeus algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    wd = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * wd) // 451
    month, day = divmod(h + wd - 7 * m + 114, 31)
    return date(year, month, day + 1)


@lru_cache(maxsize=32)
def _holidays_for_year(year: int) -> frozenset:
    fixed = {to_iso(date(year, month, day)) for month, day in FIXED_HOLIDAYS}
    easter = easter_sunday(year)
    movable = {to_iso(easter + timedelta(days=offset)) for offset in EASTER_OFFSETS}
    return frozenset(fixed | movable)


def get_public_holidays(year: int) -> Set[str]:
    """
    Public holidays for a year as ISO date strings.

    Returns a fresh set on every call, so callers may mutate it freely.
    """
    return set(_holidays_for_year(year))


def is_weekend(iso_date: str) -> bool:
    """Saturday or Sunday."""
    return from_iso(iso_date).weekday() >= 5


def is_working_day(iso_date: str, holidays: Set[str]) -> bool:
    """Neither a weekend nor a public holiday."""
    return not is_weekend(iso_date) and iso_date not in holidays


def shift_iso(iso_date: str, days: int) -> str:
    """Move an ISO date by a number of days, crossing month/year boundaries."""
    return to_iso(from_iso(iso_date) + timedelta(days=days))


def group_by_iso_week(dates: List[str]) -> Dict[Tuple[int, int], List[str]]:
    """
    Group dates into ISO calendar weeks (Monday-Sunday).

    Keys are (iso_year, iso_week) so a week that straddles New Year stays
    distinct from the same week number in another year. Groups keep the
    order in which they first appear in ``dates``.
    """
    weeks: Dict[Tuple[int, int], List[str]] = {}
    for iso_date in dates:
        iso_year, iso_week, _ = from_iso(iso_date).isocalendar()
        weeks.setdefault((iso_year, iso_week), []).append(iso_date)
    return weeks
