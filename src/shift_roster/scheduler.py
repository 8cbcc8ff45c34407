"""
Automatic monthly schedule generation.

Works week by week (ISO weeks, Monday-Sunday). Each week the employees with
the fewest hours so far are handled first, rest days are spread so the floor
is never empty, and working employees are split between Morning and Evening.
Night shifts are never generated; they are left for manual entry.
"""

import logging
import math
import random
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .dates import group_by_iso_week, is_weekend
from .exceptions import EmptyRosterError
from .hours import count_working_days, expected_hours, holidays_for_dates
from .models import Employee, ScheduleResult, ShiftKind, ShiftValue

logger = logging.getLogger(__name__)

MIN_EMPLOYEES = 1

# Employees on this contract hold another job in the mornings
EVENING_ONLY_DAILY_HOURS = 4

# (minimum headcount, morning slots) for weekend days, largest first
WEEKEND_MORNING_TARGETS = [(9, 3), (4, 2), (0, 1)]


def rest_days_target(week_length: int) -> int:
    """Rest days owed for a week of the given length (partial at month edges)."""
    if week_length >= 5:
        return 2
    if week_length >= 3:
        return 1
    return 0


def weekend_morning_target(headcount: int) -> int:
    """Morning slots on a weekend day for the given number of working people."""
    for minimum, mornings in WEEKEND_MORNING_TARGETS:
        if headcount >= minimum:
            return mornings
    return 1


class AutoScheduler:
    """Generates a full month of shifts for a roster snapshot."""

    def __init__(
        self,
        employees: Sequence[Employee],
        dates: Sequence[str],
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            employees: Roster snapshot; not modified
            dates: ISO dates to fill, normally one calendar month
            rng: Random source for tie-breaking; seed it for repeatable output

        Raises:
            EmptyRosterError: If the roster is empty
        """
        if len(employees) < MIN_EMPLOYEES:
            raise EmptyRosterError(
                f"Cannot generate a schedule with fewer than {MIN_EMPLOYEES} employee(s)"
            )

        self.employees = list(employees)
        self.dates = list(dates)
        self.rng = rng if rng is not None else random.Random()
        self.assignments: Dict[str, Dict[str, ShiftValue]] = {}
        self.accumulated_hours: Dict[str, float] = {}
        self.rest_days: Dict[str, List[str]] = {}
        self.emergency_overrides: List[Tuple[str, str]] = []

    def generate(self) -> ScheduleResult:
        """
        Run the weekly passes and return the full run record.

        Returns:
            ScheduleResult with a shift for every employee on every date
        """
        self._reset()

        for (iso_year, iso_week), week_days in group_by_iso_week(self.dates).items():
            logger.debug(
                "Scheduling ISO week %d-W%02d (%d days)", iso_year, iso_week, len(week_days)
            )
            self._schedule_week(week_days)

        return self._extract_results()

    def rest_cap(self) -> int:
        """Most employees allowed to rest on one day."""
        count = len(self.employees)
        if count >= 3:
            return count - 2
        return count - 1

    def _reset(self) -> None:
        self.assignments = {emp.id: {} for emp in self.employees}
        self.accumulated_hours = {emp.id: 0.0 for emp in self.employees}
        self.rest_days = {emp.id: [] for emp in self.employees}
        self.emergency_overrides = []

    def _schedule_week(self, week_days: List[str]) -> None:
        ordered = self._order_by_hours()
        resting = self._allocate_rest_days(ordered, week_days)

        for day in week_days:
            self._assign_day(day, ordered, resting)

        for emp in ordered:
            self.rest_days[emp.id].extend(d for d in week_days if d in resting[emp.id])

    def _order_by_hours(self) -> List[Employee]:
        """Fewest accumulated hours first; ties broken by the random source."""
        shuffled = list(self.employees)
        self.rng.shuffle(shuffled)
        return sorted(shuffled, key=lambda emp: self.accumulated_hours[emp.id])

    def _allocate_rest_days(
        self, ordered: List[Employee], week_days: List[str]
    ) -> Dict[str, Set[str]]:
        """Pick rest days per employee, respecting the per-day rest cap."""
        target = rest_days_target(len(week_days))
        cap = self.rest_cap()
        rest_counts = {day: 0 for day in week_days}
        resting: Dict[str, Set[str]] = {}

        for emp in ordered:
            chosen: Set[str] = set()
            candidates = list(week_days)
            self.rng.shuffle(candidates)

            for day in candidates:
                if len(chosen) >= target:
                    break
                if rest_counts[day] < cap:
                    chosen.add(day)
                    rest_counts[day] += 1

            if len(chosen) < target:
                logger.debug(
                    "%s gets %d of %d rest days this week", emp.name, len(chosen), target
                )
            resting[emp.id] = chosen

        return resting

    def _assign_day(
        self, day: str, ordered: List[Employee], resting: Dict[str, Set[str]]
    ) -> None:
        available = [emp for emp in ordered if day not in resting[emp.id]]

        if not available:
            worker = min(ordered, key=lambda emp: self.accumulated_hours[emp.id])
            resting[worker.id].discard(day)
            self.emergency_overrides.append((worker.id, day))
            logger.warning(
                "Nobody available on %s, %s works instead of resting", day, worker.name
            )
            available = [worker]

        for emp in ordered:
            if day in resting[emp.id]:
                self.assignments[emp.id][day] = ShiftKind.OFF

        evening_only = [e for e in available if e.daily_hours == EVENING_ONLY_DAILY_HOURS]
        standard = [e for e in available if e.daily_hours != EVENING_ONLY_DAILY_HOURS]

        for emp in evening_only:
            self._assign(emp, day, ShiftKind.EVENING)

        if is_weekend(day):
            morning_slots = weekend_morning_target(len(available))
        else:
            morning_slots = math.ceil(len(standard) / 2)

        for index, emp in enumerate(standard):
            kind = ShiftKind.MORNING if index < morning_slots else ShiftKind.EVENING
            self._assign(emp, day, kind)

        logger.debug(
            "%s: %d working, %d resting",
            day,
            len(available),
            len(ordered) - len(available),
        )

    def _assign(self, emp: Employee, day: str, kind: ShiftKind) -> None:
        self.assignments[emp.id][day] = kind
        self.accumulated_hours[emp.id] += emp.daily_hours

    def _extract_results(self) -> ScheduleResult:
        holidays = holidays_for_dates(self.dates)
        working_days = count_working_days(self.dates, holidays)
        expected = {
            emp.id: expected_hours(emp, self.dates, working_days)
            for emp in self.employees
        }

        for emp in self.employees:
            logger.debug(
                "%s: %.1fh scheduled, %.1fh expected",
                emp.name,
                self.accumulated_hours[emp.id],
                expected[emp.id],
            )

        return ScheduleResult(
            assignments=self.assignments,
            accumulated_hours=self.accumulated_hours,
            expected_hours=expected,
            rest_days=self.rest_days,
            emergency_overrides=self.emergency_overrides,
        )


def auto_generate_schedule(
    employees: Sequence[Employee],
    dates: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Dict[str, Dict[str, ShiftValue]]:
    """
    Generate shifts for every employee on every date.

    Returns:
        Mapping of employee id to a mapping of ISO date to shift

    Raises:
        EmptyRosterError: If the roster is empty
    """
    return AutoScheduler(employees, dates, rng).generate().assignments
