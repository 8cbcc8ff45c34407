"""
Shift conflict detection.

Two entry points: a pairwise overlap check for a proposed edit, and a batch
pass over a roster that reports rule violations per (employee, date) cell.
Both are pure and return fresh results on every call.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .dates import shift_iso
from .models import CustomShift, Employee, ShiftConflict, ShiftKind, ShiftValue
from .shifts import is_working_shift, shift_label, shift_time_range

logger = logging.getLogger(__name__)

# Days after a night shift that must be free of working shifts
NIGHT_REST_DAYS = 2

REASON_SEPARATOR = "; "


def conflict_key(employee_id: str, iso_date: str) -> str:
    """Key used in the conflict map: ``"{employee_id}-{date}"``."""
    return f"{employee_id}-{iso_date}"


def detect_shift_conflict(
    employee: Employee, iso_date: str, proposed: Optional[ShiftValue]
) -> Optional[str]:
    """
    Check a proposed shift against the employee's existing shift on the same date.

    Returns:
        A reason string if the two time ranges overlap, otherwise None
    """
    existing = employee.shifts.get(iso_date)
    if not is_working_shift(existing) or not is_working_shift(proposed):
        return None

    existing_range = shift_time_range(existing)
    proposed_range = shift_time_range(proposed)
    if existing_range.overlaps(proposed_range):
        return (
            f"Shift {shift_label(proposed)} overlaps with existing "
            f"{shift_label(existing)} shift ({existing_range})"
        )
    return None


def detect_all_shift_conflicts(
    employees: Iterable[Employee], dates: Iterable[str]
) -> Dict[str, str]:
    """
    Find rule violations across a roster.

    Rules:
        - A custom shift must end after it starts.
        - The two calendar days after a night shift must not hold a working
          shift. The violation is reported on the later day.

    When several rules hit the same cell, all reasons are kept, joined with
    ``"; "``: the invalid custom range first, then rest violations in the
    order of the night shifts that cause them.

    Returns:
        Mapping of ``"{employee_id}-{date}"`` to a human-readable reason
    """
    dates = list(dates)
    reasons: Dict[str, List[str]] = {}

    for emp in employees:
        for iso_date in dates:
            shift = emp.shifts.get(iso_date)
            if isinstance(shift, CustomShift) and not shift.has_valid_range:
                reasons.setdefault(conflict_key(emp.id, iso_date), []).insert(
                    0, "End time must be after start time"
                )

            if shift != ShiftKind.NIGHT:
                continue

            for offset in range(1, NIGHT_REST_DAYS + 1):
                later = shift_iso(iso_date, offset)
                if is_working_shift(emp.shifts.get(later)):
                    reasons.setdefault(conflict_key(emp.id, later), []).append(
                        f"Insufficient rest after night shift on {iso_date}"
                    )

    if reasons:
        logger.debug("Detected conflicts in %d cells", len(reasons))

    return {key: REASON_SEPARATOR.join(items) for key, items in reasons.items()}


def list_conflicts(
    employees: Iterable[Employee], dates: Iterable[str]
) -> List[ShiftConflict]:
    """Conflicts as records, sorted by date then employee name."""
    employees = list(employees)
    dates = list(dates)
    conflict_map = detect_all_shift_conflicts(employees, dates)

    records = []
    for emp in employees:
        for iso_date in _dates_with_conflicts(emp, conflict_map):
            records.append(
                ShiftConflict(
                    employee_id=emp.id,
                    employee_name=emp.name,
                    date=iso_date,
                    shift=emp.shifts.get(iso_date),
                    reason=conflict_map[conflict_key(emp.id, iso_date)],
                )
            )

    records.sort(key=lambda c: (c.date, c.employee_name))
    return records


def _dates_with_conflicts(employee: Employee, conflict_map: Dict[str, str]) -> List[str]:
    # Rest violations can land after the last requested date, so read dates
    # back out of the keys. ISO dates are fixed width.
    found = []
    for key in conflict_map:
        iso_date = key[-10:]
        if key == conflict_key(employee.id, iso_date):
            found.append(iso_date)
    return found
