"""
Roster snapshot updates: single shift edits and bulk merges of generated shifts.

Every function returns new Employee objects and leaves its inputs untouched,
so callers can hand the previous snapshot to the conflict detector or discard it.
"""

from dataclasses import replace
from typing import Dict, List, Mapping, Optional, Sequence

from .models import Employee, ShiftValue

# Edit counts at which a cell is flagged as frequently changed
MEDIUM_CHANGE_THRESHOLD = 3
HIGH_CHANGE_THRESHOLD = 6


def apply_shift_change(
    employee: Employee,
    iso_date: str,
    shift: ShiftValue,
    message: Optional[str] = None,
) -> Employee:
    """
    Set a shift for one date.

    The change counter for the date only goes up when a shift was already
    there. A message is stored alongside the edit; an explicit ``None``
    removes any earlier message for that date.
    """
    shifts = dict(employee.shifts)
    changed = dict(employee.changed_shifts)
    messages = dict(employee.shift_messages)

    if employee.has_shift(iso_date):
        changed[iso_date] = changed.get(iso_date, 0) + 1

    shifts[iso_date] = shift

    if message is None:
        messages.pop(iso_date, None)
    else:
        messages[iso_date] = message

    return replace(
        employee, shifts=shifts, changed_shifts=changed, shift_messages=messages
    )


def change_severity(change_count: int) -> str:
    """Grade how often a cell was edited: ``low``, ``medium`` or ``high``."""
    if change_count >= HIGH_CHANGE_THRESHOLD:
        return "high"
    if change_count >= MEDIUM_CHANGE_THRESHOLD:
        return "medium"
    return "low"


def apply_generated_schedule(
    employees: Sequence[Employee],
    assignments: Mapping[str, Mapping[str, ShiftValue]],
) -> List[Employee]:
    """
    Merge generated shifts onto a roster.

    Generated dates overwrite existing entries; dates outside the generated
    range are kept. Change counters and messages are not touched, since a
    bulk generation is not a manual edit.
    """
    merged = []
    for emp in employees:
        generated: Dict[str, ShiftValue] = dict(assignments.get(emp.id, {}))
        if not generated:
            merged.append(emp)
            continue
        merged.append(replace(emp, shifts={**emp.shifts, **generated}))
    return merged
