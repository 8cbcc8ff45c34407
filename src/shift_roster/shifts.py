"""
Shift rules: duration, time ranges, display labels and parsing from plain data.
"""

import re
from typing import Any, Dict, Optional, Union

from .exceptions import InvalidShiftError
from .models import CustomShift, ShiftKind, ShiftValue, TimeRange

# Kinds that take no time on the clock and never conflict
NON_WORKING_KINDS = frozenset({ShiftKind.OFF, ShiftKind.SICK_LEAVE, ShiftKind.VACATION})

FLAT_HOURS = {
    ShiftKind.OFF: 0.0,
    ShiftKind.SICK_LEAVE: 0.0,
    ShiftKind.VACATION: 8.0,
    ShiftKind.NIGHT: 8.0,
}

TIME_RANGES = {
    ShiftKind.MORNING: TimeRange(6 * 60, 14 * 60),
    ShiftKind.EVENING: TimeRange(14 * 60, 22 * 60),
    ShiftKind.NIGHT: TimeRange(22 * 60, 30 * 60),
}

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

_KIND_ALIASES = {kind.value.lower().replace(" ", ""): kind for kind in ShiftKind}


def is_working_shift(shift: Optional[ShiftValue]) -> bool:
    """True for shifts that occupy clock time (Morning, Evening, Night, Custom)."""
    if shift is None:
        return False
    if isinstance(shift, CustomShift):
        return True
    return ShiftKind(shift) not in NON_WORKING_KINDS


def shift_duration(shift: Optional[ShiftValue], daily_hours: int) -> float:
    """
    Hours credited for a shift.

    Morning and Evening follow the employee's contracted daily hours; Night and
    Vacation are a flat 8h; Off and Sick Leave are 0h; Custom is its literal
    span in fractional hours. A missing entry counts as Off.
    """
    if shift is None:
        return 0.0
    if isinstance(shift, CustomShift):
        return (shift.end_minutes - shift.start_minutes) / 60
    kind = ShiftKind(shift)
    if kind in (ShiftKind.MORNING, ShiftKind.EVENING):
        return float(daily_hours)
    return FLAT_HOURS[kind]


def shift_time_range(shift: Optional[ShiftValue]) -> Optional[TimeRange]:
    """Clock range used for overlap checks; None for non-working shifts."""
    if shift is None:
        return None
    if isinstance(shift, CustomShift):
        return TimeRange(shift.start_minutes, shift.end_minutes)
    return TIME_RANGES.get(ShiftKind(shift))


def shift_label(shift: Optional[ShiftValue]) -> str:
    """Display text for a shift."""
    if shift is None:
        return ShiftKind.OFF.value
    if isinstance(shift, CustomShift):
        return f"{shift.start_time} - {shift.end_time}"
    return ShiftKind(shift).value


def parse_time(value: Any) -> str:
    """
    Validate an HH:mm time string.

    Raises:
        InvalidShiftError: If the value is not a 24h HH:mm string
    """
    if not isinstance(value, str) or not _TIME_PATTERN.match(value.strip()):
        raise InvalidShiftError(
            f"Time must be in HH:mm format (00:00-23:59), got: {value!r}"
        )
    return value.strip()


def make_custom_shift(start_time: Any, end_time: Any) -> CustomShift:
    """
    Build a custom shift from raw times.

    Raises:
        InvalidShiftError: If a time is malformed or end is not after start
    """
    shift = CustomShift(start_time=parse_time(start_time), end_time=parse_time(end_time))
    if not shift.has_valid_range:
        raise InvalidShiftError(
            f"Custom shift end time {shift.end_time} must be after "
            f"start time {shift.start_time}"
        )
    return shift


def parse_shift_value(raw: Union[str, Dict[str, Any], ShiftValue]) -> ShiftValue:
    """
    Convert plain data into a ShiftValue.

    Accepts a shift name ("Morning", "sick leave", "SickLeave", ...) or a
    mapping ``{"type": "Custom", "start_time": "HH:mm", "end_time": "HH:mm"}``.

    Raises:
        InvalidShiftError: If the value cannot be interpreted
    """
    if isinstance(raw, (ShiftKind, CustomShift)):
        return raw

    if isinstance(raw, str):
        kind = _KIND_ALIASES.get(raw.strip().lower().replace(" ", "").replace("_", ""))
        if kind is None:
            raise InvalidShiftError(
                f"Unknown shift type: '{raw}'. "
                f"Valid types: {', '.join(k.value for k in ShiftKind)}, Custom"
            )
        return kind

    if isinstance(raw, dict):
        shift_type = str(raw.get("type", "")).strip().lower()
        if shift_type != "custom":
            raise InvalidShiftError(
                f"Mapping shifts must have type 'Custom', got: {raw.get('type')!r}"
            )
        return make_custom_shift(raw.get("start_time"), raw.get("end_time"))

    raise InvalidShiftError(f"Cannot interpret shift value: {raw!r}")


def shift_to_data(shift: ShiftValue) -> Union[str, Dict[str, str]]:
    """Plain-data form of a shift, the inverse of parse_shift_value."""
    if isinstance(shift, CustomShift):
        return {
            "type": "Custom",
            "start_time": shift.start_time,
            "end_time": shift.end_time,
        }
    return ShiftKind(shift).value
