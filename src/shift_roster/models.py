"""
Data models for the shift roster engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

VALID_DAILY_HOURS = (4, 6, 8)


class ShiftKind(str, Enum):
    """Named shift variants. Compares equal to its plain string value."""

    MORNING = "Morning"
    EVENING = "Evening"
    NIGHT = "Night"
    OFF = "Off"
    SICK_LEAVE = "Sick Leave"
    VACATION = "Vacation"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomShift:
    """A shift with explicit start/end times in HH:mm format."""

    start_time: str
    end_time: str

    @property
    def start_minutes(self) -> int:
        """Minutes since midnight for the start time."""
        return _to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        """Minutes since midnight for the end time."""
        return _to_minutes(self.end_time)

    @property
    def has_valid_range(self) -> bool:
        """Custom shifts never wrap past midnight."""
        return self.end_minutes > self.start_minutes


ShiftValue = Union[ShiftKind, CustomShift]


def _to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


@dataclass(frozen=True)
class TimeRange:
    """Half-open interval in minutes on a 0-30h scale (night shifts wrap past 24h)."""

    start: int
    end: int

    def overlaps(self, other: "TimeRange") -> bool:
        """Check if this range overlaps with another."""
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{_format_minutes(self.start)}-{_format_minutes(self.end)}"


def _format_minutes(total: int) -> str:
    hours, minutes = divmod(total % (24 * 60), 60)
    return f"{hours:02d}:{minutes:02d}"


@dataclass
class Employee:
    """An employee on the roster with their shifts keyed by ISO date."""

    id: str
    name: str
    daily_hours: int = 8
    max_monthly_hours: Optional[float] = None
    shifts: Dict[str, ShiftValue] = field(default_factory=dict)
    changed_shifts: Dict[str, int] = field(default_factory=dict)
    shift_messages: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.daily_hours not in VALID_DAILY_HOURS:
            raise ValueError(
                f"Daily hours must be one of {VALID_DAILY_HOURS}, got {self.daily_hours}"
            )
        if self.max_monthly_hours is not None and self.max_monthly_hours < 0:
            raise ValueError(
                f"Max monthly hours cannot be negative, got {self.max_monthly_hours}"
            )

    def shift_on(self, iso_date: str) -> ShiftValue:
        """Shift on a date; missing entries count as Off."""
        return self.shifts.get(iso_date, ShiftKind.OFF)

    def has_shift(self, iso_date: str) -> bool:
        """Check if a shift entry exists for the date."""
        return self.shifts.get(iso_date) is not None


@dataclass
class WorkHourStats:
    """Expected vs. actual hours for an employee over a date range."""

    expected: float
    actual: float
    is_overworked: bool

    @property
    def balance(self) -> float:
        """Actual minus expected hours."""
        return round(self.actual - self.expected, 1)


@dataclass
class ShiftConflict:
    """A single detected conflict, in listing form."""

    employee_id: str
    employee_name: str
    date: str
    shift: Optional[ShiftValue]
    reason: str


@dataclass
class ScheduleResult:
    """Complete record of one auto-generation run."""

    assignments: Dict[str, Dict[str, ShiftValue]]
    accumulated_hours: Dict[str, float]
    expected_hours: Dict[str, float]
    rest_days: Dict[str, List[str]]
    emergency_overrides: List[Tuple[str, str]] = field(default_factory=list)

    def shifts_for(self, employee_id: str) -> Dict[str, ShiftValue]:
        """Get the generated shifts for a specific employee."""
        if employee_id not in self.assignments:
            raise ValueError(f"Employee '{employee_id}' not found in results")
        return self.assignments[employee_id]
