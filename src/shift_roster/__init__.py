"""
Shift Roster - monthly shift scheduling with hour accounting and conflict checks.
"""

__version__ = "0.1.0"

from .config import ConfigLoader, RosterConfig
from .conflicts import (
    detect_all_shift_conflicts,
    detect_shift_conflict,
    list_conflicts,
)
from .dates import generate_month_days, get_public_holidays
from .exceptions import (
    ConfigurationError,
    EmptyRosterError,
    InvalidDateFormatError,
    InvalidShiftError,
)
from .hours import compute_employee_work_hours, compute_total_work_hours
from .models import (
    CustomShift,
    Employee,
    ScheduleResult,
    ShiftConflict,
    ShiftKind,
    ShiftValue,
    WorkHourStats,
)
from .reporter import ScheduleReporter
from .scheduler import AutoScheduler, auto_generate_schedule

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "InvalidDateFormatError",
    "InvalidShiftError",
    "EmptyRosterError",
    "RosterConfig",
    "Employee",
    "ShiftKind",
    "CustomShift",
    "ShiftValue",
    "WorkHourStats",
    "ShiftConflict",
    "ScheduleResult",
    "generate_month_days",
    "get_public_holidays",
    "compute_employee_work_hours",
    "compute_total_work_hours",
    "detect_shift_conflict",
    "detect_all_shift_conflicts",
    "list_conflicts",
    "AutoScheduler",
    "auto_generate_schedule",
    "ScheduleReporter",
]
