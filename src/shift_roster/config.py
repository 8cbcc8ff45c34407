"""
Configuration loader for parsing YAML roster files.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .dates import generate_month_days
from .exceptions import ConfigurationError, InvalidDateFormatError, InvalidShiftError
from .models import VALID_DAILY_HOURS, Employee, ShiftValue
from .shifts import parse_shift_value

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "InvalidDateFormatError",
    "InvalidShiftError",
    "RosterConfig",
]


@dataclass
class RosterConfig:
    """Roster and planning period loaded from a configuration file."""

    year: int
    month: int  # 1-12
    employees: List[Employee]
    seed: Optional[int] = None

    @property
    def month_index(self) -> int:
        """Zero-based month, as generate_month_days expects."""
        return self.month - 1

    @property
    def dates(self) -> List[str]:
        """Every ISO date of the planned month."""
        return generate_month_days(self.year, self.month_index)

    @property
    def label(self) -> str:
        """Planning period as YYYY-MM."""
        return f"{self.year}-{self.month:02d}"

    def get_employee(self, employee_id: str) -> Employee:
        """Get an employee by id."""
        for emp in self.employees:
            if emp.id == employee_id:
                return emp
        raise ValueError(f"Employee '{employee_id}' not found")


class ConfigLoader:
    """Loads and validates roster configuration from YAML files."""

    def __init__(self, config_path: str | Path):
        """
        Initialize the ConfigLoader with a configuration file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._raw_config: Dict[str, Any] | None = None
        self._config: RosterConfig | None = None

    def load(self) -> RosterConfig:
        """
        Load and parse the configuration file.

        Returns:
            RosterConfig object with all parsed data

        Raises:
            InvalidDateFormatError: If shift dates are not in ISO 8601 format
            InvalidShiftError: If a shift value or time cannot be parsed
            ConfigurationError: If configuration is invalid
        """
        with open(self.config_path, "r") as f:
            self._raw_config = yaml.safe_load(f) or {}

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(self._raw_config).__name__}"
            )

        self._config = self._parse_config()
        self._validate()

        return self._config

    @property
    def config(self) -> RosterConfig:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    @property
    def raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._raw_config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._raw_config

    def _parse_config(self) -> RosterConfig:
        """Parse raw YAML data into RosterConfig object."""
        raw = self._raw_config

        planning = raw.get("planning") or {}
        year = planning.get("year")
        month = planning.get("month")

        if not isinstance(year, int) or isinstance(year, bool):
            raise ConfigurationError(f"planning.year must be an integer, got: {year!r}")
        if not isinstance(month, int) or not 1 <= month <= 12:
            raise ConfigurationError(
                f"planning.month must be an integer between 1 and 12, got: {month!r}"
            )

        seed = planning.get("seed")
        if seed is not None and not isinstance(seed, int):
            raise ConfigurationError(f"planning.seed must be an integer, got: {seed!r}")

        employees = self._parse_employees(raw.get("employees") or [])

        return RosterConfig(year=year, month=month, employees=employees, seed=seed)

    def _parse_employees(self, employees_raw: List[Dict[str, Any]]) -> List[Employee]:
        """Parse employees from raw config."""
        employees = []

        for index, emp_data in enumerate(employees_raw):
            name = emp_data.get("name")
            if not name:
                raise ConfigurationError(f"Employee #{index + 1} has no name")

            emp_id = str(emp_data.get("id") or name)
            daily_hours = emp_data.get("daily_hours", 8)
            if daily_hours not in VALID_DAILY_HOURS:
                raise ConfigurationError(
                    f"Employee '{name}' has daily_hours {daily_hours!r}. "
                    f"Valid values: {', '.join(str(h) for h in VALID_DAILY_HOURS)}"
                )

            max_monthly = emp_data.get("max_monthly_hours")
            if max_monthly is not None and (
                not isinstance(max_monthly, (int, float)) or max_monthly < 0
            ):
                raise ConfigurationError(
                    f"Employee '{name}' max_monthly_hours must be a non-negative "
                    f"number, got: {max_monthly!r}"
                )

            employees.append(
                Employee(
                    id=emp_id,
                    name=name,
                    daily_hours=daily_hours,
                    max_monthly_hours=max_monthly,
                    shifts=self._parse_shifts(emp_data.get("shifts") or {}, name),
                )
            )

        return employees

    def _parse_shifts(
        self, shifts_raw: Dict[Any, Any], employee_name: str
    ) -> Dict[str, ShiftValue]:
        """Parse a date -> shift mapping for an employee."""
        shifts = {}

        for raw_date, raw_shift in shifts_raw.items():
            # PyYAML turns unquoted YYYY-MM-DD keys into date objects
            if isinstance(raw_date, date):
                iso_date = raw_date.isoformat()
            else:
                iso_date = self._parse_iso_date(str(raw_date), employee_name)

            try:
                shifts[iso_date] = parse_shift_value(raw_shift)
            except InvalidShiftError as e:
                raise InvalidShiftError(
                    f"Invalid shift for {employee_name} on {iso_date}: {e}"
                ) from e

        return shifts

    def _parse_iso_date(self, value: str, employee_name: str) -> str:
        try:
            return date.fromisoformat(value).isoformat()
        except ValueError:
            raise InvalidDateFormatError(
                f"Shift date for {employee_name} must be in ISO 8601 format "
                f"(YYYY-MM-DD), got: {value}. Example: 2026-01-15"
            ) from None

    def _validate(self) -> None:
        """
        Validate that the configuration is internally consistent.

        Raises:
            ConfigurationError: If configuration has issues
        """
        config = self._config

        if not config.employees:
            raise ConfigurationError("Roster has no employees")

        seen = set()
        for emp in config.employees:
            if emp.id in seen:
                raise ConfigurationError(f"Duplicate employee id '{emp.id}'")
            seen.add(emp.id)

        self._check_shift_dates()

    def _check_shift_dates(self) -> None:
        """Warn about shift dates outside the planned month."""
        config = self._config
        month_dates = set(config.dates)

        for emp in config.employees:
            outside = sorted(d for d in emp.shifts if d not in month_dates)
            if outside:
                logger.warning(
                    "%s has %d shift(s) outside %s (%s ... %s)",
                    emp.name,
                    len(outside),
                    config.label,
                    outside[0],
                    outside[-1],
                )

    def get_summary(self) -> str:
        """
        Get a summary of the loaded configuration.

        Returns:
            Human-readable summary string

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        config = self.config
        dates = config.dates

        lines = [
            f"Configuration from: {self.config_path}",
            f"Planning Period: {dates[0]} to {dates[-1]} ({len(dates)} days)",
            f"Employees: {len(config.employees)}",
        ]

        for emp in config.employees:
            override = (
                f", max {emp.max_monthly_hours}h/month"
                if emp.max_monthly_hours is not None
                else ""
            )
            lines.append(
                f"  - {emp.name} ({emp.id}): {emp.daily_hours}h/day{override}, "
                f"{len(emp.shifts)} shift(s) entered"
            )

        return "\n".join(lines)
