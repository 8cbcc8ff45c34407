"""Shared fixtures for shift-roster tests."""

import random

import pytest

from shift_roster.dates import generate_month_days
from shift_roster.models import Employee, ShiftKind


def _build_roster(count: int, daily_hours: int = 8) -> list[Employee]:
    """Roster of ``count`` employees with ids e1..eN and no shifts."""
    return [
        Employee(id=f"e{i + 1}", name=f"Emp{i + 1}", daily_hours=daily_hours)
        for i in range(count)
    ]


@pytest.fixture
def make_roster():
    """Factory for plain rosters: make_roster(count, daily_hours=8)."""
    return _build_roster


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so scheduler runs are repeatable."""
    return random.Random(1234)


@pytest.fixture
def march_2025() -> list[str]:
    """March 2025: starts on a Saturday, 3 March is a public holiday."""
    return generate_month_days(2025, 2)


@pytest.fixture
def june_2026() -> list[str]:
    """June 2026: starts on a Monday, 22 working days, no holidays."""
    return generate_month_days(2026, 5)


@pytest.fixture
def full_timer() -> Employee:
    """8h/day employee with no shifts."""
    return Employee(id="e1", name="Alice", daily_hours=8)


@pytest.fixture
def part_timer() -> Employee:
    """4h/day employee with no shifts."""
    return Employee(id="e2", name="Bob", daily_hours=4)


@pytest.fixture
def morning_employee() -> Employee:
    """Employee holding a Morning shift on 2025-03-05."""
    return Employee(
        id="e1",
        name="Alice",
        daily_hours=8,
        shifts={"2025-03-05": ShiftKind.MORNING},
    )


@pytest.fixture
def mixed_roster() -> list[Employee]:
    """Ten employees: six on 8h, two on 6h, two on 4h contracts."""
    return (
        _build_roster(6, daily_hours=8)
        + [Employee(id=f"s{i}", name=f"Six{i}", daily_hours=6) for i in range(2)]
        + [Employee(id=f"f{i}", name=f"Four{i}", daily_hours=4) for i in range(2)]
    )
