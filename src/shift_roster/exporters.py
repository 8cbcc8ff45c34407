"""
Export strategies for roster data.

This module implements the Strategy Pattern for writing a roster month to
plain CSV data. Each exporter encapsulates one row layout; page or workbook
layout is left to whatever consumes the file.
"""

import csv
from abc import ABC, abstractmethod
from typing import Sequence

from .dates import from_iso
from .hours import actual_hours
from .models import Employee
from .shifts import shift_label


class ExportStrategy(ABC):
    """Abstract base class for roster export strategies.

    Subclasses implement specific row layouts.
    Common helper methods for data transformation are provided here.
    """

    def __init__(self, employees: Sequence[Employee], dates: Sequence[str]):
        """Initialize the export strategy.

        Args:
            employees: Roster snapshot to export
            dates: ISO dates to include, in column/row order
        """
        self.employees = list(employees)
        self.dates = list(dates)

    @abstractmethod
    def export(self, filepath: str) -> None:
        """Export roster to the specified file.

        Args:
            filepath: Path to the output file
        """
        pass

    def _cell(self, employee: Employee, iso_date: str) -> str:
        """Display value for one cell; missing entries show as Off."""
        return shift_label(employee.shift_on(iso_date))

    def _sorted_employees(self) -> list[Employee]:
        """Employees ordered by name, then id for stable output."""
        return sorted(self.employees, key=lambda emp: (emp.name, emp.id))


class SimpleCSVExporter(ExportStrategy):
    """Exports roster as a long-format CSV.

    Output format: Date, Day_of_Week, Employee, Shift
    One row per employee per day.
    """

    FIELDNAMES = ["Date", "Day_of_Week", "Employee", "Shift"]

    def export(self, filepath: str) -> None:
        """Export roster to CSV file in long format.

        Args:
            filepath: Path to the output CSV file
        """
        employees = self._sorted_employees()

        with open(filepath, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()
            for iso_date in self.dates:
                day_name = from_iso(iso_date).strftime("%a")
                for emp in employees:
                    writer.writerow(
                        {
                            "Date": iso_date,
                            "Day_of_Week": day_name,
                            "Employee": emp.name,
                            "Shift": self._cell(emp, iso_date),
                        }
                    )

        print(f"\n✓ Roster exported to {filepath}")


class MatrixCSVExporter(ExportStrategy):
    """Exports roster as a matrix.

    Output format:
    - First column: Employee name
    - Subsequent columns: One per date
    - Last column: actual hours over the exported dates
    """

    def export(self, filepath: str) -> None:
        """Export roster to CSV file in matrix format.

        Args:
            filepath: Path to the output CSV file
        """
        rows: list[list[str]] = [self._build_header_row()]

        for emp in self._sorted_employees():
            row = [emp.name]
            row.extend(self._cell(emp, d) for d in self.dates)
            row.append(f"{actual_hours(emp, self.dates):g}")
            rows.append(row)

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(rows)

        print(f"\n✓ Roster exported to {filepath} (matrix format)")

    def _build_header_row(self) -> list[str]:
        """Build the header row with Employee column, date columns and hours.

        Returns:
            List of header strings
        """
        header = ["Employee"]
        for iso_date in self.dates:
            header.append(f"{iso_date} {from_iso(iso_date).strftime('%a')}")
        header.append("Actual_Hours")
        return header
