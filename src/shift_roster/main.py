"""
Main entry point for the shift roster application.
"""

import sys
import argparse
import logging
import random

from .config import ConfigLoader, ConfigurationError, InvalidDateFormatError
from .conflicts import detect_all_shift_conflicts, detect_shift_conflict
from .dates import from_iso, to_iso
from .exceptions import EmptyRosterError, InvalidShiftError
from .exporters import MatrixCSVExporter, SimpleCSVExporter
from .models import ShiftValue
from .reporter import ScheduleReporter
from .scheduler import AutoScheduler
from .shifts import make_custom_shift, parse_shift_value, shift_label
from .updates import apply_generated_schedule, apply_shift_change

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def parse_cli_shift(value: str) -> ShiftValue:
    """Shift from the command line: a shift name or ``HH:mm-HH:mm``."""
    if "-" in value and ":" in value:
        start, _, end = value.partition("-")
        return make_custom_shift(start.strip(), end.strip())
    return parse_shift_value(value)


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="shift-roster",
        description="Monthly shift roster: auto-generation, hour accounting and conflict checks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report hours and conflicts for the roster as entered
  shift-roster config/roster.yaml

  # Fill the month automatically with a fixed seed
  shift-roster config/roster.yaml --auto-generate --seed 7

  # Check and apply a manual edit
  shift-roster config/roster.yaml --set e1 2025-03-04 13:00-15:00

  # Export to CSV (one column per date)
  shift-roster config/roster.yaml --auto-generate --export-csv out.csv --matrix
        """,
    )

    parser.add_argument("config", type=str, help="Path to YAML roster file")
    parser.add_argument(
        "--auto-generate",
        action="store_true",
        help="Generate shifts for every employee and date of the month",
    )
    parser.add_argument(
        "--seed", type=int, help="Random seed for generation (overrides planning.seed)"
    )
    parser.add_argument(
        "--set",
        nargs=3,
        metavar=("EMPLOYEE_ID", "DATE", "SHIFT"),
        help="Apply one shift edit after checking it for overlaps",
    )
    parser.add_argument("--message", type=str, help="Note to store with --set")
    parser.add_argument("--export-csv", type=str, help="Export roster to CSV file")
    parser.add_argument(
        "--matrix",
        action="store_true",
        help="Write the CSV as an employee x date matrix",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress detailed output (only show summary)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging from the engine"
    )

    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        # Load configuration
        print(f"Loading roster from: {args.config}")
        loader = ConfigLoader(args.config)
        config = loader.load()

        print("✓ Roster loaded successfully")
        print(loader.get_summary())
        print()

        employees = config.employees
        dates = config.dates
        result = None

        if args.auto_generate:
            seed = args.seed if args.seed is not None else config.seed
            print("Generating schedule...")
            result = AutoScheduler(employees, dates, random.Random(seed)).generate()
            employees = apply_generated_schedule(employees, result.assignments)
            print("✓ Schedule generated")
            print()

        if args.set:
            employee_id, iso_date, raw_shift = args.set
            iso_date = to_iso(from_iso(iso_date))
            config.get_employee(employee_id)
            employee = next(e for e in employees if e.id == employee_id)
            shift = parse_cli_shift(raw_shift)

            reason = detect_shift_conflict(employee, iso_date, shift)
            if reason:
                print(f"⚠ {employee.name} on {iso_date}: {reason}")

            updated = apply_shift_change(employee, iso_date, shift, args.message)
            employees = [updated if e.id == updated.id else e for e in employees]
            print(f"✓ {employee.name} on {iso_date} set to {shift_label(shift)}")
            print()

        reporter = ScheduleReporter(employees, dates, result)
        reporter.print_report(args.quiet)

        if args.export_csv:
            exporter_cls = MatrixCSVExporter if args.matrix else SimpleCSVExporter
            exporter_cls(employees, dates).export(args.export_csv)

        conflicts = detect_all_shift_conflicts(employees, dates)

        # Exit with appropriate code
        sys.exit(0 if not conflicts else 1)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except InvalidDateFormatError as e:
        print(f"Date Format Error: {e}", file=sys.stderr)
        print(
            "\n Tip: Use ISO 8601 format (YYYY-MM-DD) for all dates.", file=sys.stderr
        )
        print("   Example: 2026-01-15", file=sys.stderr)
        sys.exit(1)

    except InvalidShiftError as e:
        print(f"Shift Error: {e}", file=sys.stderr)
        print("\n Tip: Custom shift times use HH:mm, e.g. 09:00-13:30", file=sys.stderr)
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except EmptyRosterError as e:
        print(f"Roster Error: {e}", file=sys.stderr)
        sys.exit(1)

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Unexpected Error: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
