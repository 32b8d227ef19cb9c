"""Salary report generation from a binary employee file."""

from __future__ import annotations

import sys
from pathlib import Path

from oslabs.employees import EmployeeReport, format_report, make_report_rows, read_employees


def generate_report(binary_path, report_path, hourly_rate: float) -> list[EmployeeReport]:
    """Write the salary report for a binary file and return its rows."""
    rows = make_report_rows(read_employees(binary_path), hourly_rate)
    Path(report_path).write_text(format_report(str(binary_path), rows), encoding="utf-8")
    return rows


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Usage: reporter <binary_file_name> <report_name> <hourly_rate>")
        return 1

    binary_path, report_path, rate_text = args
    try:
        hourly_rate = float(rate_text)
    except ValueError:
        print(f"Invalid hourly rate: {rate_text}")
        return 1

    try:
        employees = read_employees(binary_path)
    except OSError:
        print(f"Error opening file: {binary_path}")
        return 1

    rows = make_report_rows(employees, hourly_rate)
    try:
        Path(report_path).write_text(format_report(binary_path, rows), encoding="utf-8")
    except OSError:
        print(f"Error creating report file: {report_path}")
        return 1

    print(f"Report successfully created in file: {report_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())