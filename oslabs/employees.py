"""Employee records: their fixed binary layout and salary reports."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

NAME_SIZE = 10
_RECORD = struct.Struct("<i10s2xd")
RECORD_SIZE = _RECORD.size
REPORT_RULE = "-------------------------------------------"


@dataclass(frozen=True)
class Employee:
    """One record of the binary employee file."""

    num: int
    name: str
    hours: float


@dataclass(frozen=True)
class EmployeeReport:
    """An employee together with the salary earned at a given hourly rate."""

    num: int
    name: str
    hours: float
    salary: float

    @classmethod
    def from_employee(cls, employee: Employee, hourly_rate: float) -> EmployeeReport:
        return cls(
            num=employee.num,
            name=employee.name,
            hours=employee.hours,
            salary=employee.hours * hourly_rate,
        )


def encode_employee(employee: Employee) -> bytes:
    """Pack an employee into one fixed-size record."""
    raw_name = employee.name.encode("utf-8")
    if len(raw_name) >= NAME_SIZE:
        raise ValueError(
            f"employee name {employee.name!r} does not fit in {NAME_SIZE - 1} bytes"
        )
    try:
        return _RECORD.pack(employee.num, raw_name, float(employee.hours))
    except struct.error as exc:
        raise ValueError(f"cannot encode employee {employee!r}: {exc}") from exc


def decode_employee(data: bytes) -> Employee:
    """Unpack one fixed-size record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
    num, raw_name, hours = _RECORD.unpack(data)
    name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return Employee(num=num, name=name, hours=hours)


def read_employees(path) -> list[Employee]:
    """Read every complete record of a binary file; a trailing partial record is ignored."""
    data = Path(path).read_bytes()
    usable = len(data) - len(data) % RECORD_SIZE
    return [
        decode_employee(data[start:start + RECORD_SIZE])
        for start in range(0, usable, RECORD_SIZE)
    ]


def write_employees(path, employees: Iterable[Employee]) -> None:
    """Write the employees to a binary file, replacing its contents."""
    records = [encode_employee(employee) for employee in employees]
    with open(path, "wb") as handle:
        handle.writelines(records)


def make_report_rows(employees: Iterable[Employee], hourly_rate: float) -> list[EmployeeReport]:
    """Compute salaries and order the rows by employee number."""
    rows = [EmployeeReport.from_employee(employee, hourly_rate) for employee in employees]
    return sorted(rows, key=lambda row: row.num)


def format_report(source_name: str, rows: Iterable[EmployeeReport]) -> str:
    """Render the salary report as text."""
    lines = [
        f'Report for file "{source_name}"',
        "",
        f"{'Num':<10}{'Name':<15}{'Hours':<10}Salary",
        REPORT_RULE,
    ]
    lines.extend(
        f"{row.num:<10}{row.name:<15}{row.hours:<10.2f}{row.salary:.2f}" for row in rows
    )
    return "\n".join(lines) + "\n"