"""Interactive creation of a binary employee file."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from oslabs.employees import Employee, encode_employee


def _tokens(reader: TextIO) -> Iterator[str]:
    for line in reader:
        yield from line.split()


def prompt_employees(count: int, reader: TextIO, writer: TextIO) -> list[Employee]:
    """Ask for `count` employee records, reading whitespace-separated answers."""
    tokens = _tokens(reader)

    def ask(prompt: str) -> str:
        writer.write(prompt)
        writer.flush()
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("input ended before all records were read") from None

    employees = []
    for index in range(1, count + 1):
        writer.write(f"\nRecord #{index}:\n")
        num = int(ask("Number: "))
        name = ask("Employee name: ")
        hours = float(ask("Hours worked: "))
        employee = Employee(num=num, name=name, hours=hours)
        encode_employee(employee)
        employees.append(employee)
    return employees


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: creator <file_name> <record_count>")
        return 1

    filename, count_text = args
    try:
        count = int(count_text)
    except ValueError:
        print(f"Invalid record count: {count_text}")
        return 1

    try:
        handle = open(filename, "wb")
    except OSError:
        print(f"Error creating file: {filename}")
        return 1

    with handle:
        print(f"Creating binary file: {filename}")
        print(f"Record count: {count}")
        try:
            employees = prompt_employees(count, sys.stdin, sys.stdout)
        except (ValueError, EOFError) as exc:
            print(f"\nInvalid input: {exc}")
            return 1
        for employee in employees:
            handle.write(encode_employee(employee))

    print(f"\nFile {filename} successfully created with {count} records.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())