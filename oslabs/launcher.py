"""Interactive driver that runs the creator and the reporter in turn."""

from __future__ import annotations

import subprocess
import sys
from typing import Iterator, TextIO

from oslabs.employees import read_employees


def display_binary_file(path, out: TextIO | None = None) -> int | None:
    """Print every record of a binary file; return the count, or None if it cannot be read."""
    out = sys.stdout if out is None else out
    try:
        employees = read_employees(path)
    except OSError:
        out.write(f"Error opening file: {path}\n")
        return None

    out.write("\nBinary file contents:\n")
    out.write("ID\tName\t\tHours\n")
    out.write("------------------------\n")
    for employee in employees:
        out.write(f"{employee.num}\t{employee.name}\t\t{employee.hours:g}\n")
    out.write(f"Total records: {len(employees)}\n")
    return len(employees)


def display_text_file(path, out: TextIO | None = None) -> bool:
    """Print a text file; return False if it cannot be read."""
    out = sys.stdout if out is None else out
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        out.write(f"Error opening file: {path}\n")
        return False

    out.write("\nReport contents:\n")
    for line in lines:
        out.write(f"{line}\n")
    return True


def _tokens(reader: TextIO) -> Iterator[str]:
    while True:
        line = reader.readline()
        if not line:
            return
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> str:
    print(prompt, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended unexpectedly") from None


def _launch(label: str, module: str, *args: str) -> bool:
    command = [sys.executable, "-m", f"oslabs.{module}", *args]
    print(f"Launching {label} with parameters: {' '.join([module, *args])}", flush=True)
    try:
        subprocess.run(command, check=False)
    except OSError as exc:
        print(f"Error launching {label}. Error: {exc}")
        return False
    return True


def main(argv=None) -> int:
    tokens = _tokens(sys.stdin)
    try:
        binary_name = _ask("Enter binary file name: ", tokens)
        record_count = int(_ask("Enter number of records: ", tokens))
    except (EOFError, ValueError) as exc:
        print(f"\nInvalid input: {exc}")
        return 1

    if not _launch("Creator", "creator", binary_name, str(record_count)):
        return 1
    display_binary_file(binary_name)

    try:
        report_name = _ask("\nEnter report file name: ", tokens)
        hourly_rate = float(_ask("Enter hourly rate: ", tokens))
    except (EOFError, ValueError) as exc:
        print(f"\nInvalid input: {exc}")
        return 1

    if not _launch("Reporter", "reporter", binary_name, report_name, f"{hourly_rate:f}"):
        return 1
    display_text_file(report_name)

    print("\nOperation completed. Press Enter to exit...", end="", flush=True)
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())