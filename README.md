# oslabs

Small console programs that exercise the basics of operating systems:
starting child processes, sharing work between threads, and coordinating
several threads over a shared array. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Employee records and reports

An employee record holds a number, a name of at most nine bytes (UTF-8) and
the hours worked. Records are stored one after another in a binary file,
24 bytes each: a little-endian 32-bit integer, a 10-byte zero-padded name,
two padding bytes and a little-endian double. When a file is read, a
trailing partial record is ignored.

Create a file by entering the records interactively (number, name, hours
for each record):

```
oslabs-creator employees.bin 3
```

A name that is too long, or a number or hours value that cannot be
parsed, stops the command with an "Invalid input" message and exit
status 1.

Produce a text report from a binary file. Rows are sorted by employee
number, and each salary is the hours times the hourly rate; hours and
salary are shown with two decimals:

```
oslabs-reporter employees.bin report.txt 15.5
```

The launcher asks for the file name and the record count, starts the
creator as a child process (`python -m oslabs.creator`), shows the binary
file's contents, then asks for the report name and the hourly rate, starts
the reporter the same way and shows the report. It waits for Enter before
exiting:

```
oslabs-launcher
```

From Python:

- `oslabs.employees`: the frozen dataclasses `Employee` and
  `EmployeeReport` (with `EmployeeReport.from_employee(employee, hourly_rate)`),
  `encode_employee` / `decode_employee` for a single record,
  `read_employees(path)` and `write_employees(path, employees)` for whole
  files, `make_report_rows(employees, hourly_rate)` and
  `format_report(source_name, rows)` for the report text.
- `oslabs.reporter.generate_report(binary_path, report_path, hourly_rate)`
  writes the report file and returns its rows.
- `oslabs.creator.prompt_employees(count, reader, writer)` reads records
  from any text stream.
- `oslabs.launcher.display_binary_file(path, out)` and
  `display_text_file(path, out)` print a file's contents to a stream.

## Minimum, maximum and average in parallel

```
oslabs-arraystats
```

Reads the array size and its elements. One thread finds the first minimum
and first maximum, another the integer average (rounded toward zero); then
the minimum and maximum elements are replaced by the average and the array
is printed. Each worker pauses briefly after every step.

From Python, `oslabs.arraystats.run_threads(values, delay)` runs both
workers over a copy of `values` and returns the resulting `ThreadData`
(`values`, `average`, `min_index`, `max_index`, `size`);
`replace_extremes(data)` applies the replacement and returns the values.
The workers `min_max_worker(data, delay)` and `average_worker(data, delay)`
can also be called directly. `delay` scales the pauses; `0` disables them.
An empty array raises `ValueError`.

## Marker threads

```
oslabs-markers
```

Reads an array size and a number of marker threads. Each marker, seeded
with its own number, repeatedly picks a random index and marks a free
element with that number. When it hits an occupied element it reports how
many elements it has marked and waits. Once every active marker is
waiting, the array is printed and you choose a marker to terminate; that
marker clears its marks and the remaining ones continue, until none is
left. An invalid or already terminated number is reported and the markers
simply continue.

From Python, `oslabs.markers.MarkerBoard(size, marker_count, delay)` runs
the same scheme under program control: `start()`,
`wait_all_blocked(timeout)`, `terminate(number)`, `snapshot()` and
`active_markers()`. `mark_element(array, index, marker_id)` and
`clear_marks(array, marker_id)` are the array operations on their own.