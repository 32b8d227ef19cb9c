"""Find an array's extremes and average in two threads, then replace the extremes."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import Iterator, TextIO

# Per-step pauses of the two workers, in seconds, at a delay factor of 1.0.
_MIN_MAX_STEP = 0.007
_AVERAGE_STEP = 0.012


@dataclass
class ThreadData:
    """State shared by the two workers."""

    values: list[int]
    average: int = 0
    min_index: int = 0
    max_index: int = 0

    @property
    def size(self) -> int:
        return len(self.values)


def _pause(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)


def _require_values(data: ThreadData) -> None:
    if not data.values:
        raise ValueError("the array must hold at least one element")


def _truncated_mean(total: int, count: int) -> int:
    """Integer mean rounded toward zero."""
    quotient = abs(total) // count
    return -quotient if total < 0 else quotient


def min_max_worker(data: ThreadData, delay: float = 1.0) -> None:
    """Store the indices of the first minimum and first maximum in `data`.

    `delay` scales the pause taken after each comparison; 0 disables it.
    """
    _require_values(data)
    step = _MIN_MAX_STEP * delay
    data.min_index = 0
    data.max_index = 0
    print("Min_max thread started")

    for index, value in enumerate(data.values[1:], start=1):
        if value < data.values[data.min_index]:
            data.min_index = index
        _pause(step)
        if value > data.values[data.max_index]:
            data.max_index = index
        _pause(step)

    print(f"Minimum element: {data.values[data.min_index]}")
    print(f"Maximum element: {data.values[data.max_index]}")
    print("Min_max thread finished")


def average_worker(data: ThreadData, delay: float = 1.0) -> None:
    """Store the integer average (rounded toward zero) in `data`.

    `delay` scales the pause taken after each addition; 0 disables it.
    """
    _require_values(data)
    step = _AVERAGE_STEP * delay
    print("Average thread started")

    total = 0
    for value in data.values:
        total += value
        _pause(step)

    data.average = _truncated_mean(total, data.size)
    print(f"Average value: {data.average}")
    print("Average thread finished")


def replace_extremes(data: ThreadData) -> list[int]:
    """Overwrite the minimum and maximum elements with the average; return the values."""
    data.values[data.min_index] = data.average
    if data.min_index != data.max_index:
        data.values[data.max_index] = data.average
    return data.values


def run_threads(values, delay: float = 1.0) -> ThreadData:
    """Run both workers concurrently over a copy of `values` and return their results."""
    data = ThreadData(values=list(values))
    _require_values(data)
    workers = [
        threading.Thread(target=min_max_worker, args=(data, delay), name="min_max"),
        threading.Thread(target=average_worker, args=(data, delay), name="average"),
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return data


def _tokens(reader: TextIO) -> Iterator[str]:
    for line in reader:
        yield from line.split()


def main(argv=None) -> int:
    tokens = _tokens(sys.stdin)
    print("Enter array size: ", end="", flush=True)
    try:
        size = int(next(tokens))
    except (StopIteration, ValueError):
        print("Invalid array size")
        return 1
    if size <= 0:
        print("Invalid array size")
        return 1

    print(f"Enter {size} elements:")
    try:
        values = [int(next(tokens)) for _ in range(size)]
    except (StopIteration, ValueError):
        print("Invalid array element")
        return 1

    data = run_threads(values)
    result = replace_extremes(data)

    print("Array after replacing min and max elements with average value:")
    print("".join(f"{value} " for value in result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())