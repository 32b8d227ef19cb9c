"""Marker threads that race to claim cells of a shared array."""

from __future__ import annotations

import random
import sys
import threading
import time
from dataclasses import dataclass
from typing import Iterator, TextIO

# Pause before and after marking a cell, in seconds, at a delay factor of 1.0.
_MARK_STEP = 0.005


def mark_element(array: list[int], index: int, marker_id: int) -> bool:
    """Claim `array[index]` for `marker_id` if it is in range and still free."""
    if not 0 <= index < len(array):
        return False
    if array[index] != 0:
        return False
    array[index] = marker_id
    return True


def clear_marks(array: list[int], marker_id: int) -> int:
    """Reset every cell claimed by `marker_id` to zero; return how many were reset."""
    cleared = 0
    for index, value in enumerate(array):
        if value == marker_id:
            array[index] = 0
            cleared += 1
    return cleared


@dataclass(eq=False)
class _Marker:
    number: int
    marked: int = 0
    blocked: bool = False
    resume: bool = False
    stop: bool = False
    active: bool = True
    thread: threading.Thread | None = None


class MarkerBoard:
    """A shared array and the marker threads that fill it.

    Each marker, seeded with its own number, picks random cells and claims the
    free ones. On hitting a claimed cell it reports and blocks until it is told
    to resume or to stop; a stopped marker frees its cells and exits.
    """

    def __init__(self, size: int, marker_count: int, delay: float = 1.0) -> None:
        if size < 1:
            raise ValueError("the array must hold at least one element")
        if marker_count < 0:
            raise ValueError("the number of markers cannot be negative")
        self._array = [0] * size
        self._array_lock = threading.Lock()
        self._control = threading.Condition()
        self._go = threading.Event()
        self._step = _MARK_STEP * delay
        self._markers = [_Marker(number=number) for number in range(1, marker_count + 1)]
        self._started = False

    def start(self) -> None:
        """Start every marker thread at once."""
        if self._started:
            raise RuntimeError("the markers have already been started")
        self._started = True
        for marker in self._markers:
            marker.thread = threading.Thread(
                target=self._run, args=(marker,), name=f"marker-{marker.number}", daemon=True
            )
            marker.thread.start()
        self._go.set()

    def wait_all_blocked(self, timeout: float | None = None) -> bool:
        """Wait until every active marker is blocked; False if the timeout ran out."""
        if not self._started and self.active_markers():
            raise RuntimeError("the markers have not been started")
        with self._control:
            return self._control.wait_for(self._all_blocked, timeout)

    def terminate(self, number: int) -> None:
        """Stop marker `number`, wait for it to free its cells, then resume the others."""
        if not self._started:
            raise RuntimeError("the markers have not been started")
        marker = self._find_active(number)
        with self._control:
            marker.stop = True
            self._control.notify_all()
        marker.thread.join()
        with self._control:
            marker.active = False
            marker.blocked = False
            self._control.notify_all()
        self._resume_blocked()

    def snapshot(self) -> list[int]:
        """A copy of the array's current contents."""
        with self._array_lock:
            return list(self._array)

    def active_markers(self) -> list[int]:
        """Numbers of the markers that have not been terminated."""
        with self._control:
            return [marker.number for marker in self._markers if marker.active]

    def _find_active(self, number: int) -> _Marker:
        with self._control:
            for marker in self._markers:
                if marker.number == number and marker.active:
                    return marker
        raise ValueError(f"no active marker numbered {number}")

    def _all_blocked(self) -> bool:
        return all(marker.blocked for marker in self._markers if marker.active)

    def _resume_blocked(self) -> None:
        with self._control:
            for marker in self._markers:
                if marker.active and marker.blocked:
                    marker.blocked = False
                    marker.resume = True
            self._control.notify_all()

    def _shutdown(self) -> None:
        with self._control:
            for marker in self._markers:
                if marker.active:
                    marker.stop = True
            self._control.notify_all()
        for marker in self._markers:
            if marker.active and marker.thread is not None:
                marker.thread.join()
        with self._control:
            for marker in self._markers:
                marker.active = False
                marker.blocked = False
            self._control.notify_all()

    def _pause(self) -> None:
        if self._step > 0:
            time.sleep(self._step)

    def _try_mark(self, marker: _Marker, index: int) -> bool:
        with self._array_lock:
            if self._array[index] != 0:
                return False
            self._pause()
            mark_element(self._array, index, marker.number)
            marker.marked += 1
            self._pause()
            return True

    def _run(self, marker: _Marker) -> None:
        self._go.wait()
        rng = random.Random(marker.number)
        size = len(self._array)
        while True:
            index = rng.randrange(size)
            if self._try_mark(marker, index):
                continue

            print(
                f"Thread {marker.number} info:\n"
                f"- Thread number: {marker.number}\n"
                f"- Marked elements: {marker.marked}\n"
                f"- Can't mark element at index: {index}",
                flush=True,
            )

            with self._control:
                marker.blocked = True
                self._control.notify_all()
                self._control.wait_for(lambda: marker.resume or marker.stop)
                marker.resume = False
                stopping = marker.stop

            if stopping:
                with self._array_lock:
                    clear_marks(self._array, marker.number)
                return


def _tokens(reader: TextIO) -> Iterator[str]:
    while True:
        line = reader.readline()
        if not line:
            return
        yield from line.split()


def _ask_int(prompt: str, tokens: Iterator[str]) -> int:
    print(prompt, end="", flush=True)
    return int(next(tokens))


def _print_array(board: MarkerBoard) -> None:
    print("Array content: " + "".join(f"{value} " for value in board.snapshot()), flush=True)


def main(argv=None) -> int:
    tokens = _tokens(sys.stdin)
    try:
        size = _ask_int("Enter array size: ", tokens)
        marker_count = _ask_int("Enter number of marker threads: ", tokens)
    except (StopIteration, ValueError):
        print("\nInvalid input")
        return 1

    try:
        board = MarkerBoard(size, marker_count)
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        return 1

    board.start()
    while board.active_markers():
        board.wait_all_blocked()
        _print_array(board)

        try:
            number = _ask_int(f"Enter thread number to terminate (1-{marker_count}): ", tokens)
        except StopIteration:
            print("\nInput ended; stopping all threads")
            board._shutdown()
            return 1
        except ValueError:
            number = 0

        try:
            board.terminate(number)
        except ValueError:
            print("Invalid thread number or thread already terminated", flush=True)
            board._resume_blocked()
            continue
        _print_array(board)

    print("All threads terminated. Program completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())