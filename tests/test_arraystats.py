import io

import pytest

from oslabs.arraystats import (
    ThreadData,
    average_worker,
    main,
    min_max_worker,
    replace_extremes,
    run_threads,
)


def test_basic_initialization():
    data = ThreadData(values=[3, 1, 5, 2, 4])
    assert data.size == 5
    assert data.values[0] == 3
    assert data.values[1] == 1
    assert data.average == 0
    assert (data.min_index, data.max_index) == (0, 0)


def test_min_max_worker():
    data = ThreadData(values=[3, 1, 5, 2, 4])
    min_max_worker(data, 0)
    assert data.min_index == 1
    assert data.max_index == 2
    assert data.values[data.min_index] == 1
    assert data.values[data.max_index] == 5


def test_average_worker():
    data = ThreadData(values=[3, 1, 5, 2, 4])
    average_worker(data, 0)
    assert data.average == 3


def test_integration():
    data = run_threads([3, 1, 5, 2, 4], 0)
    assert replace_extremes(data) == [3, 3, 3, 2, 4]


def test_all_equal_elements():
    data = run_threads([5, 5, 5], 0)
    assert data.min_index == 0
    assert data.max_index == 0
    assert data.average == 5
    assert replace_extremes(data) == [5, 5, 5]


def test_large_array():
    size = 100
    data = run_threads(range(size, 0, -1), 0)
    assert data.min_index == size - 1
    assert data.max_index == 0
    assert data.values[data.min_index] == 1
    assert data.values[data.max_index] == size
    assert data.average == 50


def test_negative_numbers():
    data = run_threads([-3, -1, -5, -2, -4], 0)
    assert data.min_index == 2
    assert data.max_index == 1
    assert data.values[data.min_index] == -5
    assert data.values[data.max_index] == -1
    assert data.average == -3


def test_average_rounds_toward_zero():
    data = ThreadData(values=[-7, 0])
    average_worker(data, 0)
    assert data.average == -3


def test_first_occurrence_of_extremes_is_kept():
    data = ThreadData(values=[2, 9, 1, 9, 1])
    min_max_worker(data, 0)
    assert (data.min_index, data.max_index) == (2, 1)


def test_run_threads_does_not_modify_input():
    values = [3, 1, 5, 2, 4]
    data = run_threads(values, 0)
    replace_extremes(data)
    assert values == [3, 1, 5, 2, 4]


def test_workers_print_progress(capsys):
    data = ThreadData(values=[3, 1, 5])
    min_max_worker(data, 0)
    average_worker(data, 0)
    out = capsys.readouterr().out
    assert "Minimum element: 1" in out
    assert "Maximum element: 5" in out
    assert "Average value: 3" in out


@pytest.mark.parametrize("worker", [min_max_worker, average_worker])
def test_workers_reject_empty_array(worker):
    with pytest.raises(ValueError):
        worker(ThreadData(values=[]), 0)


def test_run_threads_rejects_empty_array():
    with pytest.raises(ValueError):
        run_threads([], 0)


def test_main_replaces_extremes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3 1 5 2 4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("3 3 3 2 4")


@pytest.mark.parametrize("text", ["0\n", "-2\n", "abc\n"])
def test_main_rejects_invalid_size(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 1
    assert "Invalid array size" in capsys.readouterr().out