import pytest

from oslabs.employees import Employee, write_employees
from oslabs.reporter import generate_report, main


@pytest.fixture
def binary_file(tmp_path):
    path = tmp_path / "test.bin"
    write_employees(
        path,
        [
            Employee(103, "Emp3", 30.0),
            Employee(101, "Emp1", 40.0),
            Employee(102, "Emp2", 35.0),
        ],
    )
    return path


def test_generate_report_sorts_rows(binary_file, tmp_path):
    rows = generate_report(binary_file, tmp_path / "report.txt", 10.0)
    assert [row.num for row in rows] == [101, 102, 103]
    assert [row.salary for row in rows] == pytest.approx([400.0, 350.0, 300.0])


def test_generate_report_writes_text(tmp_path):
    source = tmp_path / "one.bin"
    write_employees(source, [Employee(101, "Emp1", 40.0)])
    report_path = tmp_path / "report.txt"
    generate_report(source, report_path, 15.0)
    report = report_path.read_text(encoding="utf-8")
    assert report.startswith(f'Report for file "{source}"')
    for word in ("Num", "Name", "Hours", "Salary", "101", "Emp1", "40.00", "600.00"):
        assert word in report


def test_generate_report_empty_file(tmp_path):
    source = tmp_path / "empty.bin"
    source.write_bytes(b"")
    report_path = tmp_path / "report.txt"
    assert generate_report(source, report_path, 15.0) == []
    assert len(report_path.read_text(encoding="utf-8").splitlines()) == 4


def test_generate_report_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        generate_report(tmp_path / "absent.bin", tmp_path / "r.txt", 1.0)


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_bad_rate(binary_file, tmp_path):
    assert main([str(binary_file), str(tmp_path / "r.txt"), "fast"]) == 1


def test_main_missing_binary(tmp_path, capsys):
    assert main([str(tmp_path / "absent.bin"), str(tmp_path / "r.txt"), "1"]) == 1
    assert "Error opening file" in capsys.readouterr().out


def test_main_cannot_create_report(binary_file, tmp_path, capsys):
    target = tmp_path / "nodir" / "r.txt"
    assert main([str(binary_file), str(target), "1"]) == 1
    assert "Error creating report file" in capsys.readouterr().out


def test_main_success(binary_file, tmp_path, capsys):
    target = tmp_path / "r.txt"
    assert main([str(binary_file), str(target), "10"]) == 0
    lines = target.read_text(encoding="utf-8").splitlines()
    assert [line.split()[0] for line in lines[4:]] == ["101", "102", "103"]
    assert "Report successfully created" in capsys.readouterr().out