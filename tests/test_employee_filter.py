"""Tests for the employee CSV filter"""

import logging

import pytest
from employee_filter import HEADER, filter_file, filter_lines, keep_row, main, parse_int


@pytest.fixture
def employee_csv(tmp_path):
    """Write a small employee file"""
    path = tmp_path / "Employee.csv"
    path.write_text(
        "EMP_NAME,EMP_ID,DEPT_ID,SAL\n"
        "A,1,10,12000\n"
        "B,2,10,9000\n"
        "C,3,11,15000\n",
        encoding="utf-8",
    )
    return path


def test_keep_row():
    """Test the row predicate"""
    assert keep_row("A,1,10,12000") is True
    assert keep_row("A,1,10,10000") is True     # inclusive floor
    assert keep_row("A,1,10,9999") is False
    assert keep_row("A,1,11,50000") is False
    assert keep_row("A,1,10") is False
    assert keep_row("A,1,10,12000,extra") is False
    with pytest.raises(ValueError):
        keep_row("A,1,10,lots")


def test_filter_lines_keeps_order():
    """Test retained rows come out in input order"""
    lines = ["Z,9,10,20000", "A,1,10,12000", "B,2,20,30000", "M,5,10,10000"]
    assert filter_lines(lines) == ["Z,9,10,20000", "A,1,10,12000", "M,5,10,10000"]


def test_filter_lines_skips_header_and_blank():
    """Test header and empty lines are dropped"""
    assert filter_lines([HEADER + "\n", "\n", "A,1,10,12000\n"]) == ["A,1,10,12000"]


def test_filter_lines_skips_malformed(caplog):
    """Test bad numeric fields drop only that row"""
    lines = [
        "A,1,ten,12000",
        "B,2,10,",
        "C,3, 10,12000",
        "D,4,1_0,12000",
        "E,5,10,1_2_000",
        "F,6,\uff11\uff10,12000",
        "G,7,10,15000",
    ]
    with caplog.at_level(logging.WARNING, logger="employee_filter"):
        assert filter_lines(lines) == ["G,7,10,15000"]
    assert "Skipping malformed line" in caplog.text


def test_filter_lines_custom_criteria():
    """Test department and salary overrides"""
    lines = ["A,1,10,12000", "C,3,11,15000", "D,4,11,4000"]
    assert filter_lines(lines, dept_id=11, min_salary=5000) == ["C,3,11,15000"]


def test_filter_file(employee_csv, tmp_path):
    """Test file-to-file filtering"""
    output = tmp_path / "Filtered.csv"
    count = filter_file(employee_csv, output)

    assert count == 1
    assert output.read_text(encoding="utf-8") == (
        "EMP_NAME,EMP_ID,DEPT_ID,SAL\n"
        "A,1,10,12000\n"
    )


def test_filter_file_truncates_output(employee_csv, tmp_path):
    """Test existing output is overwritten"""
    output = tmp_path / "Filtered.csv"
    output.write_text("old content\n" * 50, encoding="utf-8")
    filter_file(employee_csv, output)
    assert "old content" not in output.read_text(encoding="utf-8")


def test_filter_file_no_matches(tmp_path):
    """Test header-only output"""
    source = tmp_path / "in.csv"
    source.write_text("EMP_NAME,EMP_ID,DEPT_ID,SAL\nB,2,10,9000\n", encoding="utf-8")
    output = tmp_path / "out.csv"
    assert filter_file(source, output) == 0
    assert output.read_text(encoding="utf-8") == HEADER + "\n"


def test_filter_file_missing_input(tmp_path, caplog):
    """Test missing input aborts the run"""
    output = tmp_path / "out.csv"
    with caplog.at_level(logging.ERROR, logger="employee_filter"):
        with pytest.raises(FileNotFoundError):
            filter_file(tmp_path / "missing.csv", output)
    assert not output.exists()
    assert "Error filtering" in caplog.text


def test_main(employee_csv, tmp_path, capsys):
    """Test command-line entry point"""
    output = tmp_path / "cli.csv"
    assert main([str(employee_csv), str(output)]) == 0
    assert "Kept 1 rows" in capsys.readouterr().out
    assert output.read_text(encoding="utf-8").splitlines() == [HEADER, "A,1,10,12000"]


def test_main_missing_input(tmp_path):
    """Test command-line error exit code"""
    assert main([str(tmp_path / "nope.csv"), str(tmp_path / "out.csv")]) == 1


def test_parse_int():
    """Test only plain ASCII integers are accepted"""
    assert parse_int("10") == 10
    assert parse_int("+10") == 10
    assert parse_int("-5") == -5
    for bad in ["", "+", " 10", "10 ", "1_0", "\uff11\uff10", "1.0", "ten", "+-1"]:
        with pytest.raises(ValueError):
            parse_int(bad)
