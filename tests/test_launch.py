"""Tests for the launcher and demo entry points"""

import logging

from demo_vehicles import run_demo
from launch import main


def test_demo_runs(caplog):
    """Test the demo walkthrough, including the refused kickstand"""
    with caplog.at_level(logging.INFO):
        run_demo(watch_changes=True)

    text = caplog.text
    assert "Starting bike: The Kawasaki Ninja has started." in text
    assert "Bike acceleration: The motorcycle accelerates rapidly to 60 km/h." in text
    assert "Car braking: The car slows down to 10 km/h." in text
    assert "Attempt to lower kickstand while moving: Cannot lower kickstand while moving!" in text
    assert "Demo finished successfully!" in text


def test_launch_filter(tmp_path, monkeypatch):
    """Test --filter routes to the employee filter"""
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "Employee.csv"
    source.write_text("EMP_NAME,EMP_ID,DEPT_ID,SAL\nA,1,10,12000\nC,3,11,15000\n",
                      encoding="utf-8")
    output = tmp_path / "out.csv"

    assert main(["--filter", str(source), str(output)]) == 0
    assert output.read_text(encoding="utf-8").splitlines()[1:] == ["A,1,10,12000"]


def test_launch_filter_without_paths(tmp_path, monkeypatch):
    """Test --filter without paths or config fails cleanly"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("VEHICLES_EMPLOYEE_CSV", raising=False)
    monkeypatch.delenv("VEHICLES_FILTERED_CSV", raising=False)
    assert main(["--filter"]) == 1
