"""Tests for report formatting and the logging observer"""

import logging

from vehicles import Bike, Car
from vehicles.monitor import LoggingObserver
from vehicles.report import status_line, summary


def test_status_line():
    """Test running/stopped prefix"""
    car = Car("Toyota", "Camry", 2023, 4, "Automatic")
    assert status_line(car).startswith("[STOPPED] 2023 Toyota Camry (Speed: 0 km/h)")

    car.start()
    car.accelerate(30)
    assert status_line(car) == (
        "[RUNNING] 2023 Toyota Camry (Speed: 30 km/h) | 4-door, Automatic transmission"
    )


def test_summary_car():
    """Test car summary fields"""
    car = Car("Toyota", "Camry", 2023, 4, "Automatic")
    assert summary(car) == {
        "kind": "car",
        "make": "Toyota",
        "model": "Camry",
        "year": 2023,
        "speed_kmh": 0,
        "max_speed_kmh": 220,
        "running": False,
        "num_doors": 4,
        "transmission_type": "Automatic",
    }


def test_summary_bike():
    """Test bike summary fields"""
    bike = Bike("Kawasaki", "Ninja", 2023, "sport")
    info = summary(bike)
    assert info["kind"] == "bike"
    assert info["max_speed_kmh"] == 300
    assert info["bike_type"] == "sport"
    assert info["kickstand_down"] is True
    assert "num_doors" not in info


def test_logging_observer(caplog):
    """Test observer logs one line per change"""
    car = Car("Toyota", "Camry", 2023, 4, "Automatic")
    observer = LoggingObserver(logging.getLogger("test.vehicles")).attach(car)

    with caplog.at_level(logging.INFO, logger="test.vehicles"):
        car.start()
        car.accelerate(30)

    assert observer.event_count == 2
    assert "2023 Toyota Camry: is_running False -> True" in caplog.text
    assert "2023 Toyota Camry: current_speed 0 -> 30" in caplog.text


def test_logging_observer_detach():
    """Test observer stops counting after detach"""
    bike = Bike("Kawasaki", "Ninja", 2023, "Sport")
    observer = LoggingObserver().attach(bike)
    bike.set_kickstand(False)
    observer.detach(bike)
    bike.start()
    assert observer.event_count == 1
