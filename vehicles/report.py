"""Presentation helpers - read-only views of a vehicle for display."""

from typing import Any, Dict

from .bike import Bike
from .car import Car
from .vehicle import Vehicle


def status_line(vehicle: Vehicle) -> str:
    """One-line status, e.g. '[RUNNING] 2023 Toyota Camry (Speed: 30 km/h) | ...'"""
    tag = "RUNNING" if vehicle.is_running else "STOPPED"
    return f"[{tag}] {vehicle}"


def summary(vehicle: Vehicle) -> Dict[str, Any]:
    """
    Flatten a vehicle into a plain dict.

    Shared fields first, then the variant's fixed features.
    """
    info: Dict[str, Any] = {
        "kind": vehicle.kind.value,
        "make": vehicle.make,
        "model": vehicle.model,
        "year": vehicle.year,
        "speed_kmh": vehicle.get_current_speed(),
        "max_speed_kmh": vehicle.get_max_speed(),
        "running": vehicle.is_running,
    }

    if isinstance(vehicle, Car):
        info.update({
            "num_doors": vehicle.num_doors,
            "transmission_type": vehicle.transmission_type,
        })
    elif isinstance(vehicle, Bike):
        info.update({
            "bike_type": vehicle.bike_type.value,
            "kickstand_down": vehicle.kickstand_down,
        })

    return info
