"""
Vehicles - typed, testable vehicle lifecycle model.

This package contains the core state model for motor vehicles:
- Types: Shared state, variant policies, operation results, state changes
- Interfaces: Protocols for vehicle capabilities and state observers
- Vehicle: Shared start/stop state machine and change notification
- Car / Bike: Variant policies, plus the motorcycle kickstand interlock
- Report / Monitor: Read-only presentation and logging observers
"""

from .types import (
    BikeType,
    OperationResult,
    Outcome,
    StateChange,
    VariantPolicy,
    VehicleKind,
    VehicleState,
)
from .interfaces import (
    StateObserver,
    VehicleCapability,
)
from .vehicle import Vehicle
from .car import Car
from .bike import Bike

__all__ = [
    "BikeType",
    "OperationResult",
    "Outcome",
    "StateChange",
    "VariantPolicy",
    "VehicleKind",
    "VehicleState",
    "StateObserver",
    "VehicleCapability",
    "Vehicle",
    "Car",
    "Bike",
]
