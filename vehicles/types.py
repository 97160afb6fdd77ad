"""
Core data types for the vehicle lifecycle model.

All the data structures that flow through the system, fully typed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict
import time

from .constants import (
    DEFAULT_SPEED,
    CAR_MAX_SPEED,
    CAR_BRAKE_STEP,
    CAR_ACCEL_FACTOR,
    BIKE_BRAKE_STEP,
    BIKE_ACCEL_FACTOR,
    SPORT_MAX_SPEED,
    CRUISER_MAX_SPEED,
    STANDARD_MAX_SPEED,
)


class VehicleKind(Enum):
    """Tag for each vehicle variant"""
    CAR = "car"
    BIKE = "bike"


class BikeType(Enum):
    """Motorcycle sub-type - selects the top speed"""
    SPORT = "sport"
    CRUISER = "cruiser"
    STANDARD = "standard"    # Touring, naked, anything not listed above

    @classmethod
    def from_label(cls, label: str) -> "BikeType":
        """
        Parse a free-form bike type label (case-insensitive).

        Unknown labels map to STANDARD.
        """
        key = label.strip().lower()
        for member in (cls.SPORT, cls.CRUISER):
            if member.value == key:
                return member
        return cls.STANDARD

    @property
    def max_speed(self) -> int:
        """Top speed in km/h for this sub-type"""
        speed_map = {
            BikeType.SPORT: SPORT_MAX_SPEED,
            BikeType.CRUISER: CRUISER_MAX_SPEED,
            BikeType.STANDARD: STANDARD_MAX_SPEED,
        }
        return speed_map[self]


class Outcome(Enum):
    """Result kinds for vehicle operations"""
    STARTED = "started"
    ALREADY_RUNNING = "already_running"
    STOPPED = "stopped"
    ALREADY_STOPPED = "already_stopped"
    ACCELERATED = "accelerated"
    NOT_RUNNING = "not_running"
    SLOWED = "slowed"
    KICKSTAND_BLOCKS_START = "kickstand_blocks_start"
    KICKSTAND_UP = "kickstand_up"
    KICKSTAND_DOWN = "kickstand_down"
    KICKSTAND_DOWN_ENGINE_STOPPED = "kickstand_down_engine_stopped"
    MOVING_BLOCKS_KICKSTAND = "moving_blocks_kickstand"


# Outcomes where the request was refused
_REJECTED = frozenset({
    Outcome.NOT_RUNNING,
    Outcome.KICKSTAND_BLOCKS_START,
    Outcome.MOVING_BLOCKS_KICKSTAND,
})


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a vehicle operation.

    Operations never raise for ordinary refusals; they report what
    happened here instead. str(result) is the human-readable message.
    """
    outcome: Outcome
    message: str

    def __str__(self) -> str:
        return self.message

    @property
    def ok(self) -> bool:
        """False when the vehicle refused the request"""
        return self.outcome not in _REJECTED


@dataclass(frozen=True)
class StateChange:
    """A single mutation of vehicle state, delivered to observers"""
    name: str                    # "is_running", "current_speed" or "kickstand_down"
    old: Any
    new: Any
    timestamp: float = field(default_factory=time.time)


@dataclass
class VehicleState:
    """
    Shared state held by every vehicle variant.

    Identity fields plus the running/speed state machine.
    """
    make: str
    model: str
    year: int
    current_speed: int = DEFAULT_SPEED
    is_running: bool = False

    def __post_init__(self) -> None:
        """Validate identity"""
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValueError(f"year must be an int: {self.year!r}")

    def set_current_speed(self, speed: int) -> bool:
        """
        Set speed, ignoring negative values.

        Returns:
            True if the value was accepted
        """
        if speed < 0:
            return False
        self.current_speed = speed
        return True

    @property
    def is_moving(self) -> bool:
        return self.current_speed > 0


@dataclass(frozen=True)
class VariantPolicy:
    """Numeric rules that distinguish one vehicle kind from another"""
    max_speed: int                 # Top speed in km/h
    brake_step: int                # Max speed reduction per brake() call
    accel_factor: float = 1.0      # Multiplier applied to accelerate() amounts

    def __post_init__(self) -> None:
        if self.max_speed <= 0:
            raise ValueError(f"max_speed must be positive: {self.max_speed}")
        if self.brake_step <= 0:
            raise ValueError(f"brake_step must be positive: {self.brake_step}")
        if self.accel_factor <= 0:
            raise ValueError(f"accel_factor must be positive: {self.accel_factor}")

    @classmethod
    def car(cls) -> "VariantPolicy":
        """Default car policy"""
        return cls(max_speed=CAR_MAX_SPEED, brake_step=CAR_BRAKE_STEP,
                   accel_factor=CAR_ACCEL_FACTOR)

    @classmethod
    def bike(cls, bike_type: BikeType) -> "VariantPolicy":
        """Default motorcycle policy for a sub-type"""
        return cls(max_speed=bike_type.max_speed, brake_step=BIKE_BRAKE_STEP,
                   accel_factor=BIKE_ACCEL_FACTOR)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "max_speed": self.max_speed,
            "brake_step": self.brake_step,
            "accel_factor": self.accel_factor,
        }
