"""
Core interfaces (protocols) for vehicle variants and observers.

These define the contracts that all implementations must follow.
Variants satisfy them structurally - no inheritance from these
classes is required.
"""

from typing import Protocol, Any
from .types import OperationResult, StateChange


class VehicleCapability(Protocol):
    """
    Operation set every vehicle variant must support.

    Callers (demo, reports, tests) only rely on this contract.
    """

    def start(self) -> OperationResult:
        """
        Start the engine.

        Returns:
            STARTED, ALREADY_RUNNING, or a variant-specific refusal
        """
        ...

    def stop(self) -> OperationResult:
        """
        Stop the engine. Speed drops to zero.

        Returns:
            STOPPED or ALREADY_STOPPED
        """
        ...

    def accelerate(self, amount: int) -> OperationResult:
        """
        Increase speed, clamped to the variant's top speed.

        Args:
            amount: Requested increase in km/h (>= 0)

        Returns:
            ACCELERATED with the new speed, or NOT_RUNNING
        """
        ...

    def brake(self) -> OperationResult:
        """
        Apply brakes once; speed never goes below zero.

        Returns:
            SLOWED with the new speed, or ALREADY_STOPPED
        """
        ...

    def get_current_speed(self) -> int:
        """Current speed in km/h"""
        ...

    def get_max_speed(self) -> int:
        """Variant-specific top speed in km/h"""
        ...


class StateObserver(Protocol):
    """
    Callback for vehicle state changes.

    Called once per mutated field, after the mutation.
    """

    def __call__(self, vehicle: Any, change: StateChange) -> Any:
        ...
