"""
Vehicle - Shared lifecycle behavior for all variants.

Holds the shared VehicleState and the variant's VariantPolicy, and implements
the parts of the state machine every variant has in common:
- start/stop of the engine
- clamped acceleration and stepped braking arithmetic
- state change notification for external observers

Variants (Car, Bike) supply the messages and any interlocks.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import List

from .interfaces import StateObserver
from .types import (
    OperationResult,
    Outcome,
    StateChange,
    VariantPolicy,
    VehicleKind,
    VehicleState,
)


logger = logging.getLogger(__name__)


class Vehicle(ABC):
    """
    Abstract base for vehicle variants.

    Implements the start/stop/get_current_speed/get_max_speed part of
    VehicleCapability; subclasses set kind and add accelerate() and brake().
    """

    kind: VehicleKind

    def __init__(self, make: str, model: str, year: int, policy: VariantPolicy) -> None:
        """
        Initialize a parked vehicle (engine off, speed 0).

        Args:
            make: Manufacturer
            model: Model name
            year: Model year
            policy: Numeric rules for this variant
        """
        self._state = VehicleState(make=make, model=model, year=year)
        self.policy = policy

        # State change callbacks
        self._state_callbacks: List[StateObserver] = []

    # Observers

    def add_state_callback(self, callback: StateObserver) -> None:
        """
        Register callback for state changes.

        Callback signature: callback(vehicle, change)

        Args:
            callback: Function to call on each state change
        """
        self._state_callbacks.append(callback)

    def remove_state_callback(self, callback: StateObserver) -> None:
        """Unregister a callback (no-op if not registered)"""
        if callback in self._state_callbacks:
            self._state_callbacks.remove(callback)

    # Lifecycle

    def start(self) -> OperationResult:
        if self._state.is_running:
            return OperationResult(Outcome.ALREADY_RUNNING, "The vehicle is already running.")

        self._set_running(True)
        return OperationResult(Outcome.STARTED, f"The {self.make} {self.model} has started.")

    def stop(self) -> OperationResult:
        if not self._state.is_running:
            return OperationResult(Outcome.ALREADY_STOPPED, "The vehicle is already stopped.")

        self._set_running(False)
        self._set_speed(0)
        return OperationResult(Outcome.STOPPED, f"The {self.make} {self.model} has stopped.")

    @abstractmethod
    def accelerate(self, amount: int) -> OperationResult:
        ...

    @abstractmethod
    def brake(self) -> OperationResult:
        ...

    # Accessors

    def get_current_speed(self) -> int:
        return self._state.current_speed

    def get_max_speed(self) -> int:
        return self.policy.max_speed

    @property
    def make(self) -> str:
        return self._state.make

    @property
    def model(self) -> str:
        return self._state.model

    @property
    def year(self) -> int:
        return self._state.year

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def state(self) -> VehicleState:
        """Snapshot of the shared state (a copy; mutate via operations only)"""
        return VehicleState(
            make=self._state.make,
            model=self._state.model,
            year=self._state.year,
            current_speed=self._state.current_speed,
            is_running=self._state.is_running,
        )

    # Shared policy arithmetic for subclasses

    def _apply_acceleration(self, amount: int) -> int:
        """
        Raise speed by amount * accel_factor (floored), clamped to max speed.

        Caller must check the engine is running.

        Returns:
            New speed
        """
        if amount < 0:
            raise ValueError(f"Acceleration amount must be >= 0: {amount}")

        effective = math.floor(amount * self.policy.accel_factor)
        new_speed = min(self._state.current_speed + effective, self.get_max_speed())
        self._set_speed(new_speed)
        return self._state.current_speed

    def _apply_brake(self) -> int:
        """
        Lower speed by at most one brake step, never below zero.

        Caller must check the vehicle is moving.

        Returns:
            New speed
        """
        current = self._state.current_speed
        reduction = min(current, self.policy.brake_step)
        self._set_speed(current - reduction)
        return self._state.current_speed

    # State mutation

    def _set_running(self, running: bool) -> None:
        old = self._state.is_running
        if old == running:
            return
        self._state.is_running = running
        self._notify(StateChange(name="is_running", old=old, new=running))

    def _set_speed(self, speed: int) -> None:
        old = self._state.current_speed
        if not self._state.set_current_speed(speed) or old == speed:
            return
        self._notify(StateChange(name="current_speed", old=old, new=speed))

    def _notify(self, change: StateChange) -> None:
        """
        Deliver a state change to all callbacks.

        A failing callback is logged and skipped; it never undoes the change.
        """
        logger.debug(f"{self.kind.value} {self.make} {self.model}: "
                     f"{change.name} {change.old} -> {change.new}")

        for callback in list(self._state_callbacks):
            try:
                callback(self, change)
            except Exception as e:
                logger.error(f"Error in state callback: {e}", exc_info=True)

    def __str__(self) -> str:
        return f"{self.year} {self.make} {self.model} (Speed: {self.get_current_speed()} km/h)"

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(make={self.make!r}, model={self.model!r}, "
                f"year={self.year!r}, speed={self.get_current_speed()}, "
                f"running={self.is_running})")
