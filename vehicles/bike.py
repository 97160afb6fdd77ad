"""
Bike - motorcycle variant with kickstand interlock.

This is safety-critical code. The interlock enforces:
- No engine start while the kickstand is down
- No lowering the kickstand while moving
- Lowering the kickstand on a running (stationary) bike stops the engine

So after every operation: kickstand down => speed == 0 and engine off.
"""

from typing import Union

from .types import (
    BikeType,
    OperationResult,
    Outcome,
    StateChange,
    VariantPolicy,
    VehicleKind,
)
from .vehicle import Vehicle


class Bike(Vehicle):
    """
    Motorcycle: 1.5x acceleration, 25 km/h brake step, top speed by type.

    Starts parked with the kickstand down.
    """

    kind = VehicleKind.BIKE

    def __init__(
        self,
        make: str,
        model: str,
        year: int,
        bike_type: Union[BikeType, str],
    ) -> None:
        """
        Initialize motorcycle.

        Args:
            make: Manufacturer
            model: Model name
            year: Model year
            bike_type: BikeType, or a label such as "Sport", "cruiser", "Touring"
        """
        if isinstance(bike_type, BikeType):
            self._bike_type = bike_type
            self._bike_label = bike_type.value.capitalize()
        else:
            self._bike_type = BikeType.from_label(bike_type)
            self._bike_label = bike_type

        super().__init__(make, model, year, VariantPolicy.bike(self._bike_type))
        self._kickstand_down = True

    def start(self) -> OperationResult:
        # Interlock runs before the shared start logic
        if self._kickstand_down:
            return OperationResult(
                Outcome.KICKSTAND_BLOCKS_START,
                "Cannot start: Please raise the kickstand first.",
            )
        return super().start()

    def accelerate(self, amount: int) -> OperationResult:
        if not self.is_running:
            return OperationResult(Outcome.NOT_RUNNING, "Cannot accelerate: Engine is not running.")

        new_speed = self._apply_acceleration(amount)
        return OperationResult(
            Outcome.ACCELERATED,
            f"The motorcycle accelerates rapidly to {new_speed} km/h.",
        )

    def brake(self) -> OperationResult:
        if self.get_current_speed() == 0:
            return OperationResult(Outcome.ALREADY_STOPPED, "The motorcycle is already stopped.")

        new_speed = self._apply_brake()
        return OperationResult(Outcome.SLOWED, f"The motorcycle slows down to {new_speed} km/h.")

    def set_kickstand(self, down: bool) -> OperationResult:
        """
        Raise or lower the kickstand.

        Args:
            down: True to lower the kickstand, False to raise it

        Returns:
            MOVING_BLOCKS_KICKSTAND if lowering while moving (no change),
            KICKSTAND_DOWN_ENGINE_STOPPED if lowering forced the engine off,
            otherwise KICKSTAND_DOWN or KICKSTAND_UP
        """
        if down and self.get_current_speed() > 0:
            return OperationResult(
                Outcome.MOVING_BLOCKS_KICKSTAND,
                "Cannot lower kickstand while moving!",
            )

        self._set_kickstand(down)

        if not down:
            return OperationResult(Outcome.KICKSTAND_UP, "Kickstand up.")

        if self.is_running:
            # Interlock: engine off, speed to 0
            super().stop()
            return OperationResult(
                Outcome.KICKSTAND_DOWN_ENGINE_STOPPED,
                "Kickstand down. Engine stopped for safety.",
            )
        return OperationResult(Outcome.KICKSTAND_DOWN, "Kickstand down.")

    def _set_kickstand(self, down: bool) -> None:
        old = self._kickstand_down
        if old == down:
            return
        self._kickstand_down = down
        self._notify(StateChange(name="kickstand_down", old=old, new=down))

    @property
    def kickstand_down(self) -> bool:
        return self._kickstand_down

    @property
    def bike_type(self) -> BikeType:
        return self._bike_type

    @property
    def bike_label(self) -> str:
        """Type label as given at construction (for display)"""
        return self._bike_label

    def __str__(self) -> str:
        stand = "DOWN" if self._kickstand_down else "UP"
        return f"{super().__str__()} | {self._bike_label} motorcycle (Kickstand {stand})"
