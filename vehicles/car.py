"""
Car - four-wheeled vehicle variant.

Linear acceleration, 20 km/h brake step, 220 km/h top speed.
Door count and transmission are descriptive only.
"""

from .types import OperationResult, Outcome, VariantPolicy, VehicleKind
from .vehicle import Vehicle


class Car(Vehicle):
    """Car with fixed features and no interlocks"""

    kind = VehicleKind.CAR

    def __init__(
        self,
        make: str,
        model: str,
        year: int,
        num_doors: int,
        transmission_type: str,
    ) -> None:
        """
        Initialize car.

        Args:
            make: Manufacturer
            model: Model name
            year: Model year
            num_doors: Number of doors
            transmission_type: e.g. "Automatic", "Manual"
        """
        super().__init__(make, model, year, VariantPolicy.car())
        self._num_doors = num_doors
        self._transmission_type = transmission_type

    def accelerate(self, amount: int) -> OperationResult:
        if not self.is_running:
            return OperationResult(Outcome.NOT_RUNNING, "Cannot accelerate: Engine is not running.")

        new_speed = self._apply_acceleration(amount)
        return OperationResult(Outcome.ACCELERATED, f"The car accelerates to {new_speed} km/h.")

    def brake(self) -> OperationResult:
        if self.get_current_speed() == 0:
            return OperationResult(Outcome.ALREADY_STOPPED, "The car is already stopped.")

        new_speed = self._apply_brake()
        return OperationResult(Outcome.SLOWED, f"The car slows down to {new_speed} km/h.")

    @property
    def num_doors(self) -> int:
        return self._num_doors

    @property
    def transmission_type(self) -> str:
        return self._transmission_type

    def __str__(self) -> str:
        return (f"{super().__str__()} | {self._num_doors}-door, "
                f"{self._transmission_type} transmission")
