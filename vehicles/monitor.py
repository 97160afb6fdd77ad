"""
Monitor - logs vehicle state changes from outside the state machine.

Vehicles don't log their own decisions; attach a LoggingObserver to
get a log line per state change.
"""

import logging
from typing import List, Optional

from .types import StateChange
from .vehicle import Vehicle


class LoggingObserver:
    """State callback that writes each change to a logger"""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        """
        Args:
            logger: Target logger (default: this module's logger)
            level: Log level for change records
        """
        self._logger = logger or logging.getLogger(__name__)
        self._level = level
        self.event_count = 0

    def __call__(self, vehicle: Vehicle, change: StateChange) -> None:
        self.event_count += 1
        self._logger.log(
            self._level,
            f"{vehicle.year} {vehicle.make} {vehicle.model}: "
            f"{change.name} {change.old} -> {change.new}",
        )

    def attach(self, *vehicles: Vehicle) -> "LoggingObserver":
        """Register on one or more vehicles; returns self for chaining"""
        for vehicle in vehicles:
            vehicle.add_state_callback(self)
        return self

    def detach(self, *vehicles: Vehicle) -> None:
        for vehicle in vehicles:
            vehicle.remove_state_callback(self)


class EventRecorder:
    """State callback that keeps every change in memory (for tests and replays)"""

    def __init__(self) -> None:
        self.changes: List[StateChange] = []

    def __call__(self, vehicle: Vehicle, change: StateChange) -> None:
        self.changes.append(change)

    def names(self) -> List[str]:
        return [c.name for c in self.changes]

    def clear(self) -> None:
        self.changes.clear()
