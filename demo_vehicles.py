#!/usr/bin/env python3
"""
Vehicles Demo - Simple example application.

Walks one car and one motorcycle through their lifecycle, including
the kickstand interlock refusing to lower while the bike is moving.
"""

import logging
import sys

from vehicles import Bike, Car
from vehicles.monitor import LoggingObserver
from vehicles.report import status_line


logger = logging.getLogger(__name__)


def run_demo(watch_changes: bool = False) -> None:
    """
    Run the demo walkthrough.

    Args:
        watch_changes: Also log every state change via a LoggingObserver
    """
    logger.info("=" * 60)
    logger.info("Vehicle Lifecycle Demo")
    logger.info("=" * 60)

    car = Car("Toyota", "Camry", 2023, 4, "Automatic")
    bike = Bike("Kawasaki", "Ninja", 2023, "Sport")

    if watch_changes:
        LoggingObserver(logging.getLogger("vehicles.changes")).attach(car, bike)

    logger.info(f"Created vehicle: {car}")
    logger.info(f"Created vehicle: {bike}")

    # Bike-specific feature: kickstand
    logger.info(f"Setting kickstand on bike: {bike.set_kickstand(False)}")

    logger.info(f"Starting car: {car.start()}")
    logger.info(f"Starting bike: {bike.start()}")

    logger.info(f"Car acceleration: {car.accelerate(30)}")
    logger.info(f"Bike acceleration: {bike.accelerate(40)}")

    logger.info(f"Current car state: {status_line(car)}")
    logger.info(f"Current bike state: {status_line(bike)}")

    logger.info(f"Car braking: {car.brake()}")
    logger.info(f"Bike braking: {bike.brake()}")

    logger.info(f"Car doors: {car.num_doors}")
    logger.info(f"Car transmission: {car.transmission_type}")
    logger.info(f"Bike type: {bike.bike_label}")

    # Should be refused - bike is still moving
    logger.info(f"Attempt to lower kickstand while moving: {bike.set_kickstand(True)}")

    logger.info(f"Stopping car: {car.stop()}")
    logger.info(f"Stopping bike: {bike.stop()}")

    logger.info(f"Final car state: {status_line(car)}")
    logger.info(f"Final bike state: {status_line(bike)}")

    logger.info("=" * 60)
    logger.info("Demo finished successfully!")
    logger.info("=" * 60)


def main():
    """Main entry point"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )

    try:
        run_demo(watch_changes="--watch" in sys.argv[1:])
    except KeyboardInterrupt:
        logger.info("\nDemo interrupted by user")
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
