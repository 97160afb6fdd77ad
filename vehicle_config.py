#!/usr/bin/env python3
"""
Vehicle Environment Configuration Helper

Provides easy access to .env configuration for the vehicle tools.
Automatically loads .env file and provides defaults.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class VehicleConfig:
    """Configuration manager for vehicle tools"""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration

        Args:
            env_file: Path to .env file (default: .env in current directory)
        """
        self._loaded = False

        env_path = Path(".env") if env_file is None else Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)
            self._loaded = True

    @property
    def log_level(self) -> str:
        """Logging level name (default: INFO)"""
        return os.getenv("VEHICLES_LOG_LEVEL", "INFO").upper()

    @property
    def employee_csv(self) -> Optional[str]:
        """Default input file for the employee filter"""
        return os.getenv("VEHICLES_EMPLOYEE_CSV")

    @property
    def filtered_csv(self) -> Optional[str]:
        """Default output file for the employee filter"""
        return os.getenv("VEHICLES_FILTERED_CSV")

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate configuration

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"VEHICLES_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        if self.employee_csv and not Path(self.employee_csv).exists():
            errors.append(f"VEHICLES_EMPLOYEE_CSV not found: {self.employee_csv}")

        return len(errors) == 0, errors

    def print_status(self):
        """Print configuration status"""
        print("Vehicle Configuration Status:")
        print(f"  .env loaded:  {'Yes' if self._loaded else 'No'}")
        print(f"  Log level:    {self.log_level}")
        print(f"  Employee CSV: {self.employee_csv or '(not set)'}")
        print(f"  Filtered CSV: {self.filtered_csv or '(not set)'}")

        is_valid, errors = self.validate()
        if is_valid:
            print("\n  Status: Configuration is valid")
        else:
            print("\n  Status: Configuration has errors:")
            for error in errors:
                print(f"    - {error}")


# Global config instance
_config = None

def get_config(reload: bool = False) -> VehicleConfig:
    """
    Get the global configuration instance

    Args:
        reload: Force reload of .env file

    Returns:
        VehicleConfig instance
    """
    global _config
    if _config is None or reload:
        _config = VehicleConfig()
    return _config


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line utility to check configuration"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Vehicle Configuration Utility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Check current configuration:
    python vehicle_config.py

  Validate configuration:
    python vehicle_config.py --validate

  Use custom .env file:
    python vehicle_config.py --env-file /path/to/.env
        """
    )

    parser.add_argument("--env-file", help="Path to .env file")
    parser.add_argument("--validate", action="store_true",
                       help="Validate configuration and exit with error if invalid")

    args = parser.parse_args(argv)

    config = VehicleConfig(args.env_file)
    config.print_status()

    if args.validate:
        is_valid, _ = config.validate()
        if not is_valid:
            print("\nValidation failed!")
            return 1
        print("\nValidation passed!")
    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main())
