#!/usr/bin/env python3
"""
Vehicles Launcher - Easy start for the vehicle tools

Usage:
    python launch.py                                 # Run vehicle demo
    python launch.py --watch                         # Demo, logging every state change
    python launch.py --filter Employee.csv Out.csv   # Filter employee records
    python launch.py --check-config                  # Show .env configuration
"""

import sys
import argparse
import logging
from typing import List, Optional


def setup_logging(level: str = "INFO") -> None:
    """Configure logging"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )


def launch_demo(watch_changes: bool = False) -> None:
    """Launch the vehicle lifecycle demo"""
    print("Starting vehicle demo...")
    from demo_vehicles import run_demo
    run_demo(watch_changes=watch_changes)


def launch_filter(paths: List[str]) -> int:
    """Run the employee filter; falls back to configured paths"""
    from employee_filter import filter_file
    from vehicle_config import get_config

    config = get_config()
    input_path = paths[0] if paths else config.employee_csv
    output_path = paths[1] if len(paths) > 1 else config.filtered_csv

    if not input_path or not output_path:
        print("ERROR: input and output paths required")
        print("Pass them after --filter or set VEHICLES_EMPLOYEE_CSV / VEHICLES_FILTERED_CSV")
        return 1

    try:
        count = filter_file(input_path, output_path)
    except OSError as e:
        print(f"Error: {e}")
        return 1

    print(f"Kept {count} rows -> {output_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Vehicles - lifecycle model and tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python launch.py                               Run vehicle demo
  python launch.py --filter in.csv out.csv       Filter employee records
  python launch.py --check-config                Show configuration
        """
    )

    parser.add_argument(
        "--filter",
        nargs="*",
        metavar="PATH",
        help="Filter employee CSV (input and output paths)"
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Print .env configuration status"
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Log every vehicle state change during the demo"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: VEHICLES_LOG_LEVEL or INFO)"
    )

    args = parser.parse_args(argv)

    from vehicle_config import get_config
    setup_logging(args.log_level or get_config().log_level)

    # Route to appropriate launcher
    if args.check_config:
        get_config().print_status()
        return 0
    if args.filter is not None:
        return launch_filter(args.filter)

    launch_demo(watch_changes=args.watch)
    return 0


if __name__ == "__main__":
    sys.exit(main())
