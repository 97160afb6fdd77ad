#!/usr/bin/env python3
"""
Employee CSV Filter

Keeps employee records for one department above a salary floor.

Input format (header plus one employee per line):
    EMP_NAME,EMP_ID,DEPT_ID,SAL
    Alice,1,10,12000

Rows that don't have exactly 4 fields are dropped. Rows with a
non-numeric DEPT_ID or SAL are dropped with a warning. Missing input
or I/O errors abort the run.

Usage:
    python employee_filter.py Employee.csv Filtered.csv
    python employee_filter.py Employee.csv Filtered.csv --dept 20 --min-salary 5000
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union


logger = logging.getLogger(__name__)

HEADER = "EMP_NAME,EMP_ID,DEPT_ID,SAL"
HEADER_PREFIX = "EMP_NAME"
FIELD_COUNT = 4
DEPT_INDEX = 2
SALARY_INDEX = 3

DEFAULT_DEPT_ID = 10
DEFAULT_MIN_SALARY = 10000


def parse_int(field: str) -> int:
    """
    Parse a plain ASCII decimal integer with an optional sign.

    Rejects what int() would otherwise tolerate: surrounding whitespace,
    "_" separators and non-ASCII digits.

    Raises:
        ValueError: If the field is not a plain integer
    """
    digits = field[1:] if field[:1] in ("+", "-") else field
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an integer: {field!r}")
    return int(field)


def keep_row(line: str, dept_id: int = DEFAULT_DEPT_ID,
             min_salary: int = DEFAULT_MIN_SALARY) -> bool:
    """
    Check a single data row against the filter.

    Raises:
        ValueError: If DEPT_ID or SAL is not an integer
    """
    parts = line.split(",")
    if len(parts) != FIELD_COUNT:
        return False
    return parse_int(parts[SALARY_INDEX]) >= min_salary and parse_int(parts[DEPT_INDEX]) == dept_id


def filter_lines(lines: Iterable[str], dept_id: int = DEFAULT_DEPT_ID,
                 min_salary: int = DEFAULT_MIN_SALARY) -> List[str]:
    """
    Filter data rows, preserving order.

    Header lines are skipped; the caller re-adds the header.

    Args:
        lines: Raw lines (trailing newlines are stripped)
        dept_id: Department to keep
        min_salary: Inclusive salary floor

    Returns:
        Retained rows without line endings
    """
    kept = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith(HEADER_PREFIX):
            continue
        try:
            if keep_row(line, dept_id, min_salary):
                kept.append(line)
        except ValueError:
            logger.warning(f"Skipping malformed line (number format): {line}")
    return kept


def filter_file(input_path: Union[str, Path], output_path: Union[str, Path],
                dept_id: int = DEFAULT_DEPT_ID,
                min_salary: int = DEFAULT_MIN_SALARY) -> int:
    """
    Filter an employee CSV file into a new file.

    The output is overwritten with the header followed by retained rows.

    Args:
        input_path: Source CSV
        output_path: Destination CSV (truncated if it exists)
        dept_id: Department to keep
        min_salary: Inclusive salary floor

    Returns:
        Number of retained rows (header not counted)

    Raises:
        OSError: If the input can't be read or the output can't be written
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        with input_path.open("r", encoding="utf-8") as f:
            kept = filter_lines(f, dept_id, min_salary)

        with output_path.open("w", encoding="utf-8", newline="\n") as f:
            for line in [HEADER] + kept:
                f.write(line + "\n")

    except OSError as e:
        logger.error(f"Error filtering {input_path}: {e}", exc_info=True)
        raise

    logger.info(f"Filtered output written to: {output_path} ({len(kept)} rows)")
    return len(kept)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point"""
    parser = argparse.ArgumentParser(
        description="Filter employee records by department and salary",
    )
    parser.add_argument("input", help="Input CSV file")
    parser.add_argument("output", help="Output CSV file (overwritten)")
    parser.add_argument("--dept", type=int, default=DEFAULT_DEPT_ID,
                        help=f"Department id to keep (default: {DEFAULT_DEPT_ID})")
    parser.add_argument("--min-salary", type=int, default=DEFAULT_MIN_SALARY,
                        help=f"Minimum salary, inclusive (default: {DEFAULT_MIN_SALARY})")

    args = parser.parse_args(argv)

    try:
        count = filter_file(args.input, args.output, args.dept, args.min_salary)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Kept {count} rows -> {args.output}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    sys.exit(main())
