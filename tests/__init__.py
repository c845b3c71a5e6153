"""
Test package for the Advent of Code 2022 solvers.

This directory collects unit and integration tests for:

- The line reader and path helpers (`test_io.py`)
- Each puzzle day (`test_day01.py` ... `test_day05.py`)
- The command-line dispatcher, logging and timing (`test_cli.py`)

You can run tests with:

    pytest
    # or
    python -m pytest

from the project root. Tests marked `integration` skip themselves unless
the real puzzle inputs are present under data/inputs/.
"""

__all__ = []
