"""
Global configuration for the Advent of Code 2022 solvers.

This module centralizes:

- Project-root and data paths
- Logging defaults and the environment variable that overrides them
- Puzzle grammar constants shared between parsers and tests

All of these are kept in one place so that a change in an input format
or a default does not require hunting through the day modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import logging
import os


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# This file lives in: <repo>/src/aoc2022/config.py
# Project root is therefore two levels up from here.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

DATA_DIR: Path = PROJECT_ROOT / "data"
DATA_INPUTS_DIR: Path = DATA_DIR / "inputs"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

# Only environment variable the project reads.
LOG_LEVEL_ENV_VAR: str = "AOC2022_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def resolve_log_level(name: Optional[str] = None) -> int:
    """
    Turn a level name into a `logging` level number.

    Resolution order: explicit `name`, then the `AOC2022_LOG_LEVEL`
    environment variable, then `DEFAULT_LOG_LEVEL`. Unknown names fall
    back to INFO rather than failing, so a typo in the environment never
    prevents a puzzle from running.

        >>> resolve_log_level("debug")
        10
    """
    if name is None:
        name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


# ---------------------------------------------------------------------------
# Puzzle constants
# ---------------------------------------------------------------------------

# Day 1: how many of the largest groups are summed for part two.
TOP_GROUP_COUNT: int = 3

# Day 1: largest calorie count accepted on a single line (unsigned 32-bit).
CALORIE_MAX: int = 2**32 - 1

# Day 2: "<opponent> <player>" lines are exactly three characters long.
STRATEGY_LINE_LENGTH: int = 3

# Day 3: elves carry badges in groups of three consecutive rucksacks.
BADGE_GROUP_SIZE: int = 3

# Day 5: each stack occupies "[X] " (four columns) in the drawing, and the
# crate label sits one column in from the left bracket.
CRATE_COLUMN_WIDTH: int = 4
CRATE_LABEL_OFFSET: int = 1


__all__ = [
    # Paths
    "PROJECT_ROOT",
    "DATA_DIR",
    "DATA_INPUTS_DIR",
    # Logging
    "LOG_LEVEL_ENV_VAR",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "resolve_log_level",
    # Puzzle constants
    "TOP_GROUP_COUNT",
    "CALORIE_MAX",
    "STRATEGY_LINE_LENGTH",
    "BADGE_GROUP_SIZE",
    "CRATE_COLUMN_WIDTH",
    "CRATE_LABEL_OFFSET",
]
