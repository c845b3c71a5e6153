"""
Day 1 – Calorie Counting.

The input lists the calories carried by each elf, one item per line, with
elves separated by blank lines:

    1000
    2000

    4000

We sum each group, then report:

1. The largest group sum.
2. The sum of the three largest groups (only when at least three exist).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

import numpy as np

from ..config import CALORIE_MAX, TOP_GROUP_COUNT
from ..errors import PuzzleInputError, PuzzleParseError
from ..utils.io import PathLike, read_lines


logger = logging.getLogger(__name__)

_INT64_MAX = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class CalorieReport:
    """Answers for day 1. `top_three` is None when there are fewer than three elves."""

    group_sums: List[int]
    max_group: int
    top_three: Optional[int]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _parse_calories(line: str, line_number: int) -> int:
    # int() would also accept "+5", " 5" and "1_000"; the grammar is digits only.
    if not line.isdigit() or not line.isascii():
        raise PuzzleParseError(f"expected an unsigned integer, got {line!r}", line_number)
    value = int(line)
    if value > CALORIE_MAX:
        raise PuzzleParseError(f"calorie count {value} exceeds {CALORIE_MAX}", line_number)
    return value


def sum_groups(lines: Iterable[str]) -> List[int]:
    """
    Sum each blank-line separated group of integers, in input order.

    Consecutive blank lines never produce an empty group, and a trailing
    group without a final blank line is still flushed.

        >>> sum_groups(["1", "2", "", "5", "1", ""])
        [3, 6]
    """
    sums: List[int] = []
    current: List[int] = []
    for line_number, line in enumerate(lines, start=1):
        if not line:
            if current:
                sums.append(sum(current))
                current = []
            continue
        current.append(_parse_calories(line, line_number))

    if current:
        sums.append(sum(current))

    return sums


# ---------------------------------------------------------------------------
# Solving
# ---------------------------------------------------------------------------

def solve(lines: Iterable[str]) -> CalorieReport:
    group_sums = sum_groups(lines)
    if not group_sums:
        raise PuzzleInputError("input contains no calorie groups")

    if max(group_sums) > _INT64_MAX:
        raise PuzzleInputError(f"a calorie group exceeds {_INT64_MAX}")

    # Sorting makes both answers a slice of the tail.
    ordered = np.sort(np.asarray(group_sums, dtype=np.int64))
    logger.debug("Elves: %s", ordered.tolist())

    top_three: Optional[int] = None
    if ordered.size >= TOP_GROUP_COUNT:
        # Summed as Python ints; three int64 values can overflow int64.
        top_three = sum(ordered[-TOP_GROUP_COUNT:].tolist())

    return CalorieReport(
        group_sums=group_sums,
        max_group=int(ordered[-1]),
        top_three=top_three,
    )


def run(path: PathLike) -> CalorieReport:
    logger.debug("Input: %s", path)
    report = solve(read_lines(path))

    logger.info("The elf with the most calories has %d calories", report.max_group)
    if report.top_three is not None:
        logger.info("The top three elves have %d calories in total", report.top_three)
    else:
        logger.warning("There aren't enough elves to calculate the top three sum!")

    return report


__all__ = [
    "CalorieReport",
    "sum_groups",
    "solve",
    "run",
]
