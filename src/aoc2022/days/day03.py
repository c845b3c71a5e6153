"""
Day 3 – Rucksack Reorganization.

Each line lists the items of one rucksack; the first half of the line is
the first compartment and the second half the second compartment.

1. Items present in both compartments are summed by priority.
2. Every three consecutive rucksacks form a group whose badge is the item
   common to all three; badges are summed by priority as well.

When more than one item is shared, *all* of them are summed rather than
assuming a single duplicate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List
import logging

from ..config import BADGE_GROUP_SIZE
from ..errors import PuzzleParseError
from ..utils.io import PathLike, read_lines


logger = logging.getLogger(__name__)

_ALPHABET_SIZE = 26


@dataclass(frozen=True)
class Rucksack:
    first: str
    second: str


@dataclass(frozen=True)
class RucksackReport:
    duplicate_priority: int
    badge_priority: int


def split_rucksack(line: str) -> Rucksack:
    """
    Split a line into its two compartments.

    The split point is ``len(line) // 2``, so for odd lengths the second
    compartment gets the extra item.
    """
    half = len(line) // 2
    return Rucksack(first=line[:half], second=line[half:])


def common_items(a: str, b: str) -> List[str]:
    """Sorted, de-duplicated items present in both `a` and `b` (case-sensitive)."""
    return sorted(set(a) & set(b))


def priority(item: str) -> int:
    """
    Priority of an item: a..z -> 1..26, A..Z -> 27..52.

    >>> priority("p"), priority("L")
    (16, 38)
    """
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 1 + _ALPHABET_SIZE
    raise PuzzleParseError(f"invalid item: {item!r}")


def priority_sum(items: Iterable[str]) -> int:
    return sum(priority(item) for item in items)


def badge_items(group: List[str]) -> List[str]:
    """Items common to every rucksack of the group."""
    shared = set(group[0])
    for rucksack in group[1:]:
        shared &= set(rucksack)
    return sorted(shared)


def solve(lines: Iterable[str]) -> RucksackReport:
    duplicate_total = 0
    badge_total = 0
    group: List[str] = []

    for line_number, line in enumerate(lines, start=1):
        if not line:
            continue

        rucksack = split_rucksack(line)
        try:
            dupes = common_items(rucksack.first, rucksack.second)
            dupe_priority = priority_sum(dupes)
            logger.debug("%s -> %s -> %d", rucksack, dupes, dupe_priority)
            duplicate_total += dupe_priority

            group.append(line)
            if len(group) == BADGE_GROUP_SIZE:
                badges = badge_items(group)
                group_priority = priority_sum(badges)
                logger.debug("Group badge: %s -> %d", badges, group_priority)
                badge_total += group_priority
                group = []
        except PuzzleParseError as exc:
            raise PuzzleParseError(str(exc), line_number) from exc

    if group:
        logger.warning(
            "Ignoring %d trailing rucksack(s) that do not form a group of %d",
            len(group),
            BADGE_GROUP_SIZE,
        )

    return RucksackReport(duplicate_priority=duplicate_total, badge_priority=badge_total)


def run(path: PathLike) -> RucksackReport:
    logger.debug("Input: %s", path)
    report = solve(read_lines(path))
    logger.info("Total priority of duplicated items: %d", report.duplicate_priority)
    logger.info("Total priority of badge items: %d", report.badge_priority)
    return report


__all__ = [
    "Rucksack",
    "RucksackReport",
    "split_rucksack",
    "common_items",
    "priority",
    "priority_sum",
    "badge_items",
    "solve",
    "run",
]
