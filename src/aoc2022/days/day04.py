"""
Day 4 – Camp Cleanup.

Each line holds two section assignments, ``"2-4,6-8"``. We count:

1. Pairs where one range fully contains the other.
2. Pairs where the ranges overlap at all.

The pairs are collected into a DataFrame so that both relations are
computed column-wise in one go:

    a_start a_end b_start b_end contained overlapping
          2     4       6     8     False       False
          2     8       3     7      True        True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple
import logging

import pandas as pd

from ..errors import PuzzleParseError
from ..utils.io import PathLike, read_lines


logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["a_start", "a_end", "b_start", "b_end", "contained", "overlapping"]


@dataclass(frozen=True)
class SectionRange:
    """Closed interval of section ids, ``start..=end``."""

    start: int
    end: int

    def contains(self, other: "SectionRange") -> bool:
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: "SectionRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    @classmethod
    def parse(cls, raw: str) -> "SectionRange":
        start, sep, end = raw.partition("-")
        if not sep:
            raise PuzzleParseError(f"unable to parse {raw!r} as a range")
        return cls(start=_parse_bound(start, raw), end=_parse_bound(end, raw))


def _parse_bound(token: str, raw: str) -> int:
    if not token.isdigit() or not token.isascii():
        raise PuzzleParseError(f"unable to parse {raw!r} as a range")
    return int(token)


@dataclass(frozen=True)
class AssignmentReport:
    contained: int
    overlapping: int


Pair = Tuple[SectionRange, SectionRange]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_pair(line: str) -> Pair:
    first, sep, second = line.partition(",")
    if not sep:
        raise PuzzleParseError(f"invalid line: {line!r}")
    return SectionRange.parse(first), SectionRange.parse(second)


def parse_assignments(lines: Iterable[str]) -> List[Pair]:
    pairs: List[Pair] = []
    for line_number, line in enumerate(lines, start=1):
        if not line:
            continue
        try:
            pairs.append(parse_pair(line))
        except PuzzleParseError as exc:
            raise PuzzleParseError(str(exc), line_number) from exc
    return pairs


# ---------------------------------------------------------------------------
# Solving
# ---------------------------------------------------------------------------

def assignments_frame(pairs: List[Pair]) -> pd.DataFrame:
    """
    Build one row per pair with the containment and overlap flags.

    Both relations are tested in both directions. For overlap this is
    redundant (the relation is symmetric) but keeps the two columns
    computed the same way.
    """
    if not pairs:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    df = pd.DataFrame(
        [(a.start, a.end, b.start, b.end) for a, b in pairs],
        columns=FRAME_COLUMNS[:4],
    )

    # Column-wise versions of SectionRange.contains / SectionRange.overlaps.
    a_contains_b = (df["a_start"] <= df["b_start"]) & (df["a_end"] >= df["b_end"])
    b_contains_a = (df["b_start"] <= df["a_start"]) & (df["b_end"] >= df["a_end"])
    df["contained"] = a_contains_b | b_contains_a

    a_overlaps_b = (df["a_start"] <= df["b_end"]) & (df["b_start"] <= df["a_end"])
    b_overlaps_a = (df["b_start"] <= df["a_end"]) & (df["a_start"] <= df["b_end"])
    df["overlapping"] = a_overlaps_b | b_overlaps_a

    return df


def solve(lines: Iterable[str]) -> AssignmentReport:
    df = assignments_frame(parse_assignments(lines))
    logger.debug("Parsed %d assignment pairs", len(df))
    return AssignmentReport(
        contained=int(df["contained"].sum()),
        overlapping=int(df["overlapping"].sum()),
    )


def run(path: PathLike) -> AssignmentReport:
    logger.debug("Input: %s", path)
    report = solve(read_lines(path))
    logger.info("%d pairs of shifts fully overlap", report.contained)
    logger.info("%d pairs of shifts partially overlap", report.overlapping)
    return report


__all__ = [
    "SectionRange",
    "AssignmentReport",
    "Pair",
    "FRAME_COLUMNS",
    "parse_pair",
    "parse_assignments",
    "assignments_frame",
    "solve",
    "run",
]
