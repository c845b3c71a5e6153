"""
Command-line entry point for the Advent of Code 2022 solvers.

One subcommand per day (two for the days with alternative strategies),
each taking the path of the puzzle input:

    aoc2022 day1 data/inputs/day01.txt
    aoc2022 day5b data/inputs/day05.txt
    aoc2022 --log-level DEBUG day3 data/inputs/day03.txt
    python -m aoc2022 day2a data/inputs/day02.txt

Answers are written to the log stream at INFO level. Any failure is
logged at ERROR level and the process exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .days import day01, day02, day03, day04, day05
from .errors import PuzzleError
from .utils.logs import setup_logging
from .utils.timing import Timer


logger = logging.getLogger(__name__)

EntryPoint = Callable[[Path], Any]

# subcommand -> (help text, entry point)
SUBCOMMANDS: Dict[str, Tuple[str, EntryPoint]] = {
    "day1": ("Calorie counting: largest and top-three group sums.", day01.run),
    "day2a": ("Rock paper scissors, second column is the move to play.", day02.run_a),
    "day2b": ("Rock paper scissors, second column is the outcome to reach.", day02.run_b),
    "day3": ("Rucksack duplicates and group badges.", day03.run),
    "day4": ("Fully contained and overlapping section assignments.", day04.run),
    "day5a": ("Crate stacks rearranged one crate at a time.", day05.run_a),
    "day5b": ("Crate stacks rearranged in blocks.", day05.run_b),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2022",
        description="Solve Advent of Code 2022 puzzles (days 1-5).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level name (DEBUG, INFO, ...). Defaults to $AOC2022_LOG_LEVEL or INFO.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for name, (help_text, _entry) in SUBCOMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("file", type=Path, help="Path to the puzzle input.")
    return parser


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def run_command(name: str, path: Path) -> int:
    """
    Run one subcommand and translate its outcome into an exit status.

    Puzzle errors and unreadable input are logged and mapped to 1; anything
    else is a bug and propagates with its traceback.
    """
    _help_text, entry = SUBCOMMANDS[name]
    logger.debug("Args: command=%s file=%s", name, path)
    try:
        with Timer(name):
            entry(path)
    except (PuzzleError, OSError, UnicodeDecodeError) as exc:
        logger.error("%s error: %s", name, exc)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)
    return run_command(args.command, args.file)


__all__ = [
    "SUBCOMMANDS",
    "run_command",
    "main",
]
