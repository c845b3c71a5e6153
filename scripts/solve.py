#!/usr/bin/env python
"""
CLI helper to solve a puzzle straight from a checkout.

This script is a thin wrapper around the library entry point:

- aoc2022.cli.main

Typical usage from the project root
-----------------------------------

    python scripts/solve.py day1 data/inputs/day01.txt
    python scripts/solve.py day5a data/inputs/day05.txt
    python scripts/solve.py --log-level DEBUG day4 data/inputs/day04.txt
    python scripts/solve.py day3            # uses data/inputs/day03.txt

The script automatically adds `src/` to PYTHONPATH so that it can import the
`aoc2022` package without requiring installation. When the input path is
omitted, the conventional `data/inputs/dayNN.txt` path is filled in.
"""

from __future__ import annotations

from pathlib import Path
import re
import sys
from typing import List, Optional


def _ensure_src_on_path() -> Path:
    """
    Ensure that <project_root>/src is on sys.path and return project_root.

    Assumes this file lives in <project_root>/scripts/solve.py.
    """
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))
    return project_root


def _positionals(argv: List[str]) -> List[str]:
    """Arguments that are neither options nor option values."""
    positionals = []
    skip_value = False
    for arg in argv:
        if skip_value:
            skip_value = False
        elif arg == "--log-level":
            skip_value = True
        elif not arg.startswith("-"):
            positionals.append(arg)
    return positionals


def _with_default_input(argv: List[str]) -> List[str]:
    """
    Append data/inputs/dayNN.txt when the subcommand is the only positional.

    The data directories are created on the way, so a fresh checkout has a
    place to drop its inputs.
    """
    from aoc2022.utils.io import ensure_data_dirs, get_input_path

    positionals = _positionals(argv)
    if len(positionals) != 1:
        return argv
    match = re.fullmatch(r"day(\d+)[ab]?", positionals[0])
    if match is None:
        return argv
    ensure_data_dirs()
    return [*argv, str(get_input_path(int(match.group(1))))]


def main(argv: Optional[List[str]] = None) -> int:
    _ensure_src_on_path()

    # Imports done after path configuration
    from aoc2022.cli import main as cli_main

    if argv is None:
        argv = sys.argv[1:]
    return cli_main(_with_default_input(list(argv)))


if __name__ == "__main__":
    sys.exit(main())
