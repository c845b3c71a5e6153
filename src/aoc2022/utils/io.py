"""
I/O utilities for the Advent of Code 2022 solvers.

This module centralizes file and path handling so that:
- Day modules never open files themselves; they consume an iterator of lines.
- Tests can feed plain lists of strings into the same parsers.
- Scripts do *not* hard-code paths to the puzzle inputs.

Typical usage
-------------

    from aoc2022.utils.io import get_input_path, read_lines

    for line in read_lines(get_input_path(1)):
        ...
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator, Union

from ..config import DATA_DIR, DATA_INPUTS_DIR


PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Line reader
# ---------------------------------------------------------------------------

def read_lines(path: PathLike) -> Iterator[str]:
    """
    Open `path` and return a lazy iterator over its lines.

    The file is opened immediately, so a missing or unreadable path raises
    `FileNotFoundError` / `OSError` here rather than on first iteration.
    Lines are yielded one at a time with the trailing newline (``\\n`` or
    ``\\r\\n``) removed. The iterator is single-pass; call `read_lines`
    again to start over. The handle is closed once the iterator is
    exhausted, closed, or garbage collected.

    Parameters
    ----------
    path:
        Path to a plain-text puzzle input.

    Returns
    -------
    Iterator[str]
    """
    handle = open(Path(path), "r", encoding="utf-8", newline="")
    return _iter_stripped(handle)


def _iter_stripped(handle: IO[str]) -> Iterator[str]:
    with handle:
        for line in handle:
            yield line.rstrip("\r\n")


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------

def ensure_data_dirs() -> None:
    """
    Ensure that `data/` and `data/inputs/` exist.

    It is safe to call this repeatedly.
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    DATA_INPUTS_DIR.mkdir(parents=True, exist_ok=True)


def get_input_path(day: int) -> Path:
    """
    Build the conventional path of a day's puzzle input.

    Example
    -------
    >>> get_input_path(5)
    PosixPath('.../data/inputs/day05.txt')
    """
    if day < 1:
        raise ValueError(f"day must be positive, got {day}")
    return DATA_INPUTS_DIR / f"day{day:02d}.txt"


__all__ = [
    "PathLike",
    "read_lines",
    "ensure_data_dirs",
    "get_input_path",
]
