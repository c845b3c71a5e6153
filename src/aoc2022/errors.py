"""
Error taxonomy for the puzzle solvers.

Four kinds of failure abort a run:

- I/O failures surface as the built-in `FileNotFoundError` / `OSError`.
- `PuzzleParseError` when a line does not match the expected lexical form.
- `PuzzleInputError` when the input parses but is unusable as a whole.
- `CrateMoveError` when a crane instruction cannot be carried out.

Everything except I/O derives from `PuzzleError`, which is what the CLI
catches to report a failure and exit non-zero.
"""

from __future__ import annotations

from typing import Optional


class PuzzleError(Exception):
    """Base class for every puzzle failure."""


class PuzzleParseError(PuzzleError, ValueError):
    """A line (or token) did not match the grammar of its puzzle."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class PuzzleInputError(PuzzleError, ValueError):
    """The input as a whole cannot be solved (e.g. it holds no records)."""


class CrateMoveError(PuzzleError, RuntimeError):
    pass


__all__ = [
    "PuzzleError",
    "PuzzleParseError",
    "PuzzleInputError",
    "CrateMoveError",
]
