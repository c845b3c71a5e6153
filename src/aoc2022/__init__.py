"""
Advent of Code 2022 – days 1 to 5

This package contains small, independent solvers for the first five
puzzles of Advent of Code 2022. See the `days` subpackage for the
per-puzzle parsers and solvers, `utils` for the shared line reader and
logging helpers, and `cli` for the command-line entry point.
"""

__all__ = []

__version__ = "0.1.0"
