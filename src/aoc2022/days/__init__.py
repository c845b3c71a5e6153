"""
Per-day puzzle solvers.

Each module follows the same shape:

- Parsers that turn an iterable of lines into a small in-memory structure.
- Pure solver functions over that structure.
- A `run(path)` (or `run_a` / `run_b` for days with two strategies) that
  reads the file, solves, logs the answers and returns them.

The CLI (`aoc2022.cli`) only depends on the `run*` entry points.
"""

__all__ = []
