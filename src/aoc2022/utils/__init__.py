"""
Utility helpers for the Advent of Code 2022 solvers.

This package holds the small pieces shared by every day:

- The line reader and input-path helpers (`io`)
- One-time logging configuration (`logs`)
- Timing helpers used by the CLI (`timing`)

Keeping them here keeps the day modules focused on their puzzle.
"""

__all__ = []
