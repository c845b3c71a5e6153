"""
Logging setup for the Advent of Code 2022 solvers.

Puzzle answers are reported on the INFO stream rather than printed, so
the CLI calls `setup_logging` exactly once at start-up. Day modules only
ever do ``logger = logging.getLogger(__name__)``.
"""

from __future__ import annotations

from typing import Optional
import logging
import sys

from ..config import LOG_FORMAT, resolve_log_level


# Marker attribute so repeated setup replaces our handler instead of stacking.
_HANDLER_FLAG = "_aoc2022_handler"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger with a single stderr handler.

    Parameters
    ----------
    level:
        Level name such as "DEBUG". If None, `AOC2022_LOG_LEVEL` is used,
        falling back to INFO (see `config.resolve_log_level`).

    Returns
    -------
    logging.Logger
        The configured root logger.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_FLAG, True)
    root.addHandler(handler)
    root.setLevel(resolve_log_level(level))
    return root


__all__ = ["setup_logging"]
