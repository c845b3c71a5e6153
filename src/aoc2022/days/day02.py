"""
Day 2 – Rock Paper Scissors.

Each line of the strategy guide is ``"<opponent> <second>"``. The opponent
column is always a move (A/B/C). What the second column means depends on
the strategy:

- Strategy A: X/Y/Z is the move to play.
- Strategy B: X/Y/Z is the outcome to aim for (lose / draw / win).

Both strategies share one line loop (`total_score`) and are injected as a
plain function, so the CLI exposes them as ``day2a`` and ``day2b``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable
import logging

from ..config import STRATEGY_LINE_LENGTH
from ..errors import PuzzleParseError
from ..utils.io import PathLike, read_lines


logger = logging.getLogger(__name__)

# (opponent column, second column) -> round score
Resolver = Callable[[str, str], int]


class Outcome(Enum):
    """Result of a round from the player's point of view."""

    LOSE = 0
    DRAW = 1
    WIN = 2

    @property
    def score(self) -> int:
        return _OUTCOME_SCORES[self]

    @property
    def offset(self) -> int:
        """Steps along the move cycle from the opponent's move to ours."""
        return self.value - 1

    @classmethod
    def from_char(cls, ch: str) -> "Outcome":
        try:
            return _OUTCOME_CHARS[ch]
        except KeyError:
            raise PuzzleParseError(f"invalid outcome: {ch!r}") from None


class Move(Enum):
    """A move, with its position on the rock -> paper -> scissors cycle."""

    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def score(self) -> int:
        return self.value + 1

    def successor(self) -> "Move":
        """The move that beats this one."""
        return self.shifted(1)

    def predecessor(self) -> "Move":
        """The move this one beats."""
        return self.shifted(-1)

    def shifted(self, steps: int) -> "Move":
        # Python's % already wraps negatives into 0..2.
        return Move((self.value + steps) % len(Move))

    def fight(self, opponent: "Move") -> Outcome:
        if self is opponent:
            return Outcome.DRAW
        if self is opponent.successor():
            return Outcome.WIN
        return Outcome.LOSE

    @classmethod
    def from_char(cls, ch: str) -> "Move":
        try:
            return _MOVE_CHARS[ch]
        except KeyError:
            raise PuzzleParseError(f"invalid move: {ch!r}") from None


_OUTCOME_SCORES = {Outcome.LOSE: 0, Outcome.DRAW: 3, Outcome.WIN: 6}
_OUTCOME_CHARS = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}
_MOVE_CHARS = {
    "A": Move.ROCK, "X": Move.ROCK,
    "B": Move.PAPER, "Y": Move.PAPER,
    "C": Move.SCISSORS, "Z": Move.SCISSORS,
}


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def resolve_line_a(opponent: str, player: str) -> int:
    """Both columns are moves."""
    player_move = Move.from_char(player)
    opponent_move = Move.from_char(opponent)
    return player_move.score + player_move.fight(opponent_move).score


def resolve_line_b(opponent: str, outcome_raw: str) -> int:
    """The second column is the outcome we need; pick the move that produces it."""
    opponent_move = Move.from_char(opponent)
    outcome = Outcome.from_char(outcome_raw)
    player_move = opponent_move.shifted(outcome.offset)
    return player_move.score + outcome.score


# ---------------------------------------------------------------------------
# Shared driver
# ---------------------------------------------------------------------------

def total_score(lines: Iterable[str], resolver: Resolver) -> int:
    """
    Sum `resolver` over every well-formed line of the guide.

    Lines that are not exactly ``"X Y"`` shaped (three characters) are
    skipped with a warning; an unknown character inside a well-shaped line
    aborts the run.
    """
    total = 0
    for line_number, line in enumerate(lines, start=1):
        if len(line) != STRATEGY_LINE_LENGTH:
            logger.warning("Line of wrong length: %r", line)
            continue
        try:
            total += resolver(line[0], line[2])
        except PuzzleParseError as exc:
            raise PuzzleParseError(str(exc), line_number) from exc
    return total


def run(path: PathLike, resolver: Resolver) -> int:
    name = getattr(resolver, "__name__", repr(resolver))
    logger.debug("Input: %s (strategy %s)", path, name)
    total = total_score(read_lines(path), resolver)
    logger.info("Total score for strategy guide: %d", total)
    return total


def run_a(path: PathLike) -> int:
    return run(path, resolve_line_a)


def run_b(path: PathLike) -> int:
    return run(path, resolve_line_b)


__all__ = [
    "Move",
    "Outcome",
    "Resolver",
    "resolve_line_a",
    "resolve_line_b",
    "total_score",
    "run",
    "run_a",
    "run_b",
]
