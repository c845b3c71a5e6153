"""
Day 5 – Supply Stacks.

The input has two sections separated by the first blank line:

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

    move 1 from 2 to 1
    move 3 from 1 to 3

The drawing is turned into stacks (bottom to top), the move orders are
applied by one of two cranes, and the final drawing is logged:

- CrateMover 9000 (``day5a``) moves one crate at a time, so a moved block
  ends up reversed.
- CrateMover 9001 (``day5b``) moves the whole block at once, keeping its
  order.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from typing import Callable, Iterable, List, Sequence, Tuple
import logging
import math
import re

from ..config import CRATE_COLUMN_WIDTH, CRATE_LABEL_OFFSET
from ..errors import CrateMoveError, PuzzleInputError, PuzzleParseError
from ..utils.io import PathLike, read_lines
from ..utils.timing import timeit


logger = logging.getLogger(__name__)

Crate = str
Stacks = List[List[Crate]]

RE_TRANSFER = re.compile(r"^move (\d+) from (\d+) to (\d+)$")


@dataclass(frozen=True)
class TransferOrder:
    """Move `amount` crates from stack `source` to `destination` (1-based)."""

    amount: int
    source: int
    destination: int


Crane = Callable[[Sequence[TransferOrder], Stacks], None]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_crates(drawing: Sequence[str]) -> Stacks:
    """
    Build the stacks from the drawing section, bottom crate first.

    The last line is the ruler (`` 1   2   3 ``); its length fixes the number
    of stacks. Rows may be shorter than the ruler when the rightmost
    stacks are lower, so missing columns count as empty.

        >>> parse_crates(["[S]    ", "[T] [A]", " 1   2 "])
        [['T', 'S'], ['A']]
    """
    if not drawing:
        raise PuzzleInputError("crate drawing is empty")

    *rows, ruler = drawing
    stack_count = math.ceil(len(ruler) / CRATE_COLUMN_WIDTH)
    stacks: Stacks = [[] for _ in range(stack_count)]

    for row in reversed(rows):
        for i, stack in enumerate(stacks):
            column = i * CRATE_COLUMN_WIDTH + CRATE_LABEL_OFFSET
            if column < len(row) and row[column] != " ":
                stack.append(row[column])

    logger.debug("Created %d stacks: %s", stack_count, stacks)
    return stacks


def parse_transfer(raw: str) -> TransferOrder:
    """
    Parse one ``move <amount> from <source> to <destination>`` line.

        >>> parse_transfer("move 11 from 22 to 33")
        TransferOrder(amount=11, source=22, destination=33)
    """
    match = RE_TRANSFER.match(raw)
    if match is None:
        raise PuzzleParseError(f"unable to parse transfer order {raw!r}")
    amount, source, destination = (int(group) for group in match.groups())
    return TransferOrder(amount=amount, source=source, destination=destination)


@timeit("day5 parse")
def parse_input(lines: Iterable[str]) -> Tuple[Stacks, List[TransferOrder]]:
    """
    Split the input at the first blank line into stacks and move orders.

    The line iterator is consumed once, front to back.
    """
    line_iter = iter(lines)
    drawing = list(takewhile(bool, line_iter))
    stacks = parse_crates(drawing)

    orders: List[TransferOrder] = []
    # Line numbers are 1-based and takewhile also swallowed the blank separator.
    first_order_line = len(drawing) + 2
    for line_number, line in enumerate(line_iter, start=first_order_line):
        if not line:
            continue
        try:
            orders.append(parse_transfer(line))
        except PuzzleParseError as exc:
            raise PuzzleParseError(str(exc), line_number) from exc

    logger.debug("Parsed %d transfer orders", len(orders))
    return stacks, orders


# ---------------------------------------------------------------------------
# Cranes
# ---------------------------------------------------------------------------

def _stack_index(stacks: Stacks, number: int) -> int:
    if not 1 <= number <= len(stacks):
        raise CrateMoveError(f"no stack {number}; there are {len(stacks)} stacks")
    return number - 1


def execute_mover_9000(orders: Sequence[TransferOrder], stacks: Stacks) -> None:
    """Apply `orders` one crate at a time, reversing each moved block."""
    for order in orders:
        src = stacks[_stack_index(stacks, order.source)]
        dst = stacks[_stack_index(stacks, order.destination)]
        for _ in range(order.amount):
            if not src:
                raise CrateMoveError(
                    f"ordered to pick from empty stack {order.source}"
                )
            crate = src.pop()
            logger.debug("Moving crate %s from %d to %d.", crate, order.source, order.destination)
            dst.append(crate)


def execute_mover_9001(orders: Sequence[TransferOrder], stacks: Stacks) -> None:
    """Apply `orders` moving the top `amount` crates as one block."""
    for order in orders:
        src = stacks[_stack_index(stacks, order.source)]
        dst = stacks[_stack_index(stacks, order.destination)]
        if order.amount > len(src):
            raise CrateMoveError(
                f"ordered to pick {order.amount} crates from stack {order.source}, "
                f"which holds {len(src)}"
            )
        split = len(src) - order.amount
        block = src[split:]
        del src[split:]
        logger.debug("Moving crates %s from %d to %d.", block, order.source, order.destination)
        dst.extend(block)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def render_stacks(stacks: Stacks) -> List[str]:
    """
    Draw the stacks the way the puzzle input does, top row first.

    Every row has one four-column cell per stack; the footer numbers the
    stacks from 1 with a leading space so the digits line up under the
    crate labels.
    """
    height = max((len(stack) for stack in stacks), default=0)
    lines: List[str] = []
    for level in range(height - 1, -1, -1):
        cells = [
            f"[{stack[level]}] " if level < len(stack) else " " * CRATE_COLUMN_WIDTH
            for stack in stacks
        ]
        lines.append("".join(cells))
    footer = "   ".join(str(number) for number in range(1, len(stacks) + 1))
    lines.append(f" {footer}")
    return lines


def top_crates(stacks: Stacks) -> str:
    """Label of the top crate of each non-empty stack, left to right."""
    return "".join(stack[-1] for stack in stacks if stack)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def run(path: PathLike, crane: Crane) -> Stacks:
    name = getattr(crane, "__name__", repr(crane))
    logger.debug("Input: %s (crane %s)", path, name)
    stacks, orders = parse_input(read_lines(path))

    crane(orders, stacks)

    for line in render_stacks(stacks):
        logger.info("%s", line)
    logger.info("Top crates: %s", top_crates(stacks))
    return stacks


def run_a(path: PathLike) -> Stacks:
    return run(path, execute_mover_9000)


def run_b(path: PathLike) -> Stacks:
    return run(path, execute_mover_9001)


__all__ = [
    "Crate",
    "Stacks",
    "Crane",
    "TransferOrder",
    "RE_TRANSFER",
    "parse_crates",
    "parse_transfer",
    "parse_input",
    "execute_mover_9000",
    "execute_mover_9001",
    "render_stacks",
    "top_crates",
    "run",
    "run_a",
    "run_b",
]
