"""
Tests for aoc2022.days.day05 (supply stacks).

These tests focus on:
- Parsing the crate drawing (including uneven stack heights)
- Parsing move orders
- Both crane strategies, and their failure modes
- Rendering the final drawing
"""

from __future__ import annotations

import functools
import logging

import pytest

from aoc2022.days.day05 import (
    TransferOrder,
    execute_mover_9000,
    execute_mover_9001,
    parse_crates,
    parse_input,
    parse_transfer,
    render_stacks,
    run,
    run_a,
    run_b,
    top_crates,
)
from aoc2022.errors import CrateMoveError, PuzzleInputError, PuzzleParseError


EXAMPLE = [
    "    [D]    ",
    "[N] [C]    ",
    "[Z] [M] [P]",
    " 1   2   3 ",
    "",
    "move 1 from 2 to 1",
    "move 3 from 1 to 3",
    "move 2 from 2 to 1",
    "move 1 from 1 to 2",
]


def _write_example(tmp_path):
    path = tmp_path / "day05.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    return path


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def test_parse_crates_one():
    assert parse_crates(["[S]", "[T]", " 1 "]) == [["T", "S"]]


def test_parse_crates_multi():
    assert parse_crates(["[S] [B]", "[T] [A]", " 1   2 "]) == [["T", "S"], ["A", "B"]]


def test_parse_crates_diff_heights():
    assert parse_crates(["[S]    ", "[T] [A]", " 1   2 "]) == [["T", "S"], ["A"]]


def test_parse_crates_short_rows_count_as_empty():
    # Trailing spaces trimmed by an editor must not break parsing.
    assert parse_crates(["[S]", "[T] [A]", " 1   2 "]) == [["T", "S"], ["A"]]


def test_parse_crates_ruler_only():
    assert parse_crates([" 1   2   3 "]) == [[], [], []]


def test_parse_crates_empty_drawing_fails():
    with pytest.raises(PuzzleInputError):
        parse_crates([])


def test_parse_transfer():
    expected = TransferOrder(amount=11, source=22, destination=33)
    assert parse_transfer("move 11 from 22 to 33") == expected


@pytest.mark.parametrize(
    "raw",
    ["move 1 from 2", "move one from 2 to 3", "move 1 from 2 to 3 ", "Move 1 from 2 to 3"],
)
def test_parse_transfer_rejects_malformed(raw):
    with pytest.raises(PuzzleParseError):
        parse_transfer(raw)


def test_parse_input_splits_on_first_blank_line():
    stacks, orders = parse_input(EXAMPLE)

    assert stacks == [["Z", "N"], ["M", "C", "D"], ["P"]]
    assert orders[0] == TransferOrder(amount=1, source=2, destination=1)
    assert len(orders) == 4


def test_parse_input_consumes_an_iterator_once():
    stacks, orders = parse_input(iter(EXAMPLE + ["", ""]))
    assert len(stacks) == 3
    assert len(orders) == 4


def test_parse_input_reports_line_number_of_bad_order():
    lines = EXAMPLE[:6] + ["move 3 from 1 too 3"]
    with pytest.raises(PuzzleParseError) as excinfo:
        parse_input(lines)
    assert excinfo.value.line_number == 7


# ---------------------------------------------------------------------------
# Cranes
# ---------------------------------------------------------------------------

def test_mover_9000_reverses_moved_block():
    stacks = [["A", "B", "C"], []]
    execute_mover_9000([TransferOrder(3, 1, 2)], stacks)
    assert stacks == [[], ["C", "B", "A"]]


def test_mover_9001_keeps_block_order():
    stacks = [["A", "B", "C"], ["X"]]
    execute_mover_9001([TransferOrder(2, 1, 2)], stacks)
    assert stacks == [["A"], ["X", "B", "C"]]


def test_mover_9000_example():
    stacks, orders = parse_input(EXAMPLE)
    execute_mover_9000(orders, stacks)
    assert stacks == [["C"], ["M"], ["P", "D", "N", "Z"]]
    assert top_crates(stacks) == "CMZ"


def test_mover_9001_example():
    stacks, orders = parse_input(EXAMPLE)
    execute_mover_9001(orders, stacks)
    assert stacks == [["M"], ["C"], ["P", "Z", "N", "D"]]
    assert top_crates(stacks) == "MCD"


@pytest.mark.parametrize("crane", [execute_mover_9000, execute_mover_9001])
def test_cranes_fail_when_stack_runs_out(crane):
    with pytest.raises(CrateMoveError):
        crane([TransferOrder(2, 1, 2)], [["A"], []])


@pytest.mark.parametrize("crane", [execute_mover_9000, execute_mover_9001])
@pytest.mark.parametrize("order", [TransferOrder(1, 0, 1), TransferOrder(1, 1, 3)])
def test_cranes_fail_on_unknown_stack(crane, order):
    with pytest.raises(CrateMoveError):
        crane([order], [["A"], ["B"]])


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def test_render_stacks_round_trips_the_drawing():
    stacks, _ = parse_input(EXAMPLE)
    assert render_stacks(stacks) == [
        "    [D]     ",
        "[N] [C]     ",
        "[Z] [M] [P] ",
        " 1   2   3",
    ]
    assert parse_crates(render_stacks(stacks)) == stacks


def test_render_stacks_empty_stacks_only_footer():
    assert render_stacks([[], []]) == [" 1   2"]


def test_top_crates_skips_empty_stacks():
    assert top_crates([["A"], [], ["B", "C"]]) == "AC"


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def test_run_a_logs_final_drawing(tmp_path, caplog):
    path = _write_example(tmp_path)

    caplog.set_level(logging.INFO)
    stacks = run_a(path)

    assert top_crates(stacks) == "CMZ"
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert messages == [
        "        [Z] ",
        "        [N] ",
        "        [D] ",
        "[C] [M] [P] ",
        " 1   2   3",
        "Top crates: CMZ",
    ]


def test_run_b(tmp_path):
    assert top_crates(run_b(_write_example(tmp_path))) == "MCD"


def test_run_is_repeatable(tmp_path):
    path = _write_example(tmp_path)
    assert run_a(path) == run_a(path)
    assert run_b(path) == run_b(path)


def test_run_accepts_cranes_without_a_name(tmp_path, caplog):
    def logged_crane(label, orders, stacks):
        execute_mover_9001(orders, stacks)

    caplog.set_level(logging.DEBUG)
    stacks = run(_write_example(tmp_path), functools.partial(logged_crane, "block"))
    assert top_crates(stacks) == "MCD"
