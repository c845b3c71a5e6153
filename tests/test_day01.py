"""
Tests for aoc2022.days.day01 (calorie counting).
"""

from __future__ import annotations

import logging

import pytest

from aoc2022.config import CALORIE_MAX
from aoc2022.days import day01
from aoc2022.days.day01 import CalorieReport, run, solve, sum_groups
from aoc2022.errors import PuzzleInputError, PuzzleParseError


EXAMPLE = [
    "1000", "2000", "3000", "",
    "4000", "",
    "5000", "6000", "",
    "7000", "8000", "9000", "",
    "10000",
]


# ---------------------------------------------------------------------------
# sum_groups
# ---------------------------------------------------------------------------

def test_sum_groups_single():
    assert sum_groups(["1", "2", "3"]) == [6]


def test_sum_groups_multi():
    assert sum_groups(["1", "2", "", "5", "1", ""]) == [3, 6]


def test_sum_groups_ignores_repeated_blank_lines():
    assert sum_groups(["", "4", "", "", "", "7", ""]) == [4, 7]


def test_sum_groups_accepts_iterators():
    assert sum_groups(iter(["10", "", "20"])) == [10, 20]


@pytest.mark.parametrize("bad", ["abc", "-5", "+5", " 5", "1.5", "1_000"])
def test_sum_groups_rejects_non_integers(bad):
    with pytest.raises(PuzzleParseError) as excinfo:
        sum_groups(["1", "", bad])
    assert excinfo.value.line_number == 3
    assert "line 3" in str(excinfo.value)


# ---------------------------------------------------------------------------
# solve / run
# ---------------------------------------------------------------------------

def test_solve_example():
    report = solve(EXAMPLE)
    assert report.group_sums == [6000, 4000, 11000, 24000, 10000]
    assert report.max_group == 24000
    assert report.top_three == 45000


def test_solve_with_fewer_than_three_groups_skips_top_three():
    report = solve(["1", "", "2"])
    assert report == CalorieReport(group_sums=[1, 2], max_group=2, top_three=None)


def test_solve_without_groups_fails():
    with pytest.raises(PuzzleInputError):
        solve(["", ""])


def test_run_logs_answers(tmp_path, caplog):
    path = tmp_path / "day01.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")

    caplog.set_level(logging.INFO)
    report = run(path)

    assert report.top_three == 45000
    assert "The elf with the most calories has 24000 calories" in caplog.text
    assert "The top three elves have 45000 calories in total" in caplog.text


def test_run_warns_when_not_enough_elves(tmp_path, caplog):
    path = tmp_path / "day01.txt"
    path.write_text("5\n\n6\n")

    caplog.set_level(logging.INFO)
    run(path)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "enough elves" in warnings[0].getMessage()


def test_run_is_repeatable(tmp_path):
    path = tmp_path / "day01.txt"
    path.write_text("\n".join(EXAMPLE))
    assert run(path) == run(path)


# ---------------------------------------------------------------------------
# Large values
# ---------------------------------------------------------------------------

def test_sum_groups_accepts_the_largest_calorie_count():
    assert sum_groups([str(CALORIE_MAX)]) == [CALORIE_MAX]


def test_sum_groups_rejects_counts_above_the_limit():
    with pytest.raises(PuzzleParseError) as excinfo:
        sum_groups(["1", str(CALORIE_MAX + 1)])
    assert excinfo.value.line_number == 2


def test_solve_top_three_does_not_wrap_around(monkeypatch):
    # Each group fits in int64, but their sum does not.
    monkeypatch.setattr(day01, "CALORIE_MAX", 2**62)
    big = "4000000000000000000"

    report = solve([big, "", big, "", big])

    assert report.max_group == 4 * 10**18
    assert report.top_three == 12 * 10**18


def test_solve_rejects_groups_beyond_int64(monkeypatch):
    monkeypatch.setattr(day01, "CALORIE_MAX", 2**62)
    with pytest.raises(PuzzleInputError):
        solve([str(2**62), str(2**62)])

