"""Example answers for the 2024 solvers."""

from __future__ import annotations

import importlib

import pytest

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import NotImplementedSolution, unwrap
from aoc.solvers.year2024 import day18


def solver(day: int, text: str):
    return importlib.import_module(f"aoc.solvers.year2024.day{day}").SolverImpl(text)


@pytest.mark.parametrize(
    ("day", "suffix", "expected"),
    [
        (1, "1", "11"),
        (2, "1", "2"),
        (3, "1", "161"),
        (4, "1", "18"),
        (5, "1", "143"),
        (6, "1", "41"),
        (7, "1", "3749"),
        (8, "1", "14"),
        (9, "1", "1928"),
        (10, "1", "36"),
        (11, "1", "55312"),
        (12, "1", "1930"),
        (13, "1", "480"),
        (19, "1", "6"),
        (22, "1", "37327623"),
        (23, "1", "7"),
        (25, "1", "3"),
    ],
)
def test_part_1_example(example, day: int, suffix: str, expected: str) -> None:
    assert solver(day, example(2024, day, suffix)).solve_part_1().answer == expected


@pytest.mark.parametrize(
    ("day", "suffix", "expected"),
    [
        (1, "1", "31"),
        (2, "1", "4"),
        (3, "2", "48"),
        (4, "1", "9"),
        (5, "1", "123"),
        (6, "1", "6"),
        (7, "1", "11387"),
        (8, "1", "34"),
        (9, "1", "2858"),
        (10, "1", "81"),
        (12, "1", "1206"),
        (19, "1", "16"),
        (22, "2", "23"),
        (23, "1", "co,de,ka,ta"),
    ],
)
def test_part_2_example(example, day: int, suffix: str, expected: str) -> None:
    assert unwrap(solver(day, example(2024, day, suffix)).solve_part_2()).answer == expected


class TestDay12:
    def test_sides_of_e_shape(self) -> None:
        text = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n"
        assert solver(12, text).solve_part_2().answer == "236"


class TestDay13:
    def test_unreachable_prize_costs_nothing(self) -> None:
        text = "Button A: X+2, Y+2\nButton B: X+4, Y+4\nPrize: X=3, Y=3\n"
        assert solver(13, text).solve_part_1().answer == "0"


class TestDay18:
    def test_small_memory_space(self, example) -> None:
        memory = day18.SolverImpl(example(2024, 18), size=7, fallen=12)
        assert memory.solve_part_1().answer == "22"
        assert memory.solve_part_2().answer == "6,1"

    def test_blocked_exit(self) -> None:
        memory = day18.SolverImpl("1,0\n0,1\n", size=3, fallen=2)
        with pytest.raises(SolveError, match="No path found"):
            memory.solve_part_1()

    def test_byte_outside_memory(self) -> None:
        with pytest.raises(ParseError):
            day18.SolverImpl("7,0\n", size=7)


class TestDay25:
    def test_no_second_part(self, example) -> None:
        assert isinstance(solver(25, example(2024, 25)).solve_part_2(), NotImplementedSolution)
