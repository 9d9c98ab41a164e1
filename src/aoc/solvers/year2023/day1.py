"""2023 day 1: Trebuchet?!"""

from __future__ import annotations

import re

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

DIGIT_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

# Lookahead so that overlapping words ("twone") both match.
_SPELLED_DIGIT = re.compile(r"(?=(\d|" + "|".join(DIGIT_WORDS) + "))")


def _calibration_value(digits: list[int], line: str) -> int:
    if not digits:
        raise SolveError(f"no digit in line {line!r}")
    return digits[0] * 10 + digits[-1]


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.lines = [line for line in input.splitlines() if line]
        if not self.lines:
            raise ParseError("empty calibration document")

    def solve_part_1(self) -> Solution:
        total = sum(
            _calibration_value([int(c) for c in line if c.isdecimal()], line)
            for line in self.lines
        )
        return Solution("Calibration sum (part 1)", str(total))

    def solve_part_2(self) -> MaybeSolution:
        total = 0
        for line in self.lines:
            digits = [
                int(token) if token.isdecimal() else DIGIT_WORDS[token]
                for token in _SPELLED_DIGIT.findall(line)
            ]
            total += _calibration_value(digits, line)
        return Solution("Calibration sum (part 2)", str(total))
