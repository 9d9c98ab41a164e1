"""2023 day 6: Wait For It"""

from __future__ import annotations

import math

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def _distance(hold: int, time: int) -> int:
    return hold * (time - hold)


def ways_to_win(time: int, record: int) -> int:
    """Number of integer hold times ``h`` with ``h * (time - h) > record``.

    The roots of ``h**2 - time*h + record`` bound the winning range; the
    float estimate is corrected with exact integer checks.
    """
    discriminant = time * time - 4 * record
    if discriminant < 0:
        return 0
    root = math.sqrt(discriminant)
    low = math.floor((time - root) / 2) + 1
    high = math.ceil((time + root) / 2) - 1
    while low > 0 and _distance(low - 1, time) > record:
        low -= 1
    while low <= high and _distance(low, time) <= record:
        low += 1
    while high < time and _distance(high + 1, time) > record:
        high += 1
    while high >= low and _distance(high, time) <= record:
        high -= 1
    return max(0, high - low + 1)


def _row(line: str, label: str) -> list[str]:
    name, _, values = line.partition(":")
    if name.strip() != label:
        raise ParseError(f"expected {label!r} row, got {line!r}")
    return values.split()


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        lines = [line for line in input.splitlines() if line.strip()]
        if len(lines) != 2:
            raise ParseError("expected a Time and a Distance row")
        self.times = _row(lines[0], "Time")
        self.records = _row(lines[1], "Distance")
        if len(self.times) != len(self.records):
            raise ParseError("Time and Distance rows differ in length")
        if not all(value.isdecimal() for value in self.times + self.records):
            raise ParseError("race values must be non-negative integers")

    def solve_part_1(self) -> Solution:
        product = math.prod(
            ways_to_win(int(time), int(record))
            for time, record in zip(self.times, self.records)
        )
        return Solution("Product of ways to win (part 1)", str(product))

    def solve_part_2(self) -> MaybeSolution:
        ways = ways_to_win(int("".join(self.times)), int("".join(self.records)))
        return Solution("Ways to win the long race", str(ways))
