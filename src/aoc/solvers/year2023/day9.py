"""2023 day 9: Mirage Maintenance"""

from __future__ import annotations

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def extrapolate(values: list[int]) -> int:
    """Next value of *values*, found by recursing on the differences."""
    if not any(values):
        return 0
    differences = [b - a for a, b in zip(values, values[1:])]
    return values[-1] + extrapolate(differences)


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.histories = [
                [int(value) for value in line.split()]
                for line in input.splitlines()
                if line.strip()
            ]
        except ValueError as exc:
            raise ParseError("histories must be whitespace separated integers") from exc

    def solve_part_1(self) -> Solution:
        total = sum(extrapolate(history) for history in self.histories)
        return Solution("Sum of extrapolated values", str(total))

    def solve_part_2(self) -> MaybeSolution:
        total = sum(extrapolate(history[::-1]) for history in self.histories)
        return Solution("Sum of values extrapolated backwards", str(total))
