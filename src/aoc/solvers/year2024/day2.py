"""2024 day 2: Red-Nosed Reports"""

from __future__ import annotations

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def is_safe(levels: list[int]) -> bool:
    """Strictly monotonic with steps of 1 to 3."""
    steps = [b - a for a, b in zip(levels, levels[1:])]
    return all(1 <= s <= 3 for s in steps) or all(-3 <= s <= -1 for s in steps)


def is_safe_with_dampener(levels: list[int]) -> bool:
    return is_safe(levels) or any(
        is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels))
    )


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.reports = [
                [int(level) for level in line.split()]
                for line in input.splitlines()
                if line.strip()
            ]
        except ValueError as exc:
            raise ParseError("reports must be whitespace separated integers") from exc

    def solve_part_1(self) -> Solution:
        return Solution("Safe reports", str(sum(map(is_safe, self.reports))))

    def solve_part_2(self) -> MaybeSolution:
        safe = sum(map(is_safe_with_dampener, self.reports))
        return Solution("Safe reports with the Problem Dampener", str(safe))
