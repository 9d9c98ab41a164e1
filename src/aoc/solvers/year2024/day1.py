"""2024 day 1: Historian Hysteria"""

from __future__ import annotations

from collections import Counter

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.left: list[int] = []
        self.right: list[int] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            try:
                a, b = (int(value) for value in line.split())
            except ValueError as exc:
                raise ParseError(f"expected two location ids: {line!r}") from exc
            self.left.append(a)
            self.right.append(b)

    def solve_part_1(self) -> Solution:
        distance = sum(abs(a - b) for a, b in zip(sorted(self.left), sorted(self.right)))
        return Solution("Total distance", str(distance))

    def solve_part_2(self) -> MaybeSolution:
        counts = Counter(self.right)
        similarity = sum(value * counts[value] for value in self.left)
        return Solution("Similarity score", str(similarity))
