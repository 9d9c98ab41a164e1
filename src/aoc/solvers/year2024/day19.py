"""2024 day 19: Linen Layout"""

from __future__ import annotations

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def arrangements(design: str, towels: frozenset[str], longest: int) -> int:
    """Number of ways to build *design* from *towels*; ``ways[i]`` counts prefixes of length ``i``."""
    ways = [1] + [0] * len(design)
    for end in range(1, len(design) + 1):
        for start in range(max(0, end - longest), end):
            if ways[start] and design[start:end] in towels:
                ways[end] += ways[start]
    return ways[-1]


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        header, _, body = input.strip().partition("\n")
        self.towels = frozenset(towel.strip() for towel in header.split(",") if towel.strip())
        if not self.towels:
            raise ParseError("no towel patterns")
        self.designs = [line.strip() for line in body.splitlines() if line.strip()]
        self.longest = max(map(len, self.towels))

    def _counts(self) -> list[int]:
        return [arrangements(design, self.towels, self.longest) for design in self.designs]

    def solve_part_1(self) -> Solution:
        possible = sum(1 for count in self._counts() if count)
        return Solution("Possible designs", str(possible))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Ways to make the designs", str(sum(self._counts())))
