"""2023 day 4: Scratchcards"""

from __future__ import annotations

import re

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

_CARD = re.compile(r"Card\s+(\d+):([\d\s]*)\|([\d\s]*)")


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.matches: list[int] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            card = _CARD.fullmatch(line.strip())
            if card is None:
                raise ParseError(f"invalid card: {line!r}")
            winning = set(card.group(2).split())
            have = card.group(3).split()
            self.matches.append(sum(1 for number in have if number in winning))

    def solve_part_1(self) -> Solution:
        points = sum(1 << (n - 1) for n in self.matches if n)
        return Solution("Points", str(points))

    def solve_part_2(self) -> MaybeSolution:
        copies = [1] * len(self.matches)
        for i, n in enumerate(self.matches):
            for j in range(i + 1, min(i + 1 + n, len(copies))):
                copies[j] += copies[i]
        return Solution("Number of scratch cards", str(sum(copies)))
