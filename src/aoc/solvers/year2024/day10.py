"""2024 day 10: Hoof It"""

from __future__ import annotations

from collections import Counter

from aoc.datastructures import GridView, neighbors
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Pos = tuple[int, int]


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        text = input.rstrip("\n")
        if not text.replace("\n", "").isdecimal():
            raise ParseError("topographic map must consist of digits")
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", text)
        except ValueError as exc:
            raise ParseError("topographic map is not rectangular") from exc

    def trails(self, trailhead: Pos) -> Counter[Pos]:
        """Number of distinct hiking trails from *trailhead* to each reachable 9."""
        frontier = Counter({trailhead: 1})
        for height in "123456789":
            step: Counter[Pos] = Counter()
            for pos, paths in frontier.items():
                for nxt in neighbors(pos, self.grid.size):
                    if self.grid[nxt] == height:
                        step[nxt] += paths
            frontier = step
        return frontier

    def _trailheads(self) -> list[Pos]:
        return [pos for pos in self.grid.positions() if self.grid[pos] == "0"]

    def solve_part_1(self) -> Solution:
        score = sum(len(self.trails(head)) for head in self._trailheads())
        return Solution("Sum of trailhead scores", str(score))

    def solve_part_2(self) -> MaybeSolution:
        rating = sum(sum(self.trails(head).values()) for head in self._trailheads())
        return Solution("Sum of trailhead ratings", str(rating))
