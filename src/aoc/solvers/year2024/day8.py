"""2024 day 8: Resonant Collinearity"""

from __future__ import annotations

from collections import defaultdict
from itertools import permutations

from aoc.datastructures import GridView
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Pos = tuple[int, int]


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("antenna map is not rectangular") from exc
        self.antennas: dict[str, list[Pos]] = defaultdict(list)
        for pos in self.grid.positions():
            if self.grid[pos] != ".":
                self.antennas[self.grid[pos]].append(pos)

    def antinodes(self, harmonics: bool) -> set[Pos]:
        found: set[Pos] = set()
        for positions in self.antennas.values():
            for (r1, c1), (r2, c2) in permutations(positions, 2):
                dr, dc = r2 - r1, c2 - c1
                if not harmonics:
                    pos = (r2 + dr, c2 + dc)
                    if self.grid.in_bounds(pos):
                        found.add(pos)
                    continue
                pos = (r2, c2)
                while self.grid.in_bounds(pos):
                    found.add(pos)
                    pos = (pos[0] + dr, pos[1] + dc)
        return found

    def solve_part_1(self) -> Solution:
        return Solution("Unique antinode locations", str(len(self.antinodes(False))))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Unique antinode locations with harmonics", str(len(self.antinodes(True))))
