"""2024 day 12: Garden Groups

Regions are flood-filled.  A region has as many sides as corners, and
each cell contributes one corner per convex or concave turn around it.
"""

from __future__ import annotations

from collections import deque

from aoc.datastructures import GridView, neighbors
from aoc.datastructures.iterators import ORTHOGONAL
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Pos = tuple[int, int]

# Pairs of orthogonal directions around each corner of a cell.
CORNERS = (((-1, 0), (0, -1)), ((-1, 0), (0, 1)), ((1, 0), (0, -1)), ((1, 0), (0, 1)))


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("garden map is not rectangular") from exc
        self.regions = self._regions()

    def _regions(self) -> list[set[Pos]]:
        seen: set[Pos] = set()
        regions = []
        for start in self.grid.positions():
            if start in seen:
                continue
            plant = self.grid[start]
            region = {start}
            queue = deque([start])
            while queue:
                pos = queue.popleft()
                for nxt in neighbors(pos, self.grid.size):
                    if nxt not in region and self.grid[nxt] == plant:
                        region.add(nxt)
                        queue.append(nxt)
            seen |= region
            regions.append(region)
        return regions

    @staticmethod
    def perimeter(region: set[Pos]) -> int:
        return sum(
            (row + dr, col + dc) not in region
            for row, col in region
            for dr, dc in ORTHOGONAL
        )

    @staticmethod
    def sides(region: set[Pos]) -> int:
        corners = 0
        for row, col in region:
            for (ar, ac), (br, bc) in CORNERS:
                a = (row + ar, col + ac) in region
                b = (row + br, col + bc) in region
                diagonal = (row + ar + br, col + ac + bc) in region
                if (not a and not b) or (a and b and not diagonal):
                    corners += 1
        return corners

    def solve_part_1(self) -> Solution:
        price = sum(len(region) * self.perimeter(region) for region in self.regions)
        return Solution("Total fencing price", str(price))

    def solve_part_2(self) -> MaybeSolution:
        price = sum(len(region) * self.sides(region) for region in self.regions)
        return Solution("Total fencing price with bulk discount", str(price))
