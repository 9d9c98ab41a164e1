"""2023 day 17: Clumsy Crucible"""

from __future__ import annotations

import heapq

from aoc.datastructures import GridView
from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

HORIZONTAL, VERTICAL = 0, 1


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        text = input.rstrip("\n")
        if not text or not text.replace("\n", "").isdecimal():
            raise ParseError("heat loss map must consist of digits")
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", text)
        except ValueError as exc:
            raise ParseError("heat loss map is not rectangular") from exc

    def minimal_heat_loss(self, min_run: int, max_run: int) -> int:
        """Dijkstra over ``(position, axis of the last run)``.

        Every edge is a straight run of ``min_run..max_run`` blocks followed
        by a turn, so the state never needs the run length.
        """
        height, width = self.grid.size
        target = (height - 1, width - 1)
        queue = [(0, 0, 0, HORIZONTAL), (0, 0, 0, VERTICAL)]
        best: dict[tuple[int, int, int], int] = {}
        while queue:
            loss, row, col, axis = heapq.heappop(queue)
            if (row, col) == target:
                return loss
            if best.get((row, col, axis), loss + 1) <= loss:
                continue
            best[row, col, axis] = loss
            next_axis = VERTICAL if axis == HORIZONTAL else HORIZONTAL
            steps = ((1, 0), (-1, 0)) if next_axis == VERTICAL else ((0, 1), (0, -1))
            for dr, dc in steps:
                total = loss
                for run in range(1, max_run + 1):
                    r, c = row + dr * run, col + dc * run
                    if not (0 <= r < height and 0 <= c < width):
                        break
                    total += int(self.grid[r, c])
                    if run >= min_run:
                        heapq.heappush(queue, (total, r, c, next_axis))
        raise SolveError("no path to the machine parts factory")

    def solve_part_1(self) -> Solution:
        return Solution("Minimal heat loss", str(self.minimal_heat_loss(1, 3)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Minimal heat loss with ultra crucible", str(self.minimal_heat_loss(4, 10)))
