"""2023 day 21: Step Counter

A plot reachable in ``k`` steps stays reachable every second step after
that, so the plots reachable in exactly ``n`` steps are those whose BFS
distance is at most ``n`` with the same parity.

Part two repeats the map infinitely.  On the puzzle inputs the start row and
column are free of rocks and ``26501365 = w // 2 + k * w``, which makes the
count a quadratic in ``k``; three BFS samples determine it.
"""

from __future__ import annotations

from collections import deque

from aoc.datastructures import GridView, neighbors
from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Pos = tuple[int, int]

ROCK = "#"
PART_1_STEPS = 64
PART_2_STEPS = 26501365


def _count_with_parity(distances: dict[Pos, int], steps: int) -> int:
    return sum(1 for d in distances.values() if d <= steps and d % 2 == steps % 2)


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("garden map is not rectangular") from exc
        start = self.grid.find("S")
        if start is None:
            raise ParseError("start position required")
        self.start = start

    def reachable_in_steps(self, steps: int) -> int:
        """Plots reachable in exactly *steps* steps on the bounded map."""
        distances = {self.start: 0}
        queue = deque([self.start])
        while queue:
            pos = queue.popleft()
            if distances[pos] == steps:
                continue
            for neighbour in neighbors(pos, self.grid.size):
                if neighbour not in distances and self.grid[neighbour] != ROCK:
                    distances[neighbour] = distances[pos] + 1
                    queue.append(neighbour)
        return _count_with_parity(distances, steps)

    def plots_on_repeating_map(self, steps: int) -> int:
        """Plots reachable in exactly *steps* steps when the map tiles the plane."""
        height, width = self.grid.size
        distances = {self.start: 0}
        queue = deque([self.start])
        while queue:
            row, col = queue.popleft()
            if distances[row, col] == steps:
                continue
            for dr, dc in ((-1, 0), (0, -1), (0, 1), (1, 0)):
                neighbour = (row + dr, col + dc)
                if neighbour in distances or self.grid[neighbour[0] % height, neighbour[1] % width] == ROCK:
                    continue
                distances[neighbour] = distances[row, col] + 1
                queue.append(neighbour)
        return _count_with_parity(distances, steps)

    def extrapolated_plots(self, steps: int) -> int:
        height, width = self.grid.size
        half = width // 2
        if height != width or self.start != (half, half):
            raise SolveError("extrapolation needs a square map with the start in its centre")
        if steps < half or (steps - half) % width:
            raise SolveError(f"{steps} steps do not end on a map boundary")
        y0, y1, y2 = (self.plots_on_repeating_map(half + k * width) for k in range(3))
        n = (steps - half) // width
        return y0 + n * (y1 - y0) + n * (n - 1) // 2 * (y2 - 2 * y1 + y0)

    def solve_part_1(self) -> Solution:
        return Solution(
            f"Garden plots reachable in {PART_1_STEPS} steps", str(self.reachable_in_steps(PART_1_STEPS))
        )

    def solve_part_2(self) -> MaybeSolution:
        return Solution(
            f"Garden plots reachable in {PART_2_STEPS} steps", str(self.extrapolated_plots(PART_2_STEPS))
        )
