"""2023 day 11: Cosmic Expansion"""

from __future__ import annotations

from itertools import accumulate

from aoc.datastructures import GridView
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def _distance_sum(coordinates: list[int]) -> int:
    """Sum of ``|a - b|`` over all pairs, in O(n log n)."""
    total = 0
    prefix = 0
    for i, value in enumerate(sorted(coordinates)):
        total += value * i - prefix
        prefix += value
    return total


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("image is not rectangular") from exc
        self.galaxies = [pos for pos in grid.positions() if grid[pos] == "#"]
        self.empty_rows = [all(cell == "." for cell in row) for row in grid.rows()]
        self.empty_cols = [all(cell == "." for cell in col) for col in grid.cols()]

    @staticmethod
    def _expanded(coordinates: list[int], empty: list[bool], factor: int) -> list[int]:
        # Number of empty lines before each index.
        gaps = [0, *accumulate(int(flag) for flag in empty)]
        return [c + gaps[c] * (factor - 1) for c in coordinates]

    def sum_shortest_paths(self, factor: int) -> int:
        """Sum of Manhattan distances when every empty line is *factor* lines wide."""
        rows = self._expanded([r for r, _ in self.galaxies], self.empty_rows, factor)
        cols = self._expanded([c for _, c in self.galaxies], self.empty_cols, factor)
        return _distance_sum(rows) + _distance_sum(cols)

    def solve_part_1(self) -> Solution:
        return Solution("Sum of shortest paths", str(self.sum_shortest_paths(2)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution(
            "Sum of shortest paths in an older universe",
            str(self.sum_shortest_paths(1_000_000)),
        )
