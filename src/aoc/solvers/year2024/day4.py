"""2024 day 4: Ceres Search"""

from __future__ import annotations

from aoc.datastructures import GridView
from aoc.datastructures.iterators import SURROUNDING
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("word search is not rectangular") from exc

    def _spells(self, start: tuple[int, int], direction: tuple[int, int], word: str) -> bool:
        row, col = start
        dr, dc = direction
        for i, letter in enumerate(word):
            pos = (row + dr * i, col + dc * i)
            if not self.grid.in_bounds(pos) or self.grid[pos] != letter:
                return False
        return True

    def solve_part_1(self) -> Solution:
        count = sum(
            self._spells(pos, direction, "XMAS")
            for pos in self.grid.positions()
            if self.grid[pos] == "X"
            for direction in SURROUNDING
        )
        return Solution("Occurrences of XMAS", str(count))

    def solve_part_2(self) -> MaybeSolution:
        count = 0
        for row in range(1, self.grid.height - 1):
            for col in range(1, self.grid.width - 1):
                if self.grid[row, col] != "A":
                    continue
                diagonals = (
                    {self.grid[row - 1, col - 1], self.grid[row + 1, col + 1]},
                    {self.grid[row - 1, col + 1], self.grid[row + 1, col - 1]},
                )
                if all(diagonal == {"M", "S"} for diagonal in diagonals):
                    count += 1
        return Solution("Occurrences of X-MAS", str(count))
