"""2023 day 3: Gear Ratios"""

from __future__ import annotations

import math
import re
from collections import defaultdict

from aoc.datastructures import GridView, surround
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

_NUMBER = re.compile(r"\d+")


class SolverImpl(Solver):
    """Finds the numbers of the engine schematic that touch a symbol."""

    def __init__(self, input: str) -> None:
        text = input.rstrip("\n")
        if not text:
            raise ParseError("empty schematic")
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", text)
        except ValueError as exc:
            raise ParseError("schematic is not rectangular") from exc

        # (value, adjacent symbol positions) for every number in the schematic
        self.numbers: list[tuple[int, set[tuple[int, int]]]] = []
        for row in range(self.grid.height):
            for match in _NUMBER.finditer(self.grid[row, :]):
                adjacent = {
                    pos
                    for col in range(match.start(), match.end())
                    for pos in surround((row, col), self.grid.size)
                    if self._is_symbol(self.grid[pos])
                }
                self.numbers.append((int(match.group()), adjacent))

    @staticmethod
    def _is_symbol(cell: str) -> bool:
        return cell != "." and not cell.isdigit()

    def solve_part_1(self) -> Solution:
        total = sum(value for value, symbols in self.numbers if symbols)
        return Solution("Sum of part numbers", str(total))

    def solve_part_2(self) -> MaybeSolution:
        gears: dict[tuple[int, int], list[int]] = defaultdict(list)
        for value, symbols in self.numbers:
            for pos in symbols:
                if self.grid[pos] == "*":
                    gears[pos].append(value)
        total = sum(math.prod(values) for values in gears.values() if len(values) == 2)
        return Solution("Sum of gear ratios", str(total))
