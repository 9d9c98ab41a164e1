"""2024 day 25: Code Chronicle"""

from __future__ import annotations

import re

from aoc.datastructures import GridView
from aoc.errors import ParseError
from aoc.solvers.base import NOT_IMPLEMENTED, MaybeSolution, Solution, Solver


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.locks: list[tuple[int, ...]] = []
        self.keys: list[tuple[int, ...]] = []
        self.height = 0
        for block in re.split(r"\n\s*\n", input.strip()):
            try:
                schematic: GridView[str] = GridView.from_separated("\n", block.strip())
            except ValueError as exc:
                raise ParseError("schematic is not rectangular") from exc
            self.height = schematic.height
            heights = tuple(sum(cell == "#" for cell in col) - 1 for col in schematic.cols())
            top = set(schematic.row(0))
            if top == {"#"}:
                self.locks.append(heights)
            elif top == {"."}:
                self.keys.append(heights)
            else:
                raise ParseError("schematic is neither a lock nor a key")

    def solve_part_1(self) -> Solution:
        space = self.height - 2
        fitting = sum(
            all(l + k <= space for l, k in zip(lock, key))
            for lock in self.locks
            for key in self.keys
        )
        return Solution("Unique lock/key pairs that fit", str(fitting))

    def solve_part_2(self) -> MaybeSolution:
        # The last puzzle of the year has no second part.
        return NOT_IMPLEMENTED
