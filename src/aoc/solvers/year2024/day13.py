"""2024 day 13: Claw Contraption

Each machine is a 2x2 linear system ``a * A + b * B = prize``.  numpy gives
the floating point solution, which is rounded and then verified in exact
integer arithmetic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import numpy as np

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

_MACHINE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\s+"
    r"Button B: X\+(\d+), Y\+(\d+)\s+"
    r"Prize: X=(\d+), Y=(\d+)"
)

COST_A, COST_B = 3, 1
MAX_PRESSES = 100
PRIZE_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class Machine:
    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int

    def presses(self, offset: int = 0) -> tuple[int, int] | None:
        """Integer button presses reaching the prize, if there are any."""
        px, py = self.px + offset, self.py + offset
        matrix = np.array([[self.ax, self.bx], [self.ay, self.by]], dtype=np.float64)
        try:
            a, b = np.linalg.solve(matrix, np.array([px, py], dtype=np.float64))
        except np.linalg.LinAlgError:
            return None
        a, b = int(round(a)), int(round(b))
        if a < 0 or b < 0:
            return None
        if a * self.ax + b * self.bx != px or a * self.ay + b * self.by != py:
            return None
        return a, b


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.machines = [Machine(*map(int, m.groups())) for m in _MACHINE.finditer(input)]
        if not self.machines:
            raise ParseError("no claw machines in input")

    def solve_part_1(self) -> Solution:
        tokens = 0
        for machine in self.machines:
            presses = machine.presses()
            if presses is not None and max(presses) <= MAX_PRESSES:
                tokens += COST_A * presses[0] + COST_B * presses[1]
        return Solution("Fewest tokens to win all possible prizes", str(tokens))

    def solve_part_2(self) -> MaybeSolution:
        tokens = 0
        for machine in self.machines:
            presses = machine.presses(PRIZE_OFFSET)
            if presses is not None:
                tokens += COST_A * presses[0] + COST_B * presses[1]
        return Solution("Fewest tokens with corrected prize positions", str(tokens))
