"""2024 day 3: Mull It Over"""

from __future__ import annotations

import re

from aoc.solvers.base import MaybeSolution, Solution, Solver

_INSTRUCTION = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.memory = input

    def run(self, conditionals: bool) -> int:
        enabled = True
        total = 0
        for match in _INSTRUCTION.finditer(self.memory):
            instruction = match.group()
            if instruction == "do()":
                enabled = True
            elif instruction == "don't()":
                enabled = not conditionals
            elif enabled:
                total += int(match.group(1)) * int(match.group(2))
        return total

    def solve_part_1(self) -> Solution:
        return Solution("Sum of multiplications", str(self.run(conditionals=False)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Sum of enabled multiplications", str(self.run(conditionals=True)))
