"""2024 day 5: Print Queue"""

from __future__ import annotations

import re
from functools import cmp_to_key

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        sections = re.split(r"\n\s*\n", input.strip())
        if len(sections) != 2:
            raise ParseError("expected ordering rules and updates separated by a blank line")
        try:
            self.rules = {
                tuple(int(page) for page in line.split("|"))
                for line in sections[0].splitlines()
            }
            self.updates = [
                [int(page) for page in line.split(",")]
                for line in sections[1].splitlines()
            ]
        except ValueError as exc:
            raise ParseError("pages must be integers") from exc
        if any(len(rule) != 2 for rule in self.rules):
            raise ParseError("rules must have the form X|Y")

    def _compare(self, a: int, b: int) -> int:
        if (a, b) in self.rules:
            return -1
        if (b, a) in self.rules:
            return 1
        return 0

    def _ordered(self, update: list[int]) -> list[int]:
        return sorted(update, key=cmp_to_key(self._compare))

    @staticmethod
    def _middle(update: list[int]) -> int:
        if len(update) % 2 == 0:
            raise SolveError(f"update {update} has no middle page")
        return update[len(update) // 2]

    def solve_part_1(self) -> Solution:
        total = sum(
            self._middle(update) for update in self.updates if self._ordered(update) == update
        )
        return Solution("Sum of middle pages of ordered updates", str(total))

    def solve_part_2(self) -> MaybeSolution:
        total = 0
        for update in self.updates:
            ordered = self._ordered(update)
            if ordered != update:
                total += self._middle(ordered)
        return Solution("Sum of middle pages of reordered updates", str(total))
