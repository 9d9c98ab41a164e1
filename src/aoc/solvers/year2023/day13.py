"""2023 day 13: Point of Incidence"""

from __future__ import annotations

import re
from collections.abc import Sequence

from aoc.datastructures import GridView
from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def reflection_line(lines: Sequence[Sequence[str]], smudges: int) -> int | None:
    """Number of lines before a mirror that differs in exactly *smudges* cells."""
    for split in range(1, len(lines)):
        differences = 0
        for above, below in zip(reversed(lines[:split]), lines[split:]):
            differences += sum(a != b for a, b in zip(above, below))
            if differences > smudges:
                break
        if differences == smudges:
            return split
    return None


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.patterns: list[GridView[str]] = []
        for block in re.split(r"\n\s*\n", input.strip()):
            try:
                self.patterns.append(GridView.from_separated("\n", block))
            except ValueError as exc:
                raise ParseError("pattern is not rectangular") from exc

    def summarize(self, smudges: int) -> int:
        total = 0
        for n, pattern in enumerate(self.patterns):
            rows = [tuple(row) for row in pattern.rows()]
            split = reflection_line(rows, smudges)
            if split is not None:
                total += 100 * split
                continue
            split = reflection_line([tuple(col) for col in pattern.cols()], smudges)
            if split is None:
                raise SolveError(f"pattern {n} has no reflection line")
            total += split
        return total

    def solve_part_1(self) -> Solution:
        return Solution("Summarized reflections", str(self.summarize(0)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Summarized reflections after fixing smudges", str(self.summarize(1)))
