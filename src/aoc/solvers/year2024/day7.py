"""2024 day 7: Bridge Repair

Equations are checked right to left: the last operand can only have been
added, multiplied or concatenated if undoing that operation is possible,
which prunes most of the search.
"""

from __future__ import annotations

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def solvable(target: int, operands: list[int], concatenation: bool) -> bool:
    *rest, last = operands
    if not rest:
        return target == last
    if target > last and solvable(target - last, rest, concatenation):
        return True
    if last and target % last == 0 and solvable(target // last, rest, concatenation):
        return True
    if concatenation:
        target_digits, last_digits = str(target), str(last)
        if len(target_digits) > len(last_digits) and target_digits.endswith(last_digits):
            return solvable(int(target_digits[: -len(last_digits)]), rest, concatenation)
    return False


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.equations: list[tuple[int, list[int]]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            target, _, operands = line.partition(":")
            try:
                self.equations.append((int(target), [int(n) for n in operands.split()]))
            except ValueError as exc:
                raise ParseError(f"invalid equation: {line!r}") from exc
            if not self.equations[-1][1]:
                raise ParseError(f"equation without operands: {line!r}")

    def calibration(self, concatenation: bool) -> int:
        return sum(
            target
            for target, operands in self.equations
            if solvable(target, operands, concatenation)
        )

    def solve_part_1(self) -> Solution:
        return Solution("Total calibration result", str(self.calibration(False)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Total calibration result with concatenation", str(self.calibration(True)))
