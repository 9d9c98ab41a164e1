"""2023 day 12: Hot Springs"""

from __future__ import annotations

from functools import lru_cache

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

OPERATIONAL, DAMAGED, UNKNOWN = ".", "#", "?"


def count_arrangements(springs: str, groups: tuple[int, ...]) -> int:
    """Ways to replace every ``?`` so the damaged runs match *groups*.

    Parameters
    ----------
    springs:
        Condition record made of ``.``, ``#`` and ``?``.
    groups:
        Lengths of the contiguous damaged runs, in order.
    """
    n = len(springs)

    @lru_cache(maxsize=None)
    def arrangements(i: int, g: int) -> int:
        if g == len(groups):
            return 0 if DAMAGED in springs[i:] else 1
        if i >= n:
            return 0
        total = 0
        if springs[i] != DAMAGED:
            total += arrangements(i + 1, g)
        if springs[i] != OPERATIONAL:
            end = i + groups[g]
            if end <= n and OPERATIONAL not in springs[i:end] and (end == n or springs[end] != DAMAGED):
                total += arrangements(end + 1, g + 1)
        return total

    return arrangements(0, 0)


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.records: list[tuple[str, tuple[int, ...]]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            springs, _, groups = line.strip().partition(" ")
            if not springs or set(springs) - {OPERATIONAL, DAMAGED, UNKNOWN}:
                raise ParseError(f"invalid condition record {springs!r}")
            try:
                lengths = tuple(int(n) for n in groups.split(","))
            except ValueError as exc:
                raise ParseError(f"invalid group list {groups!r}") from exc
            self.records.append((springs, lengths))

    def solve_part_1(self) -> Solution:
        total = sum(count_arrangements(springs, groups) for springs, groups in self.records)
        return Solution("Sum of arrangements", str(total))

    def solve_part_2(self) -> MaybeSolution:
        total = sum(
            count_arrangements(UNKNOWN.join([springs] * 5), groups * 5)
            for springs, groups in self.records
        )
        return Solution("Sum of arrangements of unfolded records", str(total))
