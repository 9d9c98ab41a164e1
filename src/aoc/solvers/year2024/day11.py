"""2024 day 11: Plutonian Pebbles

Stones never interact, so only the number of stones per engraving is
tracked from one blink to the next.
"""

from __future__ import annotations

from collections import Counter

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def count_stones(stones: list[int], blinks: int) -> int:
    counts = Counter(stones)
    for _ in range(blinks):
        after: Counter[int] = Counter()
        for stone, n in counts.items():
            for new_stone in blink(stone):
                after[new_stone] += n
        counts = after
    return sum(counts.values())


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.stones = [int(stone) for stone in input.split()]
        except ValueError as exc:
            raise ParseError("stones must be engraved with integers") from exc

    def solve_part_1(self) -> Solution:
        return Solution("Stones after 25 blinks", str(count_stones(self.stones, 25)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Stones after 75 blinks", str(count_stones(self.stones, 75)))
