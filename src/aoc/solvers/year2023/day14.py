"""2023 day 14: Parabolic Reflector Dish

The platform is a :class:`MutableGridView` over the raw input bytes.  Spin
cycles are repeated until a platform state recurs; the remaining cycles
are then skipped modulo the period.
"""

from __future__ import annotations

from collections.abc import Hashable

from aoc.datastructures import MutableGridView
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

ROUND, CUBE, EMPTY = ord("O"), ord("#"), ord(".")
SPIN_CYCLES = 1_000_000_000

Pos = tuple[int, int]


def _lanes(height: int, width: int) -> dict[str, list[list[Pos]]]:
    """Cell sequences for each tilt direction, starting at the wall rocks roll to."""
    columns = [[(row, col) for row in range(height)] for col in range(width)]
    rows = [[(row, col) for col in range(width)] for row in range(height)]
    return {
        "north": columns,
        "west": rows,
        "south": [lane[::-1] for lane in columns],
        "east": [lane[::-1] for lane in rows],
    }


def tilt(platform: MutableGridView[int], lanes: list[list[Pos]]) -> None:
    for lane in lanes:
        free = 0
        for i, pos in enumerate(lane):
            cell = platform[pos]
            if cell == CUBE:
                free = i + 1
            elif cell == ROUND:
                if free != i:
                    platform[lane[free]] = ROUND
                    platform[pos] = EMPTY
                free += 1


def north_load(platform: MutableGridView[int]) -> int:
    return sum(
        platform.height - row
        for row, col in platform.positions()
        if platform[row, col] == ROUND
    )


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        text = input.rstrip("\n").encode()
        if not text or set(text) - {ROUND, CUBE, EMPTY, ord("\n")}:
            raise ParseError("platform may only contain 'O', '#' and '.'")
        try:
            self.platform: MutableGridView[int] = MutableGridView.from_separated(ord("\n"), text)
        except ValueError as exc:
            raise ParseError("platform is not rectangular") from exc
        self.lanes = _lanes(self.platform.height, self.platform.width)

    def solve_part_1(self) -> Solution:
        platform = self.platform.copy()
        tilt(platform, self.lanes["north"])
        return Solution("Total load (part 1)", str(north_load(platform)))

    def solve_part_2(self) -> MaybeSolution:
        platform = self.platform.copy()
        seen: dict[Hashable, int] = {}
        cycle = 0
        while cycle < SPIN_CYCLES:
            state = platform.snapshot()
            if state in seen:
                period = cycle - seen[state]
                cycle += (SPIN_CYCLES - cycle) // period * period
                seen.clear()
                if cycle == SPIN_CYCLES:
                    break
            seen[state] = cycle
            for direction in ("north", "west", "south", "east"):
                tilt(platform, self.lanes[direction])
            cycle += 1
        return Solution("Total load (part 2)", str(north_load(platform)))
