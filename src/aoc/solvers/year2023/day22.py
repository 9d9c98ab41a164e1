"""2023 day 22: Sand Slabs"""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

_BRICK = re.compile(r"(\d+),(\d+),(\d+)~(\d+),(\d+),(\d+)")


@dataclass(frozen=True)
class Brick:
    x: tuple[int, int]
    y: tuple[int, int]
    z: tuple[int, int]

    def footprint(self) -> list[tuple[int, int]]:
        return [
            (x, y)
            for x in range(self.x[0], self.x[1] + 1)
            for y in range(self.y[0], self.y[1] + 1)
        ]


def _parse_brick(line: str) -> Brick:
    match = _BRICK.fullmatch(line.strip())
    if match is None:
        raise ParseError(f"invalid brick definition {line!r}")
    x1, y1, z1, x2, y2, z2 = map(int, match.groups())
    return Brick((min(x1, x2), max(x1, x2)), (min(y1, y2), max(y1, y2)), (min(z1, z2), max(z1, z2)))


def settle(bricks: list[Brick]) -> tuple[list[Brick], list[set[int]]]:
    """Drop every brick as far as it goes.

    Returns the settled bricks in drop order and for each of them the
    indices of the bricks it rests on.
    """
    settled: list[Brick] = []
    supported_by: list[set[int]] = []
    # (x, y) -> (top z, index of the brick with that top)
    surface: dict[tuple[int, int], tuple[int, int]] = {}
    for brick in sorted(bricks, key=lambda b: b.z[0]):
        cells = brick.footprint()
        floor = max((surface[cell][0] for cell in cells if cell in surface), default=0)
        supports = {surface[cell][1] for cell in cells if cell in surface and surface[cell][0] == floor}
        height = brick.z[1] - brick.z[0]
        dropped = Brick(brick.x, brick.y, (floor + 1, floor + 1 + height))
        index = len(settled)
        settled.append(dropped)
        supported_by.append(supports)
        for cell in cells:
            surface[cell] = (dropped.z[1], index)
    return settled, supported_by


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        bricks = [_parse_brick(line) for line in input.splitlines() if line.strip()]
        self.bricks, self.supported_by = settle(bricks)
        self.required_supports = {
            next(iter(supports)) for supports in self.supported_by if len(supports) == 1
        }

    def chain_reaction(self, removed: int) -> int:
        """Number of other bricks that fall when *removed* is disintegrated."""
        fallen = {removed}
        # a brick is always settled after everything it rests on
        for index in range(removed + 1, len(self.bricks)):
            supports = self.supported_by[index]
            if supports and supports <= fallen:
                fallen.add(index)
        return len(fallen) - 1

    def solve_part_1(self) -> Solution:
        return Solution("Bricks safe to disintegrate", str(len(self.bricks) - len(self.required_supports)))

    def solve_part_2(self) -> MaybeSolution:
        total = sum(self.chain_reaction(index) for index in self.required_supports)
        return Solution("Bricks that would fall", str(total))
