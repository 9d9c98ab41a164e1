"""2023 day 18: Lavaduct Lagoon

The trench is a simple rectilinear polygon.  The shoelace formula gives its
interior area and Pick's theorem adds the boundary cells:
``cells = area + boundary / 2 + 1``.
"""

from __future__ import annotations

import re

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

_STEP = re.compile(r"([UDLR]) (\d+) \(#([0-9a-f]{5})([0-3])\)")

DIRECTIONS = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
# The last hex digit of the colour encodes the direction in this order.
HEX_DIRECTIONS = "RDLU"


def lagoon_capacity(steps: list[tuple[str, int]]) -> int:
    row = col = 0
    twice_area = 0
    boundary = 0
    for direction, length in steps:
        dr, dc = DIRECTIONS[direction]
        next_row, next_col = row + dr * length, col + dc * length
        twice_area += col * next_row - next_col * row
        boundary += length
        row, col = next_row, next_col
    return (abs(twice_area) + boundary) // 2 + 1


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.plan: list[tuple[str, int]] = []
        self.colour_plan: list[tuple[str, int]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            match = _STEP.fullmatch(line.strip())
            if match is None:
                raise ParseError(f"invalid dig step: {line!r}")
            direction, length, hex_length, hex_direction = match.groups()
            self.plan.append((direction, int(length)))
            self.colour_plan.append((HEX_DIRECTIONS[int(hex_direction)], int(hex_length, 16)))

    def solve_part_1(self) -> Solution:
        return Solution("Capacity of the lagoon (part 1)", str(lagoon_capacity(self.plan)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Capacity of the lagoon (part 2)", str(lagoon_capacity(self.colour_plan)))
