"""2023 day 16: The Floor Will Be Lava

Part two evaluates every entry point on the border independently, so the
beams are traced in a process pool and reduced with ``max``.
"""

from __future__ import annotations

import logging
from collections import deque
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from aoc.datastructures import GridView
from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

logger = logging.getLogger(__name__)

Pos = tuple[int, int]
Beam = tuple[Pos, Pos]

UP, DOWN, LEFT, RIGHT = (-1, 0), (1, 0), (0, -1), (0, 1)


def _deflect(tile: str, direction: Pos) -> tuple[Pos, ...]:
    dr, dc = direction
    if tile == "/":
        return ((-dc, -dr),)
    if tile == "\\":
        return ((dc, dr),)
    if tile == "|" and dc:
        return (UP, DOWN)
    if tile == "-" and dr:
        return (LEFT, RIGHT)
    return (direction,)


def energized(grid: GridView[str], start: Beam) -> int:
    """Number of tiles a beam entering at *start* passes through."""
    seen: set[Beam] = set()
    queue = deque([start])
    while queue:
        beam = queue.popleft()
        pos, direction = beam
        if beam in seen or not grid.in_bounds(pos):
            continue
        seen.add(beam)
        for new_direction in _deflect(grid[pos], direction):
            queue.append(((pos[0] + new_direction[0], pos[1] + new_direction[1]), new_direction))
    return len({pos for pos, _ in seen})


def _energized_from_text(text: str, start: Beam) -> int:
    return energized(GridView.from_separated("\n", text), start)


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.text = input.rstrip("\n")
        if set(self.text) - set("./\\|-\n"):
            raise ParseError("contraption contains unknown tiles")
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", self.text)
        except ValueError as exc:
            raise ParseError("contraption is not rectangular") from exc

    def border_starts(self) -> list[Beam]:
        height, width = self.grid.size
        starts: list[Beam] = []
        for row in range(height):
            starts.append(((row, 0), RIGHT))
            starts.append(((row, width - 1), LEFT))
        for col in range(width):
            starts.append(((0, col), DOWN))
            starts.append(((height - 1, col), UP))
        return starts

    def solve_part_1(self) -> Solution:
        return Solution("Energized tiles", str(energized(self.grid, ((0, 0), RIGHT))))

    def solve_part_2(self) -> MaybeSolution:
        starts = self.border_starts()
        logger.debug("Tracing %d beams in a process pool", len(starts))
        with ProcessPoolExecutor() as executor:
            best = max(
                executor.map(partial(_energized_from_text, self.text), starts, chunksize=16)
            )
        return Solution("Most energized tiles", str(best))
