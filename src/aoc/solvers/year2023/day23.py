"""2023 day 23: A Long Walk

The trails are corridors between a few dozen junctions.  Each corridor is
walked once to build a weighted junction graph, then a depth-first search
over that graph finds the longest simple path from the top row to the
bottom row.
"""

from __future__ import annotations

import logging

from aoc.datastructures import GridView, neighbors
from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

logger = logging.getLogger(__name__)

Pos = tuple[int, int]

FOREST = "#"
SLOPES: dict[str, Pos] = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("trail map is not rectangular") from exc
        self.start = self._opening(0)
        self.end = self._opening(self.grid.height - 1)

    def _opening(self, row: int) -> Pos:
        columns = [col for col, tile in enumerate(self.grid.row(row)) if tile == "."]
        if len(columns) != 1:
            raise ParseError(f"row {row} must have exactly one path tile")
        return (row, columns[0])

    def _open(self, pos: Pos) -> bool:
        return self.grid[pos] != FOREST

    def _passable(self, source: Pos, target: Pos, slippery: bool) -> bool:
        if not self._open(target):
            return False
        if not slippery:
            return True
        step = (target[0] - source[0], target[1] - source[1])
        return all(SLOPES.get(self.grid[pos], step) == step for pos in (source, target))

    def junction_graph(self, slippery: bool) -> dict[Pos, dict[Pos, int]]:
        """Corridor lengths between junctions, start and end included."""
        size = self.grid.size
        junctions = {self.start, self.end} | {
            pos
            for pos in self.grid.positions()
            if self._open(pos) and sum(self._open(n) for n in neighbors(pos, size)) >= 3
        }
        graph: dict[Pos, dict[Pos, int]] = {junction: {} for junction in junctions}
        for junction in junctions:
            for first in neighbors(junction, size):
                if not self._passable(junction, first, slippery):
                    continue
                previous, pos, length = junction, first, 1
                while pos not in junctions:
                    ahead = [n for n in neighbors(pos, size) if n != previous and self._open(n)]
                    if not ahead or not self._passable(pos, ahead[0], slippery):
                        break
                    previous, pos, length = pos, ahead[0], length + 1
                else:
                    graph[junction][pos] = max(graph[junction].get(pos, 0), length)
        logger.debug("Junction graph has %d nodes", len(graph))
        return graph

    def longest_hike(self, slippery: bool) -> int:
        graph = self.junction_graph(slippery)
        index = {junction: bit for bit, junction in enumerate(graph)}
        best = -1
        stack = [(self.start, 1 << index[self.start], 0)]
        while stack:
            pos, seen, length = stack.pop()
            if pos == self.end:
                best = max(best, length)
                continue
            if self.end in graph[pos]:
                # the exit is only reachable through this junction
                stack.append((self.end, seen, length + graph[pos][self.end]))
                continue
            for target, distance in graph[pos].items():
                bit = 1 << index[target]
                if not seen & bit:
                    stack.append((target, seen | bit, length + distance))
        if best < 0:
            raise SolveError("no hike reaches the bottom row")
        return best

    def solve_part_1(self) -> Solution:
        return Solution("Longest hike", str(self.longest_hike(slippery=True)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Longest hike ignoring slopes", str(self.longest_hike(slippery=False)))
