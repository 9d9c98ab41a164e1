"""2023 day 10: Pipe Maze

The loop through ``S`` is traced once.  Tiles inside it are counted with a
scanline: crossing a loop tile that connects north toggles inside/outside.
"""

from __future__ import annotations

from aoc.datastructures import GridView
from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Pos = tuple[int, int]

NORTH, SOUTH, WEST, EAST = (-1, 0), (1, 0), (0, -1), (0, 1)

PIPES: dict[str, tuple[Pos, Pos]] = {
    "|": (NORTH, SOUTH),
    "-": (WEST, EAST),
    "L": (NORTH, EAST),
    "J": (NORTH, WEST),
    "7": (SOUTH, WEST),
    "F": (SOUTH, EAST),
}


def _opposite(direction: Pos) -> Pos:
    return (-direction[0], -direction[1])


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("maze is not rectangular") from exc
        start = self.grid.find("S")
        if start is None:
            raise ParseError("no start tile")
        self.start = start
        self.start_connections = self._start_connections()
        self.loop = self._trace_loop()

    def _connections(self, pos: Pos) -> tuple[Pos, ...]:
        if pos == self.start:
            return self.start_connections
        return PIPES.get(self.grid[pos], ())

    def _start_connections(self) -> tuple[Pos, ...]:
        connections = []
        for direction in (NORTH, SOUTH, WEST, EAST):
            neighbour = (self.start[0] + direction[0], self.start[1] + direction[1])
            if self.grid.in_bounds(neighbour):
                if _opposite(direction) in PIPES.get(self.grid[neighbour], ()):
                    connections.append(direction)
        if len(connections) != 2:
            raise SolveError(f"start tile has {len(connections)} connecting pipes")
        return tuple(connections)

    def _trace_loop(self) -> set[Pos]:
        loop = {self.start}
        pos, heading = self.start, self.start_connections[0]
        while True:
            pos = (pos[0] + heading[0], pos[1] + heading[1])
            if not self.grid.in_bounds(pos):
                raise SolveError(f"loop is broken at {pos}")
            if pos == self.start:
                return loop
            loop.add(pos)
            exits = [d for d in self._connections(pos) if d != _opposite(heading)]
            if len(exits) != 1:
                raise SolveError(f"loop is broken at {pos}")
            heading = exits[0]

    def solve_part_1(self) -> Solution:
        return Solution(
            "Distance of farthest point from starting position", str(len(self.loop) // 2)
        )

    def solve_part_2(self) -> MaybeSolution:
        inside_count = 0
        for row in range(self.grid.height):
            inside = False
            for col in range(self.grid.width):
                pos = (row, col)
                if pos in self.loop:
                    if NORTH in self._connections(pos):
                        inside = not inside
                elif inside:
                    inside_count += 1
        return Solution("Tiles inside the loop", str(inside_count))
