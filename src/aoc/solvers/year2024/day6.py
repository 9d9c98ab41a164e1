"""2024 day 6: Guard Gallivant

Part two places one obstruction on each cell of the original route.  The
guard's walk is only replayed from the state just before it first reaches
that cell, since everything earlier is unaffected.
"""

from __future__ import annotations

from aoc.datastructures import GridView
from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Pos = tuple[int, int]
State = tuple[Pos, int]

# Clockwise starting north; turning right is ``(heading + 1) % 4``.
HEADINGS: tuple[Pos, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.grid: GridView[str] = GridView.from_separated("\n", input.rstrip("\n"))
        except ValueError as exc:
            raise ParseError("lab map is not rectangular") from exc
        start = self.grid.find("^")
        if start is None:
            raise ParseError("no guard on the map")
        self.start = start

    def _blocked(self, pos: Pos, extra: Pos | None) -> bool:
        return pos == extra or self.grid[pos] == "#"

    def _step(self, state: State, extra: Pos | None = None) -> State | None:
        """Next state, or ``None`` when the guard leaves the map."""
        (row, col), heading = state
        for _ in range(4):
            dr, dc = HEADINGS[heading]
            ahead = (row + dr, col + dc)
            if not self.grid.in_bounds(ahead):
                return None
            if not self._blocked(ahead, extra):
                return ahead, heading
            heading = (heading + 1) % 4
        raise SolveError(f"guard is boxed in at {(row, col)}")

    def route(self) -> list[State]:
        state: State | None = (self.start, 0)
        seen: set[State] = set()
        states = []
        while state is not None:
            if state in seen:
                raise SolveError("guard never leaves the map")
            seen.add(state)
            states.append(state)
            state = self._step(state)
        return states

    def _loops(self, state: State, obstruction: Pos) -> bool:
        seen: set[State] = set()
        current: State | None = state
        while current is not None:
            if current in seen:
                return True
            seen.add(current)
            current = self._step(current, obstruction)
        return False

    def solve_part_1(self) -> Solution:
        visited = {pos for pos, _ in self.route()}
        return Solution("Distinct positions visited", str(len(visited)))

    def solve_part_2(self) -> MaybeSolution:
        route = self.route()
        tried = {self.start}
        count = 0
        for before, (pos, _) in zip(route, route[1:]):
            if pos in tried:
                continue
            tried.add(pos)
            if self._loops(before, pos):
                count += 1
        return Solution("Obstruction positions causing a loop", str(count))
