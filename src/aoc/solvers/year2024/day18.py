"""2024 day 18: RAM Run"""

from __future__ import annotations

from collections import deque

from aoc.datastructures import MutableGridView, neighbors
from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Pos = tuple[int, int]

MEMORY_SIZE = 71
FALLEN_BYTES = 1024


class SolverImpl(Solver):
    """Bytes are given as ``X,Y``; they are stored as ``(row, col) = (Y, X)``."""

    def __init__(self, input: str, size: int = MEMORY_SIZE, fallen: int = FALLEN_BYTES) -> None:
        self.size = size
        self.fallen = fallen
        self.bytes: list[Pos] = []
        for line in input.split():
            x, sep, y = line.partition(",")
            if not sep or not x.isdecimal() or not y.isdecimal():
                raise ParseError(f"invalid byte position {line!r}")
            if int(x) >= size or int(y) >= size:
                raise ParseError(f"byte position {line!r} outside a {size}x{size} memory space")
            self.bytes.append((int(y), int(x)))

    def shortest_path(self, fallen: int) -> int | None:
        """Steps from the top left to the bottom right corner after *fallen* bytes."""
        corrupted = MutableGridView.filled(self.size, self.size, False)
        for pos in self.bytes[:fallen]:
            corrupted[pos] = True
        start, exit_ = (0, 0), (self.size - 1, self.size - 1)
        if corrupted[start] or corrupted[exit_]:
            return None
        distance = {start: 0}
        queue = deque([start])
        while queue:
            pos = queue.popleft()
            if pos == exit_:
                return distance[pos]
            for nxt in neighbors(pos, corrupted.size):
                if nxt not in distance and not corrupted[nxt]:
                    distance[nxt] = distance[pos] + 1
                    queue.append(nxt)
        return None

    def first_blocking_byte(self) -> Pos:
        """Binary search for the first byte after which the exit is unreachable."""
        if self.shortest_path(len(self.bytes)) is not None:
            raise SolveError("exit stays reachable after all bytes have fallen")
        low, high = 0, len(self.bytes)
        while low < high:
            middle = (low + high) // 2
            if self.shortest_path(middle + 1) is None:
                high = middle
            else:
                low = middle + 1
        row, col = self.bytes[low]
        return col, row

    def solve_part_1(self) -> Solution:
        steps = self.shortest_path(self.fallen)
        if steps is None:
            raise SolveError("No path found")
        return Solution("Minimum steps to reach the exit", str(steps))

    def solve_part_2(self) -> MaybeSolution:
        x, y = self.first_blocking_byte()
        return Solution("First byte blocking the exit", f"{x},{y}")
