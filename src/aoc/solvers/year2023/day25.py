"""2023 day 25: Snowverload

The three wires to cut form a minimum cut of size three.  With unit
capacities, a maximum flow of exactly three between a fixed source and
some sink finds it, and the nodes still reachable from the source in the
residual graph form one of the two groups.
"""

from __future__ import annotations

from collections import defaultdict, deque

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import NOT_IMPLEMENTED, MaybeSolution, Solution, Solver

CUT_SIZE = 3


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.graph: dict[str, set[str]] = defaultdict(set)
        for line in input.splitlines():
            if not line.strip():
                continue
            source, colon, targets = line.partition(":")
            if not colon or not source.strip() or not targets.split():
                raise ParseError(f"invalid wiring line {line!r}")
            for target in targets.split():
                self.graph[source.strip()].add(target)
                self.graph[target].add(source.strip())
        if not self.graph:
            raise ParseError("no wiring diagram")

    def _augment(self, flow: dict[tuple[str, str], int], source: str, sink: str) -> set[str] | None:
        """Push one unit along a shortest residual path.

        Returns ``None`` if a path was found, otherwise the set of nodes
        reachable from *source* in the residual graph.
        """
        parent: dict[str, str | None] = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for neighbour in self.graph[node]:
                if neighbour not in parent and flow[node, neighbour] < 1:
                    parent[neighbour] = node
                    if neighbour == sink:
                        while parent[neighbour] is not None:
                            previous = parent[neighbour]
                            flow[previous, neighbour] += 1
                            flow[neighbour, previous] -= 1
                            neighbour = previous
                        return None
                    queue.append(neighbour)
        return set(parent)

    def partition(self) -> tuple[int, int]:
        """Sizes of the two groups left after cutting three wires."""
        source, *others = self.graph
        for sink in others:
            flow: dict[tuple[str, str], int] = defaultdict(int)
            for paths in range(CUT_SIZE + 1):
                reachable = self._augment(flow, source, sink)
                if reachable is not None:
                    break
            else:
                continue
            if paths != CUT_SIZE:
                raise SolveError(f"minimum cut has {paths} wires, not {CUT_SIZE}")
            return len(reachable), len(self.graph) - len(reachable)
        raise SolveError(f"no cut of {CUT_SIZE} wires splits the components")

    def solve_part_1(self) -> Solution:
        first, second = self.partition()
        return Solution("Product of the group sizes", str(first * second))

    def solve_part_2(self) -> MaybeSolution:
        return NOT_IMPLEMENTED
