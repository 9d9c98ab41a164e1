"""2024 day 23: LAN Party"""

from __future__ import annotations

from collections import defaultdict

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver


def maximum_clique(graph: dict[str, set[str]]) -> set[str]:
    """Bron–Kerbosch with pivoting."""
    best: set[str] = set()

    def expand(clique: set[str], candidates: set[str], excluded: set[str]) -> None:
        nonlocal best
        if not candidates and not excluded:
            if len(clique) > len(best):
                best = clique
            return
        pivot = max(candidates | excluded, key=lambda node: len(graph[node] & candidates))
        for node in list(candidates - graph[pivot]):
            expand(clique | {node}, candidates & graph[node], excluded & graph[node])
            candidates.remove(node)
            excluded.add(node)

    expand(set(), set(graph), set())
    return best


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.graph: dict[str, set[str]] = defaultdict(set)
        for line in input.split():
            a, sep, b = line.partition("-")
            if not sep or not a or not b:
                raise ParseError(f"invalid connection {line!r}")
            self.graph[a].add(b)
            self.graph[b].add(a)

    def solve_part_1(self) -> Solution:
        triangles = {
            frozenset((a, b, c))
            for a in self.graph
            if a.startswith("t")
            for b in self.graph[a]
            for c in self.graph[a] & self.graph[b]
        }
        return Solution("Sets of three containing a t-computer", str(len(triangles)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("LAN party password", ",".join(sorted(maximum_clique(self.graph))))
