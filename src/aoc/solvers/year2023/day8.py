"""2023 day 8: Haunted Wasteland

Part two assumes every ghost walks a cycle whose length equals the number
of steps to its first ``..Z`` node, so the answer is the LCM of those.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from itertools import cycle

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

_NODE = re.compile(r"(\w+) = \((\w+), (\w+)\)")


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        instructions, _, body = input.strip().partition("\n")
        self.instructions = instructions.strip()
        if not self.instructions or set(self.instructions) - {"L", "R"}:
            raise ParseError(f"invalid instructions {self.instructions!r}")
        self.network: dict[str, tuple[str, str]] = {}
        for line in body.splitlines():
            if not line.strip():
                continue
            match = _NODE.fullmatch(line.strip())
            if match is None:
                raise ParseError(f"invalid node: {line!r}")
            self.network[match.group(1)] = (match.group(2), match.group(3))

    def steps(self, start: str, is_end: Callable[[str], bool]) -> int:
        node = start
        limit = len(self.network) * len(self.instructions)
        for count, direction in enumerate(cycle(self.instructions), start=1):
            if count > limit:
                raise SolveError(f"no end node reachable from {start}")
            try:
                left, right = self.network[node]
            except KeyError:
                raise SolveError(f"unknown node {node}") from None
            node = left if direction == "L" else right
            if is_end(node):
                return count
        raise AssertionError("unreachable")

    def solve_part_1(self) -> Solution:
        if "AAA" not in self.network:
            raise SolveError("no node AAA")
        return Solution("Steps to reach ZZZ", str(self.steps("AAA", lambda node: node == "ZZZ")))

    def solve_part_2(self) -> MaybeSolution:
        starts = [node for node in self.network if node.endswith("A")]
        if not starts:
            raise SolveError("no start nodes")
        lengths = [self.steps(node, lambda node: node.endswith("Z")) for node in starts]
        return Solution("Steps to be only on nodes ending with Z", str(math.lcm(*lengths)))
