"""2023 day 5: If You Give A Seed A Fertilizer

Each almanac map is a list of ``(destination, source, length)`` rules.  Part
two pushes whole half-open intervals through the maps, splitting them at
rule boundaries instead of mapping seeds one by one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Interval = tuple[int, int]


@dataclass(frozen=True)
class Rule:
    destination: int
    source: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source + self.length

    @property
    def shift(self) -> int:
        return self.destination - self.source


class RangeMap:
    def __init__(self, name: str, rules: list[Rule]) -> None:
        self.name = name
        self.rules = sorted(rules, key=lambda rule: rule.source)

    def map_value(self, value: int) -> int:
        for rule in self.rules:
            if rule.source <= value < rule.source_end:
                return value + rule.shift
        return value

    def map_intervals(self, intervals: list[Interval]) -> list[Interval]:
        """Map half-open intervals, splitting them where rules begin or end."""
        result: list[Interval] = []
        for start, end in intervals:
            for rule in self.rules:
                if start >= end:
                    break
                if rule.source_end <= start or rule.source >= end:
                    continue
                if start < rule.source:
                    result.append((start, rule.source))
                    start = rule.source
                stop = min(end, rule.source_end)
                result.append((start + rule.shift, stop + rule.shift))
                start = stop
            if start < end:
                result.append((start, end))
        return result


def _numbers(text: str) -> list[int]:
    try:
        return [int(n) for n in text.split()]
    except ValueError as exc:
        raise ParseError(f"invalid number in {text.strip()!r}") from exc


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        blocks = re.split(r"\n\s*\n", input.strip())
        header = blocks[0]
        if not header.startswith("seeds:"):
            raise ParseError("almanac must start with the seed list")
        self.seeds = _numbers(header.removeprefix("seeds:"))

        self.maps: list[RangeMap] = []
        for block in blocks[1:]:
            title, _, body = block.partition("\n")
            if not title.endswith("map:"):
                raise ParseError(f"invalid map header {title!r}")
            rules = []
            for line in body.splitlines():
                values = _numbers(line)
                if len(values) != 3:
                    raise ParseError(f"invalid rule {line!r} in {title!r}")
                rules.append(Rule(*values))
            self.maps.append(RangeMap(title.removesuffix(" map:"), rules))

    def location(self, seed: int) -> int:
        for range_map in self.maps:
            seed = range_map.map_value(seed)
        return seed

    def solve_part_1(self) -> Solution:
        if not self.seeds:
            raise SolveError("no seeds")
        lowest = min(self.location(seed) for seed in self.seeds)
        return Solution("Lowest location (part 1)", str(lowest))

    def solve_part_2(self) -> MaybeSolution:
        if len(self.seeds) % 2:
            raise SolveError("seed ranges must come in pairs")
        intervals = [
            (start, start + length)
            for start, length in zip(self.seeds[::2], self.seeds[1::2])
        ]
        for range_map in self.maps:
            intervals = range_map.map_intervals(intervals)
        if not intervals:
            raise SolveError("no seeds")
        return Solution("Lowest location (part 2)", str(min(start for start, _ in intervals)))
