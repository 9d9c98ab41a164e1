"""2023 day 19: Aplenty

Part two sends boxes of ratings (one half-open interval per category)
through the workflows.  Each rule splits a box into the part that matches
and the part that falls through to the next rule.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

CATEGORIES = "xmas"
ACCEPT, REJECT = "A", "R"
START = "in"

_WORKFLOW = re.compile(r"([a-z]+)\{(.*)\}")
_RULE = re.compile(r"([xmas])([<>])(\d+):([a-z]+|[AR])")
_PART = re.compile(r"\{x=(\d+),m=(\d+),a=(\d+),s=(\d+)\}")

RatingBox = dict[str, tuple[int, int]]


@dataclass(frozen=True)
class Rule:
    category: str
    operator: str
    threshold: int
    target: str

    def matches(self, part: dict[str, int]) -> bool:
        value = part[self.category]
        return value < self.threshold if self.operator == "<" else value > self.threshold

    def split(self, box: RatingBox) -> tuple[RatingBox | None, RatingBox | None]:
        """Split *box* into ``(matching, remaining)``; empty halves are ``None``."""
        low, high = box[self.category]
        if self.operator == "<":
            inside, outside = (low, min(high, self.threshold)), (max(low, self.threshold), high)
        else:
            inside, outside = (max(low, self.threshold + 1), high), (low, min(high, self.threshold + 1))
        return _with(box, self.category, inside), _with(box, self.category, outside)


def _with(box: RatingBox, category: str, interval: tuple[int, int]) -> RatingBox | None:
    if interval[0] >= interval[1]:
        return None
    return {**box, category: interval}


@dataclass(frozen=True)
class Workflow:
    rules: tuple[Rule, ...]
    fallback: str

    def evaluate(self, part: dict[str, int]) -> str:
        for rule in self.rules:
            if rule.matches(part):
                return rule.target
        return self.fallback


def _parse_workflow(line: str) -> tuple[str, Workflow]:
    match = _WORKFLOW.fullmatch(line)
    if match is None:
        raise ParseError(f"invalid workflow {line!r}")
    *conditions, fallback = match.group(2).split(",")
    rules = []
    for condition in conditions:
        rule = _RULE.fullmatch(condition)
        if rule is None:
            raise ParseError(f"invalid rule {condition!r} in workflow {match.group(1)}")
        category, operator, threshold, target = rule.groups()
        rules.append(Rule(category, operator, int(threshold), target))
    return match.group(1), Workflow(tuple(rules), fallback)


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        workflows, _, parts = input.strip().partition("\n\n")
        self.workflows = dict(_parse_workflow(line.strip()) for line in workflows.splitlines())
        if START not in self.workflows:
            raise ParseError(f"no workflow named {START!r}")
        self.parts: list[dict[str, int]] = []
        for line in parts.splitlines():
            match = _PART.fullmatch(line.strip())
            if match is None:
                raise ParseError(f"invalid machine part {line!r}")
            self.parts.append(dict(zip(CATEGORIES, map(int, match.groups()))))

    def _workflow(self, name: str) -> Workflow:
        try:
            return self.workflows[name]
        except KeyError:
            raise SolveError(f"jump to unknown workflow {name!r}") from None

    def is_accepted(self, part: dict[str, int]) -> bool:
        name = START
        for _ in range(len(self.workflows) + 1):
            name = self._workflow(name).evaluate(part)
            if name in (ACCEPT, REJECT):
                return name == ACCEPT
        raise SolveError(f"part {part} is stuck in a workflow cycle")

    def accepted_combinations(self, low: int = 1, high: int = 4000) -> int:
        """Number of rating combinations in ``low..high`` that are accepted."""
        pending = [(START, {category: (low, high + 1) for category in CATEGORIES})]
        total = 0
        while pending:
            name, box = pending.pop()
            if name == REJECT:
                continue
            if name == ACCEPT:
                total += math.prod(end - start for start, end in box.values())
                continue
            workflow = self._workflow(name)
            remaining: RatingBox | None = box
            for rule in workflow.rules:
                matching, remaining = rule.split(remaining)
                if matching is not None:
                    pending.append((rule.target, matching))
                if remaining is None:
                    break
            else:
                pending.append((workflow.fallback, remaining))
        return total

    def solve_part_1(self) -> Solution:
        rating = sum(sum(part.values()) for part in self.parts if self.is_accepted(part))
        return Solution("Sum of ratings of accepted parts", str(rating))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Distinct accepted rating combinations", str(self.accepted_combinations()))
