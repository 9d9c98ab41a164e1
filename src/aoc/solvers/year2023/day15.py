"""2023 day 15: Lens Library"""

from __future__ import annotations

import re

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

_STEP = re.compile(r"([a-z]+)(-|=([1-9]))")


def holiday_hash(text: str) -> int:
    value = 0
    for char in text.encode("ascii"):
        value = (value + char) * 17 % 256
    return value


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        sequence = input.replace("\n", "")
        if not sequence or not sequence.isascii():
            raise ParseError("initialization sequence must be non-empty ASCII")
        self.steps = sequence.split(",")

    def solve_part_1(self) -> Solution:
        return Solution("Sum of HASHes", str(sum(holiday_hash(step) for step in self.steps)))

    def solve_part_2(self) -> MaybeSolution:
        # dicts keep insertion order, which is the lens order within a box
        boxes: list[dict[str, int]] = [{} for _ in range(256)]
        for step in self.steps:
            match = _STEP.fullmatch(step)
            if match is None:
                raise ParseError(f"invalid step {step!r}")
            label, focal_length = match.group(1), match.group(3)
            box = boxes[holiday_hash(label)]
            if focal_length is None:
                box.pop(label, None)
            else:
                box[label] = int(focal_length)

        power = sum(
            box_number * slot * focal_length
            for box_number, box in enumerate(boxes, start=1)
            for slot, focal_length in enumerate(box.values(), start=1)
        )
        return Solution("Focusing power", str(power))
