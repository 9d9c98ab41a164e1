"""2023 day 20: Pulse Propagation

Part two relies on the shape of the puzzle inputs: ``rx`` is fed by a single
conjunction whose inputs each send a high pulse periodically.  The answer is
the LCM of the button presses at which each of them first does so.
"""

from __future__ import annotations

import math
from collections import deque

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

BROADCASTER = "broadcaster"
BUTTON = "button"
FLIP_FLOP, CONJUNCTION = "%", "&"
LOW, HIGH = False, True

Pulse = tuple[str, bool, str]


class Network:
    """Mutable module state for one run of button presses."""

    def __init__(self, wiring: dict[str, tuple[str, list[str]]]) -> None:
        self.wiring = wiring
        self.flip_flops = {name: False for name, (kind, _) in wiring.items() if kind == FLIP_FLOP}
        self.memory: dict[str, dict[str, bool]] = {
            name: {} for name, (kind, _) in wiring.items() if kind == CONJUNCTION
        }
        for source, (_, destinations) in wiring.items():
            for destination in destinations:
                if destination in self.memory:
                    self.memory[destination][source] = LOW

    def press(self) -> list[Pulse]:
        """Push the button once and return every pulse sent, in order."""
        sent: list[Pulse] = []
        queue: deque[Pulse] = deque([(BUTTON, LOW, BROADCASTER)])
        while queue:
            pulse = queue.popleft()
            sent.append(pulse)
            source, level, name = pulse
            if name not in self.wiring:
                continue
            kind, destinations = self.wiring[name]
            if kind == FLIP_FLOP:
                if level == HIGH:
                    continue
                self.flip_flops[name] = not self.flip_flops[name]
                output = self.flip_flops[name]
            elif kind == CONJUNCTION:
                self.memory[name][source] = level
                output = not all(self.memory[name].values())
            else:
                output = level
            queue.extend((name, output, destination) for destination in destinations)
        return sent


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.wiring: dict[str, tuple[str, list[str]]] = {}
        for line in input.splitlines():
            if not line.strip():
                continue
            source, arrow, targets = line.partition(" -> ")
            if not arrow:
                raise ParseError(f"invalid module declaration {line!r}")
            if source[:1] in (FLIP_FLOP, CONJUNCTION):
                kind, name = source[0], source[1:]
            elif source == BROADCASTER:
                kind, name = BROADCASTER, source
            else:
                raise ParseError(f"unknown module type {source!r}")
            self.wiring[name] = (kind, [target.strip() for target in targets.split(",")])
        if BROADCASTER not in self.wiring:
            raise ParseError("no broadcaster module")

    def _feeding(self, target: str) -> list[str]:
        return [name for name, (_, destinations) in self.wiring.items() if target in destinations]

    def solve_part_1(self) -> Solution:
        network = Network(self.wiring)
        counts = {LOW: 0, HIGH: 0}
        for _ in range(1000):
            for _, level, _ in network.press():
                counts[level] += 1
        return Solution("Product of low and high pulses", str(counts[LOW] * counts[HIGH]))

    def solve_part_2(self) -> MaybeSolution:
        feeders = self._feeding("rx")
        if len(feeders) != 1 or self.wiring[feeders[0]][0] != CONJUNCTION:
            raise SolveError("rx must be fed by exactly one conjunction module")
        first_high = {name: 0 for name in self._feeding(feeders[0])}
        if not first_high:
            raise SolveError(f"{feeders[0]} has no inputs")
        network = Network(self.wiring)
        presses = 0
        while not all(first_high.values()):
            presses += 1
            if presses > 1_000_000:
                raise SolveError("inputs of the rx conjunction never send a high pulse")
            for source, level, _ in network.press():
                if level == HIGH and first_high.get(source) == 0:
                    first_high[source] = presses
        return Solution("Button presses to deliver a low pulse to rx", str(math.lcm(*first_high.values())))
