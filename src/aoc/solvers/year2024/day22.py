"""2024 day 22: Monkey Market"""

from __future__ import annotations

from collections import defaultdict

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

PRUNE = 16_777_216
ROUNDS = 2000


def next_secret(secret: int) -> int:
    secret = (secret ^ (secret << 6)) % PRUNE
    secret = (secret ^ (secret >> 5)) % PRUNE
    return (secret ^ (secret << 11)) % PRUNE


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        try:
            self.secrets = [int(line) for line in input.split()]
        except ValueError as exc:
            raise ParseError("initial secrets must be integers") from exc

    def solve_part_1(self) -> Solution:
        total = 0
        for secret in self.secrets:
            for _ in range(ROUNDS):
                secret = next_secret(secret)
            total += secret
        return Solution("Sum of 2000th secret numbers", str(total))

    def solve_part_2(self) -> MaybeSolution:
        # Bananas per sequence of four price changes, first sale per buyer only.
        bananas: dict[tuple[int, int, int, int], int] = defaultdict(int)
        for secret in self.secrets:
            prices = [secret % 10]
            for _ in range(ROUNDS):
                secret = next_secret(secret)
                prices.append(secret % 10)
            changes = [b - a for a, b in zip(prices, prices[1:])]
            seen = set()
            for i in range(len(changes) - 3):
                sequence = (changes[i], changes[i + 1], changes[i + 2], changes[i + 3])
                if sequence not in seen:
                    seen.add(sequence)
                    bananas[sequence] += prices[i + 4]
        return Solution("Most bananas", str(max(bananas.values(), default=0)))
