"""2023 day 7: Camel Cards"""

from __future__ import annotations

from collections import Counter

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

CARDS = "23456789TJQKA"
CARDS_WITH_JOKERS = "J23456789TQKA"


def hand_type(hand: str, jokers: bool = False) -> tuple[int, ...]:
    """Sorted card counts, largest first; compares in the order of hand strength."""
    counts = Counter(hand)
    wild = counts.pop("J", 0) if jokers else 0
    shape = sorted(counts.values(), reverse=True) or [0]
    shape[0] += wild
    return tuple(shape)


def hand_key(hand: str, jokers: bool = False) -> tuple[tuple[int, ...], tuple[int, ...]]:
    order = CARDS_WITH_JOKERS if jokers else CARDS
    return hand_type(hand, jokers), tuple(order.index(card) for card in hand)


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.hands: list[tuple[str, int]] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            parts = line.split()
            if (
                len(parts) != 2
                or len(parts[0]) != 5
                or any(card not in CARDS for card in parts[0])
                or not parts[1].isdecimal()
            ):
                raise ParseError(f"invalid hand: {line!r}")
            self.hands.append((parts[0], int(parts[1])))

    def total_winnings(self, jokers: bool) -> int:
        ranked = sorted(self.hands, key=lambda hand: hand_key(hand[0], jokers))
        return sum(rank * bid for rank, (_, bid) in enumerate(ranked, start=1))

    def solve_part_1(self) -> Solution:
        return Solution("Total winnings", str(self.total_winnings(jokers=False)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Total winnings with jokers", str(self.total_winnings(jokers=True)))
