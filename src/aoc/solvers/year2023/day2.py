"""2023 day 2: Cube Conundrum"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from aoc.errors import ParseError
from aoc.solvers.base import MaybeSolution, Solution, Solver

BAG = {"red": 12, "green": 13, "blue": 14}

_GAME = re.compile(r"Game (\d+): (.*)")
_DRAW = re.compile(r"(\d+) (red|green|blue)")


@dataclass
class Game:
    id: int
    rounds: list[dict[str, int]]

    def minimum_bag(self) -> dict[str, int]:
        bag = dict.fromkeys(BAG, 0)
        for draw in self.rounds:
            for colour, count in draw.items():
                bag[colour] = max(bag[colour], count)
        return bag


def parse_game(line: str) -> Game:
    match = _GAME.fullmatch(line.strip())
    if match is None:
        raise ParseError(f"invalid game: {line!r}")
    rounds = []
    for part in match.group(2).split(";"):
        draw: dict[str, int] = {}
        for cubes in part.split(","):
            cube_match = _DRAW.fullmatch(cubes.strip())
            if cube_match is None:
                raise ParseError(f"invalid draw {cubes!r} in game {match.group(1)}")
            draw[cube_match.group(2)] = int(cube_match.group(1))
        rounds.append(draw)
    return Game(int(match.group(1)), rounds)


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.games = [parse_game(line) for line in input.splitlines() if line.strip()]

    def solve_part_1(self) -> Solution:
        total = sum(
            game.id
            for game in self.games
            if all(game.minimum_bag()[colour] <= limit for colour, limit in BAG.items())
        )
        return Solution("Sum of IDs of possible games", str(total))

    def solve_part_2(self) -> MaybeSolution:
        total = sum(math.prod(game.minimum_bag().values()) for game in self.games)
        return Solution("Sum of the power", str(total))
