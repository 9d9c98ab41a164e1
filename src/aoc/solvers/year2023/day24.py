"""2023 day 24: Never Tell Me The Odds

For part two the rock ``P + t V`` has to meet every hailstone ``p_i + t v_i``,
so ``(P - p_i) x (V - v_i) = 0``.  Subtracting that equation for two
hailstones cancels the non-linear ``P x V`` term:

    P x (v_i - v_j) + (p_i - p_j) x V = p_i x v_i - p_j x v_j

Two such pairs give six linear equations in the six unknowns.  Coordinates
are around ``1e14``, beyond what ``float64`` holds exactly, so the system
is solved over :class:`fractions.Fraction`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction
from itertools import combinations

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import MaybeSolution, Solution, Solver

Vec = tuple[int, int, int]

TEST_AREA = (200_000_000_000_000, 400_000_000_000_000)

_HAILSTONE = re.compile(r"(-?\d+),\s*(-?\d+),\s*(-?\d+)\s*@\s*(-?\d+),\s*(-?\d+),\s*(-?\d+)")


@dataclass(frozen=True)
class Hailstone:
    position: Vec
    velocity: Vec


def _cross(a: Vec, b: Vec) -> Vec:
    return (a[1] * b[2] - a[2] * b[1], a[2] * b[0] - a[0] * b[2], a[0] * b[1] - a[1] * b[0])


def _sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def intersect_2d(a: Hailstone, b: Hailstone) -> tuple[Fraction, Fraction] | None:
    """Where the future XY paths of *a* and *b* cross, if they do."""
    (ax, ay, _), (avx, avy, _) = a.position, a.velocity
    (bx, by, _), (bvx, bvy, _) = b.position, b.velocity
    det = avx * bvy - avy * bvx
    if det == 0:
        return None
    dx, dy = bx - ax, by - ay
    t = Fraction(dx * bvy - dy * bvx, det)
    s = Fraction(dx * avy - dy * avx, det)
    if t < 0 or s < 0:
        return None
    return (ax + t * avx, ay + t * avy)


def solve_exact(matrix: list[list[Fraction]], rhs: list[Fraction]) -> list[Fraction] | None:
    """Gauss-Jordan elimination; ``None`` if *matrix* is singular."""
    n = len(matrix)
    rows = [row[:] + [value] for row, value in zip(matrix, rhs)]
    for col in range(n):
        pivot = next((r for r in range(col, n) if rows[r][col] != 0), None)
        if pivot is None:
            return None
        rows[col], rows[pivot] = rows[pivot], rows[col]
        for r in range(n):
            if r != col and rows[r][col] != 0:
                factor = rows[r][col] / rows[col][col]
                rows[r] = [x - factor * y for x, y in zip(rows[r], rows[col])]
    return [rows[i][n] / rows[i][i] for i in range(n)]


def _pair_equations(a: Hailstone, b: Hailstone) -> tuple[list[list[Fraction]], list[Fraction]]:
    wx, wy, wz = _sub(a.velocity, b.velocity)
    ux, uy, uz = _sub(a.position, b.position)
    matrix = [
        [0, wz, -wy, 0, -uz, uy],
        [-wz, 0, wx, uz, 0, -ux],
        [wy, -wx, 0, -uy, ux, 0],
    ]
    rhs = _sub(_cross(a.position, a.velocity), _cross(b.position, b.velocity))
    return [[Fraction(v) for v in row] for row in matrix], [Fraction(v) for v in rhs]


class SolverImpl(Solver):
    def __init__(self, input: str) -> None:
        self.hailstones: list[Hailstone] = []
        for line in input.splitlines():
            if not line.strip():
                continue
            match = _HAILSTONE.fullmatch(line.strip())
            if match is None:
                raise ParseError(f"invalid hailstone {line!r}")
            values = tuple(map(int, match.groups()))
            self.hailstones.append(Hailstone(values[:3], values[3:]))

    def count_intersections_2d(self, low: int, high: int) -> int:
        count = 0
        for a, b in combinations(self.hailstones, 2):
            crossing = intersect_2d(a, b)
            if crossing is not None and all(low <= c <= high for c in crossing):
                count += 1
        return count

    def rock_throw(self) -> Hailstone:
        """Start and velocity of a rock that hits every hailstone."""
        for a, b, c in combinations(self.hailstones, 3):
            first, first_rhs = _pair_equations(a, b)
            second, second_rhs = _pair_equations(a, c)
            solution = solve_exact(first + second, first_rhs + second_rhs)
            if solution is None:
                continue
            if any(value.denominator != 1 for value in solution):
                raise SolveError("rock trajectory is not integral")
            values = [int(value) for value in solution]
            return Hailstone(tuple(values[:3]), tuple(values[3:]))
        raise SolveError("hailstones do not determine a rock trajectory")

    def solve_part_1(self) -> Solution:
        return Solution("Intersections within the test area", str(self.count_intersections_2d(*TEST_AREA)))

    def solve_part_2(self) -> MaybeSolution:
        return Solution("Sum of the rock's initial coordinates", str(sum(self.rock_throw().position)))
