"""Per-day puzzle solvers, grouped by year.

Each ``yearYYYY/dayD.py`` module exposes a ``SolverImpl`` class and is
listed in :data:`aoc.solvers.registry.SOLVER_MODULES`.
"""

from aoc.solvers.base import (
    NOT_IMPLEMENTED,
    MaybeSolution,
    NotImplementedSolution,
    Solution,
    Solver,
    unwrap,
)

__all__ = [
    "NOT_IMPLEMENTED",
    "MaybeSolution",
    "NotImplementedSolution",
    "Solution",
    "Solver",
    "unwrap",
]
