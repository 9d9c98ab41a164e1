"""Solver registry: maps ``(year, day)`` to the module implementing it.

The table below is a plain literal so that ``aoc create`` can extend it by
rewriting the marker line; keep the marker as the last line of the dict.
Modules are imported lazily by :func:`dispatch`.
"""

from __future__ import annotations

import importlib
import logging

from aoc.errors import DispatchError, ParseError
from aoc.solvers.base import Solver

logger = logging.getLogger(__name__)

INSERT_MARKER = "# <<INSERT MARKER>>"

SOLVER_MODULES: dict[tuple[int, int], str] = {
    (2023, 1): "aoc.solvers.year2023.day1",
    (2023, 2): "aoc.solvers.year2023.day2",
    (2023, 3): "aoc.solvers.year2023.day3",
    (2023, 4): "aoc.solvers.year2023.day4",
    (2023, 5): "aoc.solvers.year2023.day5",
    (2023, 6): "aoc.solvers.year2023.day6",
    (2023, 7): "aoc.solvers.year2023.day7",
    (2023, 8): "aoc.solvers.year2023.day8",
    (2023, 9): "aoc.solvers.year2023.day9",
    (2023, 10): "aoc.solvers.year2023.day10",
    (2023, 11): "aoc.solvers.year2023.day11",
    (2023, 12): "aoc.solvers.year2023.day12",
    (2023, 13): "aoc.solvers.year2023.day13",
    (2023, 14): "aoc.solvers.year2023.day14",
    (2023, 15): "aoc.solvers.year2023.day15",
    (2023, 16): "aoc.solvers.year2023.day16",
    (2023, 17): "aoc.solvers.year2023.day17",
    (2023, 18): "aoc.solvers.year2023.day18",
    (2023, 19): "aoc.solvers.year2023.day19",
    (2023, 20): "aoc.solvers.year2023.day20",
    (2023, 21): "aoc.solvers.year2023.day21",
    (2023, 22): "aoc.solvers.year2023.day22",
    (2023, 23): "aoc.solvers.year2023.day23",
    (2023, 24): "aoc.solvers.year2023.day24",
    (2023, 25): "aoc.solvers.year2023.day25",
    (2024, 1): "aoc.solvers.year2024.day1",
    (2024, 2): "aoc.solvers.year2024.day2",
    (2024, 3): "aoc.solvers.year2024.day3",
    (2024, 4): "aoc.solvers.year2024.day4",
    (2024, 5): "aoc.solvers.year2024.day5",
    (2024, 6): "aoc.solvers.year2024.day6",
    (2024, 7): "aoc.solvers.year2024.day7",
    (2024, 8): "aoc.solvers.year2024.day8",
    (2024, 9): "aoc.solvers.year2024.day9",
    (2024, 10): "aoc.solvers.year2024.day10",
    (2024, 11): "aoc.solvers.year2024.day11",
    (2024, 12): "aoc.solvers.year2024.day12",
    (2024, 13): "aoc.solvers.year2024.day13",
    (2024, 18): "aoc.solvers.year2024.day18",
    (2024, 19): "aoc.solvers.year2024.day19",
    (2024, 22): "aoc.solvers.year2024.day22",
    (2024, 23): "aoc.solvers.year2024.day23",
    (2024, 25): "aoc.solvers.year2024.day25",
    # <<INSERT MARKER>>
}


def has_solver(year: int, day: int) -> bool:
    return (year, day) in SOLVER_MODULES


def available() -> list[tuple[int, int]]:
    """All registered ``(year, day)`` pairs in chronological order."""
    return sorted(SOLVER_MODULES)


def load_solver_class(year: int, day: int) -> type[Solver]:
    """Import the module registered for *year*/*day* and return its ``SolverImpl``."""
    module_name = SOLVER_MODULES.get((year, day))
    if module_name is None:
        raise DispatchError(f"no solver for day {day} of year {year}")
    module = importlib.import_module(module_name)
    logger.debug("Loaded solver module %s", module_name)
    return module.SolverImpl


def dispatch(input: str, year: int, day: int) -> Solver:
    """Construct the solver for *year*/*day* from the puzzle *input*.

    Raises
    ------
    DispatchError
        If no solver is registered for the puzzle.
    ParseError
        If the solver rejects the input.
    """
    solver_cls = load_solver_class(year, day)
    try:
        return solver_cls(input)
    except ParseError as exc:
        raise ParseError(f"parsing input for {year:04} day {day}") from exc
