"""Abstract base solver; every per-day solver inherits from this.

A solver parses the raw puzzle input in its constructor and computes the
two answers on demand.  Parsing problems raise
:class:`~aoc.errors.ParseError`; a puzzle without a solution under the
solver's assumptions raises :class:`~aoc.errors.SolveError`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from aoc.errors import SolveError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """A computed answer with a short description of what it is."""

    description: str
    answer: str

    def __str__(self) -> str:
        return f"{self.description}: {self.answer}"


@dataclass(frozen=True)
class NotImplementedSolution:
    """Placeholder for a part that has no solver yet."""

    def __str__(self) -> str:
        return "(Solver for part not implemented.)"


NOT_IMPLEMENTED = NotImplementedSolution()

MaybeSolution = Union[Solution, NotImplementedSolution]


def unwrap(maybe: MaybeSolution) -> Solution:
    """Return *maybe* if it is a real :class:`Solution`."""
    if isinstance(maybe, Solution):
        return maybe
    raise SolveError("part is not implemented")


class Solver(ABC):
    """Abstract base class for puzzle solvers.

    Parameters
    ----------
    input:
        The full puzzle input text, exactly as downloaded.
    """

    @abstractmethod
    def __init__(self, input: str) -> None: ...

    @abstractmethod
    def solve_part_1(self) -> Solution:
        """Compute the answer to part one."""

    @abstractmethod
    def solve_part_2(self) -> MaybeSolution:
        """Compute the answer to part two, if implemented."""
