"""Tests for solver dispatch and the solver base types."""

from __future__ import annotations

from pathlib import Path

import pytest

from aoc.errors import DispatchError, ParseError, SolveError
from aoc.solvers import registry
from aoc.solvers.base import NOT_IMPLEMENTED, Solution, Solver, unwrap
from aoc.solvers.registry import INSERT_MARKER, SOLVER_MODULES, available, dispatch, has_solver


class TestSolution:
    def test_display(self) -> None:
        assert str(Solution("Total winnings", "6440")) == "Total winnings: 6440"

    def test_not_implemented_display(self) -> None:
        assert str(NOT_IMPLEMENTED) == "(Solver for part not implemented.)"

    def test_unwrap(self) -> None:
        solution = Solution("Part 1", "1")
        assert unwrap(solution) is solution
        with pytest.raises(SolveError):
            unwrap(NOT_IMPLEMENTED)


class TestDispatch:
    def test_dispatches_to_registered_solver(self, example) -> None:
        solver = dispatch(example(2023, 9), 2023, 9)
        assert isinstance(solver, Solver)
        assert solver.solve_part_1().answer == "114"

    def test_unknown_day(self) -> None:
        assert not has_solver(2015, 1)
        with pytest.raises(DispatchError, match="no solver for day 1 of year 2015"):
            dispatch("", 2015, 1)

    def test_parse_error_gets_context(self) -> None:
        with pytest.raises(ParseError, match="parsing input for 2024 day 9") as excinfo:
            dispatch("not a disk map", 2024, 9)
        assert isinstance(excinfo.value.__cause__, ParseError)

    def test_bad_number_is_a_parse_error(self) -> None:
        with pytest.raises(ParseError, match="parsing input for 2023 day 5") as excinfo:
            dispatch("seeds: 79 x\n\nseed-to-soil map:\n50 98 2\n", 2023, 5)
        assert isinstance(excinfo.value.__cause__, ParseError)
        assert isinstance(excinfo.value.__cause__.__cause__, ValueError)

    def test_broken_loop_is_a_solve_error(self) -> None:
        with pytest.raises(SolveError, match="loop is broken"):
            dispatch("S-\n|.", 2023, 10)

    def test_available_is_sorted(self) -> None:
        keys = available()
        assert keys == sorted(keys)
        assert (2023, 1) in keys
        assert (2024, 25) in keys

    @pytest.mark.parametrize("key", sorted(SOLVER_MODULES))
    def test_every_registered_module_exposes_solver(self, key: tuple[int, int]) -> None:
        solver_cls = registry.load_solver_class(*key)
        assert issubclass(solver_cls, Solver)

    def test_marker_closes_the_table(self) -> None:
        source = Path(registry.__file__).read_text(encoding="utf-8")
        table = source.split("SOLVER_MODULES", 1)[1]
        lines = [line.strip() for line in table.splitlines()]
        assert lines[lines.index("}") - 1] == INSERT_MARKER
