"""Example answers for the 2023 solvers."""

from __future__ import annotations

import importlib

import pytest

from aoc.errors import ParseError, SolveError
from aoc.solvers.base import NotImplementedSolution, unwrap


def solver(day: int, text: str):
    return importlib.import_module(f"aoc.solvers.year2023.day{day}").SolverImpl(text)


@pytest.mark.parametrize(
    ("day", "suffix", "expected"),
    [
        (1, "1", "142"),
        (2, "1", "8"),
        (3, "1", "4361"),
        (4, "1", "13"),
        (5, "1", "35"),
        (6, "1", "288"),
        (7, "1", "6440"),
        (8, "1a", "2"),
        (8, "1b", "6"),
        (9, "1", "114"),
        (10, "1", "8"),
        (11, "1", "374"),
        (12, "1", "21"),
        (13, "1", "405"),
        (14, "1", "136"),
        (15, "1", "1320"),
        (16, "1", "46"),
        (17, "1", "102"),
        (18, "1", "62"),
        (19, "1", "19114"),
        (20, "1a", "32000000"),
        (20, "1b", "11687500"),
        (22, "1", "5"),
        (23, "1", "94"),
        (25, "1", "54"),
    ],
)
def test_part_1_example(example, day: int, suffix: str, expected: str) -> None:
    assert solver(day, example(2023, day, suffix)).solve_part_1().answer == expected


@pytest.mark.parametrize(
    ("day", "suffix", "expected"),
    [
        (1, "2", "281"),
        (2, "1", "2286"),
        (3, "1", "467835"),
        (4, "1", "30"),
        (5, "1", "46"),
        (6, "1", "71503"),
        (7, "1", "5905"),
        (8, "2", "6"),
        (9, "1", "2"),
        (10, "2a", "4"),
        (10, "2b", "8"),
        (12, "1", "525152"),
        (13, "1", "400"),
        (14, "1", "64"),
        (15, "1", "145"),
        (16, "1", "51"),
        (17, "1", "94"),
        (17, "2", "71"),
        (18, "1", "952408144115"),
        (19, "1", "167409079868000"),
        (22, "1", "7"),
        (23, "1", "154"),
        (24, "1", "47"),
    ],
)
def test_part_2_example(example, day: int, suffix: str, expected: str) -> None:
    assert unwrap(solver(day, example(2023, day, suffix)).solve_part_2()).answer == expected


class TestDay1:
    def test_overlapping_words(self) -> None:
        assert solver(1, "xtwone\n").solve_part_2().answer == "21"


class TestDay6:
    def test_ways_to_win_counts_strict_wins(self) -> None:
        from aoc.solvers.year2023.day6 import ways_to_win

        assert ways_to_win(7, 9) == 4
        assert ways_to_win(30, 200) == 9
        assert ways_to_win(4, 4) == 0


class TestDay7:
    def test_jokers_join_the_largest_group(self) -> None:
        from aoc.solvers.year2023.day7 import hand_type

        assert hand_type("KTJJT") == (2, 2, 1)
        assert hand_type("KTJJT", jokers=True) == (4, 1)
        assert hand_type("JJJJJ", jokers=True) == (5,)


class TestDay10:
    def test_pipe_leaving_the_grid(self) -> None:
        with pytest.raises(SolveError, match="loop is broken"):
            solver(10, "S-\n|.\n")


class TestDay11:
    @pytest.mark.parametrize(("factor", "expected"), [(10, 1030), (100, 8410)])
    def test_older_universe(self, example, factor: int, expected: int) -> None:
        assert solver(11, example(2023, 11)).sum_shortest_paths(factor) == expected


class TestDay12:
    def test_single_record(self) -> None:
        from aoc.solvers.year2023.day12 import count_arrangements

        assert count_arrangements("?###????????", (3, 2, 1)) == 10
        assert count_arrangements("#.#", (1,)) == 0


class TestDay19:
    def test_first_part_is_accepted(self, example) -> None:
        workflows = solver(19, example(2023, 19))
        assert workflows.is_accepted({"x": 787, "m": 2655, "a": 1222, "s": 2876})
        assert not workflows.is_accepted({"x": 1679, "m": 44, "a": 2067, "s": 496})

    def test_jump_to_unknown_workflow(self) -> None:
        workflows = solver(19, "in{x<10:nope,A}\n\n{x=1,m=1,a=1,s=1}\n")
        with pytest.raises(SolveError, match="unknown workflow"):
            workflows.solve_part_1()


class TestDay20:
    def test_rx_needs_a_feeding_conjunction(self, example) -> None:
        with pytest.raises(SolveError, match="rx"):
            solver(20, example(2023, 20, "1a")).solve_part_2()

    def test_presses_until_rx_gets_a_low_pulse(self) -> None:
        text = (
            "broadcaster -> a, b\n"
            "%a -> inv\n"
            "%b -> b2\n"
            "%b2 -> inv2\n"
            "&inv -> hub\n"
            "&inv2 -> hub\n"
            "&hub -> rx\n"
        )
        assert solver(20, text).solve_part_2().answer == "4"


class TestDay21:
    OPEN_FIELD = ".....\n.....\n..S..\n.....\n.....\n"

    def test_bounded_map(self, example) -> None:
        assert solver(21, example(2023, 21)).reachable_in_steps(6) == 16

    @pytest.mark.parametrize(("steps", "expected"), [(6, 16), (10, 50), (50, 1594)])
    def test_repeating_map(self, example, steps: int, expected: int) -> None:
        assert solver(21, example(2023, 21)).plots_on_repeating_map(steps) == expected

    def test_extrapolation_matches_direct_count(self) -> None:
        garden = solver(21, self.OPEN_FIELD)
        assert garden.plots_on_repeating_map(52) == 53 * 53
        assert garden.extrapolated_plots(52) == 53 * 53

    def test_extrapolation_needs_whole_maps(self, example) -> None:
        with pytest.raises(SolveError):
            solver(21, example(2023, 21)).solve_part_2()


class TestDay22:
    def test_removing_the_bottom_brick(self, example) -> None:
        assert solver(22, example(2023, 22)).chain_reaction(0) == 6


class TestDay24:
    def test_intersections_in_test_area(self, example) -> None:
        assert solver(24, example(2023, 24)).count_intersections_2d(7, 27) == 2

    def test_rock_trajectory(self, example) -> None:
        rock = solver(24, example(2023, 24)).rock_throw()
        assert rock.position == (24, 13, 10)
        assert rock.velocity == (-3, 1, 2)


class TestDay25:
    def test_group_sizes(self, example) -> None:
        assert sorted(solver(25, example(2023, 25)).partition()) == [6, 9]

    def test_no_second_part(self, example) -> None:
        assert isinstance(solver(25, example(2023, 25)).solve_part_2(), NotImplementedSolution)


class TestParsing:
    @pytest.mark.parametrize(
        ("day", "text"),
        [
            (2, "Game one: 3 blue\n"),
            (5, "seeds: 79 x\n\nseed-to-soil map:\n50 98 2\n"),
            (5, "seeds: 79 14\n\nseed-to-soil map:\n50 98 two\n"),
            (4, "Card 1: 1 2 3\n"),
            (7, "32T3Z 765\n"),
            (14, "O.X\n"),
            (18, "R 6 (#70c71)\n"),
            (19, "in{x<1:A,R}\n\n{x=1}\n"),
            (20, "flip -> a\n"),
            (22, "1,0,1~1,2\n"),
            (24, "19, 13 @ -2, 1\n"),
            (25, "jqt rhn\n"),
        ],
    )
    def test_malformed_input(self, day: int, text: str) -> None:
        with pytest.raises(ParseError):
            solver(day, text)
