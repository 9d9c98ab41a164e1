"""Tests for the clipped neighbour iterators."""

from __future__ import annotations

from aoc.datastructures import neighbors, surround


class TestNeighbors:
    def test_corner(self) -> None:
        assert list(neighbors((0, 0), (3, 3))) == [(0, 1), (1, 0)]

    def test_edge(self) -> None:
        assert list(neighbors((0, 1), (3, 3))) == [(0, 0), (0, 2), (1, 1)]

    def test_interior_order(self) -> None:
        assert list(neighbors((1, 1), (3, 3))) == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_single_cell_grid(self) -> None:
        assert list(neighbors((0, 0), (1, 1))) == []


class TestSurround:
    def test_corner(self) -> None:
        assert list(surround((2, 2), (3, 3))) == [(1, 1), (1, 2), (2, 1)]

    def test_edge(self) -> None:
        assert len(list(surround((1, 0), (3, 3)))) == 5

    def test_interior_order(self) -> None:
        assert list(surround((1, 1), (3, 3))) == [
            (0, 0), (0, 1), (0, 2),
            (1, 0), (1, 2),
            (2, 0), (2, 1), (2, 2),
        ]
