"""Tests for GridView / MutableGridView."""

from __future__ import annotations

import pytest

from aoc.datastructures import GridView, MutableGridView, Slice


class TestGridViewConstruction:
    @pytest.mark.parametrize("length", [8, 9, 10])
    def test_separator_may_be_missing_on_last_row(self, length: int) -> None:
        grid = GridView(5, 2, list(range(length)))
        assert grid.width == 3
        assert grid.height == 2
        assert grid.size == (2, 3)
        assert grid[0, 0] == 0
        assert grid[0, 2] == 2
        assert grid[1, 0] == 5
        assert grid[1, 2] == 7

    def test_inconsistent_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="divisor"):
            GridView(5, 2, list(range(11)))

    def test_invalid_geometry_rejected(self) -> None:
        with pytest.raises(ValueError):
            GridView(0, 0, [])
        with pytest.raises(ValueError):
            GridView(2, 3, [1, 2])

    def test_from_separated_bytes(self) -> None:
        grid = GridView.from_separated(ord("\n"), b"123\n456\n789")
        assert grid.size == (3, 3)
        assert grid[2, 2] == ord("9")
        assert grid.separator_width == 1
        assert grid.total_width == 4

    def test_from_separated_str_with_trailing_newline(self) -> None:
        grid = GridView.from_separated("\n", "ab\ncd\n")
        assert grid.size == (2, 2)
        assert list(grid) == ["a", "b", "c", "d"]

    def test_from_separated_without_separator_is_one_row(self) -> None:
        grid = GridView.from_separated("\n", "abc")
        assert grid.size == (1, 3)


class TestGridViewAccess:
    def test_index_matches_flat_offset(self) -> None:
        data = list(range(20))
        grid = GridView(5, 1, data)
        for row, col in grid.positions():
            assert grid[row, col] == data[row * grid.total_width + col]

    def test_column_past_width_fails(self) -> None:
        grid = GridView(5, 2, list(range(10)))
        with pytest.raises(IndexError):
            grid[0, 3]

    def test_row_past_height_fails(self) -> None:
        grid = GridView(5, 2, list(range(10)))
        with pytest.raises(IndexError):
            grid[2, 0]

    def test_negative_index_fails(self) -> None:
        grid = GridView(3, 0, list(range(9)))
        with pytest.raises(IndexError):
            grid[-1, 0]
        assert not grid.in_bounds((-1, 0))

    def test_iteration_visits_each_logical_element_once(self) -> None:
        grid = GridView(5, 2, list(range(10)))
        assert list(grid) == [0, 1, 2, 5, 6, 7]

    def test_row_slice(self) -> None:
        grid = GridView.from_separated("\n", "abc\ndef")
        assert grid[1, :] == "def"
        assert grid[0, 1:3] == "bc"
        with pytest.raises(IndexError):
            grid[0, 0:4]

    def test_rows_and_columns(self) -> None:
        grid = GridView.from_separated("\n", "abc\ndef")
        assert [list(row) for row in grid.rows()] == [["a", "b", "c"], ["d", "e", "f"]]
        assert list(grid.col(1)) == ["b", "e"]
        assert len(grid.col(0)) == 2
        with pytest.raises(IndexError):
            grid.col(3)

    def test_slice_bounds(self) -> None:
        row = Slice([1, 2, 3, 4], 1, 2, 2)
        assert list(row) == [2, 4]
        with pytest.raises(IndexError, match="slice length"):
            row[2]

    def test_find_and_nth_index(self) -> None:
        grid = GridView.from_separated("\n", "..\n.S")
        assert grid.find("S") == (1, 1)
        assert grid.find("X") is None
        assert grid.nth_index(3) == (1, 1)

    def test_equality_ignores_separators(self) -> None:
        a = GridView.from_separated("\n", "ab\ncd")
        b = GridView(2, 0, "abcd")
        assert a == b


class TestMutableGridView:
    def test_requires_mutable_data(self) -> None:
        with pytest.raises(TypeError):
            MutableGridView(2, 0, b"abcd")

    def test_from_separated_copies(self) -> None:
        original = b"ab\ncd"
        grid = MutableGridView.from_separated(ord("\n"), original)
        grid[1, 0] = ord("x")
        assert grid[1, 0] == ord("x")
        assert original == b"ab\ncd"

    def test_assignment_is_bounds_checked(self) -> None:
        grid = MutableGridView.filled(2, 2, 0)
        with pytest.raises(IndexError):
            grid[0, 2] = 1

    def test_filled(self) -> None:
        grid = MutableGridView.filled(2, 3, False)
        assert grid.size == (2, 3)
        assert not any(grid)
        grid[1, 2] = True
        assert list(grid).count(True) == 1

    def test_copy_is_independent(self) -> None:
        grid = MutableGridView.filled(2, 2, 0)
        clone = grid.copy()
        clone[0, 0] = 1
        assert grid[0, 0] == 0
        assert grid.snapshot() != clone.snapshot()
