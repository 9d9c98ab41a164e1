"""Data structures shared by the puzzle solvers."""

from __future__ import annotations

from aoc.datastructures.grid import GridView, MutableGridView, Slice
from aoc.datastructures.iterators import neighbors, surround

__all__ = ["GridView", "MutableGridView", "Slice", "neighbors", "surround"]
