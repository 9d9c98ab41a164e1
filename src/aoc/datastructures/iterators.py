"""Adjacency iterators on a bounded 2D grid.

Both iterators clip at the grid edges and only yield in-bounds
coordinates, always in the same order.
"""

from __future__ import annotations

from collections.abc import Iterator

Pos = tuple[int, int]

ORTHOGONAL: tuple[Pos, ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))
"""Offsets visited by :func:`neighbors`: up, left, right, down."""

SURROUNDING: tuple[Pos, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)
"""Offsets visited by :func:`surround`, row-major."""


def _clipped(center: Pos, size: Pos, offsets: tuple[Pos, ...]) -> Iterator[Pos]:
    height, width = size
    row, col = center
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        if 0 <= r < height and 0 <= c < width:
            yield (r, c)


def neighbors(center: Pos, size: Pos) -> Iterator[Pos]:
    """The up to four orthogonally adjacent cells of *center*."""
    return _clipped(center, size, ORTHOGONAL)


def surround(center: Pos, size: Pos) -> Iterator[Pos]:
    """The up to eight cells around *center*, diagonals included."""
    return _clipped(center, size, SURROUNDING)
