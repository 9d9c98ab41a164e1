"""Bounds-checked 2D views over flat sequences.

Puzzle inputs are usually rectangular blocks of text.  Instead of splitting
them into lists of lines, a :class:`GridView` indexes the raw buffer
directly: every row occupies ``total_width`` elements of which the trailing
``separator_width`` ones (the line terminator) are not part of the grid.

:class:`GridView` only reads from its backing sequence and can wrap
``bytes``, ``bytearray``, ``memoryview``, ``list`` or ``str``.
:class:`MutableGridView` additionally supports item assignment and owns a
mutable copy of its data.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, MutableSequence, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Pos = tuple[int, int]


class Slice(Generic[T]):
    """A strided, bounds-checked view on one row or column of a grid."""

    __slots__ = ("_data", "_offset", "_stride", "_len")

    def __init__(self, data: Sequence[T], offset: int, stride: int, length: int) -> None:
        self._data = data
        self._offset = offset
        self._stride = stride
        self._len = length

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, index: int) -> T:
        if index < 0 or index >= self._len:
            raise IndexError("index exceeds slice length")
        return self._data[self._offset + index * self._stride]

    def __iter__(self) -> Iterator[T]:
        data = self._data
        for i in range(self._len):
            yield data[self._offset + i * self._stride]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"Slice({list(self)!r})"


class GridView(Generic[T]):
    """Read-only rectangular window over a flat sequence.

    Parameters
    ----------
    width:
        Total number of elements per row, separator included.
    separator_width:
        Number of trailing elements per row that are not part of the grid.
    data:
        The backing sequence.  The last row may omit its separator.

    Raises
    ------
    ValueError
        If the length of *data* is inconsistent with *width*.
    """

    __slots__ = ("_data", "_stride", "_separator_width", "_height", "_width")

    def __init__(self, width: int, separator_width: int, data: Sequence[T]) -> None:
        if width <= 0 or separator_width < 0 or separator_width > width:
            raise ValueError(
                f"invalid grid geometry: width={width}, separator_width={separator_width}"
            )
        remainder = len(data) % width
        if 0 < remainder < width - separator_width - 1:
            raise ValueError("width must be a divisor of total data length")
        self._data = data
        self._stride = width
        self._separator_width = separator_width
        self._height = -(-len(data) // width)
        self._width = width - separator_width

    @classmethod
    def from_separated(cls, separator: Any, data: Sequence[T]):
        """Create a view whose rows end at each occurrence of *separator*.

        The row width is taken from the position of the first separator; if
        there is none the whole sequence forms a single row.
        """
        try:
            width = data.index(separator)
        except ValueError:
            width = len(data)
        return cls(width + 1, 1, data)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        """Number of columns (separator excluded)."""
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Pos:
        """``(height, width)``."""
        return (self._height, self._width)

    @property
    def total_width(self) -> int:
        return self._stride

    @property
    def separator_width(self) -> int:
        return self._separator_width

    @property
    def data(self) -> Sequence[T]:
        return self._data

    def in_bounds(self, pos: Pos) -> bool:
        """Whether *pos* lies inside the grid; accepts negative coordinates."""
        return 0 <= pos[0] < self._height and 0 <= pos[1] < self._width

    def nth_index(self, n: int) -> Pos:
        """Coordinates of the *n*-th element yielded by iteration."""
        return divmod(n, self._width)

    def positions(self) -> Iterator[Pos]:
        """All coordinates in row-major order."""
        for row in range(self._height):
            for col in range(self._width):
                yield (row, col)

    def find(self, value: T) -> Pos | None:
        """Coordinates of the first cell equal to *value*, if any."""
        for n, item in enumerate(self):
            if item == value:
                return self.nth_index(n)
        return None

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def _offset(self, row: int, col: int) -> int:
        if row < 0 or col < 0 or col >= self._width:
            raise IndexError("index exceeds view dimensions")
        offset = self._stride * row + col
        if offset >= len(self._data):
            raise IndexError("index exceeds view dimensions")
        return offset

    def _row_range(self, row: int, span: slice) -> tuple[int, int]:
        if span.step not in (None, 1):
            raise ValueError("grid row slices do not support a step")
        start = 0 if span.start is None else span.start
        stop = self._width if span.stop is None else span.stop
        if row < 0 or start < 0 or stop > self._width or start > stop:
            raise IndexError("index exceeds view dimensions")
        row_start = self._stride * row
        if row_start + stop > len(self._data):
            raise IndexError("index exceeds view dimensions")
        return row_start + start, row_start + stop

    def __getitem__(self, index: tuple[int, Any]):
        row, col = index
        if isinstance(col, slice):
            start, stop = self._row_range(row, col)
            return self._data[start:stop]
        return self._data[self._offset(row, col)]

    def __iter__(self) -> Iterator[T]:
        data = self._data
        for row in range(self._height):
            base = row * self._stride
            for col in range(self._width):
                yield data[base + col]

    def row(self, index: int) -> Slice[T]:
        if index < 0 or index >= self._height:
            raise IndexError("row index exceeds view dimensions")
        return Slice(self._data, index * self._stride, 1, self._width)

    def col(self, index: int) -> Slice[T]:
        if index < 0 or index >= self._width:
            raise IndexError("column index exceeds view dimensions")
        return Slice(self._data, index, self._stride, self._height)

    def rows(self) -> Iterator[Slice[T]]:
        for index in range(self._height):
            yield self.row(index)

    def cols(self) -> Iterator[Slice[T]]:
        for index in range(self._width):
            yield self.col(index)

    def snapshot(self) -> Hashable:
        """Hashable copy of the backing data, e.g. for cycle detection."""
        data = self._data
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        if isinstance(data, str):
            return data
        return tuple(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridView):
            return NotImplemented
        return self.size == other.size and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(height={self._height}, width={self._width})"


def _owned_copy(data: Sequence[Any]) -> MutableSequence[Any]:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytearray(data)
    if isinstance(data, str):
        return bytearray(data.encode())
    return list(data)


class MutableGridView(GridView[T]):
    """A :class:`GridView` over a mutable sequence it owns."""

    __slots__ = ()

    def __init__(self, width: int, separator_width: int, data: MutableSequence[T]) -> None:
        if not isinstance(data, MutableSequence):
            raise TypeError(f"mutable grid requires a mutable sequence, got {type(data).__name__}")
        super().__init__(width, separator_width, data)

    @classmethod
    def from_separated(cls, separator: Any, data: Sequence[T]):
        """Like :meth:`GridView.from_separated` but over a private mutable copy."""
        return super().from_separated(separator, _owned_copy(data))

    @classmethod
    def filled(cls, height: int, width: int, value: T):
        """A separator-free grid of the given size with every cell set to *value*."""
        return cls(width, 0, [value] * (height * width))

    def __setitem__(self, index: Pos, value: T) -> None:
        row, col = index
        self._data[self._offset(row, col)] = value  # type: ignore[index]

    def copy(self) -> MutableGridView[T]:
        return type(self)(self._stride, self._separator_width, _owned_copy(self._data))
