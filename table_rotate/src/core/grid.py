"""List-of-lists grid used as the default rotation target."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from .records import Position, check_column, check_position, check_row


@dataclass(eq=False)
class Grid:
    """Rectangular, row-major grid of opaque cells.

    ``columns`` is kept explicitly so that a grid with zero rows still knows
    its width. Appended rows and columns are filled with ``fill``.
    """

    data: List[List[Any]] = field(default_factory=list)
    columns: Optional[int] = None
    fill: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.data:
            row_len = len(self.data[0])
            for row in self.data:
                if len(row) != row_len:
                    raise ValueError("All rows must have the same length")
            if self.columns is not None and self.columns != row_len:
                raise ValueError(
                    f"columns={self.columns} does not match row length {row_len}"
                )
            self.columns = row_len
        elif self.columns is None:
            self.columns = 0
        elif self.columns < 0:
            raise ValueError("columns must be non-negative")

    @classmethod
    def from_list(cls, rows: Iterable[Iterable[Any]], fill: Any = None) -> "Grid":
        """Return a grid holding a copy of ``rows``."""
        return cls([list(r) for r in rows], fill=fill)

    @classmethod
    def empty(cls, rows: int, cols: int, fill: Any = None) -> "Grid":
        """Return a ``rows`` x ``cols`` grid of ``fill`` cells."""
        if rows < 0 or cols < 0:
            raise ValueError("Grid dimensions must be non-negative")
        return cls([[fill for _ in range(cols)] for _ in range(rows)], cols, fill)

    # Resizable grid interface --------------------------------------------

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, cols)."""
        return len(self.data), self.columns

    def swap_cell(self, a: Position, b: Position) -> None:
        shape = self.shape()
        check_position(shape, a)
        check_position(shape, b)
        (r1, c1), (r2, c2) = a, b
        self.data[r1][c1], self.data[r2][c2] = self.data[r2][c2], self.data[r1][c1]

    def swap_row(self, r1: int, r2: int) -> None:
        rows = len(self.data)
        check_row(rows, r1)
        check_row(rows, r2)
        self.data[r1], self.data[r2] = self.data[r2], self.data[r1]

    def swap_column(self, c1: int, c2: int) -> None:
        check_column(self.columns, c1)
        check_column(self.columns, c2)
        for row in self.data:
            row[c1], row[c2] = row[c2], row[c1]

    def append_row(self) -> None:
        self.data.append([self.fill for _ in range(self.columns)])

    def append_column(self) -> None:
        for row in self.data:
            row.append(self.fill)
        self.columns += 1

    def remove_row(self, idx: int) -> None:
        check_row(len(self.data), idx)
        del self.data[idx]

    def remove_column(self, idx: int) -> None:
        check_column(self.columns, idx)
        for row in self.data:
            del row[idx]
        self.columns -= 1

    # Content access -------------------------------------------------------

    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        """Return the cell at ``row``, ``col`` or ``default`` if out of bounds."""
        if 0 <= row < len(self.data) and 0 <= col < self.columns:
            return self.data[row][col]
        return default

    def set(self, row: int, col: int, value: Any) -> None:
        """Replace the content of the specified cell."""
        check_position(self.shape(), (row, col))
        self.data[row][col] = value

    def to_list(self) -> List[List[Any]]:
        """Return a copy of the rows (cells themselves are not copied)."""
        return [row[:] for row in self.data]

    def copy(self) -> "Grid":
        return Grid(self.to_list(), self.columns, self.fill)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape() == other.shape() and self.data == other.data

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"


__all__ = ["Grid"]
