"""``numpy`` backed implementation of the resizable grid interface."""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

import numpy as np

from .grid import Grid
from .records import Position, check_column, check_position, check_row


def _object_array(rows: List[List[Any]], cols: int) -> np.ndarray:
    # Filled cell by cell so nested sequences stay opaque objects.
    arr = np.empty((len(rows), cols), dtype=object)
    for r, row in enumerate(rows):
        if len(row) != cols:
            raise ValueError("All rows must have the same length")
        for c, value in enumerate(row):
            arr[r, c] = value
    return arr


class ArrayGrid:
    """Lightweight wrapper around a 2D ``np.ndarray`` of opaque cells."""

    def __init__(self, rows: Iterable[Iterable[Any]] = (), columns: int | None = None, fill: Any = None):
        data = [list(r) for r in rows]
        if columns is None:
            columns = len(data[0]) if data else 0
        elif data and len(data[0]) != columns:
            raise ValueError(f"columns={columns} does not match row length {len(data[0])}")
        self.grid = _object_array(data, columns)
        self.fill = fill

    @classmethod
    def from_grid(cls, grid: Grid) -> "ArrayGrid":
        return cls(grid.to_list(), grid.columns, grid.fill)

    def _block(self, rows: int, cols: int) -> np.ndarray:
        block = np.empty((rows, cols), dtype=object)
        block.fill(self.fill)
        return block

    # ------------------------------------------------------------------
    def shape(self) -> Tuple[int, int]:
        rows, cols = self.grid.shape
        return int(rows), int(cols)

    def swap_cell(self, a: Position, b: Position) -> None:
        shape = self.shape()
        check_position(shape, a)
        check_position(shape, b)
        self.grid[a], self.grid[b] = self.grid[b], self.grid[a]

    def swap_row(self, r1: int, r2: int) -> None:
        rows = self.grid.shape[0]
        check_row(rows, r1)
        check_row(rows, r2)
        self.grid[[r1, r2]] = self.grid[[r2, r1]]

    def swap_column(self, c1: int, c2: int) -> None:
        cols = self.grid.shape[1]
        check_column(cols, c1)
        check_column(cols, c2)
        self.grid[:, [c1, c2]] = self.grid[:, [c2, c1]]

    def append_row(self) -> None:
        self.grid = np.concatenate([self.grid, self._block(1, self.grid.shape[1])], axis=0)

    def append_column(self) -> None:
        self.grid = np.concatenate([self.grid, self._block(self.grid.shape[0], 1)], axis=1)

    def remove_row(self, idx: int) -> None:
        check_row(self.grid.shape[0], idx)
        self.grid = np.delete(self.grid, idx, axis=0)

    def remove_column(self, idx: int) -> None:
        check_column(self.grid.shape[1], idx)
        self.grid = np.delete(self.grid, idx, axis=1)

    # ------------------------------------------------------------------
    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        rows, cols = self.grid.shape
        if 0 <= row < rows and 0 <= col < cols:
            return self.grid[row, col]
        return default

    def to_list(self) -> List[List[Any]]:
        return [list(row) for row in self.grid]

    def to_grid(self) -> Grid:
        return Grid(self.to_list(), self.grid.shape[1], self.fill)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayGrid):
            return NotImplemented
        return self.shape() == other.shape() and self.to_list() == other.to_list()

    def __getitem__(self, key):
        return self.grid[key]

    def __repr__(self) -> str:
        return f"ArrayGrid(shape={self.shape()})"


__all__ = ["ArrayGrid"]
