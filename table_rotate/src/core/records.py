"""Capability interface a grid must expose to be rotated in place."""

from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable

Position = Tuple[int, int]


@runtime_checkable
class ResizableGrid(Protocol):
    """Row-major grid supporting the structural operations used by transforms.

    Cells are opaque: implementations only relocate them. ``append_row`` and
    ``append_column`` add empty cells at the end; ``remove_row`` and
    ``remove_column`` shift later indices down by one.
    """

    def shape(self) -> Tuple[int, int]: ...

    def swap_cell(self, a: Position, b: Position) -> None: ...

    def swap_row(self, r1: int, r2: int) -> None: ...

    def swap_column(self, c1: int, c2: int) -> None: ...

    def append_row(self) -> None: ...

    def append_column(self) -> None: ...

    def remove_row(self, idx: int) -> None: ...

    def remove_column(self, idx: int) -> None: ...


def check_row(rows: int, idx: int) -> None:
    """Fail loudly when ``idx`` is not a valid row index."""
    if not 0 <= idx < rows:
        raise AssertionError(f"row index {idx} out of range for {rows} rows")


def check_column(cols: int, idx: int) -> None:
    """Fail loudly when ``idx`` is not a valid column index."""
    if not 0 <= idx < cols:
        raise AssertionError(f"column index {idx} out of range for {cols} columns")


def check_position(shape: Tuple[int, int], pos: Position) -> None:
    rows, cols = shape
    check_row(rows, pos[0])
    check_column(cols, pos[1])


__all__ = [
    "Position",
    "ResizableGrid",
    "check_row",
    "check_column",
    "check_position",
]
