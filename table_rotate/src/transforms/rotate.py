"""Rotate a grid by 90 degrees using only structural grid operations.

The grid is never copied: Left and Right pad the grid to a square, transpose
it in place, mirror it and strip the padding again. Top and Bottom both flip
the rows vertically, which leaves the shape unchanged.

Example::

    grid = Grid([[0, 1, 2], [1, 2, 3], [4, 5, 6]])
    apply_rotation(Rotate.LEFT, grid)
    grid.to_list()  # [[2, 3, 6], [1, 2, 5], [0, 1, 4]]
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional, Sequence

from table_rotate.src.core.records import ResizableGrid
from table_rotate.src.transforms.option import TableOption
from table_rotate.src.utils import config_loader

logger = logging.getLogger(__name__)


class Rotate(TableOption, Enum):
    """Direction of a 90 degree rotation."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Rotate":
        """Return the direction named by ``text`` (case-insensitive)."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown rotation {text!r}; expected one of {names}") from None

    def change(self, grid: ResizableGrid) -> None:
        apply_rotation(self, grid)


def _pad_to_square(grid: ResizableGrid, rows: int, cols: int) -> int:
    n = max(rows, cols)
    for _ in range(rows, n):
        grid.append_row()
    for _ in range(cols, n):
        grid.append_column()
    return n


def _transpose_square(grid: ResizableGrid, n: int) -> None:
    # The whole upper triangle of the padded square is swapped. Bounding the
    # inner loop by the original row count leaves cells behind on wide grids:
    # a 2x3 grid would never move (0, 2) and (1, 2) into row 2.
    for col in range(n):
        for row in range(col + 1, n):
            grid.swap_cell((col, row), (row, col))


def _strip_padding(grid: ResizableGrid, rows: int, cols: int) -> None:
    # After the transpose the content spans ``cols`` rows and ``rows`` columns.
    n = max(rows, cols)
    for shift, col in enumerate(range(rows, n)):
        grid.remove_column(col - shift)
    for shift, row in enumerate(range(cols, n)):
        grid.remove_row(row - shift)


def _rotate_left(grid: ResizableGrid, rows: int, cols: int) -> None:
    n = _pad_to_square(grid, rows, cols)
    _transpose_square(grid, n)
    for row in range(cols // 2):
        grid.swap_row(row, cols - row - 1)
    _strip_padding(grid, rows, cols)


def _rotate_right(grid: ResizableGrid, rows: int, cols: int) -> None:
    n = _pad_to_square(grid, rows, cols)
    _transpose_square(grid, n)
    for col in range(rows // 2):
        grid.swap_column(col, rows - col - 1)
    _strip_padding(grid, rows, cols)


def _flip_vertical(grid: ResizableGrid, rows: int, cols: int) -> None:
    for row in range(rows // 2):
        last_row = rows - row - 1
        for col in range(cols):
            grid.swap_cell((last_row, col), (row, col))


def apply_rotation(direction: Rotate, grid: ResizableGrid) -> None:
    """Rotate ``grid`` in place.

    Left and Right turn an ``R x C`` grid into a ``C x R`` one; Top and Bottom
    mirror the rows and keep the shape. Top is the same operation as Bottom.
    Any out-of-range index reaching a grid primitive means the algorithm is
    broken and surfaces as ``AssertionError``.
    """
    if direction is Rotate.TOP:
        apply_rotation(Rotate.BOTTOM, grid)
        return
    if not isinstance(direction, Rotate):
        raise TypeError(f"Expected a Rotate direction, got {direction!r}")

    rows, cols = grid.shape()
    expected: Optional[List[List[Any]]] = None
    if config_loader.VERIFY_ROTATION and hasattr(grid, "to_list"):
        expected = rotated_copy(grid.to_list(), direction, cols)  # type: ignore[attr-defined]

    if direction is Rotate.LEFT:
        _rotate_left(grid, rows, cols)
    elif direction is Rotate.RIGHT:
        _rotate_right(grid, rows, cols)
    else:
        _flip_vertical(grid, rows, cols)

    logger.debug("rotate %s: %dx%d -> %dx%d", direction, rows, cols, *grid.shape())

    if expected is not None:
        actual = grid.to_list()  # type: ignore[attr-defined]
        if actual != expected:
            logger.error("rotate %s produced %r, expected %r", direction, actual, expected)
            raise AssertionError(f"in-place rotation {direction} diverged from index formulas")


def rotated_copy(
    data: Sequence[Sequence[Any]], direction: Rotate, columns: Optional[int] = None
) -> List[List[Any]]:
    """Return a new list of rows holding ``data`` rotated by ``direction``.

    This allocates the target grid and fills it from the index formulas, so it
    serves as a reference for :func:`apply_rotation`. ``columns`` is only
    needed when ``data`` has no rows.
    """
    rows = len(data)
    cols = len(data[0]) if rows else (columns or 0)

    if direction is Rotate.LEFT:
        return [[data[j][cols - 1 - i] for j in range(rows)] for i in range(cols)]
    if direction is Rotate.RIGHT:
        return [[data[rows - 1 - j][i] for j in range(rows)] for i in range(cols)]
    if direction in (Rotate.TOP, Rotate.BOTTOM):
        return [list(data[rows - 1 - i]) for i in range(rows)]
    raise TypeError(f"Expected a Rotate direction, got {direction!r}")


__all__ = ["Rotate", "apply_rotation", "rotated_copy"]
