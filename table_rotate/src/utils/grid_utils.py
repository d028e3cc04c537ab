"""Grid validation helpers."""

from __future__ import annotations

from typing import Any, Tuple

from table_rotate.src.core.records import ResizableGrid


def validate_grid(grid: Any, expected_shape: Tuple[int, int] | None = None) -> bool:
    """Return ``True`` if ``grid`` is rectangular and matches ``expected_shape``."""

    if not isinstance(grid, ResizableGrid):
        return False

    shape = grid.shape()
    if expected_shape is not None and tuple(shape) != tuple(expected_shape):
        return False

    to_list = getattr(grid, "to_list", None)
    if to_list is None:
        return True

    rows, cols = shape
    data = to_list()
    if len(data) != rows:
        return False
    return all(len(row) == cols for row in data)


__all__ = ["validate_grid"]
