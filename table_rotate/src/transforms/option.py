"""Options that rewrite a grid before it is rendered."""

from __future__ import annotations

from typing import TypeVar

from table_rotate.src.core.records import ResizableGrid

G = TypeVar("G", bound=ResizableGrid)


class TableOption:
    """Base class for in-place grid transforms.

    Enums such as :class:`~table_rotate.src.transforms.rotate.Rotate` mix this
    in, so it must not use the ``ABCMeta`` metaclass.
    """

    def change(self, grid: ResizableGrid) -> None:
        raise NotImplementedError


def apply_options(grid: G, *options: TableOption) -> G:
    """Apply ``options`` to ``grid`` in order and return the same grid."""
    for option in options:
        option.change(grid)
    return grid


__all__ = ["TableOption", "apply_options"]
