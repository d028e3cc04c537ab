"""Structural 90 degree rotation for resizable grids."""

from table_rotate.src.core import ArrayGrid, Grid, RecordingGrid, ResizableGrid
from table_rotate.src.transforms import (
    Rotate,
    TableOption,
    apply_options,
    apply_rotation,
    rotated_copy,
)

__all__ = [
    "ArrayGrid",
    "Grid",
    "RecordingGrid",
    "ResizableGrid",
    "Rotate",
    "TableOption",
    "apply_options",
    "apply_rotation",
    "rotated_copy",
]
