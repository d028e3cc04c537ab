"""Grid transforms applied before rendering."""

from .option import TableOption, apply_options
from .rotate import Rotate, apply_rotation, rotated_copy

__all__ = ["Rotate", "TableOption", "apply_options", "apply_rotation", "rotated_copy"]
