"""Core grid storage and the resizable grid interface."""

from .records import Position, ResizableGrid
from .grid import Grid
from .array_grid import ArrayGrid
from .recording import RecordingGrid

__all__ = ["ArrayGrid", "Grid", "Position", "RecordingGrid", "ResizableGrid"]
