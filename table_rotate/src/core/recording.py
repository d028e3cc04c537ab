"""Operation tracing for structural grid mutations."""

from __future__ import annotations

import json
from collections import Counter
from typing import Any, Dict, List, Tuple

from .records import Position, ResizableGrid


class RecordingGrid:
    """Forward structural operations to ``inner`` while recording each call."""

    def __init__(self, inner: ResizableGrid):
        self.inner = inner
        self.operations: List[Tuple[str, Tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.operations.append((name, args))

    def shape(self) -> Tuple[int, int]:
        return self.inner.shape()

    def swap_cell(self, a: Position, b: Position) -> None:
        self._record("swap_cell", a, b)
        self.inner.swap_cell(a, b)

    def swap_row(self, r1: int, r2: int) -> None:
        self._record("swap_row", r1, r2)
        self.inner.swap_row(r1, r2)

    def swap_column(self, c1: int, c2: int) -> None:
        self._record("swap_column", c1, c2)
        self.inner.swap_column(c1, c2)

    def append_row(self) -> None:
        self._record("append_row")
        self.inner.append_row()

    def append_column(self) -> None:
        self._record("append_column")
        self.inner.append_column()

    def remove_row(self, idx: int) -> None:
        self._record("remove_row", idx)
        self.inner.remove_row(idx)

    def remove_column(self, idx: int) -> None:
        self._record("remove_column", idx)
        self.inner.remove_column(idx)

    def __getattr__(self, name: str) -> Any:
        # Content accessors such as ``to_list`` come from the wrapped grid.
        if name == "inner":
            raise AttributeError(name)
        return getattr(self.inner, name)

    def summarize_operations(self) -> Dict[str, int]:
        """Return a histogram of recorded operation names."""
        return dict(Counter(name for name, _ in self.operations))

    def export_trace_json(self, path: str) -> None:
        """Dump recorded operations to ``path``."""
        entries = [{"op": name, "args": list(args)} for name, args in self.operations]
        with open(path, "w", encoding="utf-8") as f:
            json.dump(entries, f, indent=2)

    def clear(self) -> None:
        self.operations.clear()


__all__ = ["RecordingGrid"]
