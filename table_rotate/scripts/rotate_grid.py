"""Entrypoint for rotating a grid stored as a JSON list of rows."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Any, List, Optional, Sequence

from table_rotate.src.core.array_grid import ArrayGrid
from table_rotate.src.core.grid import Grid
from table_rotate.src.core.recording import RecordingGrid
from table_rotate.src.transforms.option import apply_options
from table_rotate.src.transforms.rotate import Rotate
from table_rotate.src.utils import config_loader


def load_grid(path: Path, backend: str = "list", columns: Optional[int] = None):
    """Return the grid stored at ``path`` using the requested storage backend."""
    with open(path, "r", encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list) or any(not isinstance(r, list) for r in rows):
        raise ValueError(f"{path} must contain a JSON list of rows")
    if backend == "array":
        return ArrayGrid(rows, columns)
    return Grid(rows, columns)


def format_grid(rows: List[List[Any]], as_json: bool = False) -> str:
    if as_json:
        return json.dumps(rows)
    return "\n".join(" ".join(str(v) for v in row) for row in rows)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rotate a grid by 90 degrees")
    parser.add_argument("grid_file", type=Path, help="JSON file holding a list of rows")
    parser.add_argument(
        "-d",
        "--direction",
        action="append",
        dest="directions",
        help="left, right, top or bottom; repeat to chain rotations",
    )
    parser.add_argument("--columns", type=int, help="Column count for grids without rows")
    parser.add_argument("--backend", choices=["list", "array"], default="list")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--trace", type=Path, help="Write recorded grid operations here")
    parser.add_argument("--verify", action="store_true", help="Check against index formulas")
    parser.add_argument("--log-file", help="Mirror rotation logs to this file")
    parser.add_argument("--log-level", help="Package log level, e.g. DEBUG")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.verify:
        config_loader.set_verify_rotation(True)
    try:
        if args.log_level:
            config_loader.set_log_level(args.log_level)
        if args.log_file:
            config_loader.set_log_file(args.log_file)
        names = args.directions or [config_loader.DEFAULT_DIRECTION]
        directions = [Rotate.parse(name) for name in names]
        grid = load_grid(args.grid_file, args.backend, args.columns)
    except (OSError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    target = RecordingGrid(grid) if args.trace else grid
    apply_options(target, *directions)

    if args.trace:
        target.export_trace_json(str(args.trace))

    print(format_grid(grid.to_list(), as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
