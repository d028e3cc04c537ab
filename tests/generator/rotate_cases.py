"""Synthetic test cases for the Rotate transform."""

from table_rotate.src.core.grid import Grid
from table_rotate.src.transforms.rotate import Rotate, apply_rotation


# Base grids -------------------------------------------------------------

base_grids = {
    "grid_3x3": [[0, 1, 2], [1, 2, 3], [4, 5, 6]],
    "grid_2x4": [[1, 2, 3, 4], [5, 6, 7, 8]],
    "grid_4x1": [[1], [2], [3], [4]],
}


def rotated(rows, direction):
    grid = Grid.from_list(rows)
    apply_rotation(direction, grid)
    return grid.to_list()


# Generate test cases ----------------------------------------------------
rotate_testcases = {}

case_id = 0
for name, rows in base_grids.items():
    for direction in Rotate:
        case_id += 1
        rotate_testcases[f"case_{case_id}"] = {
            "grid": name,
            "direction": direction.value,
            "input": rows,
            "output": rotated(rows, direction),
        }


if __name__ == "__main__":
    from pprint import pprint

    pprint(rotate_testcases)
