import pytest

from table_rotate.src.core.grid import Grid
from table_rotate.src.transforms.option import TableOption, apply_options
from table_rotate.src.transforms.rotate import Rotate


class Reverse(TableOption):
    """Reverse each row in place, used to check option ordering."""

    def change(self, grid):
        rows, cols = grid.shape()
        for r in range(rows):
            for c in range(cols // 2):
                grid.swap_cell((r, c), (r, cols - c - 1))


def test_rotate_is_table_option():
    assert isinstance(Rotate.LEFT, TableOption)


def test_apply_options_in_order():
    grid = Grid([[1, 2, 3], [4, 5, 6]])
    out = apply_options(grid, Rotate.LEFT, Reverse())
    assert out is grid
    assert grid.to_list() == [[6, 3], [5, 2], [4, 1]]


def test_apply_options_chain_restores():
    grid = Grid([[1, 2, 3], [4, 5, 6]])
    apply_options(grid, Rotate.LEFT, Rotate.LEFT, Rotate.RIGHT, Rotate.RIGHT)
    assert grid.to_list() == [[1, 2, 3], [4, 5, 6]]


def test_base_option_is_abstract():
    with pytest.raises(NotImplementedError):
        TableOption().change(Grid([[1]]))
