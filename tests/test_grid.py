import pygame
import pytest

from tetrix.colors import cell_colors
from tetrix.grid import Grid


def fill_row(grid, row, value=1):
    for col in range(grid.cols):
        grid[row, col] = value


def test_new_grid_is_empty():
    grid = Grid()
    lines = str(grid).split("\n")
    assert len(lines) == 20
    assert all(line == "0" * 10 for line in lines)


@pytest.mark.parametrize(
    "row, col, outside",
    [(0, 0, False), (19, 9, False), (-1, 0, True), (0, -1, True), (20, 0, True), (0, 10, True)],
)
def test_is_cell_outside(row, col, outside):
    assert Grid().is_cell_outside(row, col) is outside


def test_is_cell_empty_reflects_contents():
    grid = Grid()
    grid[5, 5] = 3
    assert grid.is_cell_empty(5, 5) is False
    assert grid.is_cell_empty(5, 6) is True


def test_access_outside_raises():
    grid = Grid()
    with pytest.raises(IndexError):
        grid.is_cell_empty(-1, 0)
    with pytest.raises(IndexError):
        grid[20, 0] = 1


def test_clear_single_row_drops_rows_above():
    grid = Grid()
    fill_row(grid, 19)
    grid[18, 0] = 5
    assert grid.clear_full_rows() == 1
    assert grid[19, 0] == 5
    assert all(grid.is_cell_empty(18, col) for col in range(grid.cols))


def test_clear_separated_rows():
    grid = Grid()
    fill_row(grid, 19)
    grid[18, 2] = 6
    fill_row(grid, 17)
    grid[16, 4] = 7
    assert grid.clear_full_rows() == 2
    assert grid[19, 2] == 6
    assert grid[18, 4] == 7
    assert sum(value != 0 for row in grid.cells for value in row) == 2


def test_partial_row_is_not_cleared():
    grid = Grid()
    for col in range(grid.cols - 1):
        grid[19, col] = 2
    assert grid.clear_full_rows() == 0
    assert grid[19, 0] == 2


def test_reset_empties_grid():
    grid = Grid()
    fill_row(grid, 10, 4)
    grid.reset()
    assert all(value == 0 for row in grid.cells for value in row)


def test_draw_uses_cell_colours():
    grid = Grid()
    grid[0, 0] = 2
    surface = pygame.Surface((500, 620))
    grid.draw(surface)
    assert surface.get_at((11, 11)) == cell_colors()[2]
    assert surface.get_at((11 + 30, 11)) == cell_colors()[0]