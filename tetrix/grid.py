"""The playfield: a fixed grid of cell values."""

from __future__ import annotations

import pygame

from .colors import cell_colors


class Grid:
    """A 20 by 10 grid; 0 marks an empty cell, other values are block ids."""

    rows = 20
    cols = 10
    cell_size = 30
    origin = 11

    def __init__(self) -> None:
        self.cells: list[list[int]] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.cols for _ in range(self.rows)]

    def is_cell_outside(self, row: int, col: int) -> bool:
        """Tell whether a position lies off the grid."""
        return not (0 <= row < self.rows and 0 <= col < self.cols)

    def is_cell_empty(self, row: int, col: int) -> bool:
        """Tell whether the cell at a position holds no tile."""
        return self[row, col] == 0

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many went."""
        completed = 0
        for row in reversed(range(self.rows)):
            if all(self.cells[row]):
                self.cells[row] = [0] * self.cols
                completed += 1
            elif completed:
                self.cells[row + completed] = self.cells[row]
                self.cells[row] = [0] * self.cols
        return completed

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every cell onto a surface."""
        colors = cell_colors()
        size = self.cell_size
        for row, values in enumerate(self.cells):
            for col, value in enumerate(values):
                rect = pygame.Rect(
                    size * col + self.origin, size * row + self.origin, size - 1, size - 1
                )
                pygame.draw.rect(surface, colors[value], rect)

    def _check(self, position: tuple[int, int]) -> tuple[int, int]:
        row, col = position
        if self.is_cell_outside(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return row, col

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = self._check(position)
        return self.cells[row][col]

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        row, col = self._check(position)
        self.cells[row][col] = value

    def __str__(self) -> str:
        return "\n".join("".join(str(value) for value in row) for row in self.cells)