"""Tetromino pieces and their rotation states."""

from __future__ import annotations

import pygame

from .colors import cell_colors
from .position import Position

CELL_SIZE = 30


def _shape(*pairs: tuple[int, int]) -> tuple[Position, ...]:
    return tuple(Position(row, col) for row, col in pairs)


class Block:
    """A piece made of tiles, with a set of rotation states and an offset."""

    id: int = 0
    rotations: tuple[tuple[Position, ...], ...] = ()
    spawn: tuple[int, int] = (0, 0)

    def __init__(self) -> None:
        self.cell_size = CELL_SIZE
        self.rotation_state = 0
        self.row_offset = 0
        self.col_offset = 0
        self.move(*self.spawn)

    def move(self, rows: int, cols: int) -> None:
        """Shift the piece by the given number of rows and columns."""
        self.row_offset += rows
        self.col_offset += cols

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        if self.rotations:
            self.rotation_state = (self.rotation_state + 1) % len(self.rotations)

    def undo_rotate(self) -> None:
        """Step back to the previous rotation state, wrapping around."""
        if self.rotations:
            self.rotation_state = (self.rotation_state - 1) % len(self.rotations)

    def cell_positions(self) -> list[Position]:
        """Return the positions of the piece's tiles on the grid."""
        if not self.rotations:
            return []
        return [
            Position(tile.row + self.row_offset, tile.col + self.col_offset)
            for tile in self.rotations[self.rotation_state]
        ]

    def draw(self, surface: pygame.Surface, offset_x: int, offset_y: int) -> None:
        """Paint the piece's tiles onto a surface at the given pixel offset."""
        color = cell_colors()[self.id]
        size = self.cell_size
        for tile in self.cell_positions():
            rect = pygame.Rect(
                tile.col * size + offset_x, tile.row * size + offset_y, size - 1, size - 1
            )
            pygame.draw.rect(surface, color, rect)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rotation={self.rotation_state}, "
            f"offset=({self.row_offset}, {self.col_offset}))"
        )


class LBlock(Block):
    id = 1
    rotations = (
        _shape((0, 2), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (1, 1), (2, 1), (2, 2)),
        _shape((1, 0), (1, 1), (1, 2), (2, 0)),
        _shape((0, 0), (0, 1), (1, 1), (2, 1)),
    )
    spawn = (0, 3)


class JBlock(Block):
    id = 2
    rotations = (
        _shape((0, 0), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (0, 2), (1, 1), (2, 1)),
        _shape((1, 0), (1, 1), (1, 2), (2, 2)),
        _shape((0, 1), (1, 1), (2, 0), (2, 1)),
    )
    spawn = (0, 3)


class IBlock(Block):
    id = 3
    rotations = (
        _shape((1, 0), (1, 1), (1, 2), (1, 3)),
        _shape((0, 2), (1, 2), (2, 2), (3, 2)),
        _shape((2, 0), (2, 1), (2, 2), (2, 3)),
        _shape((0, 1), (1, 1), (2, 1), (3, 1)),
    )
    spawn = (-1, 3)


class OBlock(Block):
    id = 4
    rotations = (_shape((0, 0), (0, 1), (1, 0), (1, 1)),)
    spawn = (0, 4)


class SBlock(Block):
    id = 5
    rotations = (
        _shape((0, 1), (0, 2), (1, 0), (1, 1)),
        _shape((0, 1), (1, 1), (1, 2), (2, 2)),
        _shape((1, 1), (1, 2), (2, 0), (2, 1)),
        _shape((0, 0), (1, 0), (1, 1), (2, 1)),
    )
    spawn = (0, 3)


class TBlock(Block):
    id = 6
    rotations = (
        _shape((0, 1), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (1, 1), (1, 2), (2, 1)),
        _shape((1, 0), (1, 1), (1, 2), (2, 1)),
        _shape((0, 1), (1, 0), (1, 1), (2, 1)),
    )
    spawn = (0, 3)


class ZBlock(Block):
    id = 7
    rotations = (
        _shape((0, 0), (0, 1), (1, 1), (1, 2)),
        _shape((0, 2), (1, 1), (1, 2), (2, 1)),
        _shape((1, 0), (1, 1), (2, 1), (2, 2)),
        _shape((0, 1), (1, 0), (1, 1), (2, 0)),
    )
    spawn = (0, 3)