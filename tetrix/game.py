"""Game state: the falling piece, the preview piece, the grid and the score."""

from __future__ import annotations

import enum
import random

import pygame

from .block import Block, IBlock, JBlock, LBlock, OBlock, SBlock, TBlock, ZBlock
from .grid import Grid

_LINE_SCORES = {1: 100, 2: 200, 3: 500}


class Action(enum.Enum):
    """A player's input."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    DOWN = enum.auto()
    ROTATE = enum.auto()
    OTHER = enum.auto()


class Game:
    """One game of falling blocks."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.grid = Grid()
        self._bag: list[Block] = self.all_blocks()
        self.current_block = self.random_block()
        self.game_over = False
        self.next_block = self.random_block()
        self.score = 0

    def all_blocks(self) -> list[Block]:
        """Return a fresh set containing one of each piece."""
        return [IBlock(), JBlock(), LBlock(), OBlock(), SBlock(), TBlock(), ZBlock()]

    def random_block(self) -> Block:
        """Draw a piece from the bag, refilling it once it runs out."""
        if not self._bag:
            self._bag = self.all_blocks()
        return self._bag.pop(self._rng.randrange(len(self._bag)))

    def handle_input(self, action: Action | None) -> None:
        """Apply one input; any input after game over starts a new game."""
        if self.game_over and action is not None:
            self.game_over = False
            self.reset()
        if action is Action.LEFT:
            self.move_left()
        elif action is Action.RIGHT:
            self.move_right()
        elif action is Action.DOWN:
            self.move_down()
            self.update_score(0, 1)
        elif action is Action.ROTATE:
            self.rotate()

    def move_left(self) -> None:
        if not self.game_over:
            self.current_block.move(0, -1)
            if self._is_outside() or not self._fits():
                self.current_block.move(0, 1)

    def move_right(self) -> None:
        if not self.game_over:
            self.current_block.move(0, 1)
            if self._is_outside() or not self._fits():
                self.current_block.move(0, -1)

    def move_down(self) -> None:
        """Drop the piece one row, locking it in place if it cannot fall."""
        if not self.game_over:
            self.current_block.move(1, 0)
            if self._is_outside() or not self._fits():
                self.current_block.move(-1, 0)
                self._lock_block()

    def rotate(self) -> None:
        if not self.game_over:
            self.current_block.rotate()
            if self._is_outside() or not self._fits():
                self.current_block.undo_rotate()

    def reset(self) -> None:
        """Clear the grid and score and deal new pieces."""
        self.grid.reset()
        self._bag = self.all_blocks()
        self.current_block = self.random_block()
        self.next_block = self.random_block()
        self.score = 0

    def update_score(self, lines_cleared: int, move_down_points: int) -> None:
        self.score += _LINE_SCORES.get(lines_cleared, 0)
        self.score += move_down_points

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the grid, the falling piece and the preview piece."""
        self.grid.draw(surface)
        self.current_block.draw(surface, 11, 11)
        if self.next_block.id == 3:
            self.next_block.draw(surface, 255, 290)
        elif self.next_block.id == 4:
            self.next_block.draw(surface, 255, 280)
        else:
            self.next_block.draw(surface, 270, 270)

    def _is_outside(self) -> bool:
        return any(
            self.grid.is_cell_outside(tile.row, tile.col)
            for tile in self.current_block.cell_positions()
        )

    def _fits(self) -> bool:
        return all(
            self.grid.is_cell_empty(tile.row, tile.col)
            for tile in self.current_block.cell_positions()
        )

    def _lock_block(self) -> None:
        for tile in self.current_block.cell_positions():
            self.grid[tile.row, tile.col] = self.current_block.id
        self.current_block = self.next_block
        if not self._fits():
            self.game_over = True
        self.next_block = self.random_block()
        self.update_score(self.grid.clear_full_rows(), 0)