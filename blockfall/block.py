"""Falling pieces and their rotation states."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar

import pygame

from blockfall.colors import get_cell_colors
from blockfall.position import Position

CELL_SIZE = 30


def _shape(*cells: tuple[int, int]) -> tuple[Position, ...]:
    return tuple(Position(row, column) for row, column in cells)


class Block:
    """A piece made of cells, with a rotation state and an offset on the grid."""

    id: ClassVar[int] = 0
    cells: ClassVar[Mapping[int, tuple[Position, ...]]] = {}
    spawn_offset: ClassVar[tuple[int, int]] = (0, 0)

    def __init__(self) -> None:
        self.cell_size = CELL_SIZE
        self.rotation_state = 0
        self.row_offset = 0
        self.column_offset = 0
        self.move(*self.spawn_offset)

    def draw(self, surface: pygame.Surface, offset_x: int, offset_y: int) -> None:
        """Draw the block's cells onto the surface at the given pixel offset."""
        color = get_cell_colors()[self.id]
        size = self.cell_size
        for pos in self.cell_positions():
            rect = pygame.Rect(
                pos.column * size + offset_x, pos.row * size + offset_y, size - 1, size - 1
            )
            pygame.draw.rect(surface, color, rect)

    def move(self, rows: int, columns: int) -> None:
        """Shift the block by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def cell_positions(self) -> list[Position]:
        """Return the grid positions the block currently occupies."""
        return [
            pos.moved(self.row_offset, self.column_offset)
            for pos in self.cells.get(self.rotation_state, ())
        ]

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        if self.cells:
            self.rotation_state = (self.rotation_state + 1) % len(self.cells)

    def undo_rotation(self) -> None:
        """Go back to the previous rotation state, wrapping around."""
        if self.cells:
            self.rotation_state = (self.rotation_state - 1) % len(self.cells)


class LBlock(Block):
    id = 1
    cells = {
        0: _shape((0, 2), (1, 0), (1, 1), (1, 2)),
        1: _shape((0, 1), (1, 1), (2, 1), (2, 2)),
        2: _shape((1, 0), (1, 1), (1, 2), (2, 0)),
        3: _shape((0, 0), (0, 1), (1, 1), (2, 1)),
    }
    spawn_offset = (0, 3)


class JBlock(Block):
    id = 2
    cells = {
        0: _shape((0, 0), (1, 0), (1, 1), (1, 2)),
        1: _shape((0, 1), (0, 2), (1, 1), (2, 1)),
        2: _shape((1, 0), (1, 1), (1, 2), (2, 2)),
        3: _shape((0, 1), (1, 1), (2, 0), (2, 1)),
    }
    spawn_offset = (0, 3)


class IBlock(Block):
    id = 3
    cells = {
        0: _shape((1, 0), (1, 1), (1, 2), (1, 3)),
        1: _shape((0, 2), (1, 2), (2, 2), (3, 2)),
        2: _shape((2, 0), (2, 1), (2, 2), (2, 3)),
        3: _shape((0, 1), (1, 1), (2, 1), (3, 1)),
    }
    spawn_offset = (-1, 3)


class OBlock(Block):
    id = 4
    cells = {
        0: _shape((0, 0), (0, 1), (1, 0), (1, 1)),
    }
    spawn_offset = (0, 4)


class SBlock(Block):
    id = 5
    cells = {
        0: _shape((0, 1), (0, 2), (1, 0), (1, 1)),
        1: _shape((0, 1), (1, 1), (1, 2), (2, 2)),
        2: _shape((1, 1), (1, 2), (2, 0), (2, 1)),
        3: _shape((0, 0), (1, 0), (1, 1), (2, 1)),
    }
    spawn_offset = (0, 3)


class TBlock(Block):
    id = 6
    cells = {
        0: _shape((0, 1), (1, 0), (1, 1), (1, 2)),
        1: _shape((0, 1), (1, 1), (1, 2), (2, 1)),
        2: _shape((1, 0), (1, 1), (1, 2), (2, 1)),
        3: _shape((0, 1), (1, 0), (1, 1), (2, 1)),
    }
    spawn_offset = (0, 3)


class ZBlock(Block):
    id = 7
    cells = {
        0: _shape((0, 0), (0, 1), (1, 1), (1, 2)),
        1: _shape((0, 2), (1, 1), (1, 2), (2, 1)),
        2: _shape((1, 0), (1, 1), (2, 1), (2, 2)),
        3: _shape((0, 1), (1, 0), (1, 1), (2, 0)),
    }
    spawn_offset = (0, 3)


def all_blocks() -> list[Block]:
    """Return one fresh block of every kind."""
    return [IBlock(), JBlock(), LBlock(), OBlock(), SBlock(), TBlock(), ZBlock()]