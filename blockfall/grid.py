"""The playing field of settled cells."""

from __future__ import annotations

import pygame

from blockfall.colors import get_cell_colors

GRID_OFFSET = 11


class Grid:
    """A fixed-size field of cells; 0 marks an empty cell, otherwise a block id."""

    def __init__(self, num_rows: int = 20, num_cols: int = 10, cell_size: int = 30) -> None:
        self.num_rows = num_rows
        self.num_cols = num_cols
        self.cell_size = cell_size
        self.cells: list[list[int]] = []
        self.initialize()

    def initialize(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.num_cols for _ in range(self.num_rows)]

    def render_text(self) -> str:
        """Return the field as text, one line per row of space-separated values."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.cells
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every cell onto the surface."""
        palette = get_cell_colors()
        size = self.cell_size
        for row_index, row in enumerate(self.cells):
            for column_index, value in enumerate(row):
                rect = pygame.Rect(
                    column_index * size + GRID_OFFSET,
                    row_index * size + GRID_OFFSET,
                    size - 1,
                    size - 1,
                )
                pygame.draw.rect(surface, palette[value], rect)

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Return True if the coordinate lies outside the field."""
        return not (0 <= row < self.num_rows and 0 <= column < self.num_cols)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Return True if the cell holds no block; raise IndexError outside the field."""
        if self.is_cell_outside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return self.cells[row][column] == 0

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many were cleared."""
        completed = 0
        for row in reversed(range(self.num_rows)):
            if self._is_row_full(row):
                self._clear_row(row)
                completed += 1
            elif completed:
                self._move_row_down(row, completed)
        return completed

    def _is_row_full(self, row: int) -> bool:
        return all(self.cells[row])

    def _clear_row(self, row: int) -> None:
        self.cells[row] = [0] * self.num_cols

    def _move_row_down(self, row: int, distance: int) -> None:
        self.cells[row + distance] = self.cells[row]
        self.cells[row] = [0] * self.num_cols