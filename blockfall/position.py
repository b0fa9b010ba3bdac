"""Cell coordinates on the playing field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A row/column coordinate of a single cell."""

    row: int
    column: int

    def moved(self, rows: int, columns: int) -> Position:
        """Return a new position shifted by the given number of rows and columns."""
        return Position(self.row + rows, self.column + columns)