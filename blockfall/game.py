"""Game state: the field, the falling piece, the queue of pieces and the score."""

from __future__ import annotations

import random
from collections.abc import Callable

import pygame

from blockfall.block import Block, all_blocks
from blockfall.grid import GRID_OFFSET, Grid

SoundPlayer = Callable[[str], None]

ROTATE_SOUND = "rotate"
CLEAR_SOUND = "clear"

_LINE_POINTS = {1: 100, 2: 300, 3: 500}


def _silent(_name: str) -> None:
    """Sound player that plays nothing."""


class Game:
    """A running game: moves, rotates and locks pieces, clears rows and keeps score."""

    def __init__(
        self,
        rng: random.Random | None = None,
        play_sound: SoundPlayer | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._play_sound = play_sound if play_sound is not None else _silent
        self.grid = Grid()
        self._blocks: list[Block] = all_blocks()
        self.current_block = self._get_random_block()
        self.next_block = self._get_random_block()
        self.game_over = False
        self.score = 0

    def _get_random_block(self) -> Block:
        if not self._blocks:
            self._blocks = all_blocks()
        return self._blocks.pop(self._rng.randrange(len(self._blocks)))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the field, the falling piece and the preview of the next piece."""
        self.grid.draw(surface)
        self.current_block.draw(surface, GRID_OFFSET, GRID_OFFSET)
        if self.next_block.id == 3:
            self.next_block.draw(surface, 255, 290)
        elif self.next_block.id == 4:
            self.next_block.draw(surface, 255, 280)
        else:
            self.next_block.draw(surface, 270, 270)

    def handle_input(self, key: int | None) -> None:
        """React to a pressed key; any key restarts a finished game."""
        if not key:
            return
        if self.game_over:
            self.game_over = False
            self.reset()
        if key == pygame.K_LEFT:
            self.move_block_left()
        elif key == pygame.K_RIGHT:
            self.move_block_right()
        elif key == pygame.K_DOWN:
            self.move_block_down()
            self.update_score(0, 1)
        elif key == pygame.K_UP:
            self.rotate_block()

    def _try_move(self, rows: int, columns: int) -> bool:
        """Move the falling piece; undo it and return False if it does not fit."""
        self.current_block.move(rows, columns)
        if self._is_block_outside() or not self._block_fits():
            self.current_block.move(-rows, -columns)
            return False
        return True

    def move_block_left(self) -> None:
        """Shift the falling piece one column left if there is room."""
        if not self.game_over:
            self._try_move(0, -1)

    def move_block_right(self) -> None:
        """Shift the falling piece one column right if there is room."""
        if not self.game_over:
            self._try_move(0, 1)

    def move_block_down(self) -> None:
        """Drop the falling piece one row, locking it in place if it cannot fall."""
        if not self.game_over and not self._try_move(1, 0):
            self._lock_block()

    def rotate_block(self) -> None:
        """Rotate the falling piece if the rotated piece fits."""
        if self.game_over:
            return
        self.current_block.rotate()
        if self._is_block_outside() or not self._block_fits():
            self.current_block.undo_rotation()
        else:
            self._play_sound(ROTATE_SOUND)

    def _is_block_outside(self) -> bool:
        return any(
            self.grid.is_cell_outside(pos.row, pos.column)
            for pos in self.current_block.cell_positions()
        )

    def _block_fits(self) -> bool:
        return all(
            self.grid.is_cell_empty(pos.row, pos.column)
            for pos in self.current_block.cell_positions()
        )

    def _lock_block(self) -> None:
        for pos in self.current_block.cell_positions():
            self.grid.cells[pos.row][pos.column] = self.current_block.id
        self.current_block = self.next_block
        if not self._block_fits():
            self.game_over = True
        self.next_block = self._get_random_block()
        rows_cleared = self.grid.clear_full_rows()
        if rows_cleared > 0:
            self._play_sound(CLEAR_SOUND)
            self.update_score(rows_cleared, 0)

    def reset(self) -> None:
        """Start over with an empty field, a fresh set of pieces and no score."""
        self.grid.initialize()
        self._blocks = all_blocks()
        self.current_block = self._get_random_block()
        self.next_block = self._get_random_block()
        self.score = 0

    def update_score(self, lines_cleared: int, move_down_points: int) -> None:
        """Add points for cleared lines and for moving the piece down."""
        self.score += _LINE_POINTS.get(lines_cleared, 0)
        self.score += move_down_points