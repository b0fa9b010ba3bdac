import pygame
import pytest

from blockfall.block import (
    Block,
    IBlock,
    JBlock,
    LBlock,
    OBlock,
    SBlock,
    TBlock,
    ZBlock,
    all_blocks,
)
from blockfall.colors import get_cell_colors
from blockfall.position import Position

BLOCK_TYPES = [IBlock, JBlock, LBlock, OBlock, SBlock, TBlock, ZBlock]
BLOCK_INDICES = list(range(7))


def test_all_blocks_order_and_ids():
    assert [block.id for block in all_blocks()] == [3, 2, 1, 4, 5, 6, 7]


def test_all_blocks_are_fresh_instances():
    first = all_blocks()
    second = all_blocks()
    first[0].move(5, 0)
    assert second[0].cell_positions() == IBlock().cell_positions()


@pytest.mark.parametrize("index", BLOCK_INDICES)
def test_every_rotation_has_four_cells(index):
    block = all_blocks()[index]
    for _ in range(len(block.cells)):
        assert len(set(block.cell_positions())) == 4
        block.rotate()


@pytest.mark.parametrize("kind", BLOCK_TYPES)
def test_each_id_has_a_colour(kind):
    assert 0 < kind.id < len(get_cell_colors())


@pytest.mark.parametrize("index", BLOCK_INDICES)
def test_spawn_position_is_inside_field(index):
    block = all_blocks()[index]
    positions = block.cell_positions()
    assert len(positions) == 4
    for pos in positions:
        assert pos.row >= 0
        assert 0 <= pos.column < 10


def test_lblock_spawn_positions():
    block = LBlock()
    assert block.cell_positions() == [
        Position(0, 5),
        Position(1, 3),
        Position(1, 4),
        Position(1, 5),
    ]


def test_iblock_spawn_shifts_up_one_row():
    block = IBlock()
    expected = [pos.moved(-1, 3) for pos in IBlock.cells[0]]
    assert block.cell_positions() == expected


@pytest.mark.parametrize("index", BLOCK_INDICES)
def test_full_rotation_cycle_returns_to_start(index):
    block = all_blocks()[index]
    start = block.cell_positions()
    for _ in range(len(block.cells)):
        block.rotate()
    assert block.cell_positions() == start


@pytest.mark.parametrize("index", BLOCK_INDICES)
def test_undo_rotation_reverses_rotate(index):
    block = all_blocks()[index]
    start = block.cell_positions()
    block.rotate()
    block.undo_rotation()
    assert block.cell_positions() == start


@pytest.mark.parametrize("index", BLOCK_INDICES)
def test_undo_from_start_wraps_to_last_state(index):
    block = all_blocks()[index]
    block.undo_rotation()
    assert block.rotation_state == len(block.cells) - 1


def test_oblock_rotation_is_stationary():
    block = OBlock()
    start = block.cell_positions()
    block.rotate()
    assert block.cell_positions() == start


def test_rotate_changes_shape():
    block = TBlock()
    start = block.cell_positions()
    block.rotate()
    assert set(block.cell_positions()) != set(start)
    assert block.rotation_state == 1


def test_move_shifts_all_cells():
    block = ZBlock()
    start = block.cell_positions()
    block.move(2, -1)
    assert block.cell_positions() == [pos.moved(2, -1) for pos in start]


def test_move_round_trip():
    block = SBlock()
    start = block.cell_positions()
    block.move(4, 2)
    block.move(-4, -2)
    assert block.cell_positions() == start


def test_bare_block_has_no_cells():
    block = Block()
    block.rotate()
    block.undo_rotation()
    assert block.cell_positions() == []


def test_draw_paints_block_cells():
    surface = pygame.Surface((400, 700))
    block = JBlock()
    block.draw(surface, 11, 11)
    color = get_cell_colors()[block.id]
    for pos in block.cell_positions():
        x = pos.column * block.cell_size + 11 + 1
        y = pos.row * block.cell_size + 11 + 1
        assert tuple(surface.get_at((x, y))) == color


def test_draw_leaves_gap_between_cells():
    surface = pygame.Surface((400, 700))
    block = OBlock()
    block.draw(surface, 0, 0)
    first = block.cell_positions()[0]
    gap_x = first.column * block.cell_size + block.cell_size - 1
    gap_y = first.row * block.cell_size + 1
    assert tuple(surface.get_at((gap_x, gap_y))) == (0, 0, 0, 255)