from tetris_board import Cell, initialize_grid
from tetris_config import GRID_WIDTH
from tetris_piece import COLORS, SHAPES, Piece


def filled_row(color="blue", hole=None):
    return tuple(Cell() if x == hole else Cell(1, color) for x in range(GRID_WIDTH))


def grid_with(rows):
    grid = list(initialize_grid())
    for y, row in rows.items():
        grid[y] = row
    return tuple(grid)


def piece(t, x, y, shape=None):
    return Piece(t, shape or SHAPES[t], COLORS[t], x, y)


def occupied(grid):
    return [(y, x) for y, row in enumerate(grid) for x, c in enumerate(row) if c.value]
