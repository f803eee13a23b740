"""Board helpers: grid, obstacles, collide, stamp, sweep"""
from dataclasses import dataclass
from typing import List, Tuple

from tetris_config import GRID_WIDTH, GRID_HEIGHT, EMPTY_COLOR, OBSTACLE_COLOR
from tetris_piece import Piece, Shape
from tetris_rng import BlockRandom


@dataclass(frozen=True)
class Cell:
    value: int = 0
    color: str = EMPTY_COLOR


Row = Tuple[Cell, ...]
Grid = Tuple[Row, ...]


def empty_row() -> Row:
    return tuple(Cell() for _ in range(GRID_WIDTH))


def initialize_grid() -> Grid:
    # one freshly built row per index
    return tuple(empty_row() for _ in range(GRID_HEIGHT))


def set_cell(grid: Grid, row: int, col: int, cell: Cell) -> Grid:
    """Return a copy of grid with one cell replaced; other rows are shared."""
    r = grid[row]
    new_row = r[:col] + (cell,) + r[col+1:]
    return grid[:row] + (new_row,) + grid[row+1:]


def add_obstacle(grid: Grid, rng: BlockRandom) -> Grid:
    row, col = rng.obstacle_cell()
    return set_cell(grid, row, col, Cell(1, OBSTACLE_COLOR))


def collide(grid: Grid, shape: Shape, x: int, y: int, gravity: bool = False) -> bool:
    """Return True if shape at (x, y) hits a wall, the floor or a filled cell.

    gravity=True is the tick's one-row-down probe: cells still above the grid
    pass, and two-row shapes collide as soon as a cell would leave row 0.
    """
    for i, row in enumerate(shape):
        for j, v in enumerate(row):
            if not v:
                continue
            bx, by = x + j, y + i
            if by < 0:
                if gravity:
                    continue
                return True
            if by >= GRID_HEIGHT or bx < 0 or bx >= GRID_WIDTH:
                return True
            if grid[by][bx].value == 1:
                return True
            if gravity and len(shape) == 2 and by - 1 == 0:
                return True
    return False


def grounded(grid: Grid, piece: Piece) -> bool:
    return collide(grid, piece.shape, piece.x, piece.y + 1, gravity=True)


def stamp(grid: Grid, piece: Piece) -> Grid:
    """Copy grid with the piece's cells written in its color."""
    rows: List[List[Cell]] = [list(r) for r in grid]
    for by, bx in piece.cells():
        if 0 <= by < GRID_HEIGHT and 0 <= bx < GRID_WIDTH:
            rows[by][bx] = Cell(1, piece.color)
    return tuple(tuple(r) for r in rows)


def full_rows(grid: Grid) -> List[int]:
    return [y for y, row in enumerate(grid) if all(c.value == 1 for c in row)]


def sweep(grid: Grid) -> Tuple[Grid, int]:
    """Drop full rows, push as many empty rows in at the top, return (grid, cleared)."""
    cleared = full_rows(grid)
    if not cleared:
        return grid, 0
    kept = tuple(row for y, row in enumerate(grid) if y not in cleared)
    fresh = tuple(empty_row() for _ in cleared)
    return fresh + kept, len(cleared)
