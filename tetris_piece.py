"""Piece model, catalog, generator and rotation"""
from dataclasses import dataclass, replace
from typing import Dict, Tuple

from tetris_rng import BlockRandom

Shape = Tuple[Tuple[int, ...], ...]

SHAPES: Dict[str, Shape] = {
    "L": ((0,0,0),
          (1,1,1),
          (1,0,0)),
    "O": ((0,0),
          (1,1),
          (1,1)),
    "I": ((0,0,0,0),
          (0,0,0,0),
          (1,1,1,1),
          (0,0,0,0)),
    "S": ((0,0,0),
          (0,1,1),
          (1,1,0)),
    "Z": ((0,0,0),
          (1,1,0),
          (0,1,1)),
    "T": ((0,0,0),
          (1,1,1),
          (0,1,0)),
    "J": ((0,0,0),
          (1,1,1),
          (0,0,1)),
}

COLORS: Dict[str, str] = {
    "L": "pink",
    "O": "cyan",
    "I": "red",
    "S": "orange",
    "Z": "yellow",
    "T": "purple",
    "J": "forestgreen",
}

KINDS = tuple(SHAPES)


def rotate_cw(m: Shape) -> Shape:
    return tuple(tuple(r) for r in zip(*m[::-1]))


@dataclass(frozen=True)
class Piece:
    t: str
    shape: Shape
    color: str
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self):
        """Yield absolute (row, col) for every occupied cell, including rows above the grid."""
        for i, row in enumerate(self.shape):
            for j, v in enumerate(row):
                if v:
                    yield self.y + i, self.x + j

    @staticmethod
    def spawn(t: str, rng: BlockRandom) -> "Piece":
        s = SHAPES[t]
        # bottom rows enter the grid first
        return Piece(t, s, COLORS[t], rng.column(len(s[0])), -len(s) + 2)


def random_block(rng: BlockRandom) -> Piece:
    return Piece.spawn(rng.choice(KINDS), rng)


def rotate_block(piece: Piece) -> Piece:
    """Quarter turn clockwise; position and color are kept."""
    return replace(piece, shape=rotate_cw(piece.shape))
