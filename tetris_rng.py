"""Random source for piece kinds, spawn columns and obstacles"""
import random
from typing import Optional, Sequence, Tuple, TypeVar

from tetris_config import GRID_WIDTH, GRID_HEIGHT

T = TypeVar("T")


class BlockRandom:
    """Uniform draws used by the generator and the leveling engine.

    Wraps one ``random.Random`` so a whole game can be replayed from a seed.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._r = random.Random(seed)

    def choice(self, seq: Sequence[T]) -> T:
        return self._r.choice(seq)

    def column(self, width: int) -> int:
        """Spawn column in [0, GRID_WIDTH - width]."""
        return self._r.randint(0, max(0, GRID_WIDTH - width))

    def obstacle_cell(self) -> Tuple[int, int]:
        """Return (row, col) inside the middle 40% band of the grid."""
        band = max(1, int(GRID_HEIGHT * 0.4))
        top = int(GRID_HEIGHT * 0.3)
        return top + self._r.randrange(band), self._r.randrange(GRID_WIDTH)
