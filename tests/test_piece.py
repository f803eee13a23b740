from tetris_config import GRID_HEIGHT, GRID_WIDTH
from tetris_piece import COLORS, KINDS, SHAPES, random_block, rotate_block, rotate_cw
from tetris_rng import BlockRandom

from helpers import piece


def test_catalog_has_seven_colored_pieces():
    assert sorted(KINDS) == ["I", "J", "L", "O", "S", "T", "Z"]
    assert set(COLORS) == set(SHAPES)
    for shape in SHAPES.values():
        assert sum(map(sum, shape)) == 4


def test_four_rotations_return_original_shape():
    for t in KINDS:
        p = piece(t, 3, 4)
        q = p
        for _ in range(4):
            q = rotate_block(q)
        assert q.shape == p.shape


def test_rotation_keeps_position_and_color():
    p = piece("T", 3, 4)
    q = rotate_block(p)
    assert (q.x, q.y, q.color, q.t) == (3, 4, p.color, "T")
    assert q.shape == ((0, 1, 0), (1, 1, 0), (0, 1, 0))


def test_rectangular_o_rotates():
    assert rotate_cw(SHAPES["O"]) == ((1, 1, 0), (1, 1, 0))


def test_random_block_spawns_in_legal_column_above_grid():
    for seed in range(200):
        p = random_block(BlockRandom(seed))
        assert 0 <= p.x <= GRID_WIDTH - p.width
        assert p.y == -p.height + 2
        for row, col in p.cells():
            assert row < GRID_HEIGHT
            assert 0 <= col < GRID_WIDTH


def test_same_seed_same_pieces():
    a, b = BlockRandom(42), BlockRandom(42)
    assert [random_block(a) for _ in range(10)] == [random_block(b) for _ in range(10)]
