import pytest

pygame = pytest.importorskip("pygame")

from tetris_board import Cell, set_cell
from tetris_config import CONFIG, GRID_HEIGHT, GRID_WIDTH
from tetris_events import Event
from tetris_input import KEY_BINDINGS, TICK_EVENT, translate
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_state import GameState

from helpers import grid_with, piece


class StubFont:
    def render(self, text, antialias, color):
        return pygame.Surface((max(1, len(text) * 6), 12))


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_bindings_cover_all_commands():
    assert set(KEY_BINDINGS.values()) == set(Event) - {Event.TICK}


def test_translate_puts_ticks_before_commands():
    raw = [
        key(pygame.K_a),
        pygame.event.Event(TICK_EVENT),
        key(pygame.K_w),
        key(pygame.K_q),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_a),
        pygame.event.Event(TICK_EVENT),
        key(pygame.K_r),
    ]
    assert translate(raw) == [Event.TICK, Event.TICK, Event.MOVE_LEFT, Event.ROTATE, Event.RESTART]


def test_layout_follows_grid_and_cell_size():
    d = compute_dims()
    assert d.board_w == GRID_WIDTH * CONFIG["CELL_SIZE"]
    assert d.board_h == GRID_HEIGHT * CONFIG["CELL_SIZE"]
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_w >= d.panel_x + d.preview_w


def test_render_draws_cells_and_leaves_state_alone():
    d = compute_dims()
    grid = set_cell(grid_with({}), GRID_HEIGHT - 1, 0, Cell(1, "red"))
    state = GameState(grid, 50, piece("T", 3, 5), piece("O", 0, -2))
    screen = pygame.Surface((d.total_w, d.total_h))
    render = RenderAssets(d, StubFont())

    render.draw(screen, state, best=80)
    px = (d.board_x + d.cell // 2, d.board_y + (GRID_HEIGHT - 1) * d.cell + d.cell // 2)
    assert screen.get_at(px) == pygame.Color("red")
    # T occupies row 6, col 3
    tx = (d.board_x + 3 * d.cell + d.cell // 2, d.board_y + 6 * d.cell + d.cell // 2)
    assert screen.get_at(tx) == pygame.Color("purple")
    assert state.grid is grid

    before = pygame.image.tostring(screen, "RGB")
    render.draw(screen, state, best=80)
    assert pygame.image.tostring(screen, "RGB") == before


def test_render_game_over_overlay_dims_board():
    d = compute_dims()
    state = GameState(grid_with({}), 0, piece("T", 3, 5), piece("O", 0, -2), game_over=True)
    screen = pygame.Surface((d.total_w, d.total_h))
    RenderAssets(d, StubFont()).draw(screen, state, best=0)
    tx = (d.board_x + 3 * d.cell + d.cell // 2, d.board_y + 6 * d.cell + d.cell // 2)
    assert screen.get_at(tx) != pygame.Color("purple")
