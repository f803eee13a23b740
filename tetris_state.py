"""
Game state and the tick/command reducer.

Every function here takes a GameState and returns a GameState; nothing is
mutated in place. A tick runs, in order:

  1. game over if the piece is blocked one row down while still at y == -1
  2. row clear (score + shift of the active piece)
  3. level-up obstacle
  4. lock the piece if it is blocked one row down
  5. gravity step

and stops at the first step that produces a new state. Commands (move,
rotate) only ever change the active piece and are dropped when they collide.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from tetris_board import (Grid, initialize_grid, add_obstacle, collide,
                          grounded, stamp, sweep)
from tetris_config import POINTS_PER_ROW, SCORE_PER_LEVEL
from tetris_piece import Piece, random_block, rotate_block
from tetris_rng import BlockRandom

log = logging.getLogger(__name__)


def calculate_level(score: int) -> int:
    return score // SCORE_PER_LEVEL + 1


@dataclass(frozen=True)
class GameState:
    grid: Grid
    score: int
    current_tetromino: Piece
    next_tetromino: Piece
    game_over: bool = False
    # highest level that already received its obstacle
    obstacle_level: int = 1

    @property
    def level(self) -> int:
        return calculate_level(self.score)


def new_game(rng: BlockRandom) -> GameState:
    return GameState(
        grid=initialize_grid(),
        score=0,
        current_tetromino=random_block(rng),
        next_tetromino=random_block(rng),
    )


def clear_rows(state: GameState) -> Optional[GameState]:
    """Return the state after clearing full rows, or None when no row is full."""
    grid, cleared = sweep(state.grid)
    if not cleared:
        return None
    log.debug("cleared %d row(s)", cleared)
    cur = state.current_tetromino
    return replace(
        state,
        grid=grid,
        score=state.score + cleared * POINTS_PER_ROW,
        current_tetromino=replace(cur, y=cur.y + cleared),
    )


def level_up(state: GameState, rng: BlockRandom) -> Optional[GameState]:
    """One obstacle per level-up, however many levels the score jumped."""
    level = state.level
    if level <= state.obstacle_level:
        return None
    log.info("level %d reached", level)
    return replace(state, grid=add_obstacle(state.grid, rng), obstacle_level=level)


def handle_collision(state: GameState, rng: BlockRandom) -> GameState:
    """Lock the active piece into the grid and promote the next one."""
    if state.game_over:
        return state
    log.debug("locking %s at x=%d y=%d", state.current_tetromino.t,
              state.current_tetromino.x, state.current_tetromino.y)
    return replace(
        state,
        grid=stamp(state.grid, state.current_tetromino),
        current_tetromino=state.next_tetromino,
        next_tetromino=random_block(rng),
    )


def tick(state: GameState, rng: BlockRandom) -> GameState:
    if state.game_over:
        return state

    cur = state.current_tetromino
    blocked = grounded(state.grid, cur)

    if blocked and cur.y == -1:
        log.info("game over with score %d", state.score)
        return replace(state, game_over=True)

    cleared = clear_rows(state)
    if cleared is not None:
        return cleared

    leveled = level_up(state, rng)
    if leveled is not None:
        return leveled

    if blocked:
        return handle_collision(state, rng)

    return replace(state, current_tetromino=replace(cur, y=cur.y + 1))


def move(state: GameState, dx: int, dy: int) -> GameState:
    if state.game_over:
        return state
    cur = state.current_tetromino
    if collide(state.grid, cur.shape, cur.x + dx, cur.y + dy):
        return state
    return replace(state, current_tetromino=replace(cur, x=cur.x + dx, y=cur.y + dy))


def rotate(state: GameState) -> GameState:
    if state.game_over:
        return state
    turned = rotate_block(state.current_tetromino)
    if collide(state.grid, turned.shape, turned.x, turned.y):
        return state
    return replace(state, current_tetromino=turned)
