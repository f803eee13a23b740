"""Tagged events and the fold that applies them to a GameState"""
from enum import Enum
from functools import reduce
from typing import Callable, Dict, Iterable

from tetris_rng import BlockRandom
from tetris_state import GameState, new_game, tick, move, rotate


class Event(str, Enum):
    TICK = "TICK"
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"
    MOVE_DOWN = "MOVE_DOWN"
    ROTATE = "ROTATE"
    RESTART = "RESTART"


Handler = Callable[[GameState, BlockRandom], GameState]

HANDLERS: Dict[Event, Handler] = {
    Event.TICK: tick,
    Event.MOVE_LEFT: lambda s, rng: move(s, -1, 0),
    Event.MOVE_RIGHT: lambda s, rng: move(s, 1, 0),
    Event.MOVE_DOWN: lambda s, rng: move(s, 0, 1),
    Event.ROTATE: lambda s, rng: rotate(s),
    # discards the previous state entirely
    Event.RESTART: lambda s, rng: new_game(rng),
}


def apply_event(state: GameState, event: Event, rng: BlockRandom) -> GameState:
    return HANDLERS[event](state, rng)


def fold(state: GameState, events: Iterable[Event], rng: BlockRandom) -> GameState:
    return reduce(lambda s, e: apply_event(s, e, rng), events, state)
