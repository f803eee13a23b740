"""Game session: the single running state plus its side effects"""
import logging
from typing import Iterable, Optional

from tetris_config import CONFIG
from tetris_events import Event, apply_event
from tetris_rng import BlockRandom
from tetris_state import GameState, new_game
from tetris_store import BestScoreStore, MemoryBestScore

log = logging.getLogger(__name__)


class Game:
    """
    Serial consumer of events.

    Events are applied one at a time, in the order given, to one GameState.
    The reducer stays pure; the only side effect kept here is offering the
    score to the best-score store when a game ends.
    """

    def __init__(self, store: Optional[BestScoreStore] = None, rng: Optional[BlockRandom] = None):
        self.store = store if store is not None else MemoryBestScore()
        self.rng = rng if rng is not None else BlockRandom(CONFIG["SEED"])
        self.state: GameState = new_game(self.rng)

    def dispatch(self, event: Event) -> GameState:
        prev = self.state
        self.state = apply_event(prev, event, self.rng)
        if event is Event.RESTART:
            log.info("restart")
        elif self.state.game_over and not prev.game_over:
            self.store.set_if_greater(self.state.score)
        return self.state

    def restart(self) -> GameState:
        return self.dispatch(Event.RESTART)

    def run(self, events: Iterable[Event]) -> GameState:
        for e in events:
            self.dispatch(e)
        return self.state
