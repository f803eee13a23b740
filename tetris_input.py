"""Key bindings, gravity timer and per-frame event ordering"""
from typing import Dict, Iterable, List

import pygame

from tetris_config import TICK_RATE_MS
from tetris_events import Event

TICK_EVENT = pygame.USEREVENT + 1

KEY_BINDINGS: Dict[int, Event] = {
    pygame.K_a: Event.MOVE_LEFT,
    pygame.K_d: Event.MOVE_RIGHT,
    pygame.K_s: Event.MOVE_DOWN,
    pygame.K_w: Event.ROTATE,
    pygame.K_r: Event.RESTART,
}


def start_timer(interval_ms: int = TICK_RATE_MS):
    pygame.time.set_timer(TICK_EVENT, interval_ms)


def translate(raw: Iterable[pygame.event.Event]) -> List[Event]:
    """Turn one frame of pygame events into game events.

    Ticks seen in the frame go first, then commands in arrival order.
    Unbound keys and anything else are dropped.
    """
    ticks: List[Event] = []
    commands: List[Event] = []
    for e in raw:
        if e.type == TICK_EVENT:
            ticks.append(Event.TICK)
        elif e.type == pygame.KEYDOWN and e.key in KEY_BINDINGS:
            commands.append(KEY_BINDINGS[e.key])
    return ticks + commands
