import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import TICK_EVENT, start_timer, translate
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import BlockRandom
from tetris_store import JsonBestScore

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris - Obstacles")
    font = pygame.font.SysFont(None, 22)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    store = JsonBestScore()
    game = Game(store, BlockRandom(CONFIG["SEED"]))
    log.info("best score so far: %d", store.get())
    start_timer()

    while True:
        clock.tick(CONFIG["FPS"])
        raw = pygame.event.get()
        for e in raw:
            if e.type == pygame.QUIT:
                store.set_if_greater(game.state.score)
                pygame.quit(); sys.exit()

        # one serial fold over this frame's events
        game.run(translate(raw))

        store.set_if_greater(game.state.score)
        render.draw(screen, game.state, store.get())
        pygame.display.flip()


if __name__ == '__main__':
    main()
