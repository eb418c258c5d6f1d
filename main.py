import argparse
import logging
import sys

import pygame

from tower_config import CONFIG
from tower_input import InputCollector, soft_drop_held
from tower_layout import compute_dims
from tower_render import RenderAssets
from tower_session import Session

log = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle (pygame front end)")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="seed for the piece bag")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    p.add_argument("--fps", type=int, default=CONFIG["FPS"])
    p.add_argument("--touch", action="store_true", default=CONFIG["TOUCH_CONTROLS"],
                   help="show on-screen buttons")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"])
    return p.parse_args(argv)


def apply_args(args):
    CONFIG["SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["FPS"] = args.fps
    CONFIG["TOUCH_CONTROLS"] = args.touch
    CONFIG["LOG_LEVEL"] = args.log_level.upper()


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP,
                              pygame.FINGERDOWN, pygame.FINGERUP, pygame.FINGERMOTION])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tower")
    font = pygame.font.SysFont(None, 20)
    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    session = Session(seed=CONFIG["SEED"])
    collector = InputCollector()
    log.info("starting: seed=%s cell=%d fps=%d", CONFIG["SEED"], dims.cell, CONFIG["FPS"])

    while True:
        clock.tick(CONFIG["FPS"])
        events = pygame.event.get()
        if any(e.type == pygame.QUIT for e in events):
            pygame.quit(); sys.exit()
        collector.feed(events, dims.total_w, dims.total_h)

        soft = soft_drop_held(pygame.key.get_pressed()) or collector.touch_soft_drop(dims.total_w, dims.total_h)
        session.step(collector.drain(), soft)

        render.draw(screen, session.snapshot())
        pygame.display.flip()


if __name__ == '__main__':
    main()
