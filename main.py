import logging
import pygame, sys
from blocks_config import CONFIG
from blocks_engine import Command, Game
from blocks_input import command_for_key
from blocks_layout import compute_dims
from blocks_render import Renderer
from blocks_timer import TickScheduler

logger = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def handle_key(game, scheduler, key):
    command = command_for_key(key)
    if command is None:
        return
    accepted = game.dispatch(command)
    # Restarting re-arms the timer from zero
    if command in (Command.START, Command.RESTART) and accepted:
        scheduler.reset()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    game = Game()
    dims = compute_dims(game.cols, game.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 30)

    render = Renderer(dims, font, big_font, game.rows, game.cols)
    scheduler = TickScheduler(game)
    clock = pygame.time.Clock()
    logger.info("window %dx%d, board %dx%d", dims.total_w, dims.total_h, game.cols, game.rows)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                handle_key(game, scheduler, e.key)

        scheduler.update(dt)

        render.draw(screen, game.snapshot())
        pygame.display.flip()


if __name__ == '__main__':
    main()
