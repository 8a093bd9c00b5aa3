# main.py
from typing import Dict, Optional, Tuple
import logging

import pygame # type: ignore

from .config import WIDTH, HEIGHT, UP, DOWN, LEFT, RIGHT, CFG, configure_logging
from .game import GameSession
from .highscore import FileHighscoreStore
from .render import draw_frame, load_fonts

logger = logging.getLogger(__name__)

KEY_TO_HEADING: Dict[int, Tuple[int, int]] = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,  pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,  pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

def heading_for_key(key: int) -> Optional[Tuple[int, int]]:
    return KEY_TO_HEADING.get(key)

def handle_event(session: GameSession, event: pygame.event.Event) -> bool:
    """Apply one event to the session. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if session.is_over:
            if event.key == pygame.K_r:
                session.reset()
        else:
            heading = heading_for_key(event.key)
            if heading is not None:
                session.redirect(heading)
    return True

def handle_input(session: GameSession) -> bool:
    """Drain the event queue. Return False to quit."""
    running = True
    for event in pygame.event.get():
        running = handle_event(session, event) and running
    return running

def main():
    configure_logging()
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    hud_font, info_font = load_fonts()

    session = GameSession(config=CFG, store=FileHighscoreStore(CFG.highscore_path))
    logger.info("Starting; high score %d", session.highscore)
    running = True

    while running:
        # 1) input
        running = handle_input(session)
        if not running:
            break

        # 2) update (paced by wall clock, not frame rate)
        dt = clock.tick(CFG.fps) / 1000.0
        session.update(dt)

        # 3) render
        draw_frame(screen, session, hud_font, info_font)
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
