"""Window, main loop and rendering of the game."""

from __future__ import annotations

import argparse
import time

import pygame

from .colors import DARK_BLUE, LIGHT_BLUE, WHITE
from .game import Action, Game

WINDOW_SIZE = (500, 620)
FONT_PATH = "Font/monogram.ttf"
FONT_SIZE = 38
FALL_INTERVAL = 0.2
FPS = 60

_KEYS = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_UP: Action.ROTATE,
}


class EventTimer:
    """Fires once each time at least an interval has passed since it last fired."""

    def __init__(self, interval: float, last: float = 0.0) -> None:
        self.interval = interval
        self.last = last

    def triggered(self, now: float) -> bool:
        if now - self.last >= self.interval:
            self.last = now
            return True
        return False


def _load_font(path: str) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, FONT_SIZE)
    except (OSError, pygame.error):
        return pygame.font.Font(None, FONT_SIZE)


def _rounded_rect(surface: pygame.Surface, rect: tuple[int, int, int, int]) -> None:
    radius = int(0.3 * min(rect[2], rect[3]) / 2)
    pygame.draw.rect(surface, LIGHT_BLUE, rect, border_radius=radius)


def _render(screen: pygame.Surface, font: pygame.font.Font, game: Game) -> None:
    screen.fill(DARK_BLUE)
    screen.blit(font.render("Score", True, WHITE), (365, 15))
    screen.blit(font.render("Next", True, WHITE), (370, 175))
    if game.game_over:
        screen.blit(font.render("GAME OVER", True, WHITE), (320, 450))
    _rounded_rect(screen, (320, 55, 170, 60))
    score = font.render(str(game.score), True, WHITE)
    screen.blit(score, (320 + (170 - score.get_width()) // 2, 65))
    _rounded_rect(screen, (320, 215, 170, 180))
    game.draw(screen)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="tetrix", description="Falling-block puzzle game.")
    parser.add_argument("--font", default=FONT_PATH, help="path of a TrueType font")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("tetrix")
        clock = pygame.time.Clock()
        font = _load_font(args.font)
        game = Game()
        timer = EventTimer(FALL_INTERVAL)
        start = time.perf_counter()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.handle_input(_KEYS.get(event.key, Action.OTHER))
            if not running:
                break
            if timer.triggered(time.perf_counter() - start):
                game.move_down()
            _render(screen, font, game)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0