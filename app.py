from typing import Any

import pygame

from config import Colors, Settings
from constants import FONT_SIZE, FPS, TITLE_FONT_SIZE, WINDOW_H, WINDOW_TITLE, WINDOW_W
from controls import Outcome, dispatch_events
from navigation import NavigationState
from scanner import GameEntry
from ui import Fonts, draw_launcher, visible_count
from utils import load_font


class InitError(RuntimeError):
    """pygame, the window or the fonts could not be brought up."""


class App:
    def __init__(self, entries: list[GameEntry], settings: Settings, colors: Colors):
        self.settings = settings
        self.colors = colors
        self.state = NavigationState(entries=list(entries))

        # ── Pygame init ────────────────────────────────────────────────────
        try:
            pygame.init()
            pygame.joystick.init()

            self.joysticks: list[Any] = []
            for i in range(pygame.joystick.get_count()):
                j = pygame.joystick.Joystick(i)
                j.init()
                self.joysticks.append(j)
                print(f"Gamepad detected: {j.get_name()}")

            flags = (pygame.FULLSCREEN | pygame.SCALED) if settings.fullscreen else 0
            self.screen = pygame.display.set_mode((WINDOW_W, WINDOW_H), flags)
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as e:
            raise InitError(f"Display init failed: {e}") from e
        self.clock = pygame.time.Clock()

        # ── Fonts ──────────────────────────────────────────────────────────
        body = load_font(settings.font_paths, FONT_SIZE)
        title = load_font(settings.font_paths, TITLE_FONT_SIZE)
        if body is None or title is None:
            raise InitError("Failed to load fonts")
        self.fonts = Fonts(body=body, title=title)

    def visible_count(self) -> int:
        return visible_count(self.screen.get_height())

    def draw(self) -> None:
        draw_launcher(self.screen, self.fonts, self.state, self.colors)
        pygame.display.flip()

    def run(self) -> Outcome:
        """Draw and poll until the user confirms a game or quits."""
        while True:
            self.draw()
            outcome = dispatch_events(pygame.event.get(), self.state, self.visible_count())
            if outcome is not Outcome.CONTINUE:
                return outcome
            self.clock.tick(FPS)

    def shutdown(self) -> None:
        pygame.quit()
