import pygame
import pytest

from app import App, InitError
from config import Settings, build_colors
from controls import Outcome
from scanner import GameEntry
from ui import visible_count


def _entries(n=3):
    return [GameEntry(path=f"games/g{i}.z5", name=f"g{i}") for i in range(n)]


@pytest.fixture
def app(font_path):
    launcher_app = App(_entries(), Settings(font_paths=[font_path]), build_colors({}))
    try:
        yield launcher_app
    finally:
        launcher_app.shutdown()


def test_missing_fonts_raise_init_error(tmp_path):
    with pytest.raises(InitError):
        App(_entries(), Settings(font_paths=[str(tmp_path / "missing.ttf")]), build_colors({}))
    pygame.quit()


def test_run_stops_on_confirm_after_moving(app):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))

    assert app.run() is Outcome.CONFIRM
    assert app.state.selected == 1
    assert app.state.selected_entry.path == "games/g1.z5"


def test_run_stops_on_window_close(app):
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    assert app.run() is Outcome.QUIT
    assert app.state.selected == 0


def test_visible_count_follows_surface_height(app):
    assert app.visible_count() == visible_count(app.screen.get_height())
    assert app.visible_count() == 12
