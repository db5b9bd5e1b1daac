import os
from dataclasses import dataclass, field
from typing import cast

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from constants import (
    DEFAULT_BAR_COLOR,
    DEFAULT_BG_COLOR,
    DEFAULT_HIGHLIGHT,
    DEFAULT_HIGHLIGHT_TEXT,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TITLE_COLOR,
    FONT_PATHS,
    GAMES_DIR,
    INTERPRETER,
)

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_FILE = os.path.join(SCRIPT_DIR, "config.toml")

DEFAULT_CONFIG = {
    "settings": {
        "games_dir": GAMES_DIR,
        "interpreter": INTERPRETER,
        "fullscreen": False,
    }
}


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Convert a '#rrggbb' string to an (r, g, b) tuple."""
    h = hex_str.strip().lstrip("#")
    if len(h) != 6:
        raise ValueError(f"expected #rrggbb, got {hex_str!r}")
    return cast(tuple[int, int, int], tuple(int(h[i : i + 2], 16) for i in (0, 2, 4)))


def load_config(path: str = CONFIG_FILE) -> dict:
    if os.path.exists(path):
        with open(path, "rb") as f:
            return tomllib.load(f)
    return DEFAULT_CONFIG


@dataclass
class Colors:
    bg: tuple
    text: tuple
    highlight: tuple
    highlight_text: tuple
    title: tuple
    bar: tuple


def build_colors(config: dict) -> Colors:
    """Build a Colors instance from config, falling back to defaults for any missing keys."""
    cfg = config.get("colors", {})

    def get(key, default):
        if key in cfg:
            try:
                return hex_to_rgb(cfg[key])
            except (AttributeError, ValueError) as e:
                print(f"Invalid color for '{key}': {e}")
        return default

    return Colors(
        bg=get("bg", DEFAULT_BG_COLOR),
        text=get("text", DEFAULT_TEXT_COLOR),
        highlight=get("highlight", DEFAULT_HIGHLIGHT),
        highlight_text=get("highlight_text", DEFAULT_HIGHLIGHT_TEXT),
        title=get("title", DEFAULT_TITLE_COLOR),
        bar=get("bar", DEFAULT_BAR_COLOR),
    )


@dataclass
class Settings:
    games_dir: str = GAMES_DIR
    interpreter: str = INTERPRETER
    fullscreen: bool = False
    font_paths: list[str] = field(default_factory=lambda: list(FONT_PATHS))


def build_settings(config: dict) -> Settings:
    """Read [settings]; relative paths stay relative to the working directory."""
    settings = config.get("settings", {})
    extra_fonts = settings.get("font_paths", [])
    if isinstance(extra_fonts, str):
        extra_fonts = [extra_fonts]
    return Settings(
        games_dir=settings.get("games_dir", GAMES_DIR),
        interpreter=settings.get("interpreter", INTERPRETER),
        fullscreen=bool(settings.get("fullscreen", False)),
        font_paths=list(extra_fonts) + list(FONT_PATHS),
    )
