import argparse
import sys

import pygame

from app import App, InitError
from config import build_colors, build_settings, load_config
from controls import Outcome
from launcher import LaunchRequest, launch
from scanner import EmptyLibraryError, ScanError, require_games, supported_formats


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse -k / -F; anything else on the command line is ignored."""
    parser = argparse.ArgumentParser(
        description="Pick a story file from ./games and run it with sfrotz."
    )
    parser.add_argument(
        "-k", dest="keyboard", action="store_true", help="Pass -k (keyboard mode) to sfrotz."
    )
    parser.add_argument(
        "-F", dest="fullscreen", action="store_true", help="Pass -F (fullscreen) to sfrotz."
    )
    args, _unknown = parser.parse_known_args(argv)
    return args


def run(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config()
    settings = build_settings(config)

    try:
        entries = require_games(settings.games_dir)
    except EmptyLibraryError:
        print(f"No games found in {settings.games_dir} directory", file=sys.stderr)
        print(f"Supported formats: {supported_formats()}", file=sys.stderr)
        return 1
    except ScanError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        app = App(entries, settings, build_colors(config))
    except InitError as e:
        pygame.quit()
        print(e, file=sys.stderr)
        print("Failed to initialize launcher", file=sys.stderr)
        return 1

    try:
        outcome = app.run()
    finally:
        app.shutdown()

    if outcome is Outcome.CONFIRM:
        request = LaunchRequest(
            path=app.state.selected_entry.path,
            use_keyboard=args.keyboard,
            use_fullscreen=args.fullscreen,
        )
        launch(request, settings.interpreter)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
