import os
from dataclasses import dataclass

from constants import GAME_EXTS, MAX_GAMES


class ScanError(OSError):
    """The games directory could not be opened."""


class EmptyLibraryError(ScanError):
    """The games directory was readable but held no recognised game files."""


@dataclass(frozen=True)
class GameEntry:
    path: str
    name: str


def is_game_file(filename: str) -> bool:
    """True if the suffix after the last '.' is a known story-file extension."""
    dot = filename.rfind(".")
    if dot == -1:
        return False
    return filename[dot:].lower() in GAME_EXTS


def display_name(filename: str) -> str:
    """Strip only the final '.'-suffix: 'my.game.dat' -> 'my.game'."""
    dot = filename.rfind(".")
    if dot == -1:
        return filename
    return filename[:dot]


def scan_games(directory: str, max_games: int = MAX_GAMES) -> list[GameEntry]:
    """Return game entries in directory-listing order (not sorted).

    Hidden names are skipped and anything past ``max_games`` matches is
    silently dropped.
    """
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise ScanError(f"Cannot open {directory} directory: {e}") from e

    entries: list[GameEntry] = []
    for name in names:
        if len(entries) >= max_games:
            break
        if name.startswith("."):
            continue
        if is_game_file(name):
            entries.append(GameEntry(path=f"{directory}/{name}", name=display_name(name)))
    return entries


def require_games(directory: str, max_games: int = MAX_GAMES) -> list[GameEntry]:
    entries = scan_games(directory, max_games)
    if not entries:
        raise EmptyLibraryError(f"No games found in {directory} directory")
    return entries


def supported_formats() -> str:
    return ", ".join(GAME_EXTS)
