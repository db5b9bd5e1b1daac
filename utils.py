import pygame


def load_font(paths: list[str], size: int) -> pygame.font.Font | None:
    """Open the first font in ``paths`` that loads. Returns None if none do."""
    for path in paths:
        try:
            return pygame.font.Font(path, size)
        except (OSError, pygame.error):
            continue
    return None
