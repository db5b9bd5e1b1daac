from dataclasses import dataclass

import pygame

from config import Colors
from constants import (
    CHROME_H,
    COUNT_Y,
    FOOTER_H,
    FOOTER_TEXT_OFFSET,
    HELP_TEXT,
    HIGHLIGHT_H,
    HIGHLIGHT_MARGIN,
    LIST_X,
    LIST_Y,
    ROW_H,
    TITLE_TEXT,
    TITLE_Y,
)
from navigation import NavigationState


@dataclass(frozen=True)
class Row:
    index: int
    text: str
    selected: bool


@dataclass
class Fonts:
    body: pygame.font.Font
    title: pygame.font.Font


def visible_count(height: int) -> int:
    """Number of list rows that fit between the title block and the footer."""
    return max(0, (height - CHROME_H) // ROW_H)


def build_rows(state: NavigationState, count: int) -> list[Row]:
    """Project the visible slice of ``state`` into row text and highlight flags."""
    rows = []
    for i in state.visible_window(count):
        selected = i == state.selected
        prefix = "> " if selected else "  "
        rows.append(Row(index=i, text=prefix + state.entries[i].name, selected=selected))
    return rows


def draw_text_centered(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    y: int,
    color: tuple,
) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, ((screen.get_width() - surf.get_width()) // 2, y))


def draw_row(
    screen: pygame.Surface,
    font: pygame.font.Font,
    row: Row,
    y: int,
    colors: Colors,
) -> None:
    """Draw one list row, with the highlight bar behind it when selected."""
    if row.selected:
        bar = pygame.Rect(
            HIGHLIGHT_MARGIN, y - 2, screen.get_width() - 2 * HIGHLIGHT_MARGIN, HIGHLIGHT_H
        )
        pygame.draw.rect(screen, colors.highlight, bar)
    color = colors.highlight_text if row.selected else colors.text
    screen.blit(font.render(row.text, True, color), (LIST_X, y))


def draw_launcher(
    screen: pygame.Surface,
    fonts: Fonts,
    state: NavigationState,
    colors: Colors,
) -> None:
    w, h = screen.get_size()
    screen.fill(colors.bg)

    draw_text_centered(screen, fonts.title, TITLE_TEXT, TITLE_Y, colors.title)
    draw_text_centered(
        screen, fonts.body, f"{len(state.entries)} games found", COUNT_Y, colors.text
    )

    y = LIST_Y
    for row in build_rows(state, visible_count(h)):
        draw_row(screen, fonts.body, row, y, colors)
        y += ROW_H

    # Controls help
    pygame.draw.rect(screen, colors.bar, pygame.Rect(0, h - FOOTER_H, w, FOOTER_H))
    draw_text_centered(screen, fonts.body, HELP_TEXT, h - FOOTER_TEXT_OFFSET, colors.text)
