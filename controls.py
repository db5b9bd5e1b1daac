from enum import Enum
from typing import Iterable

import pygame

from constants import JOY_BUTTON_BACK, JOY_BUTTON_CONFIRM
from navigation import NavigationState


class Outcome(Enum):
    CONTINUE = "continue"
    CONFIRM = "confirm"
    QUIT = "quit"


def handle_key(event: pygame.event.Event, state: NavigationState, visible_count: int) -> Outcome:
    if event.key == pygame.K_UP:
        state.move_up()
    elif event.key == pygame.K_DOWN:
        state.move_down(visible_count)
    elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
        return Outcome.CONFIRM
    elif event.key == pygame.K_ESCAPE:
        return Outcome.QUIT
    return Outcome.CONTINUE


def handle_joy_button(event: pygame.event.Event) -> Outcome:
    if event.button == JOY_BUTTON_CONFIRM:
        return Outcome.CONFIRM
    if event.button == JOY_BUTTON_BACK:
        return Outcome.QUIT
    return Outcome.CONTINUE


def handle_joy_hat(event: pygame.event.Event, state: NavigationState, visible_count: int) -> Outcome:
    _, hy = event.value
    if hy == 1:
        state.move_up()
    elif hy == -1:
        state.move_down(visible_count)
    return Outcome.CONTINUE


def dispatch_event(event: pygame.event.Event, state: NavigationState, visible_count: int) -> Outcome:
    """Apply one event to ``state`` and report whether the loop should stop."""
    if event.type == pygame.QUIT:
        return Outcome.QUIT
    if event.type == pygame.KEYDOWN:
        return handle_key(event, state, visible_count)
    if event.type == pygame.JOYBUTTONDOWN:
        return handle_joy_button(event)
    if event.type == pygame.JOYHATMOTION:
        return handle_joy_hat(event, state, visible_count)
    return Outcome.CONTINUE


def dispatch_events(
    events: Iterable[pygame.event.Event], state: NavigationState, visible_count: int
) -> Outcome:
    """Drain a batch of events, stopping at the first Confirm or Quit.

    Moves applied before the terminal event are kept; anything after it in
    the batch is dropped.
    """
    for event in events:
        outcome = dispatch_event(event, state, visible_count)
        if outcome is not Outcome.CONTINUE:
            return outcome
    return Outcome.CONTINUE
