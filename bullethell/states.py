"""The simple screens: welcome, paused and game over."""

from __future__ import annotations

import functools

import pygame

from bullethell.game import RED, GameState, KeyInput

_TEXT_SIZE = 50


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(
    surface: pygame.Surface, text: str, x: int, y: int, size: int, color
) -> None:
    rendered = _font(size).render(text, False, color)
    surface.blit(rendered, (x, y))


class WelcomeState:
    """Title screen; space starts the game."""

    def update(self, surface: pygame.Surface, keys: KeyInput) -> GameState:
        _draw_text(surface, "Welcome!", 0, 0, _TEXT_SIZE, RED)
        if keys.is_pressed(pygame.K_SPACE):
            return GameState.RUNNING
        return GameState.WELCOME


class PausedState:
    """Pause screen; space resumes the game."""

    def update(self, surface: pygame.Surface, keys: KeyInput) -> GameState:
        _draw_text(surface, "Paused.", 0, 0, _TEXT_SIZE, RED)
        if keys.is_pressed(pygame.K_SPACE):
            return GameState.RUNNING
        return GameState.PAUSED


class OverState:
    """Death screen; space returns to the welcome screen."""

    def update(self, surface: pygame.Surface, keys: KeyInput) -> GameState:
        _draw_text(surface, "You Died!", 0, 0, _TEXT_SIZE, RED)
        if keys.is_pressed(pygame.K_SPACE):
            return GameState.WELCOME
        return GameState.DEAD