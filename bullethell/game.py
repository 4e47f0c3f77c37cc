"""Game states, screen geometry, keyboard snapshots and the colour palette."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import pygame

RED = pygame.Color(230, 41, 55)
GREEN = pygame.Color(0, 228, 48)
BLUE = pygame.Color(0, 121, 241)
GRAY = pygame.Color(130, 130, 130)
WHITE = pygame.Color(255, 255, 255)
BLACK = pygame.Color(0, 0, 0)


class GameState(enum.Enum):
    """Which screen the game is currently showing."""

    RUNNING = enum.auto()
    PAUSED = enum.auto()
    DEAD = enum.auto()
    WELCOME = enum.auto()


@dataclass
class Screen:
    """Current window dimensions, shared by everything that needs them."""

    width: float = 1600
    height: float = 900

    def rect(self) -> pygame.Rect:
        return pygame.Rect(0, 0, int(self.width), int(self.height))


@dataclass(frozen=True)
class KeyInput:
    """Keyboard state for one frame.

    ``pressed`` holds keys that went down this frame, ``down`` holds keys
    currently held.
    """

    pressed: frozenset = frozenset()
    down: frozenset = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pressed", frozenset(self.pressed))
        object.__setattr__(self, "down", frozenset(self.down))

    def is_pressed(self, key: int) -> bool:
        return key in self.pressed

    def is_down(self, key: int) -> bool:
        return key in self.down