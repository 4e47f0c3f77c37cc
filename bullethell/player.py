"""The player-controlled circle."""

from __future__ import annotations

import enum

import pygame

from bullethell.game import BLUE, Screen
from bullethell.projectile import Projectile


class Direction(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()


_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class Player:
    """A circle with health that moves within the screen."""

    STEP = 5.0
    HEAL_AMOUNT = 50
    DAMAGE_AMOUNT = 1
    HEALTHBAR_WIDTH = 500
    HEALTHBAR_HEIGHT = 30

    def __init__(self, position, radius: float, max_health: int, screen: Screen) -> None:
        self.screen = screen
        self.position = pygame.Vector2(position)
        self.start_position = pygame.Vector2(position)
        self.radius = radius
        self.max_health = max_health
        self.health = max_health

    def reset(self) -> None:
        self.health = self.max_health
        self.position = pygame.Vector2(self.start_position)

    def move(self, direction: Direction) -> None:
        dx, dy = _OFFSETS[direction]
        x = self.position.x + dx * self.STEP
        y = self.position.y + dy * self.STEP
        self.position = pygame.Vector2(
            min(max(x, 0.0), float(self.screen.width)),
            min(max(y, 0.0), float(self.screen.height)),
        )

    def damage(self) -> None:
        self.health -= self.DAMAGE_AMOUNT

    def heal(self) -> None:
        self.health = min(self.health + self.HEAL_AMOUNT, self.max_health)

    def is_alive(self) -> bool:
        return self.health > 0

    def collides_with(self, projectile: Projectile) -> bool:
        reach = self.radius + projectile.radius
        return self.position.distance_squared_to(projectile.position) <= reach * reach

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.circle(surface, BLUE, self.position, self.radius)

    def draw_healthbar(self, surface: pygame.Surface, center, fg, bg) -> None:
        """Draw the health bar with its top edge centred on ``center``."""
        center = pygame.Vector2(center)
        filled = int(self.health / self.max_health * self.HEALTHBAR_WIDTH)
        filled = max(0, min(filled, self.HEALTHBAR_WIDTH))
        x = int(center.x - self.HEALTHBAR_WIDTH / 2.0)
        y = int(center.y)
        if filled:
            pygame.draw.rect(surface, fg, (x, y, filled, self.HEALTHBAR_HEIGHT))
        if filled < self.HEALTHBAR_WIDTH:
            pygame.draw.rect(
                surface,
                bg,
                (x + filled, y, self.HEALTHBAR_WIDTH - filled, self.HEALTHBAR_HEIGHT),
            )