"""Projectiles flying across the screen."""

from __future__ import annotations

import enum
import math
import random
from typing import Optional

import pygame

from bullethell.game import GREEN, RED, Screen
from bullethell.util import Timer, random_range


class ProjectileType(enum.Enum):
    HOSTILE = enum.auto()
    HEALTH = enum.auto()


class ProjectileState(enum.Enum):
    LIVE = enum.auto()
    FADING = enum.auto()
    DEAD = enum.auto()


COLORS = {
    ProjectileType.HEALTH: GREEN,
    ProjectileType.HOSTILE: RED,
}


def _lerp(start: float, end: float, amount: float) -> float:
    return start + amount * (end - start)


def _circle_touches_rect(
    center: pygame.Vector2, radius: float, width: float, height: float
) -> bool:
    half_w = width / 2.0
    half_h = height / 2.0
    dx = abs(center.x - half_w)
    dy = abs(center.y - half_h)
    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


class Projectile:
    """A circle with random speed and size that fades out once hit."""

    FADE_RADIUS_MULTIPLIER = 1.5

    def __init__(
        self,
        origin,
        kind: ProjectileType,
        screen: Screen,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.screen = screen
        self.velocity = pygame.Vector2(
            random_range(-5, 5, rng), random_range(-5, 5, rng)
        )
        self.position = pygame.Vector2(origin)
        self.radius = float(random_range(10, 30, rng))
        self.kind = kind
        self.state = ProjectileState.LIVE
        self.timer = Timer(1.0, 0.1)

    @property
    def color(self) -> pygame.Color:
        return pygame.Color(COLORS[self.kind])

    def update(self) -> None:
        """Advance one frame: move, then age or leave the screen."""
        self.position += self.velocity
        if self.state is ProjectileState.LIVE:
            if not _circle_touches_rect(
                self.position, self.radius, self.screen.width, self.screen.height
            ):
                self.state = ProjectileState.DEAD
        elif self.state is ProjectileState.FADING:
            self.timer.count()
            if self.timer.has_overflowed():
                self.state = ProjectileState.DEAD

    def draw(self, surface: pygame.Surface) -> None:
        if self.state is ProjectileState.LIVE:
            pygame.draw.circle(surface, self.color, self.position, self.radius)
        elif self.state is ProjectileState.FADING:
            self._draw_fading(surface)

    def _draw_fading(self, surface: pygame.Surface) -> None:
        t = self.timer.time
        radius = _lerp(self.radius, self.radius * self.FADE_RADIUS_MULTIPLIER, t)
        color = self.color
        color.a = max(0, min(255, int(_lerp(color.a, 0, t))))
        size = math.ceil(radius * 2) + 2
        layer = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(layer, color, (size / 2, size / 2), radius)
        surface.blit(layer, (self.position.x - size / 2, self.position.y - size / 2))

    def is_dead(self) -> bool:
        return self.state is ProjectileState.DEAD

    def is_alive(self) -> bool:
        return self.state is ProjectileState.LIVE

    def destroy(self) -> None:
        """Start fading out; has no effect unless the projectile is live."""
        if self.state is ProjectileState.LIVE:
            self.state = ProjectileState.FADING