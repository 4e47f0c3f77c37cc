"""The playing screen: spawning projectiles, collisions and movement."""

from __future__ import annotations

import random
import time
from typing import Callable, List, Optional

import pygame

from bullethell.game import GRAY, GREEN, RED, WHITE, GameState, KeyInput, Screen
from bullethell.player import Direction, Player
from bullethell.projectile import Projectile, ProjectileType
from bullethell.states import _draw_text
from bullethell.util import Interval, random_range

_MOVE_KEYS = {
    Direction.DOWN: (pygame.K_j, pygame.K_DOWN, pygame.K_s),
    Direction.UP: (pygame.K_k, pygame.K_UP, pygame.K_w),
    Direction.LEFT: (pygame.K_h, pygame.K_LEFT, pygame.K_a),
    Direction.RIGHT: (pygame.K_l, pygame.K_RIGHT, pygame.K_d),
}


class RunningState:
    """Gameplay: projectiles burst from the centre while the player dodges."""

    SPAWN_DELAY_SECS = 0.001
    PLAYER_RADIUS = 20
    PLAYER_MAX_HEALTH = 500
    HEALTH_ODDS = 15

    def __init__(
        self,
        screen: Screen,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.screen = screen
        self.rng = rng
        self.player = Player(
            (screen.width / 4.0, screen.height / 4.0),
            self.PLAYER_RADIUS,
            self.PLAYER_MAX_HEALTH,
            screen,
        )
        self.projectiles: List[Projectile] = []
        self.interval = Interval(self.SPAWN_DELAY_SECS, clock)
        self.fps = 0.0

    def update(self, surface: pygame.Surface, keys: KeyInput) -> GameState:
        """Run one frame and return the state the game should be in next."""
        next_state = GameState.RUNNING

        if self.interval.poll():
            self.spawn_projectile()

        if not self.player.is_alive():
            next_state = GameState.DEAD
            self.player.reset()

        self.step_projectiles()
        self._draw(surface)

        requested = self.handle_input(keys)
        if requested is not None:
            next_state = requested
        return next_state

    def spawn_projectile(self) -> Projectile:
        """Add a projectile at the screen centre; one in fifteen heals."""
        kind = (
            ProjectileType.HEALTH
            if random_range(1, self.HEALTH_ODDS, self.rng) == 1
            else ProjectileType.HOSTILE
        )
        projectile = Projectile(
            (self.screen.width / 2.0, self.screen.height / 2.0),
            kind,
            self.screen,
            self.rng,
        )
        self.projectiles.append(projectile)
        return projectile

    def step_projectiles(self) -> None:
        """Move projectiles, apply hits to the player and drop dead ones."""
        for projectile in self.projectiles:
            projectile.update()
            if projectile.is_alive() and self.player.collides_with(projectile):
                if projectile.kind is ProjectileType.HOSTILE:
                    self.player.damage()
                else:
                    self.player.heal()
                projectile.destroy()
        self.projectiles = [p for p in self.projectiles if not p.is_dead()]

    def handle_input(self, keys: KeyInput) -> Optional[GameState]:
        """Move the player; return PAUSED if a pause was requested."""
        for direction, bindings in _MOVE_KEYS.items():
            if any(keys.is_down(key) for key in bindings):
                self.player.move(direction)
        if keys.is_pressed(pygame.K_p):
            return GameState.PAUSED
        return None

    def _draw(self, surface: pygame.Surface) -> None:
        for projectile in self.projectiles:
            projectile.draw(surface)
        self.player.draw(surface)
        self._draw_ui(surface)

    def _draw_ui(self, surface: pygame.Surface) -> None:
        _draw_text(surface, f"{round(self.fps)} FPS", 0, 0, 20, GREEN)
        _draw_text(surface, f"Health: {self.player.health}", 0, 50, 50, WHITE)
        _draw_text(surface, f"Particles: {len(self.projectiles)}", 0, 100, 50, WHITE)
        self.player.draw_healthbar(
            surface, (self.screen.width / 2.0, 0.0), RED, GRAY
        )