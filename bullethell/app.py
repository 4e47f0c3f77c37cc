"""The window, the main loop and the state machine tying the screens together."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Set

import pygame

from bullethell.game import BLACK, GameState, KeyInput, Screen
from bullethell.running import RunningState
from bullethell.states import OverState, PausedState, WelcomeState

TARGET_FPS = 60


class Game:
    """Owns the screen geometry and dispatches each frame to the current state."""

    def __init__(self, width: int = 1600, height: int = 900) -> None:
        self.screen = Screen(width, height)
        self.state = GameState.WELCOME
        self.running = RunningState(self.screen)
        self.states = {
            GameState.RUNNING: self.running,
            GameState.WELCOME: WelcomeState(),
            GameState.PAUSED: PausedState(),
            GameState.DEAD: OverState(),
        }

    def frame(self, surface: pygame.Surface, keys: KeyInput) -> GameState:
        """Draw one frame onto ``surface`` and return the new game state."""
        self.screen.width, self.screen.height = surface.get_size()
        surface.fill(BLACK)
        self.state = self.states[self.state].update(surface, keys)
        return self.state

    def loop(self) -> None:
        """Open the window and run until it is closed or Escape is pressed."""
        pygame.init()
        try:
            pygame.display.set_mode(
                (int(self.screen.width), int(self.screen.height)), pygame.RESIZABLE
            )
            pygame.display.set_caption("bullethell")
            clock = pygame.time.Clock()
            held: Set[int] = set()
            while True:
                pressed: Set[int] = set()
                quit_requested = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        quit_requested = True
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            quit_requested = True
                        pressed.add(event.key)
                        held.add(event.key)
                    elif event.type == pygame.KEYUP:
                        held.discard(event.key)
                if quit_requested:
                    break
                self.running.fps = clock.get_fps()
                self.frame(pygame.display.get_surface(), KeyInput(pressed, held))
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bullethell", description="Dodge the projectiles."
    )
    parser.parse_args(argv)
    Game().loop()
    return 0