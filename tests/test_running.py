import random

import pygame
import pytest

from bullethell.game import GameState, KeyInput, Screen
from bullethell.player import Player
from bullethell.projectile import ProjectileState, ProjectileType
from bullethell.running import RunningState


def _state(clock_value=0.0, seed=1):
    screen = Screen(800, 600)
    return RunningState(screen, clock=lambda: clock_value, rng=random.Random(seed))


def _surface(state):
    return pygame.Surface((int(state.screen.width), int(state.screen.height)))


def test_spawn_at_centre():
    state = _state()
    projectile = state.spawn_projectile()
    assert state.projectiles == [projectile]
    assert projectile.position == pygame.Vector2(
        state.screen.width / 2.0, state.screen.height / 2.0
    )


def test_spawn_kinds_mostly_hostile():
    state = _state(seed=7)
    kinds = [state.spawn_projectile().kind for _ in range(300)]
    hostile = kinds.count(ProjectileType.HOSTILE)
    health = kinds.count(ProjectileType.HEALTH)
    assert hostile + health == 300
    assert 0 < health < hostile


def test_hostile_hit_damages_and_fades():
    state = _state()
    projectile = state.spawn_projectile()
    projectile.kind = ProjectileType.HOSTILE
    projectile.velocity = pygame.Vector2(0, 0)
    projectile.position = pygame.Vector2(state.player.position)
    state.step_projectiles()
    assert state.player.health == state.player.max_health - Player.DAMAGE_AMOUNT
    assert projectile.state is ProjectileState.FADING
    # a fading projectile does no further harm
    state.step_projectiles()
    assert state.player.health == state.player.max_health - Player.DAMAGE_AMOUNT


def test_health_hit_heals():
    state = _state()
    state.player.health = 10
    projectile = state.spawn_projectile()
    projectile.kind = ProjectileType.HEALTH
    projectile.velocity = pygame.Vector2(0, 0)
    projectile.position = pygame.Vector2(state.player.position)
    state.step_projectiles()
    assert state.player.health == 10 + Player.HEAL_AMOUNT


def test_faded_projectile_removed():
    state = _state()
    projectile = state.spawn_projectile()
    projectile.velocity = pygame.Vector2(0, 0)
    projectile.destroy()
    for _ in range(20):
        state.step_projectiles()
    assert state.projectiles == []


def test_offscreen_projectile_removed():
    state = _state()
    projectile = state.spawn_projectile()
    projectile.position = pygame.Vector2(-1000, -1000)
    state.step_projectiles()
    assert state.projectiles == []


def test_pause_key():
    state = _state()
    assert state.handle_input(KeyInput(pressed={pygame.K_p})) is GameState.PAUSED
    assert state.handle_input(KeyInput()) is None


@pytest.mark.parametrize(
    "key, delta",
    [
        (pygame.K_RIGHT, (Player.STEP, 0)),
        (pygame.K_l, (Player.STEP, 0)),
        (pygame.K_a, (-Player.STEP, 0)),
        (pygame.K_w, (0, -Player.STEP)),
        (pygame.K_j, (0, Player.STEP)),
    ],
)
def test_movement_keys(key, delta):
    state = _state()
    start = pygame.Vector2(state.player.position)
    state.handle_input(KeyInput(down={key}))
    assert state.player.position == start + pygame.Vector2(delta)


def test_update_spawns_once_per_interval():
    state = _state(clock_value=0.0)
    surface = _surface(state)
    assert state.update(surface, KeyInput()) is GameState.RUNNING
    state.update(surface, KeyInput())
    assert len(state.projectiles) == 1


def test_update_dead_player_resets():
    state = _state()
    state.player.health = 0
    state.player.position = pygame.Vector2(5, 5)
    result = state.update(_surface(state), KeyInput())
    assert result is GameState.DEAD
    assert state.player.health == state.player.max_health
    assert state.player.position == state.player.start_position


def test_update_pause_request():
    state = _state()
    result = state.update(_surface(state), KeyInput(pressed={pygame.K_p}))
    assert result is GameState.PAUSED