# bullethell

A small arcade bullet-hell game built with pygame. Projectiles burst out of
the centre of the window in random directions, at random speeds and sizes.
Red projectiles cost you one point of health each; roughly one in fifteen is
green and heals you by 50, up to your maximum of 500. When your health runs
out, you die.

## Installing

```
pip install .
```

## Playing

```
bullethell
```

The window opens on a welcome screen and can be resized freely. The command
takes no options other than `--help`.

| Key                          | Action                                   |
|------------------------------|------------------------------------------|
| Space                        | start (welcome), resume (paused)         |
| Space                        | back to the welcome screen (after death) |
| `W`, `K`, Up arrow           | move up                                  |
| `S`, `J`, Down arrow         | move down                                |
| `A`, `H`, Left arrow         | move left                                |
| `D`, `L`, Right arrow        | move right                               |
| `P`                          | pause                                    |
| Escape                       | quit                                     |

While playing, the top left of the screen shows the frame rate, your health
and the number of projectiles in flight; a health bar is drawn at the top
centre. Projectiles that hit you fade out and grow before disappearing, and
those that leave the window are removed. After dying, your health and
position are restored for the next round.

## Using the pieces

The game logic is kept apart from the window and the event loop, so it can be
driven from code:

- `bullethell.game.Screen` holds the window size; `bullethell.game.KeyInput`
  is one frame's keyboard state (`pressed` for keys that went down this frame,
  `down` for keys held), and `bullethell.game.GameState` names the screens.
- `bullethell.player.Player` moves within the `Screen` by `Direction`, takes
  damage, heals, and tests collisions with projectiles via `collides_with()`.
- `bullethell.projectile.Projectile` moves each `update()`, dies when it
  leaves the screen, and fades out after `destroy()`.
- `bullethell.util.Interval` fires at most once per delay when polled, and
  `bullethell.util.Timer` counts up in fixed steps to a top value.
- `bullethell.running.RunningState` spawns projectiles on an `Interval` and
  resolves hits in `step_projectiles()`; it takes a clock and a
  `random.Random` so its behaviour can be reproduced.
- `bullethell.states` holds the welcome, paused and game-over screens.
- `bullethell.app.Game.frame(surface, keys)` advances the whole game by one
  frame on a pygame surface and returns the new `GameState`;
  `Game.loop()` opens the window and runs at up to 60 frames per second.

## What it does not do

There are no scores, levels, sound or saved settings, and projectiles are
drawn as plain coloured circles rather than textured sprites.

## Running the tests

```
pip install ".[test]"
pytest
```