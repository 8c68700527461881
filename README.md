# quadkit

quadkit is a small 2D game toolkit for Python with no dependencies. It holds
game state and applies the rules of the game, frame by frame. Your frontend
draws the result and feeds in the input.

## Modules

- `quadkit.geometry`
  - `Vec2` is an immutable vector. It supports `+`, `-`, scalar `*` and `/`, and
    has `length()` and `normalize()`. `normalize()` raises `ValueError` on a zero
    vector.
  - `Rect` has `overlaps(other)`, where touching edges count as overlapping,
    and `contains(point)`, where the right and bottom edges are excluded.
- `quadkit.platformer` provides a pixel-exact `World`.
  - Static tile layers are added with `add_static_tiled_layer`. Each one is a
    row-major list of `Tile` values with a tag.
  - `add_actor` and `add_solid` return `Actor` and `Solid` handles.
  - Actors move with `move_h` and `move_v`. Both return `False` when the actor
    is blocked.
  - `Tile.JUMP_THROUGH` tiles can be passed from below. Call `descent` to drop
    through one.
  - `solid_move` carries actors that ride on the solid and pushes actors in its
    way. An actor that cannot be pushed is squished, which `squished` reports.
  - Queries: `collide_check`, `collide_solids`, `collide_tag`, `solid_at`,
    `tag_at`, `actor_pos`, `solid_pos`, `set_actor_position`.
- `quadkit.particle_config` holds the emitter settings.
  - `EmitterConfig` is the settings object. It uses `Color`, `ColorCurve`,
    `Curve` and `BatchedCurve`, `EmissionShape` (`"point"`, `"rect"`,
    `"sphere"`), `ParticleShape` (`"rectangle"`, `"circle"`, `"custom"`, with
    `mesh()`), `BlendMode`, `AtlasConfig` and `ParticleMaterial`.
  - Only `Interpolation.LINEAR` curves can be batched. Other interpolations
    raise `ValueError`.
- `quadkit.emitter`
  - `Emitter.update(dt)` spawns, animates and retires `Particle`s.
  - `Emitter.draw(pos, dt)` moves the emitter to `pos`, advances it and returns
    the live particles.
  - `Emitter.emit(pos, n)` emits `n` particles at once.
  - `EmittersCache` runs many short-lived emitters that share one config, and
    reuses them once they finish.
  - `explosion()`, `smoke()` and `fire()` return ready-made configs.
- `quadkit.life` is Conway's Game of Life on a bounded board: `CellState`,
  `random_board(width, height, rng)` and `next_generation(cells, width, height)`.
- `quadkit.snake`
  - `SnakeGame` has `turn(direction)` (using `UP`, `DOWN`, `LEFT` and `RIGHT`),
    `tick()` and `restart()`.
  - The board is 16 x 16.
  - `speed` is the delay between ticks that your loop should use.
- `quadkit.arkanoid` provides `Arkanoid.update(dt, left, right, space)`, which
  moves the paddle and ball and breaks blocks.
- `quadkit.asteroids`
  - `AsteroidsGame.update(time, up, left, right, shoot)` runs one frame: ship
    thrust and rotation, shooting, and asteroids splitting when hit.
  - The game also has `restart()`, the `game_over` flag and the `won` property.
  - `wrap_around` moves a point that left the screen to the opposite edge.
- `quadkit.audio`
  - `AudioContext` loads sounds with `load_sound(path)` or
    `load_sound_from_bytes(data)` and returns `Sound` handles.
  - It tracks playback state through `play_sound_once`, `play_sound` (which
    takes `PlaySoundParams`), `stop_sound`, `set_sound_volume`, `is_playing`,
    `is_looped` and `volume`.
  - Unknown handles raise `UnknownSoundError`.
- `quadkit.angles`: `short_angle_dist(a0, a1)` and `angle_lerp(a0, a1, t)`
  work in degrees, along the shorter arc.
- `quadkit.inventory`
  - `Inventory` holds bought items (`buy`) and labelled `Slot`s.
  - Items are moved with `Fit`, `Unfit` and `Refit` commands through `apply`.
  - `slot_drop_command` and `inventory_drop_command` build the command for a
    drag-and-drop.

Functions that use randomness take a `random.Random`, or accept one as an
optional argument, so runs can be reproduced.

## What it does not do

quadkit has no window, rendering, input handling or sound output.
`Emitter.draw` and the game classes only compute state; putting it on screen is
up to you. `AudioContext` stores audio bytes and playback flags, and it neither
decodes nor plays audio. There is no command-line program.

## Install

```
pip install .
```

## Example

```python
from quadkit.geometry import Vec2
from quadkit.platformer import Tile, World

world = World()
tiles = [Tile.EMPTY] * 40 * 18 + [Tile.SOLID] * 40
world.add_static_tiled_layer(tiles, 8.0, 8.0, 40, 1)

player = world.add_actor(Vec2(50.0, 80.0), 8, 8)
world.move_v(player, 100.0)              # falls until it lands on the floor
on_ground = world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0))
```

## Tests

```
pip install .[test]
pytest
```