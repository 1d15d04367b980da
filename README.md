# pangsim

`pangsim` holds the game logic of a small arcade shooter. The player stands at
the bottom of the field and fires a harpoon upward on a cable. When the harpoon
or its cable touches a bouncing ball, the ball splits in two. Big balls become
medium balls, medium balls become small balls, and small balls disappear. Now
and then a bird (`Animalito`) flies across the upper part of the field, and
hitting it is worth extra points. Each hit adds a score label to the world, and
the label floats upward for 600 frames.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pangsim.common` holds the world constants: the field spans -10 to 10 on
  both axes (`SIZEX2`, `SIZEY2`), and the module also sets `NUMBALLS`,
  `NUM_ANIMALITOS`, `BALL_SPEED` and the rest. It also provides the `BallSize`
  enum (`SMALL`, `MEDIUM`, `BIG`), `distance`, `segment_distance_sq` (the
  squared distance from a point to a segment), and the random helpers
  `rand_dom`, `rand_domf` and `rand_bit`. Each of these helpers takes any object
  that has a `random()` method.
- `pangsim.shapes` contains the following:
  - The abstract `Shape` base. `Shape.move` applies gravity and bounces off the
    field edges, `Shape.distance_to` gives the planar distance, and every shape
    has a `radius` property.
  - `Ball`, with `Ball.split`. A split shrinks the ball and returns the new
    ball, and it raises `ValueError` on a small ball. `Ball` also has
    `Ball.reposition`, and the colour of a ball comes from `ball_color`.
  - The harpoon `Bullet`, which moves through the `BulletState` phases
    `UP`, `DOWN` and `INACTIVE`. It rises to the ceiling, then retracts to its
    anchor, and then clears `active`.
- `pangsim.actors` defines three classes:
  - The player `Man`, with `strafe`, `fire` (which returns a `Bullet`) and
    `reset_position`.
  - The bird `Animalito`, which flies sideways and wraps around at the edges.
  - `ScorePopUp`, which provides `move` and `text`. It sets `alive` to false
    when its life runs out.
- `pangsim.world` provides `World`, which holds every object in play, newest
  first, together with the player (`world.man`). Its methods are `add`,
  `remove`, `move`, `reposition`, `collisions` and `ball_count`:
  - `move` moves every object and sometimes spawns a bird. The chance is 1 in
    12000 per frame, and the number of birds is capped by `max_animalitos`,
    which defaults to 7 and can be set to `None` for no cap.
  - `collisions` resolves the first collision it finds and returns a
    `CollisionResult`: `NONE`, `MAN_HIT`, `BIG_BALL`, `MEDIUM_BALL`,
    `SMALL_BALL` or `ANIMALITO`.

  The constructor accepts `rng`, `num_balls` and `max_animalitos`. The world
  supports iteration, `len()` and `in`.
- `pangsim.graphics` has backend-neutral helpers:
  - `load_texture` reads a raw BGR file and returns an RGB `Texture`, and
    `swap_red_blue` converts the pixel order. Both raise `ValueError` on short
    data.
  - `projection_for` returns a `Projection`.
  - `background_quad` and `text_quad` return quad corners as pairs of texture
    coordinates and vertices.
- `pangsim.render` turns objects into `DrawCommand` values built from
  `Primitive` kinds. `draw_commands` handles one shape and raises `TypeError`
  for a shape it cannot draw. `scene_commands` handles a whole world. Pass
  `invulnerable=True` to draw the player in yellow.

## Example

```python
import random

from pangsim.world import World, CollisionResult

world = World(rng=random.Random(1))
man = world.man
bullet = man.fire()

for _ in range(1000):
    world.move()
    bullet.move()
    result = world.collisions(bullet, man)
    if result is CollisionResult.MAN_HIT:
        break

print(world.ball_count())
```

## What it does not do

`pangsim` is only a model of the game. It does not open a window, draw
anything, read the keyboard or run a game loop, and it has no command to start
a game. It also does not keep score or count lives: `collisions` reports what
was hit, and the caller decides what to do with that. Expired score labels
remain in the world, but they produce no draw commands.