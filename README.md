# gamelab

A small collection of game-AI playgrounds in plain Python, with no
third-party dependencies:

- **`gamelab.perlin`** – seedable Perlin noise in one, two and three
  dimensions, with octave, clamped, remapped and normalized variants, and a
  32-bit Mersenne Twister (`MersenneTwister`) used for seeding.
- **`gamelab.hexgrid`** – the "catch the cat" board: a hexagonal grid with
  offset rows, a cat trying to reach the edge and a catcher blocking cells.
- **`gamelab.catchthecat`** – plays catch-the-cat games between the
  built-in agents.
- **`gamelab.maze`** – compact maze cells with four walls, and the base
  interface for step-by-step maze generators.
- **`gamelab.particle`**, **`gamelab.rules`**, **`gamelab.flock`** – a boid
  flocking simulation: 2D vectors, particles with speed and acceleration
  limits, weighted steering rules and a flock that wraps around its area.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

Play a game of catch-the-cat between the random cat and the random catcher,
then print the final board and the outcome ("Cat won", "Catcher won" or
"No winner"):

```
gamelab-catchthecat --size 21 --turns 1000 --seed 7
```

`--size` is the board's side length and must be odd; all options are
optional.

Run the flocking simulation headless and print the number of boids, their
centre and their mean speed:

```
gamelab-flock --boids 300 --steps 100 --dt 0.0166 --width 800 --height 600 --seed 1
```

## Library use

### Perlin noise

```python
from gamelab.perlin import PerlinNoise

noise = PerlinNoise(12345)
value = noise.noise2d(0.3, 1.7)                          # in [-1, 1]
height = noise.normalized_octave2d_01(0.3, 1.7, 4, 0.5)  # in [0, 1]

state = noise.serialize()        # the 256-entry permutation table, as bytes
other = PerlinNoise(0)
other.deserialize(state)         # now produces the same noise
```

A seed may be an integer or any callable returning unsigned integers.
`PerlinNoise()` without a seed uses the classic reference permutation. The
same seed always gives the same permutation, so noise fields can be
reproduced exactly. `deserialize` raises `ValueError` unless given exactly
256 values.

### Catch the cat

```python
import random
from gamelab.hexgrid import CatchTheCatWorld, Point, neighbors

world = CatchTheCatWorld(11, random.Random(7))
print(world.render())

world.step()   # the cat moves
world.step()   # the catcher blocks a cell
```

The board side must be odd (otherwise `ValueError`); the centre cell is
`Point(0, 0)` and the corners are at plus or minus half the side.
`neighbors(point)` lists the six surrounding cells, and
`world.cat_can_move_to(point)` / `world.catcher_can_move_to(point)` check
whether a move is legal. `CatchTheCatWorld.from_state(...)` builds a world
from an explicit board. `start()`, `pause()` and `update(delta_time)` run
turns on a timer. A whole game between the built-in agents can be played with
`gamelab.catchthecat.play(side_size, max_turns, rng)`.

### Maze cells

```python
from gamelab.maze import Node

cell = Node(True, False, True, False)   # north, east, south, west walls
cell.east = True
assert cell.bits == 0b0111
```

Subclass `MazeGeneratorBase` and implement the `name` property,
`step(world)` and `clear(world)` to write your own generator.

### Flocking

```python
import random
from gamelab.flock import Flock

flock = Flock(800, 600, random.Random(1))
flock.start()
for _ in range(60):
    flock.update(1 / 60)
```

The flock holds separation, cohesion, alignment, mouse influence, bounded
area and wind rules from `gamelab.rules`; their weights can be changed and
reset with `restore_default_weights()`. Speed, constant-speed mode,
acceleration cap and neighbourhood radius are set on the flock with
`set_speed`, `set_constant_speed`, `set_max_acceleration` and
`set_detection_radius`. Passing a `Vec2` as the second argument of
`update` pushes the first boid in that direction.

## What it does not do

- There is no graphical window: boards are shown as text with `render()`,
  and the flock is simulated without drawing.
- No mouse is read. `MouseInfluenceRule` acts only when its
  `mouse_position` attribute is set to a `Vec2` by the caller.
- No maze generator is included. `MazeGenerator` counts its steps but never
  changes the world, and there is no maze world to generate into.