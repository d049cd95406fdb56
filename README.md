# drillbox

`drillbox` contains two independent pieces:

- `drillbox.circular_buffer` provides `CircularBuffer`, a bounded FIFO buffer
  of integers that is safe to share between threads.
- A small arcade toy built on pygame (`drillbox.entities` and `drillbox.app`):
  a spaceship you move around a window.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## The circular buffer

```python
from drillbox.circular_buffer import (
    BufferEmptyError,
    BufferFullError,
    CircularBuffer,
)

buf = CircularBuffer(3)
buf.push(10)
buf.push(20)
buf.push(30)
assert buf.is_full()

try:
    buf.push(40)
except BufferFullError:
    pass  # the buffer holds at most `capacity` items

assert buf.pop() == 10   # items come out in the order they went in
assert len(buf) == 2

buf.pop()
buf.pop()
assert buf.is_empty()

try:
    buf.pop()
except BufferEmptyError:
    pass
```

Behaviour:

- `CircularBuffer(capacity)` raises `ValueError` unless the capacity is
  positive. The capacity is available as the read-only `capacity` property.
- `push(item)` never blocks; it raises `BufferFullError` when the buffer
  already holds `capacity` items.
- `pop()` never blocks; it raises `BufferEmptyError` when the buffer is empty.
- `is_empty()`, `is_full()` and `len(buf)` report the current state.

Every operation takes an internal lock, so producers and consumers on
different threads can share one buffer; they catch the two exceptions and
retry.

## The game

Start it with:

```
drillbox
```

or stop automatically after a number of frames:

```
drillbox --frames 600
```

An 800×600 window titled "Blasteroids" opens with the ship in the middle. The
loop runs at 60 frames per second; closing the window quits.

| Key        | Action                                  |
| ---------- | --------------------------------------- |
| Arrow keys | move the ship up, down, left, right     |
| `A`        | increase the ship's heading             |
| `F`        | decrease the ship's heading             |

From code:

- `drillbox.app.run(max_frames=None)` runs the loop, stops after
  `max_frames` frames if given, and returns the number of frames rendered.
- `drillbox.app.pressed_keys(state)` turns a keyboard state indexed by
  pygame key code into a frozenset of `Key` values.
- `drillbox.entities.Spaceship.update(keys)` applies one frame of input;
  the heading is kept in the range `[0, 2π)`.
- `Spaceship.outline()` and `Asteroid.outline()` return the line segments
  that their `draw(surface)` methods render.
- `Asteroid.spawn(rng=None)` creates an asteroid at a random position on the
  screen, optionally from a given `random.Random`.
- `Blast` is a plain record of a shot's position, heading, speed and colour.

## What the game does not do

This is a toy, not a finished game. Only the spaceship appears in the window:
asteroids are modelled but never spawned or moved by the loop, there is no
firing (nothing creates a `Blast`), no collisions, no score and no lives. The
heading changes with `A` and `F`, but the ship is always drawn pointing up.