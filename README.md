# fancyweb

A handful of small animated toys built on a minimal, in-memory document
model with a 2D canvas:

- **Life**: Conway's Game of Life on a wrapping grid.
- **Pong**: two paddles, one ball, keyboard controls.
- **Primes**: a histogram of the prime factorization of each successive
  integer, one column per prime.

Every toy sits inside an *easel*. The easel is a canvas with a play/pause
button, a caption and a frames-per-second counter. Animation advances one
frame each time `frame()` is called, so everything can be driven and
inspected from plain Python.

## Installation

```
pip install .
```

The package needs Python 3.10 or newer and has no runtime dependencies.

## Commands

Each command builds a page in memory, runs a number of frames and prints
the document body as HTML.

```
fancyweb [index|sample|counter] [--frames N]   # index page, sample page or frame counter
fancyweb-life [--frames N]                     # Game of Life
fancyweb-pong [--frames N] [--keys KEY ...]    # Pong; keys are pressed before the frames run
fancyweb-primes [--frames N]                   # prime factorization chart
```

`--frames` defaults to 1. With `fancyweb`, it applies only to the `counter`
page.

## Using the library

### Game of Life

```python
from fancyweb.size import SizeU32
from fancyweb.universe import Cell, Point, Universe

universe = Universe()
universe.resize(SizeU32(height=32, width=48))
universe.speckle()
universe.tick()
print(universe.at(Point(i=0, j=0)) is Cell.LIVE)
```

### Pseudo-random numbers

`LinearCongruentialGenerator` is a 32-bit generator that uses the classic
ANSI C constants. It is deterministic for a given seed.

```python
from fancyweb.lcg import LinearCongruentialGenerator

rng = LinearCongruentialGenerator(42)
rng.next_u32()
rng.next_bool()
rng.next_i32()
```

### Pong

```python
from fancyweb.pong_game import Game
from fancyweb.pong_physics import Direction

game = Game.from_seed(7)
game.start()
game.player1_move(Direction.DOWN)
game.update(16.0)   # milliseconds since the last frame
print(game.score())
```

`PongApp` (in `fancyweb.pong_app`) connects a game to an easel. It takes
key names through `keydown(key)` and `keyup(key)`, and both methods return
whether the key was used:

- `w` and `s` move the left paddle.
- `ArrowUp` and `ArrowDown` move the right paddle.
- `b` begins a round, or starts a fresh game if one is already in play.
- `p` toggles pause.
- `1` and `2` award a point to player 1 or player 2.

While the easel is paused, every key except `p` is ignored.

### Primes

```python
from fancyweb.primes import Sieve, prime_factor

sieve = Sieve()
print(prime_factor(sieve, 12))          # [2, 1]: exponents of 2 and 3
print(list(sieve.factors(12)))          # [2, 2, 3]
```

### Building pages

`fancyweb.dom` provides the building blocks for pages:

- `Document`, `Element` and `Canvas`. A canvas has a `CanvasContext` that
  records every drawing call in its `operations` list.
- `Tag`, a small builder for describing elements declaratively, for example
  `DIV.class_("box").child(SPAN.text("hi"))`.

`fancyweb.layout.showcase(document, title_html, create_app)` puts an app
into the document body, under a header and a title.

Each app exposes `frame()` to advance the animation and `root()` to get the
element it renders into. The apps are `LifeApp` in `fancyweb.life`,
`PongApp` in `fancyweb.pong_app` and `Chart` in `fancyweb.primes_chart`.
Every app and easel takes an optional `clock`, a callable that returns
milliseconds. Pass your own clock to get reproducible timings.

## What it does not do

There is no browser, window or real-time loop here. Nothing draws pixels
or listens for real keyboard events. Frames run only when `frame()` is
called, key presses arrive only through `keydown`/`keyup`, and a canvas
keeps a log of drawing operations instead of an image. The commands print
the resulting HTML and exit.

## Running the tests

```
pip install ".[test]"
pytest
```