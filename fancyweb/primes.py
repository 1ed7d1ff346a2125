"""Prime factorization drawn as a histogram of exponents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import compress
from math import isqrt
from typing import Iterator

from fancyweb.dom import CanvasContext
from fancyweb.easel import canvas_size
from fancyweb.size import SizeU32

GAP = 2

COLORS = (
    "#FF0000",  # Red
    "#00FF00",  # Lime
    "#0000FF",  # Blue
    "#FFFF00",  # Yellow
    "#00FFFF",  # Cyan
    "#FF00FF",  # Magenta
    "#C0C0C0",  # Silver
    "#808080",  # Gray
    "#800000",  # Maroon
    "#808000",  # Olive
    "#008000",  # Green
    "#800080",  # Purple
    "#008080",  # Teal
    "#000080",  # Navy
)


class FillStyle(Enum):
    COLOR = "color"
    GRAYSCALE = "grayscale"

    def get(self, index: int) -> str:
        """The fill colour for the column at ``index``."""
        if self is FillStyle.COLOR:
            return COLORS[index % len(COLORS)]
        level = 15 + index % 16 * 14
        return f"#{level:02x}{level:02x}{level:02x}"


class Sieve:
    """An on-demand sieve of Eratosthenes that grows as more primes are asked for."""

    def __init__(self) -> None:
        self._limit = 1
        self._primes: list[int] = []

    def _grow(self) -> None:
        limit = max(self._limit * 2, 32)
        flags = bytearray([1]) * (limit + 1)
        flags[0] = flags[1] = 0
        for i in range(2, isqrt(limit) + 1):
            if flags[i]:
                flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
        self._primes = list(compress(range(limit + 1), flags))
        self._limit = limit

    def primes(self) -> Iterator[int]:
        """Yield every prime in ascending order, without end."""
        index = 0
        while True:
            while index >= len(self._primes):
                self._grow()
            yield self._primes[index]
            index += 1

    def factors(self, n: int) -> Iterator[int]:
        """Yield the prime factors of ``n`` in ascending order, with repetition."""
        for p in self.primes():
            if p * p > n:
                break
            while n % p == 0:
                yield p
                n //= p
        if n > 1:
            yield n


def prime_factor(sieve: Sieve, n: int) -> list[int]:
    """Exponents of each prime in ``n``, zeros included, up to its largest prime factor."""
    powers = []
    for p in sieve.primes():
        if n < 2:
            break
        e = 0
        while n % p == 0:
            n //= p
            e += 1
        powers.append(e)
    return powers


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    w: float
    h: float


def columns(powers: list[int], canvas: SizeU32) -> Iterator[list[Rectangle]]:
    """Yield, for each exponent, the stack of bricks that draws it."""
    max_power = max(powers, default=1)
    brick_h = canvas.height // max_power if max_power else 0
    brick_w = canvas.width // len(powers) if powers else 0
    w = float(max(brick_w - GAP * 2, 0))
    h = float(max(brick_h - GAP * 2, 0))
    for index, power in enumerate(powers):
        x = float(index * brick_w + GAP)
        yield [Rectangle(x, float(p * brick_h + GAP), w, h) for p in range(power)]


class Histogram:
    """The exponents of a counter's prime factors, one column per prime."""

    def __init__(self) -> None:
        self._powers: list[int] = []
        self._value = 1

    @property
    def powers(self) -> tuple[int, ...]:
        return tuple(self._powers)

    def value(self) -> int:
        return self._value

    def incr(self, sieve: Sieve) -> tuple[int, ...]:
        """Advance to the next integer and return its exponents."""
        self._value += 1
        self._powers = prime_factor(sieve, self._value)
        return self.powers

    def clear(self, context: CanvasContext) -> None:
        """Erase this histogram from the canvas."""
        size = canvas_size(context.canvas)
        context.begin_path()
        for column in columns(self._powers, size):
            for brick in column:
                context.clear_rect(brick.x, brick.y, brick.w, brick.h)
        context.stroke()

    def fill(self, context: CanvasContext, style: FillStyle) -> None:
        """Draw this histogram to the canvas."""
        size = canvas_size(context.canvas)
        context.begin_path()
        for index, column in enumerate(columns(self._powers, size)):
            context.fill_style = style.get(index)
            for brick in column:
                context.fill_rect(brick.x, brick.y, brick.w, brick.h)
        context.stroke()