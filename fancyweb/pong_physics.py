"""Virtual coordinates, motion and rendering scale for the pong court.

All coordinates are virtual and held as floats, so that objects can move by
less than one virtual pixel per frame. Speeds are virtual units per second,
while elapsed time is measured in milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fancyweb.size import SizeF64, SizeU32, f64_to_u32_saturating


@dataclass
class PointF64:
    x: float
    y: float


@dataclass
class Vec2d:
    dx: float = 0.0
    dy: float = 0.0


class Direction(Enum):
    UP = "up"
    DOWN = "down"


class State(Enum):
    START = "Start"
    PLAY = "Play"

    def __str__(self) -> str:
        return self.value


VIRTUAL_SIZE = SizeF64(width=426.0, height=240.0)
"""Roughly 16:9."""

CANVAS_SCALE = 3.0
"""Canvas pixels per virtual unit."""

CANVAS_SIZE = SizeU32(
    width=f64_to_u32_saturating(VIRTUAL_SIZE.width * CANVAS_SCALE),
    height=f64_to_u32_saturating(VIRTUAL_SIZE.height * CANVAS_SCALE),
)


def distance(speed: float, dt: float) -> float:
    """Distance covered at ``speed`` units per second over ``dt`` milliseconds."""
    return speed * dt / 1000.0