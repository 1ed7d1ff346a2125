"""The ball and the paddles of a pong court."""

from __future__ import annotations

import math
from typing import Optional

from fancyweb.dom import CanvasContext
from fancyweb.pong_physics import CANVAS_SCALE, VIRTUAL_SIZE, Direction, PointF64, Vec2d, distance
from fancyweb.size import SizeF64

BALL_SIZE = 5.0

PADDLE_SIZE = SizeF64(width=5.0, height=20.0)

PADDLE_SPEED = 200.0
"""Virtual units per second."""


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _fill(context: CanvasContext, top_left: PointF64, width: float, height: float) -> None:
    context.fill_rect(
        _round(CANVAS_SCALE * top_left.x),
        _round(CANVAS_SCALE * top_left.y),
        _round(CANVAS_SCALE * width),
        _round(CANVAS_SCALE * height),
    )


class Ball:
    """A square ball that moves at constant velocity, kept inside the court."""

    def __init__(self, top_left: PointF64, velocity: Vec2d) -> None:
        self._top_left = PointF64(top_left.x, top_left.y)
        self.velocity = velocity

    @property
    def top_left(self) -> PointF64:
        return self._top_left

    def update(self, dt: float) -> None:
        """Move by ``dt`` milliseconds' worth of velocity."""
        max_left = VIRTUAL_SIZE.width - BALL_SIZE
        max_top = VIRTUAL_SIZE.height - BALL_SIZE
        self._top_left = PointF64(
            x=_clamp(self._top_left.x + distance(self.velocity.dx, dt), 0.0, max_left),
            y=_clamp(self._top_left.y + distance(self.velocity.dy, dt), 0.0, max_top),
        )

    def render(self, context: CanvasContext) -> None:
        _fill(context, self._top_left, BALL_SIZE, BALL_SIZE)


class Paddle:
    """A paddle that moves vertically while it has a direction."""

    def __init__(self, top_left: PointF64) -> None:
        self._top_left = PointF64(top_left.x, top_left.y)
        self._direction: Optional[Direction] = None

    @property
    def top_left(self) -> PointF64:
        return self._top_left

    @property
    def direction(self) -> Optional[Direction]:
        return self._direction

    def update(self, dt: float) -> None:
        """Move by ``dt`` milliseconds in the current direction, if any."""
        step = distance(PADDLE_SPEED, dt)
        if self._direction is Direction.UP:
            self._top_left.y = max(self._top_left.y - step, 0.0)
        elif self._direction is Direction.DOWN:
            max_top = VIRTUAL_SIZE.height - PADDLE_SIZE.height
            self._top_left.y = min(self._top_left.y + step, max_top)

    def render(self, context: CanvasContext) -> None:
        _fill(context, self._top_left, PADDLE_SIZE.width, PADDLE_SIZE.height)

    def set_direction(self, direction: Optional[Direction]) -> None:
        self._direction = direction