"""Pong game state and the overlay that shows it."""

from __future__ import annotations

from typing import Optional

from fancyweb.dom import DIV, SPAN, CanvasContext, Document, Element
from fancyweb.layout import IVORY
from fancyweb.lcg import LinearCongruentialGenerator
from fancyweb.pong_physics import CANVAS_SIZE, VIRTUAL_SIZE, Direction, PointF64, State, Vec2d
from fancyweb.pong_pieces import BALL_SIZE, PADDLE_SIZE, Ball, Paddle
from fancyweb.size import SizeF64

PADDING = PADDLE_SIZE
"""Initial gap between paddles and court edges."""

COURT_COLOR = "rgb(40, 45, 52)"
BALL_COLOR = IVORY

SCORE_MAX = 0xFFFF
INITIAL_SPEED = 100.0
INITIAL_DY_BOUND = 50


def _truncated_remainder(value: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(value) % divisor
    return remainder if value >= 0 else -remainder


class Game:
    """Score, paddles and ball of one game of pong."""

    def __init__(self, seed: int = 0) -> None:
        random = LinearCongruentialGenerator(seed)
        self._state = State.START
        self._score = (0, 0)
        self._paddles = (
            Paddle(PointF64(x=PADDING.width, y=PADDING.height)),
            Paddle(
                PointF64(
                    x=VIRTUAL_SIZE.width - PADDING.width - PADDLE_SIZE.width,
                    y=VIRTUAL_SIZE.height - PADDING.height - PADDLE_SIZE.height,
                )
            ),
        )
        dx = INITIAL_SPEED if random.next_bool() else -INITIAL_SPEED
        dy = float(_truncated_remainder(random.next_i32(), INITIAL_DY_BOUND))
        self._ball = Ball(
            PointF64(
                x=(VIRTUAL_SIZE.width - BALL_SIZE) / 2.0,
                y=(VIRTUAL_SIZE.height - BALL_SIZE) / 2.0,
            ),
            Vec2d(dx=dx, dy=dy),
        )
        self._random = random

    @classmethod
    def from_seed(cls, seed: int) -> Game:
        return cls(seed)

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return self._paddles

    def start(self) -> bool:
        """Begin play; return False if the game was already in play."""
        previous, self._state = self._state, State.PLAY
        return previous is State.START

    def size(self) -> SizeF64:
        return VIRTUAL_SIZE

    def state(self) -> State:
        return self._state

    def score(self) -> tuple[int, int]:
        return self._score

    def player1_move(self, direction: Optional[Direction]) -> None:
        self._paddles[0].set_direction(direction)

    def player2_move(self, direction: Optional[Direction]) -> None:
        self._paddles[1].set_direction(direction)

    def player1_score(self) -> None:
        first, second = self._score
        if first >= SCORE_MAX:
            raise OverflowError("score overflow")
        self._score = (first + 1, second)

    def player2_score(self) -> None:
        first, second = self._score
        if second >= SCORE_MAX:
            raise OverflowError("score overflow")
        self._score = (first, second + 1)

    def update(self, dt: Optional[float]) -> None:
        """Advance by ``dt`` milliseconds; nothing happens when it is unknown."""
        if dt is None:
            return
        for paddle in self._paddles:
            paddle.update(dt)
        if self._state is State.PLAY:
            self._ball.update(dt)

    def render(self, context: CanvasContext) -> None:
        context.begin_path()
        context.fill_style = COURT_COLOR
        context.fill_rect(0.0, 0.0, float(CANVAS_SIZE.width), float(CANVAS_SIZE.height))
        context.fill_style = BALL_COLOR
        self._ball.render(context)
        for paddle in self._paddles:
            paddle.render(context)
        context.stroke()


class Glass:
    """Game state and score shown in front of the canvas."""

    def __init__(self, document: Document) -> None:
        self._state = SPAN.class_("pong-hello").to_element(document)
        self._score = (
            SPAN.class_("pong-score__span").to_element(document),
            SPAN.class_("pong-score__span").to_element(document),
        )
        self._root = (
            DIV.class_("pong-glass")
            .child(self._state, SPAN.class_("pong-score").child(*self._score))
            .to_element(document)
        )

    def set_state(self, state: State) -> None:
        self._state.text_content = f"Hello, {state} state."

    def set_score(self, score: tuple[int, int]) -> None:
        for element, points in zip(self._score, score):
            element.text_content = str(points)

    def root(self) -> Element:
        return self._root