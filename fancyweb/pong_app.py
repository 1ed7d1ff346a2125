"""The pong app: a game on an easel, driven by the keyboard."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from fancyweb.dom import DIV, SPAN, Document, Element, Tag
from fancyweb.easel import Easel, RenderContext
from fancyweb.layout import showcase
from fancyweb.perf import default_clock
from fancyweb.pong_game import Game, Glass
from fancyweb.pong_physics import CANVAS_SIZE, Direction
from fancyweb.size import f64_to_u32_saturating

TITLE_HTML = "🏓 Pong 🕹️"

Clock = Callable[[], float]


def random_game(clock: Optional[Clock]) -> Game:
    """A game seeded from the clock, or from zero if there is no clock."""
    seed = f64_to_u32_saturating(clock()) if clock is not None else 0
    return Game.from_seed(seed)


def _display(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _help() -> Tag:
    row = DIV.class_("pong-help-row")

    def key(name: str) -> Tag:
        return SPAN.class_("pong-help-key").text(name)

    return DIV.class_("pong-help").child(
        DIV.class_("pong-help-column").child(row.child(key("w")), row.child(key("s"))),
        DIV.class_("pong-help-column pong-help-game").child(
            row.child(key("b"), SPAN.text(" to begin")),
            row.child(key("p"), SPAN.text(" to pause")),
        ),
        DIV.class_("pong-help-column").child(row.child(key("↑")), row.child(key("↓"))),
    )


class PongApp:
    """A playing easel with a score overlay and key bindings."""

    def __init__(self, document: Document, clock: Optional[Clock] = None) -> None:
        self._clock = clock if clock is not None else default_clock
        self._generation = 0
        self._game = random_game(self._clock)
        self._glass = Glass(document)
        self._glass.set_state(self._game.state())
        self._glass.set_score(self._game.score())
        self._easel = Easel(document, self._render, self._clock)
        self._easel.resize_canvas(CANVAS_SIZE)
        self._easel.play()
        self._root = (
            DIV.class_("pong")
            .child(self._easel.root(), self._glass.root(), _help())
            .to_element(document)
        )

    @property
    def game(self) -> Game:
        return self._game

    @property
    def easel(self) -> Easel:
        return self._easel

    def _render(self, context: RenderContext) -> None:
        game = self._game
        game.update(context.delta_ms)
        game.render(context.canvas)
        self._glass.set_state(game.state())
        self._glass.set_score(game.score())
        self._generation += 1
        size = game.size()
        context.caption.text_content = (
            f"{_display(size.width)}x{_display(size.height)} @ {self._generation}"
        )

    def keydown(self, key: str) -> bool:
        """Handle a key press; return True if the key was used."""
        # "p" pauses the easel itself; while paused, the game ignores all else.
        if key == "p":
            self._easel.play()
            return True
        if self._easel.is_paused():
            return False
        match key:
            case "b":
                if not self._game.start():
                    self._game = random_game(self._clock)
            case "1":
                self._game.player1_score()
            case "2":
                self._game.player2_score()
            case "s":
                self._game.player1_move(Direction.DOWN)
            case "w":
                self._game.player1_move(Direction.UP)
            case "ArrowDown":
                self._game.player2_move(Direction.DOWN)
            case "ArrowUp":
                self._game.player2_move(Direction.UP)
            case _:
                return False
        return True

    def keyup(self, key: str) -> bool:
        """Handle a key release; return True if the key was used."""
        match key:
            case "s" | "w":
                self._game.player1_move(None)
            case "ArrowDown" | "ArrowUp":
                self._game.player2_move(None)
            case _:
                return False
        return True

    def frame(self) -> bool:
        return self._easel.frame()

    def root(self) -> Element:
        return self._root


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run pong and print the page.")
    parser.add_argument("--frames", type=int, default=1, help="animation frames to run")
    parser.add_argument("--keys", nargs="*", default=[], help="keys to press before running")
    args = parser.parse_args(argv)
    document = Document()
    app = showcase(document, TITLE_HTML, PongApp)
    for key in args.keys:
        app.keydown(key)
    for _ in range(args.frames):
        app.frame()
    print(document.require_body().to_html())
    return 0