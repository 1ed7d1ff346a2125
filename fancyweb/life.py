"""The Game of Life app: a universe sized to its canvas, one generation per frame."""

from __future__ import annotations

import argparse
from itertools import product
from typing import Callable, Optional, Sequence

from fancyweb.dom import CanvasContext, Document, Element
from fancyweb.easel import Easel, RenderContext, canvas_size
from fancyweb.layout import showcase
from fancyweb.size import SizeU32
from fancyweb.universe import Cell, Point, Universe

CELL_SIZE = 2
LIVE_COLOR = "hsl(145, 19%, 45%)"  # Dark jade.
TITLE_HTML = "Conway's Game of<br />🦋 Life 🐛"


def draw_cells(context: CanvasContext, universe: Universe) -> None:
    """Fill a square for every live cell."""
    context.begin_path()
    context.fill_style = LIVE_COLOR
    for i, j in product(range(universe.height()), range(universe.width())):
        if universe.at(Point(i, j)) is Cell.LIVE:
            context.fill_rect(j * CELL_SIZE, i * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    context.stroke()


class LifeApp:
    """An easel that starts playing the Game of Life right away."""

    def __init__(self, document: Document, clock: Optional[Callable[[], float]] = None) -> None:
        self.universe = Universe()
        self.generation = 0
        self.easel = Easel.start(document, self._render, clock)

    def _render(self, ctx: RenderContext) -> None:
        is_new = self.universe.height() == 0
        size = canvas_size(ctx.canvas.canvas)
        self.universe.resize(
            SizeU32(width=size.width // CELL_SIZE, height=size.height // CELL_SIZE)
        )
        if is_new:
            self.universe.speckle()
        else:
            self.universe.tick()
        ctx.canvas.clear_rect(0.0, 0.0, float(size.width), float(size.height))
        draw_cells(ctx.canvas, self.universe)
        self.generation += 1
        ctx.caption.text_content = (
            f"{self.universe.width()}x{self.universe.height()} @ {self.generation}"
        )

    def root(self) -> Element:
        return self.easel.root()

    def frame(self) -> bool:
        return self.easel.frame()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the Game of Life and print the page.")
    parser.add_argument("--frames", type=int, default=1, help="animation frames to run")
    args = parser.parse_args(argv)
    document = Document()
    app = showcase(document, TITLE_HTML, LifeApp)
    for _ in range(args.frames):
        app.frame()
    print(document.require_body().to_html())
    return 0