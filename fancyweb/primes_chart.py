"""The prime factorization app: one integer per frame, drawn as a histogram."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from fancyweb.dom import Document, Element
from fancyweb.easel import Easel, RenderContext
from fancyweb.layout import showcase
from fancyweb.primes import FillStyle, Histogram, Sieve

TITLE_HTML = "🧱 Prime 🏗 <br />Factorization"


class Chart:
    """An easel that counts up and draws each number's prime exponents."""

    def __init__(self, document: Document, clock: Optional[Callable[[], float]] = None) -> None:
        self._sieve = Sieve()
        self._histogram = Histogram()
        self._easel = Easel(document, self._render, clock)

    @property
    def histogram(self) -> Histogram:
        return self._histogram

    def _render(self, context: RenderContext) -> None:
        self._histogram.clear(context.canvas)
        self._histogram.incr(self._sieve)
        self._histogram.fill(context.canvas, FillStyle.COLOR)
        value = self._histogram.value()
        factors = list(self._sieve.factors(value))
        context.caption.text_content = f"{value}: {factors}"

    def play(self) -> None:
        self._easel.play()

    def frame(self) -> bool:
        return self._easel.frame()

    def root(self) -> Element:
        return self._easel.root()


def _playing_chart(document: Document) -> Chart:
    chart = Chart(document)
    chart.play()
    return chart


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the prime chart and print the page.")
    parser.add_argument("--frames", type=int, default=1, help="animation frames to run")
    args = parser.parse_args(argv)
    document = Document()
    chart = showcase(document, TITLE_HTML, _playing_chart)
    for _ in range(args.frames):
        chart.frame()
    print(document.require_body().to_html())
    return 0