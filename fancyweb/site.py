"""The index page and the small sample pages."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from fancyweb.dom import A, LI, NAV, P, UL, Document, Element, Tag
from fancyweb.easel import Easel, RenderContext
from fancyweb.layout import showcase

INDEX_TITLE_HTML = "Flights of Fancy in<br />🚀 the Browser 🧐"
SAMPLE_TITLE_HTML = "Sample"
COUNTER_TITLE_HTML = "Easel"
_TUTORIAL_NOTE = "Adapted from a classic tutorial"


def index_nav() -> Tag:
    """Navigation links to the apps."""
    return NAV.child(
        UL.child(
            LI.class_("index-nav__item index-nav__life").child(
                A.attr("href", "/life").attr("title", _TUTORIAL_NOTE).text("Life")
            ),
            LI.class_("index-nav__item index-nav__primes").child(
                A.attr("href", "/primes").attr("title", _TUTORIAL_NOTE).text("Primes")
            ),
        )
    )


def build_index(document: Document) -> Element:
    return showcase(document, INDEX_TITLE_HTML, index_nav().to_element)


def build_sample(document: Document) -> Element:
    return showcase(document, SAMPLE_TITLE_HTML, P.text("Your App Here").to_element)


def build_counter(document: Document, clock: Optional[Callable[[], float]] = None) -> Easel:
    """An easel whose caption counts the frames it has rendered."""
    count = 0

    def render(context: RenderContext) -> None:
        nonlocal count
        count += 1
        context.caption.text_content = f"count={count}"

    def create(doc: Document) -> Easel:
        easel = Easel(doc, render, clock)
        easel.play()
        return easel

    return showcase(document, COUNTER_TITLE_HTML, create)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build a page and print it.")
    parser.add_argument("page", nargs="?", default="index", choices=["index", "sample", "counter"])
    parser.add_argument("--frames", type=int, default=1, help="frames to run on the counter")
    args = parser.parse_args(argv)
    document = Document()
    if args.page == "index":
        build_index(document)
    elif args.page == "sample":
        build_sample(document)
    else:
        easel = build_counter(document)
        for _ in range(args.frames):
            easel.frame()
    print(document.require_body().to_html())
    return 0