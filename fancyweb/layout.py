"""Page scaffolding shared by every app: a header and a titled main area."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from fancyweb.dom import A, H1, HEADER, MAIN, Document, Element

IVORY = "hsl(60, 100%, 97%)"
PEWTER = "hsl(159, 7%, 57%)"
FG = PEWTER

SITE_TITLE = "💭 Flights of Fancy"

App = TypeVar("App")


def _root_of(app: Any) -> Element:
    return app if isinstance(app, Element) else app.root()


def showcase(document: Document, title_html: str, create_app: Callable[[Document], App]) -> App:
    """Fill the document body with a header and a main area holding the app.

    The app is either an element or an object whose ``root()`` returns one.
    """
    body = document.require_body()
    app = create_app(document)
    header = (
        HEADER.class_("layout-header")
        .child(A.attr("href", "/").text(SITE_TITLE))
        .to_element(document)
    )
    main = (
        MAIN.class_("layout-main")
        .child(H1.class_("layout-main__title").html(title_html), _root_of(app))
        .to_element(document)
    )
    body.append(header, main)
    return app