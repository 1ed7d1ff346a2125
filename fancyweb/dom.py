"""A small in-memory document model and a declarative element builder."""

from __future__ import annotations

import html as _html
import re
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Any, Iterator, NamedTuple, Optional, Union

_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9_.:-]*$")


class DomError(Exception):
    """A document operation failed."""


class NoBodyError(DomError):
    """The document has no body element."""

    def __init__(self) -> None:
        super().__init__("document should have a body element")


def _check_name(kind: str, name: str) -> str:
    if not isinstance(name, str) or not _NAME.match(name):
        raise DomError(f"invalid {kind} name: {name!r}")
    return name.lower()


@dataclass(frozen=True)
class _RawHtml:
    markup: str


class _TextExtractor(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)


def _text_of_markup(markup: str) -> str:
    parser = _TextExtractor()
    parser.feed(markup)
    parser.close()
    return "".join(parser.parts)


Node = Union["Element", str, _RawHtml]


class Element:
    """A document element with attributes and child nodes."""

    def __init__(self, tag: str) -> None:
        self.tag = _check_name("tag", tag)
        self.attributes: dict[str, str] = {}
        self.children: list[Node] = []
        self.parent: Optional[Element] = None

    @property
    def class_name(self) -> str:
        return self.attributes.get("class", "")

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.attributes["class"] = value

    @property
    def text_content(self) -> str:
        parts = []
        for child in self.children:
            if isinstance(child, Element):
                parts.append(child.text_content)
            elif isinstance(child, _RawHtml):
                parts.append(_text_of_markup(child.markup))
            else:
                parts.append(child)
        return "".join(parts)

    @text_content.setter
    def text_content(self, value: Optional[str]) -> None:
        self._replace_children([value] if value else [])

    @property
    def inner_html(self) -> str:
        return "".join(_serialize(child) for child in self.children)

    @inner_html.setter
    def inner_html(self, value: str) -> None:
        self._replace_children([_RawHtml(value)] if value else [])

    def _replace_children(self, nodes: list[Node]) -> None:
        for child in self.children:
            if isinstance(child, Element):
                child.parent = None
        self.children = nodes

    def _detach(self) -> None:
        if self.parent is not None:
            self.parent.children = [c for c in self.parent.children if c is not self]
            self.parent = None

    def append(self, *args: Union[Element, str]) -> None:
        """Append nodes, moving elements out of any previous parent."""
        for node in args:
            if isinstance(node, Element):
                ancestor: Optional[Element] = self
                while ancestor is not None:
                    if ancestor is node:
                        raise DomError("cannot append an element to itself or its descendant")
                    ancestor = ancestor.parent
                node._detach()
                node.parent = self
                self.children.append(node)
            elif isinstance(node, str):
                self.children.append(node)
            else:
                raise TypeError(f"cannot append {type(node).__name__}")

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[_check_name("attribute", name)] = str(value)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name.lower())

    def walk(self) -> Iterator[Element]:
        """Yield this element and all descendant elements in document order."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.walk()

    def to_html(self) -> str:
        attrs = "".join(f' {name}="{_html.escape(value)}"' for name, value in self.attributes.items())
        return f"<{self.tag}{attrs}>{self.inner_html}</{self.tag}>"

    def __repr__(self) -> str:
        return f"<Element {self.tag!r} class={self.class_name!r}>"


def _serialize(node: Node) -> str:
    if isinstance(node, Element):
        return node.to_html()
    if isinstance(node, _RawHtml):
        return node.markup
    return _html.escape(node, quote=False)


class DrawCall(NamedTuple):
    """One recorded drawing operation."""

    name: str
    rect: tuple = ()
    fill_style: Optional[str] = None


class CanvasContext:
    """A 2D drawing context that records the operations performed on it."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self.fill_style = "#000000"
        self.operations: list[DrawCall] = []

    def begin_path(self) -> None:
        self.operations.append(DrawCall("begin_path"))

    def stroke(self) -> None:
        self.operations.append(DrawCall("stroke"))

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.operations.append(DrawCall("fill_rect", (x, y, w, h), self.fill_style))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.operations.append(DrawCall("clear_rect", (x, y, w, h)))

    def clear_log(self) -> None:
        """Forget the recorded operations."""
        self.operations.clear()


class Canvas(Element):
    """A canvas element with a pixel size and a single 2D context."""

    def __init__(self, width: int = 300, height: int = 150) -> None:
        super().__init__("canvas")
        self.width = width
        self.height = height
        self._context: Optional[CanvasContext] = None

    def get_context(self) -> CanvasContext:
        if self._context is None:
            self._context = CanvasContext(self)
        return self._context


class Document:
    """Creates elements and holds the body they are mounted into."""

    def __init__(self) -> None:
        self.body: Optional[Element] = Element("body")

    def create_element(self, spec: Any) -> Element:
        """Create an element from a tag name, or build one from a spec."""
        if isinstance(spec, str):
            tag = _check_name("tag", spec)
            return Canvas() if tag == "canvas" else Element(tag)
        return to_element(spec, self)

    def require_body(self) -> Element:
        if self.body is None:
            raise NoBodyError()
        return self.body


class Tag:
    """An immutable recipe for an element: tag name plus ordered build steps."""

    __slots__ = ("name", "_steps")

    def __init__(self, name: str) -> None:
        self.name = name
        self._steps: tuple = ()

    def _with(self, step: tuple) -> Tag:
        tag = Tag(self.name)
        tag._steps = self._steps + (step,)
        return tag

    def class_(self, name: str) -> Tag:
        return self._with(("class", name))

    def attr(self, name: str, value: str) -> Tag:
        return self._with(("attr", name, value))

    def text(self, text: str) -> Tag:
        return self._with(("text", text))

    def html(self, html: str) -> Tag:
        return self._with(("html", html))

    def child(self, *args: Any) -> Tag:
        return self._with(("child", args))

    def to_element(self, document: Document) -> Element:
        element = document.create_element(self.name)
        for step in self._steps:
            match step:
                case ("class", name):
                    element.class_name = name
                case ("attr", name, value):
                    element.set_attribute(name, value)
                case ("text", text):
                    element.text_content = text
                case ("html", markup):
                    element.inner_html = markup
                case ("child", specs):
                    element.append(*(to_element(spec, document) for spec in specs))
        return element

    def __repr__(self) -> str:
        return f"Tag({self.name!r}, steps={len(self._steps)})"


def to_element(spec: Any, document: Document) -> Element:
    """Return an element for a spec: elements as they are, builders built."""
    if isinstance(spec, Element):
        return spec
    build = getattr(spec, "to_element", None)
    if build is None:
        raise TypeError(f"cannot make an element from {type(spec).__name__}")
    return build(document)


A = Tag("a")
BUTTON = Tag("button")
CANVAS = Tag("canvas")
CAPTION = Tag("caption")
H1 = Tag("h1")
H2 = Tag("h2")
DIV = Tag("div")
HEADER = Tag("header")
LI = Tag("li")
MAIN = Tag("main")
NAV = Tag("nav")
SPAN = Tag("span")
P = Tag("p")
UL = Tag("ul")