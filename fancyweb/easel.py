"""A canvas with a caption, an FPS counter and a play/pause control."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from fancyweb.dom import CANVAS, CAPTION, DIV, Canvas, CanvasContext, Document, Element
from fancyweb.pause import PauseButton, PauseState
from fancyweb.perf import Fps, default_clock
from fancyweb.size import SizeU32

Clock = Callable[[], float]


class EaselError(Exception):
    """The easel could not be assembled."""


class Stopwatch:
    """Measures the time between successive readings."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._last_ms: Optional[float] = None

    def delta_ms(self) -> Optional[float]:
        """Milliseconds since the previous call; None on the first call."""
        now = self._clock()
        last, self._last_ms = self._last_ms, now
        return None if last is None else now - last


@dataclass(frozen=True)
class RenderContext:
    """What the render callback receives on each frame."""

    canvas: CanvasContext
    caption: Element
    delta_ms: Optional[float] = None


def canvas_size(canvas: Canvas) -> SizeU32:
    return SizeU32(height=canvas.height, width=canvas.width)


class Easel:
    """Holds a canvas and drives a render callback once per animation frame.

    Frames are requested once the easel is first played; each call to
    :meth:`frame` then runs one frame, rendering only while playing.
    """

    def __init__(
        self,
        document: Document,
        render: Callable[[RenderContext], None],
        clock: Optional[Clock] = None,
    ) -> None:
        clock = clock if clock is not None else default_clock
        canvas = CANVAS.class_("easel-canvas").to_element(document)
        if not isinstance(canvas, Canvas):
            raise EaselError("canvas should have a 2D drawing context")
        self._canvas = canvas
        self._context = canvas.get_context()
        self._caption = CAPTION.to_element(document)
        self._fps = Fps(document, clock)
        self._watch = Stopwatch(clock)
        self._render = render
        self._is_paused = True
        self._frame_requested = False
        self._cancelled = False
        self._pause = PauseButton(document, self._handle_pause)
        self._root = DIV.child(
            canvas,
            DIV.class_("easel-controls").child(self._pause.root()),
            DIV.class_("easel-status").child(self._caption, self._fps.root()),
        ).to_element(document)

    @classmethod
    def start(
        cls,
        document: Document,
        render: Callable[[RenderContext], None],
        clock: Optional[Clock] = None,
    ) -> Easel:
        """Create an easel and begin playing at once."""
        easel = cls(document, render, clock)
        easel.play()
        return easel

    def _handle_pause(self, state: PauseState) -> None:
        if self._cancelled:
            return
        self._frame_requested = True
        self._is_paused = state is PauseState.PAUSE

    def play(self) -> None:
        """Toggle playback, as a click on the pause button would."""
        self._pause.click()

    def pause_button(self) -> Element:
        return self._pause.root()

    def is_paused(self) -> bool:
        return self._pause.is_paused()

    def resize_canvas(self, size: SizeU32) -> None:
        self._canvas.width = size.width
        self._canvas.height = size.height

    def borrow_canvas_context(self, f: Callable[[CanvasContext], object]) -> None:
        """Run ``f`` with the drawing context, for work outside the render callback."""
        f(self._context)

    def frame(self) -> bool:
        """Run one animation frame; return False if none was requested."""
        if self._cancelled or not self._frame_requested:
            return False
        self._fps.tick()
        delta_ms = self._watch.delta_ms()
        if not self._is_paused:
            self._render(RenderContext(self._context, self._caption, delta_ms))
        return True

    def cancel(self) -> None:
        """Stop requesting frames for good."""
        self._cancelled = True
        self._frame_requested = False

    def root(self) -> Element:
        return self._root

    def __enter__(self) -> Easel:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()