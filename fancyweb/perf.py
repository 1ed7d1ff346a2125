"""A frames-per-second counter averaged over the most recent frames."""

from __future__ import annotations

import time
from typing import Callable, Optional

from fancyweb.dom import SPAN, Document, Element

FRAMES = 60
"""The number of frames over which to average."""


def default_clock() -> float:
    """Milliseconds from a monotonic clock."""
    return time.perf_counter() * 1000.0


class Fps:
    """Tracks frame times and shows the average rate in a span."""

    def __init__(self, document: Document, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else default_clock
        self._last = self._clock()
        # The non-breaking space keeps the span from collapsing to zero height.
        self._root = SPAN.class_("perf-fps").html("&nbsp;").to_element(document)
        self._deltas = [0.0] * FRAMES
        self._count = 0
        self._sum = 0.0

    def tick(self) -> None:
        """Record a frame and refresh the display once enough time has passed."""
        now = self._clock()
        if self._last != 0.0:
            delta = now - self._last
            index = self._count % FRAMES
            self._sum += delta - self._deltas[index]
            self._deltas[index] = delta
            if self._sum > 1000.0 and self._count >= FRAMES:
                fps = FRAMES * 1000.0 / self._sum
                self._root.text_content = f"{fps:.1f} fps"
        self._count += 1
        self._last = now

    def root(self) -> Element:
        return self._root