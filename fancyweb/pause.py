"""A play/pause toggle button."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from fancyweb.dom import BUTTON, Document, Element

_PLAY_GLYPH = "\u23f5\ufe0e"
_PAUSE_GLYPH = "\u23f8\ufe0e"


class PauseState(Enum):
    PAUSE = "pause"
    PLAY = "play"

    def text(self) -> str:
        """The label for a button in this state.

        The label shows what the button will do next, so a paused button
        shows "play" and a playing one shows "pause".
        """
        return _PLAY_GLYPH if self is PauseState.PAUSE else _PAUSE_GLYPH

    def toggled(self) -> PauseState:
        return PauseState.PLAY if self is PauseState.PAUSE else PauseState.PAUSE


class PauseButton:
    """A button that flips between play and pause, reporting each change."""

    def __init__(self, document: Document, on_click: Callable[[PauseState], None]) -> None:
        self._state = PauseState.PAUSE
        self._on_click = on_click
        self._button = (
            BUTTON.class_("easel-pause")
            .attr("title", "Play/Pause")
            .text(self._state.text())
            .to_element(document)
        )

    @property
    def state(self) -> PauseState:
        return self._state

    def click(self) -> None:
        """Toggle the state, relabel the button and notify the listener."""
        self._state = self._state.toggled()
        self._button.text_content = self._state.text()
        self._on_click(self._state)

    def is_paused(self) -> bool:
        return self._state is PauseState.PAUSE

    def root(self) -> Element:
        return self._button