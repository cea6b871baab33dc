"""
Input Manager - Per-frame bridge between an input source and a game.
"""
from typing import List

from lovecatch.games.input.input_event import InputEvent
from lovecatch.games.input.sources.base import InputSource


class InputManager:
    """Drives one input source each frame and hands its events to the game.

    The driver calls ``update(dt)`` once per frame before draining the
    events with ``get_events()``.
    """

    def __init__(self, source: InputSource):
        self._source = source

    def update(self, dt: float) -> None:
        """Let the source collect this frame's input.

        Args:
            dt: Delta time in seconds since last update.
        """
        self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Events collected since the previous call."""
        return self._source.poll_events()
