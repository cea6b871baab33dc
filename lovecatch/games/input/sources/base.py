"""
Input source interface.

A source turns device input (keyboard, mouse, touch) into InputEvents.
"""
from abc import ABC, abstractmethod
from typing import List

from lovecatch.games.input.input_event import InputEvent


class InputSource(ABC):
    """Collects device input once per frame and queues it as InputEvents."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Read pending device input into the queue."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Drain and return the queued events, oldest first."""
