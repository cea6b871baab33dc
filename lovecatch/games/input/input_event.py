"""
Input Event - Represents a single input action.

This is a shared module used by all games.
Uses a frozen dataclass for immutability.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models import Point2D


class EventType(Enum):
    """Kinds of input the games understand."""
    START = "start"                # start / restart / replay trigger
    KEY_DOWN = "key_down"          # directional key pressed
    KEY_UP = "key_up"              # directional key released
    POINTER_DOWN = "pointer_down"  # touch or mouse button pressed
    POINTER_MOVE = "pointer_move"  # touch or mouse dragged
    POINTER_UP = "pointer_up"      # touch or mouse button released


class Direction(Enum):
    """Horizontal direction for directional key events."""
    LEFT = "left"
    RIGHT = "right"


_DIRECTIONAL = (EventType.KEY_DOWN, EventType.KEY_UP)
_POSITIONAL = (EventType.POINTER_DOWN, EventType.POINTER_MOVE)


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    All input sources must convert their events to this common format.

    Attributes:
        event_type: What happened
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        direction: Direction for KEY_DOWN / KEY_UP events
        position: Screen position for POINTER_DOWN / POINTER_MOVE events
    """
    event_type: EventType
    timestamp: float
    direction: Optional[Direction] = None
    position: Optional[Point2D] = None

    def __post_init__(self):
        """Validate that the payload matches the event type."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')
        if self.event_type in _DIRECTIONAL and self.direction is None:
            raise ValueError(f'{self.event_type.value} event requires a direction')
        if self.event_type in _POSITIONAL and self.position is None:
            raise ValueError(f'{self.event_type.value} event requires a position')

    def __str__(self) -> str:
        """String representation for debugging."""
        detail = ""
        if self.direction is not None:
            detail = f", dir={self.direction.value}"
        elif self.position is not None:
            detail = f", pos=({self.position.x:.2f}, {self.position.y:.2f})"
        return f"InputEvent(type={self.event_type.value}, t={self.timestamp:.3f}{detail})"
