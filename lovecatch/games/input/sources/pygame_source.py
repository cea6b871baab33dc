"""
Pygame Input Source - Keyboard, mouse and touch input.

This is a shared module used by all games.
"""
import time
from typing import Dict, List, Optional

import pygame

from models import Point2D
from lovecatch.games.input.input_event import Direction, EventType, InputEvent
from lovecatch.games.input.sources.base import InputSource


KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


class PygameInputSource(InputSource):
    """Converts pygame keyboard, mouse and finger events into InputEvents.

    The mouse acts like a finger: the pointer is active only while the
    left button is held. Touch follows the first finger down; other
    fingers are ignored until it lifts. Finger coordinates arrive
    normalized, so the source needs the current window size to map them
    to pixels. Events it does not consume are re-posted to the pygame
    event queue for the main loop.
    """

    def __init__(self, screen_width: int = 1280, screen_height: int = 720):
        self._event_queue: List[InputEvent] = []
        self._finger_id: Optional[int] = None
        self.screen_width = screen_width
        self.screen_height = screen_height

    @property
    def active_finger(self) -> Optional[int]:
        """Id of the finger steering the pointer, if any."""
        return self._finger_id

    def set_screen_size(self, width: int, height: int) -> None:
        """Update the size used to map finger coordinates."""
        self.screen_width = width
        self.screen_height = height

    def release(self) -> None:
        """Forget the tracked finger (e.g. on focus loss)."""
        self._finger_id = None

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect input."""
        passthrough = []
        for event in pygame.event.get():
            converted = self.convert(event)
            if converted is None:
                passthrough.append(event)
            else:
                self._event_queue.append(converted)

        # Re-post non-input events for the main loop to handle
        for event in passthrough:
            pygame.event.post(event)

    def convert(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """Convert one pygame event, or return None if it is not game input."""
        now = time.monotonic()

        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            if event.type == pygame.KEYDOWN and event.key in START_KEYS:
                return InputEvent(event_type=EventType.START, timestamp=now)
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is None:
                return None
            event_type = EventType.KEY_DOWN if event.type == pygame.KEYDOWN else EventType.KEY_UP
            return InputEvent(event_type=event_type, timestamp=now, direction=direction)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._pointer(EventType.POINTER_DOWN, now, *event.pos)
        if event.type == pygame.MOUSEMOTION and event.buttons[0]:
            return self._pointer(EventType.POINTER_MOVE, now, *event.pos)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return InputEvent(event_type=EventType.POINTER_UP, timestamp=now)

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            return self._convert_finger(event, now)

        return None

    def _convert_finger(self, event: pygame.event.Event, now: float) -> Optional[InputEvent]:
        if event.type == pygame.FINGERDOWN:
            if self._finger_id is not None:
                return None
            self._finger_id = event.finger_id
            event_type = EventType.POINTER_DOWN
        elif event.finger_id != self._finger_id:
            return None
        elif event.type == pygame.FINGERUP:
            self._finger_id = None
            return InputEvent(event_type=EventType.POINTER_UP, timestamp=now)
        else:
            event_type = EventType.POINTER_MOVE

        return self._pointer(
            event_type, now,
            event.x * self.screen_width,
            event.y * self.screen_height,
        )

    @staticmethod
    def _pointer(event_type: EventType, now: float, x: float, y: float) -> InputEvent:
        return InputEvent(
            event_type=event_type,
            timestamp=now,
            position=Point2D(x=float(x), y=float(y)),
        )
