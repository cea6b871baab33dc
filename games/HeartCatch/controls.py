"""
HeartCatch - Input aggregation for the basket.

Two independent sources move the basket each frame: held direction keys
push it by a fixed step, and an active pointer or finger pulls it toward
the pointer with exponential smoothing. The result is always clamped to
the playfield.
"""
from dataclasses import dataclass
from typing import Optional

from games.HeartCatch import config
from games.HeartCatch.entities import Player
from lovecatch.games.input import Direction, EventType, InputEvent


@dataclass
class InputState:
    """Held keys and pointer position, read once per simulation step."""
    left: bool = False
    right: bool = False
    pointer_x: Optional[float] = None

    def apply_event(self, event: InputEvent) -> None:
        """Fold one input event into the state. Other event types are ignored."""
        if event.event_type in (EventType.KEY_DOWN, EventType.KEY_UP):
            held = event.event_type == EventType.KEY_DOWN
            if event.direction == Direction.LEFT:
                self.left = held
            elif event.direction == Direction.RIGHT:
                self.right = held
        elif event.event_type in (EventType.POINTER_DOWN, EventType.POINTER_MOVE):
            self.pointer_x = event.position.x
        elif event.event_type == EventType.POINTER_UP:
            self.pointer_x = None

    def release_all(self) -> None:
        self.left = False
        self.right = False
        self.pointer_x = None


def apply_input(player: Player, state: InputState, playfield_width: float) -> None:
    """Move the player for one frame and clamp to the playfield.

    Keys apply first (both may be held and cancel out), then the pointer
    pull, then clamping.
    """
    if state.left:
        player.x -= player.speed
    if state.right:
        player.x += player.speed

    if state.pointer_x is not None:
        target_x = state.pointer_x - player.width / 2
        player.x += (target_x - player.x) * config.POINTER_SMOOTHING

    player.clamp(playfield_width)
