"""
Input abstraction layer for games.

Provides unified input handling so games see the same events whether the
player uses the keyboard, a mouse or a touch screen.
"""

from lovecatch.games.input.input_event import Direction, EventType, InputEvent
from lovecatch.games.input.input_manager import InputManager

__all__ = ['Direction', 'EventType', 'InputEvent', 'InputManager']
