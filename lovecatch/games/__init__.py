"""
Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum shared by the launcher and games
- input: Common input event handling
"""

from lovecatch.games.game_state import GameState
from lovecatch.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
