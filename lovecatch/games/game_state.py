"""Common GameState enum for all games.

All games report one of these states through their ``state`` property so
the launcher knows which overlay to show and whether to keep simulating.
"""
from enum import Enum


class GameState(Enum):
    """Coarse game phase.

    States:
        START: Waiting for the first start trigger
        PLAYING: Active gameplay in progress
        GAME_OVER: Game ended in loss (ran out of lives)
        WON: Game ended in success (reached the win threshold)

    Only PLAYING runs the simulation. GAME_OVER and WON are terminal until
    the game is restarted, which returns to PLAYING.
    """
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        """True for GAME_OVER and WON."""
        return self in (GameState.GAME_OVER, GameState.WON)
