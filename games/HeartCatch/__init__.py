"""
Heart Catch - catch falling hearts to fill the love meter.

Run standalone with ``love-catch`` or ``python games/HeartCatch/main.py``.
"""
from games.HeartCatch.game_mode import HeartCatchMode

__all__ = ['HeartCatchMode']
