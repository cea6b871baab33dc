"""
Love Catch - a small arcade game framework.

Provides the shared game interface (``lovecatch.games``), input
abstraction (``lovecatch.games.input``) and logging (``lovecatch.logging``)
used by the games in the ``games`` package.
"""

__version__ = "1.0.0"
