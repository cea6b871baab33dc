"""
Input source implementations.
"""

from lovecatch.games.input.sources.base import InputSource
from lovecatch.games.input.sources.pygame_source import PygameInputSource

__all__ = ['InputSource', 'PygameInputSource']
