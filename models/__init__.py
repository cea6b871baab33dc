"""
Shared models library for Love Catch.

This package provides the Pydantic data models used across the game:
- Primitives: Basic geometric and color types (Point2D, Color, Rectangle, Resolution)

Usage:
    >>> from models import Point2D, Resolution
    >>> from models.primitives import Color, Rectangle
"""

from .primitives import (
    Point2D,
    Resolution,
    Color,
    Rectangle,
)

__all__ = [
    "Point2D",
    "Resolution",
    "Color",
    "Rectangle",
]
