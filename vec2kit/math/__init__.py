"""2D vector math."""

from .constants import SQRT1_2, SQRT2
from .vec2 import Vec2

__all__ = [
    "SQRT1_2",
    "SQRT2",
    "Vec2",
]
