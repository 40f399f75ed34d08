#!/usr/bin/env python3
"""
Immutable 2D vector value used throughout the app.
"""
import math
from dataclasses import dataclass


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


@dataclass(frozen=True)
class Vector2:
    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> "Vector2":
        return Vector2(self.x * s, self.y * s)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def unit(self) -> "Vector2":
        """
        Direction of this vector with length 1.

        Coincident bodies exert no force on each other, so a zero-length vector
        has the zero vector as its direction.
        """
        l = self.length()
        if l == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / l, self.y / l)

