#!/usr/bin/env python3
"""
Data models for the Gravity Sandbox.

This module defines the Body shared between physics, rendering, and the
pointer-driven body creation.

Units and usage
- position is in screen pixels, velocity in pixels per frame, radius in pixels.
- mass is derived from the radius as if the body were a sphere of DENSITY;
  it is never set directly.
- Access to committed Body instances is coordinated by Simulation using a lock.
"""
import math
from typing import Optional, Tuple

from .constants import (
    AIM_LINE_COLOR,
    BODY_STROKE_COLOR,
    DENSITY,
    LARGE_BODY_COLOR,
    SMALL_BODY_COLOR,
    SMALL_BODY_RADIUS,
)
from .vector_utils import Vector2

Color = Tuple[int, int, int]


def sphere_mass(radius: float, density: float = DENSITY) -> float:
    """Mass of a sphere of the given radius: density * 4/3 * pi * r^3."""
    return density * (4.0 / 3.0) * math.pi * radius ** 3


class Body:
    """
    A circular mass in the simulation.

    Fields:
    - position: center (x, y) in pixels
    - velocity: pixels per frame
    - radius: pixels; change it through set_radius so mass follows
    - mass: derived from radius
    - interactive: True while the body is being sized/aimed by the pointer
    - fill_color / stroke_color: RGB tuples used for rendering
    """

    def __init__(self, x: float, y: float, radius: float,
                 velocity: Optional[Vector2] = None,
                 fill_color: Optional[Color] = None):
        self.position = Vector2(float(x), float(y))
        self.velocity = velocity if velocity is not None else Vector2(0.0, 0.0)
        self.radius = 0.0
        self.mass = 0.0
        self.set_radius(radius)
        if fill_color is None:
            fill_color = SMALL_BODY_COLOR if radius < SMALL_BODY_RADIUS else LARGE_BODY_COLOR
        self.fill_color = fill_color
        self.stroke_color = BODY_STROKE_COLOR
        self.interactive = False

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def set_radius(self, radius: float) -> None:
        self.radius = max(0.0, float(radius))
        self.mass = sphere_mass(self.radius)

    def vector_to(self, other: "Body") -> Vector2:
        """Displacement from this body's center to the other's."""
        return other.position - self.position

    def render(self, surface) -> None:
        surface.fill_circle(self.position, self.radius, self.fill_color, self.stroke_color)
        if self.interactive:
            surface.line(self.position, self.position + self.velocity, AIM_LINE_COLOR)

    def describe(self) -> str:
        return (f"Body(C({self.x}, {self.y}), radius: {self.radius}, "
                f"velocity: {self.velocity.x}, {self.velocity.y})")

    def __repr__(self) -> str:
        return self.describe()
