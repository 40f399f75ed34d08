#!/usr/bin/env python3
"""
Drawing surface adapter.

Bodies and the simulation draw through a small surface interface so the core
never touches pygame directly:

- clear(color): fill the whole surface
- fill_circle(center, radius, fill, stroke): filled disc with an outline
- line(start, end, color): a line segment

PygameCanvas implements it on top of a pygame Surface.
"""
from typing import Optional, Tuple

import pygame
from pygame import gfxdraw

from .constants import SAFE_COORD_LIMIT
from .vector_utils import Vector2


def _safe_point(pt: Vector2) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt.x), int(pt.y)
    except (OverflowError, ValueError):
        # inf / nan positions after a close encounter
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class PygameCanvas:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self, color) -> None:
        self.surface.fill(color)

    def fill_circle(self, center: Vector2, radius: float, fill, stroke) -> None:
        c = _safe_point(center)
        r = int(round(radius))
        if c is None or r <= 0 or r > SAFE_COORD_LIMIT:
            return
        gfxdraw.filled_circle(self.surface, c[0], c[1], r, fill)
        gfxdraw.aacircle(self.surface, c[0], c[1], r, stroke)

    def line(self, start: Vector2, end: Vector2, color) -> None:
        a = _safe_point(start)
        b = _safe_point(end)
        if a and b:
            pygame.draw.aaline(self.surface, color, a, b)
