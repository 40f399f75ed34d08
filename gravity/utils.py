#!/usr/bin/env python3
"""
General utilities for the Gravity Sandbox.
"""
import random
from typing import Optional, Tuple

from .vector_utils import clamp


def random_color(rng: Optional[random.Random] = None) -> Tuple[int, int, int]:
    """Random opaque RGB color for interactively created bodies."""
    rng = rng or random
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Parse '#rrggbb' (or the short '#rgb' form) into an RGB tuple."""
    s = value.lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"Not a hex color: {value!r}")
    return tuple(int(s[i:i + 2], 16) for i in (0, 2, 4))


def coerce_color(c) -> Optional[Tuple[int, int, int]]:
    """Accept [r, g, b] lists or '#rrggbb' strings; channels are clamped to 0..255."""
    if isinstance(c, str):
        try:
            return hex_to_rgb(c)
        except ValueError:
            return None
    try:
        r, g, b = (int(clamp(int(v), 0, 255)) for v in c[:3])
    except (TypeError, ValueError):
        return None
    return (r, g, b)
