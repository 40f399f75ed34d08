#!/usr/bin/env python3
"""
Shared constants for the Gravity Sandbox (screen pixels and frames, not SI).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Physics controls
G = 0.005  # simulation-tuned, pixels^3 / (mass * frame^2)
DENSITY = 1.0  # mass per unit volume of a body
LAUNCH_SPEED = 3.0  # pixels per frame of a freshly launched body

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
VIEW_MARGIN = (10, 180)  # space left around the window when fitting the display
FPS = 60
BACKGROUND_COLOR = (0, 0, 0)
SMALL_BODY_RADIUS = 15  # bodies below this radius are drawn in SMALL_BODY_COLOR
SMALL_BODY_COLOR = (255, 0, 0)
LARGE_BODY_COLOR = (255, 240, 0)
BODY_STROKE_COLOR = (68, 68, 0)
AIM_LINE_COLOR = (255, 0, 255)
HUD_TEXT_COLOR = (200, 200, 200)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
