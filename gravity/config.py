#!/usr/bin/env python3
"""
Runtime settings read from environment variables.

Physics and drawing tunables live in constants.py; this module only holds the
knobs worth changing without editing code.
"""
import os
from pathlib import Path

from .constants import FPS as DEFAULT_FPS

PROJECT_ROOT = Path(__file__).parent.parent

LOG_LEVEL = os.getenv("GRAVITY_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("GRAVITY_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

FPS = int(os.getenv("GRAVITY_FPS", str(DEFAULT_FPS)))

TEMPLATES_DIR = Path(os.getenv("GRAVITY_TEMPLATES_DIR", PROJECT_ROOT / "templates"))
TEMPLATE = os.getenv("GRAVITY_TEMPLATE", "default")

__all__ = [
    "PROJECT_ROOT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "FPS",
    "TEMPLATES_DIR",
    "TEMPLATE",
]
