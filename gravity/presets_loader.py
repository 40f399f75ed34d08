#!/usr/bin/env python3
"""
Scene template loading utilities.

A scene template is a JSON file in templates/ listing the bodies to spawn
when the simulation starts or when a scene is picked in the controls window.

Schema
======
Template JSON (templates/*.json):
{
  "name": "Human-friendly scene name",
  "description": "Optional description",
  "bodies": [
    {
      "x": 300, "y": 300,          # center, pixels
      "radius": 50,                # pixels; mass is derived from it
      "velocity": [0.0, 0.0],      # optional, pixels per frame
      "color": [255, 240, 0]       # optional, [r, g, b] or "#rrggbb"
    }
  ]
}

Users can add their own JSON files into this folder and they'll be picked up by the loader.
"""
import json
import logging
import os
from typing import List, Optional, Tuple

from .config import TEMPLATES_DIR
from .data_models import Body
from .utils import coerce_color
from .vector_utils import Vector2

logger = logging.getLogger(__name__)


def _read_json(path: str) -> Optional[dict]:
  try:
    with open(path, "r", encoding="utf-8") as f:
      data = json.load(f)
  except (OSError, ValueError) as exc:
    logger.warning("Could not read template %s: %s", path, exc)
    return None
  if not isinstance(data, dict):
    logger.warning("Template %s is not a JSON object", path)
    return None
  return data


def _body_from_dict(b: dict) -> Body:
  vel = b.get("velocity") or (0.0, 0.0)
  color = coerce_color(b["color"]) if "color" in b else None
  return Body(
    float(b["x"]),
    float(b["y"]),
    float(b["radius"]),
    velocity=Vector2(float(vel[0]), float(vel[1])),
    fill_color=color,
  )


def default_scene() -> List[Body]:
  """The built-in scene: a large central body and three smaller ones in flight."""
  return [
    Body(300, 300, 50),
    Body(100, 200, 10, Vector2(1.2, -2)),
    Body(290, 100, 14.99, Vector2(4, 0)),
    Body(290, 500, 4, Vector2(4, 1)),
  ]


def list_templates(templates_dir=TEMPLATES_DIR) -> List[Tuple[str, str]]:
  """Return list of (template_name, display_name) for available templates."""
  items: List[Tuple[str, str]] = []
  if not os.path.isdir(templates_dir):
    return items
  for fn in sorted(os.listdir(templates_dir)):
    if not fn.lower().endswith(".json"):
      continue
    stem = os.path.splitext(fn)[0]
    data = _read_json(os.path.join(templates_dir, fn)) or {}
    items.append((stem, data.get("name") or stem))
  return items


def load_template(name: str, templates_dir=TEMPLATES_DIR) -> Optional[List[Body]]:
  """
  Load a template by name (file stem, ".json" optional).
  Returns the bodies, or None if the file is missing or unreadable.
  Individual malformed bodies are skipped with a warning.
  """
  file_name = name if name.lower().endswith(".json") else name + ".json"
  path = os.path.join(templates_dir, file_name)
  data = _read_json(path)
  if data is None:
    return None
  bodies: List[Body] = []
  for i, b in enumerate(data.get("bodies", [])):
    try:
      bodies.append(_body_from_dict(b))
    except (KeyError, IndexError, TypeError, ValueError) as exc:
      logger.warning("Skipping body %d in %s: %r", i, file_name, exc)
  logger.info("Loaded template %s with %d bodies", data.get("name") or name, len(bodies))
  return bodies


def load_scene(name: str, templates_dir=TEMPLATES_DIR) -> List[Body]:
  """Bodies of the named template, falling back to default_scene()."""
  bodies = load_template(name, templates_dir)
  if bodies is None:
    logger.warning("Template %r unavailable, using the built-in scene", name)
    return default_scene()
  return bodies
