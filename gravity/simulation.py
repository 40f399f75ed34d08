#!/usr/bin/env python3
"""
Simulation: owns the bodies and the Running/Paused state.

The viewport thread calls step() and render() once per frame; the controls
window and the pointer handlers call the other methods. Everything that reads
or writes the body list or the paused flag holds the re-entrant lock.
"""
import logging
import threading
from typing import Iterable, List

from .constants import BACKGROUND_COLOR, G
from .data_models import Body
from .physics import NBodyPhysics

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(self, bodies: Iterable[Body] = (), gravitational_constant: float = G):
        self.lock = threading.RLock()
        self.bodies: List[Body] = list(bodies)
        self.paused = False
        self.physics = NBodyPhysics(gravitational_constant)
        self.frame = 0

    def add_body(self, body: Body) -> None:
        with self.lock:
            self.bodies.append(body)

    def replace_bodies(self, new_bodies: Iterable[Body]) -> None:
        with self.lock:
            self.bodies = list(new_bodies)
            self.frame = 0
        logger.info("Scene replaced with %d bodies", len(self.bodies))

    def pause(self) -> None:
        with self.lock:
            if not self.paused:
                logger.debug("Paused at frame %d", self.frame)
            self.paused = True

    def resume(self) -> None:
        with self.lock:
            if self.paused:
                logger.debug("Resumed at frame %d", self.frame)
            self.paused = False

    def is_paused(self) -> bool:
        with self.lock:
            return self.paused

    def step(self) -> None:
        """Advance one frame unless paused."""
        with self.lock:
            if self.paused:
                return
            self._advance()

    def step_once(self) -> None:
        """Advance exactly one frame regardless of the paused flag."""
        with self.lock:
            self._advance()

    def _advance(self) -> None:
        self.physics.step(self.bodies)
        self.frame += 1

    def render(self, surface) -> None:
        with self.lock:
            surface.clear(BACKGROUND_COLOR)
            for b in self.bodies:
                b.render(surface)

    def body_count(self) -> int:
        with self.lock:
            return len(self.bodies)
