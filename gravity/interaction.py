#!/usr/bin/env python3
"""
Pointer-driven creation of new bodies.

A press on the viewport pauses the simulation and drops a zero-radius body at
the pointer. Dragging sizes it; releasing freezes the radius. The next drag
aims it, drawing the pending velocity as a line; the next release launches it
at LAUNCH_SPEED in the aimed direction and resumes the simulation.

State is one of Idle, Sizing(body) or Aiming(body). The in-progress body only
lives inside the Sizing/Aiming value, so nothing keeps a reference to it once
it has been handed to the Simulation.

A release while the radius is still 0 leaves the controller in Sizing; the
simulation stays paused until a later drag gives the body a size.

Entering Sizing and leaving Aiming hold the Simulation lock, so a pause
toggle from another thread sees the controller state and the paused flag
change together.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .constants import LAUNCH_SPEED
from .data_models import Body
from .simulation import Simulation
from .utils import random_color
from .vector_utils import Vector2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Sizing:
    body: Body


@dataclass(frozen=True)
class Aiming:
    body: Body


State = Union[Idle, Sizing, Aiming]


def _as_vector(pos) -> Vector2:
    if isinstance(pos, Vector2):
        return pos
    return Vector2(float(pos[0]), float(pos[1]))


class InteractionController:
    def __init__(self, sim: Simulation, launch_speed: float = LAUNCH_SPEED, color_factory=random_color):
        self.sim = sim
        self.launch_speed = float(launch_speed)
        self.color_factory = color_factory
        self.state: State = Idle()

    @property
    def pending_body(self) -> Optional[Body]:
        if isinstance(self.state, (Sizing, Aiming)):
            return self.state.body
        return None

    def pointer_down(self, pos: Union[Vector2, Tuple[float, float]]) -> None:
        p = _as_vector(pos)
        with self.sim.lock:
            if not isinstance(self.state, Idle) or self.sim.is_paused():
                return
            self.sim.pause()
            body = Body(p.x, p.y, 0, fill_color=self.color_factory())
            body.interactive = True
            self.state = Sizing(body)
        logger.debug("Sizing new body at (%s, %s)", p.x, p.y)

    def pointer_move(self, pos: Union[Vector2, Tuple[float, float]]) -> None:
        state = self.state
        if isinstance(state, Idle):
            return
        offset = _as_vector(pos) - state.body.position
        if isinstance(state, Sizing):
            state.body.set_radius(max(abs(offset.x), abs(offset.y)))
        else:
            state.body.velocity = offset

    def pointer_up(self, pos: Union[Vector2, Tuple[float, float], None] = None) -> None:
        state = self.state
        if isinstance(state, Sizing):
            if state.body.radius > 0:
                self.state = Aiming(state.body)
                logger.debug("Radius fixed at %s", state.body.radius)
        elif isinstance(state, Aiming):
            self._launch(state.body)

    def _launch(self, body: Body) -> None:
        body.velocity = body.velocity.unit().scale(self.launch_speed)
        body.interactive = False
        with self.sim.lock:
            self.sim.add_body(body)
            self.state = Idle()
            self.sim.resume()
        logger.info("Launched %s", body.describe())

    def render(self, surface) -> None:
        body = self.pending_body
        if body is not None:
            body.render(surface)
