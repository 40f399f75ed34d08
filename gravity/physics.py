#!/usr/bin/env python3
"""
Core Physics Engine for the Gravity Sandbox

Responsibilities
- Accumulate pairwise gravitational pulls directly into body velocities.
- Advance body positions with an explicit Euler step of one frame.
- Apply the bounce heuristic for overlapping bodies.

Units and conventions
- Positions are screen pixels, velocities pixels per frame.
- One call to step() is one frame; there are no substeps.
- G is simulation-tuned (see constants.G), not the SI constant.

Numerical notes
- Velocities are updated in place while the same pass keeps reading the other
  bodies' positions, so body i sees the positions of the current frame but the
  update order of velocities is the list order. Positions only move after all
  velocities are updated.
- Both (i, j) and (j, i) are visited: O(N^2) full pairs, each body's velocity
  is only ever changed in its own row of the double loop.
- Overlapping bodies (distance < sum of radii) get the pull reversed, a rough
  stand-in for a bounce. It does not conserve momentum and never merges.
- Coincident bodies (distance 0) exert nothing on each other.

Threading
- This module is pure compute. It is driven by Simulation, which guards the
  body list with a lock.
"""

from typing import List, Tuple

from .constants import G
from .data_models import Body
from .vector_utils import Vector2


class NBodyPhysics:
    """
    Frame-stepped N-body gravity.

    The pull of body j on body i for one frame is:
    dv_i = G * m_j / d^2 * unit(r_ij)

    and is negated when the two bodies overlap.
    """

    def __init__(self, gravitational_constant: float = G):
        self.G = float(gravitational_constant)

    def pull(self, b1: Body, b2: Body) -> Tuple[float, float]:
        """
        Velocity change of b1 due to b2 for one frame, as (dvx, dvy).
        """
        v12 = b1.vector_to(b2)
        unit12 = v12.unit()
        dist = v12.length()
        if dist == 0:
            return (0.0, 0.0)

        accel = self.G * b2.mass / (dist * dist)
        ax = accel * unit12.x
        ay = accel * unit12.y

        if dist < b1.radius + b2.radius:
            # b1.mass / (b1.mass + b2.mass) would weight a momentum-aware bounce; unused
            ax = -ax
            ay = -ay
        return (ax, ay)

    def accumulate_velocities(self, bodies: List[Body]) -> None:
        n = len(bodies)
        for i in range(n):
            b1 = bodies[i]
            for j in range(n):
                if i == j:
                    continue
                ax, ay = self.pull(b1, bodies[j])
                b1.velocity = Vector2(b1.velocity.x + ax, b1.velocity.y + ay)

    @staticmethod
    def apply_velocities(bodies: List[Body]) -> None:
        for b in bodies:
            b.position = b.position + b.velocity

    def step(self, bodies: List[Body]) -> None:
        """One frame: velocities first, then positions."""
        self.accumulate_velocities(bodies)
        self.apply_velocities(bodies)
