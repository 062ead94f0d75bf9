"""Directly-specified surface motions.

A directly-specified motion prescribes a velocity at every surface point rather than a rigid-body
mode. Its state is the set of body-fixed surface coordinates, ``[x_tilde..., y_tilde...]``, and
updating the body rewrites those coordinates while keeping the body's pose. Subclasses only need to
supply surface_velocity().
"""

import logging
from abc import abstractmethod
from typing import Callable, Tuple

import numpy as np

from rigid_body_tools.bodies.base_body import Body
from rigid_body_tools.motions.base_motion import BaseMotion
from rigid_body_tools.utils.helpers import check_length, flatten_state

logger = logging.getLogger(__name__)


class DirectlySpecifiedMotion(BaseMotion):
    """Base class for motions given as a velocity at every surface point."""

    @abstractmethod
    def surface_velocity(self, u, v, body: Body, t: float):
        pass

    def motion_velocity(self, body: Body, t: float) -> np.ndarray:
        u, v = np.zeros_like(body.x), np.zeros_like(body.y)
        self.surface_velocity(u, v, body, t)
        return flatten_state(u, v)

    def motion_state(self, body: Body) -> np.ndarray:
        return flatten_state(body.x_tilde, body.y_tilde)

    def state_length(self, body: Body) -> int:
        return 2 * body.n_points

    def update_body(self, body: Body, state) -> Body:
        self._check_state(body, state)
        state = np.asarray(state, dtype=float)
        n = len(state) // 2
        logger.debug("Rewriting %d body-fixed surface points", n)
        return body.set_body_coordinates(state[:n], state[n:])


class BasicDirectMotion(DirectlySpecifiedMotion):
    """Constant, time-independent surface velocity.

    Attributes:
        u (np.ndarray): x velocity of each surface point.
        v (np.ndarray): y velocity of each surface point.
    """

    def __init__(self, u, v):
        u = np.array(u, dtype=float)
        v = np.array(v, dtype=float)
        check_length(v, len(u), "velocity array v")
        u.flags.writeable = False
        v.flags.writeable = False
        self.u = u
        self.v = v

    def surface_velocity(self, u, v, body: Body, t: float):
        self._check_outputs(u, v, body)
        check_length(self.u, body.n_points, "prescribed surface velocity")
        u[:] = self.u
        v[:] = self.v
        return u, v

    def __repr__(self):
        return f"Constant surface velocity on {len(self.u)} points"


ConstantDeformationMotion = BasicDirectMotion


class PrescribedDirectMotion(DirectlySpecifiedMotion):
    """Surface velocity given by a user-supplied function of the body-fixed coordinates and time.

    Attributes:
        velocity (Callable): ``velocity(x_tilde, y_tilde, t) -> (u, v)``, returning one value per
            surface point for each component.
    """

    def __init__(self, velocity: Callable[[np.ndarray, np.ndarray, float], Tuple[np.ndarray, np.ndarray]]):
        if not callable(velocity):
            raise TypeError("velocity must be callable")
        self.velocity = velocity

    def surface_velocity(self, u, v, body: Body, t: float):
        """Fills ``u`` and ``v`` from the velocity field.

        A scalar component is applied to every point; an array component must have one entry per
        surface point.

        Raises:
            ValueError: If an array component does not match the number of surface points.
        """
        self._check_outputs(u, v, body)
        u_new, v_new = self.velocity(body.x_tilde, body.y_tilde, t)
        u[:] = self._component(u_new, body, "prescribed surface velocity u")
        v[:] = self._component(v_new, body, "prescribed surface velocity v")
        return u, v

    @staticmethod
    def _component(values, body: Body, what: str) -> np.ndarray:
        values = np.asarray(values, dtype=float)
        if np.ndim(values) == 0:
            return np.full(body.n_points, float(values))
        check_length(values, body.n_points, what)
        return values

    def __repr__(self):
        return f"Prescribed surface velocity {self.velocity!r}"
