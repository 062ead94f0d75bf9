from abc import ABC, abstractmethod

import numpy as np

from rigid_body_tools.bodies.base_body import Body
from rigid_body_tools.utils.helpers import check_length


class BaseMotion(ABC):
    """Base class for all motions prescribed on a single body.

    A motion is an immutable evaluator. The body it is paired with carries all mutable state.
    Subclasses must implement:
      - surface_velocity(): fill caller-supplied arrays with the inertial velocity of every surface point.
      - motion_velocity(): the flat velocity vector matching the motion state.
      - motion_state(): the flat state vector read from the body's current configuration.
      - update_body(): push a flat state vector back into the body.

    Operator overloading is enabled:
      - rigid + deforming returns a RigidAndDeformingMotion superposing the two.
    """

    @abstractmethod
    def surface_velocity(self, u: np.ndarray, v: np.ndarray, body: Body, t: float):
        """Fills ``u`` and ``v`` with the surface velocity of ``body`` at time ``t``.

        Args:
            u (np.ndarray): Output x components, one per surface point.
            v (np.ndarray): Output y components, one per surface point.
            body (Body): The body the motion is applied to.
            t (float): Time.

        Returns:
            Tuple[np.ndarray, np.ndarray]: ``u`` and ``v``, filled in place.
        """
        pass

    @abstractmethod
    def motion_velocity(self, body: Body, t: float) -> np.ndarray:
        """Returns the rate of change of the motion state at time ``t``."""
        pass

    @abstractmethod
    def motion_state(self, body: Body) -> np.ndarray:
        """Returns the motion state vector read from the current configuration of ``body``."""
        pass

    @abstractmethod
    def update_body(self, body: Body, state) -> Body:
        """Writes the motion state vector ``state`` into ``body`` and returns the body."""
        pass

    def state_length(self, body: Body) -> int:
        """Length of the motion state vector of ``body`` under this motion."""
        return len(self.motion_state(body))

    def _check_state(self, body: Body, state):
        check_length(state, self.state_length(body), "motion state vector")

    @staticmethod
    def _check_outputs(u, v, body: Body):
        check_length(u, body.n_points, "surface velocity array u")
        check_length(v, body.n_points, "surface velocity array v")

    def __add__(self, other):
        from .direct_motion import DirectlySpecifiedMotion
        from .rigid_and_deforming import RigidAndDeformingMotion
        from .rigid_body_motion import RigidBodyMotion

        if isinstance(self, RigidBodyMotion) and isinstance(other, DirectlySpecifiedMotion):
            return RigidAndDeformingMotion(self, other)
        if isinstance(self, DirectlySpecifiedMotion) and isinstance(other, RigidBodyMotion):
            return RigidAndDeformingMotion(other, self)
        return NotImplemented
