import logging

import numpy as np

from rigid_body_tools.bodies.base_body import Body
from rigid_body_tools.kinematics import BaseKinematics, Constant, KinematicState
from rigid_body_tools.motions.base_motion import BaseMotion
from rigid_body_tools.rigid_transform import RigidTransform
from rigid_body_tools.utils.config import Config

logger = logging.getLogger(__name__)


class RigidBodyMotion(BaseMotion):
    """Rigid-body motion driven by prescribed kinematics.

    The motion state is the pose ``(cx, cy, alpha)`` and the motion velocity is
    ``(c_dot.x, c_dot.y, alpha_dot)``.

    Attributes:
        kinematics (BaseKinematics): The evaluator of the reference point and angle.
    """

    def __init__(self, kinematics: BaseKinematics):
        if not isinstance(kinematics, BaseKinematics):
            raise TypeError(f"RigidBodyMotion needs a BaseKinematics instance, not {type(kinematics).__name__}")
        self.kinematics = kinematics

    @classmethod
    def constant(cls, c_dot, alpha_dot: float) -> "RigidBodyMotion":
        """Motion with constant translational velocity ``c_dot`` and angular velocity ``alpha_dot``."""
        return cls(Constant(c_dot, alpha_dot))

    def __call__(self, t: float) -> KinematicState:
        return self.kinematics(t)

    def surface_velocity(self, u, v, body: Body, t: float):
        self._check_outputs(u, v, body)
        _, c_dot, _, _, alpha_dot, _ = self.kinematics(t)
        u[:] = c_dot.x - alpha_dot * (body.y - body.cent.y)
        v[:] = c_dot.y + alpha_dot * (body.x - body.cent.x)
        return u, v

    def motion_velocity(self, body: Body, t: float) -> np.ndarray:
        """Returns ``[c_dot.x, c_dot.y, alpha_dot]`` at time ``t``.

        Raises:
            TypeError: If ``body`` is not a single Body.
        """
        if not isinstance(body, Body):
            raise TypeError(f"RigidBodyMotion drives a single Body, not {type(body).__name__}")
        _, c_dot, _, _, alpha_dot, _ = self.kinematics(t)
        return np.array([c_dot.x, c_dot.y, alpha_dot], dtype=float)

    def motion_state(self, body: Body) -> np.ndarray:
        return body.pose.to_vector()

    def state_length(self, body: Body) -> int:
        return Config.RIGID_STATE_SIZE

    def update_body(self, body: Body, state) -> Body:
        self._check_state(body, state)
        logger.debug("Moving body to (%g, %g) at angle %g", state[0], state[1], state[2])
        return RigidTransform.from_vector(state).apply_to(body)

    def __repr__(self):
        return f"Rigid-body motion with kinematics {self.kinematics!r}"
