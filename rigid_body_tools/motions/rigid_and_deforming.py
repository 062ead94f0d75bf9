import logging

import numpy as np

from rigid_body_tools.bodies.base_body import Body
from rigid_body_tools.kinematics import BaseKinematics
from rigid_body_tools.motions.base_motion import BaseMotion
from rigid_body_tools.motions.direct_motion import BasicDirectMotion, DirectlySpecifiedMotion
from rigid_body_tools.motions.rigid_body_motion import RigidBodyMotion
from rigid_body_tools.utils.helpers import flatten_state, split_state

logger = logging.getLogger(__name__)


class RigidAndDeformingMotion(BaseMotion):
    """Superposition of a rigid-body motion and a surface deformation.

    The deforming motion describes surface velocities in the body-fixed frame. Its state is
    appended after the rigid pose, so the combined state is ``[cx, cy, alpha, x_tilde..., y_tilde...]``
    and the combined velocity is laid out the same way.

    Attributes:
        rigid_motion (RigidBodyMotion): The rigid-body part.
        deforming_motion (DirectlySpecifiedMotion): The deformation, in body coordinates.
    """

    def __init__(self, rigid_motion, deforming_motion: DirectlySpecifiedMotion):
        """Initialises the composite motion.

        Args:
            rigid_motion (RigidBodyMotion | BaseKinematics): The rigid part; bare kinematics are
                wrapped in a RigidBodyMotion.
            deforming_motion (DirectlySpecifiedMotion): The deformation part.
        """
        if isinstance(rigid_motion, BaseKinematics):
            rigid_motion = RigidBodyMotion(rigid_motion)
        if not isinstance(rigid_motion, RigidBodyMotion):
            raise TypeError(f"rigid_motion must be a RigidBodyMotion, not {type(rigid_motion).__name__}")
        if not isinstance(deforming_motion, DirectlySpecifiedMotion):
            raise TypeError(
                f"deforming_motion must be a DirectlySpecifiedMotion, not {type(deforming_motion).__name__}"
            )
        self.rigid_motion = rigid_motion
        self.deforming_motion = deforming_motion

    @classmethod
    def with_constant_deformation(cls, kinematics: BaseKinematics, u, v) -> "RigidAndDeformingMotion":
        """Rigid motion from ``kinematics`` plus a constant body-frame surface velocity ``(u, v)``."""
        return cls(RigidBodyMotion(kinematics), BasicDirectMotion(u, v))

    @classmethod
    def constant(cls, c_dot, alpha_dot: float, u, v) -> "RigidAndDeformingMotion":
        """Constant rigid velocities ``c_dot`` and ``alpha_dot`` plus a constant deformation ``(u, v)``."""
        return cls(RigidBodyMotion.constant(c_dot, alpha_dot), BasicDirectMotion(u, v))

    def surface_velocity(self, u, v, body: Body, t: float):
        self._check_outputs(u, v, body)
        self.deforming_motion.surface_velocity(u, v, body, t)

        # Deformation velocities are in body coordinates; rotate them before adding the rigid part.
        u[:], v[:] = body.pose.rotate(u, v)

        u_rigid, v_rigid = np.zeros_like(u), np.zeros_like(v)
        self.rigid_motion.surface_velocity(u_rigid, v_rigid, body, t)
        u += u_rigid
        v += v_rigid
        return u, v

    def motion_velocity(self, body: Body, t: float) -> np.ndarray:
        return flatten_state(
            self.rigid_motion.motion_velocity(body, t),
            self.deforming_motion.motion_velocity(body, t),
        )

    def motion_state(self, body: Body) -> np.ndarray:
        return flatten_state(self.rigid_motion.motion_state(body), self.deforming_motion.motion_state(body))

    def state_length(self, body: Body) -> int:
        return self.rigid_motion.state_length(body) + self.deforming_motion.state_length(body)

    def update_body(self, body: Body, state) -> Body:
        self._check_state(body, state)
        rigid_state, deforming_state = split_state(
            state, [self.rigid_motion.state_length(body), self.deforming_motion.state_length(body)]
        )
        # Shape first, so that the pose update regenerates inertial points from the new shape.
        self.deforming_motion.update_body(body, deforming_state)
        self.rigid_motion.update_body(body, rigid_state)
        return body

    def __repr__(self):
        return f"Rigid and deforming motion: {self.rigid_motion!r} + {self.deforming_motion!r}"
