"""
RigidBodyTools Package

This package models rigid and deforming planar bodies and the prescribed motions that move them,
for use by immersed-boundary and fluid-structure solvers. It encompasses several key modules:

  - rigid_transform: The RigidTransform pose, applied to coordinate arrays or to bodies.
  - bodies: Body containers owning their pose and surface points, plus simple shape generators.
  - kinematics: Closed-form rigid-body kinematics (constant, oscillatory and ramped maneuvers) and
    the profile algebra used to shape ramps.
  - motions: Rigid, directly-specified and composite motions, motion lists, and the functions that
    pack body configurations into flat state and velocity vectors and unpack them again.
  - utils: Configuration defaults and state-vector helpers.

The engine only evaluates prescribed kinematics at a given time. Advancing the state in time is
left to the caller, which reads motion_velocity(), integrates, and writes the result back with
update_body().
"""

from rigid_body_tools.bodies import (
    BasicBody,
    Body,
    BodyList,
    Circle,
    Ellipse,
    Plate,
    Polygon,
    Rectangle,
    Square,
    get_body,
)
from rigid_body_tools.kinematics import (
    ColoniusRamp,
    Constant,
    EldredgeRamp,
    KinematicState,
    Oscillation,
    OscillationX,
    OscillationY,
    PitchHeave,
    Pitchup,
    RotationalOscillation,
    evaluate,
    get_kinematics,
)
from rigid_body_tools.motions import (
    BasicDirectMotion,
    ConstantDeformationMotion,
    MotionList,
    PrescribedDirectMotion,
    RigidAndDeformingMotion,
    RigidBodyMotion,
    max_velocity,
    motion_state,
    motion_velocity,
    surface_velocity,
    update_body,
)
from rigid_body_tools.rigid_transform import RigidTransform, RigidTransformList

__all__ = [
    "RigidTransform",
    "RigidTransformList",
    "Body",
    "BodyList",
    "BasicBody",
    "Ellipse",
    "Circle",
    "Rectangle",
    "Square",
    "Plate",
    "Polygon",
    "get_body",
    "KinematicState",
    "Constant",
    "Oscillation",
    "PitchHeave",
    "OscillationX",
    "OscillationY",
    "RotationalOscillation",
    "Pitchup",
    "EldredgeRamp",
    "ColoniusRamp",
    "evaluate",
    "get_kinematics",
    "RigidBodyMotion",
    "BasicDirectMotion",
    "ConstantDeformationMotion",
    "PrescribedDirectMotion",
    "RigidAndDeformingMotion",
    "MotionList",
    "surface_velocity",
    "motion_velocity",
    "motion_state",
    "update_body",
    "max_velocity",
]
