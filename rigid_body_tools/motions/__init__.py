"""
Motions Package

This package provides the prescribed motions applied to bodies and the bookkeeping that packs a
collection of bodies into flat state and velocity vectors. It defines a common interface via
BaseMotion and includes:
  - RigidBodyMotion: Rigid-body motion driven by kinematics.
  - BasicDirectMotion / PrescribedDirectMotion: Surface velocities specified point by point.
  - RigidAndDeformingMotion: Superposition of a rigid motion and a body-frame deformation.
  - MotionList: An ordered collection paired index-by-index with a BodyList.

The module-level functions accept either a single body and motion or a BodyList and MotionList.
"""
import logging
from typing import Tuple

import numpy as np

from rigid_body_tools.bodies.base_body import Body, BodyList
from rigid_body_tools.utils.config import Config
from .base_motion import BaseMotion
from .direct_motion import BasicDirectMotion, ConstantDeformationMotion, DirectlySpecifiedMotion, PrescribedDirectMotion
from .motion_list import MotionList
from .rigid_and_deforming import RigidAndDeformingMotion
from .rigid_body_motion import RigidBodyMotion

logger = logging.getLogger(__name__)


def _is_list_pair(body, motion) -> bool:
    """True for a BodyList/MotionList pair, False for a Body/motion pair; TypeError otherwise."""
    if isinstance(body, BodyList) and isinstance(motion, MotionList):
        return True
    if isinstance(body, Body) and isinstance(motion, BaseMotion):
        return False
    raise TypeError(
        f"Cannot pair {type(body).__name__} with {type(motion).__name__}; "
        "use a Body with a motion or a BodyList with a MotionList"
    )


def surface_velocity(u, v, body: Body, motion: BaseMotion, t: float) -> Tuple[np.ndarray, np.ndarray]:
    """Fills ``u`` and ``v`` in place with the inertial surface velocity of ``body`` at time ``t``.

    Raises:
        ValueError: If ``u`` or ``v`` does not have one entry per surface point.
    """
    if _is_list_pair(body, motion):
        raise TypeError("surface_velocity applies to a single body and motion")
    return motion.surface_velocity(u, v, body, t)


def motion_velocity(body, motion, t: float) -> np.ndarray:
    """Returns the flat motion velocity of a body (or body list) under its motion (or motion list)."""
    # Single motions and motion lists share the method names.
    _is_list_pair(body, motion)
    return motion.motion_velocity(body, t)


def motion_state(body, motion) -> np.ndarray:
    """Returns the flat motion state of a body (or body list) under its motion (or motion list)."""
    _is_list_pair(body, motion)
    return motion.motion_state(body)


def update_body(body, state, motion):
    """Writes a flat motion state into a body (or body list) and returns it.

    Raises:
        ValueError: If the state length does not match the body/motion pairing.
    """
    _is_list_pair(body, motion)
    return motion.update_body(body, state)


def max_velocity(
    body: Body,
    motion: BaseMotion,
    tf: float = Config.MAX_VELOCITY_HORIZON,
    dt: float = Config.MAX_VELOCITY_TIME_STEP,
) -> Tuple[float, float]:
    """Finds the largest surface speed of ``body`` over sampled times in ``[0, tf)``.

    The body is held in its current configuration; only the motion is evaluated over time.

    Args:
        body (Body): The body.
        motion (BaseMotion): Its motion.
        tf (float): End of the sampling window.
        dt (float): Sampling interval.

    Returns:
        Tuple[float, float]: The maximum speed and the time at which it occurs.
    """
    if dt <= 0:
        raise ValueError("dt must be positive")
    u, v = np.zeros_like(body.x), np.zeros_like(body.y)
    max_speed, max_time = 0.0, 0.0
    for t in np.arange(0.0, tf, dt):
        surface_velocity(u, v, body, motion, t)
        speed = float(np.max(np.hypot(u, v))) if body.n_points > 0 else 0.0
        if speed > max_speed:
            max_speed, max_time = speed, float(t)
    return max_speed, max_time


__all__ = [
    "BaseMotion",
    "RigidBodyMotion",
    "DirectlySpecifiedMotion",
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
