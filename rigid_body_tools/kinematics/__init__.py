"""
Kinematics Package

This package provides prescribed rigid-body kinematics: pure functions of time returning the
position, velocity and acceleration of a body's reference point together with its angle, angular
velocity and angular acceleration, all in closed form. It defines a common interface via
BaseKinematics and includes:
  - Constant: Constant translational and angular velocity.
  - Oscillation: General drift plus oscillation with an offset rotation centre.
  - PitchHeave, OscillationX, OscillationY, RotationalOscillation: Restrictions of Oscillation.
  - Pitchup: A ramped pitch-up maneuver shaped by a pluggable ramp profile.

Ramp profiles (EldredgeRamp, ColoniusRamp, ...) live in the profiles module and compose
arithmetically. The factory function get_kinematics() instantiates kinematics from a name.
"""
import dataclasses
import logging

from .base_kinematics import BaseKinematics, KinematicState, as_vec2d
from .oscillation import Constant, Oscillation, OscillationX, OscillationY, PitchHeave, RotationalOscillation
from .pitchup import Pitchup
from .profiles import BaseProfile, ColoniusRamp, ConstantProfile, EldredgeRamp, Sinusoid
from rigid_body_tools.utils.config import Config

logger = logging.getLogger(__name__)


def evaluate(kinematics: BaseKinematics, t: float) -> KinematicState:
    """Evaluates ``kinematics`` at time ``t``.

    Returns:
        KinematicState: ``(c, c_dot, c_ddot, alpha, alpha_dot, alpha_ddot)``.
    """
    return kinematics.evaluate(t)


def get_kinematics(name: str, **kwargs) -> BaseKinematics:
    """Factory method to create kinematics based on its name.

    Parameters missing from ``kwargs`` take their values from Config.DEFAULT_KINEMATICS_PARAMS.
    Unrecognised parameters are ignored with a warning.

    Args:
        name (str): The kinematics name (e.g., "constant", "oscillation", "pitch_heave",
            "oscillation_x", "oscillation_y", "rotational_oscillation", "pitchup").
        **kwargs: Parameters of the requested kinematics.

    Returns:
        BaseKinematics: An instance of the requested kinematics.

    Raises:
        ValueError: If the kinematics name is not recognised.
    """
    mapping = {
        "constant": Constant,
        "oscillation": Oscillation,
        "pitch_heave": PitchHeave,
        "oscillation_x": OscillationX,
        "oscillation_y": OscillationY,
        "rotational_oscillation": RotationalOscillation,
        "pitchup": Pitchup,
    }
    key = (name or "").lower()
    kinematics_cls = mapping.get(key)
    if kinematics_cls is None:
        raise ValueError(f"Unknown kinematics type: {name}")

    recognized_params = {f.name for f in dataclasses.fields(kinematics_cls)}
    params = dict(Config.DEFAULT_KINEMATICS_PARAMS.get(key, {}))
    for param, value in kwargs.items():
        if param in recognized_params:
            params[param] = value
        else:
            logger.warning(f"Unrecognized parameter for {key} kinematics: {param}")
    return kinematics_cls(**params)


__all__ = [
    "BaseKinematics",
    "KinematicState",
    "as_vec2d",
    "Constant",
    "Oscillation",
    "PitchHeave",
    "OscillationX",
    "OscillationY",
    "RotationalOscillation",
    "Pitchup",
    "BaseProfile",
    "ConstantProfile",
    "Sinusoid",
    "EldredgeRamp",
    "ColoniusRamp",
    "evaluate",
    "get_kinematics",
]
