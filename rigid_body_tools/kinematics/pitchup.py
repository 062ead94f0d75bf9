from dataclasses import dataclass, field

import numpy as np
from pymunk import Vec2d

from rigid_body_tools.kinematics.base_kinematics import BaseKinematics, KinematicState
from rigid_body_tools.kinematics.profiles import BaseProfile, EldredgeRamp


@dataclass(frozen=True)
class Pitchup(BaseKinematics):
    """Pitch-up maneuver of a body translating at constant speed.

    The pitch rate is switched on at ``t0`` and off again once the angle has increased by
    ``delta_alpha``; both switches are smoothed by ``ramp``. With a ramp whose derivative is a unit
    step, the pitch rate between the switches is ``2 k``:

        alpha(t) = alpha0 + 2 k (ramp(t - t0) - ramp(t - t0 - dt)),  dt = delta_alpha / (2 k)

    The body pitches about the point at distance ``a`` along its x axis from the reference point,
    while that pivot translates at speed ``u0`` in x.

    Attributes:
        u0 (float): Translational speed.
        a (float): Pivot location along the body x axis.
        k (float): Dimensionless pitch rate.
        alpha0 (float): Initial angle.
        t0 (float): Nominal start of the pitch-up.
        delta_alpha (float): Total change of angle.
        ramp (BaseProfile): Ramp profile used for both switches.
    """

    u0: float = 1.0
    a: float = 0.0
    k: float = 0.2
    alpha0: float = 0.0
    t0: float = 0.0
    delta_alpha: float = 0.25 * np.pi
    ramp: BaseProfile = field(default_factory=EldredgeRamp)

    def __post_init__(self):
        if self.k == 0:
            raise ValueError("pitch rate k must be non-zero")
        pitch = 2.0 * self.k * ((self.ramp >> self.t0) - (self.ramp >> (self.t0 + self.duration)))
        object.__setattr__(self, "_pitch", pitch)
        object.__setattr__(self, "_pitch_rate", pitch.derivative())
        object.__setattr__(self, "_pitch_acceleration", pitch.derivative(2))

    @property
    def duration(self) -> float:
        """Nominal duration of the pitch-up, ``delta_alpha / (2 k)``."""
        return 0.5 * self.delta_alpha / self.k

    def evaluate(self, t: float) -> KinematicState:
        alpha = self.alpha0 + self._pitch(t)
        alpha_dot = self._pitch_rate(t)
        alpha_ddot = self._pitch_acceleration(t)

        sa, ca = np.sin(alpha), np.cos(alpha)
        a = self.a
        c = Vec2d(self.u0 * t - a * ca, -a * sa)
        c_dot = Vec2d(self.u0 + alpha_dot * a * sa, -alpha_dot * a * ca)
        c_ddot = Vec2d(
            alpha_ddot * a * sa + alpha_dot**2 * a * ca,
            -alpha_ddot * a * ca + alpha_dot**2 * a * sa,
        )
        return KinematicState(c, c_dot, c_ddot, float(alpha), float(alpha_dot), float(alpha_ddot))
