"""Constant-rate and periodic rigid-body kinematics.

``Oscillation`` is the general form: constant drift plus sinusoidal oscillation of the reference
point and of the angle, all at the common angular frequency ``omega``. The offset ``(ax, ay)``
locates the centre of rotation in the body frame; because that offset rotates with the body, the
reference point picks up ``alpha_dot`` and ``alpha_dot**2`` coupling terms in its velocity and
acceleration.

The remaining classes are restrictions of ``Oscillation`` with some parameters fixed at zero. Each
is evaluated from its own closed form.
"""

from dataclasses import dataclass

import numpy as np
from pymunk import Vec2d

from rigid_body_tools.kinematics.base_kinematics import BaseKinematics, KinematicState, as_vec2d


@dataclass(frozen=True)
class Constant(BaseKinematics):
    """Constant translational velocity ``c_dot`` and angular velocity ``alpha_dot``.

    The reference point starts at the origin and the angle at zero.
    """

    c_dot: Vec2d = Vec2d(0.0, 0.0)
    alpha_dot: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "c_dot", as_vec2d(self.c_dot))
        object.__setattr__(self, "alpha_dot", float(self.alpha_dot))

    def evaluate(self, t: float) -> KinematicState:
        zero = Vec2d(0.0, 0.0)
        return KinematicState(self.c_dot * t, self.c_dot, zero, self.alpha_dot * t, self.alpha_dot, 0.0)


@dataclass(frozen=True)
class Oscillation(BaseKinematics):
    """General oscillatory kinematics.

    ``alpha(t) = alpha0 + alpha_dot0 t + delta_alpha sin(omega t - phi_alpha)`` and the reference
    point follows ``ux t + amp_x sin(omega t - phi_x)`` in x and ``uy t + amp_y sin(omega t - phi_y)``
    in y, minus the rotated offset ``(ax, ay)``.

    Attributes:
        ux (float): Mean x velocity.
        uy (float): Mean y velocity.
        alpha_dot0 (float): Mean angular velocity.
        ax (float): Body-frame x offset of the rotation centre from the reference point.
        ay (float): Body-frame y offset of the rotation centre from the reference point.
        omega (float): Angular frequency shared by all oscillations.
        amp_x (float): Amplitude of the x oscillation.
        amp_y (float): Amplitude of the y oscillation.
        phi_x (float): Phase lag of the x oscillation.
        phi_y (float): Phase lag of the y oscillation.
        alpha0 (float): Initial angle.
        delta_alpha (float): Amplitude of the angular oscillation.
        phi_alpha (float): Phase lag of the angular oscillation.
    """

    ux: float = 0.0
    uy: float = 0.0
    alpha_dot0: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    omega: float = 1.0
    amp_x: float = 0.0
    amp_y: float = 0.0
    phi_x: float = 0.0
    phi_y: float = 0.0
    alpha0: float = 0.0
    delta_alpha: float = 0.0
    phi_alpha: float = 0.0

    def evaluate(self, t: float) -> KinematicState:
        omega = self.omega
        s_alpha, c_alpha = np.sin(omega * t - self.phi_alpha), np.cos(omega * t - self.phi_alpha)
        alpha = self.alpha0 + self.alpha_dot0 * t + self.delta_alpha * s_alpha
        alpha_dot = self.alpha_dot0 + self.delta_alpha * omega * c_alpha
        alpha_ddot = -self.delta_alpha * omega**2 * s_alpha

        s_x, c_x = np.sin(omega * t - self.phi_x), np.cos(omega * t - self.phi_x)
        s_y, c_y = np.sin(omega * t - self.phi_y), np.cos(omega * t - self.phi_y)
        drift = Vec2d(self.ux * t + self.amp_x * s_x, self.uy * t + self.amp_y * s_y)
        drift_dot = Vec2d(self.ux + self.amp_x * omega * c_x, self.uy + self.amp_y * omega * c_y)
        drift_ddot = Vec2d(-self.amp_x * omega**2 * s_x, -self.amp_y * omega**2 * s_y)

        # Offset of the rotation centre, expressed in the inertial frame.
        r = Vec2d(self.ax, self.ay).rotated(alpha)
        r_perp = r.perpendicular()

        c = drift - r
        c_dot = drift_dot - r_perp * alpha_dot
        c_ddot = drift_ddot - r_perp * alpha_ddot + r * alpha_dot**2
        return KinematicState(c, c_dot, c_ddot, float(alpha), float(alpha_dot), float(alpha_ddot))


@dataclass(frozen=True)
class PitchHeave(BaseKinematics):
    """Pitching about a point ``ax`` along the body x axis, with heave in y and steady drift in x.

    Attributes:
        ux (float): Steady x velocity.
        ax (float): Body-frame x offset of the pitch axis.
        omega (float): Angular frequency.
        alpha0 (float): Mean angle.
        delta_alpha (float): Pitch amplitude.
        phi_alpha (float): Pitch phase lag.
        amp_y (float): Heave amplitude.
        phi_y (float): Heave phase lag.
    """

    ux: float = 0.0
    ax: float = 0.0
    omega: float = 1.0
    alpha0: float = 0.0
    delta_alpha: float = 0.0
    phi_alpha: float = 0.0
    amp_y: float = 0.0
    phi_y: float = 0.0

    def evaluate(self, t: float) -> KinematicState:
        omega = self.omega
        s_alpha, c_alpha = np.sin(omega * t - self.phi_alpha), np.cos(omega * t - self.phi_alpha)
        alpha = self.alpha0 + self.delta_alpha * s_alpha
        alpha_dot = self.delta_alpha * omega * c_alpha
        alpha_ddot = -self.delta_alpha * omega**2 * s_alpha

        s_y, c_y = np.sin(omega * t - self.phi_y), np.cos(omega * t - self.phi_y)
        sa, ca = np.sin(alpha), np.cos(alpha)
        ax = self.ax

        c = Vec2d(self.ux * t - ax * ca, self.amp_y * s_y - ax * sa)
        c_dot = Vec2d(self.ux + alpha_dot * ax * sa, self.amp_y * omega * c_y - alpha_dot * ax * ca)
        c_ddot = Vec2d(
            alpha_ddot * ax * sa + alpha_dot**2 * ax * ca,
            -self.amp_y * omega**2 * s_y - alpha_ddot * ax * ca + alpha_dot**2 * ax * sa,
        )
        return KinematicState(c, c_dot, c_ddot, float(alpha), float(alpha_dot), float(alpha_ddot))


@dataclass(frozen=True)
class OscillationX(BaseKinematics):
    """Steady drift plus oscillation in x only; the angle stays zero."""

    ux: float = 0.0
    omega: float = 1.0
    amp_x: float = 0.0
    phi_x: float = 0.0

    def evaluate(self, t: float) -> KinematicState:
        omega = self.omega
        s_x, c_x = np.sin(omega * t - self.phi_x), np.cos(omega * t - self.phi_x)
        c = Vec2d(self.ux * t + self.amp_x * s_x, 0.0)
        c_dot = Vec2d(self.ux + self.amp_x * omega * c_x, 0.0)
        c_ddot = Vec2d(-self.amp_x * omega**2 * s_x, 0.0)
        return KinematicState(c, c_dot, c_ddot, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class OscillationY(BaseKinematics):
    """Steady drift plus oscillation in y only; the angle stays zero."""

    uy: float = 0.0
    omega: float = 1.0
    amp_y: float = 0.0
    phi_y: float = 0.0

    def evaluate(self, t: float) -> KinematicState:
        omega = self.omega
        s_y, c_y = np.sin(omega * t - self.phi_y), np.cos(omega * t - self.phi_y)
        c = Vec2d(0.0, self.uy * t + self.amp_y * s_y)
        c_dot = Vec2d(0.0, self.uy + self.amp_y * omega * c_y)
        c_ddot = Vec2d(0.0, -self.amp_y * omega**2 * s_y)
        return KinematicState(c, c_dot, c_ddot, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class RotationalOscillation(BaseKinematics):
    """Angular oscillation about a fixed reference point at the origin."""

    omega: float = 1.0
    delta_alpha: float = 0.0
    phi_alpha: float = 0.0

    def evaluate(self, t: float) -> KinematicState:
        omega = self.omega
        s_alpha, c_alpha = np.sin(omega * t - self.phi_alpha), np.cos(omega * t - self.phi_alpha)
        zero = Vec2d(0.0, 0.0)
        return KinematicState(
            zero,
            zero,
            zero,
            float(self.delta_alpha * s_alpha),
            float(self.delta_alpha * omega * c_alpha),
            float(-self.delta_alpha * omega**2 * s_alpha),
        )
