from abc import ABC, abstractmethod
from typing import NamedTuple

from pymunk import Vec2d


def as_vec2d(value) -> Vec2d:
    """Converts a complex number or any length-2 sequence into a ``Vec2d``."""
    if isinstance(value, complex):
        return Vec2d(value.real, value.imag)
    if len(value) != 2:
        raise ValueError(f"expected a 2-vector, got {len(value)} components")
    return Vec2d(float(value[0]), float(value[1]))


class KinematicState(NamedTuple):
    """Motion of a body's reference point and axes at one instant.

    Attributes:
        c (Vec2d): Reference point position.
        c_dot (Vec2d): Reference point velocity.
        c_ddot (Vec2d): Reference point acceleration.
        alpha (float): Angle of the body axes.
        alpha_dot (float): Angular velocity.
        alpha_ddot (float): Angular acceleration.
    """

    c: Vec2d
    c_dot: Vec2d
    c_ddot: Vec2d
    alpha: float
    alpha_dot: float
    alpha_ddot: float


class BaseKinematics(ABC):
    """Base class for all prescribed rigid-body kinematics.

    Subclasses implement evaluate() with closed-form expressions for the position, velocity and
    acceleration of the reference point and the angle and its first two derivatives. Instances
    hold no mutable state once constructed, so one instance may drive any number of bodies.
    """

    @abstractmethod
    def evaluate(self, t: float) -> KinematicState:
        """Evaluates the kinematics at time ``t``.

        Args:
            t (float): Time.

        Returns:
            KinematicState: The six-component kinematic state.
        """
        pass

    def __call__(self, t: float) -> KinematicState:
        return self.evaluate(t)
