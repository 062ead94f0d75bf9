"""Scalar time profiles used to shape ramped kinematics.

A profile is a function of time that can also produce its own time derivative as another profile.
Profiles support operator overloading, allowing them to be composed arithmetically:
  - p + q, p - q and -p combine values (and derivatives) term by term.
  - c * p scales by a constant; p * q multiplies two profiles (the derivative uses the product rule).
  - p >> dt delays a profile by dt, so that (p >> dt)(t) == p(t - dt); p << dt advances it.
  - Scalars are automatically wrapped in a ConstantProfile.
"""

import math
from abc import ABC, abstractmethod
from numbers import Real

import numpy as np
from numpy.polynomial import Polynomial

from rigid_body_tools.utils.config import Config


def _as_output(value):
    """Returns plain floats for scalar evaluations and arrays otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return value


def _as_profile(value) -> "BaseProfile":
    if isinstance(value, BaseProfile):
        return value
    if isinstance(value, Real):
        return ConstantProfile(value)
    raise TypeError(f"Cannot combine a profile with {type(value).__name__}")


class BaseProfile(ABC):
    """Base class for all profiles.

    Subclasses must implement __call__() to evaluate the profile and _derivative() to return the
    first time derivative as a new profile.
    """

    @abstractmethod
    def __call__(self, t):
        """Evaluates the profile at time ``t`` (a float or an array of times)."""
        pass

    @abstractmethod
    def _derivative(self) -> "BaseProfile":
        pass

    def derivative(self, order: int = 1) -> "BaseProfile":
        """Returns the ``order``-th time derivative of this profile.

        Args:
            order (int): Derivative order; 0 returns the profile itself.

        Returns:
            BaseProfile: The derivative profile.
        """
        if order < 0:
            raise ValueError("derivative order must be non-negative")
        profile = self
        for _ in range(order):
            profile = profile._derivative()
        return profile

    def __add__(self, other):
        return SumProfile(self, _as_profile(other))

    def __radd__(self, other):
        return SumProfile(_as_profile(other), self)

    def __sub__(self, other):
        return SumProfile(self, -_as_profile(other))

    def __rsub__(self, other):
        return SumProfile(_as_profile(other), -self)

    def __neg__(self):
        return ScaledProfile(-1.0, self)

    def __mul__(self, other):
        if isinstance(other, Real):
            return ScaledProfile(other, self)
        return ProductProfile(self, _as_profile(other))

    def __rmul__(self, other):
        if isinstance(other, Real):
            return ScaledProfile(other, self)
        return ProductProfile(_as_profile(other), self)

    def __rshift__(self, shift: float):
        return ShiftedProfile(self, shift)

    def __lshift__(self, shift: float):
        return ShiftedProfile(self, -shift)


class ConstantProfile(BaseProfile):
    """A profile that always returns a fixed value."""

    def __init__(self, value: float):
        self.value = float(value)

    def __call__(self, t):
        return _as_output(np.full(np.shape(t), self.value))

    def _derivative(self):
        return ConstantProfile(0.0)

    def __repr__(self):
        return f"ConstantProfile({self.value})"


class Sinusoid(BaseProfile):
    """``sin(omega t + phase)``."""

    def __init__(self, omega: float, phase: float = 0.0):
        self.omega = float(omega)
        self.phase = float(phase)

    def __call__(self, t):
        return _as_output(np.sin(self.omega * np.asarray(t, dtype=float) + self.phase))

    def _derivative(self):
        return ScaledProfile(self.omega, Sinusoid(self.omega, self.phase + 0.5 * np.pi))

    def __repr__(self):
        return f"Sinusoid(omega={self.omega}, phase={self.phase})"


class EldredgeRamp(BaseProfile):
    """Smoothed ramp ``0.5 (log(2 cosh(a t)) + a t) / a``.

    The ramp is zero for large negative times and grows like ``t`` for large positive times. Its
    first derivative is a smoothed unit step centred on ``t = 0`` whose steepness is set by the
    sharpness ``a``. Closed forms are available up to the third derivative.

    Attributes:
        sharpness (float): The smoothing parameter ``a``.
        order (int): Which derivative of the ramp this profile evaluates.
    """

    MAX_ORDER = 3

    def __init__(self, sharpness: float = Config.ELDREDGE_RAMP_SHARPNESS, order: int = 0):
        if sharpness <= 0:
            raise ValueError("sharpness must be positive")
        if not 0 <= order <= self.MAX_ORDER:
            raise ValueError(f"EldredgeRamp supports derivative orders 0 to {self.MAX_ORDER}, got {order}")
        self.sharpness = float(sharpness)
        self.order = order

    def __call__(self, t):
        a = self.sharpness
        x = a * np.asarray(t, dtype=float)
        if self.order == 0:
            # log(2 cosh(x)) evaluated without overflow
            value = 0.5 * (np.logaddexp(x, -x) + x) / a
        elif self.order == 1:
            value = 0.5 * (np.tanh(x) + 1.0)
        elif self.order == 2:
            value = 0.5 * a * (1.0 - np.tanh(x) ** 2)
        else:
            th = np.tanh(x)
            value = -a * a * (1.0 - th**2) * th
        return _as_output(value)

    def _derivative(self):
        return EldredgeRamp(self.sharpness, self.order + 1)

    def __repr__(self):
        return f"EldredgeRamp(sharpness={self.sharpness}, order={self.order})"


class ColoniusRamp(BaseProfile):
    """Polynomial ramp built on the generalized smoothstep of order ``n``.

    The first derivative rises from 0 to 1 over ``-1/2 <= t <= 1/2`` along the smoothstep
    polynomial, whose first ``n`` derivatives vanish at both ends. The ramp itself is zero before
    the transition and equal to ``t`` after it.

    Attributes:
        n (int): Smoothstep order.
        order (int): Which derivative of the ramp this profile evaluates.
    """

    def __init__(self, n: int = Config.COLONIUS_RAMP_ORDER, order: int = 0):
        if n < 0:
            raise ValueError("smoothstep order must be non-negative")
        if order < 0:
            raise ValueError("derivative order must be non-negative")
        self.n = int(n)
        self.order = int(order)
        coefficients = np.zeros(2 * self.n + 2)
        for k in range(self.n + 1):
            coefficients[self.n + k + 1] = (
                (-1) ** k * math.comb(self.n + k, k) * math.comb(2 * self.n + 1, self.n - k)
            )
        step = Polynomial(coefficients)
        if self.order == 0:
            self._inner = step.integ()
        else:
            self._inner = step.deriv(self.order - 1)

    def __call__(self, t):
        t = np.asarray(t, dtype=float)
        s = t + 0.5
        inside = self._inner(np.clip(s, 0.0, 1.0))
        if self.order == 0:
            after = t
        elif self.order == 1:
            after = np.ones_like(t)
        else:
            after = np.zeros_like(t)
        value = np.where(s <= 0.0, 0.0, np.where(s >= 1.0, after, inside))
        return _as_output(value)

    def _derivative(self):
        return ColoniusRamp(self.n, self.order + 1)

    def __repr__(self):
        return f"ColoniusRamp(n={self.n}, order={self.order})"


class ScaledProfile(BaseProfile):
    """A profile multiplied by a constant factor."""

    def __init__(self, factor: float, profile: BaseProfile):
        self.factor = float(factor)
        self.profile = profile

    def __call__(self, t):
        return _as_output(self.factor * np.asarray(self.profile(t)))

    def _derivative(self):
        return ScaledProfile(self.factor, self.profile._derivative())

    def __repr__(self):
        return f"{self.factor} * {self.profile!r}"


class ShiftedProfile(BaseProfile):
    """A profile delayed by ``shift``: evaluates ``profile(t - shift)``."""

    def __init__(self, profile: BaseProfile, shift: float):
        self.profile = profile
        self.shift = float(shift)

    def __call__(self, t):
        return self.profile(np.asarray(t, dtype=float) - self.shift)

    def _derivative(self):
        return ShiftedProfile(self.profile._derivative(), self.shift)

    def __repr__(self):
        return f"({self.profile!r} >> {self.shift})"


class SumProfile(BaseProfile):
    """The sum of two profiles."""

    def __init__(self, left: BaseProfile, right: BaseProfile):
        self.left = left
        self.right = right

    def __call__(self, t):
        return _as_output(np.asarray(self.left(t)) + np.asarray(self.right(t)))

    def _derivative(self):
        return SumProfile(self.left._derivative(), self.right._derivative())

    def __repr__(self):
        return f"({self.left!r} + {self.right!r})"


class ProductProfile(BaseProfile):
    """The product of two profiles."""

    def __init__(self, left: BaseProfile, right: BaseProfile):
        self.left = left
        self.right = right

    def __call__(self, t):
        return _as_output(np.asarray(self.left(t)) * np.asarray(self.right(t)))

    def _derivative(self):
        return SumProfile(
            ProductProfile(self.left._derivative(), self.right),
            ProductProfile(self.left, self.right._derivative()),
        )

    def __repr__(self):
        return f"({self.left!r} * {self.right!r})"
