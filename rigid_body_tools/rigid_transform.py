"""Planar rigid-body transforms.

A ``RigidTransform`` is an immutable pose (translation plus rotation angle). Applied to a pair of
body-fixed coordinate arrays it rotates, then translates them into the inertial frame. Applied to a
body it hands itself to ``Body.apply_transform``, which is the only code path allowed to move a body.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Tuple

import numpy as np
from pymunk import Vec2d

from rigid_body_tools.utils.helpers import check_length

if TYPE_CHECKING:  # pragma: no cover - assist typing only
    from rigid_body_tools.bodies.base_body import Body, BodyList


@dataclass(frozen=True)
class RigidTransform:
    """Translation ``trans`` and rotation ``angle`` (radians) of a body-fixed frame.

    Attributes:
        trans (Vec2d): Position of the body-fixed origin in the inertial frame.
        angle (float): Rotation of the body-fixed axes relative to the inertial axes.
    """

    trans: Vec2d
    angle: float

    def __post_init__(self):
        object.__setattr__(self, "trans", Vec2d(float(self.trans[0]), float(self.trans[1])))
        object.__setattr__(self, "angle", float(self.angle))

    @classmethod
    def from_vector(cls, state) -> "RigidTransform":
        """Builds a transform from a rigid state vector ``(cx, cy, alpha)``.

        Raises:
            ValueError: If ``state`` does not have three entries.
        """
        check_length(state, 3, "rigid state vector")
        return cls(Vec2d(float(state[0]), float(state[1])), float(state[2]))

    def to_vector(self) -> np.ndarray:
        """Returns the pose as the rigid state vector ``[cx, cy, alpha]``."""
        return np.array([self.trans.x, self.trans.y, self.angle], dtype=float)

    @property
    def rotation_matrix(self) -> np.ndarray:
        c, s = np.cos(self.angle), np.sin(self.angle)
        return np.array([[c, -s], [s, c]])

    def rotate(self, u, v) -> Tuple[np.ndarray, np.ndarray]:
        """Rotates vector components by ``angle`` without translating them.

        Used for velocities, which transform with the rotation only.
        """
        c, s = np.cos(self.angle), np.sin(self.angle)
        u = np.asarray(u, dtype=float)
        v = np.asarray(v, dtype=float)
        return c * u - s * v, s * u + c * v

    def apply(self, x_tilde, y_tilde) -> Tuple[np.ndarray, np.ndarray]:
        """Maps body-fixed coordinates to inertial coordinates.

        ``x = cx + x_tilde cos(angle) - y_tilde sin(angle)`` and
        ``y = cy + x_tilde sin(angle) + y_tilde cos(angle)``.

        Args:
            x_tilde: Body-fixed x coordinates.
            y_tilde: Body-fixed y coordinates.

        Returns:
            Tuple[np.ndarray, np.ndarray]: New arrays of inertial x and y coordinates.
        """
        u, v = self.rotate(x_tilde, y_tilde)
        return self.trans.x + u, self.trans.y + v

    def apply_to(self, body: "Body") -> "Body":
        """Moves ``body`` to this pose in place and returns it."""
        return body.apply_transform(self)

    def __call__(self, *args):
        if len(args) == 1:
            return self.apply_to(args[0])
        return self.apply(*args)


class RigidTransformList:
    """Ordered collection of transforms applied index-by-index to a ``BodyList``."""

    def __init__(self, transforms: Iterable[RigidTransform] = ()):
        self._transforms: List[RigidTransform] = []
        for transform in transforms:
            self.append(transform)

    def append(self, transform: RigidTransform):
        if not isinstance(transform, RigidTransform):
            raise TypeError(f"RigidTransformList only holds RigidTransform instances, not {type(transform).__name__}")
        self._transforms.append(transform)

    def __len__(self) -> int:
        return len(self._transforms)

    def __iter__(self):
        return iter(self._transforms)

    def __getitem__(self, index):
        return self._transforms[index]

    def to_vector(self) -> np.ndarray:
        """Concatenates the rigid state vectors of every transform, in order."""
        return np.concatenate([t.to_vector() for t in self._transforms]) if self._transforms else np.zeros(0)

    def apply_to(self, bodies: "BodyList") -> "BodyList":
        """Applies transform ``i`` to body ``i`` in place.

        Raises:
            ValueError: If the list lengths differ.
        """
        check_length(bodies, len(self), "body list")
        for transform, body in zip(self._transforms, bodies):
            transform.apply_to(body)
        return bodies

    def __call__(self, bodies: "BodyList") -> "BodyList":
        return self.apply_to(bodies)
