import copy
import logging
from typing import Iterable, List, Optional

import numpy as np
from pymunk import Vec2d

from rigid_body_tools.rigid_transform import RigidTransform, RigidTransformList
from rigid_body_tools.utils.helpers import check_length

logger = logging.getLogger(__name__)


class Body:
    """A planar body described by a set of surface points.

    The body owns its pose and its coordinate arrays. The body-fixed coordinates ``x_tilde`` and
    ``y_tilde`` are authoritative; the inertial coordinates ``x`` and ``y`` are always derived from
    them through the current pose and are never written directly.

    Some shapes carry a second, auxiliary point set (``x_tilde_mid``, ``y_tilde_mid``), such as the
    panel end points of a shifted polygon. When present it is transformed along with the main set.

    Attributes:
        cent (Vec2d): Position of the body-fixed origin in the inertial frame.
        alpha (float): Angle of the body-fixed axes in radians.
        x_tilde (np.ndarray): Body-fixed x coordinates of the surface points.
        y_tilde (np.ndarray): Body-fixed y coordinates of the surface points.
        x (np.ndarray): Inertial x coordinates of the surface points.
        y (np.ndarray): Inertial y coordinates of the surface points.
        closed (bool): Whether the last point connects back to the first.
    """

    def __init__(
        self,
        x_tilde,
        y_tilde,
        closed: bool = True,
        x_tilde_mid=None,
        y_tilde_mid=None,
    ):
        """Initialises a body at the origin with zero angle.

        Args:
            x_tilde: Body-fixed x coordinates.
            y_tilde: Body-fixed y coordinates.
            closed (bool): Whether the body is closed.
            x_tilde_mid: Optional auxiliary body-fixed x coordinates.
            y_tilde_mid: Optional auxiliary body-fixed y coordinates.

        Raises:
            ValueError: If coordinate arrays of a pair differ in length.
        """
        self.x_tilde = np.array(x_tilde, dtype=float)
        self.y_tilde = np.array(y_tilde, dtype=float)
        check_length(self.y_tilde, len(self.x_tilde), "y_tilde")
        if (x_tilde_mid is None) != (y_tilde_mid is None):
            raise ValueError("x_tilde_mid and y_tilde_mid must be given together")
        self.x_tilde_mid: Optional[np.ndarray] = None
        self.y_tilde_mid: Optional[np.ndarray] = None
        self.x_mid: Optional[np.ndarray] = None
        self.y_mid: Optional[np.ndarray] = None
        if x_tilde_mid is not None:
            self.x_tilde_mid = np.array(x_tilde_mid, dtype=float)
            self.y_tilde_mid = np.array(y_tilde_mid, dtype=float)
            check_length(self.y_tilde_mid, len(self.x_tilde_mid), "y_tilde_mid")
        self.closed = closed

        self.cent = Vec2d(0.0, 0.0)
        self.alpha = 0.0
        self.apply_transform(RigidTransform(self.cent, self.alpha))

    @property
    def n_points(self) -> int:
        return len(self.x_tilde)

    def __len__(self) -> int:
        return self.n_points

    @property
    def has_midpoints(self) -> bool:
        return self.x_tilde_mid is not None

    @property
    def pose(self) -> RigidTransform:
        """The current pose as a ``RigidTransform``."""
        return RigidTransform(self.cent, self.alpha)

    def apply_transform(self, transform: RigidTransform) -> "Body":
        """Moves the body to the pose described by ``transform``.

        Overwrites ``cent`` and ``alpha`` and recomputes the inertial coordinates (and midpoints,
        if any) from the body-fixed ones.

        Args:
            transform (RigidTransform): The new pose.

        Returns:
            Body: This body, mutated in place.
        """
        self.cent = transform.trans
        self.alpha = transform.angle
        self.x, self.y = transform.apply(self.x_tilde, self.y_tilde)
        if self.has_midpoints:
            self.x_mid, self.y_mid = transform.apply(self.x_tilde_mid, self.y_tilde_mid)
        return self

    def set_body_coordinates(self, x_tilde, y_tilde) -> "Body":
        """Overwrites the body-fixed coordinates and re-derives the inertial ones.

        The pose is left untouched.

        Raises:
            ValueError: If either array does not match the number of points.
        """
        check_length(x_tilde, self.n_points, "x_tilde")
        check_length(y_tilde, self.n_points, "y_tilde")
        self.x_tilde[:] = x_tilde
        self.y_tilde[:] = y_tilde
        return self.apply_transform(self.pose)

    def copy(self) -> "Body":
        return copy.deepcopy(self)

    def describe(self) -> str:
        return f"Body with {self.n_points} points"

    def __repr__(self) -> str:
        return (
            f"{self.describe()}\n"
            f"   Current position: ({self.cent.x},{self.cent.y})\n"
            f"   Current angle (rad): {self.alpha}"
        )


class BodyList:
    """An ordered collection of bodies, index-aligned with a ``MotionList``."""

    def __init__(self, bodies: Iterable[Body] = ()):
        self._bodies: List[Body] = []
        for body in bodies:
            self.append(body)

    def append(self, body: Body):
        if not isinstance(body, Body):
            raise TypeError(f"BodyList only holds Body instances, not {type(body).__name__}")
        self._bodies.append(body)

    push = append

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self):
        return iter(self._bodies)

    def __getitem__(self, index):
        return self._bodies[index]

    @property
    def n_points(self) -> int:
        """Total number of surface points over all bodies."""
        return sum(body.n_points for body in self._bodies)

    def apply_transforms(self, transforms: RigidTransformList) -> "BodyList":
        """Applies ``transforms[i]`` to ``self[i]`` for every index."""
        return transforms.apply_to(self)

    def copy(self) -> "BodyList":
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"BodyList of {len(self)} bodies"
