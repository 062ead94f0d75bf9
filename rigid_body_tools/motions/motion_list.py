import logging
from typing import Iterable, List

import numpy as np

from rigid_body_tools.bodies.base_body import BodyList
from rigid_body_tools.motions.base_motion import BaseMotion
from rigid_body_tools.utils.helpers import check_length, flatten_state, split_state

logger = logging.getLogger(__name__)


class MotionList:
    """An ordered collection of motions paired index-by-index with a ``BodyList``.

    The combined state (and velocity) of a body list is the concatenation, in list order, of the
    state (and velocity) of each body under its paired motion. Appending does not check the
    pairing; a length mismatch surfaces when the list is used with a body list.
    """

    def __init__(self, motions: Iterable[BaseMotion] = ()):
        self._motions: List[BaseMotion] = []
        for motion in motions:
            self.append(motion)

    def append(self, motion: BaseMotion):
        if not isinstance(motion, BaseMotion):
            raise TypeError(f"MotionList only holds BaseMotion instances, not {type(motion).__name__}")
        self._motions.append(motion)

    push = append

    def extend(self, motions: Iterable[BaseMotion]):
        for motion in motions:
            self.append(motion)

    def __len__(self) -> int:
        return len(self._motions)

    def __iter__(self):
        return iter(self._motions)

    def __getitem__(self, index):
        return self._motions[index]

    def _check_bodies(self, bodies: BodyList):
        check_length(bodies, len(self), "body list paired with motion list")

    def state_lengths(self, bodies: BodyList) -> List[int]:
        """Length of each body's state chunk, in list order."""
        self._check_bodies(bodies)
        return [motion.state_length(body) for body, motion in zip(bodies, self._motions)]

    def motion_state(self, bodies: BodyList) -> np.ndarray:
        self._check_bodies(bodies)
        return flatten_state(*[motion.motion_state(body) for body, motion in zip(bodies, self._motions)])

    def motion_velocity(self, bodies: BodyList, t: float) -> np.ndarray:
        self._check_bodies(bodies)
        return flatten_state(*[motion.motion_velocity(body, t) for body, motion in zip(bodies, self._motions)])

    def update_body(self, bodies: BodyList, state) -> BodyList:
        """Splits ``state`` into per-body chunks and writes each into its body.

        Raises:
            ValueError: If the list lengths differ or ``state`` has the wrong total length.
        """
        chunks = split_state(state, self.state_lengths(bodies))
        logger.debug("Updating %d bodies from a state of length %d", len(bodies), len(state))
        for body, motion, chunk in zip(bodies, self._motions, chunks):
            motion.update_body(body, chunk)
        return bodies

    def __repr__(self):
        return f"MotionList of {len(self)} motions"
