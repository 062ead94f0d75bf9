import logging
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def flatten_state(*arrays):
    """Flattens multiple arrays into a single one.

    This function takes any number of array-likes as input, flattens each one (ignoring any that are None),
    and concatenates them, in argument order, into a single 1D float array.

    Args:
        *arrays: Variable length argument list of array-likes. Any None values are skipped.

    Returns:
        numpy.ndarray: A 1D float array resulting from the concatenation of the flattened inputs.
    """
    parts = [np.asarray(arr, dtype=float).flatten() for arr in arrays if arr is not None]
    if not parts:
        return np.zeros(0, dtype=float)
    return np.concatenate(parts)


def check_length(vector, expected: int, what: str = "vector"):
    """Raises a ValueError unless ``vector`` holds exactly ``expected`` entries.

    Args:
        vector: Any sized object.
        expected (int): The required length.
        what (str): Name used in the error message.

    Raises:
        ValueError: If the lengths differ.
    """
    actual = len(vector)
    if actual != expected:
        raise ValueError(f"wrong length for {what}: expected {expected}, got {actual}")


def split_state(state, lengths: Sequence[int]) -> List[np.ndarray]:
    """Splits a flat state vector into consecutive chunks.

    Args:
        state: Flat array-like to split.
        lengths (Sequence[int]): Length of each chunk, in order.

    Returns:
        List[np.ndarray]: One chunk per entry of ``lengths``.

    Raises:
        ValueError: If ``lengths`` does not add up to the length of ``state``.
    """
    state = np.asarray(state, dtype=float)
    check_length(state, int(sum(lengths)), "motion state vector")
    offsets = np.cumsum(lengths)[:-1]
    chunks = np.split(state, offsets) if len(lengths) > 0 else []
    logger.debug("Split state of length %d into chunks %s", len(state), list(lengths))
    return chunks
