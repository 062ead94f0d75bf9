"""
Bodies Package

This package provides the body containers moved around by the motion engine. A ``Body`` owns its
pose (``cent``, ``alpha``), its body-fixed surface coordinates and the inertial coordinates derived
from them. Shape generators include:
  - BasicBody: A body built from user-supplied coordinates.
  - Ellipse / Circle: Points spaced uniformly in parametric angle.
  - Rectangle / Square: Points along the sides, optionally shifted off the corners.
  - Plate: A zero-thickness plate with optional edge clustering.
  - Polygon: Points along the sides of an arbitrary polygon.

The factory function get_body() instantiates a shape from its name.
"""
import logging

from .base_body import Body, BodyList
from .shapes import BasicBody, Circle, Ellipse, Plate, Polygon, Rectangle, Square, midpoints

logger = logging.getLogger(__name__)


def get_body(name: str, *args, **kwargs) -> Body:
    """Factory method to create a body based on its shape name.

    Args:
        name (str): The shape name (e.g., "circle", "ellipse", "rectangle", "square", "plate",
            "polygon", "basic").
        *args: Positional arguments forwarded to the shape constructor.
        **kwargs: Keyword arguments forwarded to the shape constructor.

    Returns:
        Body: An instance of the requested shape.

    Raises:
        ValueError: If the shape name is not recognised.
    """
    mapping = {
        "basic": BasicBody,
        "ellipse": Ellipse,
        "circle": Circle,
        "rectangle": Rectangle,
        "square": Square,
        "plate": Plate,
        "polygon": Polygon,
    }
    shape = mapping.get((name or "").lower())
    if shape is None:
        logger.error("Shape '%s' not recognised.", name)
        raise ValueError(f"Unknown body shape: {name}")
    return shape(*args, **kwargs)


__all__ = [
    "Body",
    "BodyList",
    "BasicBody",
    "Ellipse",
    "Circle",
    "Rectangle",
    "Square",
    "Plate",
    "Polygon",
    "midpoints",
    "get_body",
]
