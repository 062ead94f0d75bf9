"""Point-set generators for common planar shapes.

Every generator returns a ``Body`` placed at the origin with zero angle. Shifted rectangles and
polygons place their surface points at panel midpoints and keep the panel end points in the
auxiliary ``*_mid`` arrays. Unshifted polygons place the points at the panel end points and keep
the panel midpoints in the auxiliary arrays; unshifted rectangles carry no auxiliary arrays.
"""

from typing import Tuple

import numpy as np

from rigid_body_tools.bodies.base_body import Body
from rigid_body_tools.utils.config import Config


def midpoints(x, y, closed: bool = True) -> Tuple[np.ndarray, np.ndarray]:
    """Returns the midpoints of consecutive points, wrapping around when ``closed``."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if closed:
        return 0.5 * (x + np.roll(x, -1)), 0.5 * (y + np.roll(y, -1))
    return 0.5 * (x[:-1] + x[1:]), 0.5 * (y[:-1] + y[1:])


class BasicBody(Body):
    """Body built directly from body-fixed coordinate vectors."""

    def __init__(self, x, y, closed: bool = True):
        super().__init__(x, y, closed=closed)

    def describe(self) -> str:
        return f"Basic pointwise-specified body with {self.n_points} points"


class Ellipse(Body):
    """Ellipse with semi-axes ``a`` (along x) and ``b`` (along y) and ``n`` perimeter points.

    Points are spaced uniformly in the parametric angle, starting on the positive x axis.
    """

    def __init__(self, a: float, b: float, n: int = Config.DEFAULT_BODY_POINTS):
        if n < 3:
            raise ValueError("an ellipse needs at least 3 points")
        self.a = float(a)
        self.b = float(b)
        theta = np.linspace(0.0, 2.0 * np.pi, n + 1)[:n]
        super().__init__(self.a * np.cos(theta), self.b * np.sin(theta), closed=True)

    def describe(self) -> str:
        if self.a == self.b:
            return f"Circular body with {self.n_points} points and radius {self.a}"
        return f"Elliptical body with {self.n_points} points and semi-axes ({self.a},{self.b})"


def Circle(a: float, n: int = Config.DEFAULT_BODY_POINTS) -> Ellipse:
    """Circle of radius ``a`` with ``n`` perimeter points."""
    return Ellipse(a, a, n)


def _rectangle_points(a: float, b: float, na: int) -> Tuple[np.ndarray, np.ndarray]:
    # Corners included; counter-clockwise from the lower left corner.
    dsa = 2.0 * a / (na - 1)
    nb = int(np.ceil(2.0 * b / dsa)) + 1
    dsb = 2.0 * b / (nb - 1)

    bottom_x = -a + dsa * np.arange(0, na - 1)
    right_y = -b + dsb * np.arange(0, nb - 1)
    top_x = -a + dsa * np.arange(na - 1, 0, -1)
    left_y = -b + dsb * np.arange(nb - 1, 0, -1)

    x = np.concatenate([bottom_x, np.full(nb - 1, a), top_x, np.full(nb - 1, -a)])
    y = np.concatenate([np.full(na - 1, -b), right_y, np.full(na - 1, b), left_y])
    return x, y


class Rectangle(Body):
    """Rectangle with half-lengths ``a`` (x side) and ``b`` (y side), centred on the origin.

    ``na`` points are distributed on each x side, corners included; the y sides get the closest
    matching spacing. By default the points are shifted by half a panel so that none sits on a
    corner, and the corner-including set is kept as the auxiliary midpoint arrays.
    """

    def __init__(self, a: float, b: float, na: int, shifted: bool = True):
        if na < 2:
            raise ValueError("a rectangle needs at least 2 points per side")
        self.a = float(a)
        self.b = float(b)
        self.shifted = shifted
        x_edges, y_edges = _rectangle_points(self.a, self.b, na)
        if shifted:
            x_tilde, y_tilde = midpoints(x_edges, y_edges, closed=True)
            super().__init__(x_tilde, y_tilde, closed=True, x_tilde_mid=x_edges, y_tilde_mid=y_edges)
        else:
            super().__init__(x_edges, y_edges, closed=True)

    def describe(self) -> str:
        if self.a == self.b:
            return f"Square body with {self.n_points} points and side half-length {self.a}"
        return f"Rectangular body with {self.n_points} points and half-lengths ({self.a},{self.b})"


def Square(a: float, na: int, shifted: bool = True) -> Rectangle:
    """Square with side half-length ``a`` and ``na`` points per side."""
    return Rectangle(a, a, na, shifted=shifted)


class Plate(Body):
    """Flat plate of zero thickness along the x axis, centred on the origin.

    Args:
        length (float): Plate length.
        n (int): Number of points, end points included.
        lam (float): Point clustering parameter in ``(0, 1]``; ``1.0`` spaces the points uniformly
            and smaller values cluster them towards the edges.
    """

    def __init__(self, length: float, n: int, lam: float = Config.PLATE_POINT_CLUSTERING):
        if n < 2:
            raise ValueError("a plate needs at least 2 points")
        self.length = float(length)
        self.thick = 0.0
        dphi = np.pi / (n - 1)
        phi = np.linspace(np.pi - dphi / 2, dphi / 2, n - 1)
        jac = np.sqrt(np.sin(phi) ** 2 + lam**2 * np.cos(phi) ** 2)
        jac = self.length * jac / dphi / np.sum(jac)
        x_tilde = -0.5 * self.length + dphi * np.cumsum(np.concatenate([[0.0], jac]))
        super().__init__(x_tilde, np.zeros_like(x_tilde), closed=False)

    def describe(self) -> str:
        return f"Plate with {self.n_points} points and length {self.length} and thickness {self.thick}"


def _line_points(x1, y1, x2, y2, ds):
    """Points along a segment, end points included, plus their midpoints.

    ``ds`` is either an integer number of points or a float target spacing.
    """
    if isinstance(ds, (int, np.integer)):
        n = int(ds)
    else:
        n = int(round(np.hypot(x2 - x1, y2 - y1) / ds)) + 1
    n = max(n, 2)
    s = np.linspace(0.0, 1.0, n)
    x = x1 + (x2 - x1) * s
    y = y1 + (y2 - y1) * s
    xmid, ymid = midpoints(x, y, closed=False)
    return x, y, xmid, ymid


class Polygon(Body):
    """Polygon through vertices ``(xv, yv)`` with points distributed along every side.

    Args:
        xv: Vertex x coordinates.
        yv: Vertex y coordinates.
        ds (int | float): Points per side (int) or target point spacing (float).
        shifted (bool): Place points at panel midpoints (default) rather than panel end points.
        closed (bool): Join the last vertex back to the first.
    """

    def __init__(self, xv, yv, ds, shifted: bool = True, closed: bool = True):
        xv = np.asarray(xv, dtype=float)
        yv = np.asarray(yv, dtype=float)
        if len(xv) != len(yv):
            raise ValueError("xv and yv must have the same length")
        if len(xv) < 2:
            raise ValueError("a polygon needs at least 2 vertices")
        self.n_vertices = len(xv)
        self.shifted = shifted

        if closed:
            xv = np.append(xv, xv[0])
            yv = np.append(yv, yv[0])
        x_parts, y_parts, xmid_parts, ymid_parts = [], [], [], []
        n_sides = len(xv) - 1
        for i in range(n_sides):
            xi, yi, xmidi, ymidi = _line_points(xv[i], yv[i], xv[i + 1], yv[i + 1], ds)
            # Each side contributes its start point; an open polygon also keeps the final end point.
            keep = len(xi) if (i == n_sides - 1 and not closed) else len(xi) - 1
            x_parts.append(xi[:keep])
            y_parts.append(yi[:keep])
            xmid_parts.append(xmidi)
            ymid_parts.append(ymidi)
        x, y = np.concatenate(x_parts), np.concatenate(y_parts)
        xmid, ymid = np.concatenate(xmid_parts), np.concatenate(ymid_parts)

        if shifted:
            super().__init__(xmid, ymid, closed=closed, x_tilde_mid=x, y_tilde_mid=y)
        else:
            super().__init__(x, y, closed=closed, x_tilde_mid=xmid, y_tilde_mid=ymid)

    def describe(self) -> str:
        kind = "Closed" if self.closed else "Open"
        return f"{kind} polygon with {self.n_vertices} vertices and {self.n_points} points"
