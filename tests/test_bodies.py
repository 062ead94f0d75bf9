import numpy as np
import pytest
from pymunk import Vec2d

from rigid_body_tools.bodies import (
    BasicBody,
    BodyList,
    Circle,
    Ellipse,
    Plate,
    Polygon,
    Rectangle,
    Square,
    get_body,
    midpoints,
)
from rigid_body_tools.rigid_transform import RigidTransform

SQUARE_X = [-1.0, 1.0, 1.0, -1.0]
SQUARE_Y = [-1.0, -1.0, 1.0, 1.0]


def test_new_body_sits_at_origin():
    body = BasicBody([0.0, 1.0, 0.0], [0.0, 0.0, 1.0])
    assert body.cent == Vec2d(0.0, 0.0)
    assert body.alpha == 0.0
    assert body.n_points == 3
    np.testing.assert_array_equal(body.x, body.x_tilde)
    # Inertial and body-fixed arrays are separate buffers.
    assert body.x is not body.x_tilde


def test_basic_body_length_mismatch():
    with pytest.raises(ValueError):
        BasicBody([0.0, 1.0], [0.0])


def test_circle_points_lie_on_radius():
    body = Circle(2.0, 64)
    assert body.n_points == 64
    np.testing.assert_allclose(np.hypot(body.x_tilde, body.y_tilde), 2.0)
    assert "Circular" in repr(body)


def test_ellipse_semi_axes():
    body = Ellipse(3.0, 1.0, 40)
    assert np.max(body.x_tilde) == pytest.approx(3.0)
    assert np.max(body.y_tilde) == pytest.approx(1.0, rel=1e-2)
    np.testing.assert_allclose((body.x_tilde / 3.0) ** 2 + body.y_tilde**2, 1.0)


def test_rectangle_point_count_and_shift():
    na = 11
    body = Rectangle(1.0, 0.5, na, shifted=False)
    dsa = 2.0 / (na - 1)
    nb = int(np.ceil(1.0 / dsa)) + 1
    assert body.n_points == 2 * (na - 1) + 2 * (nb - 1)
    assert not body.has_midpoints
    assert body.x_tilde_mid is None and body.x_mid is None
    # Unshifted points include the corner.
    assert body.x_tilde[0] == -1.0 and body.y_tilde[0] == -0.5

    shifted = Rectangle(1.0, 0.5, na)
    assert shifted.has_midpoints
    assert shifted.n_points == body.n_points
    np.testing.assert_array_equal(shifted.x_tilde_mid, body.x_tilde)
    # Shifted points sit halfway along each panel.
    x_mid, y_mid = midpoints(body.x_tilde, body.y_tilde)
    np.testing.assert_allclose(shifted.x_tilde, x_mid)
    np.testing.assert_allclose(shifted.y_tilde, y_mid)


def test_square():
    body = Square(1.0, 5)
    assert body.a == body.b == 1.0
    assert "Square" in repr(body)


def test_plate_spans_its_length():
    body = Plate(2.0, 21)
    assert not body.closed
    assert body.x_tilde[0] == pytest.approx(-1.0)
    assert body.x_tilde[-1] == pytest.approx(1.0)
    np.testing.assert_array_equal(body.y_tilde, 0.0)
    # The default distribution is uniform.
    np.testing.assert_allclose(np.diff(body.x_tilde), 0.1)

    clustered = Plate(2.0, 21, lam=0.2)
    spacing = np.diff(clustered.x_tilde)
    assert spacing[0] < spacing[len(spacing) // 2]


def test_polygon_shifted_and_unshifted_are_symmetric():
    unshifted = Polygon(SQUARE_X, SQUARE_Y, 5, shifted=False)
    shifted = Polygon(SQUARE_X, SQUARE_Y, 5, shifted=True)
    # Four points per closed side, end points shared between sides.
    assert unshifted.n_points == 16
    assert shifted.n_points == 16
    # The two variants swap the roles of panel end points and panel midpoints.
    np.testing.assert_array_equal(unshifted.x_tilde, shifted.x_tilde_mid)
    np.testing.assert_array_equal(unshifted.y_tilde, shifted.y_tilde_mid)
    np.testing.assert_array_equal(shifted.x_tilde, unshifted.x_tilde_mid)
    np.testing.assert_array_equal(shifted.y_tilde, unshifted.y_tilde_mid)


def test_open_polygon_keeps_last_vertex():
    body = Polygon([0.0, 1.0, 1.0], [0.0, 0.0, 1.0], 0.25, shifted=False, closed=False)
    assert body.x_tilde[-1] == 1.0 and body.y_tilde[-1] == 1.0
    assert body.n_points == 9
    assert len(body.x_tilde_mid) == 8
    assert "Open polygon with 3 vertices" in repr(body)


def test_set_body_coordinates_keeps_pose():
    body = Circle(1.0, 10)
    RigidTransform((1.0, 1.0), 0.5).apply_to(body)
    new_x, new_y = 2.0 * body.x_tilde, 0.5 * body.y_tilde
    body.set_body_coordinates(new_x, new_y)
    assert body.cent == Vec2d(1.0, 1.0)
    assert body.alpha == 0.5
    x, y = body.pose.apply(new_x, new_y)
    np.testing.assert_array_equal(body.x, x)
    np.testing.assert_array_equal(body.y, y)


def test_set_body_coordinates_wrong_length():
    body = Circle(1.0, 10)
    with pytest.raises(ValueError):
        body.set_body_coordinates(np.zeros(9), np.zeros(9))


def test_copy_is_independent():
    body = Circle(1.0, 10)
    clone = body.copy()
    RigidTransform((1.0, 0.0), 0.0).apply_to(clone)
    assert body.cent == Vec2d(0.0, 0.0)
    assert clone.cent == Vec2d(1.0, 0.0)


def test_body_list():
    bodies = BodyList([Circle(1.0, 10)])
    bodies.push(Square(1.0, 3))
    assert len(bodies) == 2
    assert bodies.n_points == 10 + bodies[1].n_points
    with pytest.raises(TypeError):
        bodies.append("not a body")


def test_get_body():
    body = get_body("circle", 1.5, 12)
    assert isinstance(body, Ellipse)
    assert body.a == 1.5
    with pytest.raises(ValueError):
        get_body("dodecahedron")
