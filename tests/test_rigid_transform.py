import numpy as np
import pytest
from pymunk import Vec2d

from rigid_body_tools.bodies import BodyList, Circle, Polygon, Rectangle
from rigid_body_tools.rigid_transform import RigidTransform, RigidTransformList


@pytest.fixture
def transform():
    return RigidTransform((0.7, -0.2), 0.9)


def test_apply_rotates_then_translates(transform):
    x_tilde = np.array([1.0, 0.0, -0.5])
    y_tilde = np.array([0.0, 2.0, 0.3])
    x, y = transform.apply(x_tilde, y_tilde)
    ca, sa = np.cos(0.9), np.sin(0.9)
    np.testing.assert_allclose(x, 0.7 + x_tilde * ca - y_tilde * sa)
    np.testing.assert_allclose(y, -0.2 + x_tilde * sa + y_tilde * ca)


def test_rotate_ignores_translation(transform):
    u, v = transform.rotate(np.array([1.0]), np.array([0.0]))
    np.testing.assert_allclose(u, [np.cos(0.9)])
    np.testing.assert_allclose(v, [np.sin(0.9)])
    np.testing.assert_allclose(transform.rotation_matrix @ np.array([1.0, 0.0]), [np.cos(0.9), np.sin(0.9)])


def test_apply_to_body_agrees_with_apply(transform):
    body = Circle(1.0, 50)
    returned = transform.apply_to(body)
    # The body is mutated in place, not copied.
    assert returned is body
    assert body.cent == Vec2d(0.7, -0.2)
    assert body.alpha == 0.9
    x, y = transform.apply(body.x_tilde, body.y_tilde)
    np.testing.assert_array_equal(body.x, x)
    np.testing.assert_array_equal(body.y, y)


def test_apply_to_body_moves_midpoints(transform):
    body = Rectangle(1.0, 0.5, 11)
    transform(body)
    x_mid, y_mid = transform.apply(body.x_tilde_mid, body.y_tilde_mid)
    np.testing.assert_array_equal(body.x_mid, x_mid)
    np.testing.assert_array_equal(body.y_mid, y_mid)


def test_transform_does_not_touch_body_fixed_coordinates(transform):
    body = Polygon([0.0, 1.0, 0.0], [0.0, 0.0, 1.0], 4)
    x_tilde = body.x_tilde.copy()
    transform.apply_to(body)
    np.testing.assert_array_equal(body.x_tilde, x_tilde)


def test_vector_round_trip(transform):
    vec = transform.to_vector()
    np.testing.assert_array_equal(vec, [0.7, -0.2, 0.9])
    assert RigidTransform.from_vector(vec) == transform


def test_from_vector_wrong_length():
    with pytest.raises(ValueError):
        RigidTransform.from_vector([1.0, 2.0])


def test_transform_is_immutable(transform):
    with pytest.raises(AttributeError):
        transform.angle = 0.0


def test_transform_list_applies_elementwise():
    bodies = BodyList([Circle(1.0, 20), Rectangle(2.0, 0.5, 10)])
    t1 = RigidTransform((1.0, 2.0), 0.3)
    t2 = RigidTransform((-1.0, 0.5), -0.4)
    transforms = RigidTransformList([t1, t2])
    transforms(bodies)
    assert bodies[0].pose == t1
    assert bodies[1].pose == t2
    np.testing.assert_array_equal(transforms.to_vector(), np.concatenate([t1.to_vector(), t2.to_vector()]))


def test_transform_list_length_mismatch():
    bodies = BodyList([Circle(1.0, 20), Circle(2.0, 20)])
    transforms = RigidTransformList([RigidTransform((0.0, 0.0), 0.0)])
    with pytest.raises(ValueError):
        transforms.apply_to(bodies)


def test_transform_list_type_check():
    with pytest.raises(TypeError):
        RigidTransformList([(0.0, 0.0, 0.0)])
