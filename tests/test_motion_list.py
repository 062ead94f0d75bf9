import numpy as np
import pytest

from rigid_body_tools.bodies import BodyList, Circle, Rectangle
from rigid_body_tools.kinematics import Oscillation
from rigid_body_tools.motions import (
    BasicDirectMotion,
    MotionList,
    RigidAndDeformingMotion,
    RigidBodyMotion,
    motion_state,
    motion_velocity,
    update_body,
)
from rigid_body_tools.rigid_transform import RigidTransform, RigidTransformList

T1 = RigidTransform((1.0, -0.5), 0.2)
T2 = RigidTransform((-2.0, 1.0), -0.6)


@pytest.fixture
def bodies():
    bodies = BodyList([Circle(1.0, 100), Rectangle(2.0, 0.5, 40)])
    RigidTransformList([T1, T2]).apply_to(bodies)
    return bodies


@pytest.fixture
def motions(bodies):
    n = bodies[1].n_points
    rigid = RigidBodyMotion(Oscillation(ux=1.0, amp_y=0.3, omega=2.0, delta_alpha=0.4))
    composite = RigidAndDeformingMotion.constant((0.5, 0.0), 0.1, np.zeros(n), 0.01 * np.ones(n))
    return MotionList([rigid, composite])


def test_motion_list_state_layout(bodies, motions):
    x0 = motion_state(bodies, motions)
    n = bodies[1].n_points
    assert len(x0) == 3 + 3 + 2 * n
    np.testing.assert_array_equal(x0[:3], T1.to_vector())
    np.testing.assert_array_equal(x0[3:6], T2.to_vector())
    np.testing.assert_array_equal(x0[6:6 + n], bodies[1].x_tilde)
    assert motions.state_lengths(bodies) == [3, 3 + 2 * n]


def test_motion_list_velocity_is_concatenated(bodies, motions):
    t = 0.7
    velocity = motion_velocity(bodies, motions, t)
    expected = np.concatenate(
        [motions[0].motion_velocity(bodies[0], t), motions[1].motion_velocity(bodies[1], t)]
    )
    np.testing.assert_array_equal(velocity, expected)
    assert len(velocity) == len(motion_state(bodies, motions))


def test_motion_list_round_trip(bodies, motions):
    x0 = motion_state(bodies, motions)
    moved = bodies.copy()
    update_body(moved, x0, motions)
    np.testing.assert_array_equal(motion_state(moved, motions), x0)
    for original, copy in zip(bodies, moved):
        np.testing.assert_array_equal(copy.x, original.x)
        np.testing.assert_array_equal(copy.y, original.y)


def test_motion_list_update_moves_each_body(bodies, motions):
    x0 = motion_state(bodies, motions)
    x1 = x0 + 0.1 * motion_velocity(bodies, motions, 0.0)
    update_body(bodies, x1, motions)
    np.testing.assert_array_equal(bodies[0].pose.to_vector(), x1[:3])
    np.testing.assert_array_equal(bodies[1].pose.to_vector(), x1[3:6])
    n = bodies[1].n_points
    np.testing.assert_array_equal(bodies[1].y_tilde, x1[6 + n:])


def test_motion_list_wrong_state_length(bodies, motions):
    x0 = motion_state(bodies, motions)
    with pytest.raises(ValueError):
        update_body(bodies, x0[:-1], motions)


def test_push_defers_length_check(bodies, motions):
    motions.push(RigidBodyMotion.constant((1.0, 0.0), 0.0))
    assert len(motions) == 3
    with pytest.raises(ValueError):
        motion_state(bodies, motions)
    with pytest.raises(ValueError):
        motion_velocity(bodies, motions, 0.0)


def test_motion_list_type_checks(bodies, motions):
    with pytest.raises(TypeError):
        MotionList([Oscillation()])
    with pytest.raises(TypeError):
        motions.append(BasicDirectMotion)
    with pytest.raises(TypeError):
        motion_state(bodies[0], motions)


def test_motion_list_extend():
    motions = MotionList()
    motions.extend([RigidBodyMotion.constant((1.0, 0.0), 0.0), BasicDirectMotion([0.0], [0.0])])
    assert len(motions) == 2
    assert isinstance(motions[1], BasicDirectMotion)
