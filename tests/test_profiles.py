import numpy as np
import pytest

from rigid_body_tools.kinematics.profiles import (
    ColoniusRamp,
    ConstantProfile,
    EldredgeRamp,
    ProductProfile,
    ScaledProfile,
    ShiftedProfile,
    Sinusoid,
    SumProfile,
)

FINITE_DIFFERENCE_STEP = 1.0e-4


def finite_difference(profile, t, h=FINITE_DIFFERENCE_STEP):
    return (profile(t + h) - profile(t - h)) / (2 * h)


def test_eldredge_ramp_limits():
    ramp = EldredgeRamp(11.0)
    # Far before the switch the ramp is flat; far after it grows like t.
    assert ramp(-10.0) == pytest.approx(0.0, abs=1e-12)
    assert ramp(10.0) == pytest.approx(10.0, abs=1e-12)
    assert ramp.derivative()(-10.0) == pytest.approx(0.0, abs=1e-12)
    assert ramp.derivative()(10.0) == pytest.approx(1.0, abs=1e-12)
    assert ramp.derivative()(0.0) == pytest.approx(0.5)


def test_eldredge_ramp_does_not_overflow():
    ramp = EldredgeRamp(50.0)
    assert np.isfinite(ramp(1000.0))
    assert ramp(1000.0) == pytest.approx(1000.0)


def test_eldredge_ramp_derivatives_match_finite_differences():
    ramp = EldredgeRamp(5.0)
    for order in range(EldredgeRamp.MAX_ORDER):
        profile = ramp.derivative(order)
        for t in (-0.3, 0.0, 0.2, 0.7):
            assert profile.derivative()(t) == pytest.approx(finite_difference(profile, t), rel=1e-5, abs=1e-6)


def test_eldredge_ramp_order_limit():
    with pytest.raises(ValueError):
        EldredgeRamp(11.0).derivative(4)
    with pytest.raises(ValueError):
        EldredgeRamp(-1.0)


def test_colonius_ramp_pieces():
    ramp = ColoniusRamp(1)
    assert ramp(-0.75) == 0.0
    assert ramp(0.75) == pytest.approx(0.75)
    # Continuous at both ends of the transition.
    assert ramp(-0.5 + 1e-9) == pytest.approx(0.0, abs=1e-8)
    assert ramp(0.5 - 1e-9) == pytest.approx(0.5, abs=1e-8)
    # The smoothstep is symmetric about the centre of the transition.
    assert ramp.derivative()(0.0) == pytest.approx(0.5)
    assert ramp.derivative()(0.75) == 1.0
    assert ramp.derivative(2)(0.75) == 0.0


@pytest.mark.parametrize("n", [0, 1, 2, 3])
def test_colonius_ramp_derivatives_match_finite_differences(n):
    ramp = ColoniusRamp(n)
    for t in (-0.3, 0.0, 0.1, 0.4):
        assert ramp.derivative()(t) == pytest.approx(finite_difference(ramp, t), rel=1e-5, abs=1e-6)
        assert ramp.derivative(2)(t) == pytest.approx(finite_difference(ramp.derivative(), t), rel=1e-5, abs=1e-5)


def test_profiles_evaluate_arrays():
    t = np.linspace(-1.0, 1.0, 7)
    for profile in (EldredgeRamp(), ColoniusRamp(), Sinusoid(2.0), ConstantProfile(3.0), EldredgeRamp() >> 0.5):
        values = profile(t)
        assert isinstance(values, np.ndarray)
        assert values.shape == t.shape
    assert isinstance(EldredgeRamp()(0.3), float)


def test_sinusoid_derivative():
    s = Sinusoid(3.0, 0.2)
    assert s(0.4) == pytest.approx(np.sin(3.0 * 0.4 + 0.2))
    assert s.derivative()(0.4) == pytest.approx(3.0 * np.cos(3.0 * 0.4 + 0.2))
    assert s.derivative(2)(0.4) == pytest.approx(-9.0 * np.sin(3.0 * 0.4 + 0.2))


def test_profile_algebra():
    ramp = EldredgeRamp(11.0)
    shifted = ramp >> 1.0
    assert isinstance(shifted, ShiftedProfile)
    assert shifted(1.3) == pytest.approx(ramp(0.3))
    assert (ramp << 1.0)(0.3) == pytest.approx(ramp(1.3))

    combo = 2.0 * ramp - (ramp >> 0.5) + 1.0
    assert combo(0.2) == pytest.approx(2.0 * ramp(0.2) - ramp(-0.3) + 1.0)
    assert combo.derivative()(0.2) == pytest.approx(2.0 * ramp.derivative()(0.2) - ramp.derivative()(-0.3))

    assert isinstance(3.0 * ramp, ScaledProfile)
    assert isinstance(ramp + ramp, SumProfile)
    assert (-ramp)(0.4) == pytest.approx(-ramp(0.4))
    assert (1.0 - ramp)(0.4) == pytest.approx(1.0 - ramp(0.4))


def test_product_rule():
    s = Sinusoid(1.0)
    product = s * s
    assert isinstance(product, ProductProfile)
    t = 0.8
    assert product(t) == pytest.approx(np.sin(t) ** 2)
    assert product.derivative()(t) == pytest.approx(2.0 * np.sin(t) * np.cos(t))


def test_constant_profile():
    c = ConstantProfile(2.5)
    assert c(10.0) == 2.5
    assert c.derivative()(10.0) == 0.0


def test_profile_rejects_unknown_operand():
    with pytest.raises(TypeError):
        EldredgeRamp() + "ramp"
