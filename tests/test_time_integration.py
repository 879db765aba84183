import numpy as np
import pytest

from cardiomech.time_integration import NewmarkTwoSteps


def test_order_is_two():
    assert NewmarkTwoSteps(1.0, 0.5, 0.1).order() == 2


def test_du_dot_du_value():
    assert NewmarkTwoSteps(2.0, 1.0, 0.5).du_dot_du() == pytest.approx(16.0)


def test_equal_densities_give_no_inertia():
    scheme = NewmarkTwoSteps(1.0, 1.0, 0.1)
    assert scheme.du_dot_du() == 0.0
    result = scheme.time_derivatives([1.0, 5.0], [2.0, -1.0], [0.0, 3.0])
    np.testing.assert_array_equal(result, np.zeros(2))


def test_nonpositive_dt_rejected():
    with pytest.raises(ValueError):
        NewmarkTwoSteps(1.0, 0.5, 0.0)


def test_linear_motion_has_zero_acceleration():
    scheme = NewmarkTwoSteps(3.0, 1.0, 0.2)
    older = np.array([0.0, 1.0, -2.0])
    step = np.array([0.5, 0.25, 1.0])
    result = scheme.time_derivatives(older + 2 * step, older + step, older)
    np.testing.assert_allclose(result, np.zeros(3), atol=1e-12)


def test_time_derivative_scales_with_du_dot_du():
    scheme = NewmarkTwoSteps(3.0, 1.0, 0.2)
    result = scheme.time_derivatives([1.0], [0.0], [0.0])
    assert result[0] == pytest.approx(scheme.du_dot_du())


def test_init_returns_zero_time_term():
    scheme = NewmarkTwoSteps(1.0, 0.0, 1.0)
    u_dot = scheme.init([4.0, 5.0])
    np.testing.assert_array_equal(u_dot, np.zeros(2))
    np.testing.assert_array_equal(scheme.residual_old, [4.0, 5.0])


def test_post_residual_before_init_raises():
    scheme = NewmarkTwoSteps(1.0, 0.0, 1.0)
    with pytest.raises(RuntimeError):
        scheme.post_residual([0.0], [0.0], [0.0], 1)


def test_post_step_before_init_raises():
    with pytest.raises(RuntimeError):
        NewmarkTwoSteps(1.0, 0.0, 1.0).post_step([0.0])


def test_first_step_uses_old_residual_once():
    scheme = NewmarkTwoSteps(1.0, 0.0, 1.0)
    initial = np.array([1.0, 2.0])
    scheme.init(initial)
    residual = np.array([0.5, 0.5])
    non_time = np.array([3.0, -1.0])
    time_part = np.array([10.0, 20.0])
    total = scheme.post_residual(residual, non_time, time_part, 1)
    np.testing.assert_allclose(total, residual + non_time + initial + time_part)


def test_later_steps_use_shifted_residuals():
    scheme = NewmarkTwoSteps(1.0, 0.0, 1.0)
    initial = np.array([1.0, 2.0])
    scheme.init(initial)
    first = np.array([4.0, -3.0])
    scheme.post_step(first)
    np.testing.assert_array_equal(scheme.residual_old, first)
    np.testing.assert_array_equal(scheme.residual_older, initial)

    non_time = np.array([0.5, 0.5])
    time_part = np.array([-1.0, 1.0])
    total = scheme.post_residual(np.zeros(2), non_time, time_part, 2)
    np.testing.assert_allclose(total, non_time + 2 * first + initial + time_part)


def test_post_residual_does_not_modify_input():
    scheme = NewmarkTwoSteps(1.0, 0.0, 1.0)
    scheme.init([1.0])
    residual = np.array([2.0])
    scheme.post_residual(residual, [1.0], [1.0], 1)
    np.testing.assert_array_equal(residual, [2.0])