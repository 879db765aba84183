import numpy as np
import pytest

from cardiomech.fibers import (
    FiberFrame,
    FiberTensors,
    FixedRotation,
    check_orthonormal,
    fixed_rotation_from_angles,
    orthonormal_frame,
)


def test_orthonormal_frame_is_orthonormal():
    frame = orthonormal_frame([1.0, 2.0, 0.5], [0.3, -1.0, 2.0])
    R = frame.rotation()
    assert np.allclose(R.T @ R, np.eye(3))
    assert np.linalg.det(R) == pytest.approx(1.0)


def test_orthonormal_frame_keeps_fiber_direction():
    fiber = np.array([1.0, 2.0, 0.5])
    frame = orthonormal_frame(fiber, [0.3, -1.0, 2.0])
    assert np.allclose(frame.fiber, fiber / np.linalg.norm(fiber))
    assert np.allclose(frame.normal, np.cross(frame.fiber, frame.sheet))


def test_orthonormal_frame_axes():
    frame = orthonormal_frame([2.0, 0.0, 0.0], [1.0, 3.0, 0.0])
    assert np.allclose(frame.fiber, [1.0, 0.0, 0.0])
    assert np.allclose(frame.sheet, [0.0, 1.0, 0.0])
    assert np.allclose(frame.normal, [0.0, 0.0, 1.0])


def test_orthonormal_frame_rejects_parallel_sheet():
    with pytest.raises(ValueError):
        orthonormal_frame([1.0, 0.0, 0.0], [2.0, 0.0, 0.0])


def test_orthonormal_frame_rejects_zero_fiber():
    with pytest.raises(ValueError):
        orthonormal_frame([0.0, 0.0, 0.0], [0.0, 1.0, 0.0])


def test_tensors_sum_to_identity():
    tensors = orthonormal_frame([1.0, 1.0, 0.0], [0.0, 1.0, 1.0]).tensors()
    assert isinstance(tensors, FiberTensors)
    assert np.allclose(tensors.fXf + tensors.sXs + tensors.nXn, np.eye(3))
    assert float(tensors.fXf.diagonal().sum()) == pytest.approx(1.0)


def test_tensors_fxs_symmetric_and_traceless():
    tensors = orthonormal_frame([1.0, 1.0, 0.0], [0.0, 1.0, 1.0]).tensors()
    assert np.allclose(tensors.fXs, tensors.fXs.T)
    assert float(tensors.fXs.diagonal().sum()) == pytest.approx(0.0, abs=1e-12)


def test_tensors_default_second_family_is_zero():
    tensors = orthonormal_frame([0.0, 0.0, 1.0], [1.0, 0.0, 0.0]).tensors()
    assert np.allclose(tensors.gXg, 0.0)


def test_tensors_with_second_family():
    base = orthonormal_frame([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    g = np.array([0.6, 0.8, 0.0])
    frame = FiberFrame(fiber=base.fiber, sheet=base.sheet, normal=base.normal, gfiber=g)
    assert np.allclose(frame.tensors().gXg, np.outer(g, g))


def test_non_orthonormal_frame_raises():
    frame = FiberFrame(
        fiber=np.array([1.0, 0.0, 0.0]),
        sheet=np.array([1.0, 1.0, 0.0]),
        normal=np.array([0.0, 0.0, 1.0]),
    )
    with pytest.raises(ValueError, match="not orthonormal"):
        frame.tensors()


def test_check_orthonormal_accepts_rotation():
    c, s = np.cos(0.4), np.sin(0.4)
    R = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    assert np.allclose(check_orthonormal(R), R)


def test_check_orthonormal_rejects_scaled():
    with pytest.raises(ValueError):
        check_orthonormal(2.0 * np.eye(3))


def test_check_orthonormal_tolerance():
    R = np.eye(3)
    R[0, 0] = 1.0 + 1e-3
    with pytest.raises(ValueError):
        check_orthonormal(R)
    assert np.allclose(check_orthonormal(R, tol=1e-2), R)


def test_fixed_rotation_frame_is_constant():
    rotation = FixedRotation([1.0, 2.0, 3.0], [0.0, 1.0, 0.0])
    first = rotation.frame()
    second = rotation.frame()
    assert np.allclose(first.rotation(), second.rotation())
    assert np.allclose(first.fiber, np.array([1.0, 2.0, 3.0]) / np.linalg.norm([1.0, 2.0, 3.0]))


def test_fixed_rotation_from_angles_zero_and_ninety():
    frame = fixed_rotation_from_angles(0.0, 90.0).frame()
    assert np.allclose(frame.fiber, [1.0, 0.0, 0.0])
    assert np.allclose(frame.sheet, [0.0, -1.0, 0.0], atol=1e-12)
    assert np.allclose(frame.normal, [0.0, 0.0, -1.0], atol=1e-12)


def test_fixed_rotation_from_angles_in_plane():
    frame = fixed_rotation_from_angles(30.0, 20.0).frame()
    assert frame.fiber[2] == pytest.approx(0.0)
    assert frame.sheet[2] == pytest.approx(0.0)
    assert abs(frame.normal[2]) == pytest.approx(1.0)
    R = frame.rotation()
    assert np.allclose(R.T @ R, np.eye(3))


def test_fixed_rotation_from_opposite_angles_is_degenerate():
    with pytest.raises(ValueError):
        fixed_rotation_from_angles(30.0, -30.0)