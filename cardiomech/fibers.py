"""Fibre, sheet and normal directions and the tensors derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

__all__ = [
    "FiberTensors",
    "FiberFrame",
    "FixedRotation",
    "check_orthonormal",
    "orthonormal_frame",
    "fixed_rotation_from_angles",
]


@dataclass(frozen=True)
class FiberTensors:
    """Outer products of the local directions."""

    fXf: np.ndarray
    gXg: np.ndarray
    sXs: np.ndarray
    fXs: np.ndarray
    nXn: np.ndarray


def check_orthonormal(rotation: np.ndarray, tol: float = 1.0e-5) -> np.ndarray:
    """Raise ``ValueError`` unless ``R^T R`` is the identity within ``tol``."""
    R = np.asarray(rotation, dtype=float)
    product = R.T @ R
    if np.any(np.abs(product - np.eye(3)) > tol):
        raise ValueError("Rotation tensor is not orthonormal.")
    return R


def _vector(value) -> np.ndarray:
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vec.shape}")
    return vec


@dataclass(frozen=True)
class FiberFrame:
    """Local fibre, sheet and normal directions, plus an optional second fibre family."""

    fiber: np.ndarray
    sheet: np.ndarray
    normal: np.ndarray
    gfiber: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def tensors(self) -> FiberTensors:
        """Return the outer-product tensors; the frame must be orthonormal."""
        self.rotation()
        f, g, s, n = (_vector(v) for v in (self.fiber, self.gfiber, self.sheet, self.normal))
        fxs = np.outer(f, s)
        return FiberTensors(
            fXf=np.outer(f, f),
            gXg=np.outer(g, g),
            sXs=np.outer(s, s),
            fXs=0.5 * (fxs + fxs.T),
            nXn=np.outer(n, n),
        )

    def rotation(self) -> np.ndarray:
        """Return the matrix whose columns are fibre, sheet and normal."""
        R = np.column_stack([_vector(self.fiber), _vector(self.sheet), _vector(self.normal)])
        return check_orthonormal(R)


def orthonormal_frame(fiber, sheet) -> FiberFrame:
    """Normalise ``fiber``, orthogonalise ``sheet`` against it and complete the frame."""
    f = _vector(fiber)
    f_norm = math.sqrt(float(f @ f))
    if f_norm == 0.0:
        raise ValueError("fibre direction must not be zero")
    f = f / f_norm
    s = _vector(sheet)
    s = s - float(f @ s) * f
    s_norm = math.sqrt(float(s @ s))
    if s_norm == 0.0:
        raise ValueError("sheet direction must not be parallel to the fibre direction")
    s = s / s_norm
    return FiberFrame(fiber=f, sheet=s, normal=np.cross(f, s))


class FixedRotation:
    """A fibre frame that is the same at every point."""

    def __init__(self, fiber, sheet) -> None:
        self._frame = orthonormal_frame(fiber, sheet)

    def frame(self) -> FiberFrame:
        """Return the constant frame."""
        return FiberFrame(
            fiber=self._frame.fiber.copy(),
            sheet=self._frame.sheet.copy(),
            normal=self._frame.normal.copy(),
        )


def fixed_rotation_from_angles(beta0: float, beta1: float) -> FixedRotation:
    """Build a constant in-plane frame from fibre and sheet angles in degrees."""
    b0 = math.radians(beta0)
    b1 = math.radians(beta1)
    fiber = (math.cos(b0), math.sin(b0), 0.0)
    sheet = (math.cos(b1), -math.sin(b1), 0.0)
    return FixedRotation(fiber, sheet)