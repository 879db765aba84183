"""Kinematics and the common driver for hyperelastic material models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import numpy as np

__all__ = ["MaterialPoint", "ElasticMaterial", "identity", "kinematics"]


def identity(dim: int) -> np.ndarray:
    """Return a 3x3 tensor with ones on the first ``dim`` diagonal entries."""
    if dim not in (1, 2, 3):
        raise ValueError(f"dimension must be 1, 2 or 3, got {dim}")
    eye = np.zeros((3, 3))
    eye[np.arange(dim), np.arange(dim)] = 1.0
    return eye


def _displacement_gradient(grad_disp: Any, dim: int) -> np.ndarray:
    grad = np.atleast_2d(np.asarray(grad_disp, dtype=float))
    rows, cols = grad.shape
    if rows < dim or cols < dim:
        raise ValueError(
            f"displacement gradient of shape {grad.shape} is too small for dimension {dim}"
        )
    U = np.zeros((3, 3))
    U[:dim, :dim] = grad[:dim, :dim]
    return U


def kinematics(grad_disp: Any, dim: int) -> tuple[np.ndarray, np.ndarray, float, np.ndarray]:
    """Compute ``(U, F, J, inv(F)^T)`` from the displacement gradient.

    ``grad_disp`` holds one row per displacement component, each row being the
    gradient of that component. In two dimensions the out-of-plane row and
    column of the inverse transpose are zero.
    """
    if dim not in (2, 3):
        raise ValueError(f"kinematics are defined for dimension 2 or 3, got {dim}")
    U = _displacement_gradient(grad_disp, dim)
    F = U + identity(dim)
    if dim == 2:
        J = float(F[0, 0] * F[1, 1] - F[1, 0] * F[0, 1])
        padded = F.copy()
        padded[2, 2] = 1.0
        inv_ftr = np.linalg.inv(padded.T)
        inv_ftr[:, 2] = 0.0
        inv_ftr[2, :] = 0.0
    else:
        J = float(np.linalg.det(F))
        inv_ftr = np.linalg.inv(F.T)
    return U, F, J, inv_ftr


@dataclass
class MaterialPoint:
    """State of a material at one quadrature point."""

    U: np.ndarray
    F: np.ndarray
    J: float
    inv_ftr: np.ndarray
    pressure: float = 0.0
    has_pressure: bool = False
    P: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))
    stress: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))
    inputs: dict[str, Any] = field(default_factory=dict)
    props: dict[str, Any] = field(default_factory=dict)
    material: ElasticMaterial | None = None


class ElasticMaterial(ABC):
    """Base class: computes kinematics, delegates the constitutive law, adds pressure."""

    def __init__(self, dim: int) -> None:
        self.dim = dim
        self.identity = identity(dim)

    def compute(self, grad_disp: Any, pressure: float | None = None, **kwargs: Any) -> MaterialPoint:
        """Evaluate the material at one point.

        Extra keyword arguments (fibre tensors, growth factors and the like) are
        made available to the constitutive law through ``point.inputs``.
        """
        U, F, J, inv_ftr = kinematics(grad_disp, self.dim)
        has_pressure = pressure is not None
        point = MaterialPoint(
            U=U,
            F=F,
            J=J,
            inv_ftr=inv_ftr,
            pressure=float(pressure) if has_pressure else 0.0,
            has_pressure=has_pressure,
            inputs=dict(kwargs),
            material=self,
        )
        point.P = np.zeros((3, 3))
        self.compute_derived(point)
        if point.has_pressure:
            point.P = point.P + point.pressure * point.J * point.inv_ftr
        point.stress = point.P @ point.F.T / point.J
        return point

    @abstractmethod
    def compute_derived(self, point: MaterialPoint) -> None:
        """Fill in the first Piola-Kirchhoff stress ``point.P`` and extra properties."""

    @abstractmethod
    def stress_lin(self, point: MaterialPoint, H: np.ndarray) -> np.ndarray:
        """Return the directional derivative of ``P`` along the increment ``H``."""