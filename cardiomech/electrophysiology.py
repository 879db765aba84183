"""Conductivity tensors for eikonal and monodomain electrophysiology models."""

from __future__ import annotations

import numpy as np

from .fibers import FiberTensors

__all__ = ["MonodomainConductivity", "MonodomainEllipsoid", "eikonal_conductivity"]

_ZERO_TOL = 1e-10


def _three(values, name: str) -> tuple[float, float, float]:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"{name} must contain exactly 3 numbers")
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def _combine(coefficients, tensors: FiberTensors) -> np.ndarray:
    a, b, c = coefficients
    return a * tensors.fXf + b * tensors.sXs + c * tensors.nXn


def _harmonic(intra, extra) -> tuple[float, float, float]:
    mono = []
    for i, e in zip(intra, extra):
        if i < _ZERO_TOL and e < _ZERO_TOL:
            raise ValueError("Both conductivities are zero")
        mono.append(i * e / (i + e))
    return tuple(mono)


def eikonal_conductivity(sigma_i, tensors: FiberTensors) -> np.ndarray:
    """Return the anisotropic tensor with coefficients ``sigma_i`` along fibre, sheet and normal."""
    return _combine(_three(sigma_i, "sigma_i"), tensors)


class MonodomainConductivity:
    """Monodomain and intracellular conductivities from intra- and extracellular values."""

    def __init__(self, intra, extra) -> None:
        self.intra = _three(intra, "intracellular conductivities")
        self.extra = _three(extra, "extracellular conductivities")
        self.mono = _harmonic(self.intra, self.extra)

    def tensors(self, fiber_tensors: FiberTensors) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(monodomain, intracellular)`` conductivity tensors."""
        return _combine(self.mono, fiber_tensors), _combine(self.intra, fiber_tensors)


class MonodomainEllipsoid:
    """Monodomain conductivity with membrane capacitance and surface-to-volume ratio."""

    def __init__(self, sigma_i, sigma_e, c_m, chi) -> None:
        self.sigma_i = _three(sigma_i, "sigma_i")
        self.sigma_e = _three(sigma_e, "sigma_e")
        self.c_m = float(c_m)
        self.chi = float(chi)

    def conductivity(self, fiber_tensors: FiberTensors) -> np.ndarray:
        """Return the monodomain conductivity tensor."""
        return _combine(_harmonic(self.sigma_i, self.sigma_e), fiber_tensors)

    def time_coefficient(self) -> float:
        """Return the coefficient of the time derivative, ``C_m * Chi``."""
        return self.c_m * self.chi