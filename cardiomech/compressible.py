"""Compressible hyperelastic laws: neo-Hookean, Mooney-Rivlin, Saint Venant-Kirchhoff, linear."""

from __future__ import annotations

import math

import numpy as np

from .elastic import ElasticMaterial, MaterialPoint

__all__ = ["NeoHookean", "MooneyRivlin", "DeSaintVenant", "LinearElastic"]


def _contract(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.sum(a * b))


def _tr(a: np.ndarray) -> float:
    return float(np.diagonal(a).sum())


def _cauchy_green(F: np.ndarray, dim: int) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(C, inv(C))`` with the unused rows and columns set to zero."""
    if dim == 3:
        C = F.T @ F
        return C, np.linalg.inv(C)
    if dim == 2:
        padded = F.copy()
        padded[2, 2] = 1.0
        C = padded.T @ padded
        inv_c = np.linalg.inv(C)
        for tensor in (C, inv_c):
            tensor[:, 2] = 0.0
            tensor[2, :] = 0.0
        return C, inv_c
    C = np.zeros((3, 3))
    inv_c = np.zeros((3, 3))
    C[0, 0] = F[0, 0] * F[0, 0]
    inv_c[0, 0] = 1.0 / C[0, 0]
    return C, inv_c


def _log_j(J: float) -> float:
    if J <= 0.0:
        raise ValueError(f"deformation determinant must be positive, got {J}")
    return math.log(J)


class NeoHookean(ElasticMaterial):
    """Compressible neo-Hookean law ``P = mu (F - F^-T) + lambda ln(J) F^-T``."""

    def __init__(self, mu: float, lam: float, dim: int) -> None:
        super().__init__(dim)
        self.mu = float(mu)
        self.lam = float(lam)

    def compute_derived(self, point: MaterialPoint) -> None:
        F = point.F
        if self.dim == 3:
            C = F.T @ F
            point.props["C"] = C
            point.props["invC"] = np.linalg.inv(C)
        log_j = _log_j(point.J)
        point.P = self.mu * (F - point.inv_ftr) + self.lam * log_j * point.inv_ftr

    def stress_lin(self, point: MaterialPoint, H: np.ndarray) -> np.ndarray:
        H = np.asarray(H, dtype=float)
        inv_ftr = point.inv_ftr
        log_j = _log_j(point.J)
        return (
            self.mu * H
            - (self.lam * log_j - self.mu) * (inv_ftr @ H.T @ inv_ftr)
            + self.lam * _contract(inv_ftr, H) * inv_ftr
        )


class MooneyRivlin(ElasticMaterial):
    """Compressible Mooney-Rivlin law with a logarithmic volumetric term."""

    def __init__(self, c10: float, c20: float, lam: float, dim: int) -> None:
        super().__init__(dim)
        self.c10 = float(c10)
        self.c20 = float(c20)
        self.lam = float(lam)

    def compute_derived(self, point: MaterialPoint) -> None:
        F = point.F
        C, inv_c = _cauchy_green(F, self.dim)
        point.props["C"] = C
        point.props["invC"] = inv_c
        log_j = _log_j(point.J)
        point.P = point.P + (
            2.0 * self.c10 * F
            + 2.0 * self.c20 * F @ (C @ self.identity - C)
            - (2.0 * self.c10 + 4.0 * self.c20) * point.inv_ftr
            + self.lam * log_j * point.inv_ftr
        )

    def stress_lin(self, point: MaterialPoint, H: np.ndarray) -> np.ndarray:
        H = np.asarray(H, dtype=float)
        inv_ftr = point.inv_ftr
        C = point.props["C"]
        log_j = _log_j(point.J)
        return (
            2.0 * self.c10 * H
            + 2.0 * self.c20 * H @ (C @ self.identity - C)
            - (self.lam * log_j - (2.0 * self.c10 + 4.0 * self.c20)) * (inv_ftr @ H.T @ inv_ftr)
            + self.lam * _contract(inv_ftr, H) * inv_ftr
        )


class DeSaintVenant(ElasticMaterial):
    """Saint Venant-Kirchhoff law ``S = 2 mu E + lambda tr(E) I``.

    The bulk modulus is raised to ``epsilon`` when it is smaller.
    """

    def __init__(self, mu: float, kappa: float, epsilon: float, dim: int) -> None:
        super().__init__(dim)
        self.mu = float(mu)
        self.epsilon = float(epsilon)
        self.kappa = max(float(kappa), self.epsilon)
        self.lam = self.kappa - 2.0 * self.mu / dim

    def _second_piola(self, E: np.ndarray) -> np.ndarray:
        return 2.0 * self.mu * E + self.lam * _tr(E) * self.identity

    def compute_derived(self, point: MaterialPoint) -> None:
        F = point.F
        C = F.T @ F
        E = 0.5 * (C - self.identity)
        S = self._second_piola(E)
        point.props.update(C=C, E=E, S=S)
        point.P = point.P + F @ S
        point.props["Pdev"] = point.P.copy()

    def stress_lin(self, point: MaterialPoint, H: np.ndarray) -> np.ndarray:
        H = np.asarray(H, dtype=float)
        F = point.F
        strain_lin = 0.5 * (F.T @ H + H.T @ F)
        return F @ self._second_piola(strain_lin) + H @ point.props["S"]


class LinearElastic(ElasticMaterial):
    """Small-strain isotropic elasticity; the deformation is taken as the identity."""

    def __init__(self, mu: float, kappa: float, dim: int) -> None:
        super().__init__(dim)
        self.mu = float(mu)
        self.kappa = max(float(kappa), 0.0)
        self.lam = self.kappa - 2.0 * self.mu / dim

    def _stress(self, strain: np.ndarray) -> np.ndarray:
        return 2.0 * self.mu * strain + self.lam * _tr(strain) * self.identity

    def compute_derived(self, point: MaterialPoint) -> None:
        point.F = self.identity.copy()
        point.inv_ftr = self.identity.copy()
        point.J = 1.0
        point.props["pressure_material"] = 0.0
        U = point.U
        E = 0.5 * (U.T + U)
        point.props["E"] = E
        point.props["trE"] = _tr(E)
        point.P = point.P + self._stress(E)

    def stress_lin(self, point: MaterialPoint, H: np.ndarray) -> np.ndarray:
        H = np.asarray(H, dtype=float)
        return self._stress(0.5 * (H + H.T))