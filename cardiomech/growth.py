"""Neo-Hookean material with isotropic volumetric growth."""

from __future__ import annotations

import math

import numpy as np

from .elastic import ElasticMaterial, MaterialPoint

__all__ = ["GrowthMaterial"]


def _contract(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.sum(a * b))


class GrowthMaterial(ElasticMaterial):
    """Compressible neo-Hookean law with growth tensor ``Fg = theta I``.

    The growth factor is passed to ``compute`` as ``theta``.
    """

    def __init__(self, mu: float, lam: float, dim: int) -> None:
        super().__init__(dim)
        self.mu = float(mu)
        self.lam = float(lam)

    @staticmethod
    def _theta(point: MaterialPoint) -> float:
        if "theta" not in point.inputs:
            raise ValueError("GrowthMaterial needs a growth factor 'theta'")
        theta = float(point.inputs["theta"])
        if theta == 0.0:
            raise ValueError("growth factor theta must not be zero")
        return theta

    def _growth_kinematics(self, F: np.ndarray, theta: float) -> dict[str, np.ndarray]:
        dim = self.dim
        Fg = theta * self.identity
        if dim == 1:
            tensors = {name: np.zeros((3, 3)) for name in ("C", "invC", "Fg", "Fgt", "invFg", "invFgt", "Ce", "invCe")}
            c = F[0, 0] * F[0, 0]
            tensors["C"][0, 0] = c
            tensors["invC"][0, 0] = 1.0 / c
            tensors["Fg"][0, 0] = theta
            tensors["Fgt"][0, 0] = theta
            tensors["invFg"][0, 0] = 1.0 / theta
            tensors["invFgt"][0, 0] = 1.0 / theta
            ce = c / (theta * theta)
            tensors["Ce"][0, 0] = ce
            tensors["invCe"][0, 0] = 1.0 / ce
            return tensors

        F_full = F.copy()
        Fg_full = Fg.copy()
        if dim == 2:
            F_full[2, 2] = 1.0
            Fg_full[2, 2] = 1.0
        C = F_full.T @ F_full
        Fgt = Fg_full.T
        invFg = np.linalg.inv(Fg_full)
        invFgt = np.linalg.inv(Fgt)
        Ce = invFgt @ C @ invFg
        tensors = {
            "C": C,
            "invC": np.linalg.inv(C),
            "Fg": Fg_full,
            "Fgt": Fgt,
            "invFg": invFg,
            "invFgt": invFgt,
            "Ce": Ce,
            "invCe": np.linalg.inv(Ce),
        }
        if dim == 2:
            for tensor in tensors.values():
                tensor[:, 2] = 0.0
                tensor[2, :] = 0.0
        return tensors

    def compute_derived(self, point: MaterialPoint) -> None:
        theta = self._theta(point)
        J = point.J
        if J == 0.0:
            raise ValueError("deformation determinant must not be zero")
        F = point.F
        tensors = self._growth_kinematics(F, theta)

        with np.errstate(divide="ignore", invalid="ignore"):
            log_det_ce = np.log(np.linalg.det(tensors["Ce"]))
            Se = self.mu * self.identity + (0.5 * self.lam * log_det_ce - self.mu) * tensors["invCe"]
            S = tensors["invFg"] @ Se @ tensors["invFgt"]

        point.P = (
            self.mu / (theta * theta) * F
            + (0.5 * self.lam * math.log(J * J) - self.mu) * point.inv_ftr
        )
        point.props.update(tensors)
        point.props.update(theta=theta, Je=J / theta, Se=Se, S=S)

    def stress_lin(self, point: MaterialPoint, H: np.ndarray) -> np.ndarray:
        H = np.asarray(H, dtype=float)
        theta = self._theta(point)
        J = point.J
        if J == 0.0:
            raise ValueError("deformation determinant must not be zero")
        inv_ftr = point.inv_ftr
        return (
            self.mu / (theta * theta) * H
            - (0.5 * self.lam * math.log(J * J) - self.mu) * (inv_ftr @ H.T @ inv_ftr)
            + theta * theta * self.lam * _contract(inv_ftr, H) * inv_ftr
        )