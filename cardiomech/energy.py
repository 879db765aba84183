"""Strain energy density of the nearly incompressible neo-Hookean model."""

from __future__ import annotations

import math

import numpy as np

__all__ = ["neo_hookean_energy_density"]


def neo_hookean_energy_density(mu, kappa, J, C, J23, pressure, dim) -> float:
    """Return the energy density at one point.

    ``mu (J23 tr C - dim) + kappa/8 ((J - 1)^2 + ln(J)^2) + p (J - 1)``.
    """
    J = float(J)
    if J <= 0.0:
        raise ValueError(f"deformation determinant must be positive, got {J}")
    first_invariant = float(np.diagonal(np.asarray(C, dtype=float)).sum())
    log_j = math.log(J)
    return (
        float(mu) * (float(J23) * first_invariant - dim)
        + 0.5 * float(kappa) / 4.0 * ((J - 1.0) ** 2 + log_j**2)
        + float(pressure) * (J - 1.0)
    )