"""Two-step Newmark-type integrator for the inertial term of a solid in a fluid."""

from __future__ import annotations

import numpy as np

__all__ = ["NewmarkTwoSteps"]


class NewmarkTwoSteps:
    """Second-order scheme weighting the acceleration by ``rho_s - rho_f``.

    The residual of the non-time terms is averaged over the current and the
    previous steps, so the integrator keeps the two previous residuals.
    """

    def __init__(self, rho_s: float, rho_f: float, dt: float) -> None:
        if dt <= 0.0:
            raise ValueError(f"time step must be positive, got {dt}")
        self.rho_s = float(rho_s)
        self.rho_f = float(rho_f)
        self.dt = float(dt)
        self.residual_old: np.ndarray | None = None
        self.residual_older: np.ndarray | None = None

    def order(self) -> int:
        """Return the order of accuracy."""
        return 2

    def du_dot_du(self) -> float:
        """Return the derivative of the computed time term with respect to the solution."""
        return (self.rho_s - self.rho_f) * 4.0 / self.dt / self.dt

    def init(self, residual) -> np.ndarray:
        """Store the non-time residual of the initial state; return the zero time term."""
        res = np.array(residual, dtype=float)
        self.residual_old = res.copy()
        if self.residual_older is None:
            self.residual_older = np.zeros_like(res)
        return np.zeros_like(res)

    def time_derivatives(self, solution, solution_old, solution_older) -> np.ndarray:
        """Return the density-weighted second difference of the solution."""
        u = np.asarray(solution, dtype=float)
        u_old = np.asarray(solution_old, dtype=float)
        u_older = np.asarray(solution_older, dtype=float)
        return (u - 2.0 * u_old + u_older) * self.du_dot_du()

    def post_residual(self, residual, re_non_time, re_time, t_step: int) -> np.ndarray:
        """Assemble the full residual for time step ``t_step``."""
        if self.residual_old is None or self.residual_older is None:
            raise RuntimeError("init must be called before assembling residuals")
        total = np.array(residual, dtype=float)
        total = total + np.asarray(re_non_time, dtype=float)
        total = total + self.residual_old
        if t_step != 1:
            total = total + self.residual_old
            total = total + self.residual_older
        return total + np.asarray(re_time, dtype=float)

    def post_step(self, re_non_time) -> None:
        """Shift the stored residuals by one step."""
        if self.residual_old is None:
            raise RuntimeError("init must be called before advancing")
        self.residual_older = self.residual_old
        self.residual_old = np.array(re_non_time, dtype=float)