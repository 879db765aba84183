"""Rule-based fibre frames built from a transmural thickness parameter."""

from __future__ import annotations

import logging
import math

import numpy as np

from .fibers import FiberFrame

__all__ = ["ventricle_fibers", "leaflet_fibers"]

_PI = 3.141592653589

_log = logging.getLogger(__name__)


def _vec3(value, name: str) -> np.ndarray:
    vec = np.asarray(value, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {vec.shape}")
    return vec


def _normalize(vec: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(vec))
    with np.errstate(invalid="ignore", divide="ignore"):
        return np.asarray(vec, dtype=float) / norm


def _circumferential(normal: np.ndarray, position: np.ndarray, wz_sign: float) -> np.ndarray:
    """Unit vector orthogonal to ``normal`` in the plane spanned by it and the z axis."""
    ez_en = float(normal[2])
    if abs(ez_en) == 1.0:
        # normal is (anti)parallel to z: fall back to the cylindrical radial direction
        return _normalize(np.array([position[0], position[1], 0.0]))
    with np.errstate(invalid="ignore", divide="ignore"):
        wz = wz_sign / float(np.sqrt(1.0 - ez_en * ez_en))
    wn = -wz * ez_en
    return _normalize(np.array([wn * normal[0], wn * normal[1], wn * normal[2] + wz]))


def _report_nan(frame: FiberFrame, position: np.ndarray) -> None:
    for label, vec in (("fiber", frame.fiber), ("normal", frame.normal), ("sheet", frame.sheet)):
        if np.isnan(vec).any():
            _log.warning("nan %s direction %s at position %s", label, vec, position)


def ventricle_fibers(e, grad_e, position) -> FiberFrame:
    """Fibre frame of a ventricular wall at mural position ``e``.

    The helix angle varies cubically through the wall, with a maximum of 60
    degrees where ``e`` is non-negative and 45 degrees where it is negative.
    """
    e = float(e)
    grad = _vec3(grad_e, "grad_e")
    pos = _vec3(position, "position")

    R = _PI / 3.0
    bracket = 2.0 * e - 1.0
    if e < 0.0:
        R = _PI / 4.0
        bracket = -2.0 * e - 1.0
    alpha = R * bracket**3

    normal = _normalize(grad)
    if e > 0.0:
        normal = -normal

    ew = _circumferential(normal, pos, -1.0)
    ev = _normalize(np.cross(ew, normal))
    fiber = _normalize(math.cos(alpha) * ev + math.sin(alpha) * ew)
    sheet = _normalize(np.cross(fiber, normal))

    frame = FiberFrame(fiber=fiber, sheet=sheet, normal=normal)
    _report_nan(frame, pos)
    frame.rotation()
    return frame


def leaflet_fibers(e, grad_e, position, angle) -> FiberFrame:
    """Two symmetric fibre families at ``angle`` degrees either side of the leaflet axis."""
    _ = float(e)
    grad = _vec3(grad_e, "grad_e")
    pos = _vec3(position, "position")

    R = float(angle) * _PI / 180.0

    if float(np.linalg.norm(grad)) > 0.0:
        normal = _normalize(-grad)
    else:
        normal = _normalize(pos)

    ew = _circumferential(normal, pos, 1.0)
    ev = _normalize(np.cross(ew, normal))
    fiber = _normalize(math.cos(R) * ev + math.sin(R) * ew)
    gfiber = _normalize(math.cos(R) * ev - math.sin(R) * ew)
    sheet = _normalize(np.cross(fiber, normal))

    frame = FiberFrame(fiber=fiber, sheet=sheet, normal=normal, gfiber=gfiber)
    frame.rotation()
    return frame