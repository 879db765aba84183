"""Hyperelastic material laws, fibre frames, conductivities and time integration for cardiac tissue."""

__version__ = "0.1.0"

__all__ = [
    "compressible",
    "elastic",
    "electrophysiology",
    "energy",
    "fiber_geometry",
    "fibers",
    "growth",
    "time_integration",
]