"""Geometry helpers for sketches: quaternions, projections, angles, arc lengths and tolerances."""

__version__ = "0.6.0"
__all__ = ["utils"]