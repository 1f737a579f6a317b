"""
Boundary module for lattice neighbor enumeration.

This module provides the Strategy pattern implementation for
per-axis boundary policies:
- PeriodicAxis: Coordinates wrap by one period
- OpenAxis: Out-of-range coordinates are dropped
- LatticeBoundary: One policy per axis (bulk, slab, wire)
"""

from .axis_boundary import AxisBoundary
from .lattice_boundary import LatticeBoundary, axis_boundary_for
from .open_axis import OpenAxis
from .periodic_axis import PeriodicAxis

__all__ = [
    "AxisBoundary",
    "PeriodicAxis",
    "OpenAxis",
    "LatticeBoundary",
    "axis_boundary_for",
]
