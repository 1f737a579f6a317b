"""
Open (non-periodic) axis policy.

Coordinates beyond the edge of the lattice have no cell and are dropped,
typical for the surface-normal direction of a slab.
"""
from typing import Optional

from .axis_boundary import AxisBoundary


class OpenAxis(AxisBoundary):
    """Non-wrapping axis: out-of-range coordinates are discarded."""

    def wrap(self, coordinate: int, n_cells: int) -> Optional[int]:
        if 0 <= coordinate < n_cells:
            return coordinate
        return None

    def get_name(self) -> str:
        """Return 'Open' as the policy name."""
        return "Open"
