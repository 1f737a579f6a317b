"""
Periodic axis policy.

Coordinates that step past either edge re-enter from the opposite side.
"""
from typing import Optional

from .axis_boundary import AxisBoundary


class PeriodicAxis(AxisBoundary):
    """
    Wrapping axis, the usual choice for bulk lattices.

    A coordinate below zero gets one period added, a coordinate at or
    above ``n_cells`` gets one period subtracted. Exactly one period is
    applied: a coordinate more than one period away is still out of range
    afterwards and is rejected. That only happens when the shell window is
    wider than the axis.

    Example:
        >>> axis = PeriodicAxis()
        >>> axis.wrap(4, 4)
        0
        >>> axis.wrap(-5, 4) is None
        True
    """

    def wrap(self, coordinate: int, n_cells: int) -> Optional[int]:
        """Shift by one period if needed, then bounds-check."""
        if coordinate < 0:
            coordinate += n_cells
        elif coordinate >= n_cells:
            coordinate -= n_cells

        if 0 <= coordinate < n_cells:
            return coordinate
        return None

    def get_name(self) -> str:
        """Return 'Periodic' as the policy name."""
        return "Periodic"
