"""
Three-axis boundary composite.

This module combines one AxisBoundary per lattice axis, so that each of
the a, b and c axes can independently be periodic or open (bulk, slab,
wire geometries).
"""
from typing import List, Tuple

import numpy as np

from pykmc.core.cell import CellIndex, Periodicity, Repetitions

from .axis_boundary import AxisBoundary
from .open_axis import OpenAxis
from .periodic_axis import PeriodicAxis


def axis_boundary_for(periodic: bool) -> AxisBoundary:
    """Return the policy instance for one axis."""
    return PeriodicAxis() if periodic else OpenAxis()


class LatticeBoundary:
    """
    Per-axis boundary policies for a three-axis lattice.

    Common use cases:
    - Bulk: periodic along a, b and c
    - Surface/slab: periodic along a and b, open along c
    - Wire: open along a and b, periodic along c

    Attributes:
        periodicity: Periodicity flags the policies were built from.
        axes: Tuple of the three AxisBoundary instances (a, b, c).
        periodic_dims: Boolean array indicating which axes are periodic.

    Example:
        >>> from pykmc.core import Periodicity, Repetitions, CellIndex
        >>> bc = LatticeBoundary(Periodicity(True, True, False))
        >>> bc.windows(CellIndex(0, 0, 0), 1, Repetitions(3, 3, 3))
        ([2, 0, 1], [2, 0, 1], [0, 1])
        >>> bc.get_name()
        'Mixed(AB periodic)'
    """

    def __init__(self, periodicity: Periodicity) -> None:
        """
        Initialize the composite.

        Args:
            periodicity: Periodicity(a, b, c) flags.
        """
        self.periodicity = Periodicity(*(bool(p) for p in periodicity))
        self.axes: Tuple[AxisBoundary, AxisBoundary, AxisBoundary] = tuple(
            axis_boundary_for(p) for p in self.periodicity
        )
        self.periodic_dims = np.array(self.periodicity, dtype=bool)

    def windows(
        self,
        cell: CellIndex,
        shells: int,
        repetitions: Repetitions,
    ) -> Tuple[List[int], List[int], List[int]]:
        """
        Surviving coordinates of the shell window along each axis.

        The cube of neighbor cells is the Cartesian product of the three
        returned lists, in i-outer, j-middle, k-inner order.

        Args:
            cell: Reference cell.
            shells: Window half width (>= 0).
            repetitions: Number of cells along each axis.

        Returns:
            Tuple of three coordinate lists (a, b, c).
        """
        return tuple(
            axis.window(center, shells, n_cells)
            for axis, center, n_cells in zip(self.axes, cell, repetitions)
        )

    def get_name(self) -> str:
        """
        Return descriptive name showing which axes are periodic.

        Returns:
            String like "Periodic", "Open" or "Mixed(AB periodic)".
        """
        axis_names = ['A', 'B', 'C']
        periodic_names = [axis_names[i] for i in range(3) if self.periodic_dims[i]]

        if not periodic_names:
            return "Open"
        elif len(periodic_names) == 3:
            return "Periodic"
        else:
            return f"Mixed({''.join(periodic_names)} periodic)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LatticeBoundary):
            return NotImplemented
        return self.periodicity == other.periodicity

    def __hash__(self) -> int:
        return hash(self.periodicity)

    def __repr__(self) -> str:
        return f"LatticeBoundary({self.get_name()})"
