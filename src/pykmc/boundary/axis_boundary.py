"""
Abstract base class for per-axis boundary policies.

This module provides the AxisBoundary ABC that defines how a cell
coordinate that has stepped past the edge of the lattice along one axis
is treated during neighbor enumeration.
"""
from abc import ABC, abstractmethod
from typing import List, Optional


class AxisBoundary(ABC):
    """
    Abstract base for one-axis boundary policies (Strategy Pattern).

    A policy maps a raw, possibly out-of-range cell coordinate onto a
    coordinate inside ``[0, n_cells)``, or rejects it. Periodic and open
    axes are interchangeable, and the three axes of a lattice are
    configured independently.

    Design Notes:
        - AxisBoundary is STATELESS - it does NOT own the repetition count.
        - The count is passed in from the LatticeMap on every call, so one
          instance can serve any axis of any lattice.

    Example:
        >>> from pykmc.boundary import PeriodicAxis
        >>> axis = PeriodicAxis()
        >>> axis.wrap(-1, 4)
        3
        >>> axis.window(0, 1, 4)
        [3, 0, 1]
    """

    @abstractmethod
    def wrap(self, coordinate: int, n_cells: int) -> Optional[int]:
        """
        Map a raw coordinate onto the axis.

        Args:
            coordinate: Raw cell coordinate, possibly outside the axis.
            n_cells: Number of cells along this axis.

        Returns:
            Coordinate in ``[0, n_cells)``, or None if the coordinate
            does not correspond to any cell.
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this policy."""
        pass

    def window(self, center: int, shells: int, n_cells: int) -> List[int]:
        """
        Surviving coordinates of a shell window along this axis.

        Walks the raw offsets ``center - shells .. center + shells`` in
        increasing order and keeps every one that :meth:`wrap` accepts.
        Repeated coordinates are kept when the window is wider than the
        axis.

        Args:
            center: Coordinate of the reference cell.
            shells: Window half width (>= 0).
            n_cells: Number of cells along this axis.

        Returns:
            List of in-range coordinates, in visiting order.
        """
        coordinates = []
        for raw in range(center - shells, center + shells + 1):
            wrapped = self.wrap(raw, n_cells)
            if wrapped is not None:
                coordinates.append(wrapped)
        return coordinates
