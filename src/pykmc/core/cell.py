"""
Fixed-arity axis types.

The lattice always has exactly three axes (a, b, c). These named tuples
carry per-axis data so the arity is visible in the type rather than hidden
in an open-ended list.
"""
from typing import NamedTuple


class CellIndex(NamedTuple):
    """Integer coordinate (i, j, k) of one cell along the a, b, c axes."""

    i: int
    j: int
    k: int


class Repetitions(NamedTuple):
    """Number of cells along each lattice axis."""

    a: int
    b: int
    c: int


class Periodicity(NamedTuple):
    """Whether each lattice axis wraps at its boundary."""

    a: bool
    b: bool
    c: bool

    @classmethod
    def all_periodic(cls) -> "Periodicity":
        return cls(True, True, True)
