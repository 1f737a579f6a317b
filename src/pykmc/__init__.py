"""
pykmc - Lattice index map for kinetic Monte Carlo simulations.

Converts between flat site indices and (cell, basis) coordinates of a
three-axis lattice, and enumerates the sites in the neighbor shell of
one or many sites with per-axis periodic or open boundaries.

Main features:
- Direct mixed-radix cell <-> index conversion
- Shell neighbor enumeration with periodic wrap or open clipping
- Sorted, duplicate-free neighbor union over several sites
- YAML configuration validated with pydantic
"""

__version__ = "0.1.0"
__author__ = "pykmc Team"

from .core import (
    CellCoordinateError,
    CellIndex,
    LatticeConfigurationError,
    LatticeMap,
    Periodicity,
    PyKMCError,
    Repetitions,
    SiteIndexError,
)

__all__ = [
    "__version__",
    "LatticeMap",
    "CellIndex",
    "Repetitions",
    "Periodicity",
    "PyKMCError",
    "LatticeConfigurationError",
    "SiteIndexError",
    "CellCoordinateError",
]
