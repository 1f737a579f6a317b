"""
Core module for lattice index mapping.

This module provides the fundamental classes for lattice KMC bookkeeping:
- CellIndex, Repetitions, Periodicity: Fixed three-axis value types
- LatticeMap: Site index <-> cell conversion and neighbor shells
- LatticeConfig, LoggingConfig: Validated configuration models
- PyKMCError and subclasses: Error taxonomy
"""

from .cell import CellIndex, Periodicity, Repetitions
from .errors import (
    CellCoordinateError,
    LatticeConfigurationError,
    PyKMCError,
    SiteIndexError,
)
from .lattice_map import LatticeMap
from .schemas import LOG_LEVELS, LatticeConfig, LoggingConfig, PyKMCConfig

__all__ = [
    # Value types
    "CellIndex",
    "Repetitions",
    "Periodicity",
    # Classes
    "LatticeMap",
    "LatticeConfig",
    "LoggingConfig",
    "LOG_LEVELS",
    "PyKMCConfig",
    # Errors
    "PyKMCError",
    "LatticeConfigurationError",
    "SiteIndexError",
    "CellCoordinateError",
]
