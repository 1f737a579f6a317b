"""
Exception hierarchy for pykmc.

Every error raised by the lattice map is a programming or configuration
defect, never a transient condition. The classes also derive from the
matching built-in exception so callers can catch them either way.
"""


class PyKMCError(Exception):
    """Base class for all pykmc errors."""


class LatticeConfigurationError(PyKMCError, ValueError):
    """Lattice shape is invalid (non-positive basis or repetitions, wrong arity)."""


class SiteIndexError(PyKMCError, IndexError):
    """Site index lies outside ``[0, n_sites)`` or is not an integer."""


class CellCoordinateError(PyKMCError, IndexError):
    """Cell coordinate lies outside the lattice repetitions."""
