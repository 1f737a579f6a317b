"""
Lattice map: site index <-> cell coordinate conversion and neighbor shells.

A lattice of ``n_basis`` sites per cell, repeated ``(a, b, c)`` times along
three axes, is linearised into flat site indices with the basis offset
fastest, then the c, b and a cell coordinates. LatticeMap converts between
the two representations and enumerates the sites in the cube of cells
around a given site, honouring per-axis periodicity.
"""
import logging
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from pykmc.boundary import LatticeBoundary

from .cell import CellIndex, Periodicity, Repetitions
from .errors import CellCoordinateError, LatticeConfigurationError, SiteIndexError

logger = logging.getLogger(__name__)

IntLike = Union[int, np.integer]


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _positive_int(value: object, name: str) -> int:
    if not _is_integer(value):
        raise LatticeConfigurationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise LatticeConfigurationError(f"{name} must be positive, got {value}")
    return int(value)


def _three(values: Sequence, name: str) -> tuple:
    try:
        values = tuple(values)
    except TypeError:
        raise LatticeConfigurationError(
            f"{name} must be a sequence of 3 values, got {values!r}"
        ) from None
    if len(values) != 3:
        raise LatticeConfigurationError(
            f"{name} must have exactly 3 entries (a, b, c), got {len(values)}"
        )
    return values


class LatticeMap:
    """
    Index map of a periodic three-axis lattice.

    Site index ``x`` belongs to cell ``(i, j, k)`` with basis offset ``l``
    where ``x = ((i * b + j) * c + k) * n_basis + l``, i.e. row-major over
    an array of shape ``(a, b, c, n_basis)``.

    The configuration is fixed at construction. Every query is a pure
    function of the configuration and its arguments, and every returned
    array is freshly allocated (or is the caller's own ``out`` buffer), so
    results may be kept and mutated freely and the map may be shared
    between threads without locking.

    Attributes:
        n_basis: Number of basis sites per cell.
        repetitions: Repetitions(a, b, c) cell counts.
        periodic: Periodicity(a, b, c) flags.
        boundary: LatticeBoundary applying the per-axis wrap policy.

    Example:
        >>> from pykmc.core import LatticeMap
        >>> lattice = LatticeMap(2, (3, 3, 3), (True, True, False))
        >>> lattice.index_to_cell(7)
        CellIndex(i=0, j=1, k=0)
        >>> lattice.indices_from_cell(0, 1, 0)
        array([6, 7])
        >>> len(lattice.neighbour_indices(0))
        36
    """

    def __init__(
        self,
        n_basis: int,
        repetitions: Sequence[int],
        periodic: Sequence[bool],
    ) -> None:
        """
        Initialize the lattice map.

        Args:
            n_basis: Number of basis sites per cell (> 0).
            repetitions: Number of cells along a, b, c (each > 0).
            periodic: Periodicity flags along a, b, c.

        Raises:
            LatticeConfigurationError: If any count is not a positive
                integer or either sequence does not have three entries.
        """
        self._n_basis = _positive_int(n_basis, "n_basis")
        self._repetitions = Repetitions(*(
            _positive_int(n, f"repetitions[{axis}]")
            for axis, n in zip("abc", _three(repetitions, "repetitions"))
        ))
        self._periodic = Periodicity(*(bool(p) for p in _three(periodic, "periodic")))
        self._boundary = LatticeBoundary(self._periodic)

        a, b, c = self._repetitions
        self._n_cells = a * b * c
        self._n_sites = self._n_cells * self._n_basis
        self._basis_offsets = np.arange(self._n_basis, dtype=np.intp)
        self._basis_offsets.flags.writeable = False

        logger.debug(
            "LatticeMap: basis=%d repetitions=%s boundary=%s sites=%d",
            self._n_basis, tuple(self._repetitions), self._boundary.get_name(),
            self._n_sites,
        )

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def n_basis(self) -> int:
        return self._n_basis

    @property
    def repetitions(self) -> Repetitions:
        return self._repetitions

    @property
    def periodic(self) -> Periodicity:
        return self._periodic

    @property
    def periodic_a(self) -> bool:
        return self._periodic.a

    @property
    def periodic_b(self) -> bool:
        return self._periodic.b

    @property
    def periodic_c(self) -> bool:
        return self._periodic.c

    @property
    def boundary(self) -> LatticeBoundary:
        return self._boundary

    @property
    def n_cells(self) -> int:
        return self._n_cells

    @property
    def n_sites(self) -> int:
        return self._n_sites

    @property
    def shape(self) -> Tuple[int, int, int, int]:
        """The 4D shape ``(a, b, c, n_basis)`` the site index linearises."""
        return (*self._repetitions, self._n_basis)

    # ------------------------------------------------------------------ #
    #  Validation
    # ------------------------------------------------------------------ #

    def _check_index(self, index: IntLike) -> int:
        if not _is_integer(index):
            raise SiteIndexError(f"Site index must be an integer, got {index!r}")
        if not 0 <= index < self._n_sites:
            raise SiteIndexError(
                f"Site index {index} out of range [0, {self._n_sites})"
            )
        return int(index)

    def _check_cell(self, i: IntLike, j: IntLike, k: IntLike) -> CellIndex:
        for axis, value, n_cells in zip("ijk", (i, j, k), self._repetitions):
            if not _is_integer(value):
                raise CellCoordinateError(
                    f"Cell coordinate {axis} must be an integer, got {value!r}"
                )
            if not 0 <= value < n_cells:
                raise CellCoordinateError(
                    f"Cell coordinate {axis}={value} out of range [0, {n_cells})"
                )
        return CellIndex(int(i), int(j), int(k))

    def _first_index(self, i: int, j: int, k: int) -> int:
        _, b, c = self._repetitions
        return ((i * b + j) * c + k) * self._n_basis

    # ------------------------------------------------------------------ #
    #  Cell <-> index conversion
    # ------------------------------------------------------------------ #

    def index_to_cell(self, index: IntLike) -> CellIndex:
        """
        Cell containing a site.

        Direct mixed-radix decomposition of the cell rank
        ``index // n_basis`` over ``(a, b, c)``. The basis offset is
        discarded; see :meth:`basis_offset`.

        Args:
            index: Site index in ``[0, n_sites)``.

        Returns:
            CellIndex(i, j, k).

        Raises:
            SiteIndexError: If the index is out of range or not an integer.
        """
        index = self._check_index(index)
        _, b, c = self._repetitions
        i, rest = divmod(index // self._n_basis, b * c)
        j, k = divmod(rest, c)
        return CellIndex(i, j, k)

    def index_to_cells(self, indices: Iterable[IntLike]) -> NDArray[np.intp]:
        """
        Vectorised :meth:`index_to_cell`.

        Args:
            indices: Sequence or array of site indices.

        Returns:
            (N, 3) array of cell coordinates.
        """
        if not isinstance(indices, np.ndarray):
            indices = np.asarray(list(indices))
        if indices.size == 0:
            return np.empty((0, 3), dtype=np.intp)
        if indices.ndim != 1 or not np.issubdtype(indices.dtype, np.integer):
            raise SiteIndexError("Site indices must be a 1D sequence of integers")
        if indices.min() < 0 or indices.max() >= self._n_sites:
            raise SiteIndexError(
                f"Site indices out of range [0, {self._n_sites})"
            )
        cells = np.unravel_index(indices // self._n_basis, self._repetitions)
        return np.stack(cells, axis=1).astype(np.intp)

    def basis_offset(self, index: IntLike) -> int:
        """Position of a site within its cell, in ``[0, n_basis)``."""
        return self._check_index(index) % self._n_basis

    def indices_from_cell(
        self,
        i: IntLike,
        j: IntLike,
        k: IntLike,
        out: Optional[NDArray[np.integer]] = None,
    ) -> NDArray[np.integer]:
        """
        Site indices of one cell, in increasing order.

        Args:
            i, j, k: Cell coordinate, each in ``[0, repetitions[axis])``.
            out: Optional caller-owned integer array of length ``n_basis``
                to write the result into. Reusing one buffer across calls
                avoids an allocation per call; the caller must not share
                the buffer between concurrent queries.

        Returns:
            Array of ``n_basis`` indices starting at
            ``((i * b + j) * c + k) * n_basis``. This is ``out`` when given,
            otherwise a new array.

        Raises:
            CellCoordinateError: If the cell lies outside the lattice.
            ValueError: If ``out`` has the wrong shape or dtype.
        """
        cell = self._check_cell(i, j, k)
        first = self._first_index(*cell)

        if out is None:
            return self._basis_offsets + first

        if not isinstance(out, np.ndarray) or not np.issubdtype(out.dtype, np.integer):
            raise ValueError("out must be an integer numpy array")
        if out.shape != (self._n_basis,):
            raise ValueError(
                f"out must have shape ({self._n_basis},), got {out.shape}"
            )
        np.add(self._basis_offsets, first, out=out, casting="unsafe")
        return out

    def cell_to_index(self, cell: Sequence[IntLike], basis: IntLike = 0) -> int:
        """
        Site index of one basis site in a cell.

        Args:
            cell: (i, j, k) cell coordinate.
            basis: Basis offset in ``[0, n_basis)``.

        Returns:
            The site index.
        """
        i, j, k = cell
        cell = self._check_cell(i, j, k)
        if not _is_integer(basis) or not 0 <= basis < self._n_basis:
            raise ValueError(
                f"Basis offset must be an integer in [0, {self._n_basis}), got {basis!r}"
            )
        return self._first_index(*cell) + int(basis)

    # ------------------------------------------------------------------ #
    #  Neighbor queries
    # ------------------------------------------------------------------ #

    def neighbour_indices(self, index: IntLike, shells: int = 1) -> NDArray[np.intp]:
        """
        Sites in the cube of cells around a site.

        Visits the ``(2 * shells + 1)**3`` cells within Chebyshev distance
        ``shells`` of the site's cell, i outer, j middle, k inner, and
        appends the ``n_basis`` sites of every visited cell. Periodic axes
        wrap; on open axes cells beyond the edge are skipped, so the result
        can be shorter than ``n_basis * (2 * shells + 1)**3``.

        No deduplication is performed. When a periodic axis has fewer
        than ``2 * shells + 1`` cells the same cell is visited more than
        once and its sites are repeated. Use
        :meth:`superset_neighbour_indices` for a proper set.

        Args:
            index: Site index in ``[0, n_sites)``.
            shells: Window half width in cells (>= 0). Default 1.

        Returns:
            Array of site indices, cell block by cell block.

        Raises:
            SiteIndexError: If the index is invalid.
            ValueError: If shells is negative or not an integer.
        """
        if not _is_integer(shells) or shells < 0:
            raise ValueError(f"shells must be a non-negative integer, got {shells!r}")

        cell = self.index_to_cell(index)
        ii, jj, kk = self._boundary.windows(cell, int(shells), self._repetitions)
        if not (ii and jj and kk):
            return np.empty(0, dtype=np.intp)

        _, b, c = self._repetitions
        ii = np.asarray(ii, dtype=np.intp)
        jj = np.asarray(jj, dtype=np.intp)
        kk = np.asarray(kk, dtype=np.intp)

        # (ni, nj, nk) first-site indices, then one basis block per cell
        first = ((ii[:, None, None] * b + jj[None, :, None]) * c
                 + kk[None, None, :]) * self._n_basis
        return (first[..., None] + self._basis_offsets).ravel()

    def superset_neighbour_indices(self, indices: Iterable[IntLike]) -> NDArray[np.intp]:
        """
        Union of the shell-1 neighbors of several sites.

        Used to find every site affected after the given sites changed.

        Args:
            indices: Site indices, in any order, repeats allowed.

        Returns:
            Sorted array of distinct site indices.

        Raises:
            SiteIndexError: If any index is invalid.
        """
        neighbours = [self.neighbour_indices(index) for index in indices]
        if not neighbours:
            return np.empty(0, dtype=np.intp)
        return np.unique(np.concatenate(neighbours))

    # ------------------------------------------------------------------ #
    #  Dunder
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LatticeMap):
            return NotImplemented
        return (
            self._n_basis == other._n_basis
            and self._repetitions == other._repetitions
            and self._periodic == other._periodic
        )

    def __hash__(self) -> int:
        return hash((self._n_basis, self._repetitions, self._periodic))

    def __repr__(self) -> str:
        a, b, c = self._repetitions
        return (
            f"LatticeMap(basis={self._n_basis}, repetitions=({a}, {b}, {c}), "
            f"boundary={self._boundary.get_name()})"
        )
