"""
Command line entry-point for pykmc lattice queries.

Usage::

    python -m pykmc lattice.yaml info
    python -m pykmc lattice.yaml cell 17
    python -m pykmc lattice.yaml sites 0 1 2
    python -m pykmc lattice.yaml neighbors 17 --shells 2
    python -m pykmc lattice.yaml union 3 17 42
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import pykmc
from pykmc.builder import build_lattice_map, load_yaml, parse_config
from pykmc.core import LOG_LEVELS, LatticeMap, LoggingConfig, PyKMCError
from pykmc.utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m pykmc",
        description="Query the site index map of a lattice configuration.",
    )
    parser.add_argument("config", help="Path to the YAML lattice configuration")
    parser.add_argument(
        "--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
        help="Log level (default: the config file's logging.level, else warning)",
    )
    parser.add_argument(
        "--version", action="version", version=f"pykmc {pykmc.__version__}"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("info", help="Print the lattice shape")

    cell = commands.add_parser("cell", help="Cell (i, j, k) of a site")
    cell.add_argument("index", type=int)

    sites = commands.add_parser("sites", help="Site indices of a cell")
    sites.add_argument("i", type=int)
    sites.add_argument("j", type=int)
    sites.add_argument("k", type=int)

    neighbors = commands.add_parser("neighbors", help="Neighbor sites of one site")
    neighbors.add_argument("index", type=int)
    neighbors.add_argument(
        "--shells", type=int, default=1, help="Shell radius in cells (default: 1)"
    )

    union = commands.add_parser("union", help="Sorted neighbor union of several sites")
    union.add_argument("indices", type=int, nargs="+")
    return parser


def _format_indices(indices) -> str:
    return " ".join(str(int(x)) for x in indices)


def run_command(lattice: LatticeMap, args: argparse.Namespace) -> str:
    """Execute one query and return its printable result."""
    if args.command == "info":
        a, b, c = lattice.repetitions
        return (
            f"basis: {lattice.n_basis}\n"
            f"repetitions: {a} {b} {c}\n"
            f"boundary: {lattice.boundary.get_name()}\n"
            f"cells: {lattice.n_cells}\n"
            f"sites: {lattice.n_sites}"
        )
    if args.command == "cell":
        return " ".join(str(x) for x in lattice.index_to_cell(args.index))
    if args.command == "sites":
        return _format_indices(lattice.indices_from_cell(args.i, args.j, args.k))
    if args.command == "neighbors":
        return _format_indices(lattice.neighbour_indices(args.index, args.shells))
    if args.command == "union":
        return _format_indices(lattice.superset_neighbour_indices(args.indices))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = parse_config(load_yaml(args.config))
        settings = config.logging or LoggingConfig()
        # --log-level wins over the file's logging section
        if args.log_level is not None:
            settings = settings.model_copy(update={"level": args.log_level})
        setup_logging(settings)
        lattice = build_lattice_map(config.lattice)
        print(run_command(lattice, args))
        return 0
    except (PyKMCError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
